"""Generation orchestrator for plaid icons.

Runs the pipeline stages in a fixed order on one RNG state:

1. resolve seed and size (random hex seed, default size)
2. palette builder (block size, accents, middle color)
3. grid painter (raw pixel buffer)
4. compositor (rotation draw, rotate, crop, PNG)

Usage
-----
::

    from plaidicons.core.generator import generate

    png = generate(size=512, seed="slackicons")

    # Or with explicit settings and saving to disk
    from plaidicons.core.generator import IconGenerator

    generator = IconGenerator()
    png, path = generator.generate_and_save(size=512, seed="slackicons")
"""

from __future__ import annotations

import hashlib
import json
import logging
import math
from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path
from typing import Optional

from .compositor import compose, rasterize
from .config import PlaidiconsSettings, settings as default_settings
from .errors import InvalidSizeError, PlaidiconsError
from .painter import paint_plaid
from .palette import build_palette
from .rng import init_rng, next_value, random_seed

logger = logging.getLogger(__name__)


def working_dimension_for(size: int) -> int:
    """Side length of the canvas that survives any rotation of a ``size`` crop."""
    return math.ceil(size * math.sqrt(2))


@dataclass(frozen=True)
class GenerationOptions:
    """Inputs of one generation call.

    Attributes:
        size: Output width and height in pixels (None for the configured default)
        seed: Seed string (None or empty for a random seed)
    """

    size: Optional[int] = None
    seed: Optional[str] = None

    def resolve(self, settings: PlaidiconsSettings) -> "GenerationOptions":
        """Apply defaults and validate.

        Returns:
            A copy with both size and seed populated

        Raises:
            InvalidSizeError: If size is not a positive integer
            RandomSourceError: If a random seed is needed and cannot be obtained
        """
        size = settings.default_size if self.size is None else self.size
        # bool is an int subclass; True is not a size
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise InvalidSizeError(f"Size must be a positive integer, got {size!r}")

        seed = self.seed if self.seed else random_seed()
        return replace(self, size=size, seed=seed)


def generate(
    size: Optional[int] = None,
    seed: Optional[str] = None,
    settings: Optional[PlaidiconsSettings] = None,
) -> bytes:
    """Generate a plaid icon.

    Args:
        size: Output width and height in pixels (default from settings, 1000)
        seed: Seed string; identical seeds give byte-identical output
        settings: Pipeline settings (default: global settings)

    Returns:
        PNG-encoded ``size x size`` RGB image

    Raises:
        InvalidSizeError: If size is not a positive integer
        RandomSourceError: If no seed was given and entropy is unavailable
        ColorGenerationError: If a palette color cannot be drawn
        EncodingError: If the image cannot be rasterized or encoded
        CropOutOfBoundsError: If the crop does not fit the rotated image
    """
    settings = settings or default_settings
    options = GenerationOptions(size=size, seed=seed).resolve(settings)
    working_dimension = working_dimension_for(options.size)

    logger.info(f"Generating icon: size={options.size}, seed={options.seed}")

    try:
        state = init_rng(options.seed)
        palette_draw, state = build_palette(state, working_dimension, settings)

        pixels = paint_plaid(
            working_dimension,
            palette_draw.block_size,
            palette_draw.palette,
            anti_alias=settings.anti_alias,
        )
        image = rasterize(pixels)
        del pixels

        rotation_draw, state = next_value(state)
        png = compose(image, working_dimension, options.size, rotation_draw, settings)

    except PlaidiconsError as e:
        logger.error(f"Failed to generate icon for seed {options.seed}: {e}")
        raise

    logger.info(f"Icon generated: {len(png)} bytes")
    return png


class IconGenerator:
    """Icon generator bound to one settings object."""

    def __init__(self, settings: Optional[PlaidiconsSettings] = None):
        """
        Initialize the icon generator.

        Args:
            settings: Settings object. If None, uses global default settings.
        """
        self.settings = settings or default_settings

    def generate(self, size: Optional[int] = None, seed: Optional[str] = None) -> bytes:
        """Generate a PNG icon with this generator's settings."""
        return generate(size=size, seed=seed, settings=self.settings)

    def generate_and_save(
        self,
        size: Optional[int] = None,
        seed: Optional[str] = None,
        output_path: Optional[Path] = None,
    ) -> tuple[bytes, Path]:
        """
        Generate an icon and save it to disk.

        Args:
            size: Output width and height in pixels
            seed: Seed string (random if None)
            output_path: Custom output path (if None, auto-generates in outputs_dir)

        Returns:
            Tuple of (PNG bytes, save path)
        """
        # Resolve here so the file name and metadata carry the seed actually used
        options = GenerationOptions(size=size, seed=seed).resolve(self.settings)
        png = self.generate(size=options.size, seed=options.seed)

        if output_path is None:
            filename = f"plaidicon_{_safe_filename(options.seed)}_{options.size}.png"
            output_path = self.settings.outputs_dir / filename

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(png)
        logger.info(f"Icon saved to: {output_path}")

        if self.settings.save_metadata:
            self._save_metadata(options, output_path)

        return png, output_path

    def _save_metadata(self, options: GenerationOptions, save_path: Path) -> Path:
        """Write a JSON sidecar describing how the icon was generated."""
        metadata = {
            "seed": options.seed,
            "size": options.size,
            "working_dimension": working_dimension_for(options.size),
            "image_path": str(save_path),
            "timestamp": datetime.now().isoformat(),
            **self.settings.variant(),
        }

        json_path = save_path.with_suffix(".json")
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(metadata, f, indent=2, ensure_ascii=False)

        logger.info(f"Saved metadata to: {json_path}")
        return json_path


def _safe_filename(text: str, max_bytes: int = 100) -> str:
    """Turn a seed into a file name stem.

    Unsafe characters are replaced and the result is cut to ``max_bytes`` of
    UTF-8, so multibyte seeds stay under the file system's name limit. A short
    digest of the full seed keeps seeds that differ only after the cut, or only
    in replaced characters, from sharing a file.
    """
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()[:8]
    invalid_chars = '<>:"/\\|?* '
    for char in invalid_chars:
        text = text.replace(char, "_")
    stem = text.encode("utf-8")[:max_bytes].decode("utf-8", errors="ignore")
    return f"{stem}_{digest}"
