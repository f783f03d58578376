"""Palette selection for plaid icons.

The palette builder consumes four draws from the RNG, always in this order:

1. block size (how many blocks span the working canvas)
2. seed for accent color A (bright)
3. seed for accent color B (bright)
4. seed for the middle color (used only by the "dark" middle mode, but always
   drawn so later draws keep their position in the sequence)

Accent colors come from the ``randomcolor`` library, which returns
``"rgb(r, g, b)"`` strings that are parsed with :func:`extract_rgbs`.
"""

from __future__ import annotations

import colorsys
import logging
import math
import re
from dataclasses import dataclass
from typing import Optional

import randomcolor

from .config import PlaidiconsSettings
from .errors import ColorGenerationError
from .rng import RngState, next_value

logger = logging.getLogger(__name__)

Color = tuple[int, int, int]

GRAY_BACKGROUND: Color = (236, 239, 240)

_RGB_PATTERN = re.compile(r"^\s*rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)\s*$")


def extract_rgbs(colors: list[str]) -> list[Color]:
    """Parse ``rgb(r, g, b)`` strings into integer triples.

    Args:
        colors: Color strings such as ``"rgb(1, 2, 3)"``

    Returns:
        One (r, g, b) tuple per input string

    Raises:
        ColorGenerationError: If a string is not an rgb() color with components 0-255
    """
    parsed = []
    for color in colors:
        match = _RGB_PATTERN.match(color)
        if not match:
            raise ColorGenerationError(f"Not an rgb() color string: {color!r}")

        components = tuple(int(part) for part in match.groups())
        if any(c > 255 for c in components):
            raise ColorGenerationError(f"Color component out of range: {color!r}")
        parsed.append(components)

    return parsed


def rgb_value_to_hex(value: int) -> str:
    """Format one color component as two uppercase hex digits."""
    return f"{value:02X}"


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format a color as ``#RRGGBB`` (uppercase)."""
    return "#" + rgb_value_to_hex(r) + rgb_value_to_hex(g) + rgb_value_to_hex(b)


def average_colors(color_a: Color, color_b: Color) -> Color:
    """Floor-average two colors channel by channel."""
    return (
        (color_a[0] + color_b[0]) // 2,
        (color_a[1] + color_b[1]) // 2,
        (color_a[2] + color_b[2]) // 2,
    )


def draw_color(seed: str, luminosity: str, hue: Optional[str] = None) -> Color:
    """Draw one color from ``randomcolor``, deterministic in its arguments.

    Args:
        seed: String seed for the color generator
        luminosity: Luminosity constraint ("bright", "dark", "light", "random")
        hue: Optional hue constraint (color name or whole degrees as a string)

    Raises:
        ColorGenerationError: If the color library rejects the constraints or
            returns something that is not an rgb() string
    """
    try:
        generated = randomcolor.RandomColor(seed).generate(
            hue=hue, luminosity=luminosity, count=1, format_="rgb"
        )
    except Exception as e:
        raise ColorGenerationError(
            f"Color draw failed (luminosity={luminosity}, hue={hue}): {e}"
        ) from e

    if not generated:
        raise ColorGenerationError(f"Color draw returned nothing for seed {seed!r}")

    return extract_rgbs([generated[0]])[0]


def middle_color(colors: list[Color], mode: str = "average", seed: str = "seed") -> Color:
    """Compute the color of the blocks where both row and column are odd.

    Args:
        colors: Palette [background, accent A, accent B]
        mode: "average" for the floor-average of the accents, "dark" for a dark
            color hued by that average
        seed: Seed for the dark color draw

    Returns:
        The middle color
    """
    average = average_colors(colors[1], colors[2])
    if mode == "average":
        return average
    if mode == "dark":
        middle_hex = rgb_to_hex(*average)
        logger.debug(f"Drawing dark middle color hued by {middle_hex}")
        return draw_color(seed, luminosity="dark", hue=hue_degrees(middle_hex))

    raise ColorGenerationError(f"Unknown middle color mode: {mode}")


def hue_degrees(hex_color: str) -> str:
    """Hue of a ``#RRGGBB`` color as a whole number of degrees in 1..359.

    ``randomcolor`` takes numeric hues as digit strings and ignores 0 and
    360, so the value is clamped into the range it honours.
    """
    r, g, b = (int(hex_color[i : i + 2], 16) / 255 for i in (1, 3, 5))
    hue, _, _ = colorsys.rgb_to_hsv(r, g, b)
    return str(min(359, max(1, round(hue * 360))))


def block_size_for(working_dimension: int, draw: float, settings: PlaidiconsSettings) -> int:
    """Pick the block side length for a working canvas.

    The number of blocks across the canvas is chosen uniformly from
    ``[block_divisor_min, block_divisor_max]`` using ``draw``.
    """
    span = settings.block_divisor_max - settings.block_divisor_min + 1
    divisor = min(math.floor(draw * span), span - 1) + settings.block_divisor_min
    return max(1, working_dimension // divisor)


@dataclass(frozen=True)
class Palette:
    """Colors of one plaid icon.

    Attributes:
        background: Color of blocks with even row and even column
        accent_a: Color of blocks with odd column and even row
        accent_b: Color of blocks with even column and odd row
        middle: Color of blocks with odd row and odd column
    """

    background: Color
    accent_a: Color
    accent_b: Color
    middle: Color

    @property
    def colors(self) -> list[Color]:
        return [self.background, self.accent_a, self.accent_b]


@dataclass(frozen=True)
class PaletteDraw:
    """Everything the palette builder derives from the RNG."""

    block_size: int
    palette: Palette


def build_palette(
    state: RngState, working_dimension: int, settings: PlaidiconsSettings
) -> tuple[PaletteDraw, RngState]:
    """Draw block size and colors for one icon.

    Args:
        state: RNG state at the start of the palette stage
        working_dimension: Side length of the working canvas
        settings: Pipeline settings (block divisor range, middle color mode)

    Returns:
        Tuple of (palette draw, advanced RNG state)

    Raises:
        ColorGenerationError: If any color draw fails
    """
    block_draw, state = next_value(state)
    block_size = block_size_for(working_dimension, block_draw, settings)

    accent_draw_a, state = next_value(state)
    accent_a = draw_color(str(accent_draw_a), luminosity="bright")

    accent_draw_b, state = next_value(state)
    accent_b = draw_color(str(accent_draw_b), luminosity="bright")

    middle_draw, state = next_value(state)

    colors = [GRAY_BACKGROUND, accent_a, accent_b]
    middle = middle_color(colors, mode=settings.middle_color_mode, seed=str(middle_draw))

    logger.debug(
        f"Palette: block_size={block_size}, accents={accent_a}/{accent_b}, "
        f"middle={middle} ({settings.middle_color_mode})"
    )

    palette = Palette(background=GRAY_BACKGROUND, accent_a=accent_a, accent_b=accent_b, middle=middle)
    return PaletteDraw(block_size=block_size, palette=palette), state
