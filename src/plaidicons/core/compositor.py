"""Image composition: rasterize, rotate, crop and encode.

The working canvas is ``ceil(size * sqrt(2))`` pixels wide, so any rotation of
it still covers a centered ``size x size`` square. Rotation expands the canvas
instead of clipping it; the crop anchor is measured from the original canvas
origin, which sits ``(rotated - working) // 2`` pixels inside the expanded
image.
"""

from __future__ import annotations

import io
import logging
import math

import numpy as np
from PIL import Image

from .config import PlaidiconsSettings
from .errors import CropOutOfBoundsError, EncodingError
from .palette import GRAY_BACKGROUND

logger = logging.getLogger(__name__)

_RESAMPLE_FILTERS = {
    "nearest": Image.Resampling.NEAREST,
    "bilinear": Image.Resampling.BILINEAR,
    "bicubic": Image.Resampling.BICUBIC,
}


def rotation_angle(draw: float, settings: PlaidiconsSettings) -> float:
    """Map a draw in [0, 1) to a rotation angle in degrees.

    Snapped mode yields ``360 - increment * k`` for ``k`` in
    ``0 .. 360 // increment``; continuous mode yields ``draw * 360``.
    """
    if settings.rotation_mode == "continuous":
        return draw * 360.0

    increment = settings.rotation_increment
    steps = 360 // increment + 1
    step = min(math.floor(draw * steps), steps - 1)
    return float(360 - increment * step)


def crop_box(
    rotated_size: tuple[int, int],
    working_dimension: int,
    size: int,
    settings: PlaidiconsSettings,
) -> tuple[int, int, int, int]:
    """Compute the (left, top, right, bottom) crop box in the rotated image.

    Raises:
        CropOutOfBoundsError: If the box does not fit inside the rotated image
    """
    rotated_width, rotated_height = rotated_size
    offset = math.floor(working_dimension * settings.crop_offset_ratio)
    left = (rotated_width - working_dimension) // 2 + offset
    top = (rotated_height - working_dimension) // 2 + offset
    right = left + size
    bottom = top + size

    if left < 0 or top < 0 or right > rotated_width or bottom > rotated_height:
        raise CropOutOfBoundsError(
            f"Crop box {(left, top, right, bottom)} exceeds rotated image "
            f"{rotated_width}x{rotated_height}"
        )

    return left, top, right, bottom


def rasterize(pixels: np.ndarray) -> Image.Image:
    """Turn the raw pixel buffer into an RGB image.

    Raises:
        EncodingError: If the buffer is not an (N, N, 3) ``uint8`` array or
            Pillow rejects it
    """
    if pixels.ndim != 3 or pixels.shape[2] != 3 or pixels.dtype != np.uint8:
        raise EncodingError(
            f"Expected a uint8 buffer of shape (N, N, 3), got {pixels.dtype} {pixels.shape}"
        )

    try:
        return Image.fromarray(pixels).convert("RGB")
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Could not rasterize pixel buffer: {e}") from e


def encode_png(image: Image.Image) -> bytes:
    """Encode an image as PNG bytes.

    Raises:
        EncodingError: If Pillow fails to write the image
    """
    buffer = io.BytesIO()
    try:
        image.save(buffer, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodingError(f"Could not encode PNG: {e}") from e
    return buffer.getvalue()


def compose(
    image: Image.Image,
    working_dimension: int,
    size: int,
    rotation_draw: float,
    settings: PlaidiconsSettings,
) -> bytes:
    """Rotate, crop and encode the painted canvas.

    Args:
        image: Rasterized working canvas (see :func:`rasterize`)
        working_dimension: Side length of the working canvas
        size: Requested output side length
        rotation_draw: RNG draw selecting the rotation angle
        settings: Pipeline settings (rotation mode, resampling, crop offset)

    Returns:
        PNG-encoded ``size x size`` RGB image

    Raises:
        CropOutOfBoundsError: If the crop does not fit the rotated image
        EncodingError: If the final image cannot be encoded
    """
    degrees = rotation_angle(rotation_draw, settings)
    rotated = image.rotate(
        degrees,
        resample=_RESAMPLE_FILTERS[settings.resample],
        expand=True,
        fillcolor=GRAY_BACKGROUND,
    )

    box = crop_box(rotated.size, working_dimension, size, settings)
    cropped = rotated.crop(box)

    logger.debug(f"Rotated {degrees:.2f} degrees to {rotated.size}, cropped {box}")
    return encode_png(cropped)
