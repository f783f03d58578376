"""Plaidicons - deterministic plaid icon generator."""

__version__ = "0.1.0"

from plaidicons.core.config import PlaidiconsSettings, settings
from plaidicons.core.errors import (
    ColorGenerationError,
    CropOutOfBoundsError,
    EncodingError,
    InvalidSizeError,
    PlaidiconsError,
    RandomSourceError,
)
from plaidicons.core.generator import GenerationOptions, IconGenerator, generate

__all__ = [
    "generate",
    "GenerationOptions",
    "IconGenerator",
    "PlaidiconsSettings",
    "settings",
    "PlaidiconsError",
    "InvalidSizeError",
    "RandomSourceError",
    "ColorGenerationError",
    "EncodingError",
    "CropOutOfBoundsError",
]
