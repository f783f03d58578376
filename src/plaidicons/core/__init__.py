"""Core pixel-synthesis pipeline for plaid icons.

This module provides the stages of icon generation:

- **rng**: Deterministic, counter-based random draws from a seed string
- **palette**: Block size and color selection (background, two accents, middle)
- **painter**: Block-grid painting with optional edge anti-aliasing
- **compositor**: Rasterize, rotate, crop and PNG-encode the canvas
- **generator**: Orchestrates the stages and optionally saves to disk
- **config**: Settings loaded from PLAIDICONS_* environment variables

Architecture Overview
---------------------
Each stage takes an immutable RNG state and returns the advanced one, so the
order of draws is explicit in the orchestrator:

    seed -> rng -> palette -> painter -> compositor -> PNG bytes

Usage Example
-------------
    from plaidicons.core import generate

    png = generate(size=256, seed="slackicons")

See Also
--------
- PlaidiconsSettings: Configuration options and environment variables
"""

from plaidicons.core.config import PlaidiconsSettings, settings
from plaidicons.core.generator import GenerationOptions, IconGenerator, generate

__all__ = [
    "generate",
    "GenerationOptions",
    "IconGenerator",
    "PlaidiconsSettings",
    "settings",
]
