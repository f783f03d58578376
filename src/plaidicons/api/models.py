"""Pydantic request and response models for the Plaidicons API.

These models define the JSON schema for the API endpoints. FastAPI uses them
for request validation, serialisation, and OpenAPI documentation.

Models
------
IconRequest
    Payload for ``POST /api/icon``: seed and size of the icon to render.
ConfigResponse
    Response of ``GET /api/config``: the active pipeline variant.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class IconRequest(BaseModel):
    """Request body for the ``POST /api/icon`` endpoint.

    Attributes:
        seed: Seed string. ``None`` or empty means the server picks a random
            seed, which is returned in the ``X-Plaidicons-Seed`` header.
        size: Output width and height in pixels. ``None`` uses the
            configured default.
    """

    seed: str | None = Field(
        default=None,
        description="Seed string. None = server picks a random seed.",
    )
    size: int | None = Field(
        default=None,
        description="Output width and height in pixels.",
    )


class ConfigResponse(BaseModel):
    """Response body for the ``GET /api/config`` endpoint."""

    version: str
    default_size: int
    max_size: int
    anti_alias: bool
    middle_color_mode: Literal["average", "dark"]
    rotation_mode: Literal["snapped", "continuous"]
    rotation_increment: int
    resample: Literal["nearest", "bilinear", "bicubic"]
    block_divisor_min: int
    block_divisor_max: int
    crop_offset_ratio: float
