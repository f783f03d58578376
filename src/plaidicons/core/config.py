"""Configuration management for Plaidicons.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the PLAIDICONS_ prefix,
allowing the pipeline variants to be switched without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (PLAIDICONS_* prefix)
2. .env file in the project root
3. Default values defined in PlaidiconsSettings

Example .env file:
    PLAIDICONS_DEFAULT_SIZE=512
    PLAIDICONS_ANTI_ALIAS=false
    PLAIDICONS_MIDDLE_COLOR_MODE=dark
    PLAIDICONS_ROTATION_MODE=continuous

Global Configuration Instance
------------------------------
A global `settings` instance is created automatically at module import time.
Functions that accept an optional settings argument fall back to it.

Usage Example
-------------
    from plaidicons.core.config import settings

    print(settings.default_size)
    print(settings.middle_color_mode)

Pipeline Variants
-----------------
Several historical variants of the plaid pipeline exist. They are exposed as
settings rather than separate code paths:
- anti_alias: one-pixel blended strips at block boundaries
- middle_color_mode: "average" (floor-average of the accents) or "dark"
  (dark luminosity color hued by the average)
- rotation_mode: "snapped" (multiples of rotation_increment) or "continuous"
- block_divisor_min / block_divisor_max: how many blocks span the canvas
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Horizontal crop anchor as a fraction of the working dimension. Close to
# (1 - 1/sqrt(2)) / 2; kept as found, not derived.
DEFAULT_CROP_OFFSET_RATIO = 0.146892655


class PlaidiconsSettings(BaseSettings):
    """Main configuration for Plaidicons.

    Attributes
    ----------
    Generation:
        default_size : int
            Output width/height used when a caller gives no size
        max_size : int
            Largest size the HTTP API accepts
        anti_alias : bool
            Blend the right and bottom edge of every block with its neighbour
        middle_color_mode : Literal["average", "dark"]
            How the center block color is derived from the two accents
        rotation_mode : Literal["snapped", "continuous"]
            Snap rotation to rotation_increment or use any angle
        rotation_increment : int
            Degrees between snapped angles
        resample : Literal["nearest", "bilinear", "bicubic"]
            Pillow resampling filter used when rotating
        block_divisor_min : int
            Smallest number of blocks across the working canvas
        block_divisor_max : int
            Largest number of blocks across the working canvas
        crop_offset_ratio : float
            Crop anchor as a fraction of the working dimension

    Output:
        outputs_dir : Path
            Directory used by the CLI when no output path is given
        save_metadata : bool
            Write a JSON sidecar next to every saved icon

    Server:
        server_host : str
            Bind address for the HTTP API
        server_port : int
            Port for the HTTP API (1024-65535)
        log_level : str
            Root logging level for the CLI and server

    Examples
    --------
        >>> from plaidicons.core.config import PlaidiconsSettings
        >>> custom = PlaidiconsSettings(anti_alias=False, rotation_mode="continuous")
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PLAIDICONS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Generation settings
    default_size: int = Field(
        default=1000,
        description="Output image width and height when none is requested",
        ge=1,
    )
    max_size: int = Field(
        default=4000,
        description="Largest size accepted by the HTTP API",
        ge=1,
    )
    anti_alias: bool = Field(
        default=True,
        description="Blend block edges with the neighbouring block color",
    )
    middle_color_mode: Literal["average", "dark"] = Field(
        default="average",
        description="Center block color: accent average or hue-seeded dark color",
    )
    rotation_mode: Literal["snapped", "continuous"] = Field(
        default="snapped",
        description="Rotation angle granularity",
    )
    rotation_increment: int = Field(
        default=5,
        description="Degrees between snapped rotation angles",
        ge=1,
        le=360,
    )
    resample: Literal["nearest", "bilinear", "bicubic"] = Field(
        default="bicubic",
        description="Resampling filter used for rotation",
    )
    block_divisor_min: int = Field(
        default=3,
        description="Smallest number of blocks across the working canvas",
        ge=1,
    )
    block_divisor_max: int = Field(
        default=4,
        description="Largest number of blocks across the working canvas",
        ge=1,
    )
    crop_offset_ratio: float = Field(
        default=DEFAULT_CROP_OFFSET_RATIO,
        description="Crop anchor as a fraction of the working dimension",
        ge=0.0,
        lt=0.5,
    )

    # Output settings
    outputs_dir: Path = Field(
        default=Path("outputs"),
        description="Directory to save rendered icons",
    )
    save_metadata: bool = Field(
        default=False,
        description="Write a JSON sidecar with generation parameters",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level for the CLI and server",
    )

    @model_validator(mode="after")
    def _check_divisor_range(self) -> "PlaidiconsSettings":
        if self.block_divisor_min > self.block_divisor_max:
            raise ValueError(
                f"block_divisor_min ({self.block_divisor_min}) must not exceed "
                f"block_divisor_max ({self.block_divisor_max})"
            )
        return self

    def variant(self) -> dict:
        """Return the settings that change the pixels of a generated icon."""
        return {
            "anti_alias": self.anti_alias,
            "middle_color_mode": self.middle_color_mode,
            "rotation_mode": self.rotation_mode,
            "rotation_increment": self.rotation_increment,
            "resample": self.resample,
            "block_divisor_min": self.block_divisor_min,
            "block_divisor_max": self.block_divisor_max,
            "crop_offset_ratio": self.crop_offset_ratio,
        }


# Global configuration instance
# Loads values from environment variables (PLAIDICONS_* prefix) and .env file.
settings = PlaidiconsSettings()
