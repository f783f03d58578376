"""Shared pytest fixtures for Plaidicons tests."""

import io
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from PIL import Image

from plaidicons.core.config import PlaidiconsSettings
from plaidicons.core.palette import Palette


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_settings(temp_dir: Path) -> PlaidiconsSettings:
    """Create settings with default pipeline values and a temporary outputs dir.

    Args:
        temp_dir: Temporary directory from fixture

    Returns:
        PlaidiconsSettings instance for testing
    """
    return PlaidiconsSettings(
        _env_file=None,
        outputs_dir=temp_dir / "outputs",
        default_size=1000,
        max_size=4000,
        anti_alias=True,
        middle_color_mode="average",
        rotation_mode="snapped",
        rotation_increment=5,
        resample="bicubic",
        block_divisor_min=3,
        block_divisor_max=4,
        save_metadata=False,
    )


@pytest.fixture
def gray_palette() -> Palette:
    """Palette with easy-to-check gray levels.

    Returns:
        Palette of (0, 0, 0), (100, 100, 100), (200, 200, 200) and middle (150, 150, 150)
    """
    return Palette(
        background=(0, 0, 0),
        accent_a=(100, 100, 100),
        accent_b=(200, 200, 200),
        middle=(150, 150, 150),
    )


@pytest.fixture
def open_png():
    """Return a helper that decodes PNG bytes into a loaded PIL image."""

    def _open(data: bytes) -> Image.Image:
        image = Image.open(io.BytesIO(data))
        image.load()
        return image

    return _open
