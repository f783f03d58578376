"""Tests for plaidicons.core.painter: block colors and plaid painting."""

from __future__ import annotations

import numpy as np
import pytest

from plaidicons.core.painter import block_color, paint_plaid
from plaidicons.core.palette import Palette, average_colors, extract_rgbs


class TestBlockColor:
    """Tests for the row/column parity rule."""

    @pytest.fixture
    def colors(self):
        return extract_rgbs(["rgb(0, 0, 0)", "rgb(100, 100, 100)", "rgb(200, 200, 200)"])

    def test_parity_grid(self, colors):
        """A 3x3 grid should follow the plaid rule with a blended center."""
        center = (150, 150, 150)

        assert block_color(colors, 0, 0) == colors[0]
        assert block_color(colors, 0, 1) == colors[1]
        assert block_color(colors, 0, 2) == colors[0]
        assert block_color(colors, 1, 0) == colors[2]
        assert block_color(colors, 1, 1) == center
        assert block_color(colors, 1, 2) == colors[2]
        assert block_color(colors, 2, 0) == colors[0]
        assert block_color(colors, 2, 1) == colors[1]
        assert block_color(colors, 2, 2) == colors[0]

    def test_period_two(self, colors):
        """Colors should repeat every two rows and every two columns."""
        for row in range(6):
            for col in range(6):
                assert block_color(colors, row, col) == block_color(colors, row + 2, col)
                assert block_color(colors, row, col) == block_color(colors, row, col + 2)

    def test_explicit_middle(self, colors):
        """A precomputed middle color replaces the average for odd/odd blocks."""
        assert block_color(colors, 1, 1, middle=(9, 8, 7)) == (9, 8, 7)
        assert block_color(colors, 0, 0, middle=(9, 8, 7)) == colors[0]


class TestPaintPlaid:
    """Tests for paint_plaid()."""

    def test_shape_and_dtype(self, gray_palette: Palette):
        """The buffer should be an (N, N, 3) uint8 array."""
        pixels = paint_plaid(10, 4, gray_palette)
        assert pixels.shape == (10, 10, 3)
        assert pixels.dtype == np.uint8

    def test_block_interiors_without_anti_alias(self, gray_palette: Palette):
        """Without anti-aliasing every pixel has its block's base color."""
        pixels = paint_plaid(8, 4, gray_palette, anti_alias=False)

        assert tuple(pixels[0, 0]) == gray_palette.background
        assert tuple(pixels[3, 3]) == gray_palette.background
        assert tuple(pixels[0, 4]) == gray_palette.accent_a  # row 0, col 1
        assert tuple(pixels[4, 0]) == gray_palette.accent_b  # row 1, col 0
        assert tuple(pixels[7, 7]) == gray_palette.middle

    def test_right_edge_blended(self, gray_palette: Palette):
        """The last column of a block blends with the block to its right."""
        pixels = paint_plaid(8, 4, gray_palette)
        expected = average_colors(gray_palette.background, gray_palette.accent_a)

        assert tuple(pixels[1, 3]) == expected
        assert tuple(pixels[1, 2]) == gray_palette.background

    def test_bottom_edge_blended(self, gray_palette: Palette):
        """The last row of a block blends with the block below."""
        pixels = paint_plaid(8, 4, gray_palette)
        expected = average_colors(gray_palette.background, gray_palette.accent_b)

        assert tuple(pixels[3, 1]) == expected
        assert tuple(pixels[2, 1]) == gray_palette.background

    def test_corner_takes_vertical_blend(self, gray_palette: Palette):
        """The bottom-right pixel of a block carries the vertical blend."""
        pixels = paint_plaid(8, 4, gray_palette)
        expected = average_colors(gray_palette.background, gray_palette.accent_b)
        assert tuple(pixels[3, 3]) == expected

    def test_edges_outside_canvas_skipped(self, gray_palette: Palette):
        """Blocks clipped by the canvas edge keep their base color."""
        # Blocks of 4 on a 6px canvas: the second block column is clipped at x=5
        pixels = paint_plaid(6, 4, gray_palette)

        assert tuple(pixels[0, 5]) == gray_palette.accent_a
        assert tuple(pixels[5, 0]) == gray_palette.accent_b
        assert tuple(pixels[5, 5]) == gray_palette.middle

    def test_blocks_at_canvas_edge_blend_with_virtual_neighbor(self, gray_palette: Palette):
        """A block whose edge lands on the last pixel still blends with the next block color."""
        pixels = paint_plaid(8, 4, gray_palette)
        # Block (0, 1) right edge at x=7, neighbor (0, 2) is background
        expected = average_colors(gray_palette.accent_a, gray_palette.background)
        assert tuple(pixels[0, 7]) == expected

    def test_every_pixel_painted(self):
        """No pixel should keep the zero fill when the palette has no black."""
        palette = Palette(
            background=(236, 239, 240),
            accent_a=(10, 20, 30),
            accent_b=(40, 50, 60),
            middle=(25, 35, 45),
        )
        pixels = paint_plaid(37, 5, palette)
        assert not np.any(np.all(pixels == 0, axis=2))

    @pytest.mark.parametrize("dimension,block", [(0, 1), (10, 0)])
    def test_invalid_dimensions(self, gray_palette: Palette, dimension, block):
        """Non-positive canvas or block sizes should raise ValueError."""
        with pytest.raises(ValueError):
            paint_plaid(dimension, block, gray_palette)
