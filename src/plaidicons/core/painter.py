"""Plaid grid painter.

Paints the working canvas block by block. Block (row, col) takes its color from
the parity of its row and column:

    ============  ===========  ===========
                  col even     col odd
    ============  ===========  ===========
    row even      background   accent A
    row odd       accent B     middle
    ============  ===========  ===========

With anti-aliasing enabled, the last column of every block is replaced by the
average of the block color and the color of the block to its right, and then
the last row by the average with the block below. The bottom-right pixel of a
block therefore carries the vertical blend. Strips that fall outside the
canvas are skipped.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np

from .palette import Color, Palette, average_colors

logger = logging.getLogger(__name__)

CHANNELS = 3  # RGB


def block_color(
    colors: list[Color], block_row: int, block_col: int, middle: Optional[Color] = None
) -> Color:
    """Return the base color of a block.

    Args:
        colors: Palette [background, accent A, accent B]
        block_row: Block row index (y // block_size)
        block_col: Block column index (x // block_size)
        middle: Color for odd/odd blocks; defaults to the floor-average of the accents

    Returns:
        The block's color
    """
    row_odd = block_row % 2 == 1
    col_odd = block_col % 2 == 1

    if not row_odd and not col_odd:
        return colors[0]
    if col_odd and not row_odd:
        return colors[1]
    if row_odd and not col_odd:
        return colors[2]

    # Middle
    return middle if middle is not None else average_colors(colors[1], colors[2])


def paint_plaid(
    working_dimension: int, block_size: int, palette: Palette, anti_alias: bool = True
) -> np.ndarray:
    """Paint the raw pixel buffer for one icon.

    Args:
        working_dimension: Side length of the square canvas
        block_size: Side length of one block
        palette: Colors to paint with
        anti_alias: Blend block edges with their right and bottom neighbours

    Returns:
        ``uint8`` array of shape (working_dimension, working_dimension, 3),
        indexed [y, x, channel]

    Raises:
        ValueError: If the canvas or block size is not positive
    """
    if working_dimension < 1:
        raise ValueError(f"Working dimension must be positive, got {working_dimension}")
    if block_size < 1:
        raise ValueError(f"Block size must be positive, got {block_size}")

    pixels = np.zeros((working_dimension, working_dimension, CHANNELS), dtype=np.uint8)
    colors = palette.colors
    blocks = math.ceil(working_dimension / block_size)

    for block_row in range(blocks):
        y = block_row * block_size
        y_end = min(y + block_size, working_dimension)

        for block_col in range(blocks):
            x = block_col * block_size
            x_end = min(x + block_size, working_dimension)

            color = block_color(colors, block_row, block_col, palette.middle)
            pixels[y:y_end, x:x_end] = color

            if not anti_alias:
                continue

            # Right edge
            edge_x = x + block_size - 1
            if edge_x < working_dimension:
                neighbor = block_color(colors, block_row, block_col + 1, palette.middle)
                pixels[y:y_end, edge_x] = average_colors(color, neighbor)

            # Bottom edge
            edge_y = y + block_size - 1
            if edge_y < working_dimension:
                neighbor = block_color(colors, block_row + 1, block_col, palette.middle)
                pixels[edge_y, x:x_end] = average_colors(color, neighbor)

    logger.debug(
        f"Painted {blocks}x{blocks} blocks of {block_size}px on a "
        f"{working_dimension}px canvas (anti_alias={anti_alias})"
    )
    return pixels
