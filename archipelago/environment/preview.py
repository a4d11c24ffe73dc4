"""Plain-text previews of a generated placement grid."""

from __future__ import annotations

import numpy as np

from archipelago.environment.tile_types import GLYPHS, NO_TILE, TileType


def render_ascii(tiles: np.ndarray) -> str:
    """Draw the grid as text, one line per row.

    The highest row is printed first so that "south" (y - 1) ends up below
    a cell, matching how the map reads in world space. Empty cells are blank.
    """
    width, height = tiles.shape
    lines = []
    for y in reversed(range(height)):
        row = []
        for x in range(width):
            value = int(tiles[x, y])
            row.append(" " if value == NO_TILE else GLYPHS[TileType(value)])
        lines.append("".join(row).rstrip())
    return "\n".join(lines)


def tile_histogram(tiles: np.ndarray) -> dict[TileType, int]:
    """Count placed tiles per type. Types that never appear are omitted."""
    values, counts = np.unique(tiles[tiles != NO_TILE], return_counts=True)
    return {
        TileType(int(value)): int(count)
        for value, count in zip(values, counts, strict=True)
    }
