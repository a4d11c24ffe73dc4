from __future__ import annotations

import numpy as np

from archipelago.environment.preview import render_ascii, tile_histogram
from archipelago.environment.tile_types import NO_TILE, TileType


def _grid() -> np.ndarray:
    tiles = np.full((3, 2), NO_TILE, dtype=np.int8, order="F")
    tiles[0, 0] = TileType.WATER
    tiles[1, 0] = TileType.WATER
    tiles[2, 1] = TileType.STONE
    return tiles


def test_render_ascii_puts_highest_row_first() -> None:
    assert render_ascii(_grid()) == "  ^\n~~"


def test_tile_histogram_counts_placed_tiles_only() -> None:
    assert tile_histogram(_grid()) == {TileType.WATER: 2, TileType.STONE: 1}


def test_tile_histogram_empty_grid() -> None:
    tiles = np.full((4, 4), NO_TILE, dtype=np.int8)
    assert tile_histogram(tiles) == {}
