"""Conversion from hex grid cells to world positions.

The grid uses flat-topped hexes in offset columns ("odd-q"): columns are
three quarters of a tile apart and every odd column is pushed half a row
further along z.
"""

from __future__ import annotations

from archipelago import config
from archipelago.types import TileCoord, WorldPos


def grid_to_world(x: TileCoord, y: TileCoord, tile_size: float) -> WorldPos:
    """Return the (x, z) world position of the center of cell (x, y)."""
    row_offset = tile_size * config.HEX_ROW_SPACING
    world_x = x * tile_size * config.HEX_COLUMN_SPACING
    world_z = y * row_offset
    if x % 2 == 1:
        world_z += row_offset / 2.0
    return (world_x, world_z)
