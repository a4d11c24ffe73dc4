"""Cell classification.

Decides, for one grid cell, whether it is left out of the map entirely, is
forced to water, or gets a sampled terrain tile:

1. Cells on the grid border or not strictly inside the circular map mask are
   EXCLUDED.
2. Cells outside every island are WATER.
3. Cells inside an island but within the fade band next to its rim are WATER.
4. Everything else is ELIGIBLE for terrain sampling.

All functions here are pure.
"""

from __future__ import annotations

import math
from enum import IntEnum

from archipelago import config
from archipelago.types import Point, TileCoord

from .islands import IslandRegion, find_first_island


class CellClass(IntEnum):
    EXCLUDED = 0
    WATER = 1
    ELIGIBLE = 2


def map_center(width: int, height: int) -> Point:
    return (width / 2.0, height / 2.0)


def map_radius(width: int, height: int) -> float:
    return min(width, height) / 2.0


def is_edge(x: TileCoord, y: TileCoord, width: int, height: int) -> bool:
    return x == 0 or y == 0 or x == width - 1 or y == height - 1


def in_map_circle(x: TileCoord, y: TileCoord, width: int, height: int) -> bool:
    return math.dist((x, y), map_center(width, height)) < map_radius(width, height)


def classify_cell(
    x: TileCoord,
    y: TileCoord,
    width: int,
    height: int,
    islands: list[IslandRegion],
) -> CellClass:
    """Classify cell (x, y) of a width x height map.

    Only the first island (in list order) containing the cell is consulted
    for the fade band, even when a later island would contain it more deeply.
    """
    if not in_map_circle(x, y, width, height) or is_edge(x, y, width, height):
        return CellClass.EXCLUDED

    hit = find_first_island((x, y), islands)
    if hit is None:
        return CellClass.WATER

    island, dist = hit
    if dist > island.radius - config.ISLAND_FADE_WIDTH:
        return CellClass.WATER

    return CellClass.ELIGIBLE
