"""
Terrain tile types for the island map.

This module defines:
- `TileType`: the twelve terrain kinds. Declaration order is significant: it
  is the order weight tables are seeded in, and so the order the weighted draw
  walks when partitioning its roll.
- `BASE_WEIGHTS`: the unbiased sampling weight of each type.
- `TileConfig`: per-type generation settings (base weight plus the opaque
  handle the renderer needs to materialize a tile).

The placement grid stores `TileType` values as small integers in a NumPy
array, with `NO_TILE` marking cells that were excluded or skipped.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class TileType(IntEnum):
    CLAY = 0
    COAL = 1
    DESERT = 2
    DIAMOND = 3
    GOLD = 4
    IRON = 5
    LAKE = 6
    PASTURE = 7
    RIVER = 8
    STONE = 9
    WASTELAND = 10
    WATER = 11


# Placement grid value for "nothing placed here".
NO_TILE = -1

BASE_WEIGHTS: dict[TileType, float] = {
    TileType.CLAY: 1.0,
    TileType.COAL: 0.7,
    TileType.DESERT: 1.0,
    TileType.DIAMOND: 0.3,
    TileType.GOLD: 0.5,
    TileType.IRON: 0.8,
    TileType.LAKE: 0.6,
    TileType.PASTURE: 1.2,
    TileType.RIVER: 0.7,
    TileType.STONE: 1.0,
    TileType.WASTELAND: 0.8,
    TileType.WATER: 0.8,
}

# Single-character glyphs for text previews.
GLYPHS: dict[TileType, str] = {
    TileType.CLAY: "c",
    TileType.COAL: "k",
    TileType.DESERT: "d",
    TileType.DIAMOND: "*",
    TileType.GOLD: "g",
    TileType.IRON: "i",
    TileType.LAKE: "o",
    TileType.PASTURE: '"',
    TileType.RIVER: "=",
    TileType.STONE: "^",
    TileType.WASTELAND: "x",
    TileType.WATER: "~",
}


@dataclass(frozen=True)
class TileConfig:
    """Generation settings for one tile type.

    Attributes:
        base_weight: Sampling weight before neighbor bias.
        render_handle: Whatever the renderer needs to build this tile's visual
            (a prefab, a sprite name...). None means the type can't be shown.
    """

    base_weight: float
    render_handle: Any = None


def default_tile_configs(
    handles: Mapping[TileType, Any] | None = None,
) -> dict[TileType, TileConfig]:
    """Build a config for every tile type using the stock base weights.

    Args:
        handles: Render handle per tile type. When omitted, each type's handle
            is its own lowercase name.

    Returns:
        A dict in TileType declaration order.
    """
    configs: dict[TileType, TileConfig] = {}
    for tile_type in TileType:
        if handles is None:
            handle: Any = tile_type.name.lower()
        else:
            handle = handles.get(tile_type)
        configs[tile_type] = TileConfig(BASE_WEIGHTS[tile_type], handle)
    return configs


def base_weights_from(configs: Mapping[TileType, TileConfig]) -> dict[TileType, float]:
    """Extract base weights from a config mapping, in declaration order.

    Types missing from `configs` get a weight of 0 so they are never drawn.
    """
    return {
        tile_type: configs[tile_type].base_weight if tile_type in configs else 0.0
        for tile_type in TileType
    }
