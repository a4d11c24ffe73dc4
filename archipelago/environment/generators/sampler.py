"""Neighbor-biased weighted tile sampling.

For each eligible cell a fresh weight table is seeded from the base weights,
nudged by whatever was already placed to the west (x-1, y) and south
(x, y-1), and then a single tile type is drawn from it.

Bias adjustment philosophy:
- Water and rivers pull in more wet tiles and push away dry ones
- Stone seeds ore veins
- Desert spreads into clay and wasteland and repels water
- Pasture draws lakes and rivers

Bias from the two neighbors compounds multiplicatively.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from archipelago.environment.tile_types import BASE_WEIGHTS, TileType
from archipelago.errors import ZeroWeightTotalError
from archipelago.types import TileCoord
from archipelago.util.rng import RNG

if TYPE_CHECKING:
    from .context import GenerationContext

type WeightTable = dict[TileType, float]

_WET = frozenset({TileType.WATER, TileType.RIVER, TileType.LAKE, TileType.PASTURE})
_DRY = frozenset({TileType.DESERT, TileType.WASTELAND})
_ORES = frozenset({TileType.IRON, TileType.GOLD, TileType.DIAMOND, TileType.COAL})

# neighbor type -> ((affected types, multiplier), ...)
# Within one neighbor the affected sets never overlap.
_WATER_BIAS = ((_WET, 1.6), (_DRY, 0.5))

NEIGHBOR_BIAS: dict[TileType, tuple[tuple[frozenset[TileType], float], ...]] = {
    TileType.WATER: _WATER_BIAS,
    TileType.RIVER: _WATER_BIAS,
    TileType.STONE: ((_ORES, 1.5),),
    TileType.DESERT: (
        (frozenset({TileType.CLAY, TileType.WASTELAND}), 1.4),
        (frozenset({TileType.WATER}), 0.4),
    ),
    TileType.PASTURE: (
        (frozenset({TileType.LAKE, TileType.RIVER, TileType.WATER}), 1.2),
    ),
}


def build_weight_table(base_weights: Mapping[TileType, float]) -> WeightTable:
    """Seed a weight table in TileType declaration order."""
    return {tile_type: base_weights.get(tile_type, 0.0) for tile_type in TileType}


def apply_neighbor_bias(weights: WeightTable, neighbor: TileType | None) -> None:
    """Scale `weights` in place for one already-placed neighbor.

    A missing neighbor, or one with no bias rules, leaves the table unchanged.
    """
    if neighbor is None:
        return
    for targets, multiplier in NEIGHBOR_BIAS.get(neighbor, ()):
        for tile_type in targets:
            if tile_type in weights:
                weights[tile_type] *= multiplier


def neighbor_weights(
    ctx: GenerationContext,
    x: TileCoord,
    y: TileCoord,
    base_weights: Mapping[TileType, float] = BASE_WEIGHTS,
) -> WeightTable:
    """Build the biased weight table for cell (x, y).

    West is applied first, then south. Both must already have been visited
    by the traversal (x ascending outer, y ascending inner).
    """
    weights = build_weight_table(base_weights)
    apply_neighbor_bias(weights, ctx.neighbor(x - 1, y))
    apply_neighbor_bias(weights, ctx.neighbor(x, y - 1))
    return weights


def weighted_choice(weights: Mapping[TileType, float], rng: RNG) -> TileType:
    """Draw one tile type with probability proportional to its weight.

    The roll falls in [0, total) and the table is walked in insertion order,
    so each type owns a contiguous slice of that interval. Types with zero or
    negative weight own no slice and are never returned.

    Raises:
        ZeroWeightTotalError: If the weights sum to zero or less.
    """
    total = sum(weights.values())
    if total <= 0:
        raise ZeroWeightTotalError(total)

    roll = rng.random() * total
    running = 0.0
    last: TileType | None = None
    for tile_type, weight in weights.items():
        if weight <= 0:
            # Zero-width slice
            continue
        running += weight
        last = tile_type
        if running >= roll:
            return tile_type

    # Float accumulation can leave the last partial sum a hair below the roll
    assert last is not None
    return last


class TileSampler:
    """Chooses terrain for eligible cells.

    Attributes:
        base_weights: Unbiased weight per tile type.
        rng: Random source for the draws.
    """

    def __init__(self, base_weights: Mapping[TileType, float], rng: RNG) -> None:
        self.base_weights = dict(base_weights)
        self.rng = rng

    def choose(self, ctx: GenerationContext, x: TileCoord, y: TileCoord) -> TileType:
        """Pick the tile type for cell (x, y) given what is already placed.

        Raises:
            ZeroWeightTotalError: If no tile type has positive weight.
        """
        weights = neighbor_weights(ctx, x, y, self.base_weights)
        return weighted_choice(weights, self.rng)
