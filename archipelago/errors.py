"""Exceptions raised during map generation.

InvalidDimensionsError is fatal and surfaces to the caller before any grid
state is touched. The other two are per-cell problems: the generator catches
them, logs the coordinate and moves on to the next cell.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archipelago.environment.tile_types import TileType
    from archipelago.types import GridPos


class GenerationError(Exception):
    """Base class for all map generation errors."""


class InvalidDimensionsError(GenerationError, ValueError):
    """Grid dimensions, tile size or island lattice are out of range."""


class InvalidTileConfigError(GenerationError):
    """A tile type has no render handle when one of its cells must be shown."""

    def __init__(self, pos: GridPos, tile_type: TileType) -> None:
        super().__init__(f"No render handle for {tile_type.name} at {pos}")
        self.pos = pos
        self.tile_type = tile_type


class ZeroWeightTotalError(GenerationError):
    """The candidate weights for a cell sum to zero or less."""

    def __init__(self, total: float) -> None:
        super().__init__(f"Total weight is {total}: no valid tile options")
        self.total = total
