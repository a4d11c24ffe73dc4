"""Generation context for a single map generation run.

The GenerationContext holds all state produced while one map is generated:
the placement grid, per-cell classification, islands and the handles of the
tiles spawned so far. Every run builds a fresh context; nothing is shared
between runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from archipelago.environment.tile_types import NO_TILE, TileType
from archipelago.errors import GenerationError
from archipelago.types import GridPos, TileCoord

from .base import GeneratedMapData
from .classify import CellClass
from .islands import IslandRegion


@dataclass
class GenerationContext:
    """Mutable state container for one generation run.

    Attributes:
        width: Map width in cells.
        height: Map height in cells.
        tiles: 2D numpy array of TileType values, NO_TILE where nothing is
            placed. Each cell is written at most once. Shape: (width, height).
        cell_classes: 2D numpy array of CellClass values. Shape: (width, height).
        islands: Island regions for this run.
        spawned: Renderer handles keyed by cell.
        skipped: Cells that failed with a per-cell error.
    """

    width: int
    height: int
    tiles: np.ndarray
    cell_classes: np.ndarray
    islands: list[IslandRegion] = field(default_factory=list)
    spawned: dict[GridPos, Any] = field(default_factory=dict)
    skipped: list[tuple[GridPos, GenerationError]] = field(default_factory=list)

    @classmethod
    def create_empty(cls, width: int, height: int) -> GenerationContext:
        """Create a context with nothing placed and every cell excluded."""
        tiles = np.full((width, height), NO_TILE, dtype=np.int8, order="F")
        cell_classes = np.full(
            (width, height), CellClass.EXCLUDED, dtype=np.uint8, order="F"
        )
        return cls(width=width, height=height, tiles=tiles, cell_classes=cell_classes)

    def place(self, pos: GridPos, tile_type: TileType) -> None:
        """Record the logical tile for a cell.

        Raises:
            ValueError: If the cell already holds a tile.
        """
        x, y = pos
        if self.tiles[x, y] != NO_TILE:
            raise ValueError(f"Cell {pos} already placed")
        self.tiles[x, y] = tile_type

    def neighbor(self, x: TileCoord, y: TileCoord) -> TileType | None:
        """Return the tile placed at (x, y).

        None if nothing is placed there or (x, y) lies off the grid, so
        callers can ask for x - 1 or y - 1 without bounds checks.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        value = int(self.tiles[x, y])
        if value == NO_TILE:
            return None
        return TileType(value)

    def to_generated_map_data(self) -> GeneratedMapData:
        return GeneratedMapData(
            tiles=self.tiles,
            cell_classes=self.cell_classes,
            islands=self.islands,
            spawned=self.spawned,
            skipped=self.skipped,
        )
