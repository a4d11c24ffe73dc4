"""Renderer seam for materializing generated tiles.

The generator never builds visuals itself. It hands each placed cell to a
TileRenderer, which turns (tile type, world position, render handle) into
whatever object the host engine uses, and later asks it to tear those
objects down again before the next map is generated.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Any

from archipelago.environment.tile_types import TileType
from archipelago.types import WorldPos


class TileRenderer(abc.ABC):
    """Abstract collaborator that creates and destroys tile visuals."""

    @abc.abstractmethod
    def instantiate(
        self, tile_type: TileType, position: WorldPos, render_handle: Any
    ) -> Any:
        """Create the visual for one tile and return a handle to it."""
        raise NotImplementedError

    @abc.abstractmethod
    def destroy(self, spawned: Any) -> None:
        """Tear down a visual previously returned by instantiate()."""
        raise NotImplementedError


class NullRenderer(TileRenderer):
    """Renderer that draws nothing. Useful for headless generation."""

    def instantiate(
        self, tile_type: TileType, position: WorldPos, render_handle: Any
    ) -> Any:
        return position

    def destroy(self, spawned: Any) -> None:
        pass


@dataclass
class SpawnedTile:
    tile_type: TileType
    position: WorldPos
    render_handle: Any


@dataclass
class RecordingRenderer(TileRenderer):
    """Keeps every instantiate/destroy call so it can be inspected later.

    Attributes:
        live: Tiles instantiated and not yet destroyed, in creation order.
        created: Every tile ever instantiated.
        destroyed: Every tile destroyed, in teardown order.
    """

    live: list[SpawnedTile] = field(default_factory=list)
    created: list[SpawnedTile] = field(default_factory=list)
    destroyed: list[SpawnedTile] = field(default_factory=list)

    def instantiate(
        self, tile_type: TileType, position: WorldPos, render_handle: Any
    ) -> SpawnedTile:
        spawned = SpawnedTile(tile_type, position, render_handle)
        self.live.append(spawned)
        self.created.append(spawned)
        return spawned

    def destroy(self, spawned: Any) -> None:
        self.live.remove(spawned)
        self.destroyed.append(spawned)
