"""Base classes for map generation."""

from __future__ import annotations

import abc
import numbers
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

from archipelago.errors import GenerationError, InvalidDimensionsError

if TYPE_CHECKING:
    from archipelago.types import GridPos

    from .islands import IslandRegion


@dataclass
class GeneratedMapData:
    """A container for all raw data produced by a map generator.

    Attributes:
        tiles: 2D numpy array of TileType values, NO_TILE where nothing was
            placed. Shape: (width, height).
        cell_classes: 2D numpy array of CellClass values. Shape: (width, height).
        islands: The island regions the map was built around.
        spawned: Renderer handles of the instantiated tiles, keyed by cell.
        skipped: Cells that hit a per-cell error, with the error.
    """

    tiles: np.ndarray
    cell_classes: np.ndarray
    islands: list[IslandRegion] = field(default_factory=list)
    spawned: dict[GridPos, Any] = field(default_factory=dict)
    skipped: list[tuple[GridPos, GenerationError]] = field(default_factory=list)


class BaseMapGenerator(abc.ABC):
    """Abstract base class for map generation algorithms.

    generate() checks the settings first and only then hands over to the
    subclass, so a misconfigured generator fails before touching any state.
    Subclasses extend validate() with their own settings.
    """

    def __init__(self, map_width: int, map_height: int) -> None:
        self.map_width = map_width
        self.map_height = map_height

    def validate(self) -> None:
        """Check the generator settings.

        Raises:
            InvalidDimensionsError: If the map size is not a positive integer.
        """
        for name, value in (("width", self.map_width), ("height", self.map_height)):
            if not is_integer(value) or value <= 0:
                raise InvalidDimensionsError(
                    f"Map {name} must be a positive integer, got {value!r}"
                )

    def generate(self) -> GeneratedMapData:
        """Validate the settings and generate the map.

        Raises:
            InvalidDimensionsError: If the settings are out of range.
        """
        self.validate()
        return self._generate()

    @abc.abstractmethod
    def _generate(self) -> GeneratedMapData:
        """Generate the map layout and its structural data."""
        raise NotImplementedError


def is_integer(value: object) -> bool:
    """True for ints and numpy integers, False for bools and floats."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)
