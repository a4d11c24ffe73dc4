"""Island layout.

Islands are circles dropped onto a coarse lattice laid over the map. Each
lattice slot gets exactly one island whose center is jittered a little off
the slot point and whose radius is drawn from a fixed range. The result is a
handful of land masses that are spread out but never perfectly regular.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from archipelago import config
from archipelago.types import Point
from archipelago.util.rng import RNG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IslandRegion:
    """A circular island.

    Attributes:
        center: Island center in grid units. Not necessarily a cell center.
        radius: Island radius in grid units.
    """

    center: Point
    radius: float

    def distance_to(self, pos: Point) -> float:
        return math.dist(pos, self.center)

    def contains(self, pos: Point) -> bool:
        """True if `pos` lies strictly inside the island."""
        return self.distance_to(pos) < self.radius


def layout_islands(
    width: int,
    height: int,
    lattice_x: int,
    lattice_y: int,
    rng: RNG,
) -> list[IslandRegion]:
    """Scatter one island per lattice slot.

    Slot (gx, gy) for gx in 1..lattice_x and gy in 1..lattice_y sits at
    (gx * spacing_x, gy * spacing_y), where the spacing is the map dimension
    divided (integer division) by the lattice dimension plus one. Both
    coordinates are then jittered by a uniform offset and the radius drawn
    uniformly between the configured bounds.

    Args:
        width: Map width in cells.
        height: Map height in cells.
        lattice_x: Island slots along x.
        lattice_y: Island slots along y.
        rng: Random source for jitter and radii.

    Returns:
        Islands in lattice scan order (x slot outer, y slot inner). Callers
        that test membership rely on this order for tie-breaks.
    """
    spacing_x = width // (lattice_x + 1)
    spacing_y = height // (lattice_y + 1)
    jitter = config.ISLAND_JITTER

    islands: list[IslandRegion] = []
    for gx in range(1, lattice_x + 1):
        for gy in range(1, lattice_y + 1):
            center = (
                gx * spacing_x + rng.uniform(-jitter, jitter),
                gy * spacing_y + rng.uniform(-jitter, jitter),
            )
            radius = rng.uniform(config.ISLAND_MIN_RADIUS, config.ISLAND_MAX_RADIUS)
            islands.append(IslandRegion(center=center, radius=radius))

    logger.debug(
        f"Laid out {len(islands)} islands on a {lattice_x}x{lattice_y} lattice"
    )
    return islands


def find_first_island(
    pos: Point, islands: list[IslandRegion]
) -> tuple[IslandRegion, float] | None:
    """Return the first island containing `pos` and the distance to its center.

    Scanning stops at the first hit, so where islands overlap the one listed
    earlier wins even if `pos` is deeper inside a later one.
    """
    for island in islands:
        dist = island.distance_to(pos)
        if dist < island.radius:
            return island, dist
    return None
