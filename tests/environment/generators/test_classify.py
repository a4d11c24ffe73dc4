"""Tests for cell classification."""

from __future__ import annotations

import pytest

from archipelago.environment.generators.classify import (
    CellClass,
    classify_cell,
    in_map_circle,
    is_edge,
    map_center,
    map_radius,
)
from archipelago.environment.generators.islands import IslandRegion

# One island that swallows the whole map.
BIG_ISLAND = [IslandRegion(center=(10.0, 10.0), radius=100.0)]


def test_map_geometry() -> None:
    assert map_center(10, 6) == (5.0, 3.0)
    assert map_radius(10, 6) == 3.0


@pytest.mark.parametrize(("width", "height"), [(3, 3), (5, 8), (20, 20), (31, 17)])
def test_edge_cells_always_excluded(width: int, height: int) -> None:
    for x in range(width):
        for y in range(height):
            if is_edge(x, y, width, height):
                assert classify_cell(x, y, width, height, BIG_ISLAND) == (
                    CellClass.EXCLUDED
                )


def test_outside_map_circle_excluded() -> None:
    # (2, 2) is about 11.3 from the center of a 20x20 map, radius 10
    assert not in_map_circle(2, 2, 20, 20)
    assert classify_cell(2, 2, 20, 20, BIG_ISLAND) == CellClass.EXCLUDED


def test_on_map_circle_boundary_excluded() -> None:
    # (16, 18) is exactly radius 10 away from (10, 10)
    assert not in_map_circle(16, 18, 20, 20)
    assert classify_cell(16, 18, 20, 20, BIG_ISLAND) == CellClass.EXCLUDED


def test_open_sea_is_water() -> None:
    assert classify_cell(10, 10, 20, 20, []) == CellClass.WATER


def test_fade_band_is_water() -> None:
    island = IslandRegion(center=(10.0, 10.0), radius=3.0)

    # dist 2.5 > radius - 1
    assert classify_cell(10, 10, 20, 20, [IslandRegion((7.5, 10.0), 3.0)]) == (
        CellClass.WATER
    )
    # dist 2.0 is not > radius - 1
    assert classify_cell(12, 10, 20, 20, [island]) == CellClass.ELIGIBLE
    assert classify_cell(10, 10, 20, 20, [island]) == CellClass.ELIGIBLE


def test_small_map_all_interior_cells_eligible() -> None:
    """5x5 map, one island covering it: the 3x3 interior is all eligible."""
    islands = [IslandRegion(center=(2.0, 2.0), radius=6.0)]

    for x in range(5):
        for y in range(5):
            expected = (
                CellClass.ELIGIBLE
                if 1 <= x <= 3 and 1 <= y <= 3
                else CellClass.EXCLUDED
            )
            assert classify_cell(x, y, 5, 5, islands) == expected


class TestOverlappingIslands:
    """Only the first island containing a cell decides its fade band."""

    def test_first_island_radius_governs_fade(self) -> None:
        # Cell (14, 10): 4.0 from A (fade band of A, radius 5),
        # 0.0 from B (deep inside B, radius 3)
        a = IslandRegion(center=(10.0, 10.0), radius=5.0)
        b = IslandRegion(center=(14.0, 10.0), radius=3.0)

        assert classify_cell(14, 10, 20, 20, [a, b]) == CellClass.WATER
        assert classify_cell(14, 10, 20, 20, [b, a]) == CellClass.ELIGIBLE

    def test_first_island_can_make_cell_eligible(self) -> None:
        # Cell (12, 10): 2.0 from A (inside, radius 5), 2.5 from B (fade band)
        a = IslandRegion(center=(10.0, 10.0), radius=5.0)
        b = IslandRegion(center=(14.5, 10.0), radius=3.0)

        assert classify_cell(12, 10, 20, 20, [a, b]) == CellClass.ELIGIBLE
        assert classify_cell(12, 10, 20, 20, [b, a]) == CellClass.WATER
