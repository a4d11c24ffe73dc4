from __future__ import annotations

# =============================================================================
# SPATIAL TYPES
# =============================================================================

type TileCoord = int  # Always integer grid position

# Grid coordinates - column (x) and row (y) of a hex cell
type GridPos = tuple[TileCoord, TileCoord]  # Example: (5, 3) = column 5, row 3

# World coordinates - where a tile object sits on the ground plane
type WorldCoord = float
type WorldPos = tuple[WorldCoord, WorldCoord]  # Example: (3.75, 2.6) = (x, z)

# Euclidean point used for island geometry
type Point = tuple[float, float]

# =============================================================================
# RANDOMNESS
# =============================================================================

type RandomSeed = int | float | str | bytes | bytearray | None
