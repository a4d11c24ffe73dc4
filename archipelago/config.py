"""
Configuration constants.

Centralizes the tuning values used by the map generator.
Organized by functional area for easy maintenance.
"""

import math

from archipelago.types import RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

# None gives a different map on every run.
RANDOM_SEED: RandomSeed = None

# =============================================================================
# GRID
# =============================================================================

DEFAULT_MAP_WIDTH = 20
DEFAULT_MAP_HEIGHT = 20
DEFAULT_TILE_SIZE = 1.0

# =============================================================================
# ISLANDS
# =============================================================================

# Islands are scattered over a lattice of slots, one island per slot.
ISLAND_LATTICE_X = 2
ISLAND_LATTICE_Y = 2

# Each island center is nudged by up to this much on both axes.
ISLAND_JITTER = 1.0

ISLAND_MIN_RADIUS = 4.0
ISLAND_MAX_RADIUS = 6.0

# Cells within this distance of an island's rim become water.
ISLAND_FADE_WIDTH = 1.0

# =============================================================================
# HEX LAYOUT
# =============================================================================

# Flat-topped hexes in offset columns: neighbouring columns overlap by a
# quarter tile, rows are sqrt(3)/2 apart and odd columns shift half a row.
HEX_COLUMN_SPACING = 0.75
HEX_ROW_SPACING = math.sqrt(3.0) / 2.0
