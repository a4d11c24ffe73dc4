"""Map generation for archipelago.

This package provides:
- HexIslandGenerator: circular hex map with jittered-lattice islands
- generate_hex_map: one-shot convenience wrapper around it

And the building blocks it composes, usable on their own:
- layout_islands / IslandRegion: island placement
- classify_cell / CellClass: map mask, edge and island fade rules
- TileSampler / weighted_choice: neighbor-biased weighted sampling
"""

from .base import BaseMapGenerator, GeneratedMapData
from .classify import CellClass, classify_cell
from .context import GenerationContext
from .hex_islands import HexIslandGenerator, generate_hex_map
from .islands import IslandRegion, find_first_island, layout_islands
from .sampler import (
    NEIGHBOR_BIAS,
    TileSampler,
    apply_neighbor_bias,
    build_weight_table,
    neighbor_weights,
    weighted_choice,
)

__all__ = [
    "NEIGHBOR_BIAS",
    "BaseMapGenerator",
    "CellClass",
    "GeneratedMapData",
    "GenerationContext",
    "HexIslandGenerator",
    "IslandRegion",
    "TileSampler",
    "apply_neighbor_bias",
    "build_weight_table",
    "classify_cell",
    "find_first_island",
    "generate_hex_map",
    "layout_islands",
    "neighbor_weights",
    "weighted_choice",
]
