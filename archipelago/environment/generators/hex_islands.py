"""Hexagonal island map generator.

Builds a circular hex map dotted with a few islands in one pass:

1. Lay out islands on a jittered lattice.
2. Walk the grid column by column (x ascending, then y ascending) so the
   west and south neighbors of every cell are settled before it is visited.
3. Classify each cell: excluded, forced water, or eligible.
4. Sample terrain for eligible cells with neighbor bias.
5. Record the tile in the placement grid and ask the renderer to show it.

Per-cell failures (a tile type with no render handle, a weight table with
nothing to draw) are logged and skipped; they never abort the map.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Mapping

from archipelago import config
from archipelago.environment.hex_layout import grid_to_world
from archipelago.environment.render import TileRenderer
from archipelago.environment.tile_types import (
    TileConfig,
    TileType,
    base_weights_from,
    default_tile_configs,
)
from archipelago.errors import (
    InvalidDimensionsError,
    InvalidTileConfigError,
    ZeroWeightTotalError,
)
from archipelago.types import GridPos, RandomSeed
from archipelago.util import rng
from archipelago.util.rng import RNG, MapStreams, RNGProvider

from .base import BaseMapGenerator, GeneratedMapData, is_integer
from .classify import CellClass, classify_cell
from .context import GenerationContext
from .islands import layout_islands
from .sampler import TileSampler

logger = logging.getLogger(__name__)


class HexIslandGenerator(BaseMapGenerator):
    """Generates a circular hex map of islands surrounded by water.

    Example:
        generator = HexIslandGenerator(
            renderer=NullRenderer(),
            map_width=20,
            map_height=20,
            seed=12345,
        )
        map_data = generator.generate()

    Random sources are picked in this order: explicit `island_rng` /
    `tile_rng`, else fresh streams derived from `seed` on every generate()
    call, else the shared "map.islands" / "map.tiles" streams.

    Attributes:
        renderer: Collaborator that materializes and tears down tile visuals.
        tile_size: Hex size in world units.
        lattice_x: Island slots along x.
        lattice_y: Island slots along y.
        tile_configs: Base weight and render handle per tile type.
        seed: Optional seed for reproducible maps.
    """

    def __init__(
        self,
        renderer: TileRenderer,
        map_width: int = config.DEFAULT_MAP_WIDTH,
        map_height: int = config.DEFAULT_MAP_HEIGHT,
        tile_size: float = config.DEFAULT_TILE_SIZE,
        lattice_x: int = config.ISLAND_LATTICE_X,
        lattice_y: int = config.ISLAND_LATTICE_Y,
        tile_configs: Mapping[TileType, TileConfig] | None = None,
        seed: RandomSeed = None,
        island_rng: RNG | None = None,
        tile_rng: RNG | None = None,
    ) -> None:
        """Initialize the generator.

        Raises:
            InvalidDimensionsError: If a dimension, the tile size or a lattice
                size is out of range.
        """
        super().__init__(map_width, map_height)
        self.renderer = renderer
        self.tile_size = tile_size
        self.lattice_x = lattice_x
        self.lattice_y = lattice_y
        self.tile_configs = (
            dict(tile_configs) if tile_configs is not None else default_tile_configs()
        )
        self.seed = seed
        self.island_rng = island_rng
        self.tile_rng = tile_rng
        self._ctx: GenerationContext | None = None
        self.validate()

    @property
    def last_result(self) -> GeneratedMapData | None:
        """Data from the most recent generate() call, if any."""
        if self._ctx is None:
            return None
        return self._ctx.to_generated_map_data()

    def validate(self) -> None:
        super().validate()
        if (
            not isinstance(self.tile_size, numbers.Real)
            or isinstance(self.tile_size, bool)
            or not math.isfinite(self.tile_size)
            or self.tile_size <= 0
        ):
            raise InvalidDimensionsError(
                f"Tile size must be a positive finite number, got {self.tile_size!r}"
            )
        for name, value in (("x", self.lattice_x), ("y", self.lattice_y)):
            if not is_integer(value) or value < 1:
                raise InvalidDimensionsError(
                    f"Island lattice {name} must be an integer >= 1, got {value!r}"
                )

    def _random_sources(self) -> MapStreams:
        if self.seed is not None:
            streams = RNGProvider(self.seed).map_streams()
        else:
            streams = rng.map_streams()
        return MapStreams(
            islands=self.island_rng if self.island_rng is not None else streams.islands,
            tiles=self.tile_rng if self.tile_rng is not None else streams.tiles,
        )

    def clear(self) -> None:
        """Tear down every tile spawned by the previous run."""
        if self._ctx is None:
            return
        for spawned in self._ctx.spawned.values():
            self.renderer.destroy(spawned)
        self._ctx = None

    def _generate(self) -> GeneratedMapData:
        """Tear down the previous map and build a fresh one.

        Returns:
            GeneratedMapData with the placement grid, cell classes, islands,
            spawned handles and skipped cells.
        """
        logger.info("Generating islands on circular map...")
        self.clear()

        island_rng, tile_rng = self._random_sources()
        sampler = TileSampler(base_weights_from(self.tile_configs), tile_rng)

        ctx = GenerationContext.create_empty(self.map_width, self.map_height)
        ctx.islands = layout_islands(
            self.map_width, self.map_height, self.lattice_x, self.lattice_y, island_rng
        )
        self._ctx = ctx

        for x in range(self.map_width):
            for y in range(self.map_height):
                cell_class = classify_cell(
                    x, y, self.map_width, self.map_height, ctx.islands
                )
                ctx.cell_classes[x, y] = cell_class
                if cell_class == CellClass.EXCLUDED:
                    continue

                try:
                    if cell_class == CellClass.WATER:
                        tile_type = TileType.WATER
                    else:
                        tile_type = sampler.choose(ctx, x, y)
                    ctx.place((x, y), tile_type)
                    self._spawn(ctx, (x, y), tile_type)
                except (ZeroWeightTotalError, InvalidTileConfigError) as e:
                    logger.error(f"Invalid tile at ({x},{y}): {e}")
                    ctx.skipped.append(((x, y), e))

        logger.info(
            f"Map complete: {len(ctx.spawned)} tiles spawned, "
            f"{len(ctx.skipped)} skipped"
        )
        return ctx.to_generated_map_data()

    def _spawn(self, ctx: GenerationContext, pos: GridPos, tile_type: TileType) -> None:
        tile_config = self.tile_configs.get(tile_type)
        if tile_config is None or tile_config.render_handle is None:
            raise InvalidTileConfigError(pos, tile_type)

        x, y = pos
        position = grid_to_world(x, y, self.tile_size)
        ctx.spawned[pos] = self.renderer.instantiate(
            tile_type, position, tile_config.render_handle
        )


def generate_hex_map(
    renderer: TileRenderer,
    width: int,
    height: int,
    tile_size: float,
    lattice_x: int = config.ISLAND_LATTICE_X,
    lattice_y: int = config.ISLAND_LATTICE_Y,
    tile_configs: Mapping[TileType, TileConfig] | None = None,
    seed: RandomSeed = None,
) -> GeneratedMapData:
    """One-shot helper: build a generator and run it once."""
    generator = HexIslandGenerator(
        renderer,
        map_width=width,
        map_height=height,
        tile_size=tile_size,
        lattice_x=lattice_x,
        lattice_y=lattice_y,
        tile_configs=tile_configs,
        seed=seed,
    )
    return generator.generate()
