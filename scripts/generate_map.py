#!/usr/bin/env python3
"""Generate an island map and print a text preview of it."""

from __future__ import annotations

import argparse
import logging

from archipelago import config
from archipelago.environment.generators import HexIslandGenerator
from archipelago.environment.preview import render_ascii, tile_histogram
from archipelago.environment.render import NullRenderer
from archipelago.errors import InvalidDimensionsError
from archipelago.util import rng


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a hex island map")
    parser.add_argument(
        "--width",
        type=int,
        default=config.DEFAULT_MAP_WIDTH,
        help=f"Map width in cells (default: {config.DEFAULT_MAP_WIDTH})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=config.DEFAULT_MAP_HEIGHT,
        help=f"Map height in cells (default: {config.DEFAULT_MAP_HEIGHT})",
    )
    parser.add_argument(
        "--tile-size",
        type=float,
        default=config.DEFAULT_TILE_SIZE,
        help="Hex size in world units",
    )
    parser.add_argument(
        "--lattice-x", type=int, default=config.ISLAND_LATTICE_X, help="Island columns"
    )
    parser.add_argument(
        "--lattice-y", type=int, default=config.ISLAND_LATTICE_Y, help="Island rows"
    )
    parser.add_argument("--seed", type=str, help="Master seed for reproducible maps")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    rng.init(args.seed if args.seed is not None else config.RANDOM_SEED)

    try:
        generator = HexIslandGenerator(
            NullRenderer(),
            map_width=args.width,
            map_height=args.height,
            tile_size=args.tile_size,
            lattice_x=args.lattice_x,
            lattice_y=args.lattice_y,
        )
    except InvalidDimensionsError as e:
        parser.error(str(e))

    map_data = generator.generate()

    print(render_ascii(map_data.tiles))
    print()
    for tile_type, count in sorted(
        tile_histogram(map_data.tiles).items(), key=lambda item: -item[1]
    ):
        print(f"{tile_type.name.title():>10} {count:5d}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
