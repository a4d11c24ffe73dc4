"""Seeded random streams for map generation.

Island layout and tile sampling each draw from their own stream, derived
from one master seed. Rolling an extra tile never moves an island, and the
same seed always rebuilds the same map.

Usage:
    from archipelago.util import rng
    rng.init("my-seed")

    islands, tiles = rng.map_streams()
    radius = islands.uniform(4.0, 6.0)

Streams handed out before a later init() pick up the new seed on their next
draw, so they are safe to keep at module level.
"""

from __future__ import annotations

import zlib
from random import Random
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from archipelago.types import RandomSeed

ISLANDS = "map.islands"
TILES = "map.tiles"


class RNGStream:
    """Named handle onto one of a provider's Random instances.

    The Random itself is looked up on every draw, so a handle stays valid
    when its provider is re-seeded.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self.domain = domain

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._provider.raw(self.domain).random()

    def uniform(self, a: float, b: float) -> float:
        """Return random float N such that a <= N <= b."""
        return self._provider.raw(self.domain).uniform(a, b)

    def __repr__(self) -> str:
        return f"RNGStream({self.domain!r})"


# Anything the generator can draw from: a plain Random or a provider stream.
type RNG = Random | RNGStream


class MapStreams(NamedTuple):
    islands: RNG
    tiles: RNG


class RNGProvider:
    """Owns one Random per domain, all derived from a master seed."""

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._randoms: dict[str, Random] = {}
        self._streams: dict[str, RNGStream] = {}

    def stream(self, domain: str) -> RNGStream:
        if domain not in self._streams:
            self._streams[domain] = RNGStream(self, domain)
        return self._streams[domain]

    def map_streams(self) -> MapStreams:
        """The island layout and tile sampling streams."""
        return MapStreams(self.stream(ISLANDS), self.stream(TILES))

    def raw(self, domain: str) -> Random:
        random = self._randoms.get(domain)
        if random is None:
            if self._master_seed is None:
                random = Random()
            else:
                # crc32 rather than hash(): hash() is salted per interpreter
                # session via PYTHONHASHSEED
                random = Random(zlib.crc32(f"{self._master_seed}:{domain}".encode()))
            self._randoms[domain] = random
        return random

    def reseed(self, master_seed: RandomSeed) -> None:
        """Switch to a new master seed. Existing streams follow it."""
        self._master_seed = master_seed
        self._randoms.clear()


_provider = RNGProvider()


def init(master_seed: RandomSeed = None) -> None:
    """Re-seed the shared streams. None means unseeded (non-deterministic)."""
    _provider.reseed(master_seed)


def map_streams() -> MapStreams:
    """The shared island and tile streams."""
    return _provider.map_streams()
