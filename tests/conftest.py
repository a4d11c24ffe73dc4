from __future__ import annotations

from collections.abc import Iterator

import pytest

from archipelago.util import rng


@pytest.fixture(autouse=True)
def seeded_rng() -> Iterator[None]:
    """Give every test the same shared random streams."""
    rng.init("test")
    yield
    rng.init("test")
