"""Tests for the generator base class."""

from __future__ import annotations

import numpy as np
import pytest

from archipelago.environment.generators.base import (
    BaseMapGenerator,
    GeneratedMapData,
    is_integer,
)
from archipelago.errors import InvalidDimensionsError


class CountingGenerator(BaseMapGenerator):
    """Minimal generator that records how often it actually ran."""

    def __init__(self, map_width: int, map_height: int) -> None:
        super().__init__(map_width, map_height)
        self.runs = 0

    def _generate(self) -> GeneratedMapData:
        self.runs += 1
        shape = (self.map_width, self.map_height)
        return GeneratedMapData(
            tiles=np.zeros(shape, dtype=np.int8),
            cell_classes=np.zeros(shape, dtype=np.uint8),
        )


def test_generate_runs_subclass_after_validation() -> None:
    gen = CountingGenerator(3, 4)

    assert gen.generate().tiles.shape == (3, 4)
    assert gen.runs == 1


@pytest.mark.parametrize(("width", "height"), [(0, 4), (3, -1), (2.5, 4), (3, False)])
def test_bad_size_never_reaches_subclass(width: object, height: object) -> None:
    gen = CountingGenerator(width, height)  # type: ignore[arg-type]

    with pytest.raises(InvalidDimensionsError):
        gen.generate()
    assert gen.runs == 0


def test_is_integer() -> None:
    assert is_integer(3)
    assert is_integer(np.int16(3))
    assert not is_integer(3.0)
    assert not is_integer(True)
