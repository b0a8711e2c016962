# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import pytest
import numpy as np
from pyrotechnics.common import errors
from .interval import Interval
from .space import Dimension
from .space import Firework
from .space import FireworkType
from .space import Solution


def test_dimensions_have_identity() -> None:
    first = Dimension(Interval(-1, 1))
    second = Dimension(Interval(-1, 1))
    assert first != second
    assert len({first, second, first}) == 2
    assert first.contains(0.5)
    assert not first.contains(2)
    assert Dimension(Interval(0, 1), name="width").name == "width"
    with pytest.raises(errors.InvalidArgumentError):
        Dimension((0, 1))  # type: ignore


def test_firework_quality_lifecycle() -> None:
    dims = [Dimension(Interval(-1, 1)) for _ in range(2)]
    firework = Firework(FireworkType.EXPLOSION, 3, 2, {dims[0]: 0.5, dims[1]: -0.25})
    assert not firework.has_quality
    with pytest.raises(errors.InvalidArgumentError, match="explosion:3.2"):
        firework.quality  # pylint: disable=pointless-statement
    with pytest.raises(errors.InvalidArgumentError):
        firework.to_solution()
    firework.quality = 12
    assert firework.has_quality
    assert firework.quality == 12.0
    np.testing.assert_array_equal(firework.as_array(dims[::-1]), [-0.25, 0.5])
    solution = firework.to_solution()
    assert solution == Solution({dims[0]: 0.5, dims[1]: -0.25}, 12)
    np.testing.assert_array_equal(solution.as_array(dims), [0.5, -0.25])
    assert "quality: 12" in repr(firework)


def test_firework_coordinates_are_read_only() -> None:
    dim = Dimension(Interval(-1, 1))
    coords = {dim: 0.5}
    firework = Firework(FireworkType.INITIAL, 0, 0, coords)
    coords[dim] = 0.0
    assert firework.coordinates[dim] == 0.5
    with pytest.raises(TypeError):
        firework.coordinates[dim] = 0.1  # type: ignore


@pytest.mark.parametrize("step,order", [(-1, 0), (0, -1)])  # type: ignore
def test_firework_invalid_provenance(step: int, order: int) -> None:
    dim = Dimension(Interval(-1, 1))
    with pytest.raises(errors.InvalidArgumentError):
        Firework(FireworkType.ELITE, step, order, {dim: 0.0})
    with pytest.raises(errors.InvalidArgumentError):
        Firework(FireworkType.ELITE, 0, 0, {})
