# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import pytest
import numpy as np
from pyrotechnics.common import errors
from pyrotechnics.model import Dimension
from pyrotechnics.model import Firework
from pyrotechnics.model import FireworkType
from pyrotechnics.model import Interval
from pyrotechnics.model import Solution
from .distances import EuclideanDistance


def test_euclidean_distance() -> None:
    dims = [Dimension(Interval(-10, 10)) for _ in range(2)]
    distance = EuclideanDistance(dims)
    first = Firework(FireworkType.INITIAL, 0, 0, {dims[0]: 0.0, dims[1]: 0.0})
    second = Solution({dims[0]: 3.0, dims[1]: 4.0}, quality=1.0)
    assert distance.distance(first, second) == 5.0
    assert distance(second, first) == 5.0
    assert distance(first, first) == 0.0
    assert distance({dims[0]: 1.0, dims[1]: 1.0}, first) == pytest.approx(np.sqrt(2))


def test_euclidean_distance_subset_of_dimensions() -> None:
    dims = [Dimension(Interval(-10, 10)) for _ in range(3)]
    distance = EuclideanDistance(dims[:1])
    assert distance({dims[0]: 1.0, dims[1]: 5.0}, {dims[0]: -1.0, dims[1]: 0.0}) == 2.0
    with pytest.raises(errors.InvalidArgumentError):
        EuclideanDistance([])


def test_pairwise() -> None:
    dims = [Dimension(Interval(-10, 10)) for _ in range(2)]
    distance = EuclideanDistance(dims)
    points = [{dims[0]: x, dims[1]: y} for x, y in [(0, 0), (3, 4), (0, 1)]]
    matrix = distance.pairwise(points)
    expected = np.array([[distance(p, q) for q in points] for p in points])
    np.testing.assert_almost_equal(matrix, expected)
    np.testing.assert_array_equal(matrix, matrix.T)
    np.testing.assert_array_equal(np.diag(matrix), 0)
