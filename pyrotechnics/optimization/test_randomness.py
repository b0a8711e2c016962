# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import collections
import pytest
import numpy as np
from pyrotechnics.common import errors
from pyrotechnics.common import testing
from .randomness import RandomSource


def test_random_source_seeding() -> None:
    first = RandomSource(12)
    second = RandomSource(np.random.RandomState(12))
    values = [first.uniform(-3, 3) for _ in range(10)]
    np.testing.assert_array_equal(values, [second.uniform(-3, 3) for _ in range(10)])
    assert all(-3 <= v < 3 for v in values)
    assert RandomSource.from_seed(first) is first
    assert isinstance(RandomSource.from_seed(None), RandomSource)


def test_integer() -> None:
    source = RandomSource(0)
    values = {source.integer(2, 5) for _ in range(200)}
    assert values == {2, 3, 4}
    with pytest.raises(errors.InvalidArgumentError):
        source.integer(3, 3)


def test_boolean_and_normal() -> None:
    source = RandomSource(1)
    booleans = [source.boolean() for _ in range(2000)]
    assert 0.45 < np.mean(booleans) < 0.55
    normals = [source.normal(1.0, 1.0) for _ in range(5000)]
    np.testing.assert_almost_equal(np.mean(normals), 1.0, decimal=1)
    np.testing.assert_almost_equal(np.std(normals), 1.0, decimal=1)


@testing.parametrized(
    empty=(0, 0, 10),
    single=(1, 3, 4),
    full=(5, 0, 5),
    partial=(5, 10, 30),
)
def test_unique_integers_bounds(k: int, low: int, high: int) -> None:
    values = RandomSource(3).unique_integers(k, low, high)
    assert len(values) == k
    assert len(set(values)) == k
    assert all(low <= v < high for v in values)


def test_unique_integers_uniformity() -> None:
    source = RandomSource(42)
    counts: collections.Counter = collections.Counter()
    trials = 10000
    for _ in range(trials):
        values = source.unique_integers(5, 0, 20)
        assert len(set(values)) == 5
        counts.update(values)
    # each integer is expected trials * 5 / 20 = 2500 times
    assert set(counts) == set(range(20))
    frequencies = np.array([counts[k] for k in range(20)]) / trials
    np.testing.assert_allclose(frequencies, 0.25, atol=0.03)


@testing.parametrized(
    too_many=(6, 0, 5),
    negative=(-1, 0, 5),
    inverted=(0, 5, 0),
)
def test_unique_integers_errors(k: int, low: int, high: int) -> None:
    with pytest.raises(errors.InvalidArgumentError):
        RandomSource(0).unique_integers(k, low, high)
