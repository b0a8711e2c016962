# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import pytest
from pyrotechnics.common import errors
from pyrotechnics.model import Dimension
from pyrotechnics.model import Firework
from pyrotechnics.model import FireworkType
from pyrotechnics.model import Interval
from . import explode
from .elite import EliteStrategy
from .fitting import PolynomialFit


def _make_samples(
    dims: tp.List[Dimension], points: tp.List[tp.List[float]], function: tp.Callable[..., float]
) -> tp.List[Firework]:
    samples = []
    for k, point in enumerate(points):
        firework = Firework(FireworkType.EXPLOSION, 1, k, dict(zip(dims, point)))
        firework.quality = function(*point)
        samples.append(firework)
    return samples


def test_quadratic_elite_point() -> None:
    dims = [Dimension(Interval(-10, 10)) for _ in range(2)]
    # full factorial design: the other dimension only adds a constant to each fit
    points = [[x, y] for x in [1.0, 2.5, 5.0] for y in [-2.0, 0.0, 0.5]]
    samples = _make_samples(dims, points, lambda x, y: (x - 3) ** 2 + (y + 1) ** 2)
    strategy = EliteStrategy(dims)
    elite = strategy.create_spark(explode.EliteExplosion(2, 9, samples))
    assert elite.kind == FireworkType.ELITE
    assert not elite.has_quality
    assert elite.coordinates[dims[0]] == pytest.approx(3.0)
    assert elite.coordinates[dims[1]] == pytest.approx(-1.0)


def test_elite_point_outside_the_range() -> None:
    dim = Dimension(Interval(-1, 1))
    samples = _make_samples([dim], [[-1.0], [0.0], [0.5], [1.0]], lambda x: (x - 5) ** 2)
    elite = EliteStrategy([dim]).create_spark(explode.EliteExplosion(1, 4, samples))
    # no stationary point in the range: midpoint
    assert elite.coordinates[dim] == 0.0


def test_linear_elite_strategy() -> None:
    dim = Dimension(Interval(-10, 10))
    samples = _make_samples([dim], [[-1.0], [0.0], [2.0]], lambda x: 2 * x)
    landscapes = EliteStrategy([dim], PolynomialFit(1)).approximate_landscapes(samples)
    assert landscapes[dim](4.0) == pytest.approx(8.0)


def test_elite_errors() -> None:
    dims = [Dimension(Interval(-10, 10)) for _ in range(2)]
    strategy = EliteStrategy(dims)
    with pytest.raises(errors.InvalidArgumentError):
        strategy.create_spark(explode.EliteExplosion(1, 0, []))
    # all samples share the same coordinate along the second dimension
    samples = _make_samples(dims, [[0.0, 1.0], [1.0, 1.0], [2.0, 1.0]], lambda x, y: x ** 2)
    with pytest.raises(errors.FitError):
        strategy.create_spark(explode.EliteExplosion(1, 3, samples))
    with pytest.raises(errors.InvalidArgumentError):
        strategy.create_spark(explode.InitialExplosion(1, 3))  # type: ignore
    with pytest.raises(errors.InvalidArgumentError):
        EliteStrategy([])
