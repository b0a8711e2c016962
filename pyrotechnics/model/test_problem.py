# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import pytest
import numpy as np
from pyrotechnics.common import errors
from pyrotechnics.common import testing
from .interval import Interval
from .space import Dimension
from .space import Firework
from .space import FireworkType
from .problem import OptimizationTarget
from .problem import Problem


def _make_problem(target: OptimizationTarget = OptimizationTarget.MINIMUM) -> Problem:
    dims = [Dimension(Interval(-10, 10)) for _ in range(2)]
    return Problem(
        dims, {d: Interval(-5, 5) for d in dims}, lambda c: sum(x ** 2 for x in c.values()), target=target
    )


def _make_fireworks(problem: Problem, qualities: tp.List[float]) -> tp.List[Firework]:
    fireworks = []
    for k, quality in enumerate(qualities):
        firework = Firework(FireworkType.INITIAL, 0, k, {d: 0.0 for d in problem.dimensions})
        firework.quality = quality
        fireworks.append(firework)
    return fireworks


def test_problem_evaluation() -> None:
    problem = _make_problem()
    d0, d1 = problem.dimensions
    firework = Firework(FireworkType.INITIAL, 0, 0, {d0: 1.0, d1: 2.0})
    problem.evaluate_firework(firework)
    assert firework.quality == 5.0
    assert problem.num_evaluations == 1
    with pytest.raises(errors.InvalidArgumentError):
        problem.evaluate({d0: 1.0})
    assert problem.num_evaluations == 1


def test_problem_invalid_ranges() -> None:
    dims = [Dimension(Interval(-10, 10)) for _ in range(2)]
    with pytest.raises(errors.InvalidArgumentError):
        Problem([], {}, lambda c: 0.0)
    with pytest.raises(errors.InvalidArgumentError):
        Problem([dims[0], dims[0]], {dims[0]: Interval(0, 1)}, lambda c: 0.0)
    with pytest.raises(errors.InvalidArgumentError):
        Problem(dims, {dims[0]: Interval(0, 1)}, lambda c: 0.0)
    with pytest.raises(errors.InvalidArgumentError):
        Problem(dims, {dims[0]: Interval(0, 1), dims[1]: Interval(0, 11)}, lambda c: 0.0)


@testing.parametrized(
    upper=(Interval(0, float("inf")),),
    lower=(Interval(-float("inf"), 0),),
    both=(Interval(-float("inf"), float("inf")),),
)
def test_problem_unbounded_variation_range(variation_range: Interval) -> None:
    dim = Dimension(variation_range)
    with pytest.raises(errors.InvalidArgumentError, match="must be bounded"):
        Problem([dim], {dim: Interval(0, 0)}, lambda c: 0.0)


@testing.parametrized(
    minimum=(OptimizationTarget.MINIMUM, 1, 3, 4),
    maximum=(OptimizationTarget.MAXIMUM, 3, 1, 2),
)
def test_best_and_worst(target: OptimizationTarget, best_index: int, worst_index: int, last_index: int) -> None:
    problem = _make_problem(target)
    fireworks = _make_fireworks(problem, [2.0, 1.0, 1.0, 5.0, 5.0, 2.0])
    assert problem.get_best(fireworks) is fireworks[best_index]
    assert problem.get_worst(fireworks) is fireworks[worst_index]
    ordered = problem.sort_best_first(fireworks)
    assert ordered[0] is fireworks[best_index]
    assert ordered[-1] is fireworks[last_index]


def test_best_requires_qualities() -> None:
    problem = _make_problem()
    firework = Firework(FireworkType.INITIAL, 0, 0, {d: 0.0 for d in problem.dimensions})
    with pytest.raises(errors.InvalidArgumentError):
        problem.get_best([firework])
    with pytest.raises(errors.InvalidArgumentError):
        problem.get_best([])
    with pytest.raises(errors.InvalidArgumentError):
        problem.get_worst([])


def test_is_better() -> None:
    problem = _make_problem()
    assert problem.is_better(1.0, 2.0)
    assert not problem.is_better(1.0, 1.0)
    assert not problem.is_better(1.0, 1.0 + 1e-13)
    problem = _make_problem(OptimizationTarget.MAXIMUM)
    assert problem.is_better(2.0, 1.0)
    np.testing.assert_equal(repr(problem), "Problem(dimension=2, target=maximum)")
