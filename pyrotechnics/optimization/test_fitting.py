# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import pytest
import numpy as np
from numpy.polynomial import Polynomial
from pyrotechnics.common import errors
from pyrotechnics.common import testing
from pyrotechnics.model import Interval
from . import fitting


def test_polynomial_fit() -> None:
    x = np.array([-2.0, -1.0, 0.0, 1.5, 3.0])
    polynomial = fitting.PolynomialFit(2).approximate(x, 2 * x ** 2 - 3 * x + 1)
    np.testing.assert_almost_equal(polynomial.convert().coef, [1, -3, 2])
    derivative = fitting.differentiate(polynomial)
    assert derivative(0.75) == pytest.approx(0.0, abs=1e-9)


@testing.parametrized(
    duplicated=([1.0, 1.0, 2.0, 2.0], [0.0, 1.0, 2.0, 3.0]),
    too_few=([1.0, 2.0], [0.0, 1.0]),
    infinite=([1.0, 2.0, np.inf], [0.0, 1.0, 2.0]),
)
def test_polynomial_fit_errors(x: list, y: list) -> None:
    with pytest.raises(errors.FitError):
        fitting.PolynomialFit(2).approximate(x, y)


def test_polynomial_fit_invalid() -> None:
    with pytest.raises(errors.ConfigurationError):
        fitting.PolynomialFit(0)
    with pytest.raises(errors.InvalidArgumentError):
        fitting.PolynomialFit(1).approximate([1.0, 2.0], [1.0, 2.0, 3.0])


@testing.parametrized(
    linear=(Polynomial([-3.0, 1.0]), 3.0),
    quadratic=(Polynomial([4.0, 0.0, -1.0]), -2.0),  # first root in the range
    on_bound=(Polynomial([10.0, 1.0]), -10.0),
    no_root=(Polynomial([1.0, 0.0, 1.0]), 0.0),
    zero=(Polynomial([0.0]), 0.0),
)
def test_bounded_solver(polynomial: Polynomial, expected: float) -> None:
    root = fitting.BoundedSolver().solve(polynomial, Interval(-10, 10))
    assert root == pytest.approx(expected, abs=1e-9)


def test_bounded_solver_unbounded_interval() -> None:
    with pytest.raises(errors.InvalidArgumentError):
        fitting.BoundedSolver().solve(lambda x: x, Interval(0, float("inf")))
    with pytest.raises(errors.ConfigurationError):
        fitting.BoundedSolver(resolution=0)
