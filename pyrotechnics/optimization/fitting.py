# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Numerical tools of the elite strategy: least-squares polynomial fit,
analytic differentiation and bounded root finding.
"""

import logging
import numpy as np
from numpy.polynomial import Polynomial
from scipy import optimize
import pyrotechnics.common.typing as tp
from pyrotechnics.common import errors
from pyrotechnics.model import Interval


logger = logging.getLogger(__name__)


class PolynomialFit:
    """Least-squares fit of a polynomial of given order

    Parameters
    ----------
    order: int
        order of the fitted polynomial (2 for the LS2 elite strategy)
    """

    def __init__(self, order: int = 2) -> None:
        if order < 1:
            raise errors.ConfigurationError(f"Polynomial order must be at least 1 (got {order})")
        self.order = int(order)

    def approximate(self, x: tp.ArrayLike, y: tp.ArrayLike) -> Polynomial:
        """Fits y = P(x)

        Raises
        ------
        FitError
            if there are fewer distinct abscissas than order + 1, or if the
            fit is ill-conditioned
        """
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)
        if x.ndim != 1 or x.shape != y.shape:
            raise errors.InvalidArgumentError(
                f"Abscissas and ordinates must be matching vectors ({x.shape} vs {y.shape})"
            )
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise errors.FitError("Cannot fit non-finite points")
        distinct = np.unique(x).size
        if distinct < self.order + 1:
            raise errors.FitError(f"{distinct} distinct points are not enough for a fit of order {self.order}")
        polynomial, (_, rank, _, _) = Polynomial.fit(x, y, self.order, full=True)
        if rank < self.order + 1:
            raise errors.FitError(f"Ill-conditioned fit of order {self.order} (rank {rank})")
        if not np.all(np.isfinite(polynomial.coef)):
            raise errors.FitError("Fit produced non-finite coefficients")
        return polynomial


def differentiate(polynomial: Polynomial) -> Polynomial:
    """Analytic derivative of the polynomial"""
    return polynomial.deriv()


class BoundedSolver:
    """Finds a root of a function inside an interval.
    The interval is scanned for the first sign change, which is then refined through
    Brent's method (bisection/secant/inverse quadratic interpolation hybrid).
    The midpoint is returned if no root can be bracketed.

    Parameters
    ----------
    resolution: int
        number of sub-intervals used to bracket a root
    xtol: float
        absolute tolerance on the root
    """

    def __init__(self, resolution: int = 64, xtol: float = 1e-12) -> None:
        if resolution < 1:
            raise errors.ConfigurationError(f"Resolution must be at least 1 (got {resolution})")
        self.resolution = int(resolution)
        self.xtol = xtol

    def solve(self, func: tp.Callable[[float], float], interval: Interval) -> float:
        if not interval.is_finite:
            raise errors.InvalidArgumentError(f"Cannot search roots in the unbounded interval {interval}")
        if isinstance(func, Polynomial) and not np.any(func.coef):
            logger.debug("Function is identically zero, falling back to midpoint of %s", interval)
            return interval.midpoint
        grid = np.linspace(interval.minimum, interval.maximum, self.resolution + 1)
        values = [float(func(x)) for x in grid]
        for k, (value, next_value) in enumerate(zip(values[:-1], values[1:])):
            if value == 0:
                return float(grid[k])
            if value * next_value < 0:
                return float(optimize.brentq(func, grid[k], grid[k + 1], xtol=self.xtol))
        if values[-1] == 0:
            return float(grid[-1])
        logger.debug("No root found in %s, falling back to its midpoint", interval)
        return interval.midpoint
