# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
from numpy.polynomial import Polynomial
import pyrotechnics.common.typing as tp
from pyrotechnics.common import errors
from pyrotechnics.model import Dimension
from pyrotechnics.model import Firework
from pyrotechnics.model import FireworkType
from . import explode
from .fitting import PolynomialFit
from .fitting import BoundedSolver
from .fitting import differentiate


class EliteStrategy:
    """Elite strategy of the 2012 paper (LS2 when the fit is of order 2).
    For each dimension, the quality of the sampled fireworks is approximated as
    a polynomial of the coordinate along this dimension, and the elite point
    coordinate is the stationary point of this approximation inside the
    dimension range (or the range midpoint if there is none).

    Parameters
    ----------
    dimensions: sequence of Dimension
        dimensions of the problem
    fit: PolynomialFit
        curve fitting method
    solver: BoundedSolver
        root finder for the derivatives of the fitted curves
    """

    generated_spark_type = FireworkType.ELITE

    def __init__(
        self,
        dimensions: tp.Sequence[Dimension],
        fit: tp.Optional[PolynomialFit] = None,
        solver: tp.Optional[BoundedSolver] = None,
    ) -> None:
        self.dimensions = tuple(dimensions)
        if not self.dimensions:
            raise errors.InvalidArgumentError("Elite strategy needs at least one dimension")
        self.fit = PolynomialFit() if fit is None else fit
        self.solver = BoundedSolver() if solver is None else solver

    def approximate_landscapes(self, fireworks: tp.Sequence[Firework]) -> tp.Dict[Dimension, Polynomial]:
        """Fitted quality as a function of the coordinate, for each dimension"""
        if not fireworks:
            raise errors.InvalidArgumentError("Elite strategy needs a non-empty sample of fireworks")
        qualities = np.array([fw.quality for fw in fireworks], dtype=float)
        landscapes = {}
        for dim in self.dimensions:
            coordinates = np.array([fw.coordinates[dim] for fw in fireworks], dtype=float)
            try:
                landscapes[dim] = self.fit.approximate(coordinates, qualities)
            except errors.FitError as e:
                raise errors.FitError(f"Could not approximate the landscape along {dim}: {e}") from e
        return landscapes

    def compute_elite_point(self, landscape: Polynomial, dimension: Dimension) -> float:
        derivative = differentiate(landscape)
        return self.solver.solve(derivative, dimension.variation_range)

    def create_spark(self, explosion: explode.EliteExplosion, birth_order: int = 0) -> Firework:
        """Creates the elite firework (with unset quality)

        Raises
        ------
        InvalidArgumentError
            if the explosion sample is empty
        FitError
            if the fit is degenerate along one of the dimensions
        """
        if not isinstance(explosion, explode.EliteExplosion):
            raise errors.InvalidArgumentError(f"Expected an EliteExplosion but got {explosion!r}")
        landscapes = self.approximate_landscapes(explosion.fireworks)
        coordinates = {dim: self.compute_elite_point(landscapes[dim], dim) for dim in self.dimensions}
        return Firework(self.generated_spark_type, explosion.step_number, birth_order, coordinates)
