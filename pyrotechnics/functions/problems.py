# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Ready-made problems built on the benchmark functions of corefuncs.
The *2010 presets reproduce the test bed of the 2010 Fireworks Algorithm paper:
30 dimensions, with initial fireworks sampled far from the optimum.
"""

import numpy as np
import pyrotechnics.common.typing as tp
from pyrotechnics.common import errors
from pyrotechnics.model import Dimension
from pyrotechnics.model import Interval
from pyrotechnics.model import OptimizationTarget
from pyrotechnics.model import Problem
from pyrotechnics.model import Solution
from .corefuncs import registry


class ArrayFunction:
    """Adapts a function of a numpy array into a quality function of coordinates

    Parameters
    ----------
    function: callable
        function taking a 1d array with one value per dimension, in the dimension order
    dimensions: sequence of Dimension
        the order of the coordinates in the array
    """

    def __init__(self, function: tp.Callable[[np.ndarray], float], dimensions: tp.Sequence[Dimension]) -> None:
        self.function = function
        self.dimensions = tuple(dimensions)

    def __call__(self, coordinates: tp.Mapping[Dimension, float]) -> float:
        return float(self.function(np.array([coordinates[dim] for dim in self.dimensions], dtype=float)))

    def __repr__(self) -> str:
        name = getattr(self.function, "__name__", self.function.__class__.__name__)
        return f"{self.__class__.__name__}({name}, dimension={len(self.dimensions)})"


def create_problem(
    function: tp.Union[str, tp.Callable[[np.ndarray], float]],
    dimension: int,
    lower: float,
    upper: float,
    initial_lower: tp.Optional[float] = None,
    initial_upper: tp.Optional[float] = None,
    target: OptimizationTarget = OptimizationTarget.MINIMUM,
    known_optimum: tp.Optional[tp.ArrayLike] = None,
) -> Problem:
    """Creates a problem with the same range on every dimension

    Parameters
    ----------
    function: str or callable
        name of a registered benchmark function, or a function of a 1d array
    dimension: int
        number of dimensions
    lower: float
        lower bound of each dimension
    upper: float
        upper bound of each dimension
    initial_lower: float (optional)
        lower bound of the initial sampling, defaults to lower
    initial_upper: float (optional)
        upper bound of the initial sampling, defaults to upper
    target: OptimizationTarget
        whether the function must be minimized or maximized
    known_optimum: array-like (optional)
        coordinates of the known optimum, its quality is computed with the function
    """
    if dimension < 1:
        raise errors.InvalidArgumentError(f"Dimension must be at least 1 (got {dimension})")
    func = registry.fetch(function) if isinstance(function, str) else function
    variation_range = Interval(lower, upper)
    initial_range = Interval(
        lower if initial_lower is None else initial_lower, upper if initial_upper is None else initial_upper
    )
    dimensions = [Dimension(variation_range, name=f"x{k}") for k in range(dimension)]
    quality_function = ArrayFunction(func, dimensions)
    known_solution = None
    if known_optimum is not None:
        optimum = np.array(known_optimum, dtype=float)
        if optimum.shape != (dimension,):
            raise errors.InvalidArgumentError(f"Known optimum must have shape ({dimension},) (got {optimum.shape})")
        coordinates = dict(zip(dimensions, optimum))
        known_solution = Solution(coordinates, quality_function(coordinates))
    return Problem(
        dimensions,
        {dim: initial_range for dim in dimensions},
        quality_function,
        known_solution=known_solution,
        target=target,
    )


def sphere2010(dimension: int = 30) -> Problem:
    return create_problem("sphere", dimension, -100.0, 100.0, 30.0, 50.0, known_optimum=np.zeros(dimension))


def rosenbrock2010(dimension: int = 30) -> Problem:
    return create_problem("rosenbrock", dimension, -100.0, 100.0, 30.0, 50.0, known_optimum=np.ones(dimension))


def rastrigin2010(dimension: int = 30) -> Problem:
    return create_problem("rastrigin", dimension, -5.12, 5.12, 2.56, 5.12, known_optimum=np.zeros(dimension))


def griewank2010(dimension: int = 30) -> Problem:
    return create_problem("griewank", dimension, -600.0, 600.0, 300.0, 600.0, known_optimum=np.zeros(dimension))


def ackley2010(dimension: int = 30) -> Problem:
    return create_problem("ackley", dimension, -32.0, 32.0, 16.0, 32.0, known_optimum=np.zeros(dimension))
