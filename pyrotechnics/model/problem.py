# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from enum import Enum
import pyrotechnics.common.typing as tp
from pyrotechnics.common import errors
from pyrotechnics.common import tools
from .interval import Interval
from .space import Dimension
from .space import Firework
from .space import Solution


Coordinates = tp.Mapping[Dimension, float]


class OptimizationTarget(Enum):
    MINIMUM = "minimum"
    MAXIMUM = "maximum"


class Problem:
    """Optimization problem: a quality function over a bounded coordinate space.

    Parameters
    ----------
    dimensions: sequence of Dimension
        ordered dimensions of the search space
    initial_ranges: dict
        range in which initial fireworks are sampled, for each dimension.
        Each of them must lie inside the variation range of its dimension.
    function: callable
        quality function, taking a mapping from dimension to coordinate
    known_solution: Solution (optional)
        known optimum, used for validation
    target: OptimizationTarget
        whether the quality must be minimized or maximized
    """

    def __init__(
        self,
        dimensions: tp.Sequence[Dimension],
        initial_ranges: tp.Mapping[Dimension, Interval],
        function: tp.QualityFunction[Coordinates],
        known_solution: tp.Optional[Solution] = None,
        target: OptimizationTarget = OptimizationTarget.MINIMUM,
    ) -> None:
        dimensions = tuple(dimensions)
        if not dimensions:
            raise errors.InvalidArgumentError("A problem needs at least one dimension")
        if len(set(dimensions)) != len(dimensions):
            raise errors.InvalidArgumentError("Dimensions must be unique")
        if set(initial_ranges) != set(dimensions):
            raise errors.InvalidArgumentError("Initial ranges must be provided for each dimension, and only for them")
        for dim in dimensions:
            if not dim.variation_range.is_finite:
                raise errors.InvalidArgumentError(f"Variation range of {dim} must be bounded")
            if not dim.variation_range.contains_interval(initial_ranges[dim]):
                raise errors.InvalidArgumentError(
                    f"Initial range {initial_ranges[dim]} is not inside the variation range of {dim}"
                )
        if not isinstance(target, OptimizationTarget):
            raise errors.InvalidArgumentError(f"Unknown optimization target {target!r}")
        self._dimensions = dimensions
        self._initial_ranges = {dim: initial_ranges[dim] for dim in dimensions}
        self._function = function
        self.known_solution = known_solution
        self.target = target
        self._num_evaluations = 0

    @property
    def dimensions(self) -> tp.Tuple[Dimension, ...]:
        return self._dimensions

    @property
    def initial_ranges(self) -> tp.Dict[Dimension, Interval]:
        return dict(self._initial_ranges)

    @property
    def num_evaluations(self) -> int:
        """int: Number of time the quality function was called."""
        return self._num_evaluations

    def evaluate(self, coordinates: Coordinates) -> float:
        """Computes the quality of a point of the search space"""
        if len(coordinates) != len(self._dimensions) or any(dim not in coordinates for dim in self._dimensions):
            raise errors.InvalidArgumentError("Coordinates must provide exactly one value per problem dimension")
        self._num_evaluations += 1
        return float(self._function(coordinates))

    def evaluate_firework(self, firework: Firework) -> None:
        """Sets the quality of the firework"""
        firework.quality = self.evaluate(firework.coordinates)

    def evaluate_fireworks(self, fireworks: tp.Iterable[Firework]) -> None:
        for firework in fireworks:
            self.evaluate_firework(firework)

    def is_better(self, quality: float, other: float) -> bool:
        """Whether quality is strictly better than other (beyond comparison tolerance)"""
        if self.target == OptimizationTarget.MINIMUM:
            return tools.is_less(quality, other)
        return tools.is_greater(quality, other)

    def get_best(self, fireworks: tp.Iterable[Firework]) -> Firework:
        """Best firework, the first one wins in case of tie"""
        best: tp.Optional[Firework] = None
        for firework in fireworks:
            if best is None:
                firework.quality  # pylint: disable=pointless-statement
                best = firework
            elif self.is_better(firework.quality, best.quality):
                best = firework
        if best is None:
            raise errors.InvalidArgumentError("Cannot select the best firework among none")
        return best

    def get_worst(self, fireworks: tp.Iterable[Firework]) -> Firework:
        """Worst firework, the first one wins in case of tie"""
        worst: tp.Optional[Firework] = None
        for firework in fireworks:
            if worst is None:
                firework.quality  # pylint: disable=pointless-statement
                worst = firework
            elif self.is_better(worst.quality, firework.quality):
                worst = firework
        if worst is None:
            raise errors.InvalidArgumentError("Cannot select the worst firework among none")
        return worst

    def sort_best_first(self, fireworks: tp.Iterable[Firework]) -> tp.List[Firework]:
        """Stable sort of the fireworks, from best to worst"""
        reverse = self.target == OptimizationTarget.MAXIMUM
        fireworks = list(fireworks)
        # python sort is stable even when reversed
        return sorted(fireworks, key=lambda fw: fw.quality, reverse=reverse)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dimension={len(self._dimensions)}, target={self.target.value})"
