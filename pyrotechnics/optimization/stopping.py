# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Stop conditions, evaluated on the current state before each step.
They must be pure: no side effect, the same state always gives the same answer.
"""

import pyrotechnics.common.typing as tp
from pyrotechnics.common import errors
from pyrotechnics.model import Dimension
from .distances import Distance
from .distances import EuclideanDistance
from .state import AlgorithmState


class StopCondition:
    """Base class of stop conditions, which can be combined with & and |
    """

    def should_stop(self, state: AlgorithmState) -> bool:
        raise NotImplementedError

    def __call__(self, state: AlgorithmState) -> bool:
        return self.should_stop(state)

    def __and__(self, other: "StopCondition") -> "StopCondition":
        return AndStopCondition(self, other)

    def __or__(self, other: "StopCondition") -> "StopCondition":
        return OrStopCondition(self, other)


class AndStopCondition(StopCondition):
    """Stops when all of the conditions are satisfied"""

    def __init__(self, *conditions: StopCondition) -> None:
        if not conditions:
            raise errors.InvalidArgumentError("At least one condition is required")
        self.conditions = conditions

    def should_stop(self, state: AlgorithmState) -> bool:
        return all(condition.should_stop(state) for condition in self.conditions)


class OrStopCondition(StopCondition):
    """Stops as soon as one of the conditions is satisfied"""

    def __init__(self, *conditions: StopCondition) -> None:
        if not conditions:
            raise errors.InvalidArgumentError("At least one condition is required")
        self.conditions = conditions

    def should_stop(self, state: AlgorithmState) -> bool:
        return any(condition.should_stop(state) for condition in self.conditions)


class StepCountStopCondition(StopCondition):
    """Stops once max_steps steps have been performed"""

    def __init__(self, max_steps: int) -> None:
        if max_steps < 0:
            raise errors.InvalidArgumentError(f"Maximum number of steps must be non-negative (got {max_steps})")
        self.max_steps = int(max_steps)

    def should_stop(self, state: AlgorithmState) -> bool:
        return state.step_number >= self.max_steps


class QualityProximityStopCondition(StopCondition):
    """Stops once the best quality is close enough to the expected one"""

    def __init__(self, expected_quality: float, tolerance: float) -> None:
        if tolerance < 0:
            raise errors.InvalidArgumentError(f"Tolerance must be non-negative (got {tolerance})")
        self.expected_quality = expected_quality
        self.tolerance = tolerance

    def should_stop(self, state: AlgorithmState) -> bool:
        return abs(state.best_solution.quality - self.expected_quality) <= self.tolerance


class CoordinateProximityStopCondition(StopCondition):
    """Stops once the best solution is close enough to the expected coordinates

    Parameters
    ----------
    expected_coordinates: dict
        coordinates of the expected solution
    tolerance: float
        maximum distance to the expected solution
    distance: Distance (optional)
        distance to use, Euclidean by default
    """

    def __init__(
        self,
        expected_coordinates: tp.Mapping[Dimension, float],
        tolerance: float,
        distance: tp.Optional[Distance] = None,
    ) -> None:
        if tolerance < 0:
            raise errors.InvalidArgumentError(f"Tolerance must be non-negative (got {tolerance})")
        self.expected_coordinates = dict(expected_coordinates)
        self.tolerance = tolerance
        self.distance = EuclideanDistance(list(self.expected_coordinates)) if distance is None else distance

    def should_stop(self, state: AlgorithmState) -> bool:
        return self.distance.distance(state.best_solution, self.expected_coordinates) <= self.tolerance


class FunctionStopCondition(StopCondition):
    """Adapts a predicate on the state"""

    def __init__(self, predicate: tp.Callable[[AlgorithmState], bool]) -> None:
        self.predicate = predicate

    def should_stop(self, state: AlgorithmState) -> bool:
        return bool(self.predicate(state))
