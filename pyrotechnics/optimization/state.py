# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import pyrotechnics.common.typing as tp
from pyrotechnics.common import errors
from pyrotechnics.model import Firework
from pyrotechnics.model import Solution


class AlgorithmState:
    """Immutable snapshot of the algorithm after a step

    Parameters
    ----------
    step_number: int
        number of steps performed so far (0 for the initial state)
    fireworks: iterable of Firework
        working set of the step, all with evaluated quality
    best_solution: Solution
        best solution of the working set
    """

    __slots__ = ("_step_number", "_fireworks", "_best_solution")

    def __init__(self, step_number: int, fireworks: tp.Iterable[Firework], best_solution: Solution) -> None:
        if step_number < 0:
            raise errors.InvalidArgumentError(f"Step number must be non-negative (got {step_number})")
        self._step_number = int(step_number)
        self._fireworks = tuple(fireworks)
        if not self._fireworks:
            raise errors.InvalidArgumentError("A state needs at least one firework")
        if not all(fw.has_quality for fw in self._fireworks):
            raise errors.InvalidArgumentError("All the fireworks of a state must have an evaluated quality")
        self._best_solution = best_solution

    @property
    def step_number(self) -> int:
        return self._step_number

    @property
    def fireworks(self) -> tp.Tuple[Firework, ...]:
        return self._fireworks

    @property
    def best_solution(self) -> Solution:
        return self._best_solution

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(step={self._step_number}, fireworks={len(self._fireworks)}, "
            f"best_quality={self._best_solution.quality:.6g})"
        )
