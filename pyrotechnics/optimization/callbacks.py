# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
import pyrotechnics.common.typing as tp
from pyrotechnics.common import errors
from .state import AlgorithmState

global_logger = logging.getLogger(__name__)


class _IntervalCallback:
    def __init__(self, interval_steps: int) -> None:
        if interval_steps < 1:
            raise errors.InvalidArgumentError(f"Step interval must be at least 1 (got {interval_steps})")
        self._interval_steps = int(interval_steps)

    def _is_due(self, state: AlgorithmState) -> bool:
        return not state.step_number % self._interval_steps


# -------------------------------------------------------------------------------------


class StepPrinter(_IntervalCallback):
    """Printer to register as "step" callback in an algorithm, for printing
    the best solution regularly.

    Parameters
    ----------
    print_interval_steps: int
        number of steps between two prints
    """

    def __init__(self, print_interval_steps: int = 1) -> None:
        super().__init__(print_interval_steps)

    def __call__(self, algorithm: tp.Any, state: AlgorithmState) -> None:
        if self._is_due(state):
            print(f"After step {state.step_number}, best solution is {state.best_solution}")


# -------------------------------------------------------------------------------------


class StepLogger(_IntervalCallback):
    """Logger to register as "step" callback in an algorithm, for logging
    the best solution regularly.

    Parameters
    ----------
    logger:
        given logger that callback will use to log
    log_level:
        log level that logger will write to
    log_interval_steps: int
        number of steps between two logs
    """

    def __init__(
        self, *, logger: logging.Logger = global_logger, log_level: int = logging.INFO, log_interval_steps: int = 1
    ) -> None:
        super().__init__(log_interval_steps)
        self._logger = logger
        self._log_level = log_level

    def __call__(self, algorithm: tp.Any, state: AlgorithmState) -> None:
        if self._is_due(state):
            self._logger.log(
                self._log_level,
                "After step %s (%s evaluations), best solution is %s",
                state.step_number,
                algorithm.num_evaluations,
                state.best_solution,
            )


# -------------------------------------------------------------------------------------


class QualityHistory:
    """Records the best quality of each state

    Example
    -------

    .. code-block:: python

        history = QualityHistory()
        algorithm.register_callback("step", history)
        algorithm.solve()
        history.qualities  # one value per step, starting with the initial state
    """

    def __init__(self) -> None:
        self.steps: tp.List[int] = []
        self.qualities: tp.List[float] = []

    def __call__(self, algorithm: tp.Any, state: AlgorithmState) -> None:
        self.steps.append(state.step_number)
        self.qualities.append(state.best_solution.quality)

    def __len__(self) -> int:
        return len(self.qualities)
