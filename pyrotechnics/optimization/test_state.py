# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import pytest
from pyrotechnics.common import errors
from pyrotechnics.model import Dimension
from pyrotechnics.model import Firework
from pyrotechnics.model import FireworkType
from pyrotechnics.model import Interval
from .state import AlgorithmState


def test_state() -> None:
    dim = Dimension(Interval(-1, 1))
    fireworks = [Firework(FireworkType.INITIAL, 0, k, {dim: 0.1 * k}) for k in range(3)]
    for k, fw in enumerate(fireworks):
        fw.quality = float(k)
    state = AlgorithmState(2, fireworks, fireworks[0].to_solution())
    fireworks.pop()
    assert len(state.fireworks) == 3
    assert isinstance(state.fireworks, tuple)
    assert state.step_number == 2
    assert state.best_solution.quality == 0.0
    assert repr(state) == "AlgorithmState(step=2, fireworks=3, best_quality=0)"
    with pytest.raises(AttributeError):
        state.step_number = 3  # type: ignore


def test_state_errors() -> None:
    dim = Dimension(Interval(-1, 1))
    firework = Firework(FireworkType.INITIAL, 0, 0, {dim: 0.0})
    with pytest.raises(errors.InvalidArgumentError):
        AlgorithmState(0, [firework], None)  # type: ignore
    firework.quality = 1.0
    with pytest.raises(errors.InvalidArgumentError):
        AlgorithmState(-1, [firework], firework.to_solution())
    with pytest.raises(errors.InvalidArgumentError):
        AlgorithmState(0, [], firework.to_solution())
