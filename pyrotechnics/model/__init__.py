# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .interval import Interval
from .space import Dimension
from .space import Firework
from .space import FireworkType
from .space import Solution
from .problem import OptimizationTarget
from .problem import Problem
