# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .common import typing as typing
from .common import errors as errors
from .model import Interval as Interval
from .model import Dimension as Dimension
from .model import Solution as Solution
from .model import Problem as Problem
from .model import OptimizationTarget as OptimizationTarget
from .optimization import FireworksAlgorithm as FireworksAlgorithm
from .optimization import FireworksSettings as FireworksSettings
from .optimization import ExploderSettings as ExploderSettings
from .optimization import stopping as stopping
from .optimization import callbacks as callbacks
from .functions import problems as problems


__all__ = [
    "FireworksAlgorithm",
    "FireworksSettings",
    "ExploderSettings",
    "Interval",
    "Dimension",
    "Solution",
    "Problem",
    "OptimizationTarget",
    "stopping",
    "callbacks",
    "problems",
    "errors",
    "typing",
]


__version__ = "0.1.0"
