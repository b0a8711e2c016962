# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .algorithm import FireworksAlgorithm
from .algorithm import FireworksSettings
from .explode import ExploderSettings
from .state import AlgorithmState
from .randomness import RandomSource
from . import stopping
from . import callbacks
