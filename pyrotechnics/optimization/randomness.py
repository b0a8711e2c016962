# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import pyrotechnics.common.typing as tp
from pyrotechnics.common import errors


class RandomSource:
    """Sequential random source all the components of the algorithm pull from.
    Each draw advances the underlying random state, so replaying a run requires
    replaying the draws in the same order.

    Parameters
    ----------
    random_state: int, np.random.RandomState or None
        seed or random state to draw from. A random seed is drawn if not provided.
    """

    def __init__(self, random_state: tp.Seed = None) -> None:
        if random_state is None:
            random_state = np.random.RandomState(np.random.randint(2 ** 32, dtype=np.uint32))
        elif not isinstance(random_state, np.random.RandomState):
            random_state = np.random.RandomState(random_state)
        self.random_state = random_state

    @classmethod
    def from_seed(cls, seed: tp.Union[int, "RandomSource", np.random.RandomState, None]) -> "RandomSource":
        """Returns the source itself if it is already a RandomSource"""
        if isinstance(seed, RandomSource):
            return seed
        return cls(seed)

    def random(self) -> float:
        """Uniform double in [0, 1)"""
        return float(self.random_state.random_sample())

    def uniform(self, low: float, high: float) -> float:
        """Uniform double in [low, high)"""
        return float(self.random_state.uniform(low, high))

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in [low, high)"""
        if high <= low:
            raise errors.InvalidArgumentError(f"Empty integer range [{low}, {high})")
        return int(self.random_state.randint(low, high))

    def boolean(self) -> bool:
        return self.random() < 0.5

    def normal(self, mean: float = 0.0, std: float = 1.0) -> float:
        return float(self.random_state.normal(mean, std))

    def unique_integers(self, k: int, low: int, high: int) -> tp.List[int]:
        """Draws k distinct integers uniformly from [low, high), through a partial
        Fisher-Yates shuffle (one integer draw per returned value).

        Parameters
        ----------
        k: int
            number of integers to draw, 0 <= k <= high - low
        low: int
            inclusive lower bound
        high: int
            exclusive upper bound
        """
        if high < low:
            raise errors.InvalidArgumentError(f"Invalid integer range [{low}, {high})")
        size = high - low
        if not 0 <= k <= size:
            raise errors.InvalidArgumentError(f"Cannot draw {k} unique integers from [{low}, {high})")
        # only the swapped positions are stored, the range is never materialized
        swapped: tp.Dict[int, int] = {}
        output: tp.List[int] = []
        for i in range(k):
            j = self.integer(i, size)
            output.append(low + swapped.get(j, j))
            swapped[j] = swapped.get(i, i)
        return output
