# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import functools
import itertools
import numpy as np
import pyrotechnics.common.typing as tp
from pyrotechnics.common import errors
from pyrotechnics.common import tools
from pyrotechnics.model import Firework
from pyrotechnics.model import Problem
from .distances import Distance
from .distances import EuclideanDistance
from .randomness import RandomSource


class FireworkSelector:
    """Selects fireworks among a collection, without modifying it.
    Subclasses must implement `_select` which is called once the number of fireworks
    to select is known to be strictly between 0 and the number of fireworks.

    Parameters
    ----------
    locations_number: int
        default number of fireworks to select
    """

    def __init__(self, locations_number: int = 0) -> None:
        if locations_number < 0:
            raise errors.InvalidArgumentError(f"Number of locations must be non-negative (got {locations_number})")
        self.locations_number = int(locations_number)

    def select(self, fireworks: tp.Iterable[Firework], number: tp.Optional[int] = None) -> tp.List[Firework]:
        """Returns a new list of selected fireworks

        Parameters
        ----------
        fireworks: iterable of Firework
            fireworks to select from
        number: int (optional)
            number of fireworks to select, defaults to the locations number of the selector
        """
        candidates = list(fireworks)
        number = self.locations_number if number is None else number
        if number < 0:
            raise errors.InvalidArgumentError(f"Cannot select a negative number of fireworks ({number})")
        if number > len(candidates):
            raise errors.InvalidArgumentError(f"Cannot select {number} fireworks among {len(candidates)}")
        if number == len(candidates):
            return candidates
        if not number:
            return []
        return self._select(candidates, number)

    def _select(self, fireworks: tp.List[Firework], number: int) -> tp.List[Firework]:
        raise NotImplementedError


class BestFireworkSelector(FireworkSelector):
    """Selects the best fireworks, best first (earliest first in case of tie)"""

    def __init__(self, problem: Problem, locations_number: int = 0) -> None:
        super().__init__(locations_number)
        self.problem = problem

    def _select(self, fireworks: tp.List[Firework], number: int) -> tp.List[Firework]:
        return self.problem.sort_best_first(fireworks)[:number]


class RandomFireworkSelector(FireworkSelector):
    """Selects fireworks at random, keeping their input order"""

    def __init__(self, random: RandomSource, locations_number: int = 0) -> None:
        super().__init__(locations_number)
        self.random = random

    def _select(self, fireworks: tp.List[Firework], number: int) -> tp.List[Firework]:
        indices = set(self.random.unique_integers(number, 0, len(fireworks)))
        return [fw for k, fw in enumerate(fireworks) if k in indices]


class LocationSelector(FireworkSelector):
    """Selection of the locations of the next step: the best firework is always kept,
    the other locations favor fireworks which are far from the crowd (with
    probability proportional to their summed distance to all the others).
    The fireworks with the highest probabilities are kept, ties being broken by
    input order.

    Parameters
    ----------
    problem: Problem
        problem providing the best firework
    distance: Distance (optional)
        distance between fireworks, Euclidean over the problem dimensions by default
    locations_number: int
        default number of fireworks to select
    """

    def __init__(
        self, problem: Problem, distance: tp.Optional[Distance] = None, locations_number: int = 0
    ) -> None:
        super().__init__(locations_number)
        self.problem = problem
        self.distance = EuclideanDistance(problem.dimensions) if distance is None else distance

    def compute_distances(self, fireworks: tp.Sequence[Firework]) -> np.ndarray:
        """Summed distance of each firework to all the fireworks"""
        if isinstance(self.distance, EuclideanDistance):
            return np.sum(self.distance.pairwise(fireworks), axis=1)  # type: ignore
        return np.array([sum(self.distance.distance(fw, other) for other in fireworks) for fw in fireworks])

    @staticmethod
    def compute_probabilities(distances: np.ndarray) -> np.ndarray:
        total = float(np.sum(distances))
        if not total:
            return np.full(distances.shape, 1.0 / distances.size)
        return distances / total  # type: ignore

    def _select(self, fireworks: tp.List[Firework], number: int) -> tp.List[Firework]:
        best = self.problem.get_best(fireworks)
        selected = [best]
        if number > 1:
            probabilities = self.compute_probabilities(self.compute_distances(fireworks))
            # sorted is stable: equal probabilities (within tolerance) keep input order
            order = sorted(
                range(len(fireworks)),
                key=functools.cmp_to_key(lambda i, j: tools.compare(probabilities[j], probabilities[i])),
            )
            others = (fireworks[k] for k in order if fireworks[k] is not best)
            selected.extend(itertools.islice(others, number - 1))
        return selected
