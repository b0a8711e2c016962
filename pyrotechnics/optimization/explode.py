# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Explosion model: number of sparks and amplitude of the explosion of each firework,
depending on its quality relatively to the rest of the population.
"""

import numpy as np
import pyrotechnics.common.typing as tp
from pyrotechnics.common import errors
from pyrotechnics.common.settings import Settings
from pyrotechnics.model import Firework
from pyrotechnics.model import OptimizationTarget


# guard against division by zero when all qualities are tied
EXPLOSION_EPSILON = float(np.finfo(np.float64).eps)


class ExploderSettings(Settings):
    """Immutable constants of the explosion model (2010 paper notations in brackets)

    Parameters
    ----------
    explosion_sparks_number_modifier: float
        [m] controls the total number of explosion sparks per step
    explosion_sparks_number_lower_bound: float
        [a] lower bound of the spark number, as a fraction of the modifier (0 < a < b)
    explosion_sparks_number_upper_bound: float
        [b] upper bound of the spark number, as a fraction of the modifier (a < b < 1)
    explosion_sparks_maximum_amplitude: float
        [Â] maximum explosion amplitude
    specific_sparks_per_explosion: int
        number of specific (gaussian) sparks created by an explosion whose parent was
        picked to generate some
    """

    def __init__(
        self,
        explosion_sparks_number_modifier: float = 50.0,
        explosion_sparks_number_lower_bound: float = 0.04,
        explosion_sparks_number_upper_bound: float = 0.8,
        explosion_sparks_maximum_amplitude: float = 40.0,
        specific_sparks_per_explosion: int = 1,
    ) -> None:
        if not explosion_sparks_number_modifier > 0:
            raise errors.ConfigurationError(
                f"Spark number modifier must be positive (got {explosion_sparks_number_modifier})"
            )
        if not 0 < explosion_sparks_number_lower_bound < explosion_sparks_number_upper_bound < 1:
            raise errors.ConfigurationError(
                "Spark number bounds must verify 0 < lower < upper < 1 "
                f"(got {explosion_sparks_number_lower_bound} and {explosion_sparks_number_upper_bound})"
            )
        if not explosion_sparks_maximum_amplitude > 0:
            raise errors.ConfigurationError(
                f"Maximum amplitude must be positive (got {explosion_sparks_maximum_amplitude})"
            )
        if specific_sparks_per_explosion < 0:
            raise errors.ConfigurationError(
                f"Number of specific sparks must be non-negative (got {specific_sparks_per_explosion})"
            )
        self._freeze(
            explosion_sparks_number_modifier=float(explosion_sparks_number_modifier),
            explosion_sparks_number_lower_bound=float(explosion_sparks_number_lower_bound),
            explosion_sparks_number_upper_bound=float(explosion_sparks_number_upper_bound),
            explosion_sparks_maximum_amplitude=float(explosion_sparks_maximum_amplitude),
            specific_sparks_per_explosion=int(specific_sparks_per_explosion),
        )

    explosion_sparks_number_modifier: float
    explosion_sparks_number_lower_bound: float
    explosion_sparks_number_upper_bound: float
    explosion_sparks_maximum_amplitude: float
    specific_sparks_per_explosion: int

    @property
    def min_sparks_number(self) -> float:
        return self.explosion_sparks_number_lower_bound * self.explosion_sparks_number_modifier

    @property
    def max_sparks_number(self) -> float:
        return self.explosion_sparks_number_upper_bound * self.explosion_sparks_number_modifier


# # # # # explosions # # # # #


class Explosion:
    """Base descriptor of an explosion: how many sparks to create, for which step
    """

    def __init__(self, step_number: int, sparks_number: int) -> None:
        if step_number < 0:
            raise errors.InvalidArgumentError(f"Step number must be non-negative (got {step_number})")
        if sparks_number < 0:
            raise errors.InvalidArgumentError(f"Number of sparks must be non-negative (got {sparks_number})")
        self.step_number = int(step_number)
        self.sparks_number = int(sparks_number)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(step={self.step_number}, sparks={self.sparks_number})"


class InitialExplosion(Explosion):
    """Creation of the initial fireworks"""


class FireworkExplosion(Explosion):
    """Explosion of one firework

    Parameters
    ----------
    parent: Firework
        the exploding firework
    step_number: int
        step at which the sparks are created
    amplitude: float
        spread of the explosion sparks
    sparks_number: int
        number of explosion sparks
    specific_sparks_number: int
        number of specific sparks, if the firework is selected to create some
    """

    def __init__(
        self, parent: Firework, step_number: int, amplitude: float, sparks_number: int, specific_sparks_number: int
    ) -> None:
        super().__init__(step_number, sparks_number)
        if not amplitude >= 0:
            raise errors.InvalidArgumentError(f"Amplitude must be non-negative (got {amplitude})")
        if specific_sparks_number < 0:
            raise errors.InvalidArgumentError(
                f"Number of specific sparks must be non-negative (got {specific_sparks_number})"
            )
        self.parent = parent
        self.amplitude = float(amplitude)
        self.specific_sparks_number = int(specific_sparks_number)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.parent.label}, step={self.step_number}, "
            f"amplitude={self.amplitude:.6g}, sparks={self.sparks_number}, specific={self.specific_sparks_number})"
        )


class EliteExplosion(Explosion):
    """Sample of the best fireworks used by the elite strategy"""

    def __init__(self, step_number: int, sparks_number: int, fireworks: tp.Iterable[Firework]) -> None:
        super().__init__(step_number, sparks_number)
        self.fireworks = tuple(fireworks)


# # # # # exploder # # # # #


class Exploder:
    """Computes the explosion of each firework from its quality rank within the population

    Parameters
    ----------
    settings: ExploderSettings
        constants of the explosion model
    target: OptimizationTarget
        whether lower or higher qualities are better
    """

    def __init__(
        self, settings: tp.Optional[ExploderSettings] = None, target: OptimizationTarget = OptimizationTarget.MINIMUM
    ) -> None:
        self.settings = ExploderSettings() if settings is None else settings
        self.target = target

    def _best_and_worst(self, qualities: np.ndarray) -> tp.Tuple[float, float]:
        if self.target == OptimizationTarget.MINIMUM:
            return float(np.min(qualities)), float(np.max(qualities))
        return float(np.max(qualities)), float(np.min(qualities))

    def explode(
        self, firework: Firework, qualities: tp.Iterable[float], step_number: int
    ) -> FireworkExplosion:
        """Creates the explosion of a firework

        Parameters
        ----------
        firework: Firework
            exploding firework, with its quality evaluated
        qualities: iterable of float
            qualities of all the fireworks of the population
        step_number: int
            step at which the sparks are created
        """
        values = np.array(list(qualities), dtype=float)
        if not values.size:
            raise errors.InvalidArgumentError("Cannot explode a firework without population")
        quality = firework.quality  # raises if unset
        best, worst = self._best_and_worst(values)
        return FireworkExplosion(
            firework,
            step_number,
            amplitude=self.compute_amplitude(quality, values, best),
            sparks_number=self.compute_sparks_number(quality, values, worst),
            specific_sparks_number=self.settings.specific_sparks_per_explosion,
        )

    def compute_sparks_number(self, quality: float, qualities: np.ndarray, worst: float) -> int:
        """Better fireworks create more sparks, within [a.m, b.m]"""
        settings = self.settings
        numerator = abs(worst - quality) + EXPLOSION_EPSILON
        denominator = float(np.sum(np.abs(worst - qualities) + EXPLOSION_EPSILON))
        number = settings.explosion_sparks_number_modifier * numerator / denominator
        number = min(max(number, settings.min_sparks_number), settings.max_sparks_number)
        return max(0, int(np.round(number)))

    def compute_amplitude(self, quality: float, qualities: np.ndarray, best: float) -> float:
        """Better fireworks explode within a smaller amplitude"""
        numerator = abs(quality - best) + EXPLOSION_EPSILON
        denominator = float(np.sum(np.abs(qualities - best) + EXPLOSION_EPSILON))
        return self.settings.explosion_sparks_maximum_amplitude * numerator / denominator
