# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Spark generators: each of them turns one kind of explosion into new fireworks
(with unset quality).
"""

import math
import pyrotechnics.common.typing as tp
from pyrotechnics.common import errors
from pyrotechnics.model import Dimension
from pyrotechnics.model import Firework
from pyrotechnics.model import FireworkType
from pyrotechnics.model import Interval
from . import explode
from .randomness import RandomSource
from .elite import EliteStrategy

E = tp.TypeVar("E", bound=explode.Explosion)


def wrap_into_range(value: float, variation_range: Interval) -> float:
    """Maps an out-of-range value back into the range:
    minimum + mod(|value - minimum|, length)
    Values already inside the range are returned unchanged. A wrapped value landing
    on an open bound is replaced by the midpoint of the range.
    """
    if variation_range.contains(value):
        return value
    length = variation_range.length
    if not length:
        return variation_range.minimum
    wrapped = variation_range.minimum + math.fmod(abs(value - variation_range.minimum), length)
    if not variation_range.contains(wrapped):
        return variation_range.midpoint
    return wrapped


class SparkGenerator(tp.Generic[E]):
    """Base class of spark generators, creating sparks from one type of explosion.
    Subclasses must override `create_spark`.
    """

    generated_spark_type = FireworkType.EXPLOSION
    explosion_type: tp.Type[explode.Explosion] = explode.Explosion

    def _check(self, explosion: explode.Explosion) -> E:
        if not isinstance(explosion, self.explosion_type):
            raise errors.InvalidArgumentError(
                f"{self.__class__.__name__} expects a {self.explosion_type.__name__} but got {explosion!r}"
            )
        return explosion  # type: ignore

    def _sparks_number(self, explosion: E) -> int:
        return explosion.sparks_number

    def create_sparks(self, explosion: explode.Explosion) -> tp.List[Firework]:
        """Creates all the sparks of the explosion, their birth order being their index"""
        checked = self._check(explosion)
        return [self.create_spark(checked, birth_order) for birth_order in range(self._sparks_number(checked))]

    def create_spark(self, explosion: E, birth_order: int) -> Firework:
        raise NotImplementedError


class InitialSparkGenerator(SparkGenerator[explode.InitialExplosion]):
    """Initial fireworks, sampled uniformly in the initial range of each dimension

    Parameters
    ----------
    dimensions: sequence of Dimension
        dimensions of the problem
    initial_ranges: dict
        range to sample from, for each dimension
    random: RandomSource
        random source to draw from
    """

    generated_spark_type = FireworkType.INITIAL
    explosion_type = explode.InitialExplosion

    def __init__(
        self, dimensions: tp.Sequence[Dimension], initial_ranges: tp.Mapping[Dimension, Interval], random: RandomSource
    ) -> None:
        missing = [dim for dim in dimensions if dim not in initial_ranges]
        if missing:
            raise errors.InvalidArgumentError(f"Missing initial ranges for {missing}")
        self.dimensions = tuple(dimensions)
        self.initial_ranges = {dim: initial_ranges[dim] for dim in self.dimensions}
        self.random = random

    def create_spark(self, explosion: explode.InitialExplosion, birth_order: int) -> Firework:
        coordinates = {}
        for dim in self.dimensions:
            interval = self.initial_ranges[dim]
            coordinates[dim] = self.random.uniform(interval.minimum, interval.maximum)
        return Firework(self.generated_spark_type, explosion.step_number, birth_order, coordinates)


class _PerturbationSparkGenerator(SparkGenerator[explode.FireworkExplosion]):
    """Sparks copying their parent except on a random non-empty subset of dimensions
    """

    explosion_type = explode.FireworkExplosion

    def __init__(self, dimensions: tp.Sequence[Dimension], random: RandomSource) -> None:
        self.dimensions = tuple(dimensions)
        if not self.dimensions:
            raise errors.InvalidArgumentError("Spark generation needs at least one dimension")
        self.random = random

    def select_dimensions(self) -> tp.List[Dimension]:
        """Each dimension is selected with probability 0.5, one is forced if none was"""
        selected = [dim for dim in self.dimensions if self.random.boolean()]
        if not selected:
            selected = [self.dimensions[self.random.integer(0, len(self.dimensions))]]
        return selected

    def _draw_common(self) -> float:
        """Draw shared by all the selected dimensions of a spark"""
        return 0.0

    def _shift(self, dimension: Dimension, value: float, explosion: explode.FireworkExplosion, common: float) -> float:
        raise NotImplementedError

    def create_spark(self, explosion: explode.FireworkExplosion, birth_order: int) -> Firework:
        coordinates = dict(explosion.parent.coordinates)
        selected = self.select_dimensions()
        common = self._draw_common()
        for dim in selected:
            value = self._shift(dim, coordinates[dim], explosion, common)
            coordinates[dim] = wrap_into_range(value, dim.variation_range)
        return Firework(self.generated_spark_type, explosion.step_number, birth_order, coordinates)


class ExplosionSparkGenerator(_PerturbationSparkGenerator):
    """Explosion sparks: each selected coordinate is shifted by amplitude * U(-1, 1)
    """

    generated_spark_type = FireworkType.EXPLOSION

    def _shift(self, dimension: Dimension, value: float, explosion: explode.FireworkExplosion, common: float) -> float:
        return value + explosion.amplitude * self.random.uniform(-1.0, 1.0)


class GaussianSparkGenerator(_PerturbationSparkGenerator):
    """Specific sparks: the offset of each selected coordinate to the center of its
    range is scaled by a common N(1, 1) coefficient
    """

    generated_spark_type = FireworkType.SPECIFIC

    def _sparks_number(self, explosion: explode.FireworkExplosion) -> int:
        return explosion.specific_sparks_number

    def _draw_common(self) -> float:
        return self.random.normal(1.0, 1.0)

    def _shift(self, dimension: Dimension, value: float, explosion: explode.FireworkExplosion, common: float) -> float:
        center = dimension.variation_range.midpoint
        return center + common * (value - center)


class EliteSparkGenerator(SparkGenerator[explode.EliteExplosion]):
    """One spark per elite explosion, located by the elite strategy

    Parameters
    ----------
    strategy: EliteStrategy
        strategy computing the coordinates of the elite point
    """

    generated_spark_type = FireworkType.ELITE
    explosion_type = explode.EliteExplosion

    def __init__(self, strategy: EliteStrategy) -> None:
        self.strategy = strategy

    def _sparks_number(self, explosion: explode.EliteExplosion) -> int:
        return 1

    def create_spark(self, explosion: explode.EliteExplosion, birth_order: int) -> Firework:
        return self.strategy.create_spark(explosion, birth_order)
