# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import itertools
from enum import Enum
from types import MappingProxyType
import numpy as np
import pyrotechnics.common.typing as tp
from pyrotechnics.common import errors
from .interval import Interval


class Dimension:
    """One axis of the search space, with the range its coordinates must lie in.
    Dimensions are compared and hashed by identity: two dimensions with the same
    range are still two different dimensions.

    Parameters
    ----------
    variation_range: Interval
        range of the coordinates along this dimension
    name: str (optional)
        name used in representations
    """

    _counter = itertools.count()

    __slots__ = ("_variation_range", "_name", "_index")

    def __init__(self, variation_range: Interval, name: tp.Optional[str] = None) -> None:
        if not isinstance(variation_range, Interval):
            raise errors.InvalidArgumentError(f"Expected an Interval but got {variation_range!r}")
        self._variation_range = variation_range
        self._index = next(self._counter)
        self._name = name if name is not None else f"x{self._index}"

    @property
    def variation_range(self) -> Interval:
        return self._variation_range

    @property
    def name(self) -> str:
        return self._name

    def contains(self, value: float) -> bool:
        return self._variation_range.contains(value)

    def __repr__(self) -> str:
        return f"Dimension({self._name}: {self._variation_range})"


class FireworkType(Enum):
    """How a firework was created"""

    INITIAL = "initial"
    EXPLOSION = "explosion"
    SPECIFIC = "specific"
    ELITE = "elite"


class Solution:
    """Immutable (coordinates, quality) pair, the reported answer of an optimization
    """

    __slots__ = ("_coordinates", "_quality")

    def __init__(self, coordinates: tp.Mapping[Dimension, float], quality: float) -> None:
        self._coordinates: tp.Mapping[Dimension, float] = MappingProxyType(
            {dim: float(value) for dim, value in coordinates.items()}
        )
        self._quality = float(quality)

    @property
    def coordinates(self) -> tp.Mapping[Dimension, float]:
        return self._coordinates

    @property
    def quality(self) -> float:
        return self._quality

    def as_array(self, dimensions: tp.Sequence[Dimension]) -> np.ndarray:
        return np.array([self._coordinates[dim] for dim in dimensions], dtype=float)

    def __eq__(self, other: tp.Any) -> bool:
        if not isinstance(other, Solution):
            return NotImplemented
        return self._quality == other._quality and dict(self._coordinates) == dict(other._coordinates)

    def __hash__(self) -> int:
        return hash((self._quality, tuple(self._coordinates.values())))

    def __repr__(self) -> str:
        coords = ", ".join(f"{dim.name}={value:.6g}" for dim, value in self._coordinates.items())
        return f"Solution(quality={self._quality:.6g}, {coords})"


class Firework:
    """A point of the search space considered at a given step (a firework, or a spark
    before it is selected). The quality is unset at creation and must be assigned
    after evaluating the point on the problem.

    Parameters
    ----------
    kind: FireworkType
        how the firework was created
    step_born: int
        step at which the firework was created
    birth_order: int
        index of the firework among the sparks of the same explosion
    coordinates: dict
        one coordinate for each dimension of the problem
    """

    __slots__ = ("_kind", "_step_born", "_birth_order", "_coordinates", "_quality")

    def __init__(
        self, kind: FireworkType, step_born: int, birth_order: int, coordinates: tp.Mapping[Dimension, float]
    ) -> None:
        if not isinstance(kind, FireworkType):
            raise errors.InvalidArgumentError(f"Unknown firework type {kind!r}")
        if step_born < 0:
            raise errors.InvalidArgumentError(f"Step number must be non-negative (got {step_born})")
        if birth_order < 0:
            raise errors.InvalidArgumentError(f"Birth order must be non-negative (got {birth_order})")
        if not coordinates:
            raise errors.InvalidArgumentError("A firework needs at least one coordinate")
        self._kind = kind
        self._step_born = int(step_born)
        self._birth_order = int(birth_order)
        self._coordinates: tp.Mapping[Dimension, float] = MappingProxyType(
            {dim: float(value) for dim, value in coordinates.items()}
        )
        self._quality: tp.Optional[float] = None

    @property
    def kind(self) -> FireworkType:
        return self._kind

    @property
    def step_born(self) -> int:
        return self._step_born

    @property
    def birth_order(self) -> int:
        return self._birth_order

    @property
    def coordinates(self) -> tp.Mapping[Dimension, float]:
        """Read-only mapping from dimension to coordinate"""
        return self._coordinates

    @property
    def has_quality(self) -> bool:
        return self._quality is not None

    @property
    def quality(self) -> float:
        """Quality of the firework, raises if it was not evaluated yet"""
        if self._quality is None:
            raise errors.InvalidArgumentError(f"Quality of {self.label} has not been evaluated")
        return self._quality

    @quality.setter
    def quality(self, value: float) -> None:
        self._quality = float(value)

    @property
    def label(self) -> str:
        return f"{self._kind.value}:{self._step_born}.{self._birth_order}"

    def as_array(self, dimensions: tp.Sequence[Dimension]) -> np.ndarray:
        """Coordinates as a vector, in the order of the provided dimensions"""
        return np.array([self._coordinates[dim] for dim in dimensions], dtype=float)

    def to_solution(self) -> Solution:
        return Solution(self._coordinates, self.quality)

    def __repr__(self) -> str:
        quality = "unset" if self._quality is None else f"{self._quality:.6g}"
        return f"Firework<{self.label}, quality: {quality}>"
