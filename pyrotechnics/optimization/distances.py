# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import pyrotechnics.common.typing as tp
from pyrotechnics.common import errors
from pyrotechnics.model import Dimension
from pyrotechnics.model import Firework
from pyrotechnics.model import Solution

Point = tp.Union[Firework, Solution, tp.Mapping[Dimension, float]]


def _coordinates(point: Point) -> tp.Mapping[Dimension, float]:
    if isinstance(point, (Firework, Solution)):
        return point.coordinates
    return point


class Distance(tp.Protocol):
    """Symmetric, non-negative distance between two points, zero iff coordinates are equal"""

    def distance(self, first: Point, second: Point) -> float:
        ...


class EuclideanDistance:
    """Euclidean distance over the provided dimensions

    Parameters
    ----------
    dimensions: sequence of Dimension
        dimensions to compute the distance on
    """

    def __init__(self, dimensions: tp.Sequence[Dimension]) -> None:
        self.dimensions = tuple(dimensions)
        if not self.dimensions:
            raise errors.InvalidArgumentError("Distance needs at least one dimension")

    def _as_array(self, point: Point) -> np.ndarray:
        coords = _coordinates(point)
        return np.array([coords[dim] for dim in self.dimensions], dtype=float)

    def distance(self, first: Point, second: Point) -> float:
        return float(np.linalg.norm(self._as_array(first) - self._as_array(second)))

    def __call__(self, first: Point, second: Point) -> float:
        return self.distance(first, second)

    def pairwise(self, points: tp.Sequence[Point]) -> np.ndarray:
        """Matrix of all the distances between the points"""
        data = np.array([self._as_array(p) for p in points], dtype=float).reshape(len(points), len(self.dimensions))
        diff = data[:, None, :] - data[None, :, :]
        return np.sqrt(np.sum(diff ** 2, axis=-1))  # type: ignore
