# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import math
import pyrotechnics.common.typing as tp
from pyrotechnics.common import errors
from pyrotechnics.common import tools


class Interval:
    """Immutable bounded interval of the real line.

    Parameters
    ----------
    minimum: float
        lower bound
    maximum: float
        upper bound
    minimum_open: bool
        whether the lower bound is excluded from the interval
    maximum_open: bool
        whether the upper bound is excluded from the interval

    Note
    ----
    Infinite bounds are always open.
    """

    __slots__ = ("_minimum", "_maximum", "_minimum_open", "_maximum_open")

    def __init__(self, minimum: float, maximum: float, minimum_open: bool = False, maximum_open: bool = False) -> None:
        minimum, maximum = float(minimum), float(maximum)
        if math.isnan(minimum) or math.isnan(maximum):
            raise errors.InvalidArgumentError(f"Interval bounds cannot be NaN (got {minimum}, {maximum})")
        if minimum > maximum:
            raise errors.InvalidArgumentError(f"Interval minimum {minimum} is greater than its maximum {maximum}")
        self._minimum = minimum
        self._maximum = maximum
        self._minimum_open = bool(minimum_open) or math.isinf(minimum)
        self._maximum_open = bool(maximum_open) or math.isinf(maximum)

    @classmethod
    def closed(cls, minimum: float, maximum: float) -> "Interval":
        return cls(minimum, maximum)

    @classmethod
    def open(cls, minimum: float, maximum: float) -> "Interval":
        return cls(minimum, maximum, minimum_open=True, maximum_open=True)

    @classmethod
    def from_center(cls, center: float, radius: float, open_bounds: bool = False) -> "Interval":
        """Interval [center - radius, center + radius]"""
        if radius < 0:
            raise errors.InvalidArgumentError(f"Radius must be non-negative (got {radius})")
        return cls(center - radius, center + radius, minimum_open=open_bounds, maximum_open=open_bounds)

    @property
    def minimum(self) -> float:
        return self._minimum

    @property
    def maximum(self) -> float:
        return self._maximum

    @property
    def minimum_open(self) -> bool:
        return self._minimum_open

    @property
    def maximum_open(self) -> bool:
        return self._maximum_open

    @property
    def is_open(self) -> bool:
        return self._minimum_open and self._maximum_open

    @property
    def length(self) -> float:
        return abs(self._maximum - self._minimum)

    @property
    def midpoint(self) -> float:
        return self._minimum + 0.5 * (self._maximum - self._minimum)

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self._minimum) and math.isfinite(self._maximum)

    def contains(self, value: float) -> bool:
        """Whether the value belongs to the interval, edges being compared with tolerance
        """
        if tools.is_less(value, self._minimum) or tools.is_greater(value, self._maximum):
            return False
        if self._minimum_open and tools.is_equal(value, self._minimum):
            return False
        if self._maximum_open and tools.is_equal(value, self._maximum):
            return False
        return True

    def __contains__(self, value: tp.Any) -> bool:
        if isinstance(value, Interval):
            return self.contains_interval(value)
        return self.contains(value)

    def contains_interval(self, other: "Interval") -> bool:
        """Whether both bounds of the other interval belong to this interval
        (open bounds of the other interval may match open bounds of this one)
        """
        lower_ok = self.contains(other.minimum) or (
            other.minimum_open and tools.is_equal(other.minimum, self._minimum)
        )
        upper_ok = self.contains(other.maximum) or (
            other.maximum_open and tools.is_equal(other.maximum, self._maximum)
        )
        return lower_ok and upper_ok

    def clamp(self, value: float) -> float:
        """Nearest value of [minimum, maximum]"""
        return min(max(value, self._minimum), self._maximum)

    def _key(self) -> tp.Tuple[float, float, bool, bool]:
        return (self._minimum, self._maximum, self._minimum_open, self._maximum_open)

    def __eq__(self, other: tp.Any) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        left = "(" if self._minimum_open else "["
        right = ")" if self._maximum_open else "]"
        return f"{left}{self._minimum}, {self._maximum}{right}"
