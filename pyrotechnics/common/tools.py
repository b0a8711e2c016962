# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import math
import inspect
import typing as tp


# Tolerance of all float comparisons: two values are equal when they differ by
# at most EPSILON, relatively to their magnitude when it is above 1.
EPSILON = 1e-10


def _tolerance(a: float, b: float) -> float:
    return EPSILON * max(1.0, abs(a), abs(b))


def is_equal(a: float, b: float) -> bool:
    """Tolerant equality (infinite values are only equal to themselves)
    """
    if a == b:
        return True
    if not (math.isfinite(a) and math.isfinite(b)):
        return False
    return abs(a - b) <= _tolerance(a, b)


def is_less(a: float, b: float) -> bool:
    """a < b, beyond the comparison tolerance
    """
    return a < b and not is_equal(a, b)


def is_greater(a: float, b: float) -> bool:
    """a > b, beyond the comparison tolerance
    """
    return a > b and not is_equal(a, b)


def compare(a: float, b: float) -> int:
    """Tolerant three-way comparison, usable with functools.cmp_to_key.
    Returns -1 if a < b, 1 if a > b and 0 if both are equal within tolerance.
    """
    if is_equal(a, b):
        return 0
    return -1 if a < b else 1


def different_from_defaults(
    *,
    instance: tp.Any,
    instance_dict: tp.Optional[tp.Dict[str, tp.Any]] = None,
) -> tp.Dict[str, tp.Any]:
    """Checks which attributes are different from defaults arguments

    Parameters
    ----------
    instance: object
        the object to check
    instance_dict: dict
        the dict corresponding to the instance arguments, if not provided it's self.__dict__

    Note
    ----
    This is convenient for short repr of settings
    """
    defaults = {
        x: y.default
        for x, y in inspect.signature(instance.__class__.__init__).parameters.items()
        if x not in ["self", "__class__"]
    }
    if instance_dict is None:
        instance_dict = instance.__dict__
    # only print non defaults
    return {x: instance_dict[x] for x, y in defaults.items() if x in instance_dict and y != instance_dict[x]}
