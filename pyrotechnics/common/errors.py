# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.


# base classes


class PyrotechnicsError(Exception):
    """Base class for error raised by pyrotechnics"""


class PyrotechnicsWarning(Warning):
    pass


# errors
# pylint: disable=too-many-ancestors


class InvalidArgumentError(ValueError, PyrotechnicsError):
    """Malformed bounds, negative counts, size mismatches or use of an unset quality"""


class ConfigurationError(ValueError, PyrotechnicsError):
    """Inconsistent algorithm settings"""


class FitError(RuntimeError, PyrotechnicsError):
    """The curve fit of the elite strategy is degenerate (ill-conditioned)"""


# warnings


class PyrotechnicsRuntimeWarning(RuntimeWarning, PyrotechnicsWarning):
    """Runtime warning raised by pyrotechnics"""


class InefficientSettingsWarning(PyrotechnicsRuntimeWarning):
    """Algorithm settings are not optimal for the algorithm"""
