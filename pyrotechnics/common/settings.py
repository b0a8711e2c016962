# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
from . import tools


S = tp.TypeVar("S", bound="Settings")


class Settings:
    """Base class for immutable configurations.
    Subclasses validate their arguments in __init__ and store them through _freeze,
    using the argument names as attribute names (required by replace and repr).
    """

    def _freeze(self, **values: tp.Any) -> None:
        self.__dict__.update(values)

    def __setattr__(self, name: str, value: tp.Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable, use replace(...) instead")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def as_dict(self) -> tp.Dict[str, tp.Any]:
        return dict(self.__dict__)

    def replace(self: S, **kwargs: tp.Any) -> S:
        """Returns a copy of the settings with updated values"""
        config = self.as_dict()
        config.update(kwargs)
        return self.__class__(**config)

    def __eq__(self, other: tp.Any) -> bool:
        if self.__class__ != other.__class__:
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.as_dict().items())))

    def __repr__(self) -> str:
        diff = tools.different_from_defaults(instance=self)
        params = ", ".join(f"{x}={y!r}" for x, y in sorted(diff.items()))
        return f"{self.__class__.__name__}({params})"
