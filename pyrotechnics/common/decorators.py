# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
from . import errors


X = tp.TypeVar("X")


class Registry(tp.MutableMapping[str, X]):
    """Named functions (or classes), usable as a dict and filled through the
    register decorator. Names are unique.
    """

    def __init__(self) -> None:
        super().__init__()
        self.data: tp.Dict[str, X] = {}

    def register(self, obj: X) -> X:
        """Decorator registering a function or class under its own name"""
        self.register_name(getattr(obj, "__name__", obj.__class__.__name__), obj)
        return obj

    def register_name(self, name: str, obj: X) -> None:
        if name in self.data:
            raise errors.InvalidArgumentError(f'"{name}" is already registered')
        self.data[name] = obj

    def fetch(self, name: str) -> X:
        """Same as registry[name], with an explicit error listing the available names
        """
        if name not in self.data:
            raise errors.InvalidArgumentError(f'"{name}" is not registered, choose among {sorted(self.data)}.')
        return self.data[name]

    def __getitem__(self, key: str) -> X:
        return self.data[key]

    def __setitem__(self, key: str, value: X) -> None:
        self.data[key] = value

    def __delitem__(self, key: str) -> None:
        del self.data[key]

    def __iter__(self) -> tp.Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)
