# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import inspect
import typing as tp
import pytest
import numpy as np
from pyrotechnics.model import Dimension
from pyrotechnics.model import Firework


def assert_fireworks_equal(
    actual: tp.Sequence[Firework],
    desired: tp.Sequence[Firework],
    dimensions: tp.Sequence[Dimension],
    desired_dimensions: tp.Optional[tp.Sequence[Dimension]] = None,
) -> None:
    """Asserts that both sequences hold the same fireworks (labels, coordinates and, where
    evaluated on both sides, qualities), printing both of them on failure.
    This function should only be used in tests.

    Parameters
    ----------
    actual: sequence of Firework
        fireworks to check
    desired: sequence of Firework
        reference fireworks
    dimensions: sequence of Dimension
        dimension order used for the coordinates of the actual fireworks
    desired_dimensions: sequence of Dimension (optional)
        dimension order for the desired fireworks, when they belong to another problem
    """
    desired_dimensions = dimensions if desired_dimensions is None else desired_dimensions
    try:
        np.testing.assert_equal([fw.label for fw in actual], [fw.label for fw in desired], err_msg="Wrong labels")
        np.testing.assert_array_equal(
            [fw.as_array(dimensions) for fw in actual],
            [fw.as_array(desired_dimensions) for fw in desired],
            err_msg="Wrong coordinates",
        )
        for act, des in zip(actual, desired):
            if act.has_quality and des.has_quality:
                np.testing.assert_equal(act.quality, des.quality, err_msg=f"Wrong quality for {act.label}")
    except AssertionError as e:
        print("\n" + "# " * 12 + "DEBUG MESSAGE " + "# " * 12)
        print(f"Expected: {list(desired)}\nbut got:  {list(actual)}")
        raise e


class parametrized:
    """Simplified decorator API for specifying named parametrized test with pytests

    Parameters
    ----------
    **kwargs:
        name of the argument is converted as id of the experiments, and the provided tuple
        contains a value for each of the arguments of the underlying function (in the definition order).
    """

    def __init__(self, **kwargs: tp.Tuple[tp.Any, ...]):
        self.ids = sorted(kwargs)
        self.params = tuple(kwargs[name] for name in self.ids)
        assert self.params
        self.num_params = len(self.params[0])
        assert all(isinstance(p, (tuple, list)) for p in self.params)
        assert all(self.num_params == len(p) for p in self.params[1:])

    def __call__(self, func: tp.Callable[..., None]) -> tp.Any:
        names = list(inspect.signature(func).parameters.keys())
        assert len(names) == self.num_params, f"Parameter names: {names}"
        return pytest.mark.parametrize(
            ",".join(names), self.params if self.num_params > 1 else [p[0] for p in self.params], ids=self.ids)(func)
