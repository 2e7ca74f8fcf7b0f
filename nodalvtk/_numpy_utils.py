# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Array type used for nodal data and associated helper functions"""

from typing import Tuple, Union

import numpy as np
from numpy import ndarray
from numpy.typing import ArrayLike as np_arraylike


Array = ndarray
ArrayLike = np_arraylike


def make_zeros(shape: Tuple[int, ...], dtype=None) -> Array:
    return np.zeros(shape, dtype)


def make_array(input_array: ArrayLike, dtype=None) -> Array:
    """Make an array from the given sequence"""
    return np.array(input_array, dtype=dtype)


def as_array(input_array: Union[Array, ArrayLike]) -> Array:
    """Return an array with the values of the given input sequence"""
    if isinstance(input_array, Array):
        return input_array
    return np.asarray(input_array)


def flatten(input_array) -> Array:
    """Return the input array as flat array"""
    return input_array.flatten()


def is_floating(input_array: Array) -> bool:
    """Return true if the array stores floating-point values"""
    return bool(np.issubdtype(input_array.dtype, np.floating))


def floating_dtype_of(input_array: Array) -> np.dtype:
    """Return the dtype of floating-point arrays and float64 for all other arrays"""
    return input_array.dtype if is_floating(input_array) else np.dtype(np.float64)


def is_strictly_increasing(input_array: Array) -> bool:
    """Return true if each entry of the (flat) array is larger than its predecessor"""
    return bool(np.all(np.diff(input_array) > 0))


def all_finite(input_array: Array) -> bool:
    return bool(np.all(np.isfinite(input_array)))


def extend_to_3d(points: Array) -> Array:
    """Pad the columns of an array of points with zeros up to three coordinates"""
    if points.shape[1] == 3:  # noqa: PLR2004
        return points
    result = make_zeros((points.shape[0], 3), dtype=points.dtype)
    result[:, :points.shape[1]] = points
    return result


def concatenate(arrays) -> Array:
    return np.concatenate(arrays)
