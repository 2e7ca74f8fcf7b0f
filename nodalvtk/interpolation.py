# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Polynomial interpolation operators mapping nodal values of an element onto an equally
spaced grid of sample points. The multi-dimensional operators are tensor products of
the 1d operator, which assumes nodal data to be numbered with the first axis varying fastest.
"""

from __future__ import annotations
from functools import lru_cache, reduce
from typing import Tuple

import numpy as np

from ._numpy_utils import Array, ArrayLike, as_array, make_array, is_strictly_increasing, all_finite
from .exceptions import InvalidSampleCount, DegenerateNodes


def equispaced_points(sample_count: int, dtype=np.float64) -> Array:
    """
    Return `sample_count` equally spaced points spanning [-1, 1] (both included).

    A single sample point is placed at -1.

    Args:
        sample_count: number of points (must be positive).
        dtype: the floating-point type of the points.
    """
    _check_sample_count(sample_count)
    if sample_count == 1:
        return make_array([-1.0], dtype=dtype)
    return np.linspace(-1.0, 1.0, sample_count).astype(dtype)


def interpolation_matrix(source: ArrayLike, destination: ArrayLike) -> Array:
    """
    Return the matrix of shape (len(destination), len(source)) evaluating the Lagrange
    interpolant through the source nodes at the destination points.

    The interpolant is evaluated in barycentric form. Polynomials of a degree lower than the
    number of source nodes are thus reproduced exactly (up to rounding).

    Args:
        source: the interpolation nodes (strictly increasing).
        destination: the points at which to evaluate the interpolant.
    """
    src = _as_source_nodes(source)
    dst = as_array(destination).astype(np.float64).reshape(-1)

    differences = src[:, None] - src[None, :]
    np.fill_diagonal(differences, 1.0)
    weights = 1.0/np.prod(differences, axis=1)

    matrix = np.zeros((len(dst), len(src)))
    for row, x in enumerate(dst):
        offsets = x - src
        coincident = np.flatnonzero(offsets == 0.0)
        if len(coincident) > 0:
            matrix[row, coincident[0]] = 1.0
        else:
            terms = weights/offsets
            matrix[row] = terms/np.sum(terms)
    return matrix


def tensor_product_operator(matrix_1d: ArrayLike, dimension: int) -> Array:
    """
    Return the `dimension`-fold Kronecker product of the given 1d operator with itself.

    Args:
        matrix_1d: 1d operator of shape (m, n).
        dimension: number of factors (the spatial dimension).
    """
    if dimension < 1:
        raise ValueError(f"Dimension must be positive, got {dimension}")
    matrix = as_array(matrix_1d)
    return reduce(np.kron, [matrix]*dimension)


def resampling_operator(source: ArrayLike, sample_count: int, dimension: int, dtype=np.float64) -> Array:
    """
    Return the operator of shape (sample_count^dimension, n^dimension) that maps nodal values
    on the tensor-product grid of the n source nodes to the equally spaced sample grid.

    Operators are cached per source node set, sample count, dimension and dtype. The returned
    arrays are therefore read-only.

    Args:
        source: the 1d source nodes in [-1, 1].
        sample_count: number of equally spaced sample points per axis.
        dimension: the spatial dimension.
        dtype: the floating-point type of the operator.
    """
    _check_sample_count(sample_count)
    src = _as_source_nodes(source)
    return _cached_resampling_operator(tuple(src.tolist()), int(sample_count), int(dimension), np.dtype(dtype).str)


def clear_operator_cache() -> None:
    """Drop all cached resampling operators."""
    _cached_resampling_operator.cache_clear()


@lru_cache(maxsize=32)
def _cached_resampling_operator(source: Tuple[float, ...], sample_count: int, dimension: int, dtype: str) -> Array:
    matrix_1d = interpolation_matrix(make_array(source), equispaced_points(sample_count))
    operator = tensor_product_operator(matrix_1d, dimension).astype(np.dtype(dtype))
    operator.flags.writeable = False
    return operator


def _as_source_nodes(source: ArrayLike) -> Array:
    src = as_array(source)
    if src.ndim != 1 or len(src) == 0:
        raise DegenerateNodes(f"Expected a non-empty, one-dimensional array of nodes, got shape {src.shape}")
    src = src.astype(np.float64)
    if not all_finite(src):
        raise DegenerateNodes("Interpolation nodes must be finite")
    if not is_strictly_increasing(src):
        raise DegenerateNodes(f"Interpolation nodes must be strictly increasing, got {src}")
    return src


def _check_sample_count(sample_count: int) -> None:
    if isinstance(sample_count, bool) or not isinstance(sample_count, (int, np.integer)):
        raise InvalidSampleCount(f"Number of sample points must be an integer, got {sample_count!r}")
    if sample_count < 1:
        raise InvalidSampleCount(f"Number of sample points must be positive, got {sample_count}")
