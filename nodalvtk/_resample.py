# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Application of resampling operators to nodal fields"""

from __future__ import annotations
from typing import Iterable, Tuple

from ._numpy_utils import Array, floating_dtype_of
from .exceptions import ShapeMismatch


def resample(operator: Array, field: Array) -> Array:
    """
    Apply the operator to each element (column) of a (nodes, elements) field.

    The product is computed in the floating-point precision of the field.

    Args:
        operator: the resampling operator of shape (new nodes, nodes).
        field: the nodal values of shape (nodes, elements).
    """
    if field.ndim != 2:  # noqa: PLR2004
        raise ShapeMismatch(f"Expected field of shape (nodes, elements), got {field.shape}")
    if operator.shape[1] != field.shape[0]:
        raise ShapeMismatch(
            f"Operator of shape {operator.shape} cannot be applied to a field with {field.shape[0]} nodes per element"
        )
    dtype = floating_dtype_of(field)
    return operator.astype(dtype, copy=False) @ field.astype(dtype, copy=False)


def resample_all(operator: Array, fields: Iterable[Array]) -> Tuple[Array, ...]:
    """Resample each of the given fields with the same operator"""
    return tuple(resample(operator, field) for field in fields)
