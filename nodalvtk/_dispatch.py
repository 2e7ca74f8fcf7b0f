# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Selection of the output topology and of the elements to be written"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union, Any

import numpy as np

from ._numpy_utils import Array, as_array
from .exceptions import InvalidSampleCount, ShapeMismatch


@dataclass(frozen=True)
class RawExport:
    """Export of the raw nodal values, connecting adjacent nodes by linear cells"""

    nodes_per_axis: int


@dataclass(frozen=True)
class HighOrderExport:
    """Export of values resampled on an equispaced grid as one Lagrange cell per element"""

    nodes_per_axis: int


ExportMode = Union[RawExport, HighOrderExport]


def resolve_export_mode(sample_count: int, native_nodes_per_axis: int) -> ExportMode:
    """
    Return the export mode for the requested number of sample points per axis.

    Args:
        sample_count: zero for raw output, otherwise the number of sample points per axis.
        native_nodes_per_axis: the number of nodes per axis of the solver's elements.
    """
    if isinstance(sample_count, bool) or not isinstance(sample_count, (int, np.integer)):
        raise InvalidSampleCount(f"Number of sample points must be an integer, got {sample_count!r}")
    if sample_count < 0:
        raise InvalidSampleCount(f"Number of sample points must be non-negative, got {sample_count}")
    if sample_count == 0:
        return RawExport(nodes_per_axis=int(native_nodes_per_axis))
    return HighOrderExport(nodes_per_axis=int(sample_count))


def real_element_indices(real_elements: Any, num_elements: int) -> Array:
    """
    Return the given set of real elements as array of 0-based element indices.

    Args:
        real_elements: unique indices, a range, a slice or a boolean mask over all elements.
        num_elements: the total number of elements (including halo elements).
    """
    if isinstance(real_elements, slice):
        return np.arange(num_elements)[real_elements]

    elements = as_array(real_elements if not isinstance(real_elements, range) else list(real_elements))
    if elements.dtype == np.bool_:
        if elements.shape != (num_elements,):
            raise ShapeMismatch(f"Element mask of shape {elements.shape} does not match {num_elements} elements")
        return np.flatnonzero(elements)

    elements = elements.reshape(-1)
    if len(elements) == 0:
        return elements.astype(np.int64)
    if not np.issubdtype(elements.dtype, np.integer):
        raise ShapeMismatch(f"Real elements must be given as integer indices, got dtype {elements.dtype}")
    if elements.min() < 0 or elements.max() >= num_elements:
        raise ShapeMismatch(f"Real element indices out of range for {num_elements} elements")
    if len(np.unique(elements)) != len(elements):
        raise ShapeMismatch(f"Real element indices must be unique, got {elements.tolist()}")
    return elements.astype(np.int64)


def select_elements(tensor: Array, element_indices: Array) -> Array:
    """Return the entries of the given elements (trailing axis) of a tensor"""
    return np.take(tensor, element_indices, axis=-1)
