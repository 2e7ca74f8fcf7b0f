# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Per-component views into (node, component, element) buffers"""

from __future__ import annotations
from typing import Sequence, Tuple, Optional, Any

from ._numpy_utils import Array, as_array
from .exceptions import ShapeMismatch
from .protocols import HostBuffer

_BUFFER_RANK = 3
_SUPPORTED_DIMENSIONS = (1, 2, 3)


def as_host_array(buffer: Any) -> Array:
    """
    Return the given buffer as array in host memory.

    Args:
        buffer: An array-like or a buffer implementing the :class:`.HostBuffer` protocol.
    """
    if isinstance(buffer, HostBuffer):
        return as_array(buffer.host_array())
    return as_array(buffer)


def coordinate_views(geometry: Array, dimension: int, coordinate_ids: Sequence[int]) -> Tuple[Array, ...]:
    """
    Return views on the coordinates of the nodes, one (nodes, elements) array per axis.

    Args:
        geometry: buffer of shape (nodes per element, geometry components, elements).
        dimension: the spatial dimension.
        coordinate_ids: the component indices of the coordinates along x1, x2 and x3.
    """
    _check_buffer_rank(geometry, "geometry")
    if dimension not in _SUPPORTED_DIMENSIONS:
        raise ShapeMismatch(f"Unsupported dimension {dimension} (expected one of {_SUPPORTED_DIMENSIONS})")
    if len(coordinate_ids) < dimension:
        raise ShapeMismatch(f"Need {dimension} coordinate ids, got {len(coordinate_ids)}")

    num_components = geometry.shape[1]
    ids = tuple(int(i) for i in coordinate_ids[:dimension])
    for axis, component in enumerate(ids):
        if not 0 <= component < num_components:
            raise ShapeMismatch(
                f"Coordinate id {component} of axis {axis} is out of range "
                f"for a geometry buffer with {num_components} components"
            )
    return tuple(geometry[:, component, :] for component in ids)


def component_views(buffer: Array, num_components: Optional[int] = None) -> Tuple[Array, ...]:
    """
    Return views on the components of a buffer, one (nodes, elements) array per component.

    Args:
        buffer: buffer of shape (nodes per element, components, elements).
        num_components: the expected number of components (optional).
    """
    _check_buffer_rank(buffer, "field")
    if num_components is not None and buffer.shape[1] != num_components:
        raise ShapeMismatch(f"Expected {num_components} components, but the buffer has {buffer.shape[1]}")
    return tuple(buffer[:, component, :] for component in range(buffer.shape[1]))


def _check_buffer_rank(buffer: Array, name: str) -> None:
    if buffer.ndim != _BUFFER_RANK:
        raise ShapeMismatch(
            f"Expected {name} buffer of shape (nodes, components, elements), got shape {buffer.shape}"
        )
