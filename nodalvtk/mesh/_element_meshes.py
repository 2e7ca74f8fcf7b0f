# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Construction of visualization meshes from the nodal tensors of spectral elements"""

from __future__ import annotations
from typing import Mapping, Sequence

import numpy as np

from .._numpy_utils import Array, as_array
from ._cell_type import CellTypes, linear_cell_type, lagrange_cell_type
from ._connectivity import linear_cell_connectivity, lagrange_cell_connectivity
from ._mesh import Mesh
from ._mesh_fields import MeshFields

ELEMENT_INDEX_FIELD_NAME = "element"


def raw_mesh_fields(
    coordinates: Sequence[Array], fields: Mapping[str, Array], element_indices: Sequence[int]
) -> MeshFields:
    """
    Return a mesh in which adjacent nodes of each element are connected by linear cells.

    Args:
        coordinates: the coordinate tensors of shape (n, ..., n, elements), one per axis.
        fields: the field tensors of the same shape.
        element_indices: the global indices of the elements (stored as cell data).
    """
    dimension, nodes_per_axis, num_elements = _tensor_extents(coordinates)
    if nodes_per_axis == 1:
        return _vertex_mesh_fields(coordinates, fields, element_indices)

    local = linear_cell_connectivity(nodes_per_axis, dimension)
    connectivity = _repeat_for_elements(local, nodes_per_axis**dimension, num_elements)
    mesh = Mesh(_points(coordinates), [(linear_cell_type(dimension), connectivity)])
    element_ids = np.repeat(as_array(element_indices), len(local))
    return MeshFields(mesh, point_data=_point_data(fields), cell_data={ELEMENT_INDEX_FIELD_NAME: [element_ids]})


def high_order_mesh_fields(
    coordinates: Sequence[Array], fields: Mapping[str, Array], element_indices: Sequence[int]
) -> MeshFields:
    """
    Return a mesh with one Lagrange cell per element, with its degree given by the number of nodes per axis.

    Args:
        coordinates: the coordinate tensors of shape (n, ..., n, elements), one per axis.
        fields: the field tensors of the same shape.
        element_indices: the global indices of the elements (stored as cell data).
    """
    dimension, nodes_per_axis, num_elements = _tensor_extents(coordinates)
    if nodes_per_axis == 1:
        return _vertex_mesh_fields(coordinates, fields, element_indices)

    local = lagrange_cell_connectivity(nodes_per_axis, dimension)
    connectivity = _repeat_for_elements(local[None, :], nodes_per_axis**dimension, num_elements)
    mesh = Mesh(_points(coordinates), [(lagrange_cell_type(dimension), connectivity)])
    element_ids = as_array(element_indices)
    return MeshFields(mesh, point_data=_point_data(fields), cell_data={ELEMENT_INDEX_FIELD_NAME: [element_ids]})


def _vertex_mesh_fields(
    coordinates: Sequence[Array], fields: Mapping[str, Array], element_indices: Sequence[int]
) -> MeshFields:
    num_elements = coordinates[0].shape[-1]
    mesh = Mesh(_points(coordinates), [(CellTypes.vertex, np.arange(num_elements).reshape(-1, 1))])
    return MeshFields(
        mesh,
        point_data=_point_data(fields),
        cell_data={ELEMENT_INDEX_FIELD_NAME: [as_array(element_indices)]}
    )


def _tensor_extents(coordinates: Sequence[Array]) -> tuple[int, int, int]:
    if len(coordinates) == 0:
        raise ValueError("At least one coordinate tensor is required")
    shape = coordinates[0].shape
    if any(x.shape != shape for x in coordinates):
        raise ValueError("All coordinate tensors must have the same shape")
    dimension = len(shape) - 1
    if dimension != len(coordinates):
        raise ValueError(f"Expected {len(coordinates)}-dimensional coordinate tensors, got shape {shape}")
    return dimension, (shape[0] if dimension > 0 else 1), shape[-1]


def _repeat_for_elements(local: Array, nodes_per_element: int, num_elements: int) -> Array:
    offsets = np.arange(num_elements)*nodes_per_element
    return (local[None, :, :] + offsets[:, None, None]).reshape(-1, local.shape[1])


def _flat_points(tensor: Array) -> Array:
    # nodes of an element are contiguous, with the first axis varying fastest
    return np.ravel(tensor, order="F")


def _points(coordinates: Sequence[Array]) -> Array:
    return np.stack([_flat_points(x) for x in coordinates], axis=1)


def _point_data(fields: Mapping[str, Array]) -> dict[str, Array]:
    return {name: _flat_points(values) for name, values in fields.items()}
