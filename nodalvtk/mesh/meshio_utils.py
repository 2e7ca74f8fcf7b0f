# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Utility functions for interoperability with meshio"""

from __future__ import annotations
from numpy import ndarray

from meshio import Mesh as MeshIOMesh
from meshio._vtk_common import vtk_to_meshio_type  # type: ignore[import]

# meshio uses the same cell-type indexing as VTK
from ._cell_type import CellType
from . import protocols


def to_meshio(mesh_fields: protocols.MeshFields) -> MeshIOMesh:
    """Convert MeshFields into a mesh of the meshio library"""
    mesh = mesh_fields.domain
    types = [ct for ct in mesh.cell_types]
    cells: list[tuple[str, ndarray]] = [
        (_to_meshio_cell_type(cell_type), mesh.connectivity(cell_type)) for cell_type in types
    ]

    cell_data: dict[str, list[ndarray]] = {}
    for name, values in mesh_fields.cell_fields:
        cell_data[name] = []
        offset = 0
        for cell_type in types:
            num_cells = len(mesh.connectivity(cell_type))
            cell_data[name].append(values[offset:offset + num_cells])
            offset += num_cells

    return MeshIOMesh(
        points=mesh.points,
        cells=cells,
        point_data={field.name: field.values for field in mesh_fields.point_fields},
        cell_data=cell_data,
    )


def _to_meshio_cell_type(cell_type: CellType) -> str:
    try:
        return vtk_to_meshio_type[cell_type.id]
    except KeyError:
        raise ValueError(f"Cell type '{cell_type.name}' is not supported by meshio") from None
