# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Classes and functions to build visualization meshes from spectral-element data."""

from ._mesh import Mesh
from ._cell_type import CellType, CellTypes, linear_cell_type, lagrange_cell_type
from ._mesh_fields import MeshFields
from ._connectivity import linear_cell_connectivity, lagrange_cell_connectivity
from ._element_meshes import raw_mesh_fields, high_order_mesh_fields, ELEMENT_INDEX_FIELD_NAME

__all__ = [
    "Mesh",
    "CellType",
    "CellTypes",
    "MeshFields",
    "ELEMENT_INDEX_FIELD_NAME",
    "linear_cell_type",
    "lagrange_cell_type",
    "linear_cell_connectivity",
    "lagrange_cell_connectivity",
    "raw_mesh_fields",
    "high_order_mesh_fields",
]
