# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Class to represent the type of a mesh cell"""

from __future__ import annotations
from typing import List

from ._cell_type_maps import _CELL_TYPE_INDEX_TO_STR, _CELL_TYPE_STR_TO_INDEX


class CellType:
    """
    Represents the type of a mesh cell.

    Args:
        id: The cell type id (we reuse the ids of VTK, see https://vtk.org/doc/nightly/html/vtkCellType_8h_source.html).
    """

    def __init__(self, id: int) -> None:
        if id not in _CELL_TYPE_INDEX_TO_STR:
            raise ValueError(f"Unknown cell type with id '{id}'")
        self._id = id

    @property
    def id(self) -> int:
        """Return the type id of this cell type."""
        return self._id

    @property
    def name(self) -> str:
        """Return the name of this cell type."""
        return _CELL_TYPE_INDEX_TO_STR[self._id]

    def __repr__(self) -> str:
        return f"CellType('{self.name}')"

    def __hash__(self) -> int:
        return hash(self._id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellType):
            return NotImplemented
        return self._id == other._id

    @staticmethod
    def from_name(name: str) -> CellType:
        """
        Return the cell type with the given name.

        Args:
            name: The cell type name.
        """
        try:
            return CellType(_CELL_TYPE_STR_TO_INDEX[name])
        except KeyError:
            raise ValueError(f"Unknown cell type with name '{name}'") from None


class CellTypes:
    """Predefined instances of the cell types used for exports"""

    vertex = CellType.from_name("VERTEX")
    line = CellType.from_name("LINE")
    quad = CellType.from_name("QUAD")
    hexahedron = CellType.from_name("HEXAHEDRON")
    lagrange_curve = CellType.from_name("LAGRANGE_CURVE")
    lagrange_quadrilateral = CellType.from_name("LAGRANGE_QUADRILATERAL")
    lagrange_hexahedron = CellType.from_name("LAGRANGE_HEXAHEDRON")


_LINEAR_CELL_TYPES: List[CellType] = [CellTypes.line, CellTypes.quad, CellTypes.hexahedron]
_LAGRANGE_CELL_TYPES: List[CellType] = [
    CellTypes.lagrange_curve, CellTypes.lagrange_quadrilateral, CellTypes.lagrange_hexahedron
]


def linear_cell_type(dimension: int) -> CellType:
    """Return the linear cell type with a tensor-product topology in the given dimension"""
    return _LINEAR_CELL_TYPES[dimension - 1]


def lagrange_cell_type(dimension: int) -> CellType:
    """Return the Lagrange cell type with a tensor-product topology in the given dimension"""
    return _LAGRANGE_CELL_TYPES[dimension - 1]
