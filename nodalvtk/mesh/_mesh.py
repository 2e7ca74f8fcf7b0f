# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Class to represent visualization meshes"""

from __future__ import annotations
from typing import Iterable, Tuple

from .._numpy_utils import Array, ArrayLike, as_array
from ._cell_type import CellType


class Mesh:
    """
    Represents an unstructured visualization mesh.

    Args:
        points: The points of the mesh.
        connectivity: The connectivity of the grid cells, specified separately for each cell type.
    """

    def __init__(self, points: ArrayLike, connectivity: Iterable[Tuple[CellType, ArrayLike]]) -> None:
        self._points = as_array(points)
        self._corners = {_get_assert_cell_type(cell_type): as_array(corners) for cell_type, corners in connectivity}
        for cell_type, corners in self._corners.items():
            if corners.size > 0 and (corners.min() < 0 or corners.max() >= len(self._points)):
                raise ValueError(f"Connectivity of '{cell_type.name}' cells refers to non-existing points")

    @property
    def points(self) -> Array:
        """Return the points of this mesh."""
        return self._points

    @property
    def cell_types(self) -> Iterable[CellType]:
        """Return the cell types present in this mesh."""
        return self._corners.keys()

    @property
    def number_of_cells(self) -> int:
        """Return the number of cells of all types."""
        return sum(len(corners) for corners in self._corners.values())

    def connectivity(self, cell_type: CellType) -> Array:
        """
        Return the corner indices array for the cells of the given type.

        Args:
            cell_type: The cell type for which to return the connectivity.
        """
        return self._corners[cell_type]


def _get_assert_cell_type(cell_type: CellType) -> CellType:
    if not isinstance(cell_type, CellType):
        raise TypeError("Cell connectivity has to be given for instances of 'CellType'")
    return cell_type
