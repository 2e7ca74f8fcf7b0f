# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Classes to represent fields on visualization meshes."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from .._numpy_utils import Array, as_array, concatenate
from ._cell_type import CellType

from . import protocols


@dataclass
class Field:
    """A named array of values, one per mesh point"""

    name: str
    values: Array


class MeshFields:
    """
    Represents field data on a visualization mesh.

    Args:
        mesh: The underlying mesh.
        point_data: The fields defined on the points of the mesh.
        cell_data: The field data defined on the mesh cells. The field values
                   have to be specified as a list of arrays, where each array contains
                   the values for the cells of a particular cell type. The ordering of the
                   arrays has to follow the order of the cell types as exposed by the mesh.
    """

    def __init__(
        self,
        mesh: protocols.Mesh,
        point_data: dict[str, Array] | None = None,
        cell_data: dict[str, list[Array]] | None = None,
    ) -> None:
        self._mesh = mesh
        self._point_data = (
            {} if point_data is None else {name: self._make_point_values(data) for name, data in point_data.items()}
        )
        self._cell_data = (
            {}
            if cell_data is None
            else {
                name: {
                    cell_type: self._make_cell_values(cell_type, cell_values)
                    for cell_type, cell_values in zip(mesh.cell_types, cell_data[name])
                }
                for name in cell_data
            }
        )

    @property
    def domain(self) -> protocols.Mesh:
        """Return the mesh on which these fields are defined."""
        return self._mesh

    @property
    def point_fields(self) -> Iterable[Field]:
        """Return a range over the contained point fields."""
        return (Field(name, values) for name, values in self._point_data.items())

    @property
    def cell_fields(self) -> Iterable[tuple[str, Array]]:
        """Return a range over the cell field names and their values, concatenated over all cell types."""
        return ((name, self.cell_field_values(name)) for name in self._cell_data)

    def cell_field_values(self, name: str, cell_type: CellType | None = None) -> Array:
        """
        Return the values of a cell field.

        Args:
            name: The name of the cell field.
            cell_type: The cell type for which to return the values (optional). If not given,
                       the values of all cell types are concatenated in the order of the cell types.
        """
        if cell_type is not None:
            return self._cell_data[name][cell_type]
        values = [self._cell_data[name][ct] for ct in self._mesh.cell_types]
        if len(values) == 1:
            return values[0]
        return concatenate(values)

    def _make_point_values(self, values: Array) -> Array:
        values = as_array(values)
        if values.shape[0] != self._mesh.points.shape[0]:
            raise ValueError("Length of the given point data does not match number of mesh points")
        return values

    def _make_cell_values(self, cell_type: CellType, values: Array) -> Array:
        values = as_array(values)
        if values.shape[0] != self._mesh.connectivity(cell_type).shape[0]:
            raise ValueError(f"Length of the given cell data for '{cell_type}' does not match the number of cells.")
        return values
