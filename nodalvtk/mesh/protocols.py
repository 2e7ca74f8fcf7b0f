# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Defines the interfaces used by the nodalvtk.mesh module"""

from __future__ import annotations
from typing import TYPE_CHECKING, Protocol, Iterable, runtime_checkable

from .._numpy_utils import Array
from ._cell_type import CellType

if TYPE_CHECKING:
    from ._mesh_fields import Field


@runtime_checkable
class Mesh(Protocol):
    """Represents a visualization mesh"""

    @property
    def points(self) -> Array:
        """Return the points of this mesh"""
        ...

    @property
    def cell_types(self) -> Iterable[CellType]:
        """Return the cell types present in this mesh"""
        ...

    def connectivity(self, cell_type: CellType) -> Array:
        """
        Return the corner indices array for the cells of the given type.

        Args:
            cell_type: The cell type for which to return the connectivity.
        """
        ...


@runtime_checkable
class MeshFields(Protocol):
    """Represents fields defined on a visualization mesh."""

    @property
    def domain(self) -> Mesh:
        """Return the mesh on which the fields are defined."""
        ...

    @property
    def point_fields(self) -> Iterable[Field]:
        """Return a range over the contained point fields."""
        ...

    @property
    def cell_fields(self) -> Iterable[tuple[str, Array]]:
        """Return a range over the cell field names and values (concatenated over all cell types)."""
        ...
