# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Mesh writers for the payload of exports"""

from __future__ import annotations
from typing import Mapping, Sequence

from .._numpy_utils import Array
from ..mesh import MeshFields, raw_mesh_fields, high_order_mesh_fields
from .vtk import VTUWriter


class _MeshWriterBase:
    def write_raw(
        self, prefix: str, coordinates: Sequence[Array], fields: Mapping[str, Array], real_elements: Array
    ) -> str:
        """Write the nodal values, connecting adjacent nodes with linear cells."""
        return self._write(raw_mesh_fields(coordinates, fields, real_elements), prefix)

    def write_high_order(
        self, prefix: str, coordinates: Sequence[Array], fields: Mapping[str, Array], real_elements: Array
    ) -> str:
        """Write the (resampled) values as one higher-order Lagrange cell per element."""
        return self._write(high_order_mesh_fields(coordinates, fields, real_elements), prefix)

    def _write(self, mesh_fields: MeshFields, prefix: str) -> str:
        raise NotImplementedError("Mesh writer does not implement _write()")


class VTKMeshWriter(_MeshWriterBase):
    """Writes exports into VTK unstructured grid files (.vtu)."""

    def _write(self, mesh_fields: MeshFields, prefix: str) -> str:
        return VTUWriter(mesh_fields).write(prefix)


class MeshioMeshWriter(_MeshWriterBase):
    """
    Writes exports into any file format supported by meshio.

    Args:
        extension: The file extension, which determines the format (e.g. ".xdmf").
        file_format: The meshio file format (optional, deduced from the extension if not given).
    """

    def __init__(self, extension: str, file_format: str | None = None) -> None:
        self._extension = extension if extension.startswith(".") else f".{extension}"
        self._file_format = file_format

    def _write(self, mesh_fields: MeshFields, prefix: str) -> str:
        from ..mesh import meshio_utils

        filename = f"{prefix}{self._extension}"
        meshio_utils.to_meshio(mesh_fields).write(filename, file_format=self._file_format)
        return filename
