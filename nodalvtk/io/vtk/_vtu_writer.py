# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations
from xml.etree.ElementTree import ElementTree, SubElement, Element as XMLElement, indent
from base64 import b64encode
from sys import byteorder

import numpy as np

from ...mesh import protocols
from ..._numpy_utils import Array, make_array, concatenate, flatten, extend_to_3d

from ._helpers import cell_type_to_vtk_cell_type_index, dtype_to_vtk_type


class VTUWriter:
    """
    Writes mesh fields into a VTK unstructured grid file with inline, base64-encoded binary data.

    Higher-order hexahedra are written with the edge ordering of file version 1.0.
    """

    def __init__(self, fields: protocols.MeshFields) -> None:
        self._fields = fields

    def write(self, filename: str) -> str:
        vtkfile = XMLElement(
            "VTKFile",
            attrib={
                "type": "UnstructuredGrid",
                "version": "1.0",
                "header_type": "UInt64",
                "byte_order": ("LittleEndian" if byteorder == "little" else "BigEndian"),
            },
        )
        grid = SubElement(vtkfile, "UnstructuredGrid")
        piece = SubElement(
            grid, "Piece", attrib={"NumberOfPoints": str(self._num_points), "NumberOfCells": str(self._num_cells)}
        )

        point_data = SubElement(piece, "PointData")
        for pfield in self._fields.point_fields:
            self._make_data_array_element(point_data, pfield.name, pfield.values)
        cell_data = SubElement(piece, "CellData")
        for name, values in self._fields.cell_fields:
            self._make_data_array_element(cell_data, name, values)

        points = SubElement(piece, "Points")
        self._make_data_array_element(points, "Coordinates", values=self._points(), num_components=3)

        connectivity, offsets, types = self._cells()
        cells = SubElement(piece, "Cells")
        self._make_data_array_element(cells, "connectivity", values=connectivity, num_components=1)
        self._make_data_array_element(cells, "offsets", values=offsets, num_components=1)
        self._make_data_array_element(cells, "types", values=types, num_components=1)

        filename_with_ext = f"{filename}.vtu"
        tree = ElementTree(vtkfile)
        indent(tree, space="  ", level=0)
        tree.write(filename_with_ext, xml_declaration=False, encoding="ascii")
        return filename_with_ext

    def _make_data_array_element(
        self, parent: XMLElement, name: str, values: Array, num_components: int | None = None
    ) -> XMLElement:
        values = make_array(values)
        ncomps = self._num_components(values) if num_components is None else num_components
        elem = SubElement(
            parent,
            "DataArray",
            attrib={
                "Name": name,
                "type": dtype_to_vtk_type(values.dtype),
                "format": "binary",
                "NumberOfComponents": str(ncomps),
            },
        )
        data = flatten(values).tobytes()
        elem.text = str(b64encode(make_array([len(data)], dtype=np.uint64).tobytes() + data), encoding="ascii")
        return elem

    @property
    def _num_cells(self) -> int:
        return sum(len(self._fields.domain.connectivity(ct)) for ct in self._fields.domain.cell_types)

    @property
    def _num_points(self) -> int:
        return len(self._fields.domain.points)

    def _cells(self) -> tuple[Array, Array, Array]:
        mesh = self._fields.domain
        blocks = [(ct, mesh.connectivity(ct)) for ct in mesh.cell_types if len(mesh.connectivity(ct)) > 0]
        if not blocks:
            empty = make_array([], dtype=np.int64)
            return empty, empty, make_array([], dtype=np.uint8)

        connectivity = concatenate([corners.reshape(-1) for _, corners in blocks]).astype(np.int64)
        offsets = np.cumsum(
            concatenate([np.full(len(corners), corners.shape[1], dtype=np.int64) for _, corners in blocks])
        )
        types = concatenate([
            np.full(len(corners), cell_type_to_vtk_cell_type_index(ct), dtype=np.uint8) for ct, corners in blocks
        ])
        return connectivity, offsets, types

    def _points(self) -> Array:
        points = self._fields.domain.points
        if points.ndim == 1:
            points = points.reshape(-1, 1)
        return extend_to_3d(points)

    def _num_components(self, values: Array) -> int:
        num_components = 1
        for extent in values.shape[1:]:
            num_components *= extent
        return num_components
