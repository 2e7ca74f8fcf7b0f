# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

# see https://vtk.org/doc/nightly/html/vtkCellType_8h_source.html
_CELL_TYPE_STR_TO_INDEX = {
    "VERTEX": 1,
    "LINE": 3,
    "QUAD": 9,
    "HEXAHEDRON": 12,
    "LAGRANGE_CURVE": 68,
    "LAGRANGE_QUADRILATERAL": 70,
    "LAGRANGE_HEXAHEDRON": 72,
}

_CELL_TYPE_INDEX_TO_STR = {index: name for name, index in _CELL_TYPE_STR_TO_INDEX.items()}
