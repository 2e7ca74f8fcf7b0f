# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""
nodalvtk writes the nodal solution data of discontinuous spectral-element solvers into visualization
meshes. The per-element nodal values are either written as they are, connecting adjacent nodes by linear
cells, or resampled on an equally spaced grid and written as one higher-order Lagrange cell per element.
This top-level module exposes the export function and the central classes in this context, operating on
the protocols defined in the "protocols" module. Implementations of these protocols can be found in the
submodules.
"""

from .__about__ import __version__

from ._export import export, Exporter, ExportStage
from ._dispatch import ExportMode, RawExport, HighOrderExport, resolve_export_mode
from .grid import Grid, brick_grid
from .exceptions import (
    ExportError,
    ShapeMismatch,
    InvalidSampleCount,
    DegenerateNodes,
    NameCountMismatch,
    DuplicateFieldName,
    WriterFailure,
)

__all__ = [
    "export",
    "Exporter",
    "ExportStage",
    "ExportMode",
    "RawExport",
    "HighOrderExport",
    "resolve_export_mode",
    "Grid",
    "brick_grid",
    "ExportError",
    "ShapeMismatch",
    "InvalidSampleCount",
    "DegenerateNodes",
    "NameCountMismatch",
    "DuplicateFieldName",
    "WriterFailure",
    "__version__",
]
