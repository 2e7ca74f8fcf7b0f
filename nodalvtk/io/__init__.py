# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""I/O facilities to write exports into files."""

from __future__ import annotations

from ._writers import VTKMeshWriter, MeshioMeshWriter
from .vtk import VTUWriter

__all__ = ["VTKMeshWriter", "MeshioMeshWriter", "VTUWriter", "make_writer"]


def make_writer(extension: str = ".vtu") -> VTKMeshWriter | MeshioMeshWriter:
    """
    Return a mesh writer for files with the given extension.

    Args:
        extension: The file extension. ".vtu" files are written with the builtin VTU writer,
                   all other extensions are forwarded to meshio.
    """
    if extension.lstrip(".") == "vtu":
        return VTKMeshWriter()
    return MeshioMeshWriter(extension)
