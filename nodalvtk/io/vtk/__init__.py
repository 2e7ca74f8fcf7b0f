# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""I/O facilities for writing meshes into VTK files"""

from ._vtu_writer import VTUWriter

__all__ = ["VTUWriter"]
