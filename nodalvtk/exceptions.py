# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Errors raised while preparing or writing an export"""


class ExportError(Exception):
    """Base class for all errors raised by nodalvtk"""


class ShapeMismatch(ExportError, ValueError):
    """Buffer extents are inconsistent with the declared dimensionality, order or component count"""


class InvalidSampleCount(ExportError, ValueError):
    """The requested number of sample points per axis is not admissible"""


class DegenerateNodes(ExportError, ValueError):
    """The source nodes of an interpolation are malformed"""


class NameCountMismatch(ExportError, ValueError):
    """The number of given field names differs from the number of fields"""


class DuplicateFieldName(ExportError, ValueError):
    """A field name occurs more than once in the exported fields"""


class WriterFailure(ExportError, IOError):
    """The mesh writer reported an error (the original error is chained)"""
