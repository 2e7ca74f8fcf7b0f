# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Definitions of the interfaces of the collaborators used by nodalvtk"""

from __future__ import annotations
from typing import Protocol, Sequence, Mapping, Tuple, runtime_checkable
from ._numpy_utils import Array, ArrayLike


@runtime_checkable
class HostBuffer(Protocol):
    """A buffer (e.g. residing on an accelerator) that can provide a host copy of its data."""

    def host_array(self) -> Array:
        """Return the data as an array in host memory."""
        ...


@runtime_checkable
class GridProvider(Protocol):
    """Provides the geometry and topology information of a spectral-element grid."""

    @property
    def dimension(self) -> int:
        """Return the spatial dimension of the grid (1, 2 or 3)."""
        ...

    @property
    def polynomial_orders(self) -> Tuple[int, ...]:
        """Return the polynomial order per coordinate direction."""
        ...

    @property
    def reference_points(self) -> Sequence[Array]:
        """Return the 1d reference node coordinates in [-1, 1] per coordinate direction."""
        ...

    @property
    def geometry(self) -> Array:
        """Return the geometry buffer of shape (nodes per element, components, elements)."""
        ...

    @property
    def coordinate_ids(self) -> Tuple[int, ...]:
        """Return the component indices of the x1, x2 and x3 coordinates in the geometry buffer."""
        ...

    @property
    def real_elements(self) -> ArrayLike:
        """Return the (0-based) indices of the elements owned by this partition."""
        ...


@runtime_checkable
class MeshWriter(Protocol):
    """
    Writes the prepared export payload into files.

    The coordinates are the `d` coordinate tensors of shape (n, ..., n, elements) and the
    fields map names to tensors of the same shape. Both only contain the real elements,
    whose global indices are given in `real_elements`. Both methods return the name of
    the written file.
    """

    def write_raw(
        self, prefix: str, coordinates: Sequence[Array], fields: Mapping[str, Array], real_elements: Array
    ) -> str:
        """Write the nodal values, connecting adjacent nodes with linear cells."""
        ...

    def write_high_order(
        self, prefix: str, coordinates: Sequence[Array], fields: Mapping[str, Array], real_elements: Array
    ) -> str:
        """Write the (resampled) values as one higher-order Lagrange cell per element."""
        ...
