# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Container for the grid information needed by exports"""

from __future__ import annotations
from typing import Sequence, Tuple, Optional
from zipfile import BadZipFile

import numpy as np

from ._numpy_utils import Array, ArrayLike, as_array, make_array, make_zeros
from .quadrature import lgl_points
from .mesh._connectivity import _locations_in


_NPZ_KEYS = ["geometry", "coordinate_ids", "polynomial_orders", "reference_points", "real_elements"]


class Grid:
    """
    Stores the geometry of a spectral-element grid in host memory.

    Args:
        geometry: buffer of shape (nodes per element, geometry components, elements).
        coordinate_ids: component indices of the x1, (x2, x3) coordinates in the geometry buffer.
        polynomial_orders: polynomial order per coordinate direction.
        reference_points: 1d reference nodes in [-1, 1] per coordinate direction.
                          Defaults to the Legendre-Gauss-Lobatto nodes of the given orders.
        real_elements: indices of the elements owned by this partition (defaults to all elements).
    """

    def __init__(self,
                 geometry: ArrayLike,
                 coordinate_ids: Sequence[int],
                 polynomial_orders: Sequence[int],
                 reference_points: Optional[Sequence[ArrayLike]] = None,
                 real_elements: Optional[ArrayLike] = None) -> None:
        self._geometry = as_array(geometry)
        self._coordinate_ids = tuple(int(i) for i in coordinate_ids)
        self._orders = tuple(int(n) for n in polynomial_orders)
        self._reference_points = (
            tuple(lgl_points(n) for n in self._orders)
            if reference_points is None
            else tuple(as_array(points) for points in reference_points)
        )
        self._real_elements = (
            np.arange(self._geometry.shape[-1]) if real_elements is None else as_array(real_elements)
        )

    @property
    def dimension(self) -> int:
        """Return the spatial dimension of the grid."""
        return len(self._orders)

    @property
    def polynomial_orders(self) -> Tuple[int, ...]:
        """Return the polynomial order per coordinate direction."""
        return self._orders

    @property
    def reference_points(self) -> Tuple[Array, ...]:
        """Return the 1d reference nodes per coordinate direction."""
        return self._reference_points

    @property
    def geometry(self) -> Array:
        """Return the geometry buffer."""
        return self._geometry

    @property
    def coordinate_ids(self) -> Tuple[int, ...]:
        """Return the component indices of the coordinates in the geometry buffer."""
        return self._coordinate_ids

    @property
    def real_elements(self) -> Array:
        """Return the indices of the elements owned by this partition."""
        return self._real_elements

    def save_npz(self, filename: str, **arrays: ArrayLike) -> None:
        """
        Save the grid (and further arrays, e.g. state buffers) into a numpy archive.

        Args:
            filename: The name of the archive.
            arrays: Further arrays to be stored in the archive.
        """
        np.savez(
            filename,
            geometry=self._geometry,
            coordinate_ids=make_array(self._coordinate_ids, dtype=np.int64),
            polynomial_orders=make_array(self._orders, dtype=np.int64),
            reference_points=np.stack(self._reference_points),
            real_elements=self._real_elements,
            **arrays
        )

    @staticmethod
    def from_npz(filename: str) -> Grid:
        """
        Read a grid from a numpy archive written by :meth:`.save_npz`.

        Args:
            filename: The name of the archive.
        """
        try:
            with np.load(filename) as archive:
                missing = [key for key in _NPZ_KEYS if key not in archive]
                if missing:
                    raise IOError(f"Archive '{filename}' does not contain the grid arrays {missing}")
                return Grid(
                    geometry=archive["geometry"],
                    coordinate_ids=archive["coordinate_ids"].tolist(),
                    polynomial_orders=archive["polynomial_orders"].tolist(),
                    reference_points=list(archive["reference_points"]),
                    real_elements=archive["real_elements"],
                )
        except BadZipFile as err:
            raise IOError(f"Archive '{filename}' is corrupt: {err}") from err


def brick_grid(order: int,
               elements_per_axis: Sequence[int],
               lower_left: Optional[Sequence[float]] = None,
               upper_right: Optional[Sequence[float]] = None,
               halo_elements: int = 0,
               dtype=np.float64) -> Grid:
    """
    Return a uniform Cartesian grid of elements with Legendre-Gauss-Lobatto nodes.

    Elements are numbered with the first axis varying fastest. The geometry buffer stores
    the (constant) Jacobian determinant in component 0 followed by the coordinates.

    Args:
        order: the polynomial order of the elements.
        elements_per_axis: the number of elements along each axis (determines the dimension).
        lower_left: the lower left corner of the domain (defaults to the origin).
        upper_right: the upper right corner of the domain (defaults to ones).
        halo_elements: number of trailing elements treated as halo, i.e. not owned by this partition.
        dtype: the floating-point type of the geometry.
    """
    dimension = len(elements_per_axis)
    lower = as_array(lower_left if lower_left is not None else [0.0]*dimension).astype(np.float64)
    upper = as_array(upper_right if upper_right is not None else [1.0]*dimension).astype(np.float64)
    spacing = (upper - lower)/as_array(elements_per_axis)

    nodes_per_axis = order + 1
    ref = lgl_points(order)
    num_elements = int(np.prod(elements_per_axis))
    if not 0 <= halo_elements <= num_elements:
        raise ValueError(f"Number of halo elements must be in [0, {num_elements}], got {halo_elements}")

    geometry = make_zeros((nodes_per_axis**dimension, dimension + 1, num_elements), dtype=dtype)
    geometry[:, 0, :] = np.prod(spacing)/2**dimension
    for element, element_location in enumerate(_locations_in(tuple(elements_per_axis))):
        for node, node_location in enumerate(_locations_in((nodes_per_axis,)*dimension)):
            for axis in range(dimension):
                local = (ref[node_location[axis]] + 1.0)/2.0
                geometry[node, axis + 1, element] = lower[axis] + (element_location[axis] + local)*spacing[axis]

    return Grid(
        geometry=geometry,
        coordinate_ids=tuple(range(1, dimension + 1)),
        polynomial_orders=(order,)*dimension,
        real_elements=np.arange(num_elements - halo_elements),
    )
