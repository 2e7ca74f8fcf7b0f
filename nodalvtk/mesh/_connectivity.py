# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Connectivity of the cells within a single tensor-product element.

The nodes of an element are numbered with the first axis varying fastest,
i.e. node (i, j, k) of an element with n nodes per axis has the index i + n*j + n*n*k.
"""

from __future__ import annotations
from typing import Iterable, Tuple
from itertools import accumulate, product
from operator import mul

from .._numpy_utils import Array, make_zeros


def linear_cell_connectivity(nodes_per_axis: int, dimension: int) -> Array:
    """
    Return the corners of the linear cells connecting adjacent nodes of an element.

    The element is subdivided into (n - 1)^d lines, quadrilaterals or hexahedra, with their
    corners ordered as expected by VTK.

    Args:
        nodes_per_axis: the number of nodes per axis (n).
        dimension: the spatial dimension (d).
    """
    extents = tuple(nodes_per_axis - 1 for _ in range(dimension))
    offsets = list(accumulate((e + 1 for e in extents), mul))[:-1]
    num_cells = 1
    for e in extents:
        num_cells *= e

    def _get_p0(ituple) -> int:
        return sum(ituple[i] * (offsets[i - 1] if i > 0 else 1) for i in range(len(ituple)))

    connectivity = make_zeros(shape=(num_cells, 2**dimension), dtype=int)
    if dimension == 1:
        for cell_idx, ituple in enumerate(_locations_in(extents)):
            p0 = _get_p0(ituple)
            connectivity[cell_idx] = [p0, p0 + 1]
    elif dimension == 2:  # noqa: PLR2004
        for cell_idx, ituple in enumerate(_locations_in(extents)):
            p0 = _get_p0(ituple)
            p2 = p0 + offsets[0]
            connectivity[cell_idx] = [p0, p0 + 1, p2 + 1, p2]
    elif dimension == 3:  # noqa: PLR2004
        for cell_idx, ituple in enumerate(_locations_in(extents)):
            p0 = _get_p0(ituple)
            p2 = p0 + offsets[0]
            p5 = p0 + offsets[1]
            p7 = p5 + offsets[0]
            connectivity[cell_idx] = [p0, p0 + 1, p2 + 1, p2, p5, p5 + 1, p7 + 1, p7]
    else:
        raise ValueError(f"Unsupported dimension {dimension}")
    return connectivity


def lagrange_cell_connectivity(nodes_per_axis: int, dimension: int) -> Array:
    """
    Return the nodes of an element in the order of the VTK Lagrange cell of the same degree.

    Entry `l` of the result is the (first-axis-fastest) index of the node that VTK expects
    at local position `l`: corners first, followed by the edge, face and interior nodes.

    Args:
        nodes_per_axis: the number of nodes per axis (degree + 1, at least 2).
        dimension: the spatial dimension.
    """
    if nodes_per_axis < 2:  # noqa: PLR2004
        raise ValueError("Lagrange cells require at least two nodes per axis")
    order = nodes_per_axis - 1
    point_index = [_curve_point_index, _quadrilateral_point_index, _hexahedron_point_index][dimension - 1]
    connectivity = make_zeros(shape=(nodes_per_axis**dimension,), dtype=int)
    for node, ituple in enumerate(_locations_in(tuple(nodes_per_axis for _ in range(dimension)))):
        connectivity[point_index(ituple, order)] = node
    return connectivity


def _curve_point_index(ituple: Tuple[int, ...], order: int) -> int:
    i, = ituple
    if i == 0:
        return 0
    if i == order:
        return 1
    return 2 + (i - 1)


def _quadrilateral_point_index(ituple: Tuple[int, ...], order: int) -> int:
    i, j = ituple
    ibdy = i in (0, order)
    jbdy = j in (0, order)
    if ibdy and jbdy:
        return (2 if j else 1) if i else (3 if j else 0)

    offset = 4
    if not ibdy and jbdy:
        return offset + (i - 1) + (2*(order - 1) if j else 0)
    if ibdy and not jbdy:
        return offset + (j - 1) + ((order - 1) if i else 3*(order - 1))

    offset += 4*(order - 1)
    return offset + (i - 1) + (order - 1)*(j - 1)


def _hexahedron_point_index(ituple: Tuple[int, ...], order: int) -> int:
    i, j, k = ituple
    ibdy = i in (0, order)
    jbdy = j in (0, order)
    kbdy = k in (0, order)
    num_boundaries = int(ibdy) + int(jbdy) + int(kbdy)
    interior = order - 1

    if num_boundaries == 3:  # noqa: PLR2004
        return ((2 if j else 1) if i else (3 if j else 0)) + (4 if k else 0)

    offset = 8
    if num_boundaries == 2:  # noqa: PLR2004
        if not ibdy:
            return offset + (i - 1) + (2*interior if j else 0) + (4*interior if k else 0)
        if not jbdy:
            return offset + (j - 1) + (interior if i else 3*interior) + (4*interior if k else 0)
        # edges along the third axis in the ordering of VTU files of version 1.0
        return offset + 8*interior + (k - 1) + interior*((3 if j else 1) if i else (2 if j else 0))

    offset += 12*interior
    if num_boundaries == 1:
        if ibdy:
            return offset + (j - 1) + interior*(k - 1) + (interior*interior if i else 0)
        offset += 2*interior*interior
        if jbdy:
            return offset + (i - 1) + interior*(k - 1) + (interior*interior if j else 0)
        offset += 2*interior*interior
        return offset + (i - 1) + interior*(j - 1) + (interior*interior if k else 0)

    offset += 6*interior*interior
    return offset + (i - 1) + interior*((j - 1) + interior*(k - 1))


def _locations_in(shape: Tuple[int, ...]) -> Iterable[Tuple[int, ...]]:
    return (tuple(reversed(ituple)) for ituple in product(*list(range(n) for n in reversed(shape))))
