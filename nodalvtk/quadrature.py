# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Reference nodes of spectral elements"""

import numpy as np
from numpy.polynomial import legendre

from ._numpy_utils import Array, make_array, concatenate


def lgl_points(order: int, dtype=np.float64) -> Array:
    """
    Return the Legendre-Gauss-Lobatto nodes for the given polynomial order in ascending order.

    The nodes are the end points -1 and 1 plus the roots of the derivative of the Legendre
    polynomial of degree `order`. For order zero, the single node is the element center.

    Args:
        order: the polynomial order (yields order + 1 nodes).
        dtype: the floating-point type of the returned nodes.
    """
    if order < 0:
        raise ValueError(f"Polynomial order must be non-negative, got {order}")
    if order == 0:
        return make_array([0.0], dtype=dtype)

    interior = np.real(legendre.legroots(legendre.legder([0.0]*order + [1.0])))
    nodes = concatenate([make_array([-1.0]), np.sort(interior), make_array([1.0])])
    return nodes.astype(dtype)
