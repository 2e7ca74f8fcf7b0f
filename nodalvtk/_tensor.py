# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Reinterpretation of flat nodal fields as tensors and naming of fields.

Nodes of an element are numbered with the first axis varying fastest, i.e. node
(i, j, k) has the flat index i + n*j + n*n*k. Tensors thus use Fortran ordering
for the node axes, and the element axis is the trailing one.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Sequence

from ._numpy_utils import Array
from .exceptions import ShapeMismatch, NameCountMismatch, DuplicateFieldName


def to_tensor(field: Array, nodes_per_axis: int, dimension: int) -> Array:
    """
    Reshape a (n^d, elements) field into a (n, ..., n, elements) tensor without reordering the data.

    Args:
        field: the flat nodal values.
        nodes_per_axis: the number of nodes along each axis (n).
        dimension: the spatial dimension (d).
    """
    expected_nodes = nodes_per_axis**dimension
    if field.ndim != 2 or field.shape[0] != expected_nodes:  # noqa: PLR2004
        raise ShapeMismatch(
            f"Expected a field with {expected_nodes} = {nodes_per_axis}^{dimension} "
            f"nodes per element, got shape {field.shape}"
        )
    return field.reshape((nodes_per_axis,)*dimension + (field.shape[1],), order="F")


def flatten_tensor(tensor: Array) -> Array:
    """Inverse of :meth:`to_tensor`: reshape a (n, ..., n, elements) tensor into a (n^d, elements) field."""
    num_nodes = 1
    for extent in tensor.shape[:-1]:
        num_nodes *= extent
    return tensor.reshape((num_nodes, tensor.shape[-1]), order="F")


def field_names(count: int, names: Optional[Sequence[str]] = None, default_prefix: str = "Q") -> List[str]:
    """
    Return the names for `count` fields.

    Args:
        count: the number of fields.
        names: user-given names (optional). If not given, the fields are named after their
               1-based position, i.e. prefix1, prefix2, ...
        default_prefix: the prefix of the default names.
    """
    if names is None:
        return [f"{default_prefix}{i}" for i in range(1, count + 1)]
    names = [str(name) for name in names]
    if len(names) != count:
        raise NameCountMismatch(f"Got {len(names)} names for {count} fields: {names}")
    return names


def named_fields(
    state: Sequence[Array],
    state_names: Optional[Sequence[str]] = None,
    aux: Sequence[Array] = (),
    aux_names: Optional[Sequence[str]] = None,
) -> Dict[str, Array]:
    """
    Return a mapping from field name to field, with the auxiliary fields following the state fields.

    Args:
        state: the state fields.
        state_names: names of the state fields (defaults to Q1, Q2, ...).
        aux: the auxiliary fields.
        aux_names: names of the auxiliary fields (defaults to aux1, aux2, ...).
    """
    result: Dict[str, Array] = {}
    named = zip(
        field_names(len(state), state_names, "Q") + field_names(len(aux), aux_names, "aux"),
        list(state) + list(aux)
    )
    for name, field in named:
        if name in result:
            raise DuplicateFieldName(f"Field name '{name}' is used more than once")
        result[name] = field
    return result
