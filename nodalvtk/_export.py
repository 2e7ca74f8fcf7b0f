# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Export of nodal solution data of spectral-element grids into visualization meshes"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from ._numpy_utils import Array, floating_dtype_of
from ._accessor import as_host_array, coordinate_views, component_views
from ._dispatch import ExportMode, RawExport, HighOrderExport
from ._dispatch import resolve_export_mode, real_element_indices, select_elements
from ._resample import resample_all
from ._tensor import to_tensor, field_names as make_field_names, named_fields
from .interpolation import resampling_operator
from .exceptions import ShapeMismatch, WriterFailure
from .logging import Logger, LoggableBase
from .protocols import GridProvider, MeshWriter


class ExportStage(Enum):
    idle = "idle"
    preparing = "preparing"
    resampling = "resampling"
    reshaping = "reshaping"
    writing = "writing"
    done = "done"

    def __str__(self) -> str:
        return str(self.value)


class _Payload:
    """Intermediate arrays of a single export, shaped (nodes, elements)"""

    def __init__(self,
                 coordinates: Tuple[Array, ...],
                 state: Tuple[Array, ...],
                 aux: Tuple[Array, ...]) -> None:
        self.coordinates = coordinates
        self.state = state
        self.aux = aux


class Exporter(LoggableBase):
    """
    Prepares the nodal data of a grid for output and passes it to a mesh writer.

    An export runs through the stages preparing, resampling (only if sample points are
    requested), reshaping and writing. Errors abort the export in the stage they occur in,
    such that the writer is never invoked with inconsistent data. Nothing is retried.

    Args:
        writer: The mesh writer to be used (defaults to :class:`.VTKMeshWriter`).
    """

    def __init__(self, writer: Optional[MeshWriter] = None) -> None:
        super().__init__()
        if writer is None:
            from .io import VTKMeshWriter
            writer = VTKMeshWriter()
        self._writer = writer
        self._stage = ExportStage.idle

    @property
    def stage(self) -> ExportStage:
        """Return the stage of the current (or last) export."""
        return self._stage

    def export(self,
               prefix: str,
               state: Any,
               grid: GridProvider,
               field_names: Optional[Sequence[str]] = None,
               aux: Any = None,
               aux_field_names: Optional[Sequence[str]] = None,
               sample_count: int = 0) -> str:
        """
        Write the fields of the given state (and auxiliary state) and return the name of the written file.

        Args:
            prefix: The file name without extension (may contain a directory path).
            state: The state buffer of shape (nodes per element, components, elements).
            grid: Provides the geometry, reference nodes and real elements.
            field_names: Names of the state fields (defaults to Q1, Q2, ...).
            aux: The auxiliary state buffer (optional), with the same layout as the state.
            aux_field_names: Names of the auxiliary fields (defaults to aux1, aux2, ...).
            sample_count: If zero, the raw nodal values are written using linear cells that connect
                          adjacent nodes. Otherwise, the fields are sampled on an equally spaced grid
                          with `sample_count` points per axis and written as Lagrange cells.
        """
        self._stage = ExportStage.idle
        mode, payload, names, real_elements = self._prepare(
            grid, state, aux, field_names, aux_field_names, sample_count
        )
        if isinstance(mode, HighOrderExport):
            payload = self._resample(payload, grid, mode)

        coordinates, fields = self._reshape(payload, names, mode, grid.dimension, real_elements)
        filename = self._write(prefix, mode, coordinates, fields, real_elements)
        self._enter(ExportStage.done)
        self._log(
            f"Wrote '{filename}' ({_describe(mode)}, {len(fields)} fields, {len(real_elements)} elements)\n",
            verbosity_level=1
        )
        return filename

    def _prepare(self,
                 grid: GridProvider,
                 state: Any,
                 aux: Any,
                 field_names: Optional[Sequence[str]],
                 aux_field_names: Optional[Sequence[str]],
                 sample_count: int) -> Tuple[ExportMode, _Payload, Tuple[list, list], Array]:
        self._enter(ExportStage.preparing)
        dimension = grid.dimension
        nodes_per_axis = _uniform_nodes_per_axis(grid)
        mode = resolve_export_mode(sample_count, nodes_per_axis)

        geometry = as_host_array(grid.geometry)
        state = as_host_array(state)
        aux = as_host_array(aux) if aux is not None else None
        payload = _Payload(
            coordinates=coordinate_views(geometry, dimension, grid.coordinate_ids),
            state=component_views(state),
            aux=component_views(aux) if aux is not None else tuple()
        )
        _check_extents(
            nodes_per_axis**dimension,
            geometry.shape[2],
            {"geometry": geometry, "state": state, **({"aux": aux} if aux is not None else {})}
        )

        names = (
            make_field_names(len(payload.state), field_names, "Q"),
            make_field_names(len(payload.aux), aux_field_names, "aux")
        )
        real_elements = real_element_indices(grid.real_elements, geometry.shape[2])
        self._log(
            f"Exporting {len(payload.state)} state and {len(payload.aux)} auxiliary fields "
            f"of {len(real_elements)}/{geometry.shape[2]} elements "
            f"(dimension {dimension}, {nodes_per_axis} nodes per axis)\n",
            verbosity_level=2
        )
        return mode, payload, names, real_elements

    def _resample(self, payload: _Payload, grid: GridProvider, mode: HighOrderExport) -> _Payload:
        self._enter(ExportStage.resampling)
        source = as_host_array(grid.reference_points[0])
        operator = resampling_operator(
            source,
            mode.nodes_per_axis,
            grid.dimension,
            dtype=floating_dtype_of(payload.state[0] if payload.state else payload.coordinates[0])
        )
        return _Payload(
            coordinates=resample_all(operator, payload.coordinates),
            state=resample_all(operator, payload.state),
            aux=resample_all(operator, payload.aux)
        )

    def _reshape(self,
                 payload: _Payload,
                 names: Tuple[list, list],
                 mode: ExportMode,
                 dimension: int,
                 real_elements: Array) -> Tuple[Tuple[Array, ...], Dict[str, Array]]:
        self._enter(ExportStage.reshaping)

        def _tensor(field: Array) -> Array:
            return select_elements(to_tensor(field, mode.nodes_per_axis, dimension), real_elements)

        coordinates = tuple(_tensor(x) for x in payload.coordinates)
        fields = named_fields(
            [_tensor(f) for f in payload.state], names[0],
            [_tensor(f) for f in payload.aux], names[1]
        )
        return coordinates, fields

    def _write(self,
               prefix: str,
               mode: ExportMode,
               coordinates: Tuple[Array, ...],
               fields: Dict[str, Array],
               real_elements: Array) -> str:
        self._enter(ExportStage.writing)
        try:
            if isinstance(mode, RawExport):
                return self._writer.write_raw(prefix, coordinates, fields, real_elements)
            return self._writer.write_high_order(prefix, coordinates, fields, real_elements)
        except WriterFailure:
            raise
        except Exception as err:
            raise WriterFailure(f"Error writing '{prefix}': {err}") from err

    def _enter(self, stage: ExportStage) -> None:
        self._stage = stage
        self._log(f"Export stage: {stage}\n", verbosity_level=3)


def export(prefix: str,
           state: Any,
           grid: GridProvider,
           field_names: Optional[Sequence[str]] = None,
           aux: Any = None,
           aux_field_names: Optional[Sequence[str]] = None,
           sample_count: int = 0,
           writer: Optional[MeshWriter] = None,
           logger: Optional[Logger] = None) -> str:
    """
    Write the fields of the given state (and auxiliary state) and return the name of the written file.

    If `field_names` is not given, the state fields are named "Q1" through "Qk", where k is the number
    of state components. Analogously, auxiliary fields default to "aux1" through "auxk".
    See :meth:`.Exporter.export` for a description of the arguments.

    Args:
        writer: The mesh writer to be used (defaults to :class:`.VTKMeshWriter`).
        logger: Logger to report the progress to (optional).
    """
    exporter = Exporter(writer)
    if logger is not None:
        exporter.attach_logger(logger)
    return exporter.export(
        prefix, state, grid,
        field_names=field_names,
        aux=aux,
        aux_field_names=aux_field_names,
        sample_count=sample_count
    )


def _uniform_nodes_per_axis(grid: GridProvider) -> int:
    orders = tuple(grid.polynomial_orders)
    if not orders or any(order != orders[0] for order in orders):
        raise ShapeMismatch(f"Only grids with a single polynomial order are supported, got orders {orders}")
    nodes_per_axis = int(orders[0]) + 1
    reference_points = [as_host_array(points) for points in grid.reference_points]
    num_reference_points = len(reference_points[0])
    if num_reference_points != nodes_per_axis:
        raise ShapeMismatch(
            f"Polynomial order {orders[0]} requires {nodes_per_axis} reference points, got {num_reference_points}"
        )
    if any(not np.array_equal(points, reference_points[0]) for points in reference_points[1:]):
        raise ShapeMismatch("Only grids with the same reference points on all axes are supported")
    return nodes_per_axis


def _check_extents(num_nodes: int, num_elements: int, buffers: Dict[str, Array]) -> None:
    for name, buffer in buffers.items():
        if buffer.shape[0] != num_nodes:
            raise ShapeMismatch(f"Expected {num_nodes} nodes per element in the {name} buffer, got {buffer.shape[0]}")
        if buffer.shape[2] != num_elements:
            raise ShapeMismatch(f"Expected {num_elements} elements in the {name} buffer, got {buffer.shape[2]}")


def _describe(mode: ExportMode) -> str:
    if isinstance(mode, RawExport):
        return f"raw nodes, {mode.nodes_per_axis} per axis"
    return f"{mode.nodes_per_axis} sample points per axis"
