"""Test the export of nodal data through the stages of the exporter"""

from io import StringIO

import numpy as np
import pytest
import meshio

from nodalvtk import export, Exporter, ExportStage, Grid, brick_grid
from nodalvtk import (
    ExportError, ShapeMismatch, InvalidSampleCount, NameCountMismatch,
    DuplicateFieldName, DegenerateNodes, WriterFailure
)
from nodalvtk.logging import StreamLogger

from _common import RecordingWriter, FailingWriter, coordinates_of, state_from


def _two_element_grid() -> Grid:
    return brick_grid(order=2, elements_per_axis=[2, 1], upper_right=[2.0, 1.0])


def test_raw_export_passes_nodal_tensors():
    grid = _two_element_grid()
    x, y = coordinates_of(grid)
    writer = RecordingWriter()
    filename = export("out", state_from(x), grid, field_names=["rho"], writer=writer)

    assert filename == "out"
    assert writer.mode == "raw"
    assert len(writer.coordinates) == 2
    assert all(c.shape == (3, 3, 2) for c in writer.coordinates)
    assert list(writer.fields.keys()) == ["rho"]
    assert writer.fields["rho"].shape == (3, 3, 2)
    assert np.array_equal(writer.fields["rho"], writer.coordinates[0])
    assert np.array_equal(writer.real_elements, [0, 1])


def test_raw_export_keeps_nodal_values():
    grid = _two_element_grid()
    x, y = coordinates_of(grid)
    rho = x*y + 1.0
    writer = RecordingWriter()
    export("out", state_from(rho), grid, writer=writer)

    tensor = writer.fields["Q1"]
    for e in range(2):
        for j in range(3):
            for i in range(3):
                assert tensor[i, j, e] == rho[i + 3*j, e]


def test_high_order_export_resamples_on_equispaced_points():
    grid = _two_element_grid()
    x, y = coordinates_of(grid)
    writer = RecordingWriter()
    export("out", state_from(x*x + y, y), grid, field_names=["rho", "v"], sample_count=8, writer=writer)

    assert writer.mode == "high_order"
    assert all(c.shape == (8, 8, 2) for c in writer.coordinates)
    assert writer.fields["rho"].shape == (8, 8, 2)

    xs, ys = writer.coordinates
    assert np.allclose(xs[:, 0, 0], np.linspace(0.0, 1.0, 8))
    assert np.allclose(xs[:, 3, 1], np.linspace(1.0, 2.0, 8))
    assert np.allclose(ys[5, :, 1], np.linspace(0.0, 1.0, 8))
    # quadratic fields are reproduced exactly by second-order elements
    assert np.allclose(writer.fields["rho"], xs*xs + ys)
    assert np.allclose(writer.fields["v"], ys)


def test_single_sample_point_is_placed_at_lower_corner():
    grid = _two_element_grid()
    x, _ = coordinates_of(grid)
    writer = RecordingWriter()
    export("out", state_from(x), grid, sample_count=1, writer=writer)
    assert writer.coordinates[0].shape == (1, 1, 2)
    assert np.allclose(writer.coordinates[0][0, 0, :], [0.0, 1.0])
    assert np.allclose(writer.coordinates[1][0, 0, :], [0.0, 0.0])


@pytest.mark.parametrize("dimension", [1, 2, 3])
def test_export_in_all_dimensions(dimension):
    grid = brick_grid(order=3, elements_per_axis=[2]*dimension)
    coordinates = coordinates_of(grid)
    state = state_from(sum(coordinates))
    writer = RecordingWriter()
    export("out", state, grid, sample_count=5, writer=writer)
    assert writer.fields["Q1"].shape == (5,)*dimension + (2**dimension,)
    assert np.allclose(writer.fields["Q1"], sum(writer.coordinates))


def test_halo_elements_are_not_exported():
    grid = brick_grid(order=1, elements_per_axis=[4], halo_elements=1)
    x, = coordinates_of(grid)
    writer = RecordingWriter()
    export("out", state_from(x), grid, writer=writer)
    assert writer.coordinates[0].shape == (2, 3)
    assert np.array_equal(writer.real_elements, [0, 1, 2])
    assert np.array_equal(writer.fields["Q1"], x[:, :3])


def test_real_elements_select_global_elements():
    base = brick_grid(order=1, elements_per_axis=[4])
    grid = Grid(base.geometry, base.coordinate_ids, base.polynomial_orders, real_elements=[3, 1])
    x, = coordinates_of(grid)
    writer = RecordingWriter()
    export("out", state_from(x), grid, sample_count=3, writer=writer)
    assert np.array_equal(writer.real_elements, [3, 1])
    assert np.allclose(writer.coordinates[0][:, 0], np.linspace(0.75, 1.0, 3))
    assert np.allclose(writer.coordinates[0][:, 1], np.linspace(0.25, 0.5, 3))


def test_aux_fields_follow_state_fields():
    grid = _two_element_grid()
    x, y = coordinates_of(grid)
    writer = RecordingWriter()
    export("out", state_from(x, y), grid, aux=state_from(x + y), writer=writer)
    assert list(writer.fields.keys()) == ["Q1", "Q2", "aux1"]
    assert np.array_equal(writer.fields["aux1"], writer.fields["Q1"] + writer.fields["Q2"])


def test_named_aux_fields():
    grid = _two_element_grid()
    x, y = coordinates_of(grid)
    writer = RecordingWriter()
    export("out", state_from(x), grid, field_names=["rho"],
           aux=state_from(x, y), aux_field_names=["a", "b"], sample_count=4, writer=writer)
    assert list(writer.fields.keys()) == ["rho", "a", "b"]


def test_single_precision_is_preserved():
    grid = brick_grid(order=2, elements_per_axis=[2, 2], dtype=np.float32)
    x, y = coordinates_of(grid)
    writer = RecordingWriter()
    export("out", state_from(x, y).astype(np.float32), grid, sample_count=4, writer=writer)
    assert writer.fields["Q1"].dtype == np.float32
    assert writer.coordinates[0].dtype == np.float32


def test_integer_fields_are_resampled_in_double_precision():
    grid = _two_element_grid()
    state = np.ones((9, 1, 2), dtype=np.int32)
    writer = RecordingWriter()
    export("out", state, grid, sample_count=3, writer=writer)
    assert writer.fields["Q1"].dtype == np.float64
    assert np.allclose(writer.fields["Q1"], 1.0)


def test_export_does_not_modify_inputs():
    grid = _two_element_grid()
    x, y = coordinates_of(grid)
    state = state_from(x, y)
    geometry = grid.geometry.copy()
    state_copy = state.copy()
    export("out", state, grid, sample_count=5, writer=RecordingWriter())
    assert np.array_equal(grid.geometry, geometry)
    assert np.array_equal(state, state_copy)


def test_host_buffers_are_materialized():
    class DeviceBuffer:
        def __init__(self, data):
            self._data = data

        def host_array(self):
            return self._data

    grid = _two_element_grid()
    x, _ = coordinates_of(grid)
    writer = RecordingWriter()
    export("out", DeviceBuffer(state_from(x)), grid, writer=writer)
    assert np.array_equal(writer.fields["Q1"], writer.coordinates[0])


@pytest.mark.parametrize("kwargs, error, stage", [
    ({"field_names": ["a", "b"]}, NameCountMismatch, ExportStage.preparing),
    ({"aux_field_names": ["a"]}, NameCountMismatch, ExportStage.preparing),
    ({"sample_count": -1}, InvalidSampleCount, ExportStage.preparing),
    ({"sample_count": 2.0}, InvalidSampleCount, ExportStage.preparing),
    ({"field_names": ["aux1"], "aux": "state"}, DuplicateFieldName, ExportStage.reshaping),
])
def test_errors_abort_before_writing(kwargs, error, stage):
    grid = _two_element_grid()
    x, _ = coordinates_of(grid)
    state = state_from(x)
    kwargs = dict(kwargs)
    if kwargs.get("aux") == "state":
        kwargs["aux"] = state
    writer = RecordingWriter()
    exporter = Exporter(writer)
    with pytest.raises(error):
        exporter.export("out", state, grid, **kwargs)
    assert writer.calls == []
    assert exporter.stage == stage


@pytest.mark.parametrize("state_shape", [(8, 1, 2), (9, 1, 3), (9, 2)])
def test_inconsistent_state_shapes(state_shape):
    writer = RecordingWriter()
    with pytest.raises(ShapeMismatch):
        export("out", np.zeros(state_shape), _two_element_grid(), writer=writer)
    assert writer.calls == []


def test_inconsistent_aux_shape():
    grid = _two_element_grid()
    with pytest.raises(ShapeMismatch):
        export("out", np.zeros((9, 1, 2)), grid, aux=np.zeros((4, 1, 2)), writer=RecordingWriter())


def test_non_uniform_polynomial_orders_are_rejected():
    geometry = np.zeros((12, 2, 1))
    grid = Grid(geometry, coordinate_ids=(0, 1), polynomial_orders=(2, 3))
    with pytest.raises(ShapeMismatch):
        export("out", np.zeros((12, 1, 1)), grid, writer=RecordingWriter())


def test_reference_point_count_must_match_order():
    base = _two_element_grid()
    grid = Grid(base.geometry, base.coordinate_ids, base.polynomial_orders,
                reference_points=[np.linspace(-1, 1, 4)]*2)
    with pytest.raises(ShapeMismatch):
        export("out", np.zeros((9, 1, 2)), grid, writer=RecordingWriter())


def test_reference_points_must_agree_on_all_axes():
    base = _two_element_grid()
    grid = Grid(base.geometry, base.coordinate_ids, base.polynomial_orders,
                reference_points=[np.array([-1.0, 0.0, 1.0]), np.array([-1.0, 0.2, 1.0])])
    writer = RecordingWriter()
    with pytest.raises(ShapeMismatch):
        export("out", np.zeros((9, 1, 2)), grid, sample_count=4, writer=writer)
    assert writer.calls == []


def test_duplicate_real_elements_are_rejected():
    base = brick_grid(order=1, elements_per_axis=[4])
    grid = Grid(base.geometry, base.coordinate_ids, base.polynomial_orders, real_elements=[0, 0, 2])
    writer = RecordingWriter()
    exporter = Exporter(writer)
    with pytest.raises(ShapeMismatch):
        exporter.export("out", np.zeros((2, 1, 4)), grid)
    assert writer.calls == []
    assert exporter.stage == ExportStage.preparing


def test_degenerate_reference_points_are_rejected():
    base = _two_element_grid()
    grid = Grid(base.geometry, base.coordinate_ids, base.polynomial_orders,
                reference_points=[np.array([-1.0, 0.0, 0.0])]*2)
    writer = RecordingWriter()
    exporter = Exporter(writer)
    with pytest.raises(DegenerateNodes):
        exporter.export("out", np.zeros((9, 1, 2)), grid, sample_count=4)
    assert exporter.stage == ExportStage.resampling
    assert writer.calls == []


def test_writer_errors_are_wrapped():
    grid = _two_element_grid()
    x, _ = coordinates_of(grid)
    exporter = Exporter(FailingWriter())
    with pytest.raises(WriterFailure) as err:
        exporter.export("out", state_from(x), grid)
    assert isinstance(err.value, ExportError)
    assert isinstance(err.value, IOError)
    assert isinstance(err.value.__cause__, OSError)
    assert "disk full" in str(err.value)
    assert exporter.stage == ExportStage.writing


def test_exporter_stages():
    grid = _two_element_grid()
    x, _ = coordinates_of(grid)
    exporter = Exporter(RecordingWriter())
    assert exporter.stage == ExportStage.idle
    exporter.export("out", state_from(x), grid, sample_count=2)
    assert exporter.stage == ExportStage.done


def test_export_logging():
    grid = _two_element_grid()
    x, _ = coordinates_of(grid)
    stream = StringIO()
    export("out", state_from(x), grid, sample_count=3, writer=RecordingWriter(),
           logger=StreamLogger(stream, verbosity_level=3))
    output = stream.getvalue()
    for stage in ["preparing", "resampling", "reshaping", "writing", "done"]:
        assert f"Export stage: {stage}" in output
    assert "Wrote 'out'" in output
    assert "3 sample points per axis" in output


def test_raw_export_skips_resampling_stage():
    grid = _two_element_grid()
    x, _ = coordinates_of(grid)
    stream = StringIO()
    export("out", state_from(x), grid, writer=RecordingWriter(), logger=StreamLogger(stream, verbosity_level=3))
    assert "Export stage: resampling" not in stream.getvalue()
    assert "raw nodes, 3 per axis" in stream.getvalue()


def test_export_logging_verbosity():
    grid = _two_element_grid()
    x, _ = coordinates_of(grid)
    stream = StringIO()
    export("out", state_from(x), grid, writer=RecordingWriter(), logger=StreamLogger(stream, verbosity_level=1))
    output = stream.getvalue()
    assert "Wrote 'out'" in output
    assert "Export stage" not in output


def test_vtu_export_of_two_quadrilateral_elements(tmp_path):
    grid = _two_element_grid()
    x, y = coordinates_of(grid)
    filename = export(str(tmp_path / "solution"), state_from(x*y), grid, field_names=["rho"])
    assert filename == str(tmp_path / "solution.vtu")

    mesh = meshio.read(filename)
    assert mesh.points.shape[0] == 18
    assert sum(len(block.data) for block in mesh.cells) == 8
    assert all(block.type == "quad" for block in mesh.cells)
    assert np.allclose(mesh.point_data["rho"], mesh.points[:, 0]*mesh.points[:, 1])
