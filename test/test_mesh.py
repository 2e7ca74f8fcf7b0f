"""Test the visualization mesh classes"""

import numpy as np
import pytest

from nodalvtk.mesh import (
    Mesh, MeshFields, CellTypes,
    linear_cell_type, lagrange_cell_type,
    raw_mesh_fields, high_order_mesh_fields, ELEMENT_INDEX_FIELD_NAME
)


def _unit_square_mesh() -> Mesh:
    return Mesh(
        points=[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [2.0, 0.0], [2.0, 1.0]],
        connectivity=[(CellTypes.quad, [[0, 1, 2, 3], [1, 4, 5, 2]])]
    )


def test_mesh_properties():
    mesh = _unit_square_mesh()
    assert mesh.points.shape == (6, 2)
    assert list(mesh.cell_types) == [CellTypes.quad]
    assert mesh.number_of_cells == 2
    assert np.array_equal(mesh.connectivity(CellTypes.quad)[1], [1, 4, 5, 2])


def test_mesh_rejects_invalid_connectivity():
    with pytest.raises(ValueError):
        Mesh(points=[[0.0], [1.0]], connectivity=[(CellTypes.line, [[0, 2]])])


def test_mesh_rejects_non_cell_types():
    with pytest.raises(TypeError):
        Mesh(points=[[0.0], [1.0]], connectivity=[("line", [[0, 1]])])


def test_mesh_fields():
    fields = MeshFields(
        _unit_square_mesh(),
        point_data={"p": np.arange(6.0)},
        cell_data={"c": [np.array([3, 4])]}
    )
    assert [f.name for f in fields.point_fields] == ["p"]
    assert [name for name, _ in fields.cell_fields] == ["c"]
    assert np.array_equal(fields.cell_field_values("c"), [3, 4])
    assert np.array_equal(fields.cell_field_values("c", CellTypes.quad), [3, 4])


def test_mesh_fields_reject_wrong_lengths():
    with pytest.raises(ValueError):
        MeshFields(_unit_square_mesh(), point_data={"p": np.arange(5.0)})
    with pytest.raises(ValueError):
        MeshFields(_unit_square_mesh(), cell_data={"c": [np.arange(3)]})


def test_cell_type_selection():
    assert linear_cell_type(1) == CellTypes.line
    assert linear_cell_type(2) == CellTypes.quad
    assert linear_cell_type(3) == CellTypes.hexahedron
    assert lagrange_cell_type(1) == CellTypes.lagrange_curve
    assert lagrange_cell_type(2) == CellTypes.lagrange_quadrilateral
    assert lagrange_cell_type(3) == CellTypes.lagrange_hexahedron


def _two_element_tensors(nodes_per_axis: int):
    x1d = np.linspace(0.0, 1.0, nodes_per_axis)
    x = np.stack([x1d[:, None]*np.ones((1, nodes_per_axis)), x1d[:, None]*np.ones((1, nodes_per_axis)) + 1.0], axis=-1)
    y = np.stack([np.ones((nodes_per_axis, 1))*x1d[None, :]]*2, axis=-1)
    return (x, y), {"f": x + 10.0*y}


def test_raw_mesh_fields():
    coordinates, fields = _two_element_tensors(3)
    mesh_fields = raw_mesh_fields(coordinates, fields, element_indices=[4, 7])
    mesh = mesh_fields.domain
    assert mesh.points.shape == (18, 2)
    assert mesh.number_of_cells == 8
    assert np.array_equal(mesh.connectivity(CellTypes.quad)[4], [9, 10, 13, 12])
    assert np.array_equal(mesh_fields.cell_field_values(ELEMENT_INDEX_FIELD_NAME), [4]*4 + [7]*4)
    point_field = next(iter(mesh_fields.point_fields))
    assert point_field.name == "f"
    assert np.allclose(point_field.values, mesh.points[:, 0] + 10.0*mesh.points[:, 1])


def test_high_order_mesh_fields():
    coordinates, fields = _two_element_tensors(3)
    mesh_fields = high_order_mesh_fields(coordinates, fields, element_indices=[4, 7])
    mesh = mesh_fields.domain
    assert mesh.number_of_cells == 2
    connectivity = mesh.connectivity(CellTypes.lagrange_quadrilateral)
    assert np.array_equal(connectivity[0], [0, 2, 8, 6, 1, 5, 7, 3, 4])
    assert np.array_equal(connectivity[1], np.array([0, 2, 8, 6, 1, 5, 7, 3, 4]) + 9)
    assert np.array_equal(mesh_fields.cell_field_values(ELEMENT_INDEX_FIELD_NAME), [4, 7])


@pytest.mark.parametrize("make_mesh_fields", [raw_mesh_fields, high_order_mesh_fields])
def test_single_node_elements_become_vertices(make_mesh_fields):
    coordinates = (np.array([[0.0, 1.0, 2.0]]), )
    mesh_fields = make_mesh_fields(coordinates, {"f": np.array([[5.0, 6.0, 7.0]])}, [0, 1, 2])
    mesh = mesh_fields.domain
    assert list(mesh.cell_types) == [CellTypes.vertex]
    assert mesh.number_of_cells == 3
    assert np.array_equal(mesh.points[:, 0], [0.0, 1.0, 2.0])
