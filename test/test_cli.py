# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Test the command-line interface of nodalvtk"""

from io import StringIO
from os.path import exists

import numpy as np
import meshio

from nodalvtk import brick_grid
from nodalvtk._cli import main
from nodalvtk._cli._logger import CLILogger


def _write_input(path, aux: bool = False) -> str:
    grid = brick_grid(order=2, elements_per_axis=[2, 2], halo_elements=1)
    x = grid.geometry[:, 1, :]
    y = grid.geometry[:, 2, :]
    filename = str(path / "input.npz")
    arrays = {"state": np.stack([x, y], axis=1)}
    if aux:
        arrays["aux"] = np.stack([x*y], axis=1)
    grid.save_npz(filename, **arrays)
    return filename


def test_cli_raw_export(tmp_path):
    stream = StringIO()
    prefix = str(tmp_path / "raw")
    assert main([_write_input(tmp_path), prefix, "--no-colors"], CLILogger(output_stream=stream)) == 0
    assert exists(f"{prefix}.vtu")
    assert "Export succeeded" in stream.getvalue()
    assert f"{prefix}.vtu" in stream.getvalue()

    mesh = meshio.read(f"{prefix}.vtu")
    assert mesh.points.shape[0] == 3*9
    assert "Q1" in mesh.point_data and "Q2" in mesh.point_data


def test_cli_high_order_export_with_names(tmp_path):
    stream = StringIO()
    prefix = str(tmp_path / "lagrange")
    assert main([
        _write_input(tmp_path, aux=True), prefix,
        "--sample-count", "4",
        "--field-names", "u", "v",
        "--aux-field-names", "uv",
        "--no-colors",
    ], CLILogger(output_stream=stream)) == 0
    assert exists(f"{prefix}.vtu")


def test_cli_meshio_format(tmp_path):
    prefix = str(tmp_path / "legacy")
    assert main([_write_input(tmp_path), prefix, "--format", "vtk", "--no-colors"],
                CLILogger(output_stream=StringIO())) == 0
    assert exists(f"{prefix}.vtk")


def test_cli_verbose_output_reports_stages(tmp_path):
    stream = StringIO()
    assert main([_write_input(tmp_path), str(tmp_path / "out"), "--verbosity", "3", "--no-colors"],
                CLILogger(output_stream=stream)) == 0
    assert " -- Export stage: writing" in stream.getvalue()


def test_cli_quiet(tmp_path):
    stream = StringIO()
    assert main([_write_input(tmp_path), str(tmp_path / "out"), "--verbosity", "0"],
                CLILogger(output_stream=stream)) == 0
    assert stream.getvalue() == ""


def test_cli_field_name_mismatch(tmp_path):
    stream = StringIO()
    assert main([
        _write_input(tmp_path), str(tmp_path / "out"), "--field-names", "rho", "--no-colors"
    ], CLILogger(output_stream=stream)) == 1
    assert not exists(str(tmp_path / "out.vtu"))
    assert "Export failed in stage 'preparing'" in stream.getvalue()


def test_cli_invalid_sample_count(tmp_path):
    stream = StringIO()
    assert main([
        _write_input(tmp_path), str(tmp_path / "out"), "--sample-count", "-2", "--no-colors"
    ], CLILogger(output_stream=stream)) == 1
    assert "Export failed" in stream.getvalue()
    assert "sample points" in stream.getvalue()


def test_cli_missing_state(tmp_path):
    filename = str(tmp_path / "grid.npz")
    brick_grid(order=1, elements_per_axis=[2]).save_npz(filename)
    stream = StringIO()
    assert main([filename, str(tmp_path / "out"), "--no-colors"], CLILogger(output_stream=stream)) == 1
    assert "does not contain a 'state' buffer" in stream.getvalue()


def test_cli_missing_input(tmp_path):
    stream = StringIO()
    assert main([str(tmp_path / "nonexisting.npz"), str(tmp_path / "out"), "--no-colors"],
                CLILogger(output_stream=stream)) == 1
    assert "Could not read" in stream.getvalue()


def test_cli_corrupt_input(tmp_path):
    filename = tmp_path / "input.npz"
    filename.write_bytes(b"PK\x03\x04garbage")
    stream = StringIO()
    assert main([str(filename), str(tmp_path / "out"), "--no-colors"], CLILogger(output_stream=stream)) == 1
    assert "Could not read" in stream.getvalue()
    assert not exists(str(tmp_path / "out.vtu"))
