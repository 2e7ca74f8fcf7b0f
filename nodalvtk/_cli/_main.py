# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Command-line interface for nodalvtk"""

from sys import version_info
from zipfile import BadZipFile
from datetime import datetime
from argparse import ArgumentParser

import numpy as np

from nodalvtk import __version__
from nodalvtk._export import Exporter
from nodalvtk.grid import Grid
from nodalvtk.io import make_writer
from nodalvtk.exceptions import ExportError
from nodalvtk.colors import make_colored, make_status, make_highlighted, text_color_options, TextColor

from ._logger import CLILogger


def main(argv=None, logger: CLILogger = CLILogger()) -> int:
    parser = ArgumentParser(
        description="Write the nodal solution data of a spectral-element grid into a visualization mesh"
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=_get_version_info(),
        help="show version information",
    )
    _add_arguments(parser)
    args = vars(parser.parse_args(argv))

    logger = logger.with_verbosity(args["verbosity"])
    with text_color_options(use_colors=not args["no_colors"], use_styles=not args["no_colors"]):
        return _run(args, logger)


def _add_arguments(parser: ArgumentParser) -> None:
    parser.add_argument(
        "input",
        help="numpy archive (.npz) with the grid arrays, the 'state' buffer and (optionally) the 'aux' buffer"
    )
    parser.add_argument("prefix", help="name of the output file without extension (may contain a directory path)")
    parser.add_argument(
        "--sample-count", "-n",
        required=False,
        type=int,
        default=0,
        help="number of equally spaced sample points per axis and element; with 0 (default), the raw nodal "
             "values are written using linear cells that connect adjacent nodes",
    )
    parser.add_argument(
        "--field-names",
        required=False,
        nargs="+",
        default=None,
        help="names of the state fields (defaults to Q1, Q2, ...)",
    )
    parser.add_argument(
        "--aux-field-names",
        required=False,
        nargs="+",
        default=None,
        help="names of the auxiliary fields (defaults to aux1, aux2, ...)",
    )
    parser.add_argument(
        "--format", "-f",
        required=False,
        default="vtu",
        help="extension of the output file; 'vtu' uses the builtin writer, other formats are written with meshio",
    )
    parser.add_argument(
        "--verbosity",
        required=False,
        type=int,
        default=1,
        help="verbosity level (0 = quiet, 1 = summary, 2 = details, 3 = export stages)",
    )
    parser.add_argument(
        "--no-colors",
        required=False,
        action="store_true",
        help="use this flag to disable colored output",
    )


def _run(args: dict, logger: CLILogger) -> int:
    try:
        grid = Grid.from_npz(args["input"])
        with np.load(args["input"]) as archive:
            if "state" not in archive:
                raise IOError(f"Archive '{args['input']}' does not contain a 'state' buffer")
            state = archive["state"]
            aux = archive["aux"] if "aux" in archive else None
    except (IOError, ValueError, BadZipFile) as e:
        logger.log(_error_message(f"Could not read '{args['input']}': {e}"), verbosity_level=1)
        return 1

    exporter = Exporter(make_writer(args["format"]))
    exporter.attach_logger(logger.with_prefix(" -- "))
    try:
        filename = exporter.export(
            args["prefix"],
            state,
            grid,
            field_names=args["field_names"],
            aux=aux,
            aux_field_names=args["aux_field_names"],
            sample_count=args["sample_count"],
        )
    except ExportError as e:
        logger.log(f"Export {make_status(False)} in stage '{exporter.stage}': {e}\n", verbosity_level=1)
        return 1

    logger.log(
        "Export {}: {}\n".format(
            make_status(True),
            make_highlighted(filename)
        ),
        verbosity_level=1
    )
    return 0


def _error_message(message: str) -> str:
    return make_colored("Error: ", color=TextColor.red) + message + "\n"


def _get_version_info() -> str:
    python_version = f"{version_info.major}.{version_info.minor}.{version_info.micro}"
    version = __version__ if __version__ != "unknown" else "(unknown version)"
    return "\n".join([
        f"nodalvtk {version} [Python {python_version}]",
        f"Copyright (c) {_get_development_years_string()} Dennis Gläser et al.",
    ])


def _get_development_years_string() -> str:
    begin = _get_development_begin_year()
    current = _get_current_year()
    if current > begin:
        return f"{begin}-{current}"
    return f"{current}"


def _get_current_year() -> int:
    return datetime.now().year


def _get_development_begin_year() -> int:
    return 2022
