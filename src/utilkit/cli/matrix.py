"""Command-line helpers for editing matrix files.

Each subcommand reads a matrix from ``FILE`` (``.json``, ``.csv``, ``.tsv`` or
``.xlsx``), applies one :mod:`utilkit.matrix` operation and either writes the
result to ``--output`` or prints it as JSON.
"""

import json

from rich.console import Console
from rich.table import Table

from utilkit import matrix as ops
from utilkit.io import io_file
from utilkit.logging import get_logger


def _parse_value(raw):
    """Interpret ``raw`` as a JSON literal, falling back to the plain string."""

    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _add_io_arguments(parser):
    parser.add_argument("file", help="Matrix file (.json, .csv, .tsv or .xlsx)")
    parser.add_argument(
        "-o",
        "--output",
        help="Write the result to this file instead of printing JSON",
    )


def register_subcommands(subparsers):
    """Attach matrix subcommands to an ``argparse`` parser.

    Examples
    --------
    >>> import argparse
    >>> parser = argparse.ArgumentParser(prog="utilkit matrix")
    >>> subparsers = parser.add_subparsers(dest="subcommand", required=True)
    >>> register_subcommands(subparsers)
    >>> args = parser.parse_args(["remove-column", "grid.json", "-1"])
    >>> args.index
    -1
    """

    show_parser = subparsers.add_parser("show", help="Render a matrix as a table")
    show_parser.add_argument("file", help="Matrix file (.json, .csv, .tsv or .xlsx)")

    add_parser = subparsers.add_parser("add-column", help="Insert a column")
    _add_io_arguments(add_parser)
    add_parser.add_argument("index", type=int)
    add_parser.add_argument(
        "--value",
        help="JSON value for every row, or a JSON list with one value per row",
    )

    remove_parser = subparsers.add_parser("remove-column", help="Remove a column")
    _add_io_arguments(remove_parser)
    remove_parser.add_argument("index", type=int)

    move_parser = subparsers.add_parser("move-column", help="Move a column")
    _add_io_arguments(move_parser)
    move_parser.add_argument("index", type=int)
    move_parser.add_argument("to", type=int)

    cell_parser = subparsers.add_parser("move-cell", help="Move a single cell")
    _add_io_arguments(cell_parser)
    for name in ("from_row", "from_column", "to_row", "to_column"):
        cell_parser.add_argument(name, type=int)
    cell_parser.add_argument("--default", help="JSON value used to pad grown rows")

    for name, help_text in (
        ("rectangular", "Pad rows to equal length"),
        ("square", "Pad rows and add rows until the matrix is square"),
    ):
        pad_parser = subparsers.add_parser(name, help=help_text)
        _add_io_arguments(pad_parser)
        pad_parser.add_argument("--default", help="JSON value used for padding")


def _apply(args, matrix):
    if args.subcommand == "add-column":
        return ops.add_column(matrix, args.index, _parse_value(args.value))
    if args.subcommand == "remove-column":
        return ops.remove_column(matrix, args.index)
    if args.subcommand == "move-column":
        return ops.move_column(matrix, args.index, args.to)
    if args.subcommand == "move-cell":
        return ops.move_cell(
            matrix,
            args.from_row,
            args.from_column,
            args.to_row,
            args.to_column,
            _parse_value(args.default),
        )
    if args.subcommand == "rectangular":
        return ops.to_rectangular(matrix, _parse_value(args.default))
    if args.subcommand == "square":
        return ops.to_square(matrix, _parse_value(args.default))
    raise ValueError(f"No handler for subcommand: {args.subcommand}")


def render_matrix(matrix, title=None, console=None):
    """Pretty-print ``matrix`` using ``rich``; missing cells of short rows show a dash."""

    if console is None:
        console = Console()

    width = max((len(row) for row in matrix), default=0)
    shape = ops.column_count(matrix)
    if not matrix:
        shape_line = "0 rows"
    elif shape is None:
        shape_line = f"{len(matrix)} rows, jagged"
    else:
        shape_line = f"{len(matrix)} x {shape}"

    table = Table(title=title, show_lines=True)
    table.add_column("#", justify="right", style="bold cyan")
    for column in range(width):
        table.add_column(str(column), style="green")

    if not matrix:
        table.add_row("[dim]empty[/dim]")
    for index, row in enumerate(matrix):
        cells = ["" if cell is None else str(cell) for cell in row]
        cells.extend("[dim]-[/dim]" for _ in range(width - len(row)))
        table.add_row(str(index), *cells)

    console.print(table)
    console.print(shape_line, style="dim", soft_wrap=True)


def dispatch(args):
    """Run the matrix operation associated with ``args.subcommand``.

    Errors from reading the file or applying the operation are logged and
    turned into exit status 1.
    """

    logger = get_logger(__name__)

    try:
        matrix = io_file.read_matrix(args.file)
        if args.subcommand == "show":
            render_matrix(matrix, title=str(args.file))
            return
        result = _apply(args, matrix)
    except (OSError, IndexError, ValueError) as exc:
        logger.error("matrix %s failed: %s", args.subcommand, exc)
        raise SystemExit(1) from exc

    output = getattr(args, "output", None)
    if output:
        path = io_file.write_matrix(result, output)
        logger.info("wrote %s", path)
    else:
        print(json.dumps(result))
