"""Column and cell editing for jagged 2D lists.

A matrix here is a plain list of rows where each row is a list of cells and
rows may differ in length. Every function returns a new outer list and never
mutates its input. Negative indices count from the end of the sequence they
address (``length + index``).
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, TypeVar

from utilkit.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
Matrix = List[List[T]]
MatrixLike = Sequence[Sequence[T]]

EMPTY_MATRIX_MESSAGE = "Array must have at least one row"


def resolve_index(length: int, index: int) -> int:
    """Return the absolute position for ``index`` in a sequence of ``length``.

    Negative indices are counted from the end. The result is not clamped, so
    an index with ``abs(index) > length`` resolves to a negative number.
    """

    return length + index if index < 0 else index


def _require_rows(matrix: MatrixLike) -> None:
    if len(matrix) < 1:
        raise IndexError(EMPTY_MATRIX_MESSAGE)


def _row_value(value: Any, row_index: int) -> Any:
    if isinstance(value, (list, tuple)):
        return value[row_index] if row_index < len(value) else None
    return value


def add_column(matrix: MatrixLike, index: int, value: Any = None) -> Matrix:
    """Insert a cell at ``index`` into every row.

    Parameters
    ----------
    matrix:
        Rows to insert into. An empty matrix yields an empty result.
    index:
        Insert position. Negative values insert before the element counted
        from the end, so ``-1`` inserts before the last cell.
    value:
        Either one value used for every row, or a list/tuple with one value
        per row (rows past its end receive ``None``).

    Raises
    ------
    IndexError
        If ``abs(index)`` exceeds the length of a row. Rows are checked in
        order and the message names the first offending row.
    """

    magnitude = abs(index)
    result: Matrix = []
    for i, row in enumerate(matrix):
        if magnitude > len(row):
            raise IndexError(f"Index out of range for row {i}")
        result.append([*row[:index], _row_value(value, i), *row[index:]])

    logger.debug("add_column index=%s rows=%d", index, len(result))
    return result


def remove_column(matrix: MatrixLike, index: int) -> Matrix:
    """Remove the cell at ``index`` from every row.

    Raises
    ------
    IndexError
        If the matrix has no rows, or ``abs(index)`` is not smaller than the
        length of some row.
    """

    _require_rows(matrix)

    magnitude = abs(index)
    result: Matrix = []
    for i, row in enumerate(matrix):
        if magnitude >= len(row):
            raise IndexError(f"Index out of range for row {i}")
        position = resolve_index(len(row), index)
        result.append([*row[:position], *row[position + 1:]])

    logger.debug("remove_column index=%s rows=%d", index, len(result))
    return result


def move_column(matrix: MatrixLike, index: int, to: int) -> MatrixLike:
    """Move the cell at ``index`` to ``to`` in every row.

    ``to`` addresses the row after the cell has been taken out. When
    ``index == to`` the input is returned as is; the comparison uses the raw
    arguments, so ``-1`` and ``3`` on a four column matrix still take the
    general path.

    Raises
    ------
    IndexError
        If the matrix has no rows, or either index is out of range for a row.
    """

    _require_rows(matrix)
    if index == to:
        return matrix

    from_magnitude = abs(index)
    to_magnitude = abs(to)
    result: Matrix = []
    for i, row in enumerate(matrix):
        if from_magnitude >= len(row):
            raise IndexError(f"Index out of range for row {i}")
        if to_magnitude >= len(row):
            raise IndexError(f"To index out of range for row {i}")

        source = resolve_index(len(row), index)
        target = resolve_index(len(row), to)

        new_row = list(row)
        cell = new_row.pop(source)
        new_row.insert(target, cell)
        result.append(new_row)

    logger.debug("move_column %s -> %s rows=%d", index, to, len(result))
    return result


def move_cell(
    matrix: MatrixLike,
    from_row: int,
    from_column: int,
    to_row: int,
    to_column: int,
    default_value: Any = None,
) -> Matrix:
    """Move one cell to ``(to_row, to_column)``, growing the matrix if needed.

    The source must exist. Negative destination indices are resolved against
    the matrix as it was passed in, before the cell is removed. A destination
    row past the end appends empty rows. A destination column past the end of
    its row pads the row with ``default_value`` and writes the cell into the
    last padded slot; any other destination column inserts the cell, shifting
    later cells right.

    Rows other than the source and destination rows are shared with the
    input rather than copied.

    Raises
    ------
    IndexError
        If the matrix has no rows, the source is out of range, or a negative
        destination index still resolves below zero.
    """

    _require_rows(matrix)

    if abs(from_row) >= len(matrix):
        raise IndexError(f"From row index {from_row} out of range")
    source_row = resolve_index(len(matrix), from_row)

    if abs(from_column) >= len(matrix[source_row]):
        raise IndexError(f"From column index out of range for row {source_row}")
    source_column = resolve_index(len(matrix[source_row]), from_column)

    target_row = resolve_index(len(matrix), to_row)
    if target_row < 0:
        raise IndexError("Destination row out of range")
    input_width = len(matrix[target_row]) if target_row < len(matrix) else 0
    target_column = resolve_index(input_width, to_column)
    if target_column < 0:
        raise IndexError(f"Destination column out of range for row {target_row}")

    result: Matrix = list(matrix)  # type: ignore[arg-type]
    row = result[source_row]
    cell = row[source_column]
    result[source_row] = [*row[:source_column], *row[source_column + 1:]]

    while len(result) <= target_row:
        result.append([])

    destination = list(result[target_row])
    if target_column > len(destination):
        destination.extend([default_value] * (target_column - len(destination) + 1))
        destination[target_column] = cell
    else:
        destination.insert(target_column, cell)
    result[target_row] = destination

    logger.debug(
        "move_cell (%s, %s) -> (%s, %s)", source_row, source_column, target_row, target_column
    )
    return result


def to_rectangular(matrix: MatrixLike, default_value: Any = None) -> Matrix:
    """Pad every row on the right with ``default_value`` to the longest length.

    An empty matrix returns an empty list.
    """

    if len(matrix) < 1:
        return []

    width = max(len(row) for row in matrix)
    return [[*row, *([default_value] * (width - len(row)))] for row in matrix]


def to_square(matrix: MatrixLike, default_value: Any = None) -> MatrixLike:
    """Rectangularize ``matrix`` and append rows until it is square.

    Only rows are ever added. A matrix with more rows than columns comes back
    rectangular, not square.
    """

    if len(matrix) < 1:
        return matrix

    result = to_rectangular(matrix, default_value)
    columns = len(result[0])
    missing = columns - len(result)
    if missing > 0:
        result.extend([default_value] * columns for _ in range(missing))

    logger.debug("to_square %dx%d", len(result), columns)
    return result


def is_rectangular(matrix: MatrixLike) -> bool:
    """Return True if every row has the same length (vacuously for ``[]``)."""

    return len({len(row) for row in matrix}) <= 1


def is_square(matrix: MatrixLike) -> bool:
    return is_rectangular(matrix) and all(len(row) == len(matrix) for row in matrix)


def column_count(matrix: MatrixLike) -> Optional[int]:
    """Return the shared row length, or ``None`` if the matrix is jagged or empty."""

    if len(matrix) < 1 or not is_rectangular(matrix):
        return None
    return len(matrix[0])


__all__ = [
    "Matrix",
    "resolve_index",
    "add_column",
    "remove_column",
    "move_column",
    "move_cell",
    "to_rectangular",
    "to_square",
    "is_rectangular",
    "is_square",
    "column_count",
]
