# io/io_file.py
import json
from functools import partial
from pathlib import Path

import numpy as np
import pandas as pd

from utilkit.logging import get_logger
from utilkit.matrix import to_rectangular

logger = get_logger(__name__)


def get_reader(file, **kwargs):
    """Return a headerless pandas reader for ``file`` or None for unknown types."""

    file = str(file)
    kwargs.setdefault("header", None)
    if file.endswith(".tsv"):
        return partial(pd.read_table, **kwargs)
    elif file.endswith(".csv"):
        return partial(pd.read_csv, **kwargs)
    elif file.endswith(".xlsx"):
        return partial(pd.read_excel, **kwargs)
    else:
        logger.error("do not know how to read file: %s", file)
        return None


def _restore_integer_columns(df):
    # a blank cell turns an int column into float64 on read
    for column in df.columns:
        series = df[column]
        if series.dtype.kind != "f" or not series.isna().any():
            continue
        values = series.dropna()
        if np.isfinite(values).all() and (values == values.round()).all():
            df[column] = series.astype("Int64")
    return df


def frame_to_matrix(df):
    """Convert a DataFrame into a list of rows.

    Missing cells become ``None`` and trailing ``None`` cells are dropped, so
    a jagged matrix written with :func:`write_matrix` reads back jagged.
    Float columns that only hold whole numbers next to missing cells are
    read back as ints.
    """

    df = _restore_integer_columns(df.copy())
    df = df.astype(object).where(df.notna(), None)

    matrix = []
    for row in df.itertuples(index=False, name=None):
        cells = [_to_python(cell) for cell in row]
        while cells and cells[-1] is None:
            cells.pop()
        matrix.append(cells)
    return matrix


def _to_python(cell):
    if isinstance(cell, np.generic):
        return cell.item()
    return cell


def matrix_to_frame(matrix, default_value=None):
    """Return ``matrix`` as a rectangular DataFrame with positional columns."""

    return pd.DataFrame(to_rectangular(matrix, default_value))


def to_array(matrix, default_value=0, dtype=None):
    """Return ``matrix`` padded with ``default_value`` as a 2D numpy array."""

    rows = to_rectangular(matrix, default_value)
    if not rows:
        return np.empty((0, 0), dtype=dtype)
    return np.asarray(rows, dtype=dtype)


def read_matrix(file_path, **kwargs):
    """Load a matrix from a ``.json``, ``.csv``, ``.tsv`` or ``.xlsx`` file."""

    path = Path(file_path)
    if path.suffix == ".json":
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, list) or not all(isinstance(row, list) for row in data):
            raise ValueError(f"{path} does not contain a list of rows")
        return data

    reader = get_reader(path, **kwargs)
    if reader is None:
        raise ValueError(f"Unsupported file type: {path.suffix or path.name}")

    try:
        df = reader(path)
    except pd.errors.EmptyDataError:
        return []

    logger.debug("read %d rows from %s", len(df), path)
    return frame_to_matrix(df)


def write_matrix(matrix, file_path, default_value=None):
    """Write ``matrix`` to ``file_path``; the suffix selects the format."""

    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.suffix == ".json":
        with path.open("w", encoding="utf-8") as handle:
            json.dump(matrix, handle)
            handle.write("\n")
    elif path.suffix in {".csv", ".tsv"}:
        sep = "\t" if path.suffix == ".tsv" else ","
        matrix_to_frame(matrix, default_value).to_csv(path, sep=sep, header=False, index=False)
    elif path.suffix == ".xlsx":
        matrix_to_frame(matrix, default_value).to_excel(path, header=False, index=False)
    else:
        raise ValueError(f"Unsupported file type: {path.suffix or path.name}")

    logger.debug("wrote %d rows to %s", len(matrix), path)
    return path
