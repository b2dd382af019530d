"""Small, stateless helpers for lists, dictionaries, strings, values and
jagged 2D matrices.

The matrix editing functions are re-exported here for convenience; the other
helpers live in their own modules (:mod:`utilkit.array`,
:mod:`utilkit.objects`, :mod:`utilkit.strings`, :mod:`utilkit.value`,
:mod:`utilkit.numeric`, :mod:`utilkit.timing`).
"""

from .matrix import (
    add_column,
    move_cell,
    move_column,
    remove_column,
    to_rectangular,
    to_square,
)

__all__ = [
    "add_column",
    "move_cell",
    "move_column",
    "remove_column",
    "to_rectangular",
    "to_square",
]
