"""Predicates for single values."""

from __future__ import annotations

from typing import Any

_PRIMITIVES = (type(None), bool, int, float, complex, str, bytes)


def is_none(value: Any) -> bool:
    return value is None


def is_empty(value: Any) -> bool:
    """Return True for ``None``, ``""``, an empty list/tuple or an empty dict."""

    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def is_primitive(value: Any) -> bool:
    return isinstance(value, _PRIMITIVES)


__all__ = ["is_none", "is_empty", "is_primitive"]
