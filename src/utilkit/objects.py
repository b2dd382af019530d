"""Lookups on (nested) dictionaries addressed by dotted paths."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Iterable, List, Optional

from utilkit.value import is_empty


def get_property(obj: Optional[Mapping[str, Any]], path: str) -> Any:
    """Return the value at ``path`` in ``obj``.

    ``path`` may use dot notation, e.g. ``"date.last_changed"``. A key that
    itself contains dots is preferred over descending into nested mappings.

    Returns
    -------
    Any
        The value, or ``None`` when ``obj`` or ``path`` is empty or the path
        does not exist.
    """

    if not obj or not path:
        return None
    return _get_nested(obj, path.split("."))


def _get_nested(obj: Any, parts: List[str]) -> Any:
    if not parts:
        return obj
    if not isinstance(obj, Mapping):
        return None

    joined = ".".join(parts)
    if joined in obj:
        return obj[joined]
    return _get_nested(obj.get(parts[0]), parts[1:])


def has_property(obj: Optional[Mapping[str, Any]], path: str) -> bool:
    """Return True if ``path`` exists in ``obj`` and its value is not empty."""

    return not is_empty(get_property(obj, path))


def has_any_property(obj: Optional[Mapping[str, Any]], paths: Iterable[str]) -> bool:
    if not obj or not isinstance(paths, (list, tuple, set)):
        return False
    return any(has_property(obj, path) for path in paths)


def has_valid_property(obj: Optional[Mapping[str, Any]]) -> bool:
    """Return True if at least one value of ``obj`` is not empty."""

    if not obj:
        return False
    return any(not is_empty(value) for value in obj.values())


def is_empty_dict(value: Any) -> bool:
    return isinstance(value, Mapping) and len(value) == 0


def property_is(obj: Optional[Mapping[str, Any]], path: str, value: Any) -> bool:
    """Return True if the value at ``path`` equals ``value``.

    A list ``value`` is treated as alternatives and matches if any of them
    does. An empty list only matches a property holding an empty list.
    """

    current = get_property(obj, path)
    if not isinstance(value, list):
        value = [value]
    elif not value:
        return isinstance(current, (list, tuple)) and len(current) == 0

    return any(current == alternative for alternative in value)


def remove_properties(obj: Optional[MutableMapping[str, Any]], keys: Iterable[str]):
    """Delete ``keys`` from ``obj`` in place and return it.

    Missing keys are ignored.

    Raises
    ------
    TypeError
        If ``obj`` is truthy but not a mutable mapping.
    """

    if not obj:
        return obj
    if not isinstance(obj, MutableMapping):
        raise TypeError("The given value is not a dictionary")

    for key in keys:
        obj.pop(key, None)
    return obj


__all__ = [
    "get_property",
    "has_property",
    "has_any_property",
    "has_valid_property",
    "is_empty_dict",
    "property_is",
    "remove_properties",
]
