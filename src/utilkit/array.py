"""List helpers: de-duplication, rotation and comparator builders for sorting.

Comparators follow the ``cmp`` protocol (negative, zero, positive) and are
meant to be wrapped with :func:`functools.cmp_to_key`; :func:`sort_by` does
that for the common case.
"""

from __future__ import annotations

from functools import cmp_to_key
from numbers import Number
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar, Union

from utilkit.objects import get_property
from utilkit.strings import compare_case_insensitive
from utilkit.value import is_empty

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]

# A property name, "-name" for descending, a (name, value) pair or a comparator.
SortingDefinition = Union[str, Tuple[str, Any], List[Any], Comparator]


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def find_max_object(items: Sequence[Dict[str, Any]], prop: str) -> Optional[Dict[str, Any]]:
    """Return the item with the largest ``item[prop]``; the first one wins ties."""

    if len(items) < 1:
        return None
    if len(items) == 1:
        return items[0]

    best = items[0]
    for current in items[1:]:
        if current[prop] > best[prop]:
            best = current
    return best


def get_outer_elements(items: Sequence[T]) -> List[T]:
    """Return ``[]``, ``[first]`` or ``[first, last]``."""

    if len(items) < 1:
        return []
    if len(items) < 2:
        return [items[0]]
    return [items[0], items[-1]]


def includes_case_insensitive(items: Any, search: str) -> bool:
    if not isinstance(items, (list, tuple)):
        return False
    return any(compare_case_insensitive(element, search) for element in items)


def is_empty_list(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and len(value) < 1


class _SeenValues:
    """Membership by type and equality, so ``1``, ``True`` and ``1.0`` differ."""

    def __init__(self):
        self._hashable = set()
        self._unhashable = []

    def add(self, value) -> bool:
        """Record ``value`` and return True if it was not seen before."""

        try:
            key = (type(value), value)
            if key in self._hashable:
                return False
            self._hashable.add(key)
            return True
        except TypeError:
            pass

        for seen in self._unhashable:
            if type(seen) is type(value) and seen == value:
                return False
        self._unhashable.append(value)
        return True


def remove_duplicates(items: Sequence[T]) -> List[T]:
    """Return a new list with the first occurrence of each value, in order.

    Unhashable items such as dicts are compared with ``==``. Values of
    different types are never merged.
    """

    seen = _SeenValues()
    return [element for element in items if seen.add(element)]


def remove_empty(items: Sequence[T]) -> List[T]:
    """Drop ``None``, ``""`` and empty containers."""

    return [element for element in items if not is_empty(element)]


def remove_duplicates_and_empty(items: Sequence[T]) -> List[T]:
    return remove_empty(remove_duplicates(items))


def remove_duplicates_by(
    items: Sequence[T], accessor: Union[str, Callable[[T], Any]]
) -> List[T]:
    """Remove items whose accessed value was already seen.

    ``accessor`` is a key name or a callable. Items without a value (missing
    key or ``None``) are always kept.
    """

    if isinstance(accessor, str):
        key = accessor

        def get_value(element):
            return element.get(key) if isinstance(element, dict) else None

    else:
        get_value = accessor

    seen = _SeenValues()
    result = []
    for element in items:
        value = get_value(element)
        if value is None or seen.add(value):
            result.append(element)
    return result


def shift(items: List[T], by: int) -> List[T]:
    """Rotate ``items`` left by ``by`` positions (right when negative)."""

    if len(items) < 1:
        return items

    if abs(by) > len(items):
        by = by % len(items)
    return items[by:] + items[:by]


def sort_by_value(key: str, value: Any, direction: str = "ASC") -> Comparator:
    """Comparator placing items whose ``key`` equals ``value`` first.

    With ``direction="DESC"`` matching items go last. Other items keep their
    relative order under a stable sort.
    """

    descending = direction == "DESC"

    def compare(a, b):
        a_equal = a.get(key) == value
        b_equal = b.get(key) == value

        if a_equal and not b_equal:
            return 1 if descending else -1
        if not a_equal and b_equal:
            return -1 if descending else 1
        return 0

    return compare


def sort_by_values(values: Sequence[Any]) -> Comparator:
    """Comparator ordering by position in ``values``; unknown values go last."""

    def position(element):
        try:
            return values.index(element)
        except ValueError:
            return len(values)

    def compare(a, b):
        return _cmp(position(a), position(b))

    return compare


def dynamic_comparer(a: Any, b: Any) -> int:
    """Ascending comparator for mixed values.

    Numbers compare numerically and strings lexically; other combinations
    compare their ``str()``. ``None`` sorts last.
    """

    if a is None and b is None:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1

    if _is_number(a) and _is_number(b):
        return _cmp(a, b)
    if isinstance(a, str) and isinstance(b, str):
        return _cmp(a, b)
    return _cmp(str(a), str(b))


def dynamic_comparer_descending(a: Any, b: Any) -> int:
    """Descending counterpart of :func:`dynamic_comparer`; ``None`` sorts first."""

    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    return dynamic_comparer(b, a)


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _property_sorter(prop: str, comparer: Comparator) -> Comparator:
    def compare(a, b):
        return comparer(get_property(a, prop), get_property(b, prop))

    return compare


def create_chained_sorting_function(definitions: Sequence[SortingDefinition]) -> Comparator:
    """Build one comparator from several sorting definitions.

    Each definition is tried in order until one of them tells the items
    apart:

    - ``"size"`` sorts by the property ascending (dotted paths allowed)
    - ``"-size"`` sorts by the property descending
    - ``("verified", True)`` puts items with that value first
    - a callable is used as a comparator directly

    Examples
    --------
    >>> compare = create_chained_sorting_function(["-confidence", ("verified", True), "size"])
    >>> rows.sort(key=cmp_to_key(compare))

    Raises
    ------
    ValueError
        If a definition is none of the above.
    """

    comparators: List[Comparator] = []
    for definition in definitions:
        if isinstance(definition, str):
            if definition.startswith("-"):
                comparators.append(_property_sorter(definition[1:], dynamic_comparer_descending))
            else:
                comparators.append(_property_sorter(definition, dynamic_comparer))
        elif isinstance(definition, (tuple, list)):
            if len(definition) != 2:
                raise ValueError(f"Invalid sorting function: {definition!r}")
            comparators.append(sort_by_value(definition[0], definition[1]))
        elif callable(definition):
            comparators.append(definition)
        else:
            raise ValueError(f"Invalid sorting function: {definition!r}")

    def compare(a, b):
        for comparator in comparators:
            result = comparator(a, b)
            if result != 0:
                return result
        return 0

    return compare


def sort_by(items: Sequence[T], definitions: Sequence[SortingDefinition]) -> List[T]:
    """Return a sorted copy of ``items`` using chained sorting definitions."""

    return sorted(items, key=cmp_to_key(create_chained_sorting_function(definitions)))


def join_reducer(accumulator: List[T], current: Sequence[T]) -> List[T]:
    """Reducer concatenating lists, for use with :func:`functools.reduce`."""

    return [*accumulator, *current]


__all__ = [
    "SortingDefinition",
    "create_chained_sorting_function",
    "dynamic_comparer",
    "dynamic_comparer_descending",
    "find_max_object",
    "get_outer_elements",
    "includes_case_insensitive",
    "is_empty_list",
    "join_reducer",
    "remove_duplicates",
    "remove_duplicates_and_empty",
    "remove_duplicates_by",
    "remove_empty",
    "shift",
    "sort_by",
    "sort_by_value",
    "sort_by_values",
]
