"""String helpers."""

from __future__ import annotations

import re
from typing import Any, Optional

_NEWLINE_RE = re.compile(r"(\r\n|\n|\\n|\r)")


def capitalize(text: Optional[str]) -> Optional[str]:
    """Upper-case the first character and leave the rest untouched."""

    if not text:
        return text
    return text[0].upper() + text[1:]


def compare_case_insensitive(a: Any, b: Any) -> bool:
    """Compare two strings ignoring case. Non-strings are compared with ``==``."""

    if not isinstance(a, str) or not isinstance(b, str):
        return a == b
    return a.lower() == b.lower()


def is_upper_case(text: str) -> bool:
    """Return True if ``text`` is upper case and has at least one cased character."""

    return text == text.upper() and text != text.lower()


def has_upper_case(text: str) -> bool:
    return any(is_upper_case(char) for char in text)


def string_between(text: Optional[str], start: str, end: str) -> str:
    """Return the text between the first ``start`` and the ``end`` after it.

    ``""`` is returned if either delimiter is missing.
    """

    if not text:
        return ""

    start_pos = text.find(start)
    if start_pos < 0:
        return ""
    start_pos += len(start)

    end_pos = text.find(end, start_pos)
    if end_pos < 0:
        return ""
    return text[start_pos:end_pos]


def _rfind_at_or_before(text: str, sub: str, position: int) -> int:
    # last occurrence of ``sub`` starting no later than ``position``
    return text.rfind(sub, 0, max(position, 0) + len(sub))


def last_string_between(text: str, start: str, end: str) -> str:
    """Return the text between the last ``start`` and the ``end`` after it.

    When ``start`` and ``end`` are the same delimiter, the text between its
    last two occurrences is returned. ``""`` if a delimiter is missing.
    """

    if start == end:
        end_pos = text.rfind(end)
        if end_pos < 0:
            return ""
        start_pos = _rfind_at_or_before(text, start, end_pos - len(end))
        if start_pos < 0:
            return ""
        start_pos += len(start)
    else:
        start_pos = text.rfind(start)
        if start_pos < 0:
            return ""
        start_pos += len(start)
        end_pos = text.find(end, start_pos)
        if end_pos < 0:
            return ""

    return text[start_pos:end_pos]


def nl2br(text: Any) -> Any:
    """Replace line breaks (including a literal ``\\n``) with ``<br>``."""

    if text is None:
        return text
    if not isinstance(text, str):
        text = f"{text}"
    return _NEWLINE_RE.sub("<br>", text)


def to_boolean(text: Any) -> Optional[bool]:
    """Map ``"true"``/``"false"`` (any case) to a bool, anything else to None."""

    if not isinstance(text, str):
        return None

    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


__all__ = [
    "capitalize",
    "compare_case_insensitive",
    "has_upper_case",
    "is_upper_case",
    "last_string_between",
    "nl2br",
    "string_between",
    "to_boolean",
]
