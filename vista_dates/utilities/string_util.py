"""
String classification helpers shared by every converter.

Features:
- "Nullish" detection for the placeholder values the VistA host emits
- Blank detection for configuration values (time zones)
"""

from __future__ import annotations

import re
from typing import Any, Final

_NULLISH_LITERALS: Final[frozenset[str]] = frozenset({"", "-1", "Invalid Date"})
_BLANK_RE: Final[re.Pattern[str]] = re.compile(r"\s*")


def is_nullish(value: Any) -> bool:
    """
    Determine whether ``value`` represents "no value".

    Examples:
        is_nullish(None)              -> True
        is_nullish("")                -> True
        is_nullish(" ")               -> True
        is_nullish("-1")              -> True
        is_nullish("Invalid Date")    -> True
        is_nullish("data")            -> False
        is_nullish("10/21/2018")      -> False
        is_nullish("20181021.061245") -> False
    """
    if value is None:
        return True
    return str(value).strip() in _NULLISH_LITERALS


def is_blank(value: Any) -> bool:
    """True only for strings made entirely of whitespace (``""`` included).

    ``None`` and other non-string values are *not* blank.
    """
    if not isinstance(value, str):
        return False
    return _BLANK_RE.fullmatch(value) is not None
