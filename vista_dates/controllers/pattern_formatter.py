# vista_dates/controllers/pattern_formatter.py
from __future__ import annotations

import logging
import logging.config
import re
from dataclasses import dataclass
from datetime import date, datetime, time
from functools import lru_cache
from typing import Dict, Final, Iterable, List, Optional, Sequence, Tuple

import pyparsing as pp

from vista_dates.controllers import timezone_adapter as tza
from vista_dates.controllers.numeric_format import remove_trailing_zeros
from vista_dates.data_model.constants import (
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    VISTA_DATE_FORMAT_ARRAY,
    VISTA_DATETIME_FORMAT,
    VISTA_TIME_PATTERN,
)
from vista_dates.data_model.exceptions import DateTimeParseError
from vista_dates.utilities import LOGGING
from vista_dates.utilities.converters_scalar import to_datetime, to_local_datetime
from vista_dates.utilities.string_util import is_nullish

logging.config.dictConfig(LOGGING)
log = logging.getLogger(__name__)


# region Pattern tokens


@dataclass(frozen=True)
class PatternToken:
    """One piece of a date pattern: a field run (``yyyy``) or literal text."""

    letter: str  # "" for literal text
    width: int
    text: str

    @property
    def is_literal(self) -> bool:
        return self.letter == ""


def _literal(text: str) -> PatternToken:
    return PatternToken("", 0, text)


_ESCAPED_QUOTE = pp.Literal("''").set_parse_action(lambda t: _literal("'"))
_QUOTED = pp.QuotedString("'", esc_quote="''").set_parse_action(
    lambda t: _literal(t[0])
)
_FIELD_RUN = pp.Regex(r"([A-Za-z])\1*").set_parse_action(
    lambda t: PatternToken(t[0][0], len(t[0]), t[0])
)
_LITERAL_TEXT = pp.Regex(r"[^A-Za-z']+").set_parse_action(lambda t: _literal(t[0]))

# whitespace inside patterns is literal text, never skipped
_PATTERN_GRAMMAR = pp.ZeroOrMore(
    _ESCAPED_QUOTE | _QUOTED | _FIELD_RUN | _LITERAL_TEXT
).leave_whitespace()

_SUPPORTED_LETTERS: Final[str] = "yMdHhmsSa"

# endregion Pattern tokens

# region Compiled pattern


def _field_regex(token: PatternToken) -> str:
    letter, width = token.letter, token.width
    if letter == "y":
        if width == 2:
            return r"(\d{2})"
        return r"(\d{4})" if width >= 4 else r"(\d{1,4})"
    if letter == "M" and width == 3:
        return "((?i:" + "|".join(MONTH_ABBREVIATIONS) + "))"
    if letter == "M" and width >= 4:
        return "((?i:" + "|".join(MONTH_NAMES) + "))"
    if letter == "S":
        return rf"(\d{{{width}}})"
    if letter == "a":
        return r"((?i:AM|PM))"
    # M d H h m s
    return r"(\d{1,2})" if width == 1 else rf"(\d{{{width}}})"


def _format_field(token: PatternToken, value: datetime) -> str:
    letter, width = token.letter, token.width
    if letter == "y":
        if width == 2:
            return f"{value.year % 100:02d}"
        return f"{value.year:0{width}d}"
    if letter == "M":
        if width == 3:
            return MONTH_ABBREVIATIONS[value.month - 1]
        if width >= 4:
            return MONTH_NAMES[value.month - 1]
        return f"{value.month:0{width}d}"
    if letter == "d":
        return f"{value.day:0{width}d}"
    if letter == "H":
        return f"{value.hour:0{width}d}"
    if letter == "h":
        return f"{(value.hour % 12) or 12:0{width}d}"
    if letter == "m":
        return f"{value.minute:0{width}d}"
    if letter == "s":
        return f"{value.second:0{width}d}"
    if letter == "S":
        return f"{value.microsecond:06d}"[:width].ljust(width, "0")
    # a
    return "AM" if value.hour < 12 else "PM"


def _month_from_name(text: str) -> int:
    lowered = text.lower()
    for names in (MONTH_NAMES, MONTH_ABBREVIATIONS):
        for i, name in enumerate(names):
            if name.lower() == lowered:
                return i + 1
    raise ValueError(f"Unknown month name: {text!r}")


@dataclass(frozen=True)
class CompiledPattern:
    """
    A Java ``DateTimeFormatter``-style pattern ready to format and parse.

    Supported letters: ``y M d H h m s S a``; text in single quotes is literal.

        compile_pattern("yyyyMMdd.HHmmss").format(datetime(2018, 10, 21, 6, 12, 45))
            -> "20181021.061245"
    """

    pattern: str
    tokens: Tuple[PatternToken, ...]
    regex: re.Pattern[str]

    @property
    def fields(self) -> List[PatternToken]:
        return [t for t in self.tokens if not t.is_literal]

    def field_width(self, letter: str) -> int:
        """Width of the first run of ``letter``, or 0 when the pattern lacks it."""
        return next((t.width for t in self.fields if t.letter == letter), 0)

    def format(self, value: datetime) -> str:
        return "".join(
            t.text if t.is_literal else _format_field(t, value) for t in self.tokens
        )

    def match_fields(self, text: str) -> Dict[str, str]:
        """Return the raw text captured for each field letter; raise ValueError on mismatch."""
        m = self.regex.fullmatch(text)
        if m is None:
            raise ValueError(f"Text {text!r} does not match pattern {self.pattern!r}")
        return {t.letter: g for t, g in zip(self.fields, m.groups())}

    def _resolve_time(self, raw: Dict[str, str]) -> time:
        if "H" in raw:
            hour = int(raw["H"])
        elif "h" in raw:
            hour = int(raw["h"])
            if "a" in raw:
                hour = hour % 12 + (12 if raw["a"].upper() == "PM" else 0)
        else:
            hour = 0
        fraction = raw.get("S", "")
        microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
        return time(
            hour,
            int(raw.get("m", 0)),
            int(raw.get("s", 0)),
            microsecond,
        )

    def parse_datetime(self, text: str) -> datetime:
        """Parse ``text`` into a local date-time; missing time fields default to midnight."""
        raw = self.match_fields(text)
        if not all(k in raw for k in "yMd"):
            raise ValueError(f"Pattern {self.pattern!r} does not describe a date")
        year = int(raw["y"])
        if self.field_width("y") == 2:
            year += 2000
        month_txt = raw["M"]
        month = int(month_txt) if month_txt.isdigit() else _month_from_name(month_txt)
        return datetime.combine(
            date(year, month, int(raw["d"])), self._resolve_time(raw)
        )

    def parse_time(self, text: str) -> time:
        raw = self.match_fields(text)
        if "H" not in raw and "h" not in raw:
            raise ValueError(f"Pattern {self.pattern!r} does not describe a time")
        return self._resolve_time(raw)


@lru_cache(maxsize=128)
def compile_pattern(pattern: str) -> CompiledPattern:
    """Tokenize ``pattern`` and build its matching regular expression."""
    try:
        tokens = tuple(_PATTERN_GRAMMAR.parse_string(pattern, parse_all=True))
    except pp.ParseException as e:
        raise ValueError(f"Invalid date pattern {pattern!r}: {e}") from e

    parts: List[str] = []
    for token in tokens:
        if token.is_literal:
            parts.append(re.escape(token.text))
            continue
        if token.letter not in _SUPPORTED_LETTERS:
            raise ValueError(
                f"Unsupported pattern letter {token.letter!r} in {pattern!r}"
            )
        parts.append(_field_regex(token))
    return CompiledPattern(pattern, tokens, re.compile("".join(parts), re.ASCII))


# endregion Compiled pattern

# region Format


def format_with_pattern(value: object, pattern: Optional[str]) -> Optional[str]:
    """
    Format a local date-time according to ``pattern``.

    VistA date-time output has its trailing zeros trimmed to avoid spurious
    precision (http://www.hardhats.org/fileman/pm/cl_dt.htm).

        format_with_pattern(None,                  "MM/dd/yyyy")      = None
        format_with_pattern("2018-10-21T06:12:45", None)              -> ValueError
        format_with_pattern("2018-10-21T06:12:45", "MM/dd/yyyy")      = "10/21/2018"
        format_with_pattern("2018-10-21T06:12:45", "yyyyMMdd.HHmmss") = "20181021.061245"
        format_with_pattern("2018-10-21T00:00",    "yyyyMMdd.HHmmss") = "20181021"
        format_with_pattern("2018-10-21T20:00",    "yyyyMMdd.HHmmss") = "20181021.2"
    """
    if value is None or (isinstance(value, str) and is_nullish(value)):
        return None
    if pattern is None:
        raise ValueError("Date Format Pattern must not be null")

    formatted = compile_pattern(pattern).format(to_local_datetime(value))
    if pattern == VISTA_DATETIME_FORMAT:
        return remove_trailing_zeros(formatted)
    return formatted


def format_with_timezone_and_pattern(
    value: object, time_zone: Optional[str], pattern: Optional[str]
) -> Optional[str]:
    """
    Format a date-time at ``time_zone`` according to ``pattern``.

    The represented instant is preserved, so the local date can change:

        format_with_timezone_and_pattern("2018-10-21T06:12:45Z", "America/New_York", "yyyyMMdd.HHmmss")
            = "20181021.021245"
        format_with_timezone_and_pattern("2018-10-22T03:12:45Z", "America/New_York", "yyyyMMdd.HHmmss")
            = "20181021.231245"
        format_with_timezone_and_pattern("2018-10-22T03:12:45-04:00", "America/New_York", "MM/dd/yyyy")
            = "10/22/2018"

    A value without an offset is taken as wall-clock time at ``time_zone``.
    """
    tza.validate_time_zone(time_zone)
    if value is None or (isinstance(value, str) and is_nullish(value)):
        return None
    local = tza.to_zone_same_instant(to_datetime(value), time_zone)
    return format_with_pattern(local.replace(tzinfo=None), pattern)


def create_date_formats_from_array(date_formats: Iterable[str] = ()) -> str:
    """Render patterns as optional sections: ``["a", "b"]`` -> ``"[a] [b]"``."""
    return " ".join(f"[{fmt}]" for fmt in date_formats)


# endregion Format

# region Parse


def parse_with_pattern(text: str, pattern: str) -> datetime:
    return compile_pattern(pattern).parse_datetime(text)


def parse_with_catalog(
    text: str, catalog: Sequence[str] = VISTA_DATE_FORMAT_ARRAY
) -> datetime:
    """
    Parse ``text`` with the first catalog pattern that accepts it.

    Raises
    ------
    DateTimeParseError
        If no pattern in ``catalog`` matches.
    """
    for pattern in catalog:
        try:
            return parse_with_pattern(text, pattern)
        except ValueError as e:
            log.debug("Pattern %r rejected %r: %s", pattern, text, e)
    raise DateTimeParseError(
        f"Text {text!r} could not be parsed with any supported date format",
        text=text,
        patterns_tried=len(catalog),
    )


def parse_time_with_catalog(
    text: str, catalog: Sequence[str] = VISTA_TIME_PATTERN
) -> Optional[time]:
    """Parse a time of day with the first matching catalog pattern, or return None."""
    for pattern in catalog:
        try:
            return compile_pattern(pattern).parse_time(text)
        except ValueError:
            continue
    return None


# endregion Parse
