"""
Relative VistA date expressions.

Grammar (keywords are case-insensitive):

    expression := date-part ['@' time-part]
    date-part  := T | TODAY | N | NOW | NOON | MID
                | (T | TODAY | N | NOW) ('+' | '-') amount [unit]
    unit       := D | W | M | H | '        (days when absent or unknown)
    time-part  := NOW | NOON | MID | U | <time literal>

A time part is honoured only when the date part is relative to today (starts
with ``T``); otherwise the date-only value is returned.

Examples with "now" = 2018-10-21T06:45:23:

    T            -> 2018-10-21T00:00:00
    N            -> 2018-10-21T06:45:23
    NOON         -> 2018-10-21T12:00:00
    MID          -> 2018-10-22T00:00:00
    T-3M@12PM    -> 2018-07-21T12:00:00
    T-3D@064523  -> 2018-10-18T06:45:23
    T@12PM@NOON  -> None
"""

# vista_dates/controllers/relative_parser.py
from __future__ import annotations

import logging
import logging.config
import re
from datetime import datetime, time, timedelta
from typing import Final, Optional, Union

import pyparsing as pp
from dateutil.relativedelta import relativedelta

from vista_dates.controllers import clock as clock_mod
from vista_dates.controllers.pattern_formatter import parse_time_with_catalog
from vista_dates.data_model.enum_adjust_unit import AdjustUnit
from vista_dates.data_model.enum_date_part import DatePart
from vista_dates.data_model.interfaces import IClock
from vista_dates.data_model.relative_expression import Adjustment, RelativeExpression
from vista_dates.utilities import LOGGING
from vista_dates.utilities.converters_scalar import format_local_iso, to_local_datetime
from vista_dates.utilities.string_util import is_nullish

logging.config.dictConfig(LOGGING)
log = logging.getLogger(__name__)

EXPRESSION_SEPARATOR: Final[str] = "@"

# region Grammar

_TODAY_ANCHOR = pp.one_of("T TODAY", caseless=True).set_parse_action(
    lambda: DatePart.TODAY
)
_NOW_ANCHOR = pp.one_of("N NOW", caseless=True).set_parse_action(lambda: DatePart.NOW)

_RELATIVE_DATE_PART = (
    (_TODAY_ANCHOR | _NOW_ANCHOR)("anchor")
    + pp.Char("+-")("sign")
    + pp.Optional(pp.Regex(r"[^+\-]+"), default="")("adjuster")
).leave_whitespace()

_ADJUSTER_RE: Final[re.Pattern[str]] = re.compile(r"(\d+)(.*)", re.ASCII | re.DOTALL)
_TWELVE_HOUR_RE: Final[re.Pattern[str]] = re.compile(r"(\d{1,2}):(\d{2})(AM|PM)", re.ASCII)

# endregion Grammar

# region Predicates


def is_date_relative_to_today(date: str) -> bool:
    return date.upper().startswith("T")


def is_date_part_today(date_part: str) -> bool:
    return date_part.lower() in ("t", "today")


def is_date_part_now(date_part: str) -> bool:
    return date_part.lower() in ("n", "now")


def is_date_part_noon(date_part: str = "") -> bool:
    return date_part.lower() == "noon"


def is_date_part_midnight(date_part: str) -> bool:
    # only the short token; "MIDNIGHT" is not a date part
    return date_part.lower() == "mid"


def is_date_part_positively_relative(date_part: str) -> bool:
    return "+" in date_part


def is_date_part_negatively_relative(date_part: str) -> bool:
    return "-" in date_part


# endregion Predicates

# region Adjustments


def parse_adjuster(text: str, sign: Optional[str] = None) -> Optional[Adjustment]:
    """
    Parse the ``<amount>[<unit>]`` tail of a relative date part.

        parse_adjuster("3")        = Adjustment(3, DAYS)
        parse_adjuster("3M", "-")  = Adjustment(3, MONTHS, "-")
        parse_adjuster("3X")       = Adjustment(3, DAYS)
        parse_adjuster("M")        = None
    """
    m = _ADJUSTER_RE.match(text)
    if m is None:
        log.debug("Failed to parse relative date adjustment %r", text)
        return None
    return Adjustment(int(m.group(1)), AdjustUnit.from_token(m.group(2)), sign)


def adjust_relative_date(value: datetime, adjustment: Adjustment) -> datetime:
    """Apply ``adjustment`` to ``value``; an absent or unknown sign leaves it unchanged."""
    delta = relativedelta(**{adjustment.unit.value: adjustment.amount})
    if adjustment.sign == "+":
        return value + delta
    if adjustment.sign == "-":
        return value - delta
    return value


# endregion Adjustments

# region Structural parse


def _parse_date_text(date_text: str) -> Optional[RelativeExpression]:
    if is_date_part_positively_relative(date_text) or is_date_part_negatively_relative(
        date_text
    ):
        try:
            parsed = _RELATIVE_DATE_PART.parse_string(date_text, parse_all=True)
        except pp.ParseException:
            log.debug("Not a relative date part: %r", date_text)
            return None
        adjustment = parse_adjuster(parsed.get("adjuster", ""), parsed["sign"])
        if adjustment is None:
            return None
        return RelativeExpression(
            DatePart.RELATIVE, anchor=parsed["anchor"], adjustment=adjustment
        )

    if is_date_part_today(date_text):
        kind = DatePart.TODAY
    elif is_date_part_now(date_text):
        kind = DatePart.NOW
    elif is_date_part_noon(date_text):
        kind = DatePart.NOON
    elif is_date_part_midnight(date_text):
        kind = DatePart.MIDNIGHT
    else:
        return None
    return RelativeExpression(kind)


def parse_relative_expression(text: Optional[str]) -> Optional[RelativeExpression]:
    """
    Parse ``text`` into its structure without evaluating it.

    Returns None for anything that is not a relative expression, including
    text with more than one ``@``.
    """
    if text is None:
        return None
    parts = text.split(EXPRESSION_SEPARATOR)
    if len(parts) > 2:
        return None
    expression = _parse_date_text(parts[0].strip())
    if expression is None or len(parts) == 1:
        return expression
    return RelativeExpression(
        expression.date_part,
        anchor=expression.anchor,
        adjustment=expression.adjustment,
        time_part=parts[1].strip(),
    )


# endregion Structural parse

# region Evaluation


def _resolve_date(
    expression: RelativeExpression, clock: Optional[IClock]
) -> Optional[datetime]:
    current = clock_mod.now(clock)
    midnight = datetime.combine(current.date(), time())
    kind = expression.date_part
    if kind is DatePart.TODAY:
        return midnight
    if kind is DatePart.NOW:
        return current
    if kind is DatePart.NOON:
        return midnight.replace(hour=12)
    if kind is DatePart.MIDNIGHT:
        return midnight + timedelta(days=1)

    adjustment = expression.adjustment
    if adjustment is None:
        return None
    base = midnight if expression.anchor is DatePart.TODAY else current
    try:
        return adjust_relative_date(base, adjustment)
    except (OverflowError, ValueError):
        log.debug("Relative date out of range: %r from %s", adjustment, base)
        return None


def _apply_time_part(
    value: datetime, time_part: str, clock: Optional[IClock]
) -> Optional[datetime]:
    token = time_part.strip().upper()
    day = datetime.combine(value.date(), time())
    if token == "":
        return value
    if token == "U":
        return day
    if token == "NOW":
        return datetime.combine(value.date(), clock_mod.now(clock).time())
    if token == "NOON":
        return day.replace(hour=12)
    if token == "MID":
        try:
            return day + timedelta(days=1)
        except OverflowError:
            log.debug("Relative time out of range: MID after %s", day)
            return None

    parsed = parse_time(time_part) or parse_time_with_catalog(time_part.strip())
    if parsed is None:
        return None
    return datetime.combine(value.date(), parsed)


def parse_date_part(
    date_part: str, *, clock: Optional[IClock] = None
) -> Optional[str]:
    """
    Evaluate a date part (no ``@``) to a local date-time string, or None.

        parse_date_part("T+3")  = "2018-10-24T00:00:00"
        parse_date_part("ABC")  = None
    """
    expression = _parse_date_text(date_part.strip())
    if expression is None:
        return None
    value = _resolve_date(expression, clock)
    return None if value is None else format_local_iso(value)


def parse_time(time_part: str) -> Optional[time]:
    """
    Parse a 12-hour clock literal such as ``9:45AM`` or ``12:30P``.

    Anything else is a soft failure: None is returned and the attempt is
    logged at DEBUG.
    """
    text = time_part.strip().upper()
    if text.endswith(("A", "P")):
        text += "M"
    m = _TWELVE_HOUR_RE.fullmatch(text)
    if m is not None:
        hours, minutes = int(m.group(1)), int(m.group(2))
        offset = 12 if m.group(3) == "PM" else 0
        try:
            return time(hours % 12 + offset, minutes)
        except ValueError:
            pass
    log.debug("Failed to parse relative time [%s]", time_part)
    return None


def parse_time_part(
    parsed_date: Union[datetime, str, None],
    date_part: str,
    time_part: str,
    *,
    clock: Optional[IClock] = None,
) -> Optional[str]:
    """
    Apply ``time_part`` to the value already parsed from ``date_part``.

    Only date parts relative to today take a time; for any other date part
    the date-time is returned as is.

        parse_time_part("2018-10-21T00:00", "TODAY", "NOON")     = "2018-10-21T12:00:00"
        parse_time_part("2018-10-21T00:00", "TODAY", "MID")      = "2018-10-22T00:00:00"
        parse_time_part("2018-10-21T00:00", "TODAY", "9:45")     = "2018-10-21T09:45:00"
        parse_time_part("2018-10-21T06:45:23", "NOW", "12PM")    = "2018-10-21T06:45:23"
        parse_time_part("2018-10-21T06:45:23", "TODAY", "ABC")   = None
        parse_time_part(None, "ABC", "12PM")                     = None
    """
    if parsed_date is None or (
        isinstance(parsed_date, str) and is_nullish(parsed_date)
    ):
        return None
    value = to_local_datetime(parsed_date)
    if not is_date_relative_to_today(date_part):
        return format_local_iso(value)
    result = _apply_time_part(value, time_part, clock)
    return None if result is None else format_local_iso(result)


def parse_relative_vista_date(
    date_string: Optional[str], *, clock: Optional[IClock] = None
) -> Optional[str]:
    """
    Evaluate a full relative expression, or return None if ``date_string`` is not one.

        parse_relative_vista_date("T+3@NOON")     = "2018-10-24T12:00:00"
        parse_relative_vista_date("T+3H@")        = "2018-10-21T03:00:00"
        parse_relative_vista_date("123@12PM")     = None
        parse_relative_vista_date("TODAY@ABC")    = None
    """
    expression = parse_relative_expression(date_string)
    if expression is None:
        return None
    value = _resolve_date(expression, clock)
    if value is None:
        return None
    if expression.time_part is not None and expression.is_relative_to_today:
        result = _apply_time_part(value, expression.time_part, clock)
        if result is None:
            return None
        value = result
    return format_local_iso(value)


# endregion Evaluation
