"""
Public date conversion entry points.

Parsing normalises VistA / FileMan / relative / catalog strings to a local
date-time; formatting renders date values into VistA, FileMan or display
patterns, optionally at a time zone. All functions return None for nullish
input (None, "", whitespace, "-1", "Invalid Date").

Local results are ``YYYY-MM-DDTHH:MM:SS``; offset results add ``Z`` or ``±HH:MM``.
"""

# vista_dates/controllers/date_utils.py
from __future__ import annotations

import logging
import logging.config
from datetime import date, datetime, timedelta
from typing import Optional, cast

from dateutil.relativedelta import relativedelta

from vista_dates.controllers import clock as clock_mod
from vista_dates.controllers import timezone_adapter as tza
from vista_dates.controllers.numeric_format import (
    convert_date_from_fileman_to_vista,
    convert_date_from_vista_to_fileman,
    zero_pad_vista_date_time,
)
from vista_dates.controllers.pattern_formatter import (
    format_with_pattern,
    format_with_timezone_and_pattern,
    parse_with_catalog,
)
from vista_dates.controllers.relative_parser import parse_relative_vista_date
from vista_dates.data_model.constants import (
    DEFAULT_DATE_FORMAT,
    FILEMAN_DATE_FORMAT_PATTERN,
    VISTA_DATE_FORMAT,
    VISTA_DATE_FORMAT_PATTERN,
    VISTA_DATETIME_FORMAT,
)
from vista_dates.data_model.interfaces import IClock
from vista_dates.utilities import LOGGING
from vista_dates.utilities.converters_scalar import (
    format_local_iso,
    format_offset_iso,
    to_datetime,
    truncate_to_seconds,
)
from vista_dates.utilities.string_util import is_nullish

logging.config.dictConfig(LOGGING)
log = logging.getLogger(__name__)

UTC_ZONE = "UTC"


# region Parse


def _parse_local(date_string: Optional[str], clock: Optional[IClock]) -> Optional[datetime]:
    if date_string is None or is_nullish(date_string):
        return None
    text = date_string.strip()

    if VISTA_DATE_FORMAT_PATTERN.match(text) or FILEMAN_DATE_FORMAT_PATTERN.match(text):
        padded = zero_pad_vista_date_time(convert_date_from_fileman_to_vista(text))
        log.debug("Parsing numeric date %r as %r", date_string, padded)
        return truncate_to_seconds(parse_with_catalog(cast(str, padded)))

    relative = parse_relative_vista_date(text, clock=clock)
    if relative is not None:
        return to_datetime(relative)
    return truncate_to_seconds(parse_with_catalog(text))


def parse_to_local(
    date_string: Optional[str], *, clock: Optional[IClock] = None
) -> Optional[str]:
    """
    Parse a VistA, FileMan, relative or catalog date string into a local date-time.

    Examples (now = 2018-10-21T06:45:23):
        parse_to_local(None)                    = None
        parse_to_local("20181021")              = "2018-10-21T00:00:00"
        parse_to_local("20181021.02")           = "2018-10-21T02:00:00"
        parse_to_local("20181021.02124579865")  = "2018-10-21T02:12:45"
        parse_to_local("3181021.021245")        = "2018-10-21T02:12:45"
        parse_to_local("T+3@NOON")              = "2018-10-24T12:00:00"
        parse_to_local("10/21/2018")            = "2018-10-21T00:00:00"
        parse_to_local("ABC")                   -> DateTimeParseError

    Raises
    ------
    DateTimeParseError
        If the text is not nullish and matches no supported shape.
    """
    value = _parse_local(date_string, clock)
    return None if value is None else format_local_iso(value)


def parse_to_offset(
    date_string: Optional[str], *, clock: Optional[IClock] = None
) -> Optional[str]:
    """
    Parse like `parse_to_local`, then attach a UTC offset (no conversion).

        parse_to_offset("20181021.021245") = "2018-10-21T02:12:45Z"
    """
    value = _parse_local(date_string, clock)
    if value is None:
        return None
    return format_offset_iso(tza.localize(value, UTC_ZONE))


def parse_to_utc(
    date_string: Optional[str],
    time_zone: Optional[str],
    *,
    clock: Optional[IClock] = None,
) -> Optional[str]:
    """
    Parse a wall-clock value at ``time_zone`` and express it at UTC.

        parse_to_utc("20181021",        "America/New_York") = "2018-10-21T04:00:00Z"
        parse_to_utc("20181021.231245", "America/New_York") = "2018-10-22T03:12:45Z"
        parse_to_utc("20181021.021245", "UTC")              = "2018-10-21T02:12:45Z"
    """
    tza.validate_time_zone(time_zone)
    value = _parse_local(date_string, clock)
    if value is None:
        return None
    at_zone = tza.localize(value, time_zone)
    return format_offset_iso(tza.to_zone_same_instant(at_zone, UTC_ZONE))


def parse_from_utc(
    date_string: Optional[str],
    time_zone: Optional[str],
    *,
    clock: Optional[IClock] = None,
) -> Optional[str]:
    """
    Parse a value recorded at UTC and express it at ``time_zone``.

        parse_from_utc("20181021",        "America/New_York") = "2018-10-20T20:00:00-04:00"
        parse_from_utc("20181022.031245", "America/New_York") = "2018-10-21T23:12:45-04:00"
        parse_from_utc("20181021.061245", "UTC")              = "2018-10-21T06:12:45Z"
    """
    tza.validate_time_zone(time_zone)
    value = _parse_local(date_string, clock)
    if value is None:
        return None
    at_utc = tza.localize(value, UTC_ZONE)
    return format_offset_iso(tza.to_zone_same_instant(at_utc, time_zone))


# endregion Parse

# region Format


def format_vista_date(value: object) -> Optional[str]:
    """``2018-10-21`` -> ``"20181021"``"""
    return format_with_pattern(value, VISTA_DATE_FORMAT)


def format_vista_date_time(value: object) -> Optional[str]:
    """
    Format as VistA ``yyyyMMdd.HHmmss`` with trailing zeros trimmed.

        format_vista_date_time("2018-10-21T06:12:45") = "20181021.061245"
        format_vista_date_time("2018-10-21T00:00")    = "20181021"
        format_vista_date_time("2018-10-21T20:00")    = "20181021.2"
    """
    return format_with_pattern(value, VISTA_DATETIME_FORMAT)


def format_vista_date_time_with_timezone(
    value: object, time_zone: Optional[str]
) -> Optional[str]:
    """
    Format as VistA date-time at ``time_zone``, keeping the instant.

        format_vista_date_time_with_timezone("2018-10-22T03:12:45Z", "America/New_York")
            = "20181021.231245"
    """
    return format_with_timezone_and_pattern(value, time_zone, VISTA_DATETIME_FORMAT)


def format_fileman_date(value: object) -> Optional[str]:
    """``2018-10-21`` -> ``"3181021"``"""
    return convert_date_from_vista_to_fileman(format_vista_date(value))


def format_fileman_date_time(value: object) -> Optional[str]:
    """
    Format as FileMan ``yyyMMdd.HHmmss`` with trailing zeros trimmed.

        format_fileman_date_time("2018-10-21T06:12:45") = "3181021.061245"
        format_fileman_date_time("2018-10-21T00:00")    = "3181021"
    """
    return convert_date_from_vista_to_fileman(format_vista_date_time(value))


def format_local_date(value: object) -> Optional[str]:
    """``2018-10-21`` -> ``"10/21/2018"``"""
    return format_with_pattern(value, DEFAULT_DATE_FORMAT)


def format_local_date_time(value: object) -> Optional[str]:
    return format_with_pattern(value, DEFAULT_DATE_FORMAT)


def format_date_with_timezone(value: object, time_zone: Optional[str]) -> Optional[str]:
    """
    Format as ``MM/dd/yyyy`` at ``time_zone``; the date can roll back or forward.

        format_date_with_timezone("2018-10-22T03:12:45Z",      "America/New_York") = "10/21/2018"
        format_date_with_timezone("2018-10-22T03:12:45-04:00", "America/New_York") = "10/22/2018"
    """
    return format_with_timezone_and_pattern(value, time_zone, DEFAULT_DATE_FORMAT)


# endregion Format

# region Getters


def get_now(*, clock: Optional[IClock] = None) -> str:
    return format_local_iso(clock_mod.now(clock))


def get_today(*, clock: Optional[IClock] = None) -> str:
    return clock_mod.today(clock).isoformat()


def _days_from_today(days: int, clock: Optional[IClock]) -> str:
    return (clock_mod.today(clock) + timedelta(days=days)).isoformat()


def get_yesterday(*, clock: Optional[IClock] = None) -> str:
    return _days_from_today(-1, clock)


def get_tomorrow(*, clock: Optional[IClock] = None) -> str:
    return _days_from_today(1, clock)


def get_30_days_from_today(*, clock: Optional[IClock] = None) -> str:
    return _days_from_today(30, clock)


def get_120_days_from_today(*, clock: Optional[IClock] = None) -> str:
    return _days_from_today(120, clock)


def get_3_months_from_today(*, clock: Optional[IClock] = None) -> str:
    """2018-10-21 -> "2019-01-21"; month ends clamp (2018-11-30 -> "2019-02-28")."""
    result: date = clock_mod.today(clock) + relativedelta(months=3)
    return result.isoformat()


# endregion Getters
