# vista_dates/controllers/timezone_adapter.py
from __future__ import annotations

from datetime import datetime
from typing import Optional, cast

import pytz

from vista_dates.data_model.exceptions import TimeZoneError
from vista_dates.utilities.converters_scalar import to_date
from vista_dates.utilities.string_util import is_blank, is_nullish


def validate_time_zone(time_zone: Optional[str]) -> None:
    """
    Reject a missing or blank time zone name.

        validate_time_zone("America/New_York")  -> None
        validate_time_zone(None)                -> TimeZoneError
        validate_time_zone("   ")               -> TimeZoneError
    """
    if time_zone is None or is_blank(time_zone):
        raise TimeZoneError("TimeZone must not be blank", details={"time_zone": time_zone})


def resolve_zone(time_zone: Optional[str]) -> pytz.BaseTzInfo:
    """Look up an IANA zone by name; unknown names raise TimeZoneError."""
    validate_time_zone(time_zone)
    try:
        return pytz.timezone(cast(str, time_zone).strip())
    except pytz.UnknownTimeZoneError as e:
        raise TimeZoneError(
            f"Unknown time zone: {time_zone!r}", details={"time_zone": time_zone}
        ) from e


def localize(value: datetime, time_zone: Optional[str]) -> datetime:
    """
    Interpret a naive wall-clock time at ``time_zone``.

    An aware value is converted to the zone instead (its instant is kept).
    A wall time repeated by a DST fall-back takes the earlier offset; one
    skipped by a spring-forward is moved past the gap.
    """
    zone = resolve_zone(time_zone)
    if value.tzinfo is not None:
        return zone.normalize(value.astimezone(zone))
    # pytz zones must be attached with localize(), never replace(tzinfo=...)
    try:
        return zone.localize(value, is_dst=None)
    except pytz.AmbiguousTimeError:
        # repeated hour: the earlier (daylight) offset
        return zone.localize(value, is_dst=True)
    except pytz.NonExistentTimeError:
        # skipped hour: shifted forward by the length of the gap
        return zone.normalize(zone.localize(value, is_dst=False))


def to_zone_same_instant(value: datetime, time_zone: Optional[str]) -> datetime:
    """
    Re-express the instant ``value`` represents as wall-clock time at ``time_zone``.

        to_zone_same_instant(2018-10-22T03:12:45Z, "America/New_York")
            = 2018-10-21T23:12:45-04:00

    A naive ``value`` is taken to already be wall-clock time at ``time_zone``.
    """
    return localize(value, time_zone)


def _utc_date_prefix(value: object) -> Optional[str]:
    if value is None or (isinstance(value, str) and is_nullish(value)):
        return None
    # any offset is ignored; the wall-clock date is read as a UTC date
    return to_date(value).isoformat()


def start_of_day(value: object) -> Optional[str]:
    """
    Start of the value's day at UTC.

        start_of_day(None)                         = None
        start_of_day("2018-10-21T06:12:45Z")       = "2018-10-21T00:00Z"
        start_of_day("2018-10-21T06:12:45-04:00")  = "2018-10-21T00:00Z"
    """
    prefix = _utc_date_prefix(value)
    return None if prefix is None else f"{prefix}T00:00Z"


def end_of_day(value: object) -> Optional[str]:
    """
    End of the value's day at UTC.

        end_of_day("2018-10-21T06:12:45-04:00")    = "2018-10-21T23:59:59.999Z"
    """
    prefix = _utc_date_prefix(value)
    return None if prefix is None else f"{prefix}T23:59:59.999Z"
