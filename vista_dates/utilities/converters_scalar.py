# vista_dates/utilities/converters_scalar.py
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import overload


def _bad(value: object, target: str) -> ValueError:
    return ValueError(f"Cannot convert {type(value).__name__} to {target}: {value!r}")


def _from_iso(text: str) -> datetime:
    s = text.strip()
    # allow trailing 'Z' as UTC
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    return datetime.fromisoformat(s)


@overload
def to_datetime(value: datetime, /) -> datetime: ...
@overload
def to_datetime(value: date, /) -> datetime: ...
@overload
def to_datetime(value: str, /) -> datetime: ...


def to_datetime(value: object, /) -> datetime:
    """
    Convert a datetime-like input into a `datetime`, keeping any offset it carries.

    Accepts:
      • datetime → returned as-is (naive or aware)
      • date     → combined with midnight (00:00:00)
      • str (ISO 8601; allows trailing 'Z' as UTC) → parsed via fromisoformat

    Raises
    ------
    ValueError
        If the value cannot be converted.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str):
        try:
            return _from_iso(value)
        except ValueError as e:
            raise _bad(value, "datetime") from e
    raise _bad(value, "datetime")


def to_local_datetime(value: object, /) -> datetime:
    """
    Convert to a naive "local" date-time.

    An offset on the input is dropped and the wall-clock fields are kept,
    e.g. ``2018-10-21T06:12:45-04:00`` → ``2018-10-21T06:12:45``.
    """
    dt = to_datetime(value)
    return dt.replace(tzinfo=None) if dt.tzinfo is not None else dt


def to_date(value: object, /) -> date:
    """Convert a date-like input (``date``, ``datetime`` or ISO string) into a `date`."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        txt = value.strip()
        try:
            return date.fromisoformat(txt)
        except ValueError:
            pass
        return to_datetime(txt).date()
    raise _bad(value, "date")


def truncate_to_seconds(dt: datetime) -> datetime:
    return dt.replace(microsecond=0)


def format_local_iso(dt: datetime) -> str:
    """Render a local date-time as ``YYYY-MM-DDTHH:MM:SS`` (sub-seconds dropped)."""
    return dt.replace(tzinfo=None).isoformat(timespec="seconds")


def format_offset_iso(dt: datetime) -> str:
    """
    Render an aware date-time as ``YYYY-MM-DDTHH:MM:SS±HH:MM``.

    A zero offset is written as ``Z``:
        2018-10-21T02:12:45+00:00 → "2018-10-21T02:12:45Z"
        2018-10-21T02:12:45-04:00 → "2018-10-21T02:12:45-04:00"
    """
    if dt.tzinfo is None:
        raise ValueError(f"Offset required to render {dt!r}")
    offset = dt.utcoffset() or timedelta(0)
    wall = dt.replace(tzinfo=None).isoformat(timespec="seconds")
    if offset == timedelta(0):
        return wall + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{wall}{sign}{minutes // 60:02d}:{minutes % 60:02d}"
