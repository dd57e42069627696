from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from vista_dates.utilities.converters_scalar import (
    format_local_iso,
    format_offset_iso,
    to_date,
    to_datetime,
    to_local_datetime,
    truncate_to_seconds,
)


def test_to_datetime_accepts_trailing_z_as_utc():
    dt = to_datetime("2018-10-21T06:12:45Z")

    assert dt == datetime(2018, 10, 21, 6, 12, 45, tzinfo=timezone.utc)
    assert dt.utcoffset() == timedelta(0)


def test_to_datetime_keeps_explicit_offset():
    dt = to_datetime("2018-10-21T06:12:45-04:00")

    assert dt.utcoffset() == timedelta(hours=-4)
    assert (dt.hour, dt.minute, dt.second) == (6, 12, 45)


@pytest.mark.parametrize(
    "value, expected",
    [
        (date(2018, 10, 21), datetime(2018, 10, 21)),
        (datetime(2018, 10, 21, 6, 12), datetime(2018, 10, 21, 6, 12)),
        ("2018-10-21", datetime(2018, 10, 21)),
        ("2018-10-21T06:12", datetime(2018, 10, 21, 6, 12)),
    ],
)
def test_to_datetime_naive_inputs(value, expected):
    assert to_datetime(value) == expected


@pytest.mark.parametrize("value", [123, None, "not a date"])
def test_to_datetime_rejects_unconvertible(value):
    with pytest.raises(ValueError):
        to_datetime(value)


def test_to_local_datetime_drops_offset_keeps_wall_clock():
    assert to_local_datetime("2018-10-21T06:12:45-04:00") == datetime(2018, 10, 21, 6, 12, 45)


def test_to_date_from_various_inputs():
    assert to_date("2018-10-21") == date(2018, 10, 21)
    assert to_date("2018-10-21T23:59:59") == date(2018, 10, 21)
    assert to_date(datetime(2018, 10, 21, 5)) == date(2018, 10, 21)


def test_truncate_and_local_iso_drop_subseconds():
    dt = datetime(2018, 10, 21, 6, 12, 45, 999999)

    assert truncate_to_seconds(dt) == datetime(2018, 10, 21, 6, 12, 45)
    assert format_local_iso(dt) == "2018-10-21T06:12:45"
    assert format_local_iso(datetime(2018, 10, 24)) == "2018-10-24T00:00:00"


@pytest.mark.parametrize(
    "dt, expected",
    [
        (datetime(2018, 10, 21, 2, 12, 45, tzinfo=timezone.utc), "2018-10-21T02:12:45Z"),
        (
            datetime(2018, 10, 21, 2, 12, 45, tzinfo=timezone(timedelta(hours=-4))),
            "2018-10-21T02:12:45-04:00",
        ),
        (
            datetime(2018, 10, 21, 2, 12, 45, tzinfo=timezone(timedelta(hours=5, minutes=30))),
            "2018-10-21T02:12:45+05:30",
        ),
    ],
)
def test_format_offset_iso(dt, expected):
    assert format_offset_iso(dt) == expected


def test_format_offset_iso_requires_aware_value():
    """Negative: a naive value has no offset to render."""
    with pytest.raises(ValueError):
        format_offset_iso(datetime(2018, 10, 21))
