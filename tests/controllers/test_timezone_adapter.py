from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from vista_dates.controllers.timezone_adapter import (
    end_of_day,
    localize,
    resolve_zone,
    start_of_day,
    to_zone_same_instant,
    validate_time_zone,
)
from vista_dates.data_model.exceptions import TimeZoneError

NY = "America/New_York"


@pytest.mark.parametrize("tz", ["America/New_York", "UTC", "Europe/London"])
def test_validate_time_zone_accepts_names(tz):
    assert validate_time_zone(tz) is None


@pytest.mark.parametrize("tz", [None, "", "   "])
def test_validate_time_zone_rejects_blank(tz):
    with pytest.raises(TimeZoneError) as exc_info:
        validate_time_zone(tz)

    assert isinstance(exc_info.value, ValueError)


def test_resolve_zone_unknown_name():
    """Negative: an unknown IANA name is a TimeZoneError, not a pytz error."""
    with pytest.raises(TimeZoneError, match="Unknown time zone"):
        resolve_zone("Mars/Olympus_Mons")


def test_to_zone_same_instant_rolls_date_back():
    # Arrange
    utc_value = datetime(2018, 10, 22, 3, 12, 45, tzinfo=timezone.utc)

    # Act
    result = to_zone_same_instant(utc_value, NY)

    # Assert
    assert (result.year, result.month, result.day) == (2018, 10, 21)
    assert (result.hour, result.minute, result.second) == (23, 12, 45)
    assert result.utcoffset() == timedelta(hours=-4)
    assert result == utc_value


def test_to_zone_same_instant_treats_naive_as_wall_clock():
    result = to_zone_same_instant(datetime(2018, 10, 21, 6, 12, 45), NY)

    assert result.replace(tzinfo=None) == datetime(2018, 10, 21, 6, 12, 45)
    assert result.utcoffset() == timedelta(hours=-4)


@pytest.mark.parametrize(
    "wall, offset",
    [
        (datetime(2018, 10, 21, 12), timedelta(hours=-4)),
        (datetime(2018, 12, 21, 12), timedelta(hours=-5)),
    ],
)
def test_localize_picks_offset_for_date(wall, offset):
    """Positive: daylight saving time is resolved per date."""
    assert localize(wall, NY).utcoffset() == offset


@pytest.mark.parametrize(
    "value",
    ["2018-10-21T06:12:45Z", "2018-10-21T06:12:45-04:00", "2018-10-21T23:59:00+09:00"],
)
def test_start_and_end_of_day_ignore_offset(value):
    assert start_of_day(value) == "2018-10-21T00:00Z"
    assert end_of_day(value) == "2018-10-21T23:59:59.999Z"


@pytest.mark.parametrize("value", [None, "", "Invalid Date"])
def test_start_and_end_of_day_nullish(value):
    assert start_of_day(value) is None
    assert end_of_day(value) is None


def test_start_of_day_accepts_datetime():
    assert start_of_day(datetime(2018, 10, 21, 6, 12, 45)) == "2018-10-21T00:00Z"


def test_start_and_end_of_day_accept_date():
    assert start_of_day(date(2018, 10, 21)) == "2018-10-21T00:00Z"
    assert end_of_day(date(2018, 10, 21)) == "2018-10-21T23:59:59.999Z"


def test_localize_repeated_hour_takes_earlier_offset():
    """Edge: 01:30 occurs twice on the fall-back date; the daylight offset wins."""
    # Act
    result = localize(datetime(2018, 11, 4, 1, 30), NY)

    # Assert
    assert result.utcoffset() == timedelta(hours=-4)
    assert result.astimezone(timezone.utc) == datetime(2018, 11, 4, 5, 30, tzinfo=timezone.utc)


def test_localize_skipped_hour_moves_past_gap():
    """Edge: 02:30 does not exist on the spring-forward date; it becomes 03:30 EDT."""
    # Act
    result = localize(datetime(2018, 3, 11, 2, 30), NY)

    # Assert
    assert result.replace(tzinfo=None) == datetime(2018, 3, 11, 3, 30)
    assert result.utcoffset() == timedelta(hours=-4)
    assert result.astimezone(timezone.utc) == datetime(2018, 3, 11, 7, 30, tzinfo=timezone.utc)
