from __future__ import annotations

import dataclasses

import pytest

from vista_dates.data_model import (
    FILEMAN_DATE_OFFSET,
    VISTA_DATE_FORMAT_ARRAY,
    VISTA_TIME_PATTERN,
    Adjustment,
    AdjustUnit,
    DatePart,
    DateTimeParseError,
    RelativeExpression,
    TimeZoneError,
    VistaDateError,
)


@pytest.mark.parametrize(
    "token, unit",
    [
        ("D", AdjustUnit.DAYS),
        ("d", AdjustUnit.DAYS),
        ("W", AdjustUnit.WEEKS),
        ("M", AdjustUnit.MONTHS),
        ("H", AdjustUnit.HOURS),
        ("'", AdjustUnit.MINUTES),
        ("", AdjustUnit.DAYS),
        ("Q", AdjustUnit.DAYS),
        ("DD", AdjustUnit.DAYS),
    ],
)
def test_adjust_unit_from_token(token, unit):
    assert AdjustUnit.from_token(token) is unit


def test_adjust_unit_values_are_relativedelta_keywords():
    assert {u.value for u in AdjustUnit} == {"days", "weeks", "months", "hours", "minutes"}


def test_relative_expression_is_relative_to_today():
    adj = Adjustment(3, AdjustUnit.DAYS, "+")

    assert RelativeExpression(DatePart.TODAY).is_relative_to_today
    assert RelativeExpression(DatePart.RELATIVE, DatePart.TODAY, adj).is_relative_to_today
    assert not RelativeExpression(DatePart.RELATIVE, DatePart.NOW, adj).is_relative_to_today
    assert not RelativeExpression(DatePart.NOON).is_relative_to_today


def test_relative_expression_is_frozen():
    expr = RelativeExpression(DatePart.NOW)

    with pytest.raises(dataclasses.FrozenInstanceError):
        expr.time_part = "NOON"


def test_configuration_tables():
    assert FILEMAN_DATE_OFFSET == 17000000
    assert len(VISTA_DATE_FORMAT_ARRAY) == 33
    assert len(VISTA_TIME_PATTERN) == 20
    assert VISTA_DATE_FORMAT_ARRAY[0] == "MM/dd/yyyy HH:mm:ss,SSS"


def test_exception_hierarchy_and_details():
    err = DateTimeParseError("no match", text="ABC", patterns_tried=33)

    assert isinstance(err, VistaDateError)
    assert isinstance(err, ValueError)
    assert err.details == {"text": "ABC", "patterns_tried": 33}
    assert str(err) == "no match"
    assert issubclass(TimeZoneError, ValueError)
