from __future__ import annotations

import re

import pytest

from vista_dates.controllers.numeric_format import (
    convert_date_from_fileman_to_vista,
    convert_date_from_vista_to_fileman,
    remove_trailing_zeros,
    zero_pad_vista_date_time,
)

NULLISH = [None, "", " ", "-1", "Invalid Date"]

ALL_CONVERTERS = [
    convert_date_from_fileman_to_vista,
    convert_date_from_vista_to_fileman,
    zero_pad_vista_date_time,
    remove_trailing_zeros,
]


@pytest.mark.parametrize("fn", ALL_CONVERTERS, ids=lambda f: f.__name__)
@pytest.mark.parametrize("value", NULLISH)
def test_nullish_input_returns_none(fn, value):
    assert fn(value) is None


# ---------- FileMan <-> VistA ----------


@pytest.mark.parametrize(
    "fileman, vista",
    [
        ("3181021", "20181021"),
        ("3181021.", "20181021."),
        ("3181021.06", "20181021.06"),
        ("3181021.061245", "20181021.061245"),
        ("2991231.2359", "19991231.2359"),
    ],
)
def test_fileman_to_vista(fileman, vista):
    assert convert_date_from_fileman_to_vista(fileman) == vista


@pytest.mark.parametrize("value", ["20181021.061245", "10/21/2018", "318102", "T+3"])
def test_fileman_to_vista_passes_through_non_fileman(value):
    assert convert_date_from_fileman_to_vista(value) == value


@pytest.mark.parametrize(
    "vista, fileman",
    [
        ("20181021", "3181021"),
        ("20181021.", "3181021."),
        ("20181021.061245", "3181021.061245"),
    ],
)
def test_vista_to_fileman(vista, fileman):
    assert convert_date_from_vista_to_fileman(vista) == fileman


@pytest.mark.parametrize("vista", ["20181021", "20181021.0612", "19991231.235959"])
def test_vista_fileman_round_trip(vista):
    """Positive: converting to FileMan and back restores the VistA string."""
    fileman = convert_date_from_vista_to_fileman(vista)
    assert convert_date_from_fileman_to_vista(fileman) == vista


@pytest.mark.parametrize("value", ["\u0663\u0661\u0668\u0661\u0660\u0662\u0661", "3181021\n"])
def test_fileman_to_vista_requires_ascii_digits_to_end(value):
    """Negative: non-ASCII digits and a trailing newline are not FileMan dates."""
    assert convert_date_from_fileman_to_vista(value) == value


def test_vista_to_fileman_rejects_trailing_newline():
    assert convert_date_from_vista_to_fileman("20181021\n") == "20181021\n"


@pytest.mark.parametrize("value", ["3181021.061245", "10/21/2018", "2018102199"])
def test_vista_to_fileman_passes_through_non_vista(value):
    assert convert_date_from_vista_to_fileman(value) == value


@pytest.mark.parametrize("fileman", ["3181021", "3181021.0612", "2991231.235959"])
def test_fileman_vista_round_trip(fileman):
    """Positive: converting to VistA and back restores the FileMan string."""
    vista = convert_date_from_fileman_to_vista(fileman)
    assert convert_date_from_vista_to_fileman(vista) == fileman


# ---------- zero padding ----------


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("20181021", "20181021"),
        ("20181021.", "20181021"),
        ("20181021.06", "20181021.060000"),
        ("20181021.0612", "20181021.061200"),
        ("20181021.061245", "20181021.061245"),
        ("20181021.0612457", "20181021.061245"),
        ("20181021.02124579865", "20181021.021245"),
        ("10/21/2018", "10/21/2018"),
    ],
)
def test_zero_pad_vista_date_time(raw, expected):
    assert zero_pad_vista_date_time(raw) == expected


@pytest.mark.parametrize("raw", ["20181021.1", "3181021.06", "20181021.12345678"])
def test_zero_pad_time_token_is_six_digits(raw):
    padded = zero_pad_vista_date_time(raw)
    assert re.fullmatch(r"\d+\.\d{6}", padded)


# ---------- trailing zeros ----------


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("20181021", "20181021"),
        ("20181021.", "20181021"),
        ("20181021.06", "20181021.06"),
        ("20181021.060000", "20181021.06"),
        ("20181021.200000", "20181021.2"),
        ("20181021.000000", "20181021"),
        ("20181021.061245", "20181021.061245"),
        ("3181021.0610", "3181021.061"),
        ("10/21/2018", "10/21/2018"),
        ("100", "100"),
    ],
)
def test_remove_trailing_zeros(raw, expected):
    assert remove_trailing_zeros(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["20181021.060000", "20181021.", "20181021..", "100", "-1.0", "abc.", "1.0.0", "0.0"],
)
def test_remove_trailing_zeros_is_idempotent(raw):
    once = remove_trailing_zeros(raw)
    assert remove_trailing_zeros(once) == once
