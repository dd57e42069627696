# vista_dates/controllers/numeric_format.py
"""
VistA / FileMan numeric date strings.

Both dialects share one shape, ``<digits>['.'<digits>]``:

    VistA    yyyyMMdd.HHmmss   20181021.061245
    FileMan  yyyMMdd.HHmmss    3181021.061245   (date token = VistA token - 17000000)

FileMan Formatting: http://www.vistapedia.com/index.php/Date_formats
"""

from __future__ import annotations

from typing import Optional

from vista_dates.data_model.constants import (
    FILEMAN_DATE_FORMAT_PATTERN,
    FILEMAN_DATE_OFFSET,
    VISTA_DATE_FORMAT_PATTERN,
    VISTA_DATE_TIME_FORMAT_PATTERN,
    VISTA_DATE_TIME_FORMAT_STRING,
    VISTA_DATE_TIME_SEPARATOR,
)
from vista_dates.utilities.string_util import is_nullish


def _shift_date_token(date_string: str, delta: int) -> str:
    tokens = date_string.split(VISTA_DATE_TIME_SEPARATOR, 1)
    date_token = int(tokens[0]) + delta
    if len(tokens) > 1:
        return VISTA_DATE_TIME_FORMAT_STRING.format(date_token, tokens[1])
    return str(date_token)


def convert_date_from_fileman_to_vista(date_string: Optional[str]) -> Optional[str]:
    """
    Convert a FileMan date string ("yyyMMdd.HHmmss") to VistA ("yyyyMMdd.HHmmss").

    Values that do not look like a FileMan date are returned unchanged.

        convert_date_from_fileman_to_vista(None)               = None
        convert_date_from_fileman_to_vista("Invalid Date")     = None
        convert_date_from_fileman_to_vista("3181021")          = "20181021"
        convert_date_from_fileman_to_vista("3181021.061245")   = "20181021.061245"
        convert_date_from_fileman_to_vista("20181021.061245")  = "20181021.061245"
        convert_date_from_fileman_to_vista("10/21/2018")       = "10/21/2018"
    """
    if date_string is None or is_nullish(date_string):
        return None
    if FILEMAN_DATE_FORMAT_PATTERN.match(date_string):
        return _shift_date_token(date_string, FILEMAN_DATE_OFFSET)
    return date_string


def convert_date_from_vista_to_fileman(date_string: Optional[str]) -> Optional[str]:
    """
    Convert a VistA date string ("yyyyMMdd.HHmmss") to FileMan ("yyyMMdd.HHmmss").

    Values that do not look like a VistA date are returned unchanged.

        convert_date_from_vista_to_fileman("20181021")         = "3181021"
        convert_date_from_vista_to_fileman("20181021.061245")  = "3181021.061245"
        convert_date_from_vista_to_fileman("10/21/2018")       = "10/21/2018"
    """
    if date_string is None or is_nullish(date_string):
        return None
    if VISTA_DATE_FORMAT_PATTERN.match(date_string):
        return _shift_date_token(date_string, -FILEMAN_DATE_OFFSET)
    return date_string


def zero_pad_vista_date_time(date_string: Optional[str]) -> Optional[str]:
    """
    Zero-pad a VistA date/time string to second precision.

    Sub-second digits are dropped. A bare trailing "." is stripped.

        zero_pad_vista_date_time("20181021")          = "20181021"
        zero_pad_vista_date_time("20181021.")         = "20181021"
        zero_pad_vista_date_time("20181021.06")       = "20181021.060000"
        zero_pad_vista_date_time("20181021.0612457")  = "20181021.061245"
        zero_pad_vista_date_time("10/21/2018")        = "10/21/2018"
    """
    if date_string is None or is_nullish(date_string):
        return None
    if VISTA_DATE_TIME_FORMAT_PATTERN.search(date_string):
        tokens = date_string.split(VISTA_DATE_TIME_SEPARATOR)
        date_token = tokens[0].ljust(6, "0")
        time_token = tokens[1].ljust(6, "0")[:6]
        return VISTA_DATE_TIME_FORMAT_STRING.format(date_token, time_token)
    if date_string.endswith(VISTA_DATE_TIME_SEPARATOR):
        return date_string[:-1]
    return date_string


def remove_trailing_zeros(date_string: Optional[str]) -> Optional[str]:
    """
    Remove trailing zeros from a VistA date/time string.

    Trimming only happens when the value carries a time (contains a ".").
    See http://www.hardhats.org/fileman/pm/cl_dt.htm

        remove_trailing_zeros("20181021")          = "20181021"
        remove_trailing_zeros("20181021.")         = "20181021"
        remove_trailing_zeros("20181021.06")       = "20181021.06"
        remove_trailing_zeros("20181021.060000")   = "20181021.06"
        remove_trailing_zeros("20181021.000000")   = "20181021"
        remove_trailing_zeros("10/21/2018")        = "10/21/2018"
    """
    if date_string is None or is_nullish(date_string):
        return None
    trimmed = date_string
    if VISTA_DATE_TIME_FORMAT_PATTERN.search(date_string):
        while VISTA_DATE_TIME_SEPARATOR in trimmed and trimmed.endswith(
            ("0", VISTA_DATE_TIME_SEPARATOR)
        ):
            trimmed = trimmed[:-1]
    else:
        # "20181021." and "20181021.." both trim to "20181021"
        trimmed = date_string.rstrip(VISTA_DATE_TIME_SEPARATOR)
    # "-1.0" trims to the "-1" placeholder
    return None if is_nullish(trimmed) else trimmed
