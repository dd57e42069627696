# vista_dates/data_model/constants.py
"""
Fixed configuration tables for VistA / FileMan date handling.

FileMan Formatting: http://www.vistapedia.com/index.php/Date_formats
"""

from __future__ import annotations

import re
from typing import Final

DEFAULT_DATE_FORMAT: Final[str] = "MM/dd/yyyy"
VISTA_DATETIME_FORMAT: Final[str] = "yyyyMMdd.HHmmss"
VISTA_DATE_FORMAT: Final[str] = "yyyyMMdd"

# Added to a FileMan date token (yyyMMdd) to get the VistA token (yyyyMMdd).
FILEMAN_DATE_OFFSET: Final[int] = 17000000

# Order matters: parsing accepts the first pattern that matches.
VISTA_DATE_FORMAT_ARRAY: Final[tuple[str, ...]] = (
    "MM/dd/yyyy HH:mm:ss,SSS",
    "MM/dd/yyyy HH:mm:ss",
    "MM/dd/yyyy HH:mm",
    DEFAULT_DATE_FORMAT,
    "MM/dd/yy",
    VISTA_DATETIME_FORMAT,
    "yyyyMMdd.HHmm",
    "yyyyMMdd.HH",
    "yyyyMMdd.",
    VISTA_DATE_FORMAT,
    "yyyy-MM-dd'T'HH:mm:ss'Z'",
    "yyyy-MM-dd'T'HH:mm:ss.SSSSSSSSS",
    "yyyy-MM-dd'T'HH:mm:ss.SSSSSS",
    "yyyy-MM-dd'T'HH:mm:ss.SSS",
    "yyyy-MM-dd'T'HH:mm:ss",
    "yyyy-MM-dd'T'HH:mm'Z'",
    "yyyy-MM-dd'T'HH:mm",
    "yyyy-MM-dd",
    "MM-dd-yyyy HH:mm:ss,SSS",
    "MM-dd-yyyy",
    "M/d/yyyy HH:mm:ss,SSS",
    "M/d/yyyy HH:mm:ss",
    "M/d/yyyy",
    "M-d-yyyy",
    "M/d/yy",
    "dd MMM yyyy @ HHmm",
    "dd MMM yyyy",
    "MMM d, yyyy@HH:mm:ss",
    "MMM d, yyyy@HH:mm",
    "MMM d, yyyy@HH",
    "MMM dd, yyyy",
    "MMMM dd, yyyy",
    "MMM dd yyyy",
)

VISTA_TIME_PATTERN: Final[tuple[str, ...]] = (
    "h:mm:ssa",
    "h:mma",
    "hh:mm:ssa",
    "hh:mma",
    "H:mm:ss",
    "H:mm",
    "HH:mm:ss",
    "HH:mm",
    "hmmssa",
    "hmma",
    "ha",
    "hhmmssa",
    "hhmma",
    "hha",
    "Hmmss",
    "Hmm",
    "H",
    "HHmmss",
    "HHmm",
    "HH",
)

VISTA_DATE_TIME_SEPARATOR: Final[str] = "."

# First token is an 8 digit string, optionally followed by "." and time digits.
VISTA_DATE_FORMAT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\A\d{8}(?:\.\d*)?\Z", re.ASCII
)
# First token is a 7 digit string, optionally followed by "." and time digits.
FILEMAN_DATE_FORMAT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\A\d{7}(?:\.\d*)?\Z", re.ASCII
)
# Digits on both sides of a "." (searched, not anchored).
VISTA_DATE_TIME_FORMAT_PATTERN: Final[re.Pattern[str]] = re.compile(r"\d+\.\d+", re.ASCII)

VISTA_DATE_TIME_FORMAT_STRING: Final[str] = "{}.{}"

# Fixed English tables; month names are not locale dependent here.
MONTH_ABBREVIATIONS: Final[tuple[str, ...]] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
MONTH_NAMES: Final[tuple[str, ...]] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
