from .constants import (
    DEFAULT_DATE_FORMAT,
    FILEMAN_DATE_FORMAT_PATTERN,
    FILEMAN_DATE_OFFSET,
    VISTA_DATE_FORMAT,
    VISTA_DATE_FORMAT_ARRAY,
    VISTA_DATE_FORMAT_PATTERN,
    VISTA_DATE_TIME_FORMAT_PATTERN,
    VISTA_DATE_TIME_SEPARATOR,
    VISTA_DATETIME_FORMAT,
    VISTA_TIME_PATTERN,
)
from .enum_adjust_unit import AdjustUnit
from .enum_date_part import DatePart
from .exceptions import DateTimeParseError, TimeZoneError, VistaDateError
from .interfaces import IClock
from .relative_expression import Adjustment, RelativeExpression

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "VISTA_DATETIME_FORMAT",
    "VISTA_DATE_FORMAT",
    "FILEMAN_DATE_OFFSET",
    "VISTA_DATE_FORMAT_ARRAY",
    "VISTA_TIME_PATTERN",
    "VISTA_DATE_TIME_SEPARATOR",
    "VISTA_DATE_FORMAT_PATTERN",
    "FILEMAN_DATE_FORMAT_PATTERN",
    "VISTA_DATE_TIME_FORMAT_PATTERN",
    "AdjustUnit",
    "DatePart",
    "Adjustment",
    "RelativeExpression",
    "IClock",
    "VistaDateError",
    "DateTimeParseError",
    "TimeZoneError",
]
