# vista_dates/__init__.py
from .controllers.clock import FixedClock, SystemClock, get_clock, use_clock
from .controllers.date_utils import (
    format_date_with_timezone,
    format_fileman_date,
    format_fileman_date_time,
    format_local_date,
    format_local_date_time,
    format_vista_date,
    format_vista_date_time,
    format_vista_date_time_with_timezone,
    get_3_months_from_today,
    get_30_days_from_today,
    get_120_days_from_today,
    get_now,
    get_today,
    get_tomorrow,
    get_yesterday,
    parse_from_utc,
    parse_to_local,
    parse_to_offset,
    parse_to_utc,
)
from .controllers.numeric_format import (
    convert_date_from_fileman_to_vista,
    convert_date_from_vista_to_fileman,
    remove_trailing_zeros,
    zero_pad_vista_date_time,
)
from .controllers.pattern_formatter import (
    create_date_formats_from_array,
    format_with_pattern,
    format_with_timezone_and_pattern,
)
from .controllers.relative_parser import (
    parse_date_part,
    parse_relative_vista_date,
    parse_time,
    parse_time_part,
)
from .controllers.timezone_adapter import end_of_day, start_of_day, validate_time_zone
from .data_model import (
    DEFAULT_DATE_FORMAT,
    FILEMAN_DATE_OFFSET,
    VISTA_DATE_FORMAT,
    VISTA_DATE_FORMAT_ARRAY,
    VISTA_DATETIME_FORMAT,
    VISTA_TIME_PATTERN,
    DateTimeParseError,
    TimeZoneError,
    VistaDateError,
)
from .utilities import is_blank, is_nullish

__version__ = "0.1.0"

__all__ = [
    "is_nullish", "is_blank",
    "convert_date_from_fileman_to_vista", "convert_date_from_vista_to_fileman",
    "zero_pad_vista_date_time", "remove_trailing_zeros",
    "parse_relative_vista_date", "parse_date_part", "parse_time_part", "parse_time",
    "format_with_pattern", "format_with_timezone_and_pattern",
    "create_date_formats_from_array",
    "validate_time_zone", "start_of_day", "end_of_day",
    "parse_to_local", "parse_to_offset", "parse_to_utc", "parse_from_utc",
    "format_vista_date", "format_vista_date_time",
    "format_vista_date_time_with_timezone", "format_fileman_date",
    "format_fileman_date_time", "format_local_date", "format_local_date_time",
    "format_date_with_timezone",
    "get_now", "get_today", "get_yesterday", "get_tomorrow",
    "get_30_days_from_today", "get_120_days_from_today", "get_3_months_from_today",
    "FixedClock", "SystemClock", "get_clock", "use_clock",
    "DEFAULT_DATE_FORMAT", "VISTA_DATETIME_FORMAT", "VISTA_DATE_FORMAT",
    "FILEMAN_DATE_OFFSET", "VISTA_DATE_FORMAT_ARRAY", "VISTA_TIME_PATTERN",
    "VistaDateError", "DateTimeParseError", "TimeZoneError",
    "__version__",
]
