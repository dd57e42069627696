from .config_logging import LOGGING
from .converters_scalar import (
    format_local_iso,
    format_offset_iso,
    to_date,
    to_datetime,
    to_local_datetime,
    truncate_to_seconds,
)
from .string_util import is_blank, is_nullish

__all__ = [
    "is_nullish",
    "is_blank",
    "to_date",
    "to_datetime",
    "to_local_datetime",
    "truncate_to_seconds",
    "format_local_iso",
    "format_offset_iso",
    "LOGGING",
]
