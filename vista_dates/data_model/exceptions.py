"""Exceptions raised by vista_dates.

Nullish input and malformed relative expressions are *not* errors (they
yield ``None``); these classes cover the hard failures only.
"""

from __future__ import annotations


class VistaDateError(Exception):
    """Base exception for all vista_dates errors."""

    def __init__(self, message: str, details: dict | None = None):
        """Initialize exception with message and optional details.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details


class DateTimeParseError(VistaDateError, ValueError):
    """Raised when a date string matches none of the supported shapes.

    Attributes:
        text: The input that could not be parsed
        patterns_tried: Number of catalog patterns attempted
    """

    text: str
    patterns_tried: int

    def __init__(self, message: str, text: str, patterns_tried: int = 0):
        super().__init__(
            message,
            details={"text": text, "patterns_tried": patterns_tried},
        )
        self.text = text
        self.patterns_tried = patterns_tried


class TimeZoneError(VistaDateError, ValueError):
    """Raised when a time zone name is blank or not a known IANA zone."""

    pass
