from enum import Enum


class DatePart(Enum):
    """
    Kind of date part at the head of a relative date expression.
    """
    TODAY = "TODAY"
    NOW = "NOW"
    NOON = "NOON"
    MIDNIGHT = "MIDNIGHT"
    RELATIVE = "RELATIVE"
