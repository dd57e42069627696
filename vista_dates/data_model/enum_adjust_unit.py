from __future__ import annotations

from enum import Enum


class AdjustUnit(Enum):
    """
    Unit of a relative date adjustment (the "D" in ``T+3D``).

    The value is the ``dateutil.relativedelta`` keyword the amount is applied to.
    """
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    HOURS = "hours"
    MINUTES = "minutes"

    @classmethod
    def from_token(cls, token: str) -> AdjustUnit:
        """Map a unit token to a unit; missing or unknown tokens mean DAYS."""
        return _UNIT_TOKENS.get(token.strip().upper(), cls.DAYS)


_UNIT_TOKENS = {
    "D": AdjustUnit.DAYS,
    "W": AdjustUnit.WEEKS,
    "M": AdjustUnit.MONTHS,
    "H": AdjustUnit.HOURS,
    "'": AdjustUnit.MINUTES,
}
