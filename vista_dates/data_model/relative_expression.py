from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enum_adjust_unit import AdjustUnit
from .enum_date_part import DatePart


@dataclass(frozen=True)
class Adjustment:
    """
    Signed offset applied to the anchor of a relative expression.

    ``sign`` is "+" or "-"; any other value (including None) means
    "no adjustment".
    """

    amount: int
    unit: AdjustUnit = AdjustUnit.DAYS
    sign: Optional[str] = None


@dataclass(frozen=True)
class RelativeExpression:
    """
    Parsed form of ``<date-part>[<sign><amount><unit>]['@'<time-part>]``.

    Built and consumed within a single parse call.
    """

    date_part: DatePart
    anchor: Optional[DatePart] = None
    adjustment: Optional[Adjustment] = None
    time_part: Optional[str] = None

    @property
    def is_relative(self) -> bool:
        return self.date_part is DatePart.RELATIVE

    @property
    def is_relative_to_today(self) -> bool:
        """True for ``T``/``TODAY`` and ``T±k`` forms; only these honour a time part."""
        if self.date_part is DatePart.TODAY:
            return True
        return self.is_relative and self.anchor is DatePart.TODAY
