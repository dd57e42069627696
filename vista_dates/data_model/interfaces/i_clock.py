# vista_dates/data_model/interfaces/i_clock.py
from __future__ import annotations

from datetime import datetime
from typing import runtime_checkable

from typing_extensions import Protocol


@runtime_checkable
class IClock(Protocol):
    """Source of the "current instant" used by relative date evaluation."""

    def now(self) -> datetime: ...
