# vista_dates/controllers/clock.py
from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterator, Optional

from vista_dates.data_model.interfaces import IClock
from vista_dates.utilities.converters_scalar import to_datetime


class SystemClock:
    """Local wall-clock time of the running process."""

    def now(self) -> datetime:
        return datetime.now()


@dataclass(frozen=True)
class FixedClock:
    """
    Clock frozen at one instant.

    An aware instant is reported as its local wall-clock fields, so
    ``FixedClock("2018-10-21T06:12:45Z").now()`` is ``2018-10-21 06:12:45``.
    """

    instant: datetime

    def __init__(self, instant: datetime | date | str):
        dt = to_datetime(instant)
        object.__setattr__(self, "instant", dt.replace(tzinfo=None))

    def now(self) -> datetime:
        return self.instant


_SYSTEM_CLOCK = SystemClock()
_current_clock: ContextVar[Optional[IClock]] = ContextVar("_current_clock", default=None)


def get_clock(clock: IClock | None = None) -> IClock:
    """Resolve the clock to use: explicit argument, then `use_clock` scope, then the system clock."""
    if clock is not None:
        return clock
    return _current_clock.get() or _SYSTEM_CLOCK


def now(clock: IClock | None = None) -> datetime:
    """Current local date-time, truncated to whole seconds."""
    return get_clock(clock).now().replace(microsecond=0)


def today(clock: IClock | None = None) -> date:
    return get_clock(clock).now().date()


@contextmanager
def use_clock(clock: IClock) -> Iterator[IClock]:
    """
    Make ``clock`` the ambient clock for the duration of the ``with`` block.

    Example:
        with use_clock(FixedClock("2018-10-21T06:45:23")):
            parse_date_part("T+3")   # "2018-10-24T00:00:00"
    """
    token = _current_clock.set(clock)
    try:
        yield clock
    finally:
        _current_clock.reset(token)
