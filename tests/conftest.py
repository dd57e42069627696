from __future__ import annotations

import pytest

from vista_dates.controllers.clock import FixedClock, use_clock

# "now" used by every time-dependent test
FIXED_NOW = "2018-10-21T06:45:23"


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at 2018-10-21T06:45:23 local time."""
    return FixedClock(FIXED_NOW)


@pytest.fixture
def frozen_now(fixed_clock):
    """Make ``fixed_clock`` the ambient clock for the whole test."""
    with use_clock(fixed_clock):
        yield fixed_clock
