"""
Shared fixtures for the payperiod tests.

June 2025 starts on a Sunday: weekdays are 2-6, 9-13, 16-20, 23-27 and 30.
"""

import pytest

from payperiod.domain.models import CalendarDay, LockedMonth
from payperiod.domain.selection import SelectionSession, SelectionStateMachine


def june(day: int) -> CalendarDay:
    return CalendarDay(2025, 6, day)


@pytest.fixture
def locked_month() -> LockedMonth:
    return LockedMonth(2025, 6)


@pytest.fixture
def machine(locked_month) -> SelectionStateMachine:
    return SelectionStateMachine(locked_month=locked_month)


@pytest.fixture
def session() -> SelectionSession:
    return SelectionSession()
