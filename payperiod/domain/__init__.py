"""
Domain layer - Pure selection and reporting logic without I/O.
"""

from .day_type_cycler import DayTypeCycler
from .duration import DurationCalculator
from .models import (
    CalendarDay,
    DayType,
    LockedMonth,
    PayrollEventRecord,
    PayrollEventType,
    ReportPeriod,
    SelectionRange,
    SelectionSummary,
)
from .range_merger import RangeMerger
from .range_store import RangeStore
from .selection import (
    EventKind,
    PointerEvent,
    SelectionSession,
    SelectionState,
    SelectionStateMachine,
)

__all__ = [
    "CalendarDay",
    "DayType",
    "LockedMonth",
    "PayrollEventRecord",
    "PayrollEventType",
    "ReportPeriod",
    "SelectionRange",
    "SelectionSummary",
    "RangeStore",
    "DayTypeCycler",
    "RangeMerger",
    "DurationCalculator",
    "EventKind",
    "PointerEvent",
    "SelectionSession",
    "SelectionState",
    "SelectionStateMachine",
]
