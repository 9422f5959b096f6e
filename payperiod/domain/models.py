"""
Domain models for calendar days, selection ranges and payroll reporting.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Sequence

import pendulum
from pendulum import Date

# 0=Monday, 6=Sunday
DEFAULT_WEEKEND_DAYS = (5, 6)


@dataclass(frozen=True, order=True)
class CalendarDay:
    """
    An immutable calendar date without any time-of-day component.

    Months are 1-based. Ordering follows the calendar.
    """
    year: int
    month: int
    day: int

    def __post_init__(self):
        # Raises ValueError for impossible dates such as 2025-02-30
        pendulum.date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, value) -> "CalendarDay":
        """Build a day from any date or datetime, dropping the time part."""
        return cls(year=value.year, month=value.month, day=value.day)

    @classmethod
    def parse(cls, text: str) -> "CalendarDay":
        """Parse a YYYY-MM-DD string."""
        return cls.from_date(pendulum.from_format(str(text).strip(), "YYYY-MM-DD"))

    def to_date(self) -> Date:
        return pendulum.date(self.year, self.month, self.day)

    @property
    def weekday(self) -> int:
        """Weekday index, 0=Monday."""
        return self.to_date().weekday()

    def is_weekend(self, weekend_days: Sequence[int] = DEFAULT_WEEKEND_DAYS) -> bool:
        return self.weekday in weekend_days

    def is_within_locked_month(self, locked_month: "LockedMonth") -> bool:
        return self.year == locked_month.year and self.month == locked_month.month

    def add_days(self, days: int) -> "CalendarDay":
        return CalendarDay.from_date(self.to_date().add(days=days))

    def days_until(self, other: "CalendarDay") -> int:
        """Signed number of whole days from this day to ``other``."""
        return self.to_date().diff(other.to_date(), False).in_days()

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class LockedMonth:
    """The single calendar month a selection session is allowed to touch."""
    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {self.month}")

    @classmethod
    def parse(cls, text: str) -> "LockedMonth":
        """Parse a YYYY-MM string."""
        parsed = pendulum.from_format(str(text).strip(), "YYYY-MM")
        return cls(year=parsed.year, month=parsed.month)

    @classmethod
    def of(cls, day: CalendarDay) -> "LockedMonth":
        return cls(year=day.year, month=day.month)

    @property
    def first_day(self) -> CalendarDay:
        return CalendarDay(self.year, self.month, 1)

    @property
    def last_day(self) -> CalendarDay:
        days_in_month = pendulum.date(self.year, self.month, 1).days_in_month
        return CalendarDay(self.year, self.month, days_in_month)

    def contains(self, day: CalendarDay) -> bool:
        return day.is_within_locked_month(self)

    def days(self) -> List[CalendarDay]:
        """Every day of the month, in order."""
        first = self.first_day
        return [first.add_days(offset) for offset in range(self.last_day.day)]

    def format(self, locale: str = "fr") -> str:
        """Month name and year, e.g. 'juin 2025'."""
        return pendulum.date(self.year, self.month, 1).format("MMMM YYYY", locale=locale)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


class DayType(str, Enum):
    """How much of a single day a selection covers."""
    FULL = "full"
    HALF_MORNING = "half-morning"
    HALF_AFTERNOON = "half-afternoon"

    @property
    def is_half_day(self) -> bool:
        return self is not DayType.FULL


@dataclass(frozen=True)
class SelectionRange:
    """
    An inclusive range of selected days.

    Invariants: start must not be after end, and only single-day ranges
    may carry a half-day type.
    """
    start: CalendarDay
    end: CalendarDay
    day_type: DayType = DayType.FULL

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Start day {self.start} must not be after end day {self.end}")
        if self.day_type.is_half_day and self.start != self.end:
            raise ValueError(
                f"Half-day type {self.day_type.value} is only allowed on a single day, "
                f"got {self.start} - {self.end}"
            )

    @classmethod
    def single(cls, day: CalendarDay, day_type: DayType = DayType.FULL) -> "SelectionRange":
        return cls(start=day, end=day, day_type=day_type)

    @classmethod
    def between(cls, first: CalendarDay, second: CalendarDay) -> "SelectionRange":
        """Full-day range spanning two days given in any order."""
        return cls(start=min(first, second), end=max(first, second))

    @property
    def is_single_day(self) -> bool:
        return self.start == self.end

    def contains(self, day: CalendarDay) -> bool:
        return self.start <= day <= self.end

    def days(self) -> Iterator[CalendarDay]:
        current = self.start
        while current <= self.end:
            yield current
            current = current.add_days(1)

    def with_day_type(self, day_type: DayType) -> "SelectionRange":
        return SelectionRange(start=self.start, end=self.end, day_type=day_type)

    def __str__(self) -> str:
        if self.is_single_day:
            return f"{self.start} ({self.day_type.value})"
        return f"{self.start} - {self.end}"


class PayrollEventType(str, Enum):
    """Kinds of variable payroll elements a selection can be recorded for."""
    PAID_LEAVE = "conges-payes"
    OVERTIME = "heures-sup"
    BONUS = "prime"

    @property
    def label(self) -> str:
        return _EVENT_TYPE_LABELS[self]


_EVENT_TYPE_LABELS = {
    PayrollEventType.PAID_LEAVE: "Congés payés",
    PayrollEventType.OVERTIME: "Heures supplémentaires",
    PayrollEventType.BONUS: "Prime",
}


@dataclass(frozen=True)
class SelectionSummary:
    """
    Counters exposed to the wizard.

    ``total_days`` sums the raw selection, ``period_count`` counts
    reporting periods after merging.
    """
    total_days: float
    period_count: int
    selected_range_count: int


@dataclass(frozen=True)
class ReportPeriod:
    """One reporting period of the payroll export."""
    start_date: CalendarDay
    end_date: CalendarDay
    days: float
    day_type: DayType = DayType.FULL
    comment: str = ""

    def format_display(self) -> str:
        """
        Format the period for display.
        Format: DD/MM/YYYY - DD/MM/YYYY | N jour(s)
        """
        start = self.start_date.to_date().format("DD/MM/YYYY")
        end = self.end_date.to_date().format("DD/MM/YYYY")
        if self.day_type.is_half_day:
            moment = "matin" if self.day_type is DayType.HALF_MORNING else "après-midi"
            return f"{start} | demi-journée ({moment})"
        return f"{start} - {end} | {format_day_count(self.days)}"


@dataclass
class PayrollEventRecord:
    """A payroll element recorded for an employee."""
    employee_id: str
    event_type: PayrollEventType
    period: ReportPeriod
    status: str = "confirmed"


def format_days(value: float) -> str:
    """Render 5.0 as '5' and 5.5 as '5.5'."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_day_count(value: float) -> str:
    suffix = "s" if value > 1 else ""
    return f"{format_days(value)} jour{suffix}"
