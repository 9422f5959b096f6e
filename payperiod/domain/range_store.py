"""
Immutable container for the ranges currently selected in a session.
"""

from typing import Iterable, Iterator, Optional, Tuple

from .models import CalendarDay, SelectionRange


class RangeStore:
    """
    Snapshot of selected ranges.

    Every mutation returns a new store; an existing snapshot is never
    edited, so a consumer holding the previous store can diff it against
    the new one.

    Invariant: no two single-day ranges on the same day.
    """

    def __init__(self, ranges: Iterable[SelectionRange] = ()):
        self._ranges: Tuple[SelectionRange, ...] = tuple(ranges)
        self._check_single_days_unique()

    def _check_single_days_unique(self) -> None:
        seen = set()
        for selection in self._ranges:
            if not selection.is_single_day:
                continue
            if selection.start in seen:
                raise ValueError(f"Duplicate single-day range on {selection.start}")
            seen.add(selection.start)

    @property
    def ranges(self) -> Tuple[SelectionRange, ...]:
        return self._ranges

    @property
    def is_empty(self) -> bool:
        return not self._ranges

    def __len__(self) -> int:
        return len(self._ranges)

    def __iter__(self) -> Iterator[SelectionRange]:
        return iter(self._ranges)

    def __contains__(self, selection: object) -> bool:
        return selection in self._ranges

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeStore):
            return NotImplemented
        return sorted(self._ranges, key=_sort_key) == sorted(other._ranges, key=_sort_key)

    def __repr__(self) -> str:
        return f"RangeStore({list(self._ranges)!r})"

    def find_containing(self, day: CalendarDay) -> Optional[SelectionRange]:
        """Return the range whose [start, end] includes ``day``, if any."""
        for selection in self._ranges:
            if selection.contains(day):
                return selection
        return None

    def find_exact_single_day(self, day: CalendarDay) -> Optional[SelectionRange]:
        """Return the single-day range on ``day``, if any."""
        for selection in self._ranges:
            if selection.is_single_day and selection.start == day:
                return selection
        return None

    def covers(self, day: CalendarDay) -> bool:
        return self.find_containing(day) is not None

    def replace_all(self, ranges: Iterable[SelectionRange]) -> "RangeStore":
        """Atomic snapshot replacement; every other mutation goes through here."""
        return RangeStore(ranges)

    def add(self, selection: SelectionRange) -> "RangeStore":
        return self.replace_all(self._ranges + (selection,))

    def remove(self, selection: SelectionRange) -> "RangeStore":
        return self.replace_all(r for r in self._ranges if r != selection)

    def clear(self) -> "RangeStore":
        return self.replace_all(())


def _sort_key(selection: SelectionRange):
    return (selection.start, selection.end, selection.day_type.value)
