"""
Cycles the day type of a single-day selection on repeated clicks.
"""

from typing import Optional, Tuple

from .models import CalendarDay, DayType
from .range_store import RangeStore


class DayTypeCycler:
    """
    Advances a single-day range through the day-type cycle.

    full -> half-morning -> half-afternoon -> removed
    """

    CYCLE: Tuple[DayType, ...] = (
        DayType.FULL,
        DayType.HALF_MORNING,
        DayType.HALF_AFTERNOON,
    )

    def next_type(self, day_type: DayType) -> Optional[DayType]:
        """Return the next day type, or None when the cycle ends."""
        position = self.CYCLE.index(day_type)
        if position + 1 >= len(self.CYCLE):
            return None
        return self.CYCLE[position + 1]

    def cycle(self, store: RangeStore, day: CalendarDay) -> RangeStore:
        """
        Apply one cycle step to the single-day range on ``day``.

        Raises:
            ValueError: If there is no single-day range on ``day``
        """
        selection = store.find_exact_single_day(day)
        if selection is None:
            raise ValueError(f"No single-day range to cycle on {day}")

        next_type = self.next_type(selection.day_type)
        if next_type is None:
            return store.remove(selection)

        replaced = selection.with_day_type(next_type)
        return store.replace_all(
            replaced if r == selection else r for r in store
        )
