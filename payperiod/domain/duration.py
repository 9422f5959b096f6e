"""
Day counts for selections and reporting periods.
"""

from typing import Iterable, Optional

from .models import SelectionRange, SelectionSummary
from .range_merger import RangeMerger


class DurationCalculator:
    """
    Computes durations in days.

    The running total sums the raw selection so every gesture is reflected
    immediately; the period count uses the merged list since adjacent
    ranges are reported as one period.
    """

    def __init__(self, merger: Optional[RangeMerger] = None):
        self._merger = merger or RangeMerger()

    def range_days(self, selection: SelectionRange) -> float:
        """
        Day count of one range.

        Single day: 0.5 for a half day, else 1. Longer ranges count every
        calendar day from start to end inclusive.
        """
        if selection.is_single_day:
            return 0.5 if selection.day_type.is_half_day else 1
        return round(selection.start.days_until(selection.end)) + 1

    def total_days(self, ranges: Iterable[SelectionRange]) -> float:
        return sum((self.range_days(r) for r in ranges), 0)

    def period_count(self, ranges: Iterable[SelectionRange]) -> int:
        return len(self._merger.merge(ranges))

    def summarize(self, ranges: Iterable[SelectionRange]) -> SelectionSummary:
        selection = list(ranges)
        return SelectionSummary(
            total_days=self.total_days(selection),
            period_count=self.period_count(selection),
            selected_range_count=len(selection),
        )
