"""
Coalesces calendar-adjacent full-day ranges into reporting periods.
"""

from typing import Iterable, List

from .models import SelectionRange


class RangeMerger:
    """
    Merges full-day ranges whose dates touch.

    Algorithm:
    1. Split the selection into full-day and half-day ranges
    2. Sort full-day ranges by start day
    3. Sweep left to right, extending the current range while the next one
       starts the day after it ends
    4. Append half-day ranges untouched

    Adjacency is by calendar date: a Friday range and a Monday range stay
    separate even though only weekend days lie between them.
    """

    def merge(self, ranges: Iterable[SelectionRange]) -> List[SelectionRange]:
        full_day_ranges: List[SelectionRange] = []
        other_ranges: List[SelectionRange] = []

        for selection in ranges:
            if selection.day_type.is_half_day:
                other_ranges.append(selection)
            else:
                full_day_ranges.append(selection)

        merged = self._merge_full_days(full_day_ranges)
        other_ranges.sort(key=lambda r: r.start)

        return merged + other_ranges

    def _merge_full_days(self, ranges: List[SelectionRange]) -> List[SelectionRange]:
        """
        Sweep sorted full-day ranges, joining exact day-after neighbours.

        Overlapping input is not de-duplicated; only adjacency triggers a
        merge.
        """
        if not ranges:
            return []

        sorted_ranges = sorted(ranges, key=lambda r: r.start)
        merged: List[SelectionRange] = []
        current = sorted_ranges[0]

        for following in sorted_ranges[1:]:
            if following.start == current.end.add_days(1):
                current = SelectionRange(start=current.start, end=following.end)
            else:
                merged.append(current)
                current = following

        merged.append(current)

        return merged
