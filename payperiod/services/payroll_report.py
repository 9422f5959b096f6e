"""
Application service turning a selection into payroll report records.

The service sits between the interaction engine and whatever generates the
payroll export. It delegates merging and counting to the domain layer and
only shapes the results into report records.
"""

from __future__ import annotations

from typing import List, Optional

from ..domain.duration import DurationCalculator
from ..domain.models import (
    PayrollEventRecord,
    PayrollEventType,
    ReportPeriod,
    SelectionSummary,
    format_day_count,
)
from ..domain.range_merger import RangeMerger
from ..domain.range_store import RangeStore

RECORD_STATUSES = ("draft", "confirmed")


class PayrollReportService:
    """
    Builds reporting periods, employee records and counters from a store.
    """

    def __init__(
        self,
        merger: Optional[RangeMerger] = None,
        calculator: Optional[DurationCalculator] = None,
    ) -> None:
        self._merger = merger or RangeMerger()
        self._calculator = calculator or DurationCalculator(merger=self._merger)

    def build_periods(self, store: RangeStore, comment: str = "") -> List[ReportPeriod]:
        """One period per merged range, ordered by start day."""
        merged = sorted(self._merger.merge(store), key=lambda r: (r.start, r.end))
        return [
            ReportPeriod(
                start_date=selection.start,
                end_date=selection.end,
                days=self._calculator.range_days(selection),
                day_type=selection.day_type,
                comment=comment,
            )
            for selection in merged
        ]

    def build_records(
        self,
        store: RangeStore,
        *,
        employee_id: str,
        event_type: PayrollEventType,
        comment: str = "",
        status: str = "confirmed",
    ) -> List[PayrollEventRecord]:
        """
        Create one payroll record per reporting period.

        Raises:
            ValueError: If status is not one of the known record statuses
        """
        if status not in RECORD_STATUSES:
            raise ValueError(f"Unknown record status '{status}', expected one of {RECORD_STATUSES}")

        return [
            PayrollEventRecord(
                employee_id=employee_id,
                event_type=event_type,
                period=period,
                status=status,
            )
            for period in self.build_periods(store, comment=comment)
        ]

    def summarize(self, store: RangeStore) -> SelectionSummary:
        return self._calculator.summarize(store)

    @staticmethod
    def format_counter(summary: SelectionSummary) -> str:
        """
        Human-readable counter, e.g. '5.5 jours répartis sur 2 périodes'.

        Returns an empty string when nothing is selected.
        """
        if summary.total_days == 0:
            return ""

        days_text = format_day_count(summary.total_days)
        if summary.period_count <= 1:
            return days_text
        return f"{days_text} répartis sur {summary.period_count} périodes"
