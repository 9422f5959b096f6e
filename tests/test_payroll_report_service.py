"""
Tests for the PayrollReportService.
"""

import pytest

from payperiod.domain.models import (
    DayType,
    PayrollEventType,
    SelectionRange,
    SelectionSummary,
)
from payperiod.domain.range_store import RangeStore
from payperiod.services.payroll_report import PayrollReportService

from conftest import june


def _store() -> RangeStore:
    return RangeStore([
        SelectionRange.single(june(10)),
        SelectionRange.single(june(12), DayType.HALF_MORNING),
        SelectionRange(start=june(3), end=june(4)),
        SelectionRange.single(june(2)),
    ])


def test_build_periods_merges_and_sorts():
    """Adjacent full days become one period; output is ordered by start."""
    periods = PayrollReportService().build_periods(_store(), comment="Vacances")

    assert [(str(p.start_date), str(p.end_date), p.days) for p in periods] == [
        ("2025-06-02", "2025-06-04", 3),
        ("2025-06-10", "2025-06-10", 1),
        ("2025-06-12", "2025-06-12", 0.5),
    ]
    assert periods[2].day_type is DayType.HALF_MORNING
    assert all(p.comment == "Vacances" for p in periods)


def test_build_records_for_employee():
    """Each reporting period yields one record for the employee."""
    records = PayrollReportService().build_records(
        _store(),
        employee_id="1",
        event_type=PayrollEventType.PAID_LEAVE,
    )

    assert len(records) == 3
    assert {r.employee_id for r in records} == {"1"}
    assert {r.status for r in records} == {"confirmed"}
    assert records[0].event_type is PayrollEventType.PAID_LEAVE


def test_build_records_rejects_unknown_status():
    """Only draft and confirmed records can be created."""
    with pytest.raises(ValueError, match="Unknown record status"):
        PayrollReportService().build_records(
            _store(),
            employee_id="1",
            event_type=PayrollEventType.BONUS,
            status="archived",
        )


def test_summarize_store():
    """The running total sums the raw selection; periods use the merge."""
    summary = PayrollReportService().summarize(_store())

    assert summary.total_days == 4.5
    assert summary.period_count == 3
    assert summary.selected_range_count == 4


@pytest.mark.parametrize(
    "summary, expected",
    [
        (SelectionSummary(total_days=0, period_count=0, selected_range_count=0), ""),
        (SelectionSummary(total_days=0.5, period_count=1, selected_range_count=1), "0.5 jour"),
        (SelectionSummary(total_days=1, period_count=1, selected_range_count=1), "1 jour"),
        (SelectionSummary(total_days=5, period_count=1, selected_range_count=2), "5 jours"),
        (
            SelectionSummary(total_days=5.5, period_count=2, selected_range_count=2),
            "5.5 jours répartis sur 2 périodes",
        ),
    ],
)
def test_format_counter(summary, expected):
    """The counter text matches the wizard's wording."""
    assert PayrollReportService.format_counter(summary) == expected
