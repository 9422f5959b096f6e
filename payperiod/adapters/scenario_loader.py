"""
Loads recorded pointer-event scenarios from YAML files.

A scenario replays a wizard session without a calendar UI: the host's
pointer events are listed in order, optionally with the locked month and
the payroll details the selection should be reported under.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

import yaml

from ..domain.exceptions import ScenarioError
from ..domain.models import CalendarDay, LockedMonth, PayrollEventType
from ..domain.selection import EventKind, PointerEvent

logger = logging.getLogger(__name__)


@dataclass
class Scenario:
    """A parsed scenario file."""
    events: List[PointerEvent]
    locked_month: Optional[LockedMonth] = None
    employee_id: Optional[str] = None
    event_type: Optional[PayrollEventType] = None
    comment: str = ""
    source: Optional[Path] = field(default=None, compare=False)


class ScenarioLoader:
    """
    Reads scenario documents.

    Each entry of ``events`` is either a list ``[kind, day]`` (``[release]``
    for a global release) or a mapping ``{kind: ..., day: ...}``.
    """

    def load(self, path: Path) -> Scenario:
        """
        Load a scenario from a YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ScenarioError: If the file is not a valid scenario
        """
        if not path.exists():
            raise FileNotFoundError(f"Scenario file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ScenarioError(f"Invalid YAML in {path}: {exc}") from exc

        scenario = self.parse(data)
        scenario.source = path
        logger.info("Loaded %d pointer event(s) from %s", len(scenario.events), path)
        return scenario

    def parse(self, data: Any) -> Scenario:
        """Build a scenario from an already-decoded document."""
        if not isinstance(data, dict):
            raise ScenarioError("Scenario must contain a mapping at the root level.")

        raw_events = data.get("events") or []
        if not isinstance(raw_events, list):
            raise ScenarioError("'events' must be a list.")

        events = [
            self._parse_event(raw, index)
            for index, raw in enumerate(raw_events, 1)
        ]

        locked_month = None
        if data.get("locked_month") is not None:
            try:
                locked_month = LockedMonth.parse(str(data["locked_month"]))
            except ValueError as exc:
                raise ScenarioError(f"Invalid locked_month '{data['locked_month']}': {exc}") from exc

        event_type = None
        if data.get("event_type") is not None:
            try:
                event_type = PayrollEventType(data["event_type"])
            except ValueError as exc:
                known = ", ".join(t.value for t in PayrollEventType)
                raise ScenarioError(
                    f"Unknown event_type '{data['event_type']}'. Known types: {known}"
                ) from exc

        employee_id = data.get("employee_id")

        return Scenario(
            events=events,
            locked_month=locked_month,
            employee_id=str(employee_id) if employee_id is not None else None,
            event_type=event_type,
            comment=str(data.get("comment") or ""),
        )

    def _parse_event(self, raw: Any, index: int) -> PointerEvent:
        if isinstance(raw, dict):
            kind_value, day_value = raw.get("kind"), raw.get("day")
        elif isinstance(raw, list) and 1 <= len(raw) <= 2:
            kind_value = raw[0]
            day_value = raw[1] if len(raw) == 2 else None
        else:
            raise ScenarioError(f"Event #{index} must be [kind, day] or a mapping, got {raw!r}")

        try:
            kind = EventKind(kind_value)
        except ValueError as exc:
            known = ", ".join(k.value for k in EventKind)
            raise ScenarioError(f"Event #{index} has unknown kind {kind_value!r}. Known kinds: {known}") from exc

        day = None
        if day_value is not None:
            try:
                # YAML turns unquoted 2025-06-02 into a date object
                day = (
                    CalendarDay.parse(day_value)
                    if isinstance(day_value, str)
                    else CalendarDay.from_date(day_value)
                )
            except (AttributeError, ValueError) as exc:
                raise ScenarioError(f"Event #{index} has invalid day {day_value!r}: {exc}") from exc

        try:
            return PointerEvent(kind=kind, day=day)
        except ValueError as exc:
            raise ScenarioError(f"Event #{index}: {exc}") from exc
