"""
Pointer-driven selection of day ranges within a locked month.

The state machine translates the host's pointer events (down, enter, up,
click and a global release) into range store snapshots. It holds only
configuration; all transient gesture state lives in a ``SelectionSession``
that the host passes into each handler.

Interaction model (press-and-drag):

- ``down`` on a free day arms an anchor and starts a drag.
- ``enter`` moves the drag's current day.
- ``up`` (or ``release`` outside the grid) finalizes the drag.
- ``click`` is emitted by the host only when down and up hit the same day;
  it adds, cycles or collapses a single day.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .day_type_cycler import DayTypeCycler
from .models import DEFAULT_WEEKEND_DAYS, CalendarDay, LockedMonth, SelectionRange
from .range_store import RangeStore

logger = logging.getLogger(__name__)


class EventKind(str, Enum):
    DOWN = "down"
    ENTER = "enter"
    UP = "up"
    CLICK = "click"
    RELEASE = "release"


@dataclass(frozen=True)
class PointerEvent:
    """A pointer event forwarded by the host. ``release`` carries no day."""
    kind: EventKind
    day: Optional[CalendarDay] = None

    def __post_init__(self):
        if self.kind is not EventKind.RELEASE and self.day is None:
            raise ValueError(f"Pointer event '{self.kind.value}' requires a day")


class SelectionState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class SelectionSession:
    """
    Per-wizard state: the current store plus the in-progress drag.
    """

    def __init__(self, store: Optional[RangeStore] = None):
        self.store: RangeStore = store if store is not None else RangeStore()
        self.state: SelectionState = SelectionState.IDLE
        self.anchor: Optional[CalendarDay] = None
        self.current: Optional[CalendarDay] = None

    @property
    def is_dragging(self) -> bool:
        return self.state is SelectionState.DRAGGING

    @property
    def preview_range(self) -> Optional[SelectionRange]:
        """Candidate range while dragging; never part of the store."""
        if not self.is_dragging:
            return None
        return SelectionRange.between(self.anchor, self.current)

    def reset_gesture(self) -> None:
        self.state = SelectionState.IDLE
        self.anchor = None
        self.current = None


class SelectionStateMachine:
    """
    Applies pointer events to a session.

    Days that fall on a weekend or outside the locked month are inert:
    events targeting them change nothing.
    """

    def __init__(
        self,
        locked_month: LockedMonth,
        weekend_days: Sequence[int] = DEFAULT_WEEKEND_DAYS,
        cycler: Optional[DayTypeCycler] = None,
    ):
        self.locked_month = locked_month
        self.weekend_days = tuple(weekend_days)
        self._cycler = cycler or DayTypeCycler()

    def is_selectable(self, day: CalendarDay) -> bool:
        return (
            not day.is_weekend(self.weekend_days)
            and day.is_within_locked_month(self.locked_month)
        )

    def handle(self, session: SelectionSession, event: PointerEvent) -> RangeStore:
        """Dispatch one pointer event and return the resulting store."""
        handlers = {
            EventKind.DOWN: self.on_down,
            EventKind.ENTER: self.on_enter,
            EventKind.UP: self.on_up,
            EventKind.CLICK: self.on_click,
        }
        if event.kind is EventKind.RELEASE:
            return self.on_release(session)
        return handlers[event.kind](session, event.day)

    def on_down(self, session: SelectionSession, day: CalendarDay) -> RangeStore:
        if not self.is_selectable(day):
            logger.debug("Ignoring down on inert day %s", day)
            return session.store

        if session.is_dragging:
            # A missed release must not leave the previous drag pending
            self._finalize(session, ended_on=day)

        if session.store.covers(day):
            # The click that follows collapses or cycles this day
            return session.store

        session.state = SelectionState.DRAGGING
        session.anchor = day
        session.current = day
        return session.store

    def on_enter(self, session: SelectionSession, day: CalendarDay) -> RangeStore:
        if session.is_dragging and self.is_selectable(day):
            session.current = day
        return session.store

    def on_up(self, session: SelectionSession, day: CalendarDay) -> RangeStore:
        if not session.is_dragging:
            return session.store
        if self.is_selectable(day):
            session.current = day
        return self._finalize(session, ended_on=day)

    def on_release(self, session: SelectionSession) -> RangeStore:
        """Global pointer release, possibly outside the grid."""
        if not session.is_dragging:
            return session.store
        return self._finalize(session)

    def on_click(self, session: SelectionSession, day: CalendarDay) -> RangeStore:
        if not self.is_selectable(day):
            logger.debug("Ignoring click on inert day %s", day)
            return session.store

        if session.is_dragging:
            self._finalize(session, ended_on=day)

        store = session.store
        containing = store.find_containing(day)

        if containing is None:
            session.store = store.add(SelectionRange.single(day))
        elif containing.is_single_day:
            session.store = self._cycler.cycle(store, day)
        else:
            logger.debug("Collapsing range %s to single day %s", containing, day)
            session.store = store.remove(containing).add(SelectionRange.single(day))

        return session.store

    def clear(self, session: SelectionSession) -> RangeStore:
        session.reset_gesture()
        session.store = session.store.clear()
        return session.store

    def preview_days(self, session: SelectionSession) -> List[CalendarDay]:
        """Days the current drag would add if finalized now."""
        preview = session.preview_range
        if preview is None:
            return []
        return [
            day for day in preview.days()
            if self.is_selectable(day) and not session.store.covers(day)
        ]

    def _finalize(
        self, session: SelectionSession, ended_on: Optional[CalendarDay] = None
    ) -> RangeStore:
        """
        Commit the pending drag.

        ``ended_on`` is the cell the gesture ended on, None for a release
        outside the grid. Only a press released on its own anchor cell adds
        nothing, since the host follows it with a click on that day.
        """
        anchor, current = session.anchor, session.current
        new_days = self.preview_days(session)
        session.reset_gesture()

        if anchor == current and ended_on == anchor:
            return session.store

        new_ranges = _contiguous_ranges(new_days)
        logger.debug(
            "Finalized drag %s - %s into %d range(s)",
            min(anchor, current), max(anchor, current), len(new_ranges),
        )
        if new_ranges:
            session.store = session.store.replace_all(
                session.store.ranges + tuple(new_ranges)
            )
        return session.store


def _contiguous_ranges(days: List[CalendarDay]) -> List[SelectionRange]:
    """Group ascending days into full-day ranges of consecutive dates."""
    ranges: List[SelectionRange] = []
    if not days:
        return ranges

    run_start = previous = days[0]
    for day in days[1:]:
        if day != previous.add_days(1):
            ranges.append(SelectionRange(start=run_start, end=previous))
            run_start = day
        previous = day
    ranges.append(SelectionRange(start=run_start, end=previous))

    return ranges
