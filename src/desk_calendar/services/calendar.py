from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional

from ..core.dates import MONTH_NAMES, weekday_headers
from ..data import EventStore
from ..domain import CalendarDay, EventRecord, Snapshot
from .context import ServiceContext
from .grid import GridCell, grid_rows, project_month
from .selection import CalendarState
from .upcoming import NO_UPCOMING_MESSAGE, UpcomingEntry, project_upcoming, sort_for_day


@dataclass(frozen=True)
class CalendarView:
    """Everything a window needs to redraw, derived from one snapshot read."""

    state: CalendarState
    headers: List[str]
    cells: List[GridCell]
    day_events: List[EventRecord]
    upcoming: List[UpcomingEntry]

    @property
    def rows(self) -> List[List[GridCell]]:
        return grid_rows(self.cells)

    @property
    def month_label(self) -> str:
        return f"{MONTH_NAMES[self.state.view_month_index]} {self.state.view_year}"

    @property
    def selected_label(self) -> str:
        if self.state.selected is None:
            return "No date selected"
        return self.state.selected.label

    @property
    def upcoming_placeholder(self) -> Optional[str]:
        return None if self.upcoming else NO_UPCOMING_MESSAGE


@dataclass(slots=True)
class CalendarService:
    context: ServiceContext

    @property
    def store(self) -> EventStore:
        return self.context.store

    @property
    def week_start(self) -> int:
        return self.context.settings.ui.week_start

    def snapshot(self) -> Snapshot:
        return self.store.load()

    def month_grid(
        self,
        year: int,
        month_index: int,
        *,
        selected: Optional[CalendarDay] = None,
        today: Optional[date] = None,
    ) -> List[GridCell]:
        return project_month(year, month_index, self.snapshot(), selected, today, self.week_start)

    def events_for_day(self, date_key: str) -> List[EventRecord]:
        return sort_for_day(self.store.events_for(date_key))

    def upcoming(self, *, reference: Optional[datetime] = None, limit: Optional[int] = None) -> List[UpcomingEntry]:
        resolved_limit = self.context.settings.ui.upcoming_limit if limit is None else limit
        return project_upcoming(self.snapshot(), reference, resolved_limit)

    def render(
        self,
        state: CalendarState,
        *,
        today: Optional[date] = None,
        reference: Optional[datetime] = None,
    ) -> CalendarView:
        snapshot = self.snapshot()
        selected_key = state.selected_key
        return CalendarView(
            state=state,
            headers=weekday_headers(self.week_start),
            cells=project_month(
                state.view_year,
                state.view_month_index,
                snapshot,
                state.selected,
                today,
                self.week_start,
            ),
            day_events=sort_for_day(snapshot.get(selected_key, [])) if selected_key else [],
            upcoming=project_upcoming(snapshot, reference, self.context.settings.ui.upcoming_limit),
        )
