"""Application services deriving views and state from the event store."""

from __future__ import annotations

from .calendar import CalendarService, CalendarView
from .context import ServiceContext
from .grid import GRID_CELLS, GRID_COLUMNS, GridCell, grid_rows, project_month
from .selection import CalendarState, initial_state
from .upcoming import NO_UPCOMING_MESSAGE, UpcomingEntry, project_upcoming, sort_for_day

__all__ = [
    "GRID_CELLS",
    "GRID_COLUMNS",
    "CalendarService",
    "CalendarState",
    "CalendarView",
    "GridCell",
    "NO_UPCOMING_MESSAGE",
    "ServiceContext",
    "UpcomingEntry",
    "grid_rows",
    "initial_state",
    "project_month",
    "project_upcoming",
    "sort_for_day",
]
