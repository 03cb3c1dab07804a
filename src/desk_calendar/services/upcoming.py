from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from ..core.dates import format_long
from ..domain import CalendarDay, EventRecord, Snapshot, parse_date_key

DEFAULT_UPCOMING_LIMIT = 10
NO_UPCOMING_MESSAGE = "No upcoming incomplete events yet."

Instant = Tuple[int, int, int, int, int, int, int]


@dataclass(frozen=True, slots=True)
class UpcomingEntry:
    date_key: str
    day: CalendarDay
    event: EventRecord

    @property
    def instant(self) -> Instant:
        hour, minute = self.event.clock
        return (self.day.year, self.day.month_index, self.day.day, hour, minute, 0, 0)

    @property
    def stamp(self) -> str:
        label = format_long(*self.day)
        return f"{label} • {self.event.time}" if self.event.time else label


def _instant_of(reference: datetime) -> Instant:
    return (
        reference.year,
        reference.month - 1,
        reference.day,
        reference.hour,
        reference.minute,
        reference.second,
        reference.microsecond,
    )


def project_upcoming(
    snapshot: Snapshot,
    reference: Optional[datetime] = None,
    limit: int = DEFAULT_UPCOMING_LIMIT,
) -> List[UpcomingEntry]:
    """Incomplete events at or after ``reference``, soonest first.

    Events without a time count as starting at midnight. Events sharing an
    instant keep their snapshot order.
    """

    floor = _instant_of(reference or datetime.now())
    entries: List[UpcomingEntry] = []
    for key, events in snapshot.items():
        day = parse_date_key(key)
        for event in events:
            if event.completed:
                continue
            entry = UpcomingEntry(date_key=key, day=day, event=event)
            if entry.instant >= floor:
                entries.append(entry)
    entries.sort(key=lambda entry: entry.instant)
    return entries[: max(limit, 0)]


def sort_for_day(events: Iterable[EventRecord]) -> List[EventRecord]:
    """Order a single day's events: incomplete first, then by time."""

    return sorted(events, key=lambda event: (event.completed, event.time or ""))


__all__ = [
    "DEFAULT_UPCOMING_LIMIT",
    "NO_UPCOMING_MESSAGE",
    "UpcomingEntry",
    "project_upcoming",
    "sort_for_day",
]
