from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, NamedTuple, Tuple
from uuid import uuid4

from ..core.dates import days_in_month, format_long
from .errors import ValidationError

_DATE_KEY_PATTERN = re.compile(r"^(-?\d{4,})-(\d{2})-(\d{2})$")
_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
_KNOWN_FIELDS = frozenset({"id", "title", "time", "notes", "completed", "createdAt"})


class CalendarDay(NamedTuple):
    """A calendar date as ``(year, month_index, day)`` with a 0-based month."""

    year: int
    month_index: int
    day: int

    @classmethod
    def from_date(cls, value: date) -> "CalendarDay":
        return cls(value.year, value.month - 1, value.day)

    @classmethod
    def today(cls) -> "CalendarDay":
        return cls.from_date(date.today())

    @classmethod
    def from_key(cls, key: str) -> "CalendarDay":
        return parse_date_key(key)

    @property
    def key(self) -> str:
        return make_date_key(self.year, self.month_index, self.day)

    @property
    def label(self) -> str:
        return format_long(self.year, self.month_index, self.day)


def make_date_key(year: int, month_index: int, day: int) -> str:
    sign = "-" if year < 0 else ""
    return f"{sign}{abs(year):04d}-{month_index + 1:02d}-{day:02d}"


def parse_date_key(key: str) -> CalendarDay:
    match = _DATE_KEY_PATTERN.match(key) if isinstance(key, str) else None
    if not match:
        raise ValidationError(f"Invalid date key: {key!r}. Expected YYYY-MM-DD.")
    year, month, day = (int(group) for group in match.groups())
    if not 1 <= month <= 12 or not 1 <= day <= days_in_month(year, month - 1):
        raise ValidationError(f"Date key {key!r} does not name a real day.")
    return CalendarDay(year, month - 1, day)


def _now_millis() -> int:
    return int(datetime.now().timestamp() * 1000)


@dataclass(slots=True)
class EventRecord:
    id: str
    title: str
    time: str = ""
    notes: str = ""
    completed: bool = False
    created_at: int = 0
    # Stored values this model cannot represent, written back unchanged.
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def new(cls, title: str, time: str = "", notes: str = "") -> "EventRecord":
        return cls(
            id=str(uuid4()),
            title=title.strip(),
            time=time.strip(),
            notes=notes.strip(),
            completed=False,
            created_at=_now_millis(),
        )

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "EventRecord":
        """Build a record from its stored form.

        Only a missing id makes a record unusable. Other odd values are coerced
        (a non-numeric ``createdAt`` reads as 0). Unknown keys, and a
        ``createdAt`` that could not be read, are kept in ``extra`` so
        :meth:`to_record` writes them back as they were.
        """

        if not isinstance(record, dict):
            raise ValueError(f"Event record must be an object, got {type(record).__name__}")
        identifier = record.get("id")
        if not isinstance(identifier, str) or not identifier:
            raise ValueError("Event record is missing a string id")
        extra = {key: value for key, value in record.items() if key not in _KNOWN_FIELDS}
        created_at = record.get("createdAt")
        if not isinstance(created_at, (int, float)) or isinstance(created_at, bool):
            if created_at is not None:
                extra["createdAt"] = created_at
            created_at = 0
        title = record.get("title")
        return cls(
            id=identifier,
            title=title if isinstance(title, str) else str(title or ""),
            time=str(record.get("time") or ""),
            notes=str(record.get("notes") or ""),
            completed=bool(record.get("completed", False)),
            created_at=int(created_at),
            extra=extra,
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "time": self.time,
            "notes": self.notes,
            "completed": self.completed,
            "createdAt": self.created_at,
            **self.extra,
        }

    @property
    def clock(self) -> Tuple[int, int]:
        """``(hour, minute)`` of the event; a missing or malformed time counts as midnight."""

        match = _TIME_PATTERN.match(self.time)
        if not match:
            return (0, 0)
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour > 23 or minute > 59:
            return (0, 0)
        return (hour, minute)


@dataclass(frozen=True)
class EditTarget:
    date_key: str
    event_id: str


@dataclass(frozen=True)
class FormFields:
    title: str = ""
    time: str = ""
    notes: str = ""

    @classmethod
    def from_event(cls, event: EventRecord) -> "FormFields":
        return cls(title=event.title or "", time=event.time or "", notes=event.notes or "")

    def cleaned(self) -> "FormFields":
        return FormFields(title=self.title.strip(), time=self.time.strip(), notes=self.notes.strip())


Snapshot = Dict[str, List[EventRecord]]
