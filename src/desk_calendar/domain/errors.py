from __future__ import annotations


class CalendarError(Exception):
    """Base class for all calendar errors."""


class ValidationError(CalendarError, ValueError):
    """Raised when user supplied fields cannot be accepted (e.g. an empty title)."""


class NotFoundError(CalendarError, LookupError):
    """Raised when an event referenced by date key and id no longer exists."""

    def __init__(self, date_key: str, event_id: str) -> None:
        super().__init__(f"Event {event_id} was not found on {date_key}.")
        self.date_key = date_key
        self.event_id = event_id


class PersistenceCorruptError(CalendarError):
    """Raised when the stored snapshot cannot be decoded."""
