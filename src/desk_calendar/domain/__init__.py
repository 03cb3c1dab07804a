"""Domain models for the desk calendar."""

from __future__ import annotations

from .enums import FormMode
from .errors import CalendarError, NotFoundError, PersistenceCorruptError, ValidationError
from .models import CalendarDay, EditTarget, EventRecord, FormFields, Snapshot, make_date_key, parse_date_key

__all__ = [
    "CalendarDay",
    "CalendarError",
    "EditTarget",
    "EventRecord",
    "FormFields",
    "FormMode",
    "NotFoundError",
    "PersistenceCorruptError",
    "Snapshot",
    "ValidationError",
    "make_date_key",
    "parse_date_key",
]
