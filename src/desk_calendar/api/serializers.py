from __future__ import annotations

from typing import Any, Dict

from ..domain import EventRecord
from ..services import GridCell, UpcomingEntry
from .models import EventPayload, GridCellPayload, UpcomingPayload


def serialize_event(event: EventRecord) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump(by_alias=True)


def serialize_cell(cell: GridCell) -> Dict[str, Any]:
    return GridCellPayload.from_domain(cell).model_dump()


def serialize_upcoming(entry: UpcomingEntry) -> Dict[str, Any]:
    return UpcomingPayload.from_domain(entry).model_dump(by_alias=True)
