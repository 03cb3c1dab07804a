from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import EventRecord
from ..services import GridCell, UpcomingEntry


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    time: str = Field(default="")
    notes: str = Field(default="")
    completed: bool = Field(default=False)
    created_at: int = Field(default=0, alias="createdAt")

    @classmethod
    def from_domain(cls, event: EventRecord) -> "EventPayload":
        return cls(
            id=event.id,
            title=event.title,
            time=event.time,
            notes=event.notes,
            completed=event.completed,
            created_at=event.created_at,
        )


class GridCellPayload(BaseModel):
    index: int
    day: Optional[int] = Field(default=None)
    date_key: Optional[str] = Field(default=None)
    label: str = Field(default="")
    is_padding: bool
    is_today: bool = Field(default=False)
    is_selected: bool = Field(default=False)
    has_events: bool = Field(default=False)

    @classmethod
    def from_domain(cls, cell: GridCell) -> "GridCellPayload":
        return cls(
            index=cell.index,
            day=cell.day,
            date_key=cell.date_key,
            label=cell.label,
            is_padding=cell.is_padding,
            is_today=cell.is_today,
            is_selected=cell.is_selected,
            has_events=cell.has_events,
        )


class UpcomingPayload(BaseModel):
    date_key: str
    stamp: str
    event: EventPayload

    @classmethod
    def from_domain(cls, entry: UpcomingEntry) -> "UpcomingPayload":
        return cls(date_key=entry.date_key, stamp=entry.stamp, event=EventPayload.from_domain(entry.event))
