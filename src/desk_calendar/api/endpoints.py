from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional

from ..core.dates import MONTH_NAMES, weekday_headers
from ..domain import ValidationError, parse_date_key
from ..services import NO_UPCOMING_MESSAGE
from .registry import register_api
from .serializers import serialize_cell, serialize_event, serialize_upcoming
from .state import api_state


def _parse_reference(timestamp: str) -> datetime:
    try:
        return datetime.fromisoformat(timestamp)
    except ValueError as exc:  # noqa: TRY003
        raise ValidationError(f"Invalid ISO timestamp: {timestamp}") from exc


def _parse_today(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:  # noqa: TRY003
        raise ValidationError(f"Invalid ISO date: {value}") from exc


@register_api(
    "month_grid",
    description="Describe the 42 cells of the month grid (month_index is 0-based).",
    tags=("grid", "read"),
)
def month_grid(
    year: int,
    month_index: int,
    selected: Optional[str] = None,
    today: Optional[str] = None,
) -> Dict[str, Any]:
    if not 0 <= month_index <= 11:
        raise ValidationError("month_index must be between 0 and 11")
    selected_day = parse_date_key(selected) if selected else None
    cells = api_state.calendar.month_grid(
        year,
        month_index,
        selected=selected_day,
        today=_parse_today(today) if today else None,
    )
    return {
        "year": year,
        "month_index": month_index,
        "label": f"{MONTH_NAMES[month_index]} {year}",
        "headers": weekday_headers(api_state.calendar.week_start),
        "cells": [serialize_cell(cell) for cell in cells],
    }


@register_api(
    "events_for_day",
    description="Return a day's events, incomplete first and then by time.",
    tags=("read",),
)
def events_for_day(day: str) -> Dict[str, Any]:
    target = parse_date_key(day)
    events = api_state.calendar.events_for_day(target.key)
    return {"day": target.key, "label": target.label, "events": [serialize_event(event) for event in events]}


@register_api(
    "upcoming_events",
    description="Return the soonest incomplete events from now (or the given ISO timestamp) onwards.",
    tags=("read", "upcoming"),
)
def upcoming_events(limit: Optional[int] = None, reference: Optional[str] = None) -> Dict[str, Any]:
    entries = api_state.calendar.upcoming(
        reference=_parse_reference(reference) if reference else None,
        limit=limit,
    )
    return {
        "events": [serialize_upcoming(entry) for entry in entries],
        "placeholder": None if entries else NO_UPCOMING_MESSAGE,
    }


@register_api(
    "add_event",
    description="Add an event to a day. Title is required; time is HH:MM.",
    tags=("write",),
)
def add_event(day: str, title: str, time: str = "", notes: str = "") -> Dict[str, Any]:
    event_id = api_state.calendar.store.add(day, title, time, notes)
    event = api_state.calendar.store.get(day, event_id)
    return {"day": day, "id": event_id, "event": serialize_event(event) if event else None}


@register_api(
    "update_event",
    description="Replace the title, time and notes of an existing event.",
    tags=("write",),
)
def update_event(day: str, event_id: str, title: str, time: str = "", notes: str = "") -> Dict[str, Any]:
    store = api_state.calendar.store
    store.update(day, event_id, title, time, notes)
    event = store.get(day, event_id)
    return {"day": day, "event": serialize_event(event) if event else None}


@register_api(
    "toggle_event",
    description="Flip the completed flag of an event. Unknown events are ignored.",
    tags=("write",),
)
def toggle_event(day: str, event_id: str) -> Dict[str, Any]:
    store = api_state.calendar.store
    toggled = store.toggle_completed(day, event_id)
    event = store.get(day, event_id) if toggled else None
    return {
        "day": day,
        "event_id": event_id,
        "toggled": toggled,
        "completed": event.completed if event else None,
    }


@register_api(
    "delete_event",
    description="Delete an event. Unknown events are ignored.",
    tags=("write",),
)
def delete_event(day: str, event_id: str) -> Dict[str, Any]:
    deleted = api_state.calendar.store.delete(day, event_id)
    return {"day": day, "event_id": event_id, "deleted": deleted}


@register_api(
    "format_day",
    description="Format a YYYY-MM-DD day as 'Month D, YYYY'.",
    tags=("read", "format"),
)
def format_day(day: str) -> Dict[str, str]:
    target = parse_date_key(day)
    return {"day": target.key, "label": target.label}
