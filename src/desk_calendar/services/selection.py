"""Selection and add/edit form state.

``CalendarState`` is immutable. Every transition is a plain function that takes
the current state and returns the next one; the window that owns the state
keeps the only mutable reference to it. Transitions that write events go
through the :class:`~desk_calendar.data.EventStore` and leave the state
untouched when the store rejects the write.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Callable, Optional

from ..core.dates import shift_month
from ..data import EventStore
from ..domain import CalendarDay, EditTarget, FormFields, FormMode, NotFoundError, Snapshot, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarState:
    view_year: int
    view_month_index: int
    selected: Optional[CalendarDay] = None
    editing: Optional[EditTarget] = None
    form: FormFields = field(default_factory=FormFields)

    @property
    def mode(self) -> FormMode:
        if self.selected is None:
            return FormMode.IDLE
        if self.editing is not None:
            return FormMode.EDITING
        return FormMode.SELECTED

    @property
    def selected_key(self) -> Optional[str]:
        return self.selected.key if self.selected is not None else None


def initial_state(today: Optional[date] = None) -> CalendarState:
    current = today or date.today()
    return CalendarState(view_year=current.year, view_month_index=current.month - 1)


def select_date(state: CalendarState, year: int, month_index: int, day: int) -> CalendarState:
    return replace(state, selected=CalendarDay(year, month_index, day), editing=None, form=FormFields())


def start_edit(state: CalendarState, snapshot: Snapshot, date_key: str, event_id: str) -> CalendarState:
    # Only events of the selected day can be edited.
    if state.selected is None or date_key != state.selected_key:
        return state
    event = next((item for item in snapshot.get(date_key, []) if item.id == event_id), None)
    if event is None:
        return state
    return replace(state, editing=EditTarget(date_key, event_id), form=FormFields.from_event(event))


def cancel_edit(state: CalendarState) -> CalendarState:
    return replace(state, editing=None, form=FormFields())


def update_form(state: CalendarState, fields: FormFields) -> CalendarState:
    """Record what the user has typed so far without changing the mode."""

    if state.selected is None:
        return state
    return replace(state, form=fields)


def commit_add(state: CalendarState, store: EventStore, fields: FormFields) -> CalendarState:
    if state.selected is None:
        raise ValidationError("Click a day on the calendar first.")
    if state.editing is not None:
        raise ValidationError("Save or cancel the event being edited first.")
    cleaned = fields.cleaned()
    store.add(state.selected.key, cleaned.title, cleaned.time, cleaned.notes)
    return replace(state, form=FormFields())


def commit_edit(state: CalendarState, store: EventStore, fields: FormFields) -> CalendarState:
    """Save the form over the event being edited.

    Raises ``NotFoundError`` when the event disappeared in the meantime; the
    caller should fall back to :func:`cancel_edit`.
    """

    if state.editing is None:
        raise ValidationError("No event is being edited.")
    cleaned = fields.cleaned()
    store.update(state.editing.date_key, state.editing.event_id, cleaned.title, cleaned.time, cleaned.notes)
    return cancel_edit(state)


def delete_event(state: CalendarState, store: EventStore, date_key: str, event_id: str) -> CalendarState:
    store.delete(date_key, event_id)
    if state.editing == EditTarget(date_key, event_id):
        return cancel_edit(state)
    return state


def toggle_event(state: CalendarState, store: EventStore, date_key: str, event_id: str) -> CalendarState:
    store.toggle_completed(date_key, event_id)
    return state


def set_month(state: CalendarState, year: int, month_index: int) -> CalendarState:
    # Leaving a month always drops the selection and any edit in progress.
    return CalendarState(view_year=year, view_month_index=month_index)


def change_month(state: CalendarState, delta: int) -> CalendarState:
    year, month_index = shift_month(state.view_year, state.view_month_index, delta)
    return set_month(state, year, month_index)


def jump_to_date(state: CalendarState, year: int, month_index: int, day: int) -> CalendarState:
    return select_date(set_month(state, year, month_index), year, month_index, day)


def jump_to_today(state: CalendarState, today: Optional[date] = None) -> CalendarState:
    current = today or date.today()
    return jump_to_date(state, current.year, current.month - 1, current.day)


@dataclass(frozen=True)
class Notice:
    """Message a window shows after a transition did not go through as asked."""

    level: str
    title: str
    text: str


@dataclass(frozen=True)
class Outcome:
    state: CalendarState
    notice: Optional[Notice] = None
    redraw: bool = True


def run_transition(state: CalendarState, transition: Callable[[], CalendarState]) -> Outcome:
    """Apply ``transition`` and turn the errors a window can recover from into a notice.

    Rejected input and failed writes keep ``state`` (and the typed form) as it
    was. A vanished edit target falls back to add mode.
    """

    try:
        return Outcome(transition())
    except ValidationError as exc:
        return Outcome(state, Notice("warning", "Cannot save", str(exc)), redraw=False)
    except NotFoundError as exc:
        logger.info("Edit target vanished: %s", exc)
        return Outcome(cancel_edit(state), Notice("information", "Event not found", "Could not find that event to edit."))
    except OSError as exc:
        logger.exception("Writing events failed")
        return Outcome(state, Notice("critical", "Could not save", str(exc)), redraw=False)


__all__ = [
    "CalendarState",
    "Notice",
    "Outcome",
    "cancel_edit",
    "change_month",
    "commit_add",
    "commit_edit",
    "delete_event",
    "initial_state",
    "jump_to_date",
    "jump_to_today",
    "run_transition",
    "select_date",
    "set_month",
    "start_edit",
    "toggle_event",
    "update_form",
]
