"""Tests for the upcoming list and per-day ordering."""

from datetime import datetime

from desk_calendar.domain import EventRecord
from desk_calendar.services import project_upcoming, sort_for_day
from desk_calendar.services.upcoming import DEFAULT_UPCOMING_LIMIT


def _event(event_id, time="", completed=False, title=None):
    return EventRecord(id=event_id, title=title or event_id, time=time, completed=completed)


def test_completed_events_are_excluded(reference):
    snapshot = {"2025-01-01": [_event("A", "09:00"), _event("B", "08:00", completed=True)]}
    entries = project_upcoming(snapshot, reference)
    assert [entry.event.id for entry in entries] == ["A"]


def test_sorted_by_date_then_time(reference):
    snapshot = {
        "2025-03-01": [_event("march")],
        "2025-01-02": [_event("late", "18:30"), _event("early", "07:05")],
        "2025-01-01": [_event("new-year", "12:00")],
    }
    ids = [entry.event.id for entry in project_upcoming(snapshot, reference)]
    assert ids == ["new-year", "early", "late", "march"]


def test_missing_or_malformed_time_counts_as_midnight(reference):
    snapshot = {
        "2025-01-02": [_event("morning", "08:00"), _event("untimed"), _event("garbled", "noonish")],
    }
    ids = [entry.event.id for entry in project_upcoming(snapshot, reference)]
    assert ids == ["untimed", "garbled", "morning"]


def test_past_events_are_excluded():
    snapshot = {
        "2025-01-10": [_event("before", "09:59"), _event("exact", "10:00"), _event("after", "10:01")],
        "2024-12-31": [_event("last-year", "23:59")],
    }
    entries = project_upcoming(snapshot, datetime(2025, 1, 10, 10, 0))
    assert [entry.event.id for entry in entries] == ["exact", "after"]


def test_ties_keep_insertion_order(reference):
    snapshot = {"2025-02-02": [_event("first", "10:00"), _event("second", "10:00"), _event("third", "10:00")]}
    ids = [entry.event.id for entry in project_upcoming(snapshot, reference)]
    assert ids == ["first", "second", "third"]


def test_limit(reference):
    snapshot = {"2025-05-05": [_event(f"e{n:02d}", f"{n:02d}:00") for n in range(15)]}
    assert len(project_upcoming(snapshot, reference)) == DEFAULT_UPCOMING_LIMIT
    assert [e.event.id for e in project_upcoming(snapshot, reference, limit=2)] == ["e00", "e01"]
    assert project_upcoming(snapshot, reference, limit=0) == []


def test_empty_snapshot(reference):
    assert project_upcoming({}, reference) == []


def test_stamp(reference):
    snapshot = {"2025-01-01": [_event("A", "09:00")], "2025-01-02": [_event("B")]}
    stamps = [entry.stamp for entry in project_upcoming(snapshot, reference)]
    assert stamps == ["January 1, 2025 • 09:00", "January 2, 2025"]


def test_sort_for_day_puts_completed_last():
    events = [
        _event("done-early", "07:00", completed=True),
        _event("late", "17:00"),
        _event("untimed"),
        _event("noon", "12:00"),
    ]
    assert [event.id for event in sort_for_day(events)] == ["untimed", "noon", "late", "done-early"]


def test_sort_for_day_is_stable():
    events = [_event("one", "09:00"), _event("two", "09:00")]
    assert [event.id for event in sort_for_day(events)] == ["one", "two"]


def test_sort_for_day_completed_after_incomplete_regardless_of_time():
    events = [_event("done", "10:00", completed=True), _event("open", "09:00")]
    assert [event.id for event in sort_for_day(events)] == ["open", "done"]
