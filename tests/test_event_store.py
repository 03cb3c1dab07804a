"""Tests for the date-keyed event store."""

import logging

import orjson
import pytest

from desk_calendar.core.config import STORAGE_KEY
from desk_calendar.core.storage import JsonFileKeyValueStore, MemoryKeyValueStore
from desk_calendar.data import EventStore
from desk_calendar.domain import NotFoundError, ValidationError

KEY = "2025-01-01"


def test_load_empty_medium(store):
    assert store.load() == {}


def test_add_then_load(store):
    event_id = store.add(KEY, "Buy milk", "", "")

    snapshot = store.load()
    assert len(snapshot[KEY]) == 1
    event = snapshot[KEY][0]
    assert event.id == event_id
    assert event.title == "Buy milk"
    assert event.completed is False
    assert event.time == ""
    assert event.notes == ""
    assert event.created_at > 0


def test_add_trims_fields(store):
    store.add(KEY, "  Standup  ", " 09:30 ", "  room 4 ")
    event = store.events_for(KEY)[0]
    assert (event.title, event.time, event.notes) == ("Standup", "09:30", "room 4")


@pytest.mark.parametrize("title", ["", "   ", "\n\t"])
def test_add_requires_title(store, medium, title):
    with pytest.raises(ValidationError):
        store.add(KEY, title, "", "")
    assert medium.get(STORAGE_KEY) is None
    assert store.load() == {}


def test_add_rejects_bad_date_key(store):
    with pytest.raises(ValidationError):
        store.add("2025-02-30", "Nope")


def test_ids_are_unique_and_order_is_insertion(store):
    first = store.add(KEY, "b", "10:00")
    second = store.add(KEY, "a", "08:00")
    assert first != second
    assert [event.id for event in store.events_for(KEY)] == [first, second]


def test_persisted_wire_format(store, medium):
    store.add(KEY, "Dentist", "14:00", "bring card")
    stored = orjson.loads(medium.get(STORAGE_KEY))
    record = stored[KEY][0]
    assert set(record) == {"id", "title", "time", "notes", "completed", "createdAt"}


def test_update_replaces_text_fields_only(store):
    event_id = store.add(KEY, "Draft", "09:00", "old")
    store.toggle_completed(KEY, event_id)
    before = store.get(KEY, event_id)

    store.update(KEY, event_id, "Final", "10:15", "new")

    after = store.get(KEY, event_id)
    assert (after.title, after.time, after.notes) == ("Final", "10:15", "new")
    assert after.completed is True
    assert after.id == before.id
    assert after.created_at == before.created_at


def test_update_missing_event(store):
    store.add(KEY, "Present")
    with pytest.raises(NotFoundError):
        store.update(KEY, "missing", "Title")
    with pytest.raises(NotFoundError):
        store.update("2025-01-02", "missing", "Title")


def test_update_requires_title(store):
    event_id = store.add(KEY, "Keep me")
    with pytest.raises(ValidationError):
        store.update(KEY, event_id, "  ")
    assert store.get(KEY, event_id).title == "Keep me"


def test_toggle_completed(store):
    event_id = store.add(KEY, "Laundry")
    assert store.toggle_completed(KEY, event_id) is True
    assert store.get(KEY, event_id).completed is True
    store.toggle_completed(KEY, event_id)
    assert store.get(KEY, event_id).completed is False


def test_toggle_missing_is_silent(store, medium):
    assert store.toggle_completed(KEY, "missing") is False
    assert medium.get(STORAGE_KEY) is None


def test_delete_last_event_removes_key(store):
    event_id = store.add(KEY, "Only one")
    assert store.delete(KEY, event_id) is True
    assert KEY not in store.load()


def test_delete_keeps_other_events(store):
    keep = store.add(KEY, "keep")
    drop = store.add(KEY, "drop")
    store.delete(KEY, drop)
    assert [event.id for event in store.load()[KEY]] == [keep]


def test_delete_missing_is_silent(store):
    store.add(KEY, "stay")
    assert store.delete(KEY, "missing") is False
    assert store.delete("2030-01-01", "missing") is False
    assert len(store.load()[KEY]) == 1


@pytest.mark.parametrize("raw", ["{not json", "[1, 2, 3]", "42", '"text"'])
def test_corrupt_data_loads_empty(raw, caplog):
    store = EventStore(MemoryKeyValueStore({STORAGE_KEY: raw}))
    with caplog.at_level(logging.WARNING):
        assert store.load() == {}
    assert "unreadable" in caplog.text


def test_corrupt_data_is_replaced_on_next_write():
    medium = MemoryKeyValueStore({STORAGE_KEY: "{oops"})
    store = EventStore(medium)
    store.add(KEY, "Fresh start")
    assert list(orjson.loads(medium.get(STORAGE_KEY))) == [KEY]


def test_malformed_records_are_skipped():
    raw = orjson.dumps(
        {
            KEY: [{"id": "a", "title": "ok", "completed": True}, {"title": "no id"}, "junk"],
            "2025-01-02": [],
            "2025-01-03": [{"title": "also no id"}],
            "bogus": [{"id": "b", "title": "wrong key"}],
        }
    ).decode()
    snapshot = EventStore(MemoryKeyValueStore({STORAGE_KEY: raw})).load()

    assert list(snapshot) == [KEY]
    assert snapshot[KEY][0].id == "a"
    assert snapshot[KEY][0].completed is True
    assert snapshot[KEY][0].time == ""


def test_custom_storage_key(medium):
    store = EventStore(medium, storage_key="other_slot")
    store.add(KEY, "elsewhere")
    assert medium.get("other_slot") is not None
    assert medium.get(STORAGE_KEY) is None


def test_file_medium_survives_restart(tmp_path):
    path = tmp_path / "nested" / "storage.json"
    first = EventStore(JsonFileKeyValueStore(path))
    event_id = first.add(KEY, "Persisted", "07:45")

    second = EventStore(JsonFileKeyValueStore(path))
    event = second.get(KEY, event_id)
    assert event is not None
    assert event.title == "Persisted"
    assert event.time == "07:45"


def test_file_medium_keeps_other_slots(tmp_path):
    medium = JsonFileKeyValueStore(tmp_path / "storage.json")
    medium.set("theme", "dark")
    EventStore(medium).add(KEY, "Hello")
    assert medium.get("theme") == "dark"


def test_file_medium_unreadable_file(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("garbage", encoding="utf-8")
    medium = JsonFileKeyValueStore(path)
    assert medium.get(STORAGE_KEY) is None
    assert EventStore(medium).load() == {}


@pytest.mark.parametrize("raw,expected", [("9:30", "09:30"), ("09:05", "09:05"), (" 7:00 ", "07:00"), ("23:59", "23:59"), ("", "")])
def test_add_normalizes_time(store, raw, expected):
    event_id = store.add(KEY, "Timed", raw)
    assert store.get(KEY, event_id).time == expected


@pytest.mark.parametrize("raw", ["25:99", "24:00", "12:60", "9", "9:5", "noon", "12:30pm"])
def test_add_rejects_bad_time(store, medium, raw):
    with pytest.raises(ValidationError):
        store.add(KEY, "Bad time", raw)
    assert medium.get(STORAGE_KEY) is None


def test_update_normalizes_and_rejects_time(store):
    event_id = store.add(KEY, "Meeting", "10:00")
    store.update(KEY, event_id, "Meeting", "8:15")
    assert store.get(KEY, event_id).time == "08:15"
    with pytest.raises(ValidationError):
        store.update(KEY, event_id, "Meeting", "31:00")
    assert store.get(KEY, event_id).time == "08:15"


def test_single_digit_hours_sort_before_later_times(store):
    from desk_calendar.services import sort_for_day

    store.add(KEY, "ten", "10:00")
    store.add(KEY, "nine-thirty", "9:30")
    assert [event.title for event in sort_for_day(store.events_for(KEY))] == ["nine-thirty", "ten"]


def test_toggle_keeps_records_the_loader_cannot_read():
    stored = {
        KEY: [
            {"id": "a", "title": "ok"},
            {"id": "b", "title": "legacy", "createdAt": "2025-01-01", "colour": "red"},
            {"title": "no id at all"},
        ],
        "someday": [{"id": "c", "title": "odd key"}],
        "2025-01-09": "not a list",
    }
    medium = MemoryKeyValueStore({STORAGE_KEY: orjson.dumps(stored).decode()})
    store = EventStore(medium)

    assert [event.id for event in store.load()[KEY]] == ["a", "b"]
    assert store.toggle_completed(KEY, "a") is True

    written = orjson.loads(medium.get(STORAGE_KEY))
    assert [entry.get("id") for entry in written[KEY]] == ["a", "b", None]
    legacy = written[KEY][1]
    assert legacy["createdAt"] == "2025-01-01"
    assert legacy["colour"] == "red"
    assert written["someday"] == [{"id": "c", "title": "odd key"}]
    assert written["2025-01-09"] == "not a list"


def test_delete_keeps_unreadable_entries_of_emptied_day():
    stored = {KEY: [{"id": "a", "title": "gone soon"}, {"title": "no id"}]}
    medium = MemoryKeyValueStore({STORAGE_KEY: orjson.dumps(stored).decode()})
    store = EventStore(medium)

    assert store.delete(KEY, "a") is True

    assert orjson.loads(medium.get(STORAGE_KEY)) == {KEY: [{"title": "no id"}]}
    assert store.load() == {}


def test_odd_created_at_reads_as_zero():
    stored = {KEY: [{"id": "b", "title": "legacy", "createdAt": "yesterday"}]}
    event = EventStore(MemoryKeyValueStore({STORAGE_KEY: orjson.dumps(stored).decode()})).get(KEY, "b")
    assert event.created_at == 0
    assert event.to_record()["createdAt"] == "yesterday"
