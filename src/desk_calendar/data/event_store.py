from __future__ import annotations

import logging
import re
from threading import RLock
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

import orjson

from ..core.config import STORAGE_KEY
from ..core.storage import KeyValueStore
from ..domain import (
    EventRecord,
    NotFoundError,
    PersistenceCorruptError,
    Snapshot,
    ValidationError,
    parse_date_key,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Stored entries that could not be decoded, by their original key.
Leftovers = Dict[str, Any]

_TIME_INPUT = re.compile(r"^(\d{1,2}):(\d{2})$")


def split_snapshot(raw: Optional[str]) -> Tuple[Snapshot, Leftovers]:
    """Decode a persisted snapshot and set aside what cannot be decoded.

    The leftovers are not part of the snapshot but are written back by
    :func:`encode_snapshot`, so a write never loses stored data the reader
    did not understand.
    """

    if not raw:
        return {}, {}
    try:
        decoded = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise PersistenceCorruptError(f"Stored events are not valid JSON: {exc}") from exc
    if not isinstance(decoded, dict):
        raise PersistenceCorruptError(f"Stored events must be an object, got {type(decoded).__name__}")

    snapshot: Snapshot = {}
    leftovers: Leftovers = {}
    for key, entries in decoded.items():
        if not isinstance(entries, list):
            logger.warning("Keeping unreadable value under %r aside: expected a list of events", key)
            leftovers[key] = entries
            continue
        try:
            parse_date_key(key)
        except ValidationError:
            logger.warning("Keeping events stored under invalid date key %r aside", key)
            leftovers[key] = entries
            continue
        records: List[EventRecord] = []
        for entry in entries:
            try:
                records.append(EventRecord.from_record(entry))
            except ValueError as exc:
                logger.warning("Keeping malformed event on %s aside: %s", key, exc)
                leftovers.setdefault(key, []).append(entry)
        if records:
            snapshot[key] = records
    return snapshot, leftovers


def decode_snapshot(raw: Optional[str]) -> Snapshot:
    """Decode a persisted snapshot, skipping malformed records and empty dates."""

    return split_snapshot(raw)[0]


def encode_snapshot(snapshot: Snapshot, leftovers: Optional[Leftovers] = None) -> str:
    payload: Dict[str, Any] = {
        key: [event.to_record() for event in events] for key, events in snapshot.items() if events
    }
    for key, kept in (leftovers or {}).items():
        current = payload.get(key)
        if isinstance(current, list) and isinstance(kept, list):
            payload[key] = current + kept
        else:
            payload[key] = kept
    return orjson.dumps(payload).decode("utf-8")


def _require_title(title: str) -> str:
    cleaned = (title or "").strip()
    if not cleaned:
        raise ValidationError("Please enter a title.")
    return cleaned


def _normalize_time(value: str) -> str:
    """Return ``value`` as zero-padded ``HH:MM``, or "" for no time."""

    cleaned = (value or "").strip()
    if not cleaned:
        return ""
    match = _TIME_INPUT.match(cleaned)
    if not match:
        raise ValidationError(f"Time must look like HH:MM, got {cleaned!r}.")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValidationError(f"{cleaned} is not a time of day.")
    return f"{hour:02d}:{minute:02d}"


def _find(events: List[EventRecord], event_id: str) -> Optional[EventRecord]:
    for event in events:
        if event.id == event_id:
            return event
    return None


class EventStore:
    """Date-keyed event persistence over a single key-value slot.

    Every operation re-reads the whole snapshot from the medium, applies its
    change and writes the whole snapshot back while holding the store lock, so
    readers never observe a half-applied mutation.
    """

    def __init__(self, medium: KeyValueStore, storage_key: str = STORAGE_KEY) -> None:
        self.medium = medium
        self.storage_key = storage_key
        self._lock = RLock()

    def _read(self) -> Tuple[Snapshot, Leftovers]:
        raw = self.medium.get(self.storage_key)
        try:
            return split_snapshot(raw)
        except PersistenceCorruptError as exc:
            logger.warning("Discarding unreadable event data under %r: %s", self.storage_key, exc)
            return {}, {}

    def load(self) -> Snapshot:
        with self._lock:
            return self._read()[0]

    def save(self, snapshot: Snapshot, leftovers: Optional[Leftovers] = None) -> None:
        with self._lock:
            self.medium.set(self.storage_key, encode_snapshot(snapshot, leftovers))

    def mutate(self, callback: Callable[[Snapshot], T]) -> T:
        with self._lock:
            snapshot, leftovers = self._read()
            result = callback(snapshot)
            self.save(snapshot, leftovers)
            return result

    # ------------------------------------------------------------------ reads

    def events_for(self, date_key: str) -> List[EventRecord]:
        return list(self.load().get(date_key, []))

    def get(self, date_key: str, event_id: str) -> Optional[EventRecord]:
        return _find(self.load().get(date_key, []), event_id)

    # ------------------------------------------------------------------ writes

    def add(self, date_key: str, title: str, time: str = "", notes: str = "") -> str:
        cleaned_title = _require_title(title)
        cleaned_time = _normalize_time(time)
        parse_date_key(date_key)
        event = EventRecord.new(cleaned_title, cleaned_time, notes or "")

        def _append(snapshot: Snapshot) -> str:
            snapshot.setdefault(date_key, []).append(event)
            return event.id

        event_id = self.mutate(_append)
        logger.debug("Added event %s on %s", event_id, date_key)
        return event_id

    def update(self, date_key: str, event_id: str, title: str, time: str = "", notes: str = "") -> None:
        cleaned_title = _require_title(title)
        cleaned_time = _normalize_time(time)

        def _replace(snapshot: Snapshot) -> None:
            event = _find(snapshot.get(date_key, []), event_id)
            if event is None:
                raise NotFoundError(date_key, event_id)
            event.title = cleaned_title
            event.time = cleaned_time
            event.notes = (notes or "").strip()

        self.mutate(_replace)
        logger.debug("Updated event %s on %s", event_id, date_key)

    def toggle_completed(self, date_key: str, event_id: str) -> bool:
        with self._lock:
            snapshot, leftovers = self._read()
            event = _find(snapshot.get(date_key, []), event_id)
            if event is None:
                logger.debug("Toggle ignored, event %s not found on %s", event_id, date_key)
                return False
            event.completed = not event.completed
            self.save(snapshot, leftovers)
        logger.debug("Event %s on %s completed=%s", event_id, date_key, event.completed)
        return True

    def delete(self, date_key: str, event_id: str) -> bool:
        with self._lock:
            snapshot, leftovers = self._read()
            events = snapshot.get(date_key, [])
            remaining = [event for event in events if event.id != event_id]
            if len(remaining) == len(events):
                logger.debug("Delete ignored, event %s not found on %s", event_id, date_key)
                return False
            if remaining:
                snapshot[date_key] = remaining
            else:
                snapshot.pop(date_key, None)
            self.save(snapshot, leftovers)
        logger.debug("Deleted event %s on %s", event_id, date_key)
        return True


__all__ = ["EventStore", "decode_snapshot", "encode_snapshot", "split_snapshot"]
