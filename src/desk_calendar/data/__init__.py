"""Data access layer."""

from __future__ import annotations

from .event_store import EventStore, decode_snapshot, encode_snapshot, split_snapshot

__all__ = ["EventStore", "decode_snapshot", "encode_snapshot", "split_snapshot"]
