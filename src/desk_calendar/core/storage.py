"""String-keyed, string-valued persistence media.

The event store only needs ``get``/``set`` over a single named slot. The file
medium keeps every slot in one JSON object, the way browser local storage keeps
its keys, and replaces the file atomically on each write.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from threading import RLock
from typing import Dict, Optional, Protocol

import orjson

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryKeyValueStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileKeyValueStore:
    def __init__(self, path: Path) -> None:
        self.path = path
        self._lock = RLock()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_bytes()
            decoded = orjson.loads(raw) if raw.strip() else {}
        except (OSError, orjson.JSONDecodeError) as exc:
            logger.warning("Storage file %s is unreadable, treating it as empty: %s", self.path, exc)
            return {}
        if not isinstance(decoded, dict):
            logger.warning("Storage file %s does not hold an object, treating it as empty", self.path)
            return {}
        return {key: value for key, value in decoded.items() if isinstance(value, str)}

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            values = self._read_all()
            values[key] = value
            self._write_all(values)

    def _write_all(self, values: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = orjson.dumps(values, option=orjson.OPT_INDENT_2)
        fd, tmp_name = tempfile.mkstemp(prefix=".storage-", suffix=".json", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload + b"\n")
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.path)
        finally:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)


__all__ = ["JsonFileKeyValueStore", "KeyValueStore", "MemoryKeyValueStore"]
