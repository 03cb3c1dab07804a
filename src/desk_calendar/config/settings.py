from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from ..core.config import APP_NAME, DATA_DIR, STORAGE_KEY
from ..core.dates import MONDAY, SUNDAY

load_dotenv()

_WEEK_STARTS = {"sunday": SUNDAY, "monday": MONDAY}


@dataclass(frozen=True)
class StorageSettings:
    data_dir: Path
    file_name: str
    storage_key: str

    @property
    def file_path(self) -> Path:
        return self.data_dir / self.file_name


@dataclass(frozen=True)
class UiSettings:
    app_name: str
    week_start: int
    upcoming_limit: int
    year_span: int


@dataclass(frozen=True)
class HttpSettings:
    host: str
    port: int


@dataclass(frozen=True)
class AppSettings:
    storage: StorageSettings
    ui: UiSettings
    http: HttpSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _week_start_from_env(name: str) -> int:
    raw = (os.getenv(name) or "sunday").strip().lower()
    return _WEEK_STARTS.get(raw, SUNDAY)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    storage = StorageSettings(
        data_dir=Path(os.getenv("DESK_CALENDAR_DATA_DIR") or DATA_DIR),
        file_name=os.getenv("DESK_CALENDAR_FILE", "storage.json"),
        storage_key=os.getenv("DESK_CALENDAR_STORAGE_KEY", STORAGE_KEY),
    )

    ui = UiSettings(
        app_name=os.getenv("DESK_CALENDAR_APP_NAME", APP_NAME),
        week_start=_week_start_from_env("DESK_CALENDAR_WEEK_START"),
        upcoming_limit=_int_from_env("DESK_CALENDAR_UPCOMING_LIMIT", 10),
        year_span=_int_from_env("DESK_CALENDAR_YEAR_SPAN", 100),
    )

    http = HttpSettings(
        host=os.getenv("DESK_CALENDAR_HTTP_HOST", "127.0.0.1"),
        port=_int_from_env("DESK_CALENDAR_HTTP_PORT", 8000),
    )

    return AppSettings(storage=storage, ui=ui, http=http)
