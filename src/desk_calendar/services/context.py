from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..config import AppSettings, get_settings
from ..core.storage import JsonFileKeyValueStore, KeyValueStore
from ..data import EventStore


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root shared by services: settings plus the event store."""

    settings: AppSettings = field(default_factory=get_settings)
    medium: Optional[KeyValueStore] = None
    store: EventStore = field(init=False)

    def __post_init__(self) -> None:
        if self.medium is None:
            self.medium = JsonFileKeyValueStore(self.settings.storage.file_path)
        self.store = EventStore(self.medium, self.settings.storage.storage_key)
