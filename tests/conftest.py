"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date, datetime
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from desk_calendar.config import AppSettings, HttpSettings, StorageSettings, UiSettings  # noqa: E402
from desk_calendar.core.config import STORAGE_KEY  # noqa: E402
from desk_calendar.core.dates import SUNDAY  # noqa: E402
from desk_calendar.core.storage import MemoryKeyValueStore  # noqa: E402
from desk_calendar.data import EventStore  # noqa: E402
from desk_calendar.services import CalendarService, ServiceContext  # noqa: E402


@pytest.fixture
def medium():
    """Empty in-memory key-value medium."""
    return MemoryKeyValueStore()


@pytest.fixture
def store(medium):
    """Event store over the in-memory medium."""
    return EventStore(medium)


@pytest.fixture
def today():
    """A fixed 'today' so grid and state tests do not depend on the clock."""
    return date(2025, 1, 15)


@pytest.fixture
def reference():
    """Reference instant for upcoming projections."""
    return datetime(2025, 1, 1, 0, 0)


@pytest.fixture
def settings(tmp_path):
    """Settings independent of the developer's environment and .env file."""
    return AppSettings(
        storage=StorageSettings(data_dir=tmp_path, file_name="storage.json", storage_key=STORAGE_KEY),
        ui=UiSettings(app_name="Desk Calendar", week_start=SUNDAY, upcoming_limit=10, year_span=100),
        http=HttpSettings(host="127.0.0.1", port=8000),
    )


@pytest.fixture
def context(settings, medium):
    """Service context wired to the in-memory medium."""
    return ServiceContext(settings=settings, medium=medium)


@pytest.fixture
def service(context):
    return CalendarService(context)


@pytest.fixture
def api(context):
    """Route the registered API functions to the in-memory store for one test."""
    from desk_calendar.api import api_state

    previous = api_state.context
    api_state.use(context)
    yield api_state
    api_state.use(previous)
