"""Core configuration, calendar arithmetic, and persistence media."""

from .config import APP_NAME, DATA_DIR, STORAGE_KEY
from .dates import (
    MONDAY,
    MONTH_NAMES,
    SUNDAY,
    days_in_month,
    first_weekday,
    format_long,
    is_leap_year,
    is_today,
    shift_month,
    weekday,
    weekday_headers,
    year_range,
)
from .storage import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore

__all__ = [
    "APP_NAME",
    "DATA_DIR",
    "STORAGE_KEY",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "MONDAY",
    "MONTH_NAMES",
    "SUNDAY",
    "days_in_month",
    "first_weekday",
    "format_long",
    "is_leap_year",
    "is_today",
    "shift_month",
    "weekday",
    "weekday_headers",
    "year_range",
]
