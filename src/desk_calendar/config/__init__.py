"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, HttpSettings, StorageSettings, UiSettings, get_settings
from .theme import AppPalette

__all__ = ["AppPalette", "AppSettings", "HttpSettings", "StorageSettings", "UiSettings", "get_settings"]
