"""
Database module - SQLite-backed settings store.
"""

from .connection import DatabaseConnection
from .settings_repository import DEFAULT_SETTINGS, SettingsRepository

__all__ = [
    "DatabaseConnection",
    "DEFAULT_SETTINGS",
    "SettingsRepository",
]
