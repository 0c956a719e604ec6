"""
Configuration and application state management.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from fastapi import HTTPException

if TYPE_CHECKING:
    from .database import SettingsRepository
    from .document import Document
    from .engine import ExtractionEngine
    from .i18n import Translator
    from .publisher import ResultPublisher, WebhookNotifier

# Load environment variables
load_dotenv()


class Config:
    """Application configuration from environment."""
    DB_PATH: Path = Path(os.getenv("DB_PATH", "./data/settings.db"))
    PORT: int = int(os.getenv("PORT", "5006"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Wait after an in-page navigation before re-extracting
    SETTLE_DELAY_MS: int = int(os.getenv("SETTLE_DELAY_MS", "1000"))
    TITLE_MAX_LENGTH: int = int(os.getenv("TITLE_MAX_LENGTH", "100"))

    # Host endpoint that receives every new result; empty disables pushing
    PUSH_URL: str = os.getenv("PUSH_URL", "")

    DOWNLOAD_SERVICE_TIMEOUT: int = int(os.getenv("DOWNLOAD_SERVICE_TIMEOUT", "10"))  # seconds
    DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "en")

    @classmethod
    def settle_delay_seconds(cls) -> float:
        return cls.SETTLE_DELAY_MS / 1000


config = Config()


class AppState:
    """Shared application state."""
    settings: "SettingsRepository | None" = None
    translator: "Translator | None" = None
    document: "Document | None" = None
    publisher: "ResultPublisher | None" = None
    engine: "ExtractionEngine | None" = None
    notifier: "WebhookNotifier | None" = None


state = AppState()


def get_settings_repo() -> "SettingsRepository":
    """Dependency to get the settings store."""
    if not state.settings:
        raise HTTPException(status_code=500, detail="Settings store not initialized")
    return state.settings


def get_publisher() -> "ResultPublisher":
    """Dependency to get the result publisher."""
    if not state.publisher:
        raise HTTPException(status_code=500, detail="Result publisher not initialized")
    return state.publisher
