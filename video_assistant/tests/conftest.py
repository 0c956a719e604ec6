"""
Pytest fixtures for backend tests.
"""

import os
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from video_assistant.config import state
from video_assistant.database import DatabaseConnection, SettingsRepository
from video_assistant.document import Document
from video_assistant.engine import ExtractionEngine
from video_assistant.i18n import Translator
from video_assistant.publisher import ResultPublisher
from video_assistant.server import app

# Short enough to keep navigation tests quick
TEST_SETTLE_DELAY = 0.05


@pytest.fixture
def temp_db_path():
    """Create a temporary database file path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        yield Path(f.name)
    # Cleanup
    if os.path.exists(f.name):
        os.unlink(f.name)


@pytest.fixture
def settings_repo(temp_db_path):
    """Settings store backed by a throwaway database."""
    return SettingsRepository(DatabaseConnection(temp_db_path))


@pytest.fixture
def client(settings_repo):
    """Create a test client with isolated settings and a fresh engine."""
    # Store original state
    original = {
        name: getattr(state, name)
        for name in ("settings", "translator", "document", "publisher", "engine", "notifier")
    }

    state.settings = settings_repo
    state.translator = Translator("en")
    state.publisher = ResultPublisher()
    state.document = Document()
    state.engine = ExtractionEngine(
        state.document,
        state.publisher,
        placeholder=state.translator.link_placeholder,
        settle_delay=TEST_SETTLE_DELAY,
    )
    state.notifier = None

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    # Restore original state
    for name, value in original.items():
        setattr(state, name, value)
