"""
Settings repository - language, download service address and download folder.
"""

from datetime import datetime

from .connection import DatabaseConnection

DEFAULT_SETTINGS: dict[str, str] = {
    "language": "en",
    "server_ip": "127.0.0.1",
    "server_port": "8080",
    "download_folder": "Downloads",
}


class SettingsRepository:
    """Key-value store for user settings, with defaults for unset keys."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get a setting value."""
        with self._db.conn() as conn:
            row = conn.execute(
                "SELECT value FROM settings WHERE key = ?", (key,)
            ).fetchone()
            if row:
                return row["value"]
            return default if default is not None else DEFAULT_SETTINGS.get(key)

    def set(self, key: str, value: str):
        """Set a setting value."""
        with self._db.conn() as conn:
            conn.execute(
                """INSERT INTO settings (key, value, updated_at)
                   VALUES (?, ?, ?)
                   ON CONFLICT(key) DO UPDATE SET
                   value = excluded.value, updated_at = excluded.updated_at""",
                (key, value, datetime.now().isoformat())
            )

    def get_all(self) -> dict[str, str]:
        """Get all settings, defaults included."""
        with self._db.conn() as conn:
            rows = conn.execute("SELECT key, value FROM settings").fetchall()
        return {**DEFAULT_SETTINGS, **{row["key"]: row["value"] for row in rows}}

    def server_base_url(self) -> str:
        """Base URL of the local download service."""
        return f"http://{self.get('server_ip')}:{self.get('server_port')}"
