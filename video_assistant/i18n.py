"""
Translation catalogs - browser-extension style messages.json files.

Each locale file maps a key to {"message": ...}. Missing locales fall back to
English, and missing keys fall back to the key itself.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).parent / "locales"
FALLBACK_LANGUAGE = "en"


def load_catalog(language: str, locales_dir: Path = LOCALES_DIR) -> dict[str, dict]:
    """Load one catalog; an unknown or broken locale yields an empty dict."""
    path = locales_dir / f"{language}.json"
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning(f"No translations for language '{language}'")
        return {}
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Failed to load translations from {path}: {e}")
        return {}


class Translator:
    """Looks up messages for one language, English underneath."""

    def __init__(self, language: str = FALLBACK_LANGUAGE, locales_dir: Path = LOCALES_DIR):
        self.locales_dir = locales_dir
        self.language = language
        self.messages: dict[str, dict] = {}
        self.set_language(language)

    def set_language(self, language: str) -> None:
        messages = load_catalog(FALLBACK_LANGUAGE, self.locales_dir)
        if language != FALLBACK_LANGUAGE:
            messages.update(load_catalog(language, self.locales_dir))

        self.language = language
        self.messages = messages

    def t(self, key: str) -> str:
        entry = self.messages.get(key)
        if isinstance(entry, dict) and entry.get("message"):
            return entry["message"]
        return key

    def as_dict(self) -> dict[str, str]:
        """Flattened key -> message mapping."""
        return {key: self.t(key) for key in self.messages}

    @property
    def link_placeholder(self) -> str:
        """Description used for mirror links that carry none."""
        return self.t("episodeLink")
