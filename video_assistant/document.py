"""
Rendered document - a parsed HTML snapshot plus the address it was rendered at.

The host (browser content script, headless renderer, tests) pushes fresh
snapshots with update(); subscribers are told about every change so the
navigation watcher can react to in-page address changes.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentChange:
    """Notification emitted after the document content was replaced."""
    previous_url: str
    url: str

    @property
    def address_changed(self) -> bool:
        return self.previous_url != self.url


ChangeListener = Callable[[DocumentChange], None]


class Document:
    """A live, mutable view of one rendered page."""

    def __init__(self, url: str = "", html: str = ""):
        self._url = url
        self._soup = BeautifulSoup(html, "html.parser")
        self._listeners: list[ChangeListener] = []

    @property
    def url(self) -> str:
        return self._url

    @property
    def soup(self) -> BeautifulSoup:
        return self._soup

    def select_one(self, selector: str) -> Tag | None:
        return self._soup.select_one(selector)

    def select(self, selector: str) -> list[Tag]:
        return self._soup.select(selector)

    def update(self, html: str, url: str | None = None) -> DocumentChange:
        """Replace the rendered content and, optionally, the address."""
        change = DocumentChange(previous_url=self._url, url=url if url is not None else self._url)
        self._soup = BeautifulSoup(html, "html.parser")
        self._url = change.url

        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception as e:
                logger.warning(f"Document listener failed for {change.url}: {e}")
        return change

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
