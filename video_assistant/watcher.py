"""
Navigation watcher - re-run extraction after in-page navigation.

Single-page applications change the address without reloading the document.
The watcher listens to document changes, and when the address differs from
the one it last saw it waits a settle delay before calling back, so the new
view has finished rendering.

Debounce uses reset-timer semantics: every new navigation cancels the pending
callback and starts the delay over, so a burst of navigations results in a
single run against the final state.
"""

import asyncio
import logging
from typing import Callable

from .document import Document, DocumentChange

logger = logging.getLogger(__name__)

DEFAULT_SETTLE_DELAY = 1.0  # seconds


class NavigationWatcher:
    """Debounced address-change trigger for one document."""

    def __init__(
        self,
        document: Document,
        on_navigate: Callable[[], object],
        settle_delay: float = DEFAULT_SETTLE_DELAY,
    ):
        self.document = document
        self.on_navigate = on_navigate
        self.settle_delay = settle_delay

        self._last_url = document.url
        self._timer: asyncio.TimerHandle | None = None
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def running(self) -> bool:
        return self._unsubscribe is not None

    @property
    def pending(self) -> bool:
        """True while a debounced run is scheduled but hasn't fired yet."""
        return self._timer is not None

    def start(self) -> None:
        if self.running:
            return
        self._last_url = self.document.url
        self._unsubscribe = self.document.subscribe(self._on_change)
        logger.debug(f"Watching {self._last_url or '<blank>'} for navigation")

    def stop(self) -> None:
        self.cancel()
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    def cancel(self) -> None:
        """Drop a scheduled run, if any."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_change(self, change: DocumentChange) -> None:
        if change.url == self._last_url:
            return
        logger.info(f"Navigation detected: {self._last_url} -> {change.url}")
        self._last_url = change.url
        self._schedule()

    def _schedule(self) -> None:
        self.cancel()
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Nothing to defer onto; extract right away instead of never
            logger.debug("No running event loop, re-extracting without settle delay")
            self._fire()
            return
        self._timer = loop.call_later(self.settle_delay, self._fire)

    def _fire(self) -> None:
        self._timer = None
        try:
            self.on_navigate()
        except Exception as e:
            logger.error(f"Re-extraction after navigation to {self._last_url} failed: {e}")
