"""
Result publisher - holds the latest extraction result and fans it out.

Consumers either subscribe (push) or ask for `latest` (pull). Only the most
recent VideoInfo is kept; there is no queue or history.
"""

import asyncio
import logging
from typing import Callable

import aiohttp

from .models import VideoInfo

logger = logging.getLogger(__name__)

Subscriber = Callable[[VideoInfo], None]


class ResultPublisher:
    """Last-value cache with observers."""

    def __init__(self):
        self._latest: VideoInfo | None = None
        self._subscribers: list[Subscriber] = []

    @property
    def latest(self) -> VideoInfo | None:
        """The current result, or None before the first run."""
        return self._latest

    def publish(self, info: VideoInfo) -> None:
        """Replace the held result and notify every subscriber."""
        self._latest = info

        for subscriber in list(self._subscribers):
            try:
                subscriber(info)
            except Exception as e:
                logger.warning(f"Result subscriber failed for {info.source_url}: {e}")

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """Register a subscriber; returns a callable that removes it."""
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe


class WebhookNotifier:
    """
    Forwards every published result to a host URL.

    Delivery is best effort: each POST is scheduled on the running loop and
    any failure is logged and dropped. The next result (or a pull query)
    brings the host back in sync.
    """

    def __init__(self, url: str, timeout: float = 5.0):
        self.url = url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None
        self._pending: set[asyncio.Task] = set()

    def __call__(self, info: VideoInfo) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug(f"No running loop, dropping push for {info.source_url}")
            return

        task = loop.create_task(self.send(info))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def send(self, info: VideoInfo) -> bool:
        """POST one result to the host. Returns whether it was accepted."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)

        payload = {"action": "getVideoInfo", "data": info.to_dict()}
        try:
            async with self._session.post(self.url, json=payload) as response:
                if response.status >= 400:
                    logger.debug(f"Push to {self.url} rejected with HTTP {response.status}")
                    return False
                return True
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug(f"Push to {self.url} dropped: {e}")
            return False

    async def close(self) -> None:
        for task in list(self._pending):
            task.cancel()
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
