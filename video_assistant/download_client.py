"""
Download service client - talks to the local yt-dlp download service.

The service is an external process; this client only checks that it is up
and hands it work:
- GET  /status       version and downloads folder
- GET  /check-ytdlp  whether yt-dlp is installed
- POST /download     queue a URL for download
"""

import asyncio
import logging
import re
from typing import Callable

import aiohttp

from .exceptions import DownloadServiceError
from .models import VideoInfo
from .schemas import DownloadRequest

logger = logging.getLogger(__name__)


def build_download_request(
    info: VideoInfo,
    mirror_url: str | None = None,
    quality: str = "best",
    format: str = "mp4",
    subfolder: str | None = None,
) -> DownloadRequest:
    """Request body for the current video, or for one of its mirror links."""
    return DownloadRequest(
        url=mirror_url or info.source_url,
        quality=quality,
        format=format,
        subfolder=subfolder or None,
        title=info.title,
    )


def describe_status(status: dict | None, t: Callable[[str], str] = lambda key: key) -> str:
    """
    Short status line for the service, e.g. "Connected | v1.4.0 | Downloads".
    """
    text = t("connected")
    if not status:
        return text

    if version := status.get("version"):
        text += f" | v{version.removeprefix('v')}"

    if folder := status.get("downloads_folder"):
        # Only the last path component is interesting
        name = re.split(r"[\\/]", folder.rstrip("\\/"))[-1] or "Downloads"
        text += f" | {name}"

    return text


class DownloadServiceClient:
    """Async client for the local download service."""

    def __init__(self, base_url: str, timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    async def _request(self, method: str, path: str, **kwargs) -> dict:
        url = f"{self.base_url}{path}"
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.request(method, url, **kwargs) as response:
                    try:
                        data = await response.json(content_type=None)
                    except ValueError:
                        data = None
                    if response.status >= 400:
                        detail = data.get("error") if isinstance(data, dict) else None
                        raise DownloadServiceError(
                            detail or f"{method} {path} failed with HTTP {response.status}",
                            status=response.status,
                        )
                    return data if isinstance(data, dict) else {}
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Download service unreachable at {url}: {e}")
            raise DownloadServiceError(f"Download service unreachable: {e}") from e

    async def get_status(self) -> dict:
        return await self._request("GET", "/status")

    async def check_ytdlp(self) -> bool:
        data = await self._request("GET", "/check-ytdlp")
        return bool(data.get("installed"))

    async def submit_download(self, request: DownloadRequest) -> dict:
        """Queue a download. Returns the service's response body."""
        logger.info(f"Submitting download: {request.url} ({request.quality}, {request.format})")
        data = await self._request("POST", "/download", json=request.model_dump(exclude_none=True))
        if data.get("success") is False:
            raise DownloadServiceError(data.get("error") or "Download rejected by service")
        return data
