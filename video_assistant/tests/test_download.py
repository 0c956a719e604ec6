"""
Tests for the download service client and download routes.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from video_assistant.download_client import (
    DownloadServiceClient,
    build_download_request,
    describe_status,
)
from video_assistant.exceptions import DownloadServiceError
from video_assistant.models import MirrorLink, VideoInfo
from video_assistant.schemas import DownloadRequest

INFO = VideoInfo(
    source_url="https://ogladajanime.pl/anime/naruto/odcinek-1",
    title="Naruto odcinek 1",
    thumbnail="",
    domain="ogladajanime.pl",
    mirror_links=(MirrorLink(url="https://voe.sx/e/1", author="Bob", description="Voe"),),
)


def patched_session(status: int = 200, body: dict | None = None, error: Exception | None = None):
    """Patch aiohttp.ClientSession so requests return a canned response."""
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=body)

    request_context = MagicMock()
    request_context.__aenter__ = AsyncMock(return_value=response)
    request_context.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    if error:
        session.request = MagicMock(side_effect=error)
    else:
        session.request = MagicMock(return_value=request_context)

    session_context = MagicMock()
    session_context.__aenter__ = AsyncMock(return_value=session)
    session_context.__aexit__ = AsyncMock(return_value=False)

    return patch("video_assistant.download_client.aiohttp.ClientSession", return_value=session_context), session


class TestHelpers:
    """Tests for request building and status text."""

    def test_request_for_current_video(self):
        request = build_download_request(INFO)
        assert request.url == INFO.source_url
        assert request.title == "Naruto odcinek 1"
        assert request.quality == "best"
        assert request.format == "mp4"

    def test_request_for_mirror(self):
        request = build_download_request(INFO, mirror_url="https://voe.sx/e/1", quality="bestaudio", format="mp3")
        assert request.url == "https://voe.sx/e/1"
        assert request.format == "mp3"

    def test_status_text_without_details(self):
        assert describe_status({}) == "connected"
        assert describe_status(None, lambda key: "Connected") == "Connected"

    def test_status_text_with_version_and_folder(self):
        text = describe_status(
            {"version": "v1.4.0", "downloads_folder": "C:\\Users\\me\\Videos\\"},
            lambda key: "Connected",
        )
        assert text == "Connected | v1.4.0 | Videos"

    def test_status_text_unix_folder(self):
        text = describe_status({"version": "2.0", "downloads_folder": "/home/me/Downloads"}, lambda key: "OK")
        assert text == "OK | v2.0 | Downloads"


class TestDownloadServiceClient:
    """Tests for DownloadServiceClient."""

    @pytest.mark.asyncio
    async def test_get_status(self):
        patcher, session = patched_session(body={"status": "running", "version": "1.0"})
        with patcher:
            status = await DownloadServiceClient("http://127.0.0.1:8080/").get_status()

        assert status["version"] == "1.0"
        session.request.assert_called_once_with("GET", "http://127.0.0.1:8080/status")

    @pytest.mark.asyncio
    async def test_check_ytdlp(self):
        patcher, _ = patched_session(body={"installed": True, "version": "2024.01.01"})
        with patcher:
            assert await DownloadServiceClient("http://127.0.0.1:8080").check_ytdlp() is True

    @pytest.mark.asyncio
    async def test_submit_download_sends_body(self):
        patcher, session = patched_session(body={"success": True, "id": 3})
        with patcher:
            result = await DownloadServiceClient("http://127.0.0.1:8080").submit_download(
                DownloadRequest(url="https://voe.sx/e/1", title="Naruto")
            )

        assert result["id"] == 3
        _, kwargs = session.request.call_args
        assert kwargs["json"] == {"url": "https://voe.sx/e/1", "quality": "best", "format": "mp4", "title": "Naruto"}

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        patcher, _ = patched_session(status=400, body={"success": False, "error": "URL jest wymagany"})
        with patcher:
            with pytest.raises(DownloadServiceError) as exc_info:
                await DownloadServiceClient("http://127.0.0.1:8080").submit_download(DownloadRequest(url="x"))

        assert exc_info.value.status == 400
        assert "URL jest wymagany" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_unreachable_service_raises(self):
        patcher, _ = patched_session(error=aiohttp.ClientConnectionError("refused"))
        with patcher:
            with pytest.raises(DownloadServiceError):
                await DownloadServiceClient("http://127.0.0.1:8080").get_status()


class TestDownloadRoutes:
    """Tests for /download and /download-service/status."""

    def test_service_status_connected(self, client):
        with patch.object(DownloadServiceClient, "get_status", AsyncMock(return_value={"version": "1.2"})), \
             patch.object(DownloadServiceClient, "check_ytdlp", AsyncMock(return_value=True)):
            response = client.get("/download-service/status")

        data = response.json()
        assert data["connected"] is True
        assert data["ytdlp_installed"] is True
        assert data["info_text"] == "Connected | v1.2"

    def test_service_status_disconnected(self, client):
        with patch.object(DownloadServiceClient, "get_status", AsyncMock(side_effect=DownloadServiceError("down"))):
            response = client.get("/download-service/status")

        data = response.json()
        assert data["connected"] is False
        assert data["info_text"] == "Disconnected"

    def test_download_requires_result(self, client):
        response = client.post("/download", json={})
        assert response.status_code == 409

    def test_download_current_video(self, client):
        client.post("/document", json={"url": "https://example.com/v/1", "html": "<h1>Cat Video</h1>"})

        submit = AsyncMock(return_value={"success": True, "id": 1})
        with patch.object(DownloadServiceClient, "submit_download", submit):
            response = client.post("/download", json={"quality": "best[height<=720]"})

        assert response.status_code == 200
        body = submit.call_args.args[0]
        assert body.url == "https://example.com/v/1"
        assert body.title == "Cat Video"
        assert body.quality == "best[height<=720]"
        assert body.subfolder == "Downloads"

    def test_download_uses_stored_folder(self, client):
        client.put("/settings", json={"download_folder": "Anime"})
        client.post("/document", json={"url": "https://example.com/v/1", "html": "<h1>Cat Video</h1>"})

        submit = AsyncMock(return_value={"success": True})
        with patch.object(DownloadServiceClient, "submit_download", submit):
            client.post("/download", json={})
            client.post("/download", json={"subfolder": "Movies"})

        assert [call.args[0].subfolder for call in submit.call_args_list] == ["Anime", "Movies"]

    def test_download_unknown_mirror_rejected(self, client):
        client.post("/document", json={"url": "https://example.com/v/1", "html": "<h1>Cat Video</h1>"})
        response = client.post("/download", json={"mirror_url": "https://evil.example/x"})
        assert response.status_code == 400

    def test_download_service_failure(self, client):
        client.post("/document", json={"url": "https://example.com/v/1", "html": "<h1>Cat Video</h1>"})
        with patch.object(DownloadServiceClient, "submit_download", AsyncMock(side_effect=DownloadServiceError("down"))):
            response = client.post("/download", json={})
        assert response.status_code == 502
