"""
Download routes: hand the current video or a mirror to the download service.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from ..config import config, state, get_publisher, get_settings_repo
from ..database import SettingsRepository
from ..download_client import DownloadServiceClient, build_download_request, describe_status
from ..exceptions import DownloadServiceError, require_video_info
from ..publisher import ResultPublisher
from ..schemas import DownloadServiceStatusResponse, DownloadSubmitRequest

router = APIRouter(tags=["download"])


def get_download_client(
    settings: Annotated[SettingsRepository, Depends(get_settings_repo)]
) -> DownloadServiceClient:
    """Client for the service address currently configured in settings."""
    return DownloadServiceClient(settings.server_base_url(), timeout=config.DOWNLOAD_SERVICE_TIMEOUT)


def _t(key: str) -> str:
    return state.translator.t(key) if state.translator else key


@router.get("/download-service/status")
async def download_service_status(
    client: Annotated[DownloadServiceClient, Depends(get_download_client)]
) -> DownloadServiceStatusResponse:
    """Whether the download service is up and has yt-dlp available."""
    try:
        status = await client.get_status()
    except DownloadServiceError:
        return DownloadServiceStatusResponse(connected=False, info_text=_t("disconnected"))

    try:
        ytdlp_installed = await client.check_ytdlp()
    except DownloadServiceError:
        ytdlp_installed = None

    return DownloadServiceStatusResponse(
        connected=True,
        info_text=describe_status(status, _t),
        ytdlp_installed=ytdlp_installed,
        version=status.get("version"),
        downloads_folder=status.get("downloads_folder"),
    )


@router.post("/download")
async def submit_download(
    request: DownloadSubmitRequest,
    publisher: Annotated[ResultPublisher, Depends(get_publisher)],
    settings: Annotated[SettingsRepository, Depends(get_settings_repo)],
    client: Annotated[DownloadServiceClient, Depends(get_download_client)],
) -> dict:
    """Queue the current video, or one of its mirror links, for download."""
    info = require_video_info(publisher.latest)

    if request.mirror_url and request.mirror_url not in {link.url for link in info.mirror_links}:
        raise HTTPException(status_code=400, detail="Not a mirror link of the current video")

    body = build_download_request(
        info,
        mirror_url=request.mirror_url,
        quality=request.quality,
        format=request.format,
        subfolder=request.subfolder or settings.get("download_folder"),
    )
    try:
        return await client.submit_download(body)
    except DownloadServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
