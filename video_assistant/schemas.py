"""
Pydantic models for API request/response validation.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from .models import MirrorLink, VideoInfo


# ─────────────────────────────────────────────────────────────
# Extraction Schemas
# ─────────────────────────────────────────────────────────────

class MirrorLinkResponse(BaseModel):
    author: str
    url: str
    description: str

    @classmethod
    def from_model(cls, link: MirrorLink) -> "MirrorLinkResponse":
        return cls(author=link.author, url=link.url, description=link.description)


class VideoInfoResponse(BaseModel):
    """One extraction result."""
    url: str
    title: str
    thumbnail: str
    domain: str
    captured_at: datetime
    extractor_used: str
    mirror_links: list[MirrorLinkResponse]

    @classmethod
    def from_model(cls, info: VideoInfo) -> "VideoInfoResponse":
        return cls(
            url=info.source_url,
            title=info.title,
            thumbnail=info.thumbnail,
            domain=info.domain,
            captured_at=info.captured_at,
            extractor_used=info.extractor_used,
            mirror_links=[MirrorLinkResponse.from_model(link) for link in info.mirror_links],
        )


class VideoInfoQueryResponse(BaseModel):
    """Answer to a pull query: the current result, or an explicit "none yet"."""
    status: Literal["ready", "none"]
    video_info: VideoInfoResponse | None = None


class DocumentSnapshotRequest(BaseModel):
    """A rendered page pushed by the host."""
    url: str = Field(min_length=1)
    html: str


class DocumentSnapshotResponse(BaseModel):
    url: str
    address_changed: bool
    extracted: bool  # True when this snapshot was extracted immediately
    rerun_scheduled: bool


# ─────────────────────────────────────────────────────────────
# Settings Schemas
# ─────────────────────────────────────────────────────────────

class SettingsResponse(BaseModel):
    language: str
    server_ip: str
    server_port: int
    download_folder: str


class SettingsUpdateRequest(BaseModel):
    language: str | None = None
    server_ip: str | None = None
    server_port: int | None = Field(default=None, ge=1, le=65535)
    download_folder: str | None = None


# ─────────────────────────────────────────────────────────────
# Download Service Schemas
# ─────────────────────────────────────────────────────────────

class DownloadRequest(BaseModel):
    """Body accepted by the local download service's /download endpoint."""
    url: str
    quality: str = "best"
    format: str = "mp4"
    subfolder: str | None = None
    title: str | None = None


class DownloadSubmitRequest(BaseModel):
    """Ask to download the current video, or one of its mirror links."""
    mirror_url: str | None = None
    quality: str = "best"
    format: str = "mp4"
    subfolder: str | None = None


class DownloadServiceStatusResponse(BaseModel):
    connected: bool
    info_text: str
    ytdlp_installed: bool | None = None
    version: str | None = None
    downloads_folder: str | None = None
