"""
Error types and HTTP exception helpers for common error patterns.
"""

from typing import TypeVar

from fastapi import HTTPException

T = TypeVar("T")


class DownloadServiceError(Exception):
    """The local download service could not be reached or refused a request."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


def require_resource(resource: T | None, detail: str = "Resource not found", status_code: int = 404) -> T:
    """
    Raise if resource is None, otherwise return the resource.

    Usage:
        info = require_resource(publisher.latest, "No video info yet", 409)
    """
    if resource is None:
        raise HTTPException(status_code=status_code, detail=detail)
    return resource


def require_engine(engine: T | None) -> T:
    """Raise 503 when the extraction engine hasn't been set up."""
    return require_resource(engine, "Extraction engine not initialized", 503)


def require_video_info(info: T | None) -> T:
    """Raise 409 when nothing has been extracted yet."""
    return require_resource(info, "No video info extracted yet", 409)
