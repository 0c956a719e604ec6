"""
API route modules.
"""

from .video import router as video_router
from .misc import router as misc_router
from .download import router as download_router

__all__ = [
    "video_router",
    "misc_router",
    "download_router",
]
