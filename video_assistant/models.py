"""
Extraction result models.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_AUTHOR = "Unknown Author"
UNKNOWN_DOMAIN = "unknown"

# English fallback; the localized value comes from the translation catalog
DEFAULT_LINK_DESCRIPTION = "Episode link"


@dataclass(frozen=True)
class MirrorLink:
    """A candidate alternate source for the video on the current page."""
    url: str
    author: str = UNKNOWN_AUTHOR
    description: str = DEFAULT_LINK_DESCRIPTION

    def to_dict(self) -> dict:
        return {"author": self.author, "url": self.url, "description": self.description}


@dataclass(frozen=True)
class VideoInfo:
    """Everything extracted from one pipeline run over a document."""
    source_url: str
    title: str
    thumbnail: str
    domain: str
    captured_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    mirror_links: tuple[MirrorLink, ...] = ()
    extractor_used: str = "generic"

    def same_content(self, other: "VideoInfo") -> bool:
        """Compare two results ignoring when they were captured."""
        return replace(self, captured_at=other.captured_at) == other

    def to_dict(self) -> dict:
        """Wire form pushed to the host, keyed the way the extension expects."""
        return {
            "url": self.source_url,
            "title": self.title,
            "thumbnail": self.thumbnail,
            "timestamp": int(self.captured_at.timestamp() * 1000),
            "domain": self.domain,
            "episodeLinks": [link.to_dict() for link in self.mirror_links],
        }
