"""
Base classes for site-specific extractors.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from ..document import Document
from ..models import DEFAULT_LINK_DESCRIPTION, MirrorLink


@dataclass
class SiteExtraction:
    """Fields a site extractor managed to read; blanks are filled generically."""
    title: str = ""
    thumbnail: str = ""
    mirror_links: list[MirrorLink] = field(default_factory=list)


class SiteExtractor(ABC):
    """Base class for site-specific extractors."""

    # Hostname fragments this extractor handles
    DOMAINS: list[str] = []

    # Reported as VideoInfo.extractor_used
    NAME: str = "site"

    @classmethod
    def can_handle(cls, url: str) -> bool:
        """
        Check if this extractor handles the given address.

        Matches by substring on the hostname, so subdomains qualify while a
        domain mentioned only in the path or query does not.
        """
        try:
            hostname = (urlsplit(url).hostname or "").lower()
        except ValueError:
            return False
        return any(domain in hostname for domain in cls.DOMAINS)

    @abstractmethod
    def extract(self, document: Document, placeholder: str = DEFAULT_LINK_DESCRIPTION) -> SiteExtraction:
        """Read whatever the site's own markup offers."""
        pass

    def _select_text(self, document: Document, selector: str) -> str:
        node = document.select_one(selector)
        return node.get_text().strip() if node else ""

    def _select_attr(self, document: Document, selector: str, attr: str) -> str:
        node = document.select_one(selector)
        if node is None:
            return ""
        return (node.get(attr) or "").strip()
