"""
Site-Specific Extractors - Custom extraction logic for sites with unusual markup.

A matching extractor runs before the generic selector chains; any field it
leaves blank is still filled generically. Only site extractors look for
mirror links.

- ogladajanime.pl: Episode title, poster and per-uploader mirror links
"""

import logging

from ..document import Document
from ..models import DEFAULT_LINK_DESCRIPTION
from .base import SiteExtraction, SiteExtractor
from .ogladajanime import OgladajAnimeExtractor

logger = logging.getLogger(__name__)

# Registry of all extractors
SITE_EXTRACTORS: list[type[SiteExtractor]] = [
    OgladajAnimeExtractor,
]


def get_extractor_for_url(
    url: str,
    extractors: list[type[SiteExtractor]] | None = None,
) -> SiteExtractor | None:
    """Get the site-specific extractor for an address, if there is one."""
    for extractor_class in extractors if extractors is not None else SITE_EXTRACTORS:
        if extractor_class.can_handle(url):
            return extractor_class()
    return None


def extract_with_site_extractor(
    extractor: SiteExtractor,
    document: Document,
    placeholder: str = DEFAULT_LINK_DESCRIPTION,
) -> SiteExtraction:
    """
    Run a site extractor, degrading to an empty result if it blows up.

    The generic chains fill in whatever is missing afterwards.
    """
    try:
        return extractor.extract(document, placeholder)
    except Exception as e:
        logger.warning(f"Site extractor {extractor.NAME} failed for {document.url}: {e}")
        return SiteExtraction()


__all__ = [
    "SiteExtraction",
    "SiteExtractor",
    "SITE_EXTRACTORS",
    "get_extractor_for_url",
    "extract_with_site_extractor",
    "OgladajAnimeExtractor",
]
