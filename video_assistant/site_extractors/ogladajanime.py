"""
ogladajanime.pl episode page extractor.
"""

from urllib.parse import urljoin

from ..document import Document
from ..mirrors import discover_mirror_links
from ..models import DEFAULT_LINK_DESCRIPTION
from .base import SiteExtraction, SiteExtractor


class OgladajAnimeExtractor(SiteExtractor):
    """Extractor for ogladajanime.pl, which lists episode mirrors per uploader."""

    DOMAINS = ['ogladajanime.pl']
    NAME = "ogladajanime"

    def extract(self, document: Document, placeholder: str = DEFAULT_LINK_DESCRIPTION) -> SiteExtraction:
        title = self._select_text(document, 'h1.entry-title')

        # Post thumbnail first, then the player's poster frame
        thumbnail = (
            self._select_attr(document, '.post-thumbnail img', 'src')
            or self._select_attr(document, 'video', 'poster')
        )
        if thumbnail:
            thumbnail = urljoin(document.url, thumbnail)

        return SiteExtraction(
            title=title,
            thumbnail=thumbnail,
            mirror_links=discover_mirror_links(document, placeholder),
        )
