"""
Extraction engine - one pipeline per rendered document.

Pipeline:
1. Resolve a site-specific extractor for the current address and run it
2. Fill any field it left blank from the generic selector chains
3. Clean and clamp the title
4. Build a fresh VideoInfo and hand it to the publisher

Each run builds its result from scratch, so overlapping runs can only race on
which complete result is published last.
"""

import logging
from datetime import datetime, timezone

from .document import Document
from .links import get_domain
from .models import DEFAULT_LINK_DESCRIPTION, VideoInfo
from .publisher import ResultPublisher
from .site_extractors import (
    SiteExtraction,
    SiteExtractor,
    extract_with_site_extractor,
    get_extractor_for_url,
)
from .strategies import (
    PAGE_TITLE_SELECTORS,
    TITLE_MAX_LENGTH,
    TITLE_SELECTORS,
    clean_title,
    extract_field,
    match_selector,
)
from .watcher import DEFAULT_SETTLE_DELAY, NavigationWatcher

logger = logging.getLogger(__name__)


class ExtractionEngine:
    """Extracts video info from one document and keeps the publisher current."""

    def __init__(
        self,
        document: Document,
        publisher: ResultPublisher | None = None,
        placeholder: str = DEFAULT_LINK_DESCRIPTION,
        settle_delay: float = DEFAULT_SETTLE_DELAY,
        title_max_length: int = TITLE_MAX_LENGTH,
        extractors: list[type[SiteExtractor]] | None = None,
    ):
        self.document = document
        self.publisher = publisher or ResultPublisher()
        self.placeholder = placeholder
        self.title_max_length = title_max_length
        self.extractors = extractors
        self.watcher = NavigationWatcher(document, self.run, settle_delay=settle_delay)

    def extract(self) -> VideoInfo:
        """Run the pipeline over the document as it is right now."""
        url = self.document.url
        site = SiteExtraction()
        extractor_used = "generic"

        extractor = get_extractor_for_url(url, self.extractors)
        if extractor:
            extractor_used = extractor.NAME
            site = extract_with_site_extractor(extractor, self.document, self.placeholder)

        if site.title:
            title = clean_title(site.title, self.title_max_length)
        else:
            raw_title, selector = match_selector(self.document, TITLE_SELECTORS)
            title = clean_title(
                raw_title,
                self.title_max_length,
                strip_site_suffix=selector in PAGE_TITLE_SELECTORS,
            )
        thumbnail = site.thumbnail or extract_field(self.document, "thumbnail")

        info = VideoInfo(
            source_url=url,
            title=title,
            thumbnail=thumbnail,
            domain=get_domain(url),
            captured_at=datetime.now(timezone.utc),
            mirror_links=tuple(site.mirror_links),
            extractor_used=extractor_used,
        )
        logger.debug(
            f"Extracted '{info.title}' from {info.domain} "
            f"({extractor_used}, {len(info.mirror_links)} mirror links)"
        )
        return info

    def run(self) -> VideoInfo:
        """Extract and publish."""
        info = self.extract()
        self.publisher.publish(info)
        return info

    def start(self) -> VideoInfo:
        """Extract once for the initial load, then follow navigation."""
        info = self.run()
        self.watcher.start()
        return info

    def stop(self) -> None:
        self.watcher.stop()
