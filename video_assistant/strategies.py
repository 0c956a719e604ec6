"""
Generic field strategies - ordered selector chains for title and thumbnail.

Selectors are tried in priority order and the first non-blank value wins.
Order matters: document title and headings come before ad-hoc class hooks,
which come before metadata tags, so results stay stable across page variants.
"""

import re
from typing import Literal
from urllib.parse import urljoin

from bs4 import Tag

from .document import Document
from .models import UNKNOWN_TITLE

FieldKind = Literal["title", "thumbnail"]

TITLE_SELECTORS = [
    "title",
    "h1",
    "[data-title]",
    ".video-title",
    ".title",
    'meta[property="og:title"]',
    'meta[name="title"]',
]

THUMBNAIL_SELECTORS = [
    'meta[property="og:image"]',
    'meta[name="twitter:image"]',
    "video",
    ".video-thumbnail img",
    ".thumbnail img",
]

# Page-level titles that usually carry a " - Site Name" suffix
PAGE_TITLE_SELECTORS = frozenset({
    "title",
    'meta[property="og:title"]',
    'meta[name="title"]',
})

FIELD_CHAINS: dict[str, list[str]] = {
    "title": TITLE_SELECTORS,
    "thumbnail": THUMBNAIL_SELECTORS,
}

TITLE_MAX_LENGTH = 100
ELLIPSIS = "..."

_WHITESPACE = re.compile(r"\s+")
_LEADING_DASH = re.compile(r"^[-–—]+\s*")
_TRAILING_DASH = re.compile(r"\s*[-–—]+$")
# " - Site Name" style suffix appended by most CMSes
_SITE_SUFFIX = re.compile(r"\s+[-–—|]\s+[^-–—|]{1,40}$")


def node_value(node: Tag) -> str:
    """Read the value a node carries, depending on what kind of node it is."""
    name = (node.name or "").lower()
    if name == "meta":
        value = node.get("content")
    elif name == "video":
        value = node.get("poster")
    elif name in ("img", "source"):
        value = node.get("src")
    else:
        value = node.get_text()
    return (value or "").strip()


def match_selector(document: Document, selectors: list[str]) -> tuple[str, str | None]:
    """Return the first non-blank value in the chain and the selector that produced it."""
    for selector in selectors:
        node = document.select_one(selector)
        if node is None:
            continue
        value = node_value(node)
        if value:
            return value, selector
    return "", None


def first_match(document: Document, selectors: list[str]) -> str:
    """Return the first non-blank value produced by the selector chain."""
    return match_selector(document, selectors)[0]


def extract_field(document: Document, kind: FieldKind) -> str:
    """Run the generic chain for a field; thumbnails come back absolute."""
    value = first_match(document, FIELD_CHAINS[kind])
    if kind == "thumbnail" and value:
        try:
            return urljoin(document.url, value)
        except ValueError:
            return value
    return value


def clean_title(
    raw: str | None,
    max_length: int = TITLE_MAX_LENGTH,
    strip_site_suffix: bool = False,
) -> str:
    """
    Normalize a raw title for display.

    Collapses whitespace and drops dash separators at either end. With
    strip_site_suffix, a short trailing " - Site" segment goes too. Then clamps
    to max_length characters plus an ellipsis. Blank input maps to the
    "Unknown Title" sentinel.
    """
    title = _WHITESPACE.sub(" ", raw or "").strip()
    title = _LEADING_DASH.sub("", title)
    title = _TRAILING_DASH.sub("", title)

    if strip_site_suffix:
        without_suffix = _SITE_SUFFIX.sub("", title)
        if without_suffix:
            title = without_suffix

    if not title:
        return UNKNOWN_TITLE
    if len(title) > max_length:
        title = title[:max_length] + ELLIPSIS
    return title
