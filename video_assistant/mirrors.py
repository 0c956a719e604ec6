"""
Mirror-link discovery - find alternate sources for the episode on a page.

Two phases:
- Phase A scans structured link containers (mirror/episode/download wrappers)
  and reads author, link and description from each one.
- Phase B runs only when Phase A found nothing: it scans every anchor that
  points at a known video host and derives the author from the surrounding
  list item.

Both phases return unverified candidates in document order; deduplicate()
collapses them to one entry per URL.
"""

import logging
import re
from typing import Iterable

from bs4 import Tag

from .document import Document
from .links import dedup_key, resolve_url
from .models import DEFAULT_LINK_DESCRIPTION, UNKNOWN_AUTHOR, MirrorLink

logger = logging.getLogger(__name__)

CONTAINER_SELECTOR = ", ".join([
    ".episode-links .link-container",
    ".mirror-links .mirror-link",
    ".mirror-container .mirror-item",
    ".download-links .link-item",
    ".episode-mirrors .mirror",
    ".link-list .link-entry",
])

AUTHOR_SELECTOR = ", ".join([
    ".author-name", ".mirror-author", ".link-author",
    ".mirror-title", ".link-title", ".source-name",
])

LINK_SELECTOR = "a[href], .download-link, .mirror-url, .link-url"

DESCRIPTION_SELECTOR = ", ".join([
    ".link-desc", ".mirror-desc", ".link-description",
    ".mirror-description", ".source-desc",
])

# Ancestor that holds an anchor's author label in loose markup
ANCHOR_CONTEXT_SELECTOR = ".link-item, .mirror-item, li, .mirror, .source"

# Hosts whose links are worth offering when no structured containers exist
KNOWN_VIDEO_HOSTS = [
    "ogladajanime.pl",
    "streamtape.com",
    "mp4upload.com",
    "yourupload.com",
    "streamlare.com",
    "mixdrop.co",
    "dood.to",
    "filemoon.sx",
    "voe.sx",
    "vidstreaming.io",
]

_WHITESPACE = re.compile(r"\s+")


def _text(node: Tag | None) -> str:
    if node is None:
        return ""
    return _WHITESPACE.sub(" ", node.get_text()).strip()


def _link_reference(node: Tag) -> str | None:
    return node.get("href") or node.get("data-href") or node.get("data-url")


def _container_link(container: Tag, base_url: str) -> tuple[Tag, str] | None:
    """First link-like element in the container that resolves to a URL."""
    for node in container.select(LINK_SELECTOR):
        url = resolve_url(base_url, _link_reference(node))
        if url:
            return node, url
    return None


def scan_link_containers(
    document: Document,
    placeholder: str = DEFAULT_LINK_DESCRIPTION,
) -> list[MirrorLink]:
    """Phase A: read candidates out of structured mirror containers."""
    links = []
    containers = document.select(CONTAINER_SELECTOR)
    logger.debug(f"Found {len(containers)} link containers on {document.url}")

    for container in containers:
        found = _container_link(container, document.url)
        if not found:
            continue
        link_node, url = found

        author = _text(container.select_one(AUTHOR_SELECTOR)) or UNKNOWN_AUTHOR

        description = _text(container.select_one(DESCRIPTION_SELECTOR))
        if not description:
            link_text = _text(link_node)
            if link_text and link_text != url:
                description = link_text

        links.append(MirrorLink(
            url=url,
            author=author,
            description=description or placeholder,
        ))

    return links


def _anchor_author(anchor: Tag, url: str, anchor_text: str) -> str:
    context = anchor.css.closest(ANCHOR_CONTEXT_SELECTOR)
    if context is None:
        return UNKNOWN_AUTHOR

    text = context.get_text()
    text = text.replace(url, "", 1)
    if anchor_text:
        text = text.replace(anchor_text, "", 1)
    return _WHITESPACE.sub(" ", text).strip() or UNKNOWN_AUTHOR


def scan_host_anchors(
    document: Document,
    placeholder: str = DEFAULT_LINK_DESCRIPTION,
    hosts: Iterable[str] = KNOWN_VIDEO_HOSTS,
) -> list[MirrorLink]:
    """Phase B: loose scan of anchors pointing at known video hosts."""
    hosts = [host.lower() for host in hosts]
    links = []

    for anchor in document.select("a[href]"):
        href = anchor.get("href", "")
        if not any(host in href.lower() for host in hosts):
            continue
        url = resolve_url(document.url, href)
        if not url:
            continue

        anchor_text = anchor.get_text().strip()
        links.append(MirrorLink(
            url=url,
            author=_anchor_author(anchor, url, anchor_text),
            description=_WHITESPACE.sub(" ", anchor_text) or placeholder,
        ))

    logger.debug(f"Found {len(links)} known-host anchors on {document.url}")
    return links


def deduplicate(links: Iterable[MirrorLink]) -> list[MirrorLink]:
    """Keep the first link for every URL, preserving order."""
    seen: set[str] = set()
    unique = []
    for link in links:
        key = dedup_key(link.url)
        if key in seen:
            continue
        seen.add(key)
        unique.append(link)
    return unique


def discover_mirror_links(
    document: Document,
    placeholder: str = DEFAULT_LINK_DESCRIPTION,
) -> list[MirrorLink]:
    """Run both discovery phases and return deduplicated candidates."""
    candidates = scan_link_containers(document, placeholder)
    if not candidates:
        candidates = scan_host_anchors(document, placeholder)

    unique = deduplicate(candidates)
    logger.debug(f"Mirror discovery on {document.url}: {len(candidates)} candidates, {len(unique)} unique")
    return unique
