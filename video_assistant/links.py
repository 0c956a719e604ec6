"""
Link normalization - absolute URL resolution, dedup keys and display domains.
"""

from urllib.parse import urljoin, urlsplit, urlunsplit

# Schemes that never point at a downloadable resource
IGNORED_SCHEMES = ("javascript:", "mailto:", "data:", "tel:")

ALLOWED_SCHEMES = {"http", "https"}

DEFAULT_PORTS = {"http": 80, "https": 443}


def resolve_url(base: str, href: str | None) -> str | None:
    """
    Resolve a (possibly relative) reference against the document address.

    Returns None for references that cannot name a remote resource:
    empty values, fragment-only anchors, script/mail/data links, or
    anything that does not end up as http(s).
    """
    if not href:
        return None
    href = href.strip()
    if not href or href.startswith("#"):
        return None
    if href.lower().startswith(IGNORED_SCHEMES):
        return None

    try:
        absolute = urljoin(base or "", href)
        parts = urlsplit(absolute)
    except ValueError:
        return None

    if parts.scheme.lower() not in ALLOWED_SCHEMES or not parts.netloc:
        return None
    return absolute


def dedup_key(url: str) -> str:
    """
    Stable comparison key for a resolved URL.

    Scheme and host are case-folded, the fragment and default port are
    dropped, and a trailing slash on the path is ignored.
    """
    try:
        parts = urlsplit(url.strip())
        scheme = parts.scheme.lower()
        host = (parts.hostname or "").lower()
        port = parts.port
    except ValueError:
        return url.strip()

    netloc = host
    if port and DEFAULT_PORTS.get(scheme) != port:
        netloc = f"{host}:{port}"
    path = parts.path.rstrip("/")
    return urlunsplit((scheme, netloc, path, parts.query, ""))


def get_domain(url: str) -> str:
    """Hostname without a leading www., or "unknown" if it can't be parsed."""
    try:
        hostname = urlsplit(url).hostname
    except ValueError:
        return "unknown"
    if not hostname:
        return "unknown"
    if hostname.startswith("www."):
        hostname = hostname[4:]
    return hostname
