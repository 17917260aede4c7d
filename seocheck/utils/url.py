from __future__ import annotations

from urllib.parse import quote, urlsplit

_ALLOWED_SCHEMES = {"http", "https"}


def is_valid_http_url(value: str) -> bool:
    """Return True for an absolute ``http``/``https`` URL with a host."""
    raw = (value or "").strip()
    if not raw or any(ch.isspace() for ch in raw):
        return False

    try:
        parts = urlsplit(raw)
        # Accessing the port validates it; urlsplit itself is lenient.
        parts.port
    except ValueError:
        return False

    if parts.scheme.lower() not in _ALLOWED_SCHEMES:
        return False
    return bool(parts.hostname)


def display_hostname(url: str) -> str:
    host = (urlsplit(url).hostname or "").lower()
    if host.startswith("www."):
        host = host[len("www."):]
    return host


def encode_url_component(url: str) -> str:
    return quote(url, safe="!~*'()")
