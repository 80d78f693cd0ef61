"""Input sanitization for user-submitted spot, review and link data.

Everything here is a pure string transform.  Functions accept anything and
return an empty string (or None for URLs) when handed a non-string, so
callers can pass raw request values straight through.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit, urlunsplit

from deduplication.algorithms.geo_proximity import Coordinate

_HTML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "/": "&#x2F;",
    "`": "&#x60;",
    "=": "&#x3D;",
}

_HTML_SPECIAL = re.compile(r"[&<>\"'`=/]")
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
_HTML_TAG = re.compile(r"<[^>]*>")
_HANDLE_INVALID = re.compile(r"[^a-zA-Z0-9_]")

MAX_TEXT_LENGTH = 10000
MAX_REVIEW_LENGTH = 500
MAX_SPOT_NAME_LENGTH = 100
MAX_HANDLE_LENGTH = 50


def _clean(value: str) -> str:
    """Trim and drop NUL and other control characters (keeps tab/newline/CR)."""
    return _CONTROL_CHARS.sub("", value.strip())


def escape_html(value: str) -> str:
    """Escape characters that are significant in HTML."""
    return _HTML_SPECIAL.sub(lambda m: _HTML_ENTITIES[m.group(0)], value)


def sanitize_input(value) -> str:
    """Trim, remove control characters, then HTML-escape."""
    if not isinstance(value, str):
        return ""
    return escape_html(_clean(value))


def sanitize_text(value) -> str:
    """Plain-text cleanup without escaping, capped at 10 000 characters."""
    if not isinstance(value, str):
        return ""
    return _clean(value)[:MAX_TEXT_LENGTH]


def sanitize_url(value) -> str | None:
    """
    Return a normalized http(s) URL, or None if the value is unsafe.

    Rejects other schemes, hostless URLs, and anything mentioning
    ``javascript:`` or ``data:``.
    """
    if not isinstance(value, str):
        return None

    trimmed = value.strip()
    if not trimmed:
        return None

    lowered = trimmed.lower()
    if "javascript:" in lowered or "data:" in lowered:
        return None

    try:
        parts = urlsplit(trimmed)
        hostname = parts.hostname
    except ValueError:
        return None

    if parts.scheme.lower() not in ("http", "https") or not hostname:
        return None

    netloc = parts.netloc
    host_start = netloc.rfind("@") + 1
    netloc = netloc[:host_start] + netloc[host_start:].lower()
    path = parts.path or "/"

    return urlunsplit((parts.scheme.lower(), netloc, path, parts.query, parts.fragment))


def sanitize_handle(value) -> str:
    """Normalize a social handle: no leading @, only [A-Za-z0-9_], max 50."""
    if not isinstance(value, str):
        return ""
    handle = value.strip()
    if handle.startswith("@"):
        handle = handle[1:]
    return _HANDLE_INVALID.sub("", handle)[:MAX_HANDLE_LENGTH]


def validate_coordinates(coords) -> bool:
    """True for a finite ``[lng, lat]`` pair within geodesic ranges."""
    if not isinstance(coords, (list, tuple)) or len(coords) != 2:
        return False

    lng, lat = coords
    if any(isinstance(v, bool) or not isinstance(v, (int, float)) for v in (lng, lat)):
        return False

    return Coordinate(float(lng), float(lat)).is_valid()


def sanitize_review_text(value, max_length: int = MAX_REVIEW_LENGTH) -> str:
    """Clean review or description text and strip HTML tags."""
    if not isinstance(value, str):
        return ""
    return _HTML_TAG.sub("", _clean(value))[:max_length]


def sanitize_spot_name(value) -> str:
    """Clean a spot name and strip HTML tags, max 100 characters."""
    if not isinstance(value, str):
        return ""
    return _HTML_TAG.sub("", _clean(value))[:MAX_SPOT_NAME_LENGTH]
