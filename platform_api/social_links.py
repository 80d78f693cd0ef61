"""
Builder Maps — Social Link Detection

Classifies arbitrary URLs against a table of known platform URL
signatures (Substack, YouTube, Discord, ...) so custom links on a spot
can be shown with the right icon and label.  Anything unrecognised falls
back to the ``generic`` platform.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit

from .helpers import generate_id

logger = logging.getLogger(__name__)

MAX_CUSTOM_LINKS = 10

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


@dataclass(frozen=True)
class SocialPlatform:
    """A known link platform and the URL patterns that identify it."""

    id: str
    name: str
    icon: str
    color: str
    url_patterns: tuple[re.Pattern, ...] = field(default=(), repr=False)

    def matches(self, url: str) -> bool:
        return any(p.search(url) for p in self.url_patterns)

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "icon": self.icon, "color": self.color}


@dataclass(frozen=True)
class DetectedSocialLink:
    """A parsed custom link with its detected platform."""

    url: str
    platform: SocialPlatform
    display_name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "platform": self.platform.to_dict(),
            "display_name": self.display_name,
        }


def _platform(pid: str, name: str, color: str, *patterns: str) -> SocialPlatform:
    return SocialPlatform(
        id=pid,
        name=name,
        icon=pid if patterns else "link",
        color=color,
        url_patterns=tuple(re.compile(p, re.IGNORECASE) for p in patterns),
    )


# ---------------------------------------------------------------------------
# Platform table, checked in this order during detection
# ---------------------------------------------------------------------------

_PLATFORMS = [
    _platform("substack", "Substack", "#FF6719",
              r"^https?://([a-z0-9-]+\.)?substack\.com"),
    _platform("youtube", "YouTube", "#FF0000",
              r"^https?://(www\.)?youtube\.com", r"^https?://youtu\.be"),
    _platform("tiktok", "TikTok", "#000000",
              r"^https?://(www\.)?tiktok\.com"),
    _platform("discord", "Discord", "#5865F2",
              r"^https?://(www\.)?discord\.(gg|com)", r"^https?://discordapp\.com"),
    _platform("telegram", "Telegram", "#26A5E4",
              r"^https?://(t\.me|telegram\.me)"),
    _platform("github", "GitHub", "#181717",
              r"^https?://(www\.)?github\.com"),
    _platform("medium", "Medium", "#000000",
              r"^https?://(www\.)?medium\.com", r"^https?://[a-z0-9-]+\.medium\.com"),
    _platform("spotify", "Spotify", "#1DB954",
              r"^https?://(open\.)?spotify\.com"),
    _platform("twitch", "Twitch", "#9146FF",
              r"^https?://(www\.)?twitch\.tv"),
    _platform("calendly", "Calendly", "#006BFF",
              r"^https?://(www\.)?calendly\.com"),
    _platform("notion", "Notion", "#000000",
              r"^https?://(www\.)?notion\.(so|site)"),
    _platform("beehiiv", "Beehiiv", "#FFC700",
              r"^https?://([a-z0-9-]+\.)?beehiiv\.com"),
    _platform("threads", "Threads", "#000000",
              r"^https?://(www\.)?threads\.net"),
    _platform("bluesky", "Bluesky", "#0085FF",
              r"^https?://bsky\.app"),
    _platform("facebook", "Facebook", "#1877F2",
              r"^https?://(www\.)?(facebook|fb)\.com", r"^https?://fb\.me"),
    _platform("whatsapp", "WhatsApp", "#25D366",
              r"^https?://(wa\.me|api\.whatsapp\.com|chat\.whatsapp\.com)"),
    _platform("pinterest", "Pinterest", "#E60023",
              r"^https?://(www\.)?pinterest\.(com|co\.[a-z]{2})"),
    _platform("snapchat", "Snapchat", "#FFFC00",
              r"^https?://(www\.)?snapchat\.com"),
    _platform("patreon", "Patreon", "#FF424D",
              r"^https?://(www\.)?patreon\.com"),
    _platform("producthunt", "Product Hunt", "#DA552F",
              r"^https?://(www\.)?producthunt\.com"),
    _platform("dribbble", "Dribbble", "#EA4C89",
              r"^https?://(www\.)?dribbble\.com"),
    _platform("behance", "Behance", "#1769FF",
              r"^https?://(www\.)?behance\.net"),
    _platform("figma", "Figma", "#F24E1E",
              r"^https?://(www\.)?figma\.com"),
    _platform("linktree", "Linktree", "#43E55E",
              r"^https?://(linktr\.ee|www\.linktr\.ee)"),
    _platform("reddit", "Reddit", "#FF4500",
              r"^https?://(www\.)?reddit\.com"),
    _platform("eventbrite", "Eventbrite", "#F05537",
              r"^https?://(www\.)?eventbrite\.(com|co\.[a-z]{2})"),
    _platform("meetup", "Meetup", "#ED1C40",
              r"^https?://(www\.)?meetup\.com"),
    _platform("generic", "Link", "#6B7280"),
]

SOCIAL_PLATFORMS: dict[str, SocialPlatform] = {p.id: p for p in _PLATFORMS}
GENERIC = SOCIAL_PLATFORMS["generic"]


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------


def detect_platform(url: str) -> SocialPlatform:
    """Return the first platform whose pattern matches, else ``generic``."""
    normalized = url.strip().lower()

    for platform in SOCIAL_PLATFORMS.values():
        if platform is GENERIC:
            continue
        if platform.matches(normalized):
            return platform

    return GENERIC


def parse_custom_link(url) -> DetectedSocialLink | None:
    """
    Parse a user-entered link.

    Adds ``https://`` when no scheme is given.  Returns None for empty or
    unparsable input.
    """
    if not url or not isinstance(url, str):
        return None

    trimmed = url.strip()
    if not trimmed:
        return None

    normalized = trimmed if _SCHEME_RE.match(trimmed) else f"https://{trimmed}"

    try:
        parts = urlsplit(normalized)
        hostname, _port = parts.hostname, parts.port
    except ValueError:
        return None

    if not hostname or any(c.isspace() for c in parts.netloc):
        return None

    platform = detect_platform(normalized)

    return DetectedSocialLink(
        url=normalized,
        platform=platform,
        display_name=platform.name,
    )


def generate_link_id() -> str:
    """Unique-enough id for a custom link: ``link_{epoch_ms}_{9 base36 chars}``."""
    return generate_id("link", 9)


def sanitize_custom_links(links) -> list[dict[str, str]]:
    """
    Validate a list of custom link dicts.

    Drops entries that are not dicts, lack a string ``url`` or fail to
    parse.  Keeps at most MAX_CUSTOM_LINKS.  Output entries carry ``id``,
    ``url``, ``platform_id`` and ``display_name``.
    """
    if not isinstance(links, list):
        return []

    result: list[dict[str, str]] = []

    for link in links:
        if not isinstance(link, dict):
            continue
        raw_url = link.get("url")
        if not raw_url or not isinstance(raw_url, str):
            continue

        detected = parse_custom_link(raw_url)
        if detected is None:
            logger.debug("Dropping unparsable custom link %r", raw_url)
            continue

        result.append({
            "id": link.get("id") or generate_link_id(),
            "url": detected.url,
            "platform_id": detected.platform.id,
            "display_name": link.get("display_name") or detected.display_name,
        })

        if len(result) >= MAX_CUSTOM_LINKS:
            break

    return result
