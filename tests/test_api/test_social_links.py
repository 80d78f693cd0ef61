"""Tests for custom link platform detection."""

from __future__ import annotations

import re

import pytest

from platform_api.social_links import (
    GENERIC,
    MAX_CUSTOM_LINKS,
    SOCIAL_PLATFORMS,
    detect_platform,
    generate_link_id,
    parse_custom_link,
    sanitize_custom_links,
)


class TestDetectPlatform:
    @pytest.mark.parametrize(
        "url, platform_id",
        [
            ("https://builders.substack.com/p/hello", "substack"),
            ("https://youtu.be/abc123", "youtube"),
            ("https://discord.gg/xyz", "discord"),
            ("https://t.me/austinbuilders", "telegram"),
            ("https://GitHub.com/noisebridge", "github"),
            ("https://lu.ma.example.com", "generic"),
            ("https://bsky.app/profile/x", "bluesky"),
            ("https://linktr.ee/spot", "linktree"),
        ],
    )
    def test_known_urls(self, url, platform_id):
        assert detect_platform(url).id == platform_id

    def test_unknown_falls_back_to_generic(self):
        platform = detect_platform("https://example.com")
        assert platform is GENERIC
        assert platform.icon == "link"

    def test_table_has_generic_last(self):
        assert list(SOCIAL_PLATFORMS)[-1] == "generic"


class TestParseCustomLink:
    def test_adds_scheme(self):
        link = parse_custom_link("github.com/noisebridge")
        assert link.url == "https://github.com/noisebridge"
        assert link.platform.id == "github"
        assert link.display_name == "GitHub"

    def test_keeps_http(self):
        assert parse_custom_link("http://example.com").url == "http://example.com"

    def test_to_dict(self):
        data = parse_custom_link("https://discord.gg/xyz").to_dict()
        assert data["platform"]["id"] == "discord"
        assert data["display_name"] == "Discord"

    @pytest.mark.parametrize("value", [None, "", "   ", 123, "https://", "not a url", "http://example.com:abc"])
    def test_rejects_unparsable(self, value):
        assert parse_custom_link(value) is None


class TestSanitizeCustomLinks:
    def test_keeps_valid_links(self):
        links = sanitize_custom_links([
            {"url": "github.com/noisebridge", "id": "link_1"},
            {"url": "https://example.com", "display_name": "Our site"},
        ])
        assert links[0] == {
            "id": "link_1",
            "url": "https://github.com/noisebridge",
            "platform_id": "github",
            "display_name": "GitHub",
        }
        assert links[1]["platform_id"] == "generic"
        assert links[1]["display_name"] == "Our site"

    def test_drops_bad_entries(self):
        links = sanitize_custom_links([
            "https://example.com",
            {"url": ""},
            {"url": 5},
            {"url": "not a url"},
            {"name": "missing url"},
        ])
        assert links == []

    def test_caps_count(self):
        raw = [{"url": f"https://example.com/{i}"} for i in range(15)]
        assert len(sanitize_custom_links(raw)) == MAX_CUSTOM_LINKS

    def test_non_list(self):
        assert sanitize_custom_links(None) == []
        assert sanitize_custom_links({"url": "https://example.com"}) == []

    def test_generated_id_shape(self):
        assert re.fullmatch(r"link_\d+_[0-9a-z]{9}", generate_link_id())
        link = sanitize_custom_links([{"url": "https://example.com"}])[0]
        assert link["id"].startswith("link_")
