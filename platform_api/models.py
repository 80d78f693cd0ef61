"""Pydantic request/response models for the Builder Maps API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DuplicateCheckRequest(BaseModel):
    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Name of the spot being nominated",
    )
    city_id: str = Field(
        ...,
        description="City the spot belongs to (e.g. austin)",
    )
    lng: float = Field(
        ...,
        ge=-180,
        le=180,
        description="Longitude in decimal degrees",
    )
    lat: float = Field(
        ...,
        ge=-90,
        le=90,
        description="Latitude in decimal degrees",
    )
    name_threshold: float | None = Field(
        None,
        ge=0.0,
        le=1.0,
        description="Override the name similarity threshold (default from duplicate_rules.yaml)",
    )
    distance_threshold_m: float | None = Field(
        None,
        ge=0.0,
        le=50000.0,
        description="Override the distance threshold in metres",
    )


class CustomLinkIn(BaseModel):
    url: str = Field(
        ...,
        max_length=2048,
        description="Link URL; https:// is assumed when no scheme is given",
    )
    id: str | None = Field(
        None,
        max_length=64,
        description="Existing link id (generated when omitted)",
    )
    display_name: str | None = Field(
        None,
        max_length=100,
        description="Label shown for the link (defaults to the platform name)",
    )


class NominationRequest(BaseModel):
    # Lengths are checked by the submission validator so every problem is
    # reported together rather than as a pydantic 422.
    name: str = Field(
        "",
        max_length=500,
        description="Spot name",
    )
    city_id: str = Field(
        "",
        description="City the spot belongs to",
    )
    types: list[str] = Field(
        default_factory=list,
        description="One or more of: coworking, hacker-house, cafe, community",
    )
    description: str = Field(
        "",
        max_length=5000,
        description="What makes the spot worth visiting",
    )
    lng: float | None = Field(
        None,
        description="Longitude in decimal degrees",
    )
    lat: float | None = Field(
        None,
        description="Latitude in decimal degrees",
    )
    vibes: list[str] = Field(
        default_factory=list,
        max_length=20,
        description="Free-form vibe tags (e.g. 'deep focus', 'good coffee')",
    )
    google_maps_url: str | None = Field(None, max_length=2048)
    website_url: str | None = Field(None, max_length=2048)
    linkedin_url: str | None = Field(None, max_length=2048)
    twitter_handle: str | None = Field(None, max_length=100)
    instagram_handle: str | None = Field(None, max_length=100)
    custom_links: list[CustomLinkIn] = Field(
        default_factory=list,
        description="Additional links; at most 10 are kept",
    )
    submitted_by: str | None = Field(
        None,
        max_length=100,
        description="Handle of the person nominating the spot",
    )


class LinkParseRequest(BaseModel):
    url: str = Field(
        ...,
        max_length=2048,
        description="URL to classify",
    )


class LinkSanitizeRequest(BaseModel):
    links: list[dict] = Field(
        default_factory=list,
        description="Custom link objects: {url, id?, display_name?}",
    )
