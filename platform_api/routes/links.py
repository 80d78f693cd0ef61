"""Custom link classification endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException

from ..models import LinkParseRequest, LinkSanitizeRequest
from ..social_links import SOCIAL_PLATFORMS, parse_custom_link, sanitize_custom_links

router = APIRouter()


@router.get("/api/links/platforms")
async def list_platforms() -> dict[str, Any]:
    """Every recognised platform, in detection order."""
    return {"data": [p.to_dict() for p in SOCIAL_PLATFORMS.values()]}


@router.post("/api/links/parse")
async def parse_link(body: LinkParseRequest) -> dict[str, Any]:
    """Detect the platform for one URL."""
    detected = parse_custom_link(body.url)
    if detected is None:
        raise HTTPException(status_code=422, detail="Not a valid URL")
    return {"data": detected.to_dict()}


@router.post("/api/links/sanitize")
async def sanitize_links(body: LinkSanitizeRequest) -> dict[str, Any]:
    """Validate a list of custom links; invalid entries are dropped."""
    links = sanitize_custom_links(body.links)
    return {"meta": {"submitted": len(body.links), "kept": len(links)}, "data": links}
