"""Spot and city read endpoints (list, detail, cities)."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

from fastapi import APIRouter, HTTPException, Query

from ..helpers import approved_spots, get_cities, get_index

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/spots")
async def list_spots(
    city_id: str | None = Query(None, description="Filter by city id"),
    type: str | None = Query(None, description="Filter by spot type"),
    q: str | None = Query(None, description="Search spot name (case-insensitive)"),
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
) -> dict[str, Any]:
    """List approved spots, featured first, then by upvotes."""
    results = approved_spots(city_id)

    if type:
        results = [s for s in results if type in (s.get("types") or [])]
    if q:
        q_lower = q.lower()
        results = [s for s in results if q_lower in (s.get("name") or "").lower()]

    results = sorted(
        results,
        key=lambda s: (bool(s.get("featured")), s.get("upvotes") or 0),
        reverse=True,
    )

    total = len(results)
    page = [dict(s) for s in results[offset : offset + limit]]

    return {
        "meta": {"total": total, "limit": limit, "offset": offset},
        "data": page,
    }


@router.get("/api/spots/{spot_id}")
async def get_spot(spot_id: str) -> dict[str, Any]:
    """Get a single approved spot by id."""
    spot = get_index().get(spot_id)
    if not spot or not spot.get("approved"):
        raise HTTPException(status_code=404, detail="Spot not found")
    return {"data": dict(spot)}


@router.get("/api/cities")
async def list_cities() -> dict[str, Any]:
    """Cities with live approved-spot counts."""
    counts = Counter(s.get("city_id") for s in approved_spots())
    data = [
        {**city, "spot_count": counts.get(city_id, 0)}
        for city_id, city in get_cities().items()
    ]
    return {"meta": {"total": len(data)}, "data": data}
