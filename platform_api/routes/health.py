"""Health check endpoint."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from ..helpers import approved_spots, get_cities, get_nominations, get_spots, iso

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/health")
async def health(request: Request):
    """Health check — reports version, catalog size and uptime. Always open."""
    spot_count = len(get_spots())

    server_started_at = request.app.state.server_started_at
    uptime_seconds = round((datetime.now(timezone.utc) - server_started_at).total_seconds())

    return {
        "status": "healthy" if spot_count else "degraded",
        "version": request.app.version,
        "spot_count": spot_count,
        "approved_spot_count": len(approved_spots()),
        "city_count": len(get_cities()),
        "pending_nominations": sum(1 for n in get_nominations() if n.get("status") == "pending"),
        "started_at": iso(server_started_at),
        "uptime_seconds": uptime_seconds,
    }
