"""Nomination intake: duplicate pre-check and submission."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request

from deduplication.algorithms.duplicate_checker import check_for_duplicates

from ..helpers import add_nomination, approved_spots, generate_id, get_cities, get_nominations
from ..models import DuplicateCheckRequest, NominationRequest
from ..sanitize import sanitize_handle, sanitize_input, sanitize_url
from ..social_links import sanitize_custom_links
from ..spot_validator import validate_spot_submission

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500


def _require_city(city_id: str) -> None:
    if city_id not in get_cities():
        raise HTTPException(status_code=404, detail=f"City not found: {city_id}")


@router.post("/api/nominations/check-duplicates")
async def check_duplicates(request: Request, body: DuplicateCheckRequest) -> dict[str, Any]:
    """Warn before submission: list approved spots in the city that look like the same place."""
    _require_city(body.city_id)

    result = check_for_duplicates(
        body.name,
        [body.lng, body.lat],
        body.city_id,
        approved_spots(body.city_id),
        name_threshold=body.name_threshold,
        distance_threshold_m=body.distance_threshold_m,
        config=request.app.state.checker_config,
    )

    return {"city_id": body.city_id, **result.to_dict()}


@router.post("/api/nominations", status_code=201)
async def submit_nomination(request: Request, body: NominationRequest) -> dict[str, Any]:
    """
    Submit a new spot nomination for moderator review.

    Validation failures return 400 with every problem listed.  Likely
    duplicates do not block the submission; they are returned so the
    client can show them and moderators see them on the nomination.
    """
    coordinates = [body.lng, body.lat] if body.lng is not None and body.lat is not None else None

    validation = validate_spot_submission({
        "name": body.name,
        "city_id": body.city_id,
        "types": body.types,
        "description": body.description,
        "coordinates": coordinates,
    })
    if not validation.is_valid:
        raise HTTPException(status_code=400, detail={"errors": validation.errors})

    _require_city(body.city_id)

    try:
        duplicates = check_for_duplicates(
            body.name,
            coordinates,
            body.city_id,
            approved_spots(body.city_id),
            config=request.app.state.checker_config,
        )

        twitter = sanitize_handle(body.twitter_handle) if body.twitter_handle else None
        instagram = sanitize_handle(body.instagram_handle) if body.instagram_handle else None

        nomination = {
            "id": generate_id("nom"),
            "name": sanitize_input(body.name)[:MAX_NAME_LENGTH],
            "city_id": body.city_id,
            "types": list(body.types),
            "description": sanitize_input(body.description)[:MAX_DESCRIPTION_LENGTH],
            "coordinates": coordinates,
            "vibes": [sanitize_input(v)[:50] for v in body.vibes if v.strip()],
            "google_maps_url": sanitize_url(body.google_maps_url) if body.google_maps_url else None,
            "website_url": sanitize_url(body.website_url) if body.website_url else None,
            "linkedin_url": sanitize_url(body.linkedin_url) if body.linkedin_url else None,
            "twitter_handle": twitter or None,
            "instagram_handle": instagram or None,
            "custom_links": sanitize_custom_links([link.model_dump() for link in body.custom_links]),
            "submitted_by": sanitize_handle(body.submitted_by) if body.submitted_by else None,
            "possible_duplicate_ids": [m.spot.get("id") for m in duplicates.matches],
            "status": "pending",
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        add_nomination(nomination)

    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to submit nomination")
        raise HTTPException(status_code=500, detail="Failed to submit nomination")

    logger.info(
        "Nomination %s for %r in %s (%d possible duplicates)",
        nomination["id"],
        nomination["name"],
        nomination["city_id"],
        len(duplicates.matches),
    )

    return {
        "id": nomination["id"],
        "message": "Nomination submitted successfully",
        "possible_duplicates": [m.to_dict() for m in duplicates.matches],
    }


@router.get("/api/nominations")
async def list_nominations(
    status: str | None = Query(None, description="Filter by status (e.g. pending)"),
    city_id: str | None = Query(None, description="Filter by city id"),
) -> dict[str, Any]:
    """List submitted nominations, newest first."""
    results = list(reversed(get_nominations()))
    if status:
        results = [n for n in results if n.get("status") == status]
    if city_id:
        results = [n for n in results if n.get("city_id") == city_id]
    return {"meta": {"total": len(results)}, "data": results}
