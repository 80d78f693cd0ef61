"""Submission validation for new spot nominations.

Checks that a proposed spot has the required fields and in-range
coordinates before duplicate detection runs.  Uses simple dict checks and
returns every problem found as a human-readable message.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .sanitize import validate_coordinates

SPOT_TYPES = ("coworking", "hacker-house", "cafe", "community")

MIN_NAME_LENGTH = 2
MIN_DESCRIPTION_LENGTH = 10


@dataclass
class SpotValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)


def validate_spot_submission(data: dict) -> SpotValidationResult:
    """Validate a proposed spot.

    Expected keys: name, city_id, type or types, description and
    coordinates as ``[lng, lat]``.
    """
    errors: list[str] = []

    name = data.get("name")
    if not isinstance(name, str) or len(name.strip()) < MIN_NAME_LENGTH:
        errors.append("Name is required (at least 2 characters)")

    if not data.get("city_id"):
        errors.append("City is required")

    types = data.get("types")
    if not types and data.get("type"):
        types = [data["type"]]
    if not types:
        errors.append("Spot type is required")
    else:
        for t in types:
            if t not in SPOT_TYPES:
                errors.append(f"Unknown spot type: {t}")

    description = data.get("description")
    if not isinstance(description, str) or len(description.strip()) < MIN_DESCRIPTION_LENGTH:
        errors.append("Description is required (at least 10 characters)")

    coords = data.get("coordinates")
    if not isinstance(coords, (list, tuple)) or len(coords) != 2:
        errors.append("Location coordinates are required")
    elif any(isinstance(v, bool) or not isinstance(v, (int, float)) or math.isnan(v) for v in coords):
        errors.append("Invalid coordinates format")
    elif not validate_coordinates(coords):
        errors.append("Coordinates are out of valid range")

    return SpotValidationResult(is_valid=not errors, errors=errors)
