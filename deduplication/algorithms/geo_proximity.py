#!/usr/bin/env python3
"""
Builder Maps — Geospatial Proximity

Great-circle distance between two spot locations using the Haversine
formula, plus the short distance labels shown next to duplicate warnings.

Coordinates follow the GeoJSON order used throughout the catalog:
``[longitude, latitude]`` in decimal degrees.

No external geo-libraries required — pure math with stdlib.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Union


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

EARTH_RADIUS_M = 6_371_000.0


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 point in ``(longitude, latitude)`` order."""
    longitude: float
    latitude: float

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> "Coordinate":
        """Build a Coordinate from a ``[lng, lat]`` pair."""
        lng, lat = pair
        return cls(longitude=float(lng), latitude=float(lat))

    def is_valid(self) -> bool:
        """Check whether the point lies within valid geodesic ranges."""
        return (
            math.isfinite(self.longitude)
            and math.isfinite(self.latitude)
            and -180.0 <= self.longitude <= 180.0
            and -90.0 <= self.latitude <= 90.0
        )


CoordinateLike = Union[Coordinate, Sequence[float]]


def _as_coordinate(value: CoordinateLike) -> Coordinate:
    if isinstance(value, Coordinate):
        return value
    return Coordinate.from_pair(value)


# ---------------------------------------------------------------------------
# Core distance calculation
# ---------------------------------------------------------------------------


def haversine_m(coord_a: CoordinateLike, coord_b: CoordinateLike) -> float:
    """
    Compute the great-circle distance in metres between two WGS84 points
    using the Haversine formula.

    Inputs are not range-checked; out-of-range degrees yield a meaningless
    but finite distance and NaN propagates.
    """
    a_pt = _as_coordinate(coord_a)
    b_pt = _as_coordinate(coord_b)

    lat1 = math.radians(a_pt.latitude)
    lat2 = math.radians(b_pt.latitude)
    dlat = math.radians(b_pt.latitude - a_pt.latitude)
    dlon = math.radians(b_pt.longitude - a_pt.longitude)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push a just outside [0, 1] near antipodes; NaN passes through.
    if a > 1.0:
        a = 1.0
    elif a < 0.0:
        a = 0.0
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def format_distance(meters: float) -> str:
    """
    Short human label for a distance.

    Whole metres below 1 km ("85m"), kilometres with one decimal above
    ("1.2km").
    """
    if meters < 1000:
        return f"{int(_round_half_up(meters))}m"
    return f"{_round_half_up(meters / 1000, 1):.1f}km"
