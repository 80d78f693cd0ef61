#!/usr/bin/env python3
"""
Builder Maps — Duplicate Spot Checker

Flags existing spots that are plausibly the same real-world place as a
newly nominated one.  A candidate qualifies when EITHER signal fires:

    - name similarity >= name_threshold   (default 0.7)
    - distance        <= distance_threshold_m (default 100 m)

Only spots in the same city are ever compared.  Matches are ranked by
name similarity, except that similarities within ``tie_band`` of each
other are ordered by distance instead.

Dependencies:
    pip install rapidfuzz pyyaml
"""

from __future__ import annotations

import functools
import logging
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Sequence

import yaml

from .geo_proximity import CoordinateLike, format_distance, haversine_m
from .name_similarity import DEFAULT_NAME_THRESHOLD, string_similarity

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Defaults (overridden by duplicate_rules.yaml at runtime)
# ---------------------------------------------------------------------------

DEFAULT_DISTANCE_THRESHOLD_M = 100.0

# Similarities closer than this are treated as equal when ranking.
DEFAULT_TIE_BAND = 0.1

BUNDLED_CONFIG = Path(__file__).resolve().parent.parent / "config" / "duplicate_rules.yaml"


# ---------------------------------------------------------------------------
# Configuration loader
# ---------------------------------------------------------------------------


@dataclass
class CheckerConfig:
    """Thresholds for duplicate detection, loaded from duplicate_rules.yaml."""

    name_threshold: float = DEFAULT_NAME_THRESHOLD
    distance_threshold_m: float = DEFAULT_DISTANCE_THRESHOLD_M
    tie_band: float = DEFAULT_TIE_BAND

    @classmethod
    def from_yaml(cls, path: str | Path) -> "CheckerConfig":
        """Load configuration from a YAML file."""
        with open(path, "r") as f:
            raw = yaml.safe_load(f) or {}

        thresholds = raw.get("thresholds", {})
        ranking = raw.get("ranking", {})

        return cls(
            name_threshold=float(thresholds.get("name", DEFAULT_NAME_THRESHOLD)),
            distance_threshold_m=float(thresholds.get("distance_m", DEFAULT_DISTANCE_THRESHOLD_M)),
            tie_band=float(ranking.get("tie_band", DEFAULT_TIE_BAND)),
        )

    @classmethod
    def default(cls) -> "CheckerConfig":
        """
        Resolve the active configuration.

        BUILDER_MAPS_DEDUP_CONFIG wins, then the bundled rules file, then
        the hard-coded defaults.
        """
        override = os.environ.get("BUILDER_MAPS_DEDUP_CONFIG")
        if override:
            return cls.from_yaml(override)
        if BUNDLED_CONFIG.exists():
            return cls.from_yaml(BUNDLED_CONFIG)
        return cls()


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass
class DuplicateMatch:
    """One existing spot that may duplicate the nominated one."""

    spot: Mapping[str, Any]
    similarity: float
    distance: float  # metres
    reason: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "spot": dict(self.spot),
            "similarity": round(self.similarity, 4),
            "distance_m": round(self.distance, 1),
            "reason": self.reason,
        }


@dataclass
class DuplicateCheckResult:
    """Outcome of a duplicate check: a flag plus ranked matches."""

    is_duplicate: bool
    matches: list[DuplicateMatch] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_duplicate": self.is_duplicate,
            "matches": [m.to_dict() for m in self.matches],
        }


# ---------------------------------------------------------------------------
# Reason text and ranking
# ---------------------------------------------------------------------------


def build_reason(
    similarity: float,
    distance: float,
    *,
    name_hit: bool,
    distance_hit: bool,
) -> str:
    """
    Human-readable explanation of why a spot was flagged.

        name only      → "Name is 85% similar"
        distance only  → "Only 42m away"
        both           → "Name is 85% similar, and only 42m away"
    """
    reason = ""
    if name_hit:
        percent = int(math.floor(similarity * 100 + 0.5))
        reason = f"Name is {percent}% similar"

    if distance_hit:
        label = format_distance(distance)
        reason = f"{reason}, and only {label} away" if reason else f"Only {label} away"

    return reason


def _compare_matches(a: DuplicateMatch, b: DuplicateMatch, tie_band: float) -> int:
    if abs(a.similarity - b.similarity) > tie_band:
        return -1 if a.similarity > b.similarity else 1
    if a.distance < b.distance:
        return -1
    if a.distance > b.distance:
        return 1
    return 0


def rank_matches(
    matches: Sequence[DuplicateMatch],
    tie_band: float = DEFAULT_TIE_BAND,
) -> list[DuplicateMatch]:
    """
    Order matches by relevance.

    Pairwise rule, not a two-key sort: a clearly higher similarity wins;
    similarities within ``tie_band`` are ordered by ascending distance.
    """
    key = functools.cmp_to_key(lambda a, b: _compare_matches(a, b, tie_band))
    return sorted(matches, key=key)


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


def check_for_duplicates(
    name: str,
    coordinates: CoordinateLike,
    city_id: str,
    existing_spots: Sequence[Mapping[str, Any]],
    *,
    name_threshold: float | None = None,
    distance_threshold_m: float | None = None,
    config: CheckerConfig | None = None,
    name_key: str = "name",
    coordinates_key: str = "coordinates",
    city_key: str = "city_id",
) -> DuplicateCheckResult:
    """
    Check whether a nominated spot may duplicate an existing one.

    Parameters
    ----------
    name : str
        Raw name of the nominated spot.
    coordinates : Coordinate or [lng, lat]
        Location of the nominated spot.
    city_id : str
        City of the nominated spot.  Spots in other cities are ignored.
    existing_spots : sequence of mappings
        Catalog records exposing name, coordinates and city fields.
    name_threshold, distance_threshold_m : float, optional
        Per-call overrides of the configured thresholds.
    config : CheckerConfig, optional
        Uses defaults if not provided.
    name_key, coordinates_key, city_key : str
        Field names in the spot mappings.

    Returns
    -------
    DuplicateCheckResult with matches ranked most relevant first.
    """
    if config is None:
        config = CheckerConfig()
    if name_threshold is None:
        name_threshold = config.name_threshold
    if distance_threshold_m is None:
        distance_threshold_m = config.distance_threshold_m

    spots_in_city = [s for s in existing_spots if s.get(city_key) == city_id]

    matches: list[DuplicateMatch] = []
    for spot in spots_in_city:
        similarity = string_similarity(name, spot.get(name_key) or "")
        distance = haversine_m(coordinates, spot[coordinates_key])

        name_hit = similarity >= name_threshold
        distance_hit = distance <= distance_threshold_m

        if name_hit or distance_hit:
            matches.append(
                DuplicateMatch(
                    spot=spot,
                    similarity=similarity,
                    distance=distance,
                    reason=build_reason(
                        similarity,
                        distance,
                        name_hit=name_hit,
                        distance_hit=distance_hit,
                    ),
                )
            )

    ranked = rank_matches(matches, config.tie_band)

    logger.debug(
        "Duplicate check for %r in %s: %d candidates, %d matches",
        name,
        city_id,
        len(spots_in_city),
        len(ranked),
    )

    return DuplicateCheckResult(is_duplicate=bool(ranked), matches=ranked)


# ---------------------------------------------------------------------------
# Batch processing
# ---------------------------------------------------------------------------


def check_many(
    nominations: Sequence[Mapping[str, Any]],
    existing_spots: Sequence[Mapping[str, Any]],
    config: CheckerConfig | None = None,
) -> list[DuplicateCheckResult]:
    """
    Run ``check_for_duplicates`` for each nomination record.

    Nomination records use the same ``name`` / ``coordinates`` /
    ``city_id`` keys as catalog spots.  Results keep input order.
    """
    return [
        check_for_duplicates(
            n["name"],
            n["coordinates"],
            n["city_id"],
            existing_spots,
            config=config,
        )
        for n in nominations
    ]
