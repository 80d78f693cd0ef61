"""Builder Maps — Deduplication Algorithms."""

from .name_similarity import (
    CONTAINMENT_SCORE,
    levenshtein_similarity,
    names_are_similar,
    normalize_name,
    string_similarity,
)
from .geo_proximity import (
    Coordinate,
    format_distance,
    haversine_m,
)
from .duplicate_checker import (
    CheckerConfig,
    DuplicateCheckResult,
    DuplicateMatch,
    build_reason,
    check_for_duplicates,
    check_many,
    rank_matches,
)

__all__ = [
    "CONTAINMENT_SCORE",
    "levenshtein_similarity",
    "names_are_similar",
    "normalize_name",
    "string_similarity",
    "Coordinate",
    "format_distance",
    "haversine_m",
    "CheckerConfig",
    "DuplicateCheckResult",
    "DuplicateMatch",
    "build_reason",
    "check_for_duplicates",
    "check_many",
    "rank_matches",
]
