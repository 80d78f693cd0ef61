#!/usr/bin/env python3
"""
Builder Maps — Fuzzy Name Matching

Scores how alike two venue names are, after stripping case and
punctuation noise ("The Hacker House!" vs "the hacker house").

Scoring order matters and is applied with short-circuits:
    1. identical normalised names        → 1.0
    2. one side empty                     → 0.0
    3. one name contained in the other    → CONTAINMENT_SCORE (0.9)
    4. otherwise normalised Levenshtein   → 1 - edits / longest

The containment shortcut wins even when the edit ratio would be lower,
so "Hacker House" vs "The Hacker House Downtown" scores 0.9.

Dependencies:
    pip install rapidfuzz
"""

from __future__ import annotations

import re

from rapidfuzz.distance import Levenshtein


# Fixed score for substring containment. Heuristic, not a measured value.
CONTAINMENT_SCORE = 0.9

DEFAULT_NAME_THRESHOLD = 0.70

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_MULTI_SPACE = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    """
    Normalize a venue name for comparison.

    Steps:
        1. Lowercase
        2. Remove everything except a-z, 0-9 and whitespace
        3. Collapse whitespace and trim
    """
    if not name:
        return ""

    text = name.lower()
    text = _NON_ALNUM.sub("", text)
    text = _MULTI_SPACE.sub(" ", text).strip()

    return text


# ---------------------------------------------------------------------------
# Scoring functions
# ---------------------------------------------------------------------------


def levenshtein_similarity(a: str, b: str) -> float:
    """
    Normalised Levenshtein similarity between two strings.

    Unit cost for insert, delete and substitute. Returns a value in
    [0.0, 1.0] where 1.0 means identical.
    """
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    max_len = max(len(a), len(b))
    dist = Levenshtein.distance(a, b)
    return 1.0 - (dist / max_len)


def string_similarity(name_a: str, name_b: str) -> float:
    """
    Similarity between two raw venue names in [0.0, 1.0].

    Symmetric. 1.0 only when the normalised forms are equal.
    """
    norm_a = normalize_name(name_a)
    norm_b = normalize_name(name_b)

    if norm_a == norm_b:
        return 1.0
    if not norm_a or not norm_b:
        return 0.0

    if norm_a in norm_b or norm_b in norm_a:
        return CONTAINMENT_SCORE

    return levenshtein_similarity(norm_a, norm_b)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------


def names_are_similar(
    name_a: str,
    name_b: str,
    threshold: float = DEFAULT_NAME_THRESHOLD,
) -> bool:
    """Return True if the two names reach the similarity threshold."""
    return string_similarity(name_a, name_b) >= threshold
