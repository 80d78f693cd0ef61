"""Shared helpers and in-process catalog state for the Builder Maps API."""

from __future__ import annotations

import json
import logging
import os
import random
import string
import time
from datetime import datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Path constants
# ---------------------------------------------------------------------------

PACKAGE_DIR = Path(__file__).resolve().parent
DATA_DIR = Path(os.environ.get("BUILDER_MAPS_DATA_DIR", str(PACKAGE_DIR / "data")))

# ---------------------------------------------------------------------------
# Catalog state (populated by load_catalog)
# ---------------------------------------------------------------------------

_SPOTS: list[dict[str, Any]] = []
_INDEX: dict[str, dict[str, Any]] = {}
_CITIES: dict[str, dict[str, Any]] = {}
_NOMINATIONS: list[dict[str, Any]] = []

_BASE36 = string.digits + string.ascii_lowercase


def _read_json_list(path: Path) -> list[dict]:
    if not path.exists():
        logger.warning("Catalog file not found: %s", path)
        return []
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        logger.warning("Ignoring %s: expected a JSON list", path)
        return []
    return data


def load_catalog(data_dir: Path | None = None) -> None:
    """
    Load cities and spots from JSON files in the data directory.

    Spots without an id are dropped; the first record wins when ids repeat.
    """
    global _SPOTS, _INDEX, _CITIES  # noqa: PLW0603

    data_dir = data_dir or DATA_DIR

    cities = _read_json_list(data_dir / "cities.json")
    _CITIES = {c["id"]: c for c in cities if c.get("id")}
    logger.info("Loaded %d cities from %s", len(_CITIES), data_dir)

    seen: set[str] = set()
    unique: list[dict] = []
    for s in _read_json_list(data_dir / "spots.json"):
        sid = s.get("id")
        if sid and sid not in seen:
            seen.add(sid)
            unique.append(s)

    _SPOTS = unique
    _INDEX = {s["id"]: s for s in _SPOTS}
    logger.info("Total unique spots loaded: %d", len(_SPOTS))


def get_spots() -> list[dict[str, Any]]:
    """Access every loaded spot, approved or not."""
    return _SPOTS


def get_index() -> dict[str, dict[str, Any]]:
    """Access the spot index keyed by id."""
    return _INDEX


def get_cities() -> dict[str, dict[str, Any]]:
    """Access the city table keyed by id."""
    return _CITIES


def approved_spots(city_id: str | None = None) -> list[dict[str, Any]]:
    """Approved spots, optionally limited to one city."""
    return [
        s for s in _SPOTS
        if s.get("approved") and (city_id is None or s.get("city_id") == city_id)
    ]


# ---------------------------------------------------------------------------
# Nominations (in-process queue)
# ---------------------------------------------------------------------------


def get_nominations() -> list[dict[str, Any]]:
    return _NOMINATIONS


def add_nomination(nomination: dict[str, Any]) -> None:
    _NOMINATIONS.append(nomination)


def clear_nominations() -> None:
    _NOMINATIONS.clear()


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def generate_id(prefix: str, length: int = 7) -> str:
    """Readable unique id: ``{prefix}_{epoch_ms}_{base36 suffix}``."""
    suffix = "".join(random.choice(_BASE36) for _ in range(length))
    return f"{prefix}_{int(time.time() * 1000)}_{suffix}"


def iso(dt) -> str | None:
    """Convert a datetime to ISO string."""
    if dt is None:
        return None
    if isinstance(dt, datetime):
        return dt.isoformat()
    return str(dt)
