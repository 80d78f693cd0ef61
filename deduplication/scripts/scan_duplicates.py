#!/usr/bin/env python3
"""
Builder Maps — Catalog Duplicate Scan

Loads a spot catalog, compares every pair of spots within the same city
with the duplicate checker, and writes a report of likely duplicate
pairs for moderators to review.

Strategy:
    1. Load the catalog JSON (list of spot records)
    2. Block by city (spots in different cities are never compared)
    3. Within each city, check each spot against the spots after it
    4. Output: pair report + per-city summary

Usage:
    python -m deduplication.scripts.scan_duplicates \
        --input platform_api/data/spots.json --output-dir output/scan/

Dependencies:
    pip install rapidfuzz pyyaml
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from collections import defaultdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from deduplication.algorithms.duplicate_checker import (
    CheckerConfig,
    check_for_duplicates,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data loading
# ---------------------------------------------------------------------------


def load_catalog(path: str | Path) -> list[dict[str, Any]]:
    """Load spot records, skipping any without a name, city or coordinates."""
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)

    usable = []
    for r in records:
        coords = r.get("coordinates")
        if not r.get("name") or not r.get("city_id") or not coords or len(coords) != 2:
            logger.warning("Skipping spot %s: missing name, city or coordinates", r.get("id"))
            continue
        usable.append(r)

    logger.info("Loaded %d usable spots from %s", len(usable), path)
    return usable


def group_by_city(spots: list[dict]) -> dict[str, list[dict]]:
    """Group spots by city_id for blocking."""
    groups: dict[str, list[dict]] = defaultdict(list)
    for s in spots:
        groups[s["city_id"]].append(s)
    return dict(groups)


# ---------------------------------------------------------------------------
# Pair detection
# ---------------------------------------------------------------------------


def find_duplicate_pairs(
    spots: list[dict[str, Any]],
    config: CheckerConfig | None = None,
) -> list[dict[str, Any]]:
    """
    Return likely duplicate pairs across the catalog.

    Each unordered pair is reported once, ordered by city then by the
    checker's ranking for the first spot of the pair.
    """
    if config is None:
        config = CheckerConfig()

    pairs: list[dict[str, Any]] = []
    for city_id, city_spots in sorted(group_by_city(spots).items()):
        for i, spot in enumerate(city_spots):
            later = city_spots[i + 1:]
            if not later:
                continue
            result = check_for_duplicates(
                spot["name"],
                spot["coordinates"],
                city_id,
                later,
                config=config,
            )
            for match in result.matches:
                pairs.append({
                    "city_id": city_id,
                    "spot_a_id": spot.get("id"),
                    "spot_a_name": spot["name"],
                    "spot_b_id": match.spot.get("id"),
                    "spot_b_name": match.spot.get("name"),
                    "similarity": round(match.similarity, 4),
                    "distance_m": round(match.distance, 1),
                    "reason": match.reason,
                })
    return pairs


# ---------------------------------------------------------------------------
# Main pipeline
# ---------------------------------------------------------------------------


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Scan the Builder Maps spot catalog for likely duplicates",
    )
    parser.add_argument(
        "--input",
        required=True,
        help="Path to the spot catalog JSON",
    )
    parser.add_argument(
        "--output-dir",
        default="output/scan",
        help="Directory for the scan report (default: output/scan/)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to duplicate_rules.yaml (default: bundled rules)",
    )
    parser.add_argument(
        "--name-threshold",
        type=float,
        default=None,
        help="Override the name similarity threshold (0-1)",
    )
    parser.add_argument(
        "--distance-threshold",
        type=float,
        default=None,
        help="Override the distance threshold in metres",
    )
    return parser.parse_args(argv)


def write_report(pairs: list[dict], spot_count: int, output_dir: str) -> Path:
    """Write the pair report and summary; return the report path."""
    out_path = Path(output_dir)
    out_path.mkdir(parents=True, exist_ok=True)

    ts = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")

    by_city: dict[str, int] = defaultdict(int)
    for p in pairs:
        by_city[p["city_id"]] += 1

    report = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "spots_scanned": spot_count,
        "pairs_found": len(pairs),
        "pairs_by_city": dict(sorted(by_city.items())),
        "pairs": pairs,
    }

    report_path = out_path / f"duplicate_scan_{ts}.json"
    with open(report_path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, ensure_ascii=False)
    logger.info("Wrote %d pairs to %s", len(pairs), report_path)
    return report_path


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    args = parse_args(argv)

    config = CheckerConfig.from_yaml(args.config) if args.config else CheckerConfig.default()
    if args.name_threshold is not None:
        config.name_threshold = args.name_threshold
    if args.distance_threshold is not None:
        config.distance_threshold_m = args.distance_threshold
    logger.info(
        "Thresholds: name >= %.2f, distance <= %.0fm, tie band %.2f",
        config.name_threshold,
        config.distance_threshold_m,
        config.tie_band,
    )

    spots = load_catalog(args.input)
    if not spots:
        logger.error("No spots found. Exiting.")
        return 1

    t0 = time.time()
    pairs = find_duplicate_pairs(spots, config)
    logger.info("Scan complete in %.2fs — %d likely duplicate pairs", time.time() - t0, len(pairs))

    write_report(pairs, len(spots), args.output_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
