#!/usr/bin/env python3
"""
Builder Maps — Directory API

FastAPI server for the community map of coworking spaces, cafes, hacker
houses and community venues.  Serves the spot catalog from JSON files and
takes new spot nominations, warning about likely duplicates.

Usage:
    uvicorn platform_api.app:app --reload --port 8000
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from deduplication.algorithms.duplicate_checker import CheckerConfig

from .helpers import load_catalog
from .routes import health, links, nominations, spots

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Builder Maps",
    version="0.1.0",
    description="Directory API for builder-friendly spots across cities",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(spots.router)
app.include_router(nominations.router)
app.include_router(links.router)

app.state.server_started_at = datetime.now(timezone.utc)
app.state.checker_config = CheckerConfig()


@app.on_event("startup")
async def startup():
    load_catalog()
    app.state.checker_config = CheckerConfig.default()
    config = app.state.checker_config
    logger.info(
        "Duplicate thresholds: name >= %.2f, distance <= %.0fm",
        config.name_threshold,
        config.distance_threshold_m,
    )
