"""Shared fixtures for the API test suite.

The catalog is loaded from the bundled JSON files and the nomination queue
is cleared for every test.  The client is created without entering its
context manager, so the startup hook never runs and the state seeded here
is what the routes see.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from starlette.testclient import TestClient

from deduplication.algorithms.duplicate_checker import CheckerConfig
from platform_api import helpers
from platform_api.app import app


@pytest.fixture()
def client():
    """Test client over the bundled catalog with default thresholds."""
    helpers.load_catalog(helpers.PACKAGE_DIR / "data")
    helpers.clear_nominations()
    app.state.server_started_at = datetime.now(timezone.utc)
    app.state.checker_config = CheckerConfig()

    yield TestClient(app, raise_server_exceptions=False)

    helpers.clear_nominations()


@pytest.fixture()
def empty_client(client, monkeypatch):
    """Client whose catalog has no spots at all."""
    monkeypatch.setattr(helpers, "_SPOTS", [])
    monkeypatch.setattr(helpers, "_INDEX", {})
    return client


@pytest.fixture()
def nomination_body():
    """A valid nomination near Capital Factory with a different name."""
    return {
        "name": "Brewtopia Lounge",
        "city_id": "austin",
        "types": ["cafe"],
        "description": "Quiet upstairs lounge with good coffee and long tables.",
        "lng": -97.9,
        "lat": 30.5,
    }
