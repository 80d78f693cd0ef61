"""Tests for the health endpoint."""

from __future__ import annotations


class TestHealthEndpoint:
    """GET /api/health — always public."""

    def test_reports_catalog_counts(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
        assert data["spot_count"] == 8
        assert data["approved_spot_count"] == 7
        assert data["city_count"] == 8
        assert data["pending_nominations"] == 0

    def test_contains_uptime(self, client):
        data = client.get("/api/health").json()
        assert isinstance(data["uptime_seconds"], int)
        assert data["uptime_seconds"] >= 0
        assert data["started_at"]

    def test_counts_pending_nominations(self, client, nomination_body):
        client.post("/api/nominations", json=nomination_body)
        assert client.get("/api/health").json()["pending_nominations"] == 1

    def test_degraded_without_spots(self, empty_client):
        data = empty_client.get("/api/health").json()
        assert data["status"] == "degraded"
        assert data["spot_count"] == 0
