"""Tests for spot and city read endpoints."""

from __future__ import annotations


class TestListSpots:
    """GET /api/spots — approved spots with filters and pagination."""

    def test_returns_only_approved(self, client):
        data = client.get("/api/spots").json()
        assert data["meta"]["total"] == 7
        assert all(s["approved"] for s in data["data"])
        assert "spot_austin_pending_cafe" not in [s["id"] for s in data["data"]]

    def test_featured_first_then_upvotes(self, client):
        ids = [s["id"] for s in client.get("/api/spots").json()["data"]]
        assert ids[:3] == [
            "spot_austin_capital_factory",
            "spot_london_second_home",
            "spot_sf_noisebridge",
        ]

    def test_filter_by_city(self, client):
        data = client.get("/api/spots?city_id=austin").json()
        assert data["meta"]["total"] == 2
        assert {s["city_id"] for s in data["data"]} == {"austin"}

    def test_filter_by_type(self, client):
        data = client.get("/api/spots?type=hacker-house").json()
        assert {s["id"] for s in data["data"]} == {
            "spot_sf_noisebridge",
            "spot_sf_the_hacker_house",
        }

    def test_search_case_insensitive(self, client):
        data = client.get("/api/spots?q=second home").json()
        assert data["meta"]["total"] == 2

    def test_pagination(self, client):
        data = client.get("/api/spots?limit=2&offset=6").json()
        assert data["meta"] == {"total": 7, "limit": 2, "offset": 6}
        assert len(data["data"]) == 1

    def test_invalid_limit(self, client):
        assert client.get("/api/spots?limit=0").status_code == 422


class TestGetSpot:
    """GET /api/spots/{spot_id}"""

    def test_found(self, client):
        resp = client.get("/api/spots/spot_sf_noisebridge")
        assert resp.status_code == 200
        assert resp.json()["data"]["name"] == "Noisebridge"

    def test_unapproved_is_hidden(self, client):
        assert client.get("/api/spots/spot_austin_pending_cafe").status_code == 404

    def test_missing(self, client):
        resp = client.get("/api/spots/nope")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Spot not found"


class TestListCities:
    """GET /api/cities"""

    def test_spot_counts(self, client):
        data = client.get("/api/cities").json()
        assert data["meta"]["total"] == 8
        counts = {c["id"]: c["spot_count"] for c in data["data"]}
        assert counts["austin"] == 2
        assert counts["san-francisco"] == 2
        assert counts["singapore"] == 0
