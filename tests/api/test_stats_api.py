"""Tests for the statistics and health endpoints."""

import pytest


@pytest.mark.api
class TestStatsEndpoint:
    """GET /api/stats/{name}"""

    def test_example_scenario(self, client):
        created = client.post("/shorten", json={"url": "https://example.com", "name": "ex1"})
        assert created.json()["data"]["short_url"] == "shortmyurl.us.kg/ex1"
        assert created.json()["data"]["visits"] == 0

        redirect = client.get("/ex1", follow_redirects=False)
        assert redirect.headers["location"] == "https://example.com"

        response = client.get("/api/stats/ex1")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["alertType"] == "success"
        assert body["data"]["visits"] == 1
        assert len(body["data"]["visit_history"]) == 1

    def test_fresh_link(self, client):
        client.post("/shorten", json={"url": "https://example.com", "name": "fresh"})

        data = client.get("/api/stats/fresh").json()["data"]

        assert data["visits"] == 0
        assert data["visit_history"] == []

    def test_stats_do_not_count_as_visits(self, client):
        client.post("/shorten", json={"url": "https://example.com", "name": "quiet"})

        client.get("/api/stats/quiet")
        data = client.get("/api/stats/quiet").json()["data"]

        assert data["visits"] == 0

    def test_not_found(self, client):
        response = client.get("/api/stats/missing")

        assert response.status_code == 404
        assert response.json()["message"] == "URL not found"
        assert response.json()["success"] is False

    def test_corrupt_store(self, client, store_path):
        store_path.write_text("garbage", encoding="utf-8")

        response = client.get("/api/stats/ex1")

        assert response.status_code == 500
        assert response.json()["message"] == "Internal server error"


@pytest.mark.api
class TestHealthEndpoints:
    """GET /api/health and /api/health/live"""

    def test_liveness(self, client):
        response = client.get("/api/health/live")

        assert response.status_code == 200
        assert response.json() == {"alive": True}

    def test_health(self, client):
        client.post("/shorten", json={"url": "https://example.com", "name": "ex1"})

        body = client.get("/api/health").json()

        assert body["status"] == "healthy"
        assert body["environment"] == "testing"
        assert body["components"]["store"]["links"] == 1

    def test_health_degraded(self, client, store_path):
        store_path.write_text("{", encoding="utf-8")

        body = client.get("/api/health").json()

        assert body["status"] == "degraded"
        assert body["components"]["store"]["status"] == "unhealthy"
