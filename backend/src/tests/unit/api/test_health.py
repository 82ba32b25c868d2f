"""Tests for the health check endpoint."""

from unittest.mock import AsyncMock, patch


def test_healthy(client) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == "0.1.0"
    assert body["checks"]["database"]["status"] == "healthy"


def test_unreachable_database_reports_503(client) -> None:
    with patch("community_hub.api.health.check_db_connection", AsyncMock(return_value=False)):
        response = client.get("/api/health")

    assert response.status_code == 503
    assert response.json()["checks"]["database"] == {"status": "unhealthy"}


def test_request_id_echoed(client) -> None:
    response = client.get("/api/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
    assert response.headers["X-Response-Time"].endswith("s")
