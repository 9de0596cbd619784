"""Error envelopes, health and security headers."""

import pytest

pytestmark = pytest.mark.integration


async def test_http_error_includes_request_id(client):
    response = await client.get("/api/v1/nonexistent-endpoint")

    assert response.status_code == 404
    body = response.json()
    assert body["detail"]
    assert body["request_id"]


async def test_app_error_includes_request_id(client, owner_headers):
    response = await client.post("/api/briefing/delete-temp-user", json={}, headers=owner_headers)

    assert response.status_code == 400
    body = response.json()
    assert body["error"]
    assert body["request_id"]


async def test_request_id_is_propagated(client):
    response = await client.get("/health", headers={"X-Request-ID": "8f14e45f-ceea-467f-a0e6-2f6e1b9b8f3a"})
    assert response.headers["X-Request-ID"] == "8f14e45f-ceea-467f-a0e6-2f6e1b9b8f3a"


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] == "healthy"
    assert response.json()["identity"] == "configured"


async def test_security_headers(client):
    response = await client.get("/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
