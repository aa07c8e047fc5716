"""
tests.test_smoke

Minimal smoke tests to validate the service can boot and serve core endpoints.

Responsibilities:
- Ensure the FastAPI app starts and DB readiness probe works in test mode.
"""

from __future__ import annotations

import httpx
import pytest

from stayhub import __version__


@pytest.mark.asyncio
async def test_health_endpoints(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "version": __version__}

    r = await client.get("/readyz")
    assert r.status_code == 200
    assert r.json()["status"] == "ready"


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz", headers={"x-request-id": "req-123"})
    assert r.headers["x-request-id"] == "req-123"

    r = await client.get("/healthz")
    assert r.headers["x-request-id"]


@pytest.mark.asyncio
async def test_validation_errors_are_400(client: httpx.AsyncClient) -> None:
    r = await client.post("/login", json={"username": ""})
    assert r.status_code == 400
    assert isinstance(r.json()["detail"], list)


# --- Module Notes -----------------------------------------------------------
# Resource-level behaviour is covered in the per-router test modules.
