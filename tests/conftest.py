"""
tests.conftest

Shared fixtures: an app bound to a throwaway SQLite file, an in-process HTTP
client, and credentials signed with the app's own JwtConfig.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession

from stayhub.api.app import create_app
from stayhub.auth.jwt import JwtConfig, issue_token
from stayhub.settings import Settings

FIXTURE_SECRET = "fixture-signing-secret-0123456789abcdef"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'stayhub-test.db'}",
        jwt_secret=FIXTURE_SECRET,
        sentry_dsn=None,
    )


@pytest.fixture
def jwt_cfg(settings: Settings) -> JwtConfig:
    return JwtConfig.from_settings(settings)


@pytest.fixture
def token(jwt_cfg: JwtConfig) -> str:
    return issue_token(cfg=jwt_cfg, subject="user-fixture", username="fixture")


@pytest.fixture
def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    application = create_app(settings=settings)
    # httpx ASGITransport does not drive lifespan; enter it explicitly.
    async with application.router.lifespan_context(application):
        yield application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def session(app: FastAPI) -> AsyncIterator[AsyncSession]:
    async with app.state.sessionmaker() as s:
        yield s


@pytest_asyncio.fixture
async def host(client: httpx.AsyncClient, auth_headers: dict[str, str]) -> dict:
    r = await client.post(
        "/hosts",
        json={"username": "jdoe", "name": "Jane Doe", "phone_number": "+15550100"},
        headers=auth_headers,
    )
    assert r.status_code == 201
    return r.json()["host"]


@pytest_asyncio.fixture
async def user(client: httpx.AsyncClient, auth_headers: dict[str, str]) -> dict:
    r = await client.post(
        "/users",
        json={"username": "guest1", "password": "hunter22", "email": "guest1@example.com"},
        headers=auth_headers,
    )
    assert r.status_code == 201
    return r.json()


@pytest_asyncio.fixture
async def listing(client: httpx.AsyncClient, auth_headers: dict[str, str], host: dict) -> dict:
    r = await client.post(
        "/properties",
        json={
            "title": "Cozy Loft",
            "host_id": host["id"],
            "location": "Lisbon",
            "price_per_night": 120.0,
        },
        headers=auth_headers,
    )
    assert r.status_code == 201
    return r.json()
