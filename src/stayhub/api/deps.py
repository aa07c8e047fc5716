"""
stayhub.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings and DB sessions.
- Shared reference checks for bookings and reviews.
- Encapsulate app.state access patterns (settings/sessionmaker).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from starlette.status import HTTP_404_NOT_FOUND

from stayhub.db.repositories.properties import PropertyRepo
from stayhub.db.repositories.users import UserRepo
from stayhub.settings import Settings


def settings_dep(request: Request) -> Settings:
    # The Settings instance the app was built with, not a fresh env read.
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # The sessionmaker is created in the lifespan of `stayhub.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Routers commit explicitly; anything uncommitted rolls back.
    async with session_factory() as session:
        yield session


async def ensure_references(
    session: AsyncSession, *, user_id: str | None, property_id: str | None
) -> None:
    # Bookings and reviews point at a user and a property; unknown ids are a 404.
    if user_id is not None and await UserRepo(session).get(user_id) is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="User not found")
    if property_id is not None and not await PropertyRepo(session).exists(property_id):
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Property not found")


# --- Module Notes -----------------------------------------------------------
# Auth dependencies live in `stayhub.auth.deps`.
