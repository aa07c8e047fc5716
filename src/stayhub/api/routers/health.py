"""
stayhub.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) with DB connectivity validation.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from stayhub import __version__
from stayhub.api.deps import db_session
from stayhub.observability.logging import get_logger

router = APIRouter()
log = get_logger(__name__)


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness: process is up and serving HTTP.
    return {"status": "ok", "version": __version__}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        log.warning("readiness_failed", error=str(e))
        raise HTTPException(
            status_code=HTTP_503_SERVICE_UNAVAILABLE, detail="Database unavailable"
        ) from e
    return {"status": "ready"}
