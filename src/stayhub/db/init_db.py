"""
stayhub.db.init_db

Schema bootstrap for dev, test and the seed command.
Production schemas come from `alembic upgrade head` (alembic/versions).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from stayhub.db import models  # noqa: F401  # register tables on Base.metadata
from stayhub.db.base import Base
from stayhub.observability.logging import get_logger

log = get_logger(__name__)


async def init_db(engine: AsyncEngine) -> None:
    # create_all skips tables that already exist, so reruns are harmless.
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    log.info("schema_ready", tables=sorted(Base.metadata.tables))
