"""
stayhub.api.app

FastAPI app factory for the StayHub API.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Build the Authenticator from the app's Settings (injected, never global).
- Initialize and dispose shared infrastructure (DB engine/session factory).
- Map validation and unhandled errors to the service's JSON error shape.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from stayhub import __version__
from stayhub.api.routers.amenities import router as amenities_router
from stayhub.api.routers.bookings import router as bookings_router
from stayhub.api.routers.health import router as health_router
from stayhub.api.routers.hosts import router as hosts_router
from stayhub.api.routers.login import router as login_router
from stayhub.api.routers.properties import router as properties_router
from stayhub.api.routers.reviews import router as reviews_router
from stayhub.api.routers.users import router as users_router
from stayhub.auth.authenticator import Authenticator
from stayhub.auth.jwt import JwtConfig
from stayhub.db.init_db import init_db
from stayhub.db.session import create_engine, create_sessionmaker
from stayhub.observability.logging import configure_logging, get_logger
from stayhub.observability.middleware import RequestContextMiddleware
from stayhub.observability.sentry import init_sentry
from stayhub.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.env != "dev",
    )
    init_sentry(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        # Create the async DB engine and session factory once and stash them on app.state.
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Dev/test convenience: create tables automatically. Prod runs Alembic migrations.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="StayHub API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.authenticator = Authenticator(
        JwtConfig.from_settings(settings),
        strict_bearer=settings.auth_strict_bearer,
    )

    app.add_middleware(RequestContextMiddleware)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(health_router, tags=["health"])
    app.include_router(login_router)
    app.include_router(users_router)
    app.include_router(hosts_router)
    app.include_router(properties_router)
    app.include_router(amenities_router)
    app.include_router(bookings_router)
    app.include_router(reviews_router)

    return app


async def _validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed input is a caller error: 400, not FastAPI's default 422.
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def _unhandled_error_handler(_: Request, exc: Exception) -> JSONResponse:
    log.error("unhandled_error", error=str(exc), exc_info=exc)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# --- Module Notes -----------------------------------------------------------
# This file is intentionally small: app composition stays here; request handling
# stays in routers, multi-repository logic in services.
