"""
stayhub.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (JWT signing secret, Sentry DSN).
- Offer a cached settings instance for the process entrypoint.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Read once at process start and passed explicitly to the app factory.
    Request handlers reach it through `app.state.settings`, never through a global.
    """

    model_config = SettingsConfigDict(env_prefix="STAYHUB_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "stayhub-api"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "stayhub-api"
    jwt_audience: str = "stayhub-clients"
    jwt_secret: str = Field(default="dev-signing-secret-change-me-0123456789", repr=False)
    jwt_ttl_minutes: int = Field(default=7 * 60, ge=1)
    # When true, an Authorization value without the "Bearer " prefix is treated as absent.
    auth_strict_bearer: bool = False

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./stayhub.db"

    # Error reporting (disabled unless a DSN is configured)
    sentry_dsn: str | None = Field(default=None, repr=False)
    sentry_traces_sample_rate: float = Field(default=1.0, ge=0.0, le=1.0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars when the entrypoint or alembic asks twice.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The app factory takes a Settings instance so tests can build apps with fixture
# secrets and throwaway databases side by side.
