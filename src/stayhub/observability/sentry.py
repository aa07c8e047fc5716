"""
stayhub.observability.sentry

Optional error reporting.

Responsibilities:
- Initialise sentry-sdk with the FastAPI integration when a DSN is configured.
"""

from __future__ import annotations

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

from stayhub.observability.logging import get_logger
from stayhub.settings import Settings

log = get_logger(__name__)


def init_sentry(settings: Settings) -> bool:
    dsn = (settings.sentry_dsn or "").strip()
    if not dsn:
        log.debug("sentry_disabled")
        return False

    sentry_sdk.init(
        dsn=dsn,
        environment=settings.env,
        traces_sample_rate=settings.sentry_traces_sample_rate,
        integrations=[FastApiIntegration()],
        send_default_pii=False,
    )
    log.info("sentry_enabled", environment=settings.env)
    return True


# --- Module Notes -----------------------------------------------------------
# Called once from `api.app.create_app`, after logging is configured.
