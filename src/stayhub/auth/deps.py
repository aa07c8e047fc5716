"""
stayhub.auth.deps

FastAPI dependency functions for authentication.

Responsibilities:
- Resolve the Authenticator built at startup.
- Convert the Authorization header into a typed `Principal` or a uniform 401.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request
from starlette.status import HTTP_401_UNAUTHORIZED

from stayhub.auth.authenticator import AuthenticationError, Authenticator
from stayhub.auth.models import Principal
from stayhub.observability.logging import get_logger

log = get_logger(__name__)

UNAUTHORIZED_DETAIL = "Invalid or missing credentials"


def authenticator_from_app(request: Request) -> Authenticator:
    # Built once in `stayhub.api.app.create_app` from the app's Settings.
    return request.app.state.authenticator  # type: ignore[attr-defined]


def get_principal(
    request: Request,
    authenticator: Authenticator = Depends(authenticator_from_app),
) -> Principal:
    try:
        return authenticator.authenticate(request.headers.get("authorization"))
    except AuthenticationError as e:
        # Reason stays internal; the response is the same for every variant.
        log.info("auth_rejected", reason=e.reason, error=str(e))
        raise HTTPException(
            status_code=HTTP_401_UNAUTHORIZED,
            detail=UNAUTHORIZED_DETAIL,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


# --- Module Notes -----------------------------------------------------------
# Mutating routes declare `dependencies=[Depends(get_principal)]` so the gate runs
# before any endpoint body or repository call.
