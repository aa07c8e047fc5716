"""
stayhub.api.routers.login

Credential issuance.

Responsibilities:
- Verify a username/password pair against the stored Argon2 hash.
- Sign a bearer token with the same JwtConfig the Authenticator verifies with.
"""

from __future__ import annotations

from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_401_UNAUTHORIZED

from stayhub.api.deps import db_session, settings_dep
from stayhub.auth.jwt import JwtConfig, issue_token
from stayhub.auth.passwords import verify_password
from stayhub.db.repositories.users import UserRepo
from stayhub.observability.logging import get_logger
from stayhub.settings import Settings

router = APIRouter(prefix="/login", tags=["auth"])
log = get_logger(__name__)


class LoginRequest(BaseModel):
    username: str = Field(min_length=1, max_length=128)
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"


@router.post("", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> LoginResponse:
    user = await UserRepo(session).get_by_username(body.username)
    # Same answer for unknown user and wrong password.
    if user is None or not verify_password(body.password, user.password_hash):
        log.info("login_failed", username=body.username, known_user=user is not None)
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    token = issue_token(
        cfg=JwtConfig.from_settings(settings),
        subject=user.id,
        username=user.username,
        ttl=timedelta(minutes=settings.jwt_ttl_minutes),
    )
    log.info("login_succeeded", user_id=user.id)
    return LoginResponse(token=token)
