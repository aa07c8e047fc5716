"""
stayhub.api.routers.users

Guest accounts.

Responsibilities:
- Public read APIs (never exposing the password hash).
- Authenticated create/update/delete; deleting a user removes their reviews.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from stayhub.api.deps import db_session
from stayhub.auth.deps import get_principal
from stayhub.auth.models import Principal
from stayhub.auth.passwords import hash_password
from stayhub.db.repositories.users import UserRepo
from stayhub.observability.logging import get_logger

router = APIRouter(prefix="/users", tags=["users"])
log = get_logger(__name__)

_TAKEN = "Username or email already taken"


class UserCreateRequest(BaseModel):
    username: str = Field(min_length=1, max_length=128)
    password: str = Field(min_length=1)
    name: str | None = Field(default=None, max_length=256)
    email: str | None = Field(default=None, max_length=256)
    phone_number: str | None = Field(default=None, max_length=64)
    profile_picture: str | None = Field(default=None, max_length=1024)


class UserUpdateRequest(BaseModel):
    username: str | None = Field(default=None, min_length=1, max_length=128)
    password: str | None = Field(default=None, min_length=1)
    name: str | None = Field(default=None, max_length=256)
    email: str | None = Field(default=None, max_length=256)
    phone_number: str | None = Field(default=None, max_length=64)
    profile_picture: str | None = Field(default=None, max_length=1024)


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    name: str | None
    email: str | None
    phone_number: str | None
    profile_picture: str | None


@router.get("", response_model=list[UserResponse])
async def list_users(session: AsyncSession = Depends(db_session)) -> list[UserResponse]:
    return [UserResponse.model_validate(u) for u in await UserRepo(session).list()]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, session: AsyncSession = Depends(db_session)) -> UserResponse:
    user = await UserRepo(session).get(user_id)
    if user is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse.model_validate(user)


@router.post("", response_model=UserResponse, status_code=HTTP_201_CREATED)
async def create_user(
    body: UserCreateRequest,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> UserResponse:
    users = UserRepo(session)
    if await users.find_conflicting(username=body.username, email=body.email) is not None:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=_TAKEN)

    try:
        user = await users.create(
            username=body.username,
            password_hash=hash_password(body.password),
            name=body.name,
            email=body.email,
            phone_number=body.phone_number,
            profile_picture=body.profile_picture,
        )
        await session.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent signup for the same username/email.
        await session.rollback()
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=_TAKEN) from e

    log.info("user_created", user_id=user.id, actor=principal.subject)
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse, dependencies=[Depends(get_principal)])
async def update_user(
    user_id: str,
    body: UserUpdateRequest,
    session: AsyncSession = Depends(db_session),
) -> UserResponse:
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="No fields to update")

    users = UserRepo(session)
    user = await users.get(user_id)
    if user is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="User not found")

    clash = await users.find_conflicting(
        username=changes.get("username"), email=changes.get("email"), exclude_id=user_id
    )
    if clash is not None:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=_TAKEN)

    if "password" in changes:
        changes["password_hash"] = hash_password(changes.pop("password"))

    try:
        await users.update(user, changes)
        await session.commit()
    except IntegrityError as e:
        await session.rollback()
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=_TAKEN) from e
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", dependencies=[Depends(get_principal)])
async def delete_user(user_id: str, session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    users = UserRepo(session)
    user = await users.get(user_id)
    if user is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="User not found")
    username = user.username

    try:
        await users.delete(user_id)
        await session.commit()
    except IntegrityError as e:
        # Bookings still reference the user.
        await session.rollback()
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST,
            detail="Unable to delete user while bookings reference it",
        ) from e
    return {"message": f"User {username} deleted successfully"}


# --- Module Notes -----------------------------------------------------------
# Every mutating route depends on `get_principal`; reads are public.
