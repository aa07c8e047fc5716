"""
stayhub.api.routers.hosts

Property owners.

Responsibilities:
- Public list (optional case-insensitive name filter) and detail APIs.
- Authenticated upsert-by-username, update, and cascading delete.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from stayhub.api.deps import db_session
from stayhub.auth.deps import get_principal
from stayhub.auth.models import Principal
from stayhub.db.repositories.hosts import HostRepo
from stayhub.observability.logging import get_logger

router = APIRouter(prefix="/hosts", tags=["hosts"])
log = get_logger(__name__)


class HostUpsertRequest(BaseModel):
    username: str = Field(min_length=1, max_length=128)
    name: str = Field(min_length=1, max_length=256)
    phone_number: str = Field(min_length=1, max_length=64)
    email: str | None = Field(default=None, max_length=256)
    profile_picture: str | None = Field(default=None, max_length=1024)
    about_me: str | None = None


class HostUpdateRequest(BaseModel):
    username: str | None = Field(default=None, min_length=1, max_length=128)
    name: str | None = Field(default=None, min_length=1, max_length=256)
    email: str | None = Field(default=None, max_length=256)
    phone_number: str | None = Field(default=None, max_length=64)
    profile_picture: str | None = Field(default=None, max_length=1024)
    about_me: str | None = None


class HostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    name: str
    email: str | None
    phone_number: str | None
    profile_picture: str | None
    about_me: str | None


@router.get("", response_model=list[HostResponse])
async def list_hosts(
    name: str | None = Query(default=None, max_length=256),
    session: AsyncSession = Depends(db_session),
) -> list[HostResponse]:
    return [HostResponse.model_validate(h) for h in await HostRepo(session).list(name=name)]


@router.get("/{host_id}", response_model=HostResponse)
async def get_host(host_id: str, session: AsyncSession = Depends(db_session)) -> HostResponse:
    host = await HostRepo(session).get(host_id)
    if host is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Host not found")
    return HostResponse.model_validate(host)


@router.post("", status_code=HTTP_201_CREATED)
async def upsert_host(
    body: HostUpsertRequest,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    # Username is the natural key: posting an existing username replaces that host's profile.
    host, created = await HostRepo(session).upsert(
        username=body.username,
        name=body.name,
        phone_number=body.phone_number,
        email=body.email,
        profile_picture=body.profile_picture,
        about_me=body.about_me,
    )
    await session.commit()
    log.info("host_upserted", host_id=host.id, created=created, actor=principal.subject)
    return {
        "message": "Host created successfully" if created else "Host updated successfully",
        "host": HostResponse.model_validate(host).model_dump(),
    }


@router.put("/{host_id}", response_model=HostResponse, dependencies=[Depends(get_principal)])
async def update_host(
    host_id: str,
    body: HostUpdateRequest,
    session: AsyncSession = Depends(db_session),
) -> HostResponse:
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="No fields to update")

    hosts = HostRepo(session)
    host = await hosts.get(host_id)
    if host is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Host not found")

    new_username = changes.get("username")
    if new_username is not None and new_username != host.username:
        if await hosts.get_by_username(new_username) is not None:
            raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="Username already taken")

    await hosts.update(host, changes)
    await session.commit()
    return HostResponse.model_validate(host)


@router.delete("/{host_id}", dependencies=[Depends(get_principal)])
async def delete_host(host_id: str, session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    hosts = HostRepo(session)
    host = await hosts.get(host_id)
    if host is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Host not found")
    username = host.username

    removed = await hosts.delete(host_id)
    await session.commit()
    log.info("host_deleted", host_id=host_id, properties_removed=removed)
    return {"message": f"Host {username} and {removed} associated properties deleted successfully"}
