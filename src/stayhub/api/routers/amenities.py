"""
stayhub.api.routers.amenities

Amenity catalogue.

Responsibilities:
- Public list and detail APIs.
- Authenticated create/rename/delete; deleting unlinks the amenity from properties.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_404_NOT_FOUND

from stayhub.api.deps import db_session
from stayhub.auth.deps import get_principal
from stayhub.db.repositories.amenities import AmenityRepo

router = APIRouter(prefix="/amenities", tags=["amenities"])


class AmenityRequest(BaseModel):
    name: str = Field(min_length=1, max_length=128)


class AmenityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


@router.get("", response_model=list[AmenityResponse])
async def list_amenities(session: AsyncSession = Depends(db_session)) -> list[AmenityResponse]:
    return [AmenityResponse.model_validate(a) for a in await AmenityRepo(session).list()]


@router.get("/{amenity_id}", response_model=AmenityResponse)
async def get_amenity(
    amenity_id: str, session: AsyncSession = Depends(db_session)
) -> AmenityResponse:
    amenity = await AmenityRepo(session).get(amenity_id)
    if amenity is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Amenity not found")
    return AmenityResponse.model_validate(amenity)


@router.post(
    "",
    response_model=AmenityResponse,
    status_code=HTTP_201_CREATED,
    dependencies=[Depends(get_principal)],
)
async def create_amenity(
    body: AmenityRequest, session: AsyncSession = Depends(db_session)
) -> AmenityResponse:
    amenity = await AmenityRepo(session).create(name=body.name)
    await session.commit()
    return AmenityResponse.model_validate(amenity)


@router.put(
    "/{amenity_id}", response_model=AmenityResponse, dependencies=[Depends(get_principal)]
)
async def update_amenity(
    amenity_id: str,
    body: AmenityRequest,
    session: AsyncSession = Depends(db_session),
) -> AmenityResponse:
    amenities = AmenityRepo(session)
    amenity = await amenities.get(amenity_id)
    if amenity is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Amenity not found")
    await amenities.rename(amenity, body.name)
    await session.commit()
    return AmenityResponse.model_validate(amenity)


@router.delete("/{amenity_id}", dependencies=[Depends(get_principal)])
async def delete_amenity(
    amenity_id: str, session: AsyncSession = Depends(db_session)
) -> dict[str, str]:
    amenities = AmenityRepo(session)
    if await amenities.get(amenity_id) is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Amenity not found")
    await amenities.delete(amenity_id)
    await session.commit()
    return {"message": f"Amenity {amenity_id} deleted successfully"}
