"""
stayhub.api.routers.properties

Listings.

Responsibilities:
- Public list (location / price / amenity filters) and detail APIs.
- Authenticated create via PropertyService (identifier allocated from the title).
- Authenticated update (identifier never changes) and cascading delete.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import (
    HTTP_201_CREATED,
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
)

from stayhub.api.deps import db_session
from stayhub.auth.deps import get_principal
from stayhub.auth.models import Principal
from stayhub.db.repositories.amenities import AmenityRepo
from stayhub.db.repositories.hosts import HostRepo
from stayhub.db.repositories.properties import PropertyRepo
from stayhub.observability.logging import get_logger
from stayhub.services.identifiers import IdentifierBaseEmpty, base_identifier
from stayhub.services.properties import (
    AmenityNotFound,
    HostNotFound,
    IdentifierTaken,
    PropertyService,
)

router = APIRouter(prefix="/properties", tags=["properties"])
log = get_logger(__name__)

# Leaves room for a "-N" suffix within the 255-character identifier column.
MAX_TITLE_FOR_IDENTIFIER = 240


class AmenitySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class PropertyCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=MAX_TITLE_FOR_IDENTIFIER)
    host_id: str = Field(min_length=1)
    description: str | None = None
    location: str | None = Field(default=None, max_length=256)
    price_per_night: float = Field(ge=0)
    bedroom_count: int = Field(default=0, ge=0)
    bathroom_count: int = Field(default=1, ge=0)
    max_guest_count: int = Field(default=1, ge=1)
    rating: float = Field(default=0.0, ge=0, le=5)
    amenity_ids: list[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def title_yields_identifier(cls, v: str) -> str:
        # IdentifierBaseEmpty is a ValueError, so this surfaces as a 400 before any DB access.
        base_identifier(v)
        return v


class PropertyUpdateRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=256)
    host_id: str | None = Field(default=None, min_length=1)
    description: str | None = None
    location: str | None = Field(default=None, max_length=256)
    price_per_night: float | None = Field(default=None, ge=0)
    bedroom_count: int | None = Field(default=None, ge=0)
    bathroom_count: int | None = Field(default=None, ge=0)
    max_guest_count: int | None = Field(default=None, ge=1)
    rating: float | None = Field(default=None, ge=0, le=5)
    amenity_ids: list[str] | None = None


class PropertyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    host_id: str
    title: str
    description: str | None
    location: str | None
    price_per_night: float
    bedroom_count: int
    bathroom_count: int
    max_guest_count: int
    rating: float
    amenities: list[AmenitySummary]


@router.get("", response_model=list[PropertyResponse])
async def list_properties(
    location: str | None = Query(default=None, max_length=256),
    price_per_night: float | None = Query(default=None, ge=0),
    amenities: str | None = Query(default=None, description="Comma-separated amenity names"),
    session: AsyncSession = Depends(db_session),
) -> list[PropertyResponse]:
    names = [n.strip() for n in amenities.split(",") if n.strip()] if amenities else []
    props = await PropertyRepo(session).list(
        location=location, price_per_night=price_per_night, amenity_names=names
    )
    return [PropertyResponse.model_validate(p) for p in props]


@router.get("/{property_id}", response_model=PropertyResponse)
async def get_property(
    property_id: str, session: AsyncSession = Depends(db_session)
) -> PropertyResponse:
    prop = await PropertyRepo(session).get(property_id)
    if prop is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Property not found")
    return PropertyResponse.model_validate(prop)


@router.post("", response_model=PropertyResponse, status_code=HTTP_201_CREATED)
async def create_property(
    body: PropertyCreateRequest,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> PropertyResponse:
    svc = PropertyService(session=session)
    try:
        prop = await svc.create(
            title=body.title,
            host_id=body.host_id,
            amenity_ids=body.amenity_ids,
            description=body.description,
            location=body.location,
            price_per_night=body.price_per_night,
            bedroom_count=body.bedroom_count,
            bathroom_count=body.bathroom_count,
            max_guest_count=body.max_guest_count,
            rating=body.rating,
        )
    except IdentifierBaseEmpty as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except HostNotFound as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Host not found") from e
    except AmenityNotFound as e:
        raise HTTPException(
            status_code=HTTP_404_NOT_FOUND, detail=f"Amenity not found: {e}"
        ) from e
    except IdentifierTaken as e:
        raise HTTPException(
            status_code=HTTP_409_CONFLICT,
            detail="Property identifier was taken by a concurrent request; retry",
        ) from e

    await session.commit()
    log.info("property_created", property_id=prop.id, actor=principal.subject)
    return PropertyResponse.model_validate(prop)


@router.put(
    "/{property_id}", response_model=PropertyResponse, dependencies=[Depends(get_principal)]
)
async def update_property(
    property_id: str,
    body: PropertyUpdateRequest,
    session: AsyncSession = Depends(db_session),
) -> PropertyResponse:
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    amenity_ids = changes.pop("amenity_ids", None)
    if not changes and amenity_ids is None:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="No fields to update")

    properties = PropertyRepo(session)
    prop = await properties.get(property_id)
    if prop is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Property not found")

    if "host_id" in changes and await HostRepo(session).get(changes["host_id"]) is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Host not found")

    amenities = None
    if amenity_ids is not None:
        amenities = await AmenityRepo(session).get_many(amenity_ids)
        if len(amenities) != len(set(amenity_ids)):
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Amenity not found")

    # A new title does not re-key the property.
    await properties.update(prop, changes, amenities=amenities)
    await session.commit()
    return PropertyResponse.model_validate(prop)


@router.delete("/{property_id}", dependencies=[Depends(get_principal)])
async def delete_property(
    property_id: str, session: AsyncSession = Depends(db_session)
) -> dict[str, str]:
    properties = PropertyRepo(session)
    prop = await properties.get(property_id)
    if prop is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Property not found")
    title = prop.title

    await properties.delete(property_id)
    await session.commit()
    return {"message": f"Property {title} deleted successfully"}


# --- Module Notes -----------------------------------------------------------
# A 409 from create is safe to retry as-is: the next attempt sees the winner's
# row and allocates the following suffix.
