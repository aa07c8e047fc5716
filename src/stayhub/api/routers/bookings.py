"""
stayhub.api.routers.bookings

Stays booked by users.

Responsibilities:
- Public list (optional user filter) and detail APIs.
- Authenticated create/update/delete with date and reference validation.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Self

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from stayhub.api.deps import db_session, ensure_references
from stayhub.auth.deps import get_principal
from stayhub.auth.models import Principal
from stayhub.db.repositories.bookings import BookingRepo
from stayhub.observability.logging import get_logger

router = APIRouter(prefix="/bookings", tags=["bookings"])
log = get_logger(__name__)

_BAD_RANGE = "check_out_date must be after check_in_date"


def _naive_utc(value: datetime | None) -> datetime | None:
    # Stored timestamps are naive UTC; offsets from clients are folded in here.
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


class BookingCreateRequest(BaseModel):
    user_id: str = Field(min_length=1)
    property_id: str = Field(min_length=1)
    check_in_date: datetime
    check_out_date: datetime
    number_of_guests: int = Field(default=1, ge=1)
    total_price: float | None = Field(default=None, ge=0)
    booking_status: str = Field(default="pending", min_length=1, max_length=32)

    normalize_dates = field_validator("check_in_date", "check_out_date")(_naive_utc)

    @model_validator(mode="after")
    def dates_in_order(self) -> Self:
        if self.check_out_date <= self.check_in_date:
            raise ValueError(_BAD_RANGE)
        return self


class BookingUpdateRequest(BaseModel):
    user_id: str | None = Field(default=None, min_length=1)
    property_id: str | None = Field(default=None, min_length=1)
    check_in_date: datetime | None = None
    check_out_date: datetime | None = None
    number_of_guests: int | None = Field(default=None, ge=1)
    total_price: float | None = Field(default=None, ge=0)
    booking_status: str | None = Field(default=None, min_length=1, max_length=32)

    normalize_dates = field_validator("check_in_date", "check_out_date")(_naive_utc)


class BookingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    property_id: str
    check_in_date: datetime
    check_out_date: datetime
    number_of_guests: int
    total_price: float | None
    booking_status: str


@router.get("", response_model=list[BookingResponse])
async def list_bookings(
    user_id: str | None = Query(default=None),
    session: AsyncSession = Depends(db_session),
) -> list[BookingResponse]:
    bookings = await BookingRepo(session).list(user_id=user_id)
    return [BookingResponse.model_validate(b) for b in bookings]


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: str, session: AsyncSession = Depends(db_session)
) -> BookingResponse:
    booking = await BookingRepo(session).get(booking_id)
    if booking is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Booking not found")
    return BookingResponse.model_validate(booking)


@router.post("", response_model=BookingResponse, status_code=HTTP_201_CREATED)
async def create_booking(
    body: BookingCreateRequest,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> BookingResponse:
    await ensure_references(session, user_id=body.user_id, property_id=body.property_id)
    booking = await BookingRepo(session).create(
        user_id=body.user_id,
        property_id=body.property_id,
        check_in_date=body.check_in_date,
        check_out_date=body.check_out_date,
        number_of_guests=body.number_of_guests,
        total_price=body.total_price,
        booking_status=body.booking_status,
    )
    await session.commit()
    log.info("booking_created", booking_id=booking.id, actor=principal.subject)
    return BookingResponse.model_validate(booking)


@router.put("/{booking_id}", response_model=BookingResponse, dependencies=[Depends(get_principal)])
async def update_booking(
    booking_id: str,
    body: BookingUpdateRequest,
    session: AsyncSession = Depends(db_session),
) -> BookingResponse:
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="No fields to update")

    bookings = BookingRepo(session)
    booking = await bookings.get(booking_id)
    if booking is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Booking not found")

    check_in = changes.get("check_in_date", booking.check_in_date)
    check_out = changes.get("check_out_date", booking.check_out_date)
    if check_out <= check_in:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=_BAD_RANGE)

    await ensure_references(
        session, user_id=changes.get("user_id"), property_id=changes.get("property_id")
    )
    await bookings.update(booking, changes)
    await session.commit()
    return BookingResponse.model_validate(booking)


@router.delete("/{booking_id}", dependencies=[Depends(get_principal)])
async def delete_booking(
    booking_id: str, session: AsyncSession = Depends(db_session)
) -> dict[str, str]:
    bookings = BookingRepo(session)
    if await bookings.get(booking_id) is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Booking not found")
    await bookings.delete(booking_id)
    await session.commit()
    return {"message": f"Booking {booking_id} deleted successfully"}
