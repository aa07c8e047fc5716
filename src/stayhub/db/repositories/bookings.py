"""
stayhub.db.repositories.bookings

Repository for `Booking` entities.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from stayhub.db.models import Booking


class BookingRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        *,
        user_id: str,
        property_id: str,
        check_in_date: datetime,
        check_out_date: datetime,
        number_of_guests: int = 1,
        total_price: float | None = None,
        booking_status: str = "pending",
        id: str | None = None,
    ) -> Booking:
        booking = Booking(
            user_id=user_id,
            property_id=property_id,
            check_in_date=check_in_date,
            check_out_date=check_out_date,
            number_of_guests=number_of_guests,
            total_price=total_price,
            booking_status=booking_status,
        )
        if id is not None:
            booking.id = id
        self._session.add(booking)
        await self._session.flush()
        return booking

    async def get(self, booking_id: str) -> Booking | None:
        return await self._session.get(Booking, booking_id)

    async def list(self, *, user_id: str | None = None) -> list[Booking]:
        stmt = select(Booking).order_by(Booking.check_in_date, Booking.id)
        if user_id:
            stmt = stmt.where(Booking.user_id == user_id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def update(self, booking: Booking, changes: dict[str, Any]) -> Booking:
        for field, value in changes.items():
            setattr(booking, field, value)
        await self._session.flush()
        return booking

    async def delete(self, booking_id: str) -> None:
        await self._session.execute(delete(Booking).where(Booking.id == booking_id))


# --- Module Notes -----------------------------------------------------------
# Bookings are also removed in bulk by PropertyRepo.delete_many.
