"""
stayhub.db.repositories.properties

Repository for `Property` entities.

Responsibilities:
- Existence check used by the identifier allocator.
- Create, filter, update properties and their amenity links.
- Delete properties together with their bookings, reviews and amenity links.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from stayhub.db.models import Amenity, Booking, Property, Review, property_amenities


class PropertyRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists(self, property_id: str) -> bool:
        stmt = select(Property.id).where(Property.id == property_id)
        return (await self._session.execute(stmt)).scalar_one_or_none() is not None

    async def create(
        self,
        *,
        id: str,
        host_id: str,
        title: str,
        description: str | None = None,
        location: str | None = None,
        price_per_night: float = 0.0,
        bedroom_count: int = 0,
        bathroom_count: int = 1,
        max_guest_count: int = 1,
        rating: float = 0.0,
        amenities: Sequence[Amenity] = (),
    ) -> Property:
        # Flush raises IntegrityError if `id` was taken after the allocator checked it.
        prop = Property(
            id=id,
            host_id=host_id,
            title=title,
            description=description,
            location=location,
            price_per_night=price_per_night,
            bedroom_count=bedroom_count,
            bathroom_count=bathroom_count,
            max_guest_count=max_guest_count,
            rating=rating,
            amenities=list(amenities),
        )
        self._session.add(prop)
        await self._session.flush()
        return prop

    async def get(self, property_id: str) -> Property | None:
        return await self._session.get(Property, property_id)

    async def list(
        self,
        *,
        location: str | None = None,
        price_per_night: float | None = None,
        amenity_names: Sequence[str] = (),
    ) -> list[Property]:
        stmt = select(Property).order_by(Property.created_at, Property.id)
        if location:
            stmt = stmt.where(Property.location.ilike(f"%{location}%"))
        if price_per_night is not None:
            stmt = stmt.where(Property.price_per_night == price_per_night)
        if amenity_names:
            stmt = stmt.where(Property.amenities.any(Amenity.name.in_(list(amenity_names))))
        return list((await self._session.execute(stmt)).scalars().all())

    async def update(
        self,
        prop: Property,
        changes: dict[str, Any],
        *,
        amenities: Sequence[Amenity] | None = None,
    ) -> Property:
        for field, value in changes.items():
            setattr(prop, field, value)
        if amenities is not None:
            prop.amenities = list(amenities)
        await self._session.flush()
        return prop

    async def delete(self, property_id: str) -> None:
        await self.delete_many([property_id])

    async def delete_many(self, property_ids: Sequence[str]) -> None:
        if not property_ids:
            return
        ids = list(property_ids)
        await self._session.execute(delete(Booking).where(Booking.property_id.in_(ids)))
        await self._session.execute(delete(Review).where(Review.property_id.in_(ids)))
        await self._session.execute(
            delete(property_amenities).where(property_amenities.c.property_id.in_(ids))
        )
        await self._session.execute(delete(Property).where(Property.id.in_(ids)))


# --- Module Notes -----------------------------------------------------------
# `exists` queries the table rather than the identity map so a row created by
# another request is always seen.
