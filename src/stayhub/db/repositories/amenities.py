"""
stayhub.db.repositories.amenities

Repository for `Amenity` entities.

Responsibilities:
- Create, fetch and rename amenities; resolve id lists for property links.
- Delete an amenity and its property links.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from stayhub.db.models import Amenity, property_amenities


class AmenityRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, name: str, id: str | None = None) -> Amenity:
        amenity = Amenity(name=name)
        if id is not None:
            amenity.id = id
        self._session.add(amenity)
        await self._session.flush()
        return amenity

    async def get(self, amenity_id: str) -> Amenity | None:
        return await self._session.get(Amenity, amenity_id)

    async def get_many(self, amenity_ids: Sequence[str]) -> list[Amenity]:
        if not amenity_ids:
            return []
        stmt = select(Amenity).where(Amenity.id.in_(list(amenity_ids)))
        return list((await self._session.execute(stmt)).scalars().all())

    async def list(self) -> list[Amenity]:
        stmt = select(Amenity).order_by(Amenity.name)
        return list((await self._session.execute(stmt)).scalars().all())

    async def rename(self, amenity: Amenity, name: str) -> Amenity:
        amenity.name = name
        await self._session.flush()
        return amenity

    async def delete(self, amenity_id: str) -> None:
        await self._session.execute(
            delete(property_amenities).where(property_amenities.c.amenity_id == amenity_id)
        )
        await self._session.execute(delete(Amenity).where(Amenity.id == amenity_id))


# --- Module Notes -----------------------------------------------------------
# Property links go first so the amenity row can be removed under foreign keys.
