"""
stayhub.db.repositories.hosts

Repository for `Host` entities.

Responsibilities:
- Upsert hosts keyed by username; list with a case-insensitive name filter.
- Delete a host together with every property it owns.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from stayhub.db.models import Host, Property
from stayhub.db.repositories.properties import PropertyRepo


class HostRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def upsert(
        self,
        *,
        username: str,
        name: str,
        phone_number: str | None = None,
        email: str | None = None,
        profile_picture: str | None = None,
        about_me: str | None = None,
        id: str | None = None,
    ) -> tuple[Host, bool]:
        """Create a host, or update the profile of the host owning `username`.

        On update, optional fields passed as None keep their stored value.
        Returns the host and whether it was newly created.
        """

        fields = {
            "name": name,
            "phone_number": phone_number,
            "email": email,
            "profile_picture": profile_picture,
            "about_me": about_me,
        }
        existing = await self.get_by_username(username)
        if existing is not None:
            for field, value in fields.items():
                if value is not None:
                    setattr(existing, field, value)
            await self._session.flush()
            return existing, False

        host = Host(username=username, **fields)
        if id is not None:
            host.id = id
        self._session.add(host)
        await self._session.flush()
        return host, True

    async def get(self, host_id: str) -> Host | None:
        return await self._session.get(Host, host_id)

    async def get_by_username(self, username: str) -> Host | None:
        stmt = select(Host).where(Host.username == username)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def list(self, *, name: str | None = None) -> list[Host]:
        stmt = select(Host).order_by(Host.username)
        if name:
            stmt = stmt.where(Host.name.ilike(f"%{name}%"))
        return list((await self._session.execute(stmt)).scalars().all())

    async def update(self, host: Host, changes: dict[str, Any]) -> Host:
        for field, value in changes.items():
            setattr(host, field, value)
        await self._session.flush()
        return host

    async def delete(self, host_id: str) -> int:
        """Delete a host and every property it owns. Returns the property count."""

        stmt = select(Property.id).where(Property.host_id == host_id)
        property_ids = list((await self._session.execute(stmt)).scalars().all())
        await PropertyRepo(self._session).delete_many(property_ids)
        await self._session.execute(delete(Host).where(Host.id == host_id))
        return len(property_ids)


# --- Module Notes -----------------------------------------------------------
# `delete` returns the property count so the router can report it.
