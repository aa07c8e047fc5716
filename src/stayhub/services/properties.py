"""
stayhub.services.properties

Property creation (identifier allocation + persistence).

Responsibilities:
- Validate the title and the owning host before touching the properties table.
- Allocate a readable identifier and insert the row.
- Turn a lost identifier race into a distinct, retryable error.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from stayhub.db.models import Property
from stayhub.db.repositories.amenities import AmenityRepo
from stayhub.db.repositories.hosts import HostRepo
from stayhub.db.repositories.properties import PropertyRepo
from stayhub.observability.logging import get_logger
from stayhub.services.identifiers import allocate_identifier, base_identifier

log = get_logger(__name__)


class HostNotFound(LookupError):
    pass


class AmenityNotFound(LookupError):
    pass


class IdentifierTaken(Exception):
    """
    The store rejected the insert because another request claimed the same
    identifier after our existence check. Retrying allocates the next suffix.
    """

    def __init__(self, identifier: str) -> None:
        super().__init__(f"property identifier {identifier!r} was taken concurrently")
        self.identifier = identifier


class PropertyService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._properties = PropertyRepo(session)
        self._hosts = HostRepo(session)
        self._amenities = AmenityRepo(session)

    async def create(
        self,
        *,
        title: str,
        host_id: str,
        amenity_ids: Sequence[str] = (),
        description: str | None = None,
        location: str | None = None,
        price_per_night: float = 0.0,
        bedroom_count: int = 0,
        bathroom_count: int = 1,
        max_guest_count: int = 1,
        rating: float = 0.0,
    ) -> Property:
        # Raises IdentifierBaseEmpty before any store access.
        base_identifier(title)

        if await self._hosts.get(host_id) is None:
            raise HostNotFound(host_id)

        amenities = await self._amenities.get_many(amenity_ids)
        if len(amenities) != len(set(amenity_ids)):
            missing = set(amenity_ids) - {a.id for a in amenities}
            raise AmenityNotFound(", ".join(sorted(missing)))

        identifier = await allocate_identifier(title, self._properties.exists)
        try:
            prop = await self._properties.create(
                id=identifier,
                host_id=host_id,
                title=title,
                description=description,
                location=location,
                price_per_night=price_per_night,
                bedroom_count=bedroom_count,
                bathroom_count=bathroom_count,
                max_guest_count=max_guest_count,
                rating=rating,
                amenities=amenities,
            )
        except IntegrityError as e:
            await self._session.rollback()
            await self._classify_insert_failure(e, identifier, host_id, amenity_ids)
            raise

        log.info("property_allocated", property_id=identifier, host_id=host_id)
        return prop

    async def _classify_insert_failure(
        self,
        error: IntegrityError,
        identifier: str,
        host_id: str,
        amenity_ids: Sequence[str],
    ) -> None:
        # Only a duplicate key is a retryable identifier race; a referenced row
        # deleted since our checks is reported as missing.
        if await self._properties.exists(identifier):
            log.warning("property_identifier_race", identifier=identifier)
            raise IdentifierTaken(identifier) from error
        if await self._hosts.get(host_id) is None:
            log.info("property_host_vanished", host_id=host_id)
            raise HostNotFound(host_id) from error
        found = {a.id for a in await self._amenities.get_many(amenity_ids)}
        missing = set(amenity_ids) - found
        if missing:
            raise AmenityNotFound(", ".join(sorted(missing))) from error


# --- Module Notes -----------------------------------------------------------
# The caller commits. No lock is taken between `exists` and the insert; the
# primary-key constraint decides which concurrent creator wins.
