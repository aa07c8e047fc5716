"""
stayhub.db.repositories.reviews

Repository for `Review` entities.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from stayhub.db.models import Review


class ReviewRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        *,
        user_id: str,
        property_id: str,
        rating: int,
        comment: str,
        id: str | None = None,
    ) -> Review:
        review = Review(user_id=user_id, property_id=property_id, rating=rating, comment=comment)
        if id is not None:
            review.id = id
        self._session.add(review)
        await self._session.flush()
        return review

    async def get(self, review_id: str) -> Review | None:
        return await self._session.get(Review, review_id)

    async def list(self, *, property_id: str | None = None) -> list[Review]:
        stmt = select(Review).order_by(Review.created_at, Review.id)
        if property_id:
            stmt = stmt.where(Review.property_id == property_id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def update(self, review: Review, changes: dict[str, Any]) -> Review:
        for field, value in changes.items():
            setattr(review, field, value)
        await self._session.flush()
        return review

    async def delete(self, review_id: str) -> None:
        await self._session.execute(delete(Review).where(Review.id == review_id))
