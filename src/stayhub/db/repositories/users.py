"""
stayhub.db.repositories.users

Repository for `User` entities.

Responsibilities:
- Create, fetch, update users; detect username/email clashes.
- Delete a user together with the reviews they wrote.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from stayhub.db.models import Review, User


class UserRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        *,
        username: str,
        password_hash: str,
        name: str | None = None,
        email: str | None = None,
        phone_number: str | None = None,
        profile_picture: str | None = None,
        id: str | None = None,
    ) -> User:
        user = User(
            username=username,
            password_hash=password_hash,
            name=name,
            email=email,
            phone_number=phone_number,
            profile_picture=profile_picture,
        )
        if id is not None:
            user.id = id
        self._session.add(user)
        await self._session.flush()
        return user

    async def get(self, user_id: str) -> User | None:
        return await self._session.get(User, user_id)

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(User).where(User.username == username)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def find_conflicting(
        self,
        *,
        username: str | None,
        email: str | None,
        exclude_id: str | None = None,
    ) -> User | None:
        clauses = []
        if username is not None:
            clauses.append(User.username == username)
        if email is not None:
            clauses.append(User.email == email)
        if not clauses:
            return None
        stmt = select(User).where(or_(*clauses))
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        return (await self._session.execute(stmt.limit(1))).scalar_one_or_none()

    async def list(self) -> list[User]:
        stmt = select(User).order_by(User.username)
        return list((await self._session.execute(stmt)).scalars().all())

    async def update(self, user: User, changes: dict[str, Any]) -> User:
        for field, value in changes.items():
            setattr(user, field, value)
        await self._session.flush()
        return user

    async def delete(self, user_id: str) -> None:
        # Reviews go with the user; bookings are kept and block the delete via FK.
        await self._session.execute(delete(Review).where(Review.user_id == user_id))
        await self._session.execute(delete(User).where(User.id == user_id))
