"""
stayhub.db.models

Core persistence schema for the marketplace.

Responsibilities:
- Define ORM models for the six resource kinds:
  - User: guests who book and review
  - Host: owners of properties
  - Property: listing keyed by an identifier derived from its title
  - Amenity: feature tags linked to properties
  - Booking: a user's stay at a property
  - Review: a user's rating of a property
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, Float, ForeignKey, Index, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stayhub.db.base import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    # Persist naive UTC timestamps; SQLite has no tz-aware column type.
    return datetime.now(UTC).replace(tzinfo=None)


property_amenities = Table(
    "property_amenities",
    Base.metadata,
    Column(
        "property_id",
        String(255),
        ForeignKey("properties.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "amenity_id",
        String(36),
        ForeignKey("amenities.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    username: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str | None] = mapped_column(String(256), nullable=True)
    email: Mapped[str | None] = mapped_column(String(256), nullable=True, unique=True)
    phone_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    profile_picture: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)


class Host(Base):
    __tablename__ = "hosts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    username: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    email: Mapped[str | None] = mapped_column(String(256), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    profile_picture: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    about_me: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)


class Amenity(Base):
    __tablename__ = "amenities"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(128), nullable=False, index=True)


class Property(Base):
    __tablename__ = "properties"

    # Allocated from the title at creation (services.identifiers); never regenerated.
    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    host_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("hosts.id"), nullable=False, index=True
    )

    title: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(String(256), nullable=True, index=True)
    price_per_night: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    bedroom_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    bathroom_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    max_guest_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)

    # Eager-loaded so async callers never trigger an implicit lazy load.
    amenities: Mapped[list[Amenity]] = relationship(secondary=property_amenities, lazy="selectin")


class Booking(Base):
    __tablename__ = "bookings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False, index=True
    )
    property_id: Mapped[str] = mapped_column(
        String(255), ForeignKey("properties.id"), nullable=False, index=True
    )

    check_in_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    check_out_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    number_of_guests: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    total_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    booking_status: Mapped[str] = mapped_column(String(32), nullable=False, default="pending")

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)

    __table_args__ = (Index("ix_bookings_property_dates", "property_id", "check_in_date"),)


class Review(Base):
    __tablename__ = "reviews"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False, index=True
    )
    property_id: Mapped[str] = mapped_column(
        String(255), ForeignKey("properties.id"), nullable=False, index=True
    )

    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)


# --- Module Notes -----------------------------------------------------------
# Dependent rows are removed by the repositories (see db.repositories.*.delete).
# Only the property_amenities link rows also carry ON DELETE CASCADE.
