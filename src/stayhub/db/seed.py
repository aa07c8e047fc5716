"""
stayhub.db.seed

Load fixture data into an empty (or partially filled) database.

Responsibilities:
- Read `<kind>.json` files shaped like `{"<kind>": [...]}` with camelCase keys.
- Insert rows whose id is not present yet; existing rows are left untouched.
- Hash user passwords and skip bookings/reviews whose user or property is missing.

Usage: `python -m stayhub.db.seed path/to/data`
"""

from __future__ import annotations

import argparse
import asyncio
import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from stayhub.auth.passwords import hash_password
from stayhub.db.init_db import init_db
from stayhub.db.models import Amenity, Booking, Host, Review, User
from stayhub.db.repositories.amenities import AmenityRepo
from stayhub.db.repositories.bookings import BookingRepo
from stayhub.db.repositories.hosts import HostRepo
from stayhub.db.repositories.properties import PropertyRepo
from stayhub.db.repositories.reviews import ReviewRepo
from stayhub.db.repositories.users import UserRepo
from stayhub.db.session import create_engine, create_sessionmaker, session_scope
from stayhub.observability.logging import configure_logging, get_logger
from stayhub.settings import get_settings

log = get_logger(__name__)


@dataclass
class SeedReport:
    inserted: dict[str, int] = field(default_factory=dict)
    skipped: dict[str, int] = field(default_factory=dict)

    def _bump(self, bucket: dict[str, int], kind: str) -> None:
        bucket[kind] = bucket.get(kind, 0) + 1

    def insert(self, kind: str) -> None:
        self._bump(self.inserted, kind)

    def skip(self, kind: str) -> None:
        self._bump(self.skipped, kind)


def _load(data_dir: Path, kind: str) -> list[dict[str, Any]]:
    path = data_dir / f"{kind}.json"
    if not path.exists():
        log.info("seed_file_missing", kind=kind, path=str(path))
        return []
    return json.loads(path.read_text(encoding="utf-8")).get(kind, [])


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed


async def _present(session: AsyncSession, model: type, row_id: str) -> bool:
    return await session.get(model, row_id) is not None


async def seed_from_directory(session: AsyncSession, data_dir: Path) -> SeedReport:
    report = SeedReport()

    amenities = AmenityRepo(session)
    for row in _load(data_dir, "amenities"):
        if await _present(session, Amenity, row["id"]):
            report.skip("amenities")
            continue
        await amenities.create(id=row["id"], name=row["name"])
        report.insert("amenities")

    users = UserRepo(session)
    for row in _load(data_dir, "users"):
        if await _present(session, User, row["id"]):
            report.skip("users")
            continue
        await users.create(
            id=row["id"],
            username=row["username"],
            password_hash=hash_password(row["password"]),
            name=row.get("name"),
            email=row.get("email"),
            phone_number=row.get("phoneNumber"),
            profile_picture=row.get("profilePicture"),
        )
        report.insert("users")

    hosts = HostRepo(session)
    for row in _load(data_dir, "hosts"):
        if await _present(session, Host, row["id"]):
            report.skip("hosts")
            continue
        await hosts.upsert(
            id=row["id"],
            username=row["username"],
            name=row["name"],
            email=row.get("email"),
            phone_number=row.get("phoneNumber"),
            profile_picture=row.get("profilePicture"),
            about_me=row.get("aboutMe"),
        )
        report.insert("hosts")

    properties = PropertyRepo(session)
    for row in _load(data_dir, "properties"):
        if await properties.exists(row["id"]) or not await _present(session, Host, row["hostId"]):
            log.info("seed_row_skipped", kind="properties", id=row["id"])
            report.skip("properties")
            continue
        linked = await amenities.get_many(row.get("amenityIds", []))
        await properties.create(
            id=row["id"],
            host_id=row["hostId"],
            title=row["title"],
            description=row.get("description"),
            location=row.get("location"),
            price_per_night=float(row.get("pricePerNight") or 0),
            bedroom_count=row.get("bedroomCount") or 0,
            bathroom_count=row.get("bathRoomCount") or 1,
            max_guest_count=row.get("maxGuestCount") or 1,
            rating=float(row.get("rating") or 0),
            amenities=linked,
        )
        report.insert("properties")

    bookings = BookingRepo(session)
    for row in _load(data_dir, "bookings"):
        if (
            await _present(session, Booking, row["id"])
            or not await _present(session, User, row["userId"])
            or not await properties.exists(row["propertyId"])
        ):
            log.info("seed_row_skipped", kind="bookings", id=row["id"])
            report.skip("bookings")
            continue
        try:
            check_in = _parse_timestamp(row["checkinDate"])
            check_out = _parse_timestamp(row["checkoutDate"])
        except (KeyError, TypeError, ValueError):
            log.warning("seed_invalid_dates", kind="bookings", id=row["id"])
            report.skip("bookings")
            continue
        await bookings.create(
            id=row["id"],
            user_id=row["userId"],
            property_id=row["propertyId"],
            check_in_date=check_in,
            check_out_date=check_out,
            number_of_guests=row.get("numberOfGuests") or 1,
            total_price=row.get("totalPrice"),
            booking_status=row.get("bookingStatus") or "pending",
        )
        report.insert("bookings")

    reviews = ReviewRepo(session)
    for row in _load(data_dir, "reviews"):
        if (
            await _present(session, Review, row["id"])
            or not await _present(session, User, row["userId"])
            or not await properties.exists(row["propertyId"])
        ):
            log.info("seed_row_skipped", kind="reviews", id=row["id"])
            report.skip("reviews")
            continue
        await reviews.create(
            id=row["id"],
            user_id=row["userId"],
            property_id=row["propertyId"],
            rating=row["rating"],
            comment=row["comment"],
        )
        report.insert("reviews")

    return report


async def _run(data_dir: Path) -> SeedReport:
    settings = get_settings()
    engine = create_engine(settings)
    try:
        await init_db(engine)
        async with session_scope(create_sessionmaker(engine)) as session:
            report = await seed_from_directory(session, data_dir)
            await session.commit()
    finally:
        await engine.dispose()
    return report


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the StayHub database from JSON fixtures.")
    parser.add_argument("data_dir", type=Path)
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(service_name=settings.service_name, level=settings.log_level)
    report = asyncio.run(_run(args.data_dir))
    log.info("seed_finished", inserted=report.inserted, skipped=report.skipped)


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# Fixture timestamps are ISO-8601 (a trailing "Z" is fine on 3.11+) and stored as naive UTC.
