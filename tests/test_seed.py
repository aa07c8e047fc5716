from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from stayhub.db.seed import seed_from_directory

FIXTURES = {
    "amenities": [{"id": "a-wifi", "name": "Wifi"}],
    "users": [
        {
            "id": "u-1",
            "username": "jsmith",
            "password": "s3cret",
            "name": "John Smith",
            "email": "john@example.com",
            "phoneNumber": "+15550111",
        }
    ],
    "hosts": [{"id": "h-1", "username": "hostly", "name": "Host Ly", "phoneNumber": "+15550222"}],
    "properties": [
        {
            "id": "harbour-view",
            "hostId": "h-1",
            "title": "Harbour View",
            "location": "Sydney",
            "pricePerNight": 199.5,
            "bedroomCount": 2,
            "bathRoomCount": 1,
            "maxGuestCount": 4,
            "rating": 4.7,
            "amenityIds": ["a-wifi"],
        },
        {"id": "orphan", "hostId": "h-missing", "title": "Orphan", "pricePerNight": 10},
    ],
    "bookings": [
        {
            "id": "b-1",
            "userId": "u-1",
            "propertyId": "harbour-view",
            "checkinDate": "2026-03-01T00:00:00.000Z",
            "checkoutDate": "2026-03-05T00:00:00.000Z",
            "numberOfGuests": 2,
            "totalPrice": 798,
            "bookingStatus": "confirmed",
        },
        {"id": "b-2", "userId": "u-1", "propertyId": "harbour-view", "checkinDate": "soon"},
    ],
    "reviews": [
        {"id": "r-1", "userId": "u-1", "propertyId": "harbour-view", "rating": 5, "comment": "Ace"}
    ],
}


def _write_fixtures(data_dir: Path) -> None:
    for kind, rows in FIXTURES.items():
        (data_dir / f"{kind}.json").write_text(json.dumps({kind: rows}), encoding="utf-8")


@pytest.mark.asyncio
async def test_seed_loads_fixtures(
    session: AsyncSession, client: httpx.AsyncClient, tmp_path: Path
) -> None:
    _write_fixtures(tmp_path)

    report = await seed_from_directory(session, tmp_path)
    await session.commit()

    assert report.inserted == {
        "amenities": 1,
        "users": 1,
        "hosts": 1,
        "properties": 1,
        "bookings": 1,
        "reviews": 1,
    }
    assert report.skipped == {"properties": 1, "bookings": 1}

    prop = (await client.get("/properties/harbour-view")).json()
    assert prop["amenities"] == [{"id": "a-wifi", "name": "Wifi"}]
    assert prop["price_per_night"] == 199.5

    booking = (await client.get("/bookings/b-1")).json()
    assert booking["check_in_date"] == "2026-03-01T00:00:00"

    # Seeded passwords are hashed and usable for login.
    r = await client.post("/login", json={"username": "jsmith", "password": "s3cret"})
    assert r.status_code == 200


@pytest.mark.asyncio
async def test_seed_is_idempotent(session: AsyncSession, tmp_path: Path) -> None:
    _write_fixtures(tmp_path)
    await seed_from_directory(session, tmp_path)
    await session.commit()

    report = await seed_from_directory(session, tmp_path)
    assert report.inserted == {}
    assert report.skipped["users"] == 1
    assert report.skipped["properties"] == 2


@pytest.mark.asyncio
async def test_missing_files_are_skipped(session: AsyncSession, tmp_path: Path) -> None:
    report = await seed_from_directory(session, tmp_path)
    assert report.inserted == {}
    assert report.skipped == {}
