from __future__ import annotations

import httpx
import pytest


@pytest.mark.asyncio
async def test_create_and_read_user_hides_password(
    client: httpx.AsyncClient, user: dict
) -> None:
    assert user["username"] == "guest1"
    assert "password" not in user
    assert "password_hash" not in user

    r = await client.get(f"/users/{user['id']}")
    assert r.status_code == 200
    assert r.json() == user

    r = await client.get("/users")
    assert [u["id"] for u in r.json()] == [user["id"]]


@pytest.mark.asyncio
async def test_create_requires_credentials(client: httpx.AsyncClient) -> None:
    r = await client.post("/users", json={"username": "x", "password": "y"})
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_duplicate_username_or_email_is_400(
    client: httpx.AsyncClient, auth_headers: dict[str, str], user: dict
) -> None:
    r = await client.post(
        "/users", json={"username": "guest1", "password": "pw"}, headers=auth_headers
    )
    assert r.status_code == 400

    r = await client.post(
        "/users",
        json={"username": "other", "password": "pw", "email": "guest1@example.com"},
        headers=auth_headers,
    )
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_update_user(
    client: httpx.AsyncClient, auth_headers: dict[str, str], user: dict
) -> None:
    r = await client.put(f"/users/{user['id']}", json={}, headers=auth_headers)
    assert r.status_code == 400

    r = await client.put("/users/missing", json={"name": "x"}, headers=auth_headers)
    assert r.status_code == 404

    r = await client.put(
        f"/users/{user['id']}",
        json={"name": "Guest One", "password": "new-pass"},
        headers=auth_headers,
    )
    assert r.status_code == 200
    assert r.json()["name"] == "Guest One"

    r = await client.post("/login", json={"username": "guest1", "password": "new-pass"})
    assert r.status_code == 200


@pytest.mark.asyncio
async def test_delete_user_removes_reviews(
    client: httpx.AsyncClient, auth_headers: dict[str, str], user: dict, listing: dict
) -> None:
    r = await client.post(
        "/reviews",
        json={"user_id": user["id"], "property_id": listing["id"], "rating": 4, "comment": "Nice"},
        headers=auth_headers,
    )
    assert r.status_code == 201

    r = await client.delete(f"/users/{user['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json() == {"message": "User guest1 deleted successfully"}
    assert (await client.get("/reviews")).json() == []
    assert (await client.get(f"/users/{user['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_delete_user_with_bookings_is_refused(
    client: httpx.AsyncClient, auth_headers: dict[str, str], user: dict, listing: dict
) -> None:
    r = await client.post(
        "/bookings",
        json={
            "user_id": user["id"],
            "property_id": listing["id"],
            "check_in_date": "2026-06-01T15:00:00",
            "check_out_date": "2026-06-03T11:00:00",
        },
        headers=auth_headers,
    )
    assert r.status_code == 201

    r = await client.delete(f"/users/{user['id']}", headers=auth_headers)
    assert r.status_code == 400
    assert (await client.get(f"/users/{user['id']}")).status_code == 200
