from __future__ import annotations

import httpx
import pytest


@pytest.mark.asyncio
async def test_review_lifecycle(
    client: httpx.AsyncClient, auth_headers: dict[str, str], user: dict, listing: dict
) -> None:
    r = await client.post(
        "/reviews",
        json={"user_id": user["id"], "property_id": listing["id"], "rating": 3, "comment": "Ok"},
        headers=auth_headers,
    )
    assert r.status_code == 201
    review = r.json()

    r = await client.get("/reviews", params={"property_id": listing["id"]})
    assert [rv["id"] for rv in r.json()] == [review["id"]]

    r = await client.put(
        f"/reviews/{review['id']}", json={"rating": 5, "comment": "Loved it"}, headers=auth_headers
    )
    assert r.status_code == 200
    assert r.json()["rating"] == 5

    r = await client.delete(f"/reviews/{review['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert (await client.get(f"/reviews/{review['id']}")).status_code == 404


@pytest.mark.parametrize("rating", [0, 6])
@pytest.mark.asyncio
async def test_rating_out_of_range_is_400(
    client: httpx.AsyncClient, auth_headers: dict[str, str], user: dict, listing: dict, rating: int
) -> None:
    r = await client.post(
        "/reviews",
        json={
            "user_id": user["id"],
            "property_id": listing["id"],
            "rating": rating,
            "comment": "x",
        },
        headers=auth_headers,
    )
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_review_for_unknown_property_is_404(
    client: httpx.AsyncClient, auth_headers: dict[str, str], user: dict
) -> None:
    r = await client.post(
        "/reviews",
        json={"user_id": user["id"], "property_id": "ghost", "rating": 3, "comment": "x"},
        headers=auth_headers,
    )
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_update_unknown_review_is_404(
    client: httpx.AsyncClient, auth_headers: dict[str, str]
) -> None:
    r = await client.put("/reviews/missing", json={"rating": 2}, headers=auth_headers)
    assert r.status_code == 404
