from __future__ import annotations

import pytest

from stayhub.services.identifiers import (
    IdentifierBaseEmpty,
    allocate_identifier,
    base_identifier,
    normalize_title,
)


class FakeStore:
    def __init__(self, taken: set[str] | None = None) -> None:
        self.taken = set(taken or ())
        self.lookups: list[str] = []

    async def exists(self, candidate: str) -> bool:
        self.lookups.append(candidate)
        return candidate in self.taken


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Cozy Loft!! #2", "cozy-loft-2"),
        ("  Beach   House  ", "beach-house"),
        ("Ünïcode Villa", "n-code-villa"),
        ("already-normal", "already-normal"),
    ],
)
def test_normalize_title(title: str, expected: str) -> None:
    assert normalize_title(title) == expected


def test_normalization_is_idempotent() -> None:
    once = normalize_title("Sea View -- Apartment (Top Floor)")
    assert normalize_title(once) == once


def test_empty_base_is_rejected() -> None:
    with pytest.raises(IdentifierBaseEmpty) as exc:
        base_identifier("***")
    assert exc.value.title == "***"
    assert isinstance(exc.value, ValueError)


@pytest.mark.asyncio
async def test_empty_base_raises_before_any_lookup() -> None:
    store = FakeStore()
    with pytest.raises(IdentifierBaseEmpty):
        await allocate_identifier("!!!", store.exists)
    assert store.lookups == []


@pytest.mark.asyncio
async def test_free_base_is_used_as_is() -> None:
    store = FakeStore()
    assert await allocate_identifier("Cozy Loft", store.exists) == "cozy-loft"
    assert store.lookups == ["cozy-loft"]


@pytest.mark.asyncio
async def test_collisions_take_the_next_suffix() -> None:
    store = FakeStore({"cozy-loft", "cozy-loft-1"})
    assert await allocate_identifier("Cozy Loft", store.exists) == "cozy-loft-2"
    assert store.lookups == ["cozy-loft", "cozy-loft-1", "cozy-loft-2"]


@pytest.mark.asyncio
async def test_first_free_suffix_wins() -> None:
    store = FakeStore({"cozy-loft", "cozy-loft-2"})
    assert await allocate_identifier("Cozy Loft", store.exists) == "cozy-loft-1"
