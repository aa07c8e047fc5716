"""
stayhub.services.identifiers

Readable primary keys for new properties.

Responsibilities:
- Normalize a free-text title into a URL-safe base identifier.
- Disambiguate collisions against the store with a numeric suffix.

Uniqueness is point-in-time only: the store's primary-key constraint is the
final arbiter when two creations race (see `services.properties`).
"""

from __future__ import annotations

import re
from collections.abc import Awaitable, Callable

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

ExistsCheck = Callable[[str], Awaitable[bool]]


class IdentifierBaseEmpty(ValueError):
    def __init__(self, title: str) -> None:
        super().__init__(f"title {title!r} does not contain any letters or digits")
        self.title = title


def normalize_title(title: str) -> str:
    return _NON_ALNUM.sub("-", title.lower()).strip("-")


def base_identifier(title: str) -> str:
    base = normalize_title(title)
    if not base:
        raise IdentifierBaseEmpty(title)
    return base


async def allocate_identifier(title: str, exists: ExistsCheck) -> str:
    """
    Return the first of `base`, `base-1`, `base-2`, ... for which `exists` is false.

    Raises IdentifierBaseEmpty before any lookup when the title has no usable characters.
    """

    base = base_identifier(title)
    candidate = base
    counter = 1
    while await exists(candidate):
        candidate = f"{base}-{counter}"
        counter += 1
    return candidate


# --- Module Notes -----------------------------------------------------------
# Every candidate returned has been checked; nothing is reserved between the
# check and the caller's insert.
