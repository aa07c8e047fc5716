"""
stayhub.auth.models

Auth domain models.

Responsibilities:
- Define the authenticated identity type (`Principal`) injected into endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Identity claim decoded from a valid credential.

    Scoped to a single request; handlers must not store it.
    """

    subject: str
    username: str | None = None


# --- Module Notes -----------------------------------------------------------
# `subject` is the user id the login route signed into the token.
