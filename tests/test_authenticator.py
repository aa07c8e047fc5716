from __future__ import annotations

from dataclasses import replace
from datetime import timedelta

import httpx
import pytest

from stayhub.auth.authenticator import Authenticator, CredentialInvalid, CredentialMissing
from stayhub.auth.deps import UNAUTHORIZED_DETAIL
from stayhub.auth.jwt import JwtConfig, issue_token


def test_round_trip_returns_subject(jwt_cfg: JwtConfig) -> None:
    token = issue_token(cfg=jwt_cfg, subject="u-1", username="alice")
    principal = Authenticator(jwt_cfg).authenticate(f"Bearer {token}")
    assert principal.subject == "u-1"
    assert principal.username == "alice"


def test_token_signed_with_other_secret_is_invalid(jwt_cfg: JwtConfig) -> None:
    other = replace(jwt_cfg, secret="some-other-secret-0123456789abcdefgh")
    token = issue_token(cfg=other, subject="u-1")
    with pytest.raises(CredentialInvalid):
        Authenticator(jwt_cfg).authenticate(f"Bearer {token}")


def test_expired_token_is_invalid(jwt_cfg: JwtConfig) -> None:
    token = issue_token(cfg=jwt_cfg, subject="u-1", ttl=timedelta(minutes=-5))
    with pytest.raises(CredentialInvalid):
        Authenticator(jwt_cfg).authenticate(f"Bearer {token}")


def test_wrong_audience_is_invalid(jwt_cfg: JwtConfig) -> None:
    token = issue_token(cfg=replace(jwt_cfg, audience="someone-else"), subject="u-1")
    with pytest.raises(CredentialInvalid):
        Authenticator(jwt_cfg).authenticate(f"Bearer {token}")


@pytest.mark.parametrize("header", [None, "Bearer ", "Bearer    ", ""])
def test_absent_or_empty_credential_is_missing(jwt_cfg: JwtConfig, header: str | None) -> None:
    with pytest.raises(CredentialMissing):
        Authenticator(jwt_cfg).authenticate(header)


def test_malformed_bearer_token_is_invalid(jwt_cfg: JwtConfig) -> None:
    with pytest.raises(CredentialInvalid):
        Authenticator(jwt_cfg).authenticate("Bearer abc.def.ghi")


def test_lenient_mode_accepts_bare_token(jwt_cfg: JwtConfig) -> None:
    token = issue_token(cfg=jwt_cfg, subject="u-2")
    assert Authenticator(jwt_cfg).authenticate(token).subject == "u-2"


def test_strict_mode_rejects_bare_token(jwt_cfg: JwtConfig) -> None:
    token = issue_token(cfg=jwt_cfg, subject="u-2")
    authenticator = Authenticator(jwt_cfg, strict_bearer=True)
    with pytest.raises(CredentialMissing):
        authenticator.authenticate(token)
    assert authenticator.authenticate(f"Bearer {token}").subject == "u-2"


@pytest.mark.asyncio
async def test_missing_and_invalid_share_one_response(client: httpx.AsyncClient) -> None:
    missing = await client.post("/amenities", json={"name": "Wifi"})
    invalid = await client.post(
        "/amenities", json={"name": "Wifi"}, headers={"Authorization": "Bearer abc.def.ghi"}
    )

    assert missing.status_code == invalid.status_code == 401
    assert missing.json() == invalid.json() == {"detail": UNAUTHORIZED_DETAIL}
    assert missing.headers["www-authenticate"] == "Bearer"
    assert invalid.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_rejected_request_creates_nothing(client: httpx.AsyncClient) -> None:
    r = await client.post("/amenities", json={"name": "Pool"}, headers={"Authorization": ""})
    assert r.status_code == 401

    r = await client.get("/amenities")
    assert r.json() == []
