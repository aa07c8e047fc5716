"""
stayhub.auth.authenticator

Bearer credential gate for state-changing requests.

Responsibilities:
- Extract a token from a raw Authorization header value.
- Verify it against the injected signing configuration.
- Report rejections as one of two internal variants that share a single
  external representation (HTTP 401, identical body).
"""

from __future__ import annotations

from stayhub.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate
from stayhub.auth.models import Principal

BEARER_PREFIX = "Bearer "


class AuthenticationError(Exception):
    """Base for credential rejections."""

    reason = "unauthorized"


class CredentialMissing(AuthenticationError):
    reason = "credential_missing"


class CredentialInvalid(AuthenticationError):
    reason = "credential_invalid"


class Authenticator:
    """
    Stateless verifier. One instance is built at startup and shared read-only
    by all requests; every request is authenticated independently.
    """

    def __init__(self, cfg: JwtConfig, *, strict_bearer: bool = False) -> None:
        self._cfg = cfg
        self._strict_bearer = strict_bearer

    def extract_token(self, authorization: str | None) -> str:
        if authorization is None:
            raise CredentialMissing("authorization header absent")

        if authorization.startswith(BEARER_PREFIX):
            token = authorization[len(BEARER_PREFIX) :]
        elif self._strict_bearer:
            raise CredentialMissing("authorization header is not a bearer credential")
        else:
            # Lenient mode: older clients send the bare token.
            token = authorization

        token = token.strip()
        if not token:
            raise CredentialMissing("empty bearer credential")
        return token

    def authenticate(self, authorization: str | None) -> Principal:
        token = self.extract_token(authorization)
        try:
            payload = decode_and_validate(cfg=self._cfg, token=token)
        except JwtValidationError as e:
            raise CredentialInvalid(str(e)) from e

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            raise CredentialInvalid("token subject missing")

        username = payload.get("username")
        return Principal(
            subject=subject,
            username=username if isinstance(username, str) else None,
        )


# --- Module Notes -----------------------------------------------------------
# `auth.deps.get_principal` collapses both variants into the same 401 response;
# the variant only survives as the `reason` field in logs.
