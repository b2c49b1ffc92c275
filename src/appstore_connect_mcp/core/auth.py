"""Bearer credentials for App Store Connect: ES256-signed, short-lived JWTs."""

from __future__ import annotations

import time
from typing import Any, Callable, Generator, Optional, Protocol

import httpx
import jwt

AUDIENCE = "appstoreconnect-v1"
ALGORITHM = "ES256"
# Apple rejects tokens that live longer than 20 minutes.
DEFAULT_LIFETIME_SECONDS = 20 * 60
DEFAULT_REFRESH_MARGIN_SECONDS = 60


class TokenSigningError(Exception):
    """Raised when a bearer token cannot be produced from the key material."""


class TokenProvider(Protocol):
    def get_token(self) -> str: ...


class JWTTokenProvider:
    """
    Caches one signed token and re-signs when it is within the refresh
    margin of expiry. Concurrent callers may both re-sign; the last write wins
    and either token is valid.
    """

    def __init__(
        self,
        *,
        issuer_id: str,
        key_id: str,
        private_key: Any,
        lifetime_seconds: int = DEFAULT_LIFETIME_SECONDS,
        refresh_margin_seconds: int = DEFAULT_REFRESH_MARGIN_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        if refresh_margin_seconds >= lifetime_seconds:
            raise ValueError("refresh_margin_seconds must be below lifetime_seconds")
        self.issuer_id = issuer_id
        self.key_id = key_id
        self._private_key = private_key
        self.lifetime_seconds = lifetime_seconds
        self.refresh_margin_seconds = refresh_margin_seconds
        self._clock = clock
        self._token: Optional[str] = None
        self._expires_at: float = 0.0

    @property
    def expires_at(self) -> float:
        return self._expires_at

    def _is_fresh(self, now: float) -> bool:
        return (
            self._token is not None
            and self._expires_at - now > self.refresh_margin_seconds
        )

    def get_token(self) -> str:
        now = self._clock()
        if self._is_fresh(now):
            return self._token  # type: ignore[return-value]

        issued_at = int(now)
        expires_at = issued_at + self.lifetime_seconds
        claims = {
            "iss": self.issuer_id,
            "iat": issued_at,
            "exp": expires_at,
            "aud": AUDIENCE,
        }
        try:
            token = jwt.encode(
                claims,
                self._private_key,
                algorithm=ALGORITHM,
                headers={"kid": self.key_id, "typ": "JWT"},
            )
        except (jwt.PyJWTError, ValueError, TypeError) as exc:
            raise TokenSigningError(f"Failed to sign App Store Connect token: {exc}") from exc

        self._token = token
        self._expires_at = float(expires_at)
        return token


class BearerTokenAuth(httpx.Auth):
    """httpx auth flow attaching a fresh bearer token to every request."""

    def __init__(self, provider: TokenProvider):
        self.provider = provider

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.provider.get_token()}"
        yield request


__all__ = [
    "AUDIENCE",
    "ALGORITHM",
    "TokenProvider",
    "JWTTokenProvider",
    "TokenSigningError",
    "BearerTokenAuth",
]
