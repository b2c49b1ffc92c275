from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from cryptography.hazmat.primitives.serialization import load_pem_private_key
from dotenv import load_dotenv

from .auth import JWTTokenProvider
from .client import DEFAULT_BASE_URL, DEFAULT_MAX_PAGES, AppStoreConnectClient

ISSUER_ID_ENV = "APP_STORE_CONNECT_ISSUER_ID"
KEY_ID_ENV = "APP_STORE_CONNECT_KEY_ID"
P8_PATH_ENV = "APP_STORE_CONNECT_P8_PATH"
PRIVATE_KEY_ENV = "APP_STORE_CONNECT_PRIVATE_KEY"
BASE_URL_ENV = "APP_STORE_CONNECT_BASE_URL"
MAX_PAGES_ENV = "APP_STORE_CONNECT_MAX_PAGES"


class ConfigurationError(ValueError):
    """Raised at startup when credentials or settings are missing or invalid."""


@dataclass(frozen=True)
class AuthConfig:
    issuer_id: str
    key_id: str
    private_key: Any  # cryptography EllipticCurvePrivateKey
    base_url: str = DEFAULT_BASE_URL
    max_pages: int = DEFAULT_MAX_PAGES


def _env(name: str) -> str:
    return os.getenv(name, "").strip()


def _read_private_key_pem() -> str:
    inline = _env(PRIVATE_KEY_ENV)
    if inline:
        # Allow single-line values with literal "\n" escapes (common in .env files).
        return inline.replace("\\n", "\n")

    path = _env(P8_PATH_ENV)
    if not path:
        raise ConfigurationError(
            f"Missing private key: set {P8_PATH_ENV} or {PRIVATE_KEY_ENV}."
        )
    try:
        return Path(path).expanduser().read_text()
    except OSError as exc:
        raise ConfigurationError(
            f"{P8_PATH_ENV} points to an unreadable file: {path} ({exc})"
        ) from exc


def _parse_max_pages() -> int:
    raw = _env(MAX_PAGES_ENV)
    if not raw:
        return DEFAULT_MAX_PAGES
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        raise ConfigurationError(f"{MAX_PAGES_ENV} must be a positive integer (got {raw!r}).")
    return value


def load_auth_config(*, use_dotenv: bool = True) -> AuthConfig:
    """Load and validate App Store Connect credentials from the environment (optional .env)."""
    if use_dotenv:
        load_dotenv()

    issuer_id = _env(ISSUER_ID_ENV)
    if not issuer_id:
        raise ConfigurationError(f"Missing {ISSUER_ID_ENV} in environment.")
    key_id = _env(KEY_ID_ENV)
    if not key_id:
        raise ConfigurationError(f"Missing {KEY_ID_ENV} in environment.")

    pem = _read_private_key_pem()
    try:
        private_key = load_pem_private_key(pem.encode(), password=None)
    except (ValueError, TypeError) as exc:
        raise ConfigurationError(
            f"Private key is not a valid unencrypted PEM (.p8) key: {exc}"
        ) from exc

    return AuthConfig(
        issuer_id=issuer_id,
        key_id=key_id,
        private_key=private_key,
        base_url=_env(BASE_URL_ENV) or DEFAULT_BASE_URL,
        max_pages=_parse_max_pages(),
    )


def create_client_from_env(**kwargs) -> AppStoreConnectClient:
    """Create an AppStoreConnectClient from environment variables."""
    config = load_auth_config()
    provider = JWTTokenProvider(
        issuer_id=config.issuer_id,
        key_id=config.key_id,
        private_key=config.private_key,
    )
    return AppStoreConnectClient(
        token_provider=provider,
        base_url=config.base_url,
        max_pages=config.max_pages,
        **kwargs,
    )


__all__ = [
    "AuthConfig",
    "ConfigurationError",
    "load_auth_config",
    "create_client_from_env",
]
