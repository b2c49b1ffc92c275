import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from appstore_connect_mcp.core.client import AppStoreConnectClient

BASE_URL = "https://api.appstoreconnect.apple.com"


class StaticTokenProvider:
    def __init__(self, token: str = "test-token"):
        self.token = token
        self.calls = 0

    def get_token(self) -> str:
        self.calls += 1
        return self.token


@pytest.fixture
def p256_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def p256_pem(p256_key) -> str:
    return p256_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture
def token_provider():
    return StaticTokenProvider()


@pytest.fixture
def make_client(token_provider):
    def _make(**kwargs) -> AppStoreConnectClient:
        kwargs.setdefault("token_provider", token_provider)
        return AppStoreConnectClient(**kwargs)

    return _make
