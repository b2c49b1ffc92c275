from .auth import TokenSigningError
from .client import (
    AppStoreConnectAPIError,
    AppStoreConnectClientError,
    AppStoreConnectParseError,
)
from .config import ConfigurationError

__all__ = [
    "AppStoreConnectClientError",
    "AppStoreConnectAPIError",
    "AppStoreConnectParseError",
    "ConfigurationError",
    "TokenSigningError",
]
