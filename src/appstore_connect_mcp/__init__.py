"""appstore_connect_mcp package exports."""

from .core.auth import JWTTokenProvider, TokenProvider, TokenSigningError
from .core.client import (
    AppStoreConnectAPIError,
    AppStoreConnectClient,
    AppStoreConnectClientError,
    AppStoreConnectParseError,
)
from .core.config import ConfigurationError, create_client_from_env, load_auth_config
from .core.jsonapi import merge_pages, next_link, render_json
from .core.registry import discover_tool_modules, register_discovered_tools
from .server import build_app

__all__ = [
    # Client
    "AppStoreConnectClient",
    "TokenProvider",
    "JWTTokenProvider",
    # Exceptions
    "AppStoreConnectClientError",
    "AppStoreConnectAPIError",
    "AppStoreConnectParseError",
    "ConfigurationError",
    "TokenSigningError",
    # JSON:API utilities
    "next_link",
    "merge_pages",
    "render_json",
    # Server utilities
    "build_app",
    "create_client_from_env",
    "load_auth_config",
    "discover_tool_modules",
    "register_discovered_tools",
]
