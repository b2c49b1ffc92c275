"""Core domain surface for appstore-connect-mcp (transport-agnostic)."""

from .auth import BearerTokenAuth, JWTTokenProvider, TokenProvider, TokenSigningError
from .client import (
    AppStoreConnectAPIError,
    AppStoreConnectClient,
    AppStoreConnectClientError,
    AppStoreConnectParseError,
)
from .config import (
    AuthConfig,
    ConfigurationError,
    create_client_from_env,
    load_auth_config,
)
from .endpoints import ApiRequest, Endpoint, Param
from .jsonapi import acknowledgement, merge_pages, next_link, render_json
from .models import JsonApiError
from .registry import (
    discover_tool_modules,
    iter_tool_functions,
    register_discovered_tools,
)

__all__ = [
    # Auth
    "TokenProvider",
    "JWTTokenProvider",
    "BearerTokenAuth",
    # Client
    "AppStoreConnectClient",
    # Exceptions
    "AppStoreConnectClientError",
    "AppStoreConnectAPIError",
    "AppStoreConnectParseError",
    "ConfigurationError",
    "TokenSigningError",
    "JsonApiError",
    # JSON:API utilities
    "next_link",
    "merge_pages",
    "render_json",
    "acknowledgement",
    # Endpoint descriptors
    "Endpoint",
    "Param",
    "ApiRequest",
    # Config helpers
    "AuthConfig",
    "load_auth_config",
    "create_client_from_env",
    # Registry helpers
    "discover_tool_modules",
    "iter_tool_functions",
    "register_discovered_tools",
]
