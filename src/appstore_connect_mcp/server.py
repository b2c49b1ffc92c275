from __future__ import annotations

from typing import Callable, Union

from mcp.server.fastmcp import FastMCP

from appstore_connect_mcp.core.client import AppStoreConnectClient
from appstore_connect_mcp.core.config import create_client_from_env
from appstore_connect_mcp.core.registry import register_discovered_tools

SERVER_NAME = "app-store-connect"


def build_app(
    client: Union[AppStoreConnectClient, Callable[[], AppStoreConnectClient]],
) -> FastMCP:
    """Create the FastMCP app with every discovered tool bound to the given client."""
    app = FastMCP(SERVER_NAME)
    register_discovered_tools(app, client)
    return app


__all__ = ["SERVER_NAME", "build_app", "create_client_from_env"]
