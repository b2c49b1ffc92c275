from __future__ import annotations

from appstore_connect_mcp.core.endpoints import Endpoint, filter_param, include, limit

ENDPOINTS = (
    Endpoint(
        name="list_users",
        description="List App Store Connect team members, optionally filtered by username or role.",
        method="GET",
        path="/v1/users",
        params=(
            filter_param("username", "Filter by username (Apple ID email)"),
            filter_param("roles", "Filter by role (e.g., ADMIN, DEVELOPER, APP_MANAGER)"),
            include("Comma-separated includes (e.g., visibleApps)"),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="list_devices",
        description="List devices registered for development and ad hoc distribution.",
        method="GET",
        path="/v1/devices",
        params=(
            filter_param("name", "Filter by device name"),
            filter_param("platform", "Filter by platform (IOS, MAC_OS)"),
            filter_param("status", "Filter by status (ENABLED, DISABLED)"),
            filter_param("udid", "Filter by device UDID"),
            limit(),
        ),
        paginated=True,
    ),
)
