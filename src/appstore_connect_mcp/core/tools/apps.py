from __future__ import annotations

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    attr,
    filter_param,
    include,
    limit,
    path_id,
)

APP_ID = "The App Store Connect app ID"

ENDPOINTS = (
    Endpoint(
        name="list_apps",
        description="List apps in App Store Connect, optionally filtered by bundle ID, name, or SKU.",
        method="GET",
        path="/v1/apps",
        params=(
            filter_param("bundleId", "Filter by bundle identifier (e.g., com.example.app)"),
            filter_param("name", "Filter by app name"),
            filter_param("sku", "Filter by SKU"),
            include("Comma-separated includes (e.g., appInfos,appStoreVersions,builds)"),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="get_app",
        description="Get details for a specific app.",
        method="GET",
        path="/v1/apps/{app_id}",
        params=(
            path_id("app_id", APP_ID),
            include("Comma-separated includes (e.g., appInfos,appStoreVersions,betaGroups)"),
        ),
    ),
    Endpoint(
        name="create_app",
        description="Create a new app record with a name, bundle ID, SKU, and primary locale.",
        method="POST",
        path="/v1/apps",
        resource_type="apps",
        params=(
            attr("name", "The app name as shown on the App Store", required=True),
            attr("bundleId", "The bundle identifier registered for the app", required=True),
            attr("sku", "A unique SKU for the app", required=True),
            attr("primaryLocale", "Primary locale (e.g., en-US)", required=True),
        ),
    ),
)
