from __future__ import annotations

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    filter_param,
    include,
    limit,
    path_id,
)

ENDPOINTS = (
    Endpoint(
        name="list_app_price_points",
        description="List available price points for an app, optionally filtered by territory.",
        method="GET",
        path="/v1/apps/{app_id}/appPricePoints",
        params=(
            path_id("app_id", "The App Store Connect app ID"),
            filter_param("territory", "Filter by territory code (e.g., USA, GBR, JPN)"),
            include(
                "Comma-separated related resources to include (default: territory)",
                default="territory",
            ),
            limit("Number of price points to return (max 200)"),
        ),
        paginated=True,
    ),
    Endpoint(
        name="get_app_price_schedule",
        description="Get the price schedule for an app, including manual and automatic prices.",
        method="GET",
        path="/v1/apps/{app_id}/appPriceSchedule",
        params=(
            path_id("app_id", "The App Store Connect app ID"),
            include(
                "Comma-separated related resources to include "
                "(default: manualPrices,automaticPrices)",
                default="manualPrices,automaticPrices",
            ),
        ),
    ),
    Endpoint(
        name="list_territories",
        description="List all available App Store territories (countries/regions).",
        method="GET",
        path="/v1/territories",
        params=(limit("Number of territories to return (max 200)"),),
        paginated=True,
    ),
)
