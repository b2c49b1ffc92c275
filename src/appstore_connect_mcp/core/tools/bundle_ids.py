from __future__ import annotations

from typing import Literal

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    attr,
    filter_param,
    include,
    limit,
)

BundlePlatform = Literal["IOS", "MAC_OS", "UNIVERSAL"]

ENDPOINTS = (
    Endpoint(
        name="list_bundle_ids",
        description="List registered bundle IDs, optionally filtered by identifier, name, or platform.",
        method="GET",
        path="/v1/bundleIds",
        params=(
            filter_param("identifier", "Filter by identifier (e.g., com.example.app)"),
            filter_param("name", "Filter by bundle ID name"),
            filter_param("platform", "Filter by platform", annotation=BundlePlatform),
            include("Comma-separated includes (e.g., profiles,bundleIdCapabilities,app)"),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="register_bundle_id",
        description="Register a new bundle ID for use with apps and provisioning profiles.",
        method="POST",
        path="/v1/bundleIds",
        resource_type="bundleIds",
        params=(
            attr("identifier", "The bundle identifier (e.g., com.example.app)", required=True),
            attr("name", "A display name for the bundle ID", required=True),
            attr("platform", "The platform", annotation=BundlePlatform, required=True),
            attr("seedId", "Team seed ID (App ID prefix); defaults to the team ID"),
        ),
    ),
)
