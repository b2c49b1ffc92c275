from __future__ import annotations

from typing import Any, Dict, List

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    attr,
    limit,
    path_id,
    rel,
)

ENDPOINTS = (
    Endpoint(
        name="list_bundle_id_capabilities",
        description="List capabilities enabled for a bundle ID.",
        method="GET",
        path="/v1/bundleIds/{bundle_id_id}/bundleIdCapabilities",
        params=(path_id("bundle_id_id", "The bundle ID resource ID"), limit()),
        paginated=True,
    ),
    Endpoint(
        name="enable_bundle_id_capability",
        description="Enable a capability (e.g., PUSH_NOTIFICATIONS, ICLOUD) for a bundle ID.",
        method="POST",
        path="/v1/bundleIdCapabilities",
        resource_type="bundleIdCapabilities",
        params=(
            rel("bundle_id_id", "bundleId", "bundleIds", "The bundle ID resource ID"),
            attr(
                "capabilityType",
                "Capability type (e.g., PUSH_NOTIFICATIONS, ICLOUD, APP_GROUPS, IN_APP_PURCHASE)",
                required=True,
            ),
            attr(
                "settings",
                "Capability settings objects ({key, options: [{key, enabled}]})",
                annotation=List[Dict[str, Any]],
            ),
        ),
    ),
    Endpoint(
        name="disable_bundle_id_capability",
        description="Disable a capability for a bundle ID.",
        method="DELETE",
        path="/v1/bundleIdCapabilities/{capability_id}",
        params=(path_id("capability_id", "The bundle ID capability ID"),),
        ack="Disabled bundle ID capability {capability_id}",
    ),
)
