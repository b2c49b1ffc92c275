from __future__ import annotations

from appstore_connect_mcp.core.endpoints import Endpoint, rel

ENDPOINTS = (
    Endpoint(
        name="create_app_store_version_submission",
        description="Submit an App Store version for App Review.",
        method="POST",
        path="/v1/appStoreVersionSubmissions",
        resource_type="appStoreVersionSubmissions",
        params=(
            rel(
                "version_id",
                "appStoreVersion",
                "appStoreVersions",
                "The App Store version ID to submit",
            ),
        ),
    ),
)
