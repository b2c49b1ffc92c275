from __future__ import annotations

from typing import Literal

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    attr,
    filter_param,
    include,
    limit,
    path_id,
    rel,
    resource_id,
)

Platform = Literal["IOS", "MAC_OS", "TV_OS", "VISION_OS"]
ReleaseType = Literal["MANUAL", "AFTER_APPROVAL", "SCHEDULED"]

ENDPOINTS = (
    Endpoint(
        name="list_app_store_versions",
        description="List App Store versions for an app, optionally filtered by platform, state, or version string.",
        method="GET",
        path="/v1/apps/{app_id}/appStoreVersions",
        params=(
            path_id("app_id", "The App Store Connect app ID"),
            filter_param("platform", "Filter by platform", annotation=Platform),
            filter_param(
                "appStoreState",
                "Filter by state (e.g., PREPARE_FOR_SUBMISSION, WAITING_FOR_REVIEW, READY_FOR_SALE)",
            ),
            filter_param("versionString", "Filter by version string (e.g., 1.2.0)"),
            include("Comma-separated includes (e.g., build,appStoreVersionLocalizations)"),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="create_app_store_version",
        description="Create a new App Store version for an app.",
        method="POST",
        path="/v1/appStoreVersions",
        resource_type="appStoreVersions",
        params=(
            rel("app_id", "app", "apps", "The App Store Connect app ID"),
            attr("platform", "The platform for this version", annotation=Platform, required=True),
            attr("versionString", "The version string (e.g., 1.2.0)", required=True),
            attr("copyright", "Copyright text (e.g., 2026 Example Inc.)"),
            attr("releaseType", "How the version is released after approval", annotation=ReleaseType),
            attr(
                "earliestReleaseDate",
                "Earliest release date for SCHEDULED releases (ISO 8601)",
            ),
        ),
    ),
    Endpoint(
        name="update_app_store_version",
        description="Update an App Store version's version string, copyright, or release settings.",
        method="PATCH",
        path="/v1/appStoreVersions/{id}",
        resource_type="appStoreVersions",
        params=(
            resource_id("The App Store version ID"),
            attr("versionString", "Updated version string"),
            attr("copyright", "Updated copyright text"),
            attr("releaseType", "Updated release type", annotation=ReleaseType),
            attr("earliestReleaseDate", "Updated earliest release date (ISO 8601)"),
            attr("downloadable", "Whether the version is downloadable", annotation=bool),
        ),
    ),
)
