from __future__ import annotations

from typing import Literal

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    attr,
    path_id,
    rel,
    resource_id,
)

VERSION_ID = "The App Store version ID"

ENDPOINTS = (
    Endpoint(
        name="get_phased_release",
        description="Get the phased release status for an App Store version.",
        method="GET",
        path="/v1/appStoreVersions/{version_id}/appStoreVersionPhasedRelease",
        params=(path_id("version_id", VERSION_ID),),
    ),
    Endpoint(
        name="create_phased_release",
        description=(
            "Create a phased release for an App Store version. "
            "Rolls out to users gradually over 7 days."
        ),
        method="POST",
        path="/v1/appStoreVersionPhasedReleases",
        resource_type="appStoreVersionPhasedReleases",
        params=(
            rel("version_id", "appStoreVersion", "appStoreVersions", VERSION_ID),
            attr(
                "phasedReleaseState",
                "Initial phased release state (INACTIVE to create without starting, "
                "ACTIVE to begin rollout)",
                annotation=Literal["INACTIVE", "ACTIVE"],
                required=True,
            ),
        ),
    ),
    Endpoint(
        name="update_phased_release",
        description=(
            "Update a phased release state. Use PAUSED to halt rollout, ACTIVE to "
            "resume, or COMPLETE to release to all users."
        ),
        method="PATCH",
        path="/v1/appStoreVersionPhasedReleases/{id}",
        resource_type="appStoreVersionPhasedReleases",
        params=(
            resource_id("The phased release ID"),
            attr(
                "phasedReleaseState",
                "New phased release state",
                annotation=Literal["ACTIVE", "PAUSED", "COMPLETE"],
                required=True,
            ),
        ),
    ),
    Endpoint(
        name="delete_phased_release",
        description="Delete a phased release configuration from an App Store version.",
        method="DELETE",
        path="/v1/appStoreVersionPhasedReleases/{id}",
        params=(path_id("id", "The phased release ID to delete"),),
        ack="Deleted phased release {id}",
    ),
    Endpoint(
        name="create_version_release_request",
        description=(
            "Manually release a version that is waiting for developer release. "
            "Triggers immediate release to the App Store."
        ),
        method="POST",
        path="/v1/appStoreVersionReleaseRequests",
        resource_type="appStoreVersionReleaseRequests",
        params=(
            rel("version_id", "appStoreVersion", "appStoreVersions", "The App Store version ID to release"),
        ),
    ),
)
