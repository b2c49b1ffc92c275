from __future__ import annotations

from typing import Literal

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    attr,
    limit,
    path_id,
    rel,
    resource_id,
)

ClipAction = Literal["OPEN"]

ENDPOINTS = (
    Endpoint(
        name="list_app_clips",
        description="List App Clips for an app.",
        method="GET",
        path="/v1/apps/{app_id}/appClips",
        params=(path_id("app_id", "The App Store Connect app ID"), limit()),
        fixed_query={"include": "appClipDefaultExperiences"},
        paginated=True,
    ),
    Endpoint(
        name="get_app_clip",
        description="Get details of a specific App Clip.",
        method="GET",
        path="/v1/appClips/{id}",
        params=(path_id("id", "The App Clip ID"),),
        fixed_query={"include": "appClipDefaultExperiences"},
    ),
    Endpoint(
        name="list_app_clip_default_experiences",
        description="List default experiences for an App Clip.",
        method="GET",
        path="/v1/appClips/{clip_id}/appClipDefaultExperiences",
        params=(path_id("clip_id", "The App Clip ID"), limit()),
        fixed_query={"include": "appClipDefaultExperienceLocalizations"},
        paginated=True,
    ),
    Endpoint(
        name="create_app_clip_default_experience",
        description="Create a default experience for an App Clip.",
        method="POST",
        path="/v1/appClipDefaultExperiences",
        resource_type="appClipDefaultExperiences",
        params=(
            rel("clip_id", "appClip", "appClips", "The App Clip ID"),
            rel(
                "appStoreVersion_id",
                "appStoreVersion",
                "appStoreVersions",
                "The App Store version ID to associate this experience with",
            ),
            attr(
                "action",
                "The action for the default experience",
                annotation=ClipAction,
                default="OPEN",
            ),
        ),
    ),
    Endpoint(
        name="update_app_clip_default_experience",
        description="Update a default experience for an App Clip.",
        method="PATCH",
        path="/v1/appClipDefaultExperiences/{id}",
        resource_type="appClipDefaultExperiences",
        params=(
            resource_id("The App Clip default experience ID"),
            attr("action", "Updated action", annotation=ClipAction),
        ),
    ),
    Endpoint(
        name="delete_app_clip_default_experience",
        description="Delete a default experience for an App Clip.",
        method="DELETE",
        path="/v1/appClipDefaultExperiences/{id}",
        params=(path_id("id", "The App Clip default experience ID to delete"),),
        ack="Deleted App Clip default experience {id}",
    ),
)
