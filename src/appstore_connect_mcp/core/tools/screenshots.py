"""
Screenshot and app preview sets for a version localization.

Creating a screenshot or preview only reserves the asset; the response carries
the upload operations the caller performs afterwards.
"""

from __future__ import annotations

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    attr,
    limit,
    path_id,
    rel,
)

LOCALIZATION_ID = "The App Store version localization ID"

SCREENSHOT_ENDPOINTS = (
    Endpoint(
        name="list_screenshot_sets",
        description="List app screenshot sets for an App Store version localization.",
        method="GET",
        path="/v1/appStoreVersionLocalizations/{localization_id}/appScreenshotSets",
        params=(path_id("localization_id", LOCALIZATION_ID), limit()),
        paginated=True,
    ),
    Endpoint(
        name="create_screenshot_set",
        description="Create a new screenshot set for an App Store version localization.",
        method="POST",
        path="/v1/appScreenshotSets",
        resource_type="appScreenshotSets",
        params=(
            rel(
                "localization_id",
                "appStoreVersionLocalization",
                "appStoreVersionLocalizations",
                LOCALIZATION_ID,
            ),
            attr(
                "screenshotDisplayType",
                "The display type (e.g., APP_IPHONE_67, APP_IPHONE_65, "
                "APP_IPAD_PRO_3GEN_129, APP_DESKTOP, etc.)",
                required=True,
            ),
        ),
    ),
    Endpoint(
        name="delete_screenshot_set",
        description="Delete an app screenshot set.",
        method="DELETE",
        path="/v1/appScreenshotSets/{id}",
        params=(path_id("id", "The app screenshot set ID to delete"),),
        ack="Deleted screenshot set {id}",
    ),
    Endpoint(
        name="list_screenshots",
        description="List screenshots within a screenshot set.",
        method="GET",
        path="/v1/appScreenshotSets/{set_id}/appScreenshots",
        params=(path_id("set_id", "The app screenshot set ID"), limit()),
        paginated=True,
    ),
    Endpoint(
        name="create_screenshot",
        description=(
            "Create a new screenshot (initiates upload). After creation, use the upload "
            "operations from the response to upload the image data."
        ),
        method="POST",
        path="/v1/appScreenshots",
        resource_type="appScreenshots",
        params=(
            rel("set_id", "appScreenshotSet", "appScreenshotSets", "The app screenshot set ID"),
            attr("fileName", "The file name of the screenshot", required=True),
            attr("fileSize", "The file size in bytes", annotation=int, required=True),
        ),
    ),
    Endpoint(
        name="delete_screenshot",
        description="Delete an app screenshot.",
        method="DELETE",
        path="/v1/appScreenshots/{id}",
        params=(path_id("id", "The app screenshot ID to delete"),),
        ack="Deleted screenshot {id}",
    ),
)

PREVIEW_ENDPOINTS = (
    Endpoint(
        name="list_preview_sets",
        description="List app preview sets for an App Store version localization.",
        method="GET",
        path="/v1/appStoreVersionLocalizations/{localization_id}/appPreviewSets",
        params=(path_id("localization_id", LOCALIZATION_ID), limit()),
        paginated=True,
    ),
    Endpoint(
        name="create_preview_set",
        description="Create a new app preview set for an App Store version localization.",
        method="POST",
        path="/v1/appPreviewSets",
        resource_type="appPreviewSets",
        params=(
            rel(
                "localization_id",
                "appStoreVersionLocalization",
                "appStoreVersionLocalizations",
                LOCALIZATION_ID,
            ),
            attr(
                "previewType",
                "The preview type (e.g., IPHONE_67, IPHONE_65, IPAD_PRO_3GEN_129, DESKTOP, etc.)",
                required=True,
            ),
        ),
    ),
    Endpoint(
        name="delete_preview_set",
        description="Delete an app preview set.",
        method="DELETE",
        path="/v1/appPreviewSets/{id}",
        params=(path_id("id", "The app preview set ID to delete"),),
        ack="Deleted preview set {id}",
    ),
    Endpoint(
        name="list_previews",
        description="List app previews within a preview set.",
        method="GET",
        path="/v1/appPreviewSets/{set_id}/appPreviews",
        params=(path_id("set_id", "The app preview set ID"), limit()),
        paginated=True,
    ),
    Endpoint(
        name="create_preview",
        description=(
            "Create a new app preview (initiates upload). After creation, use the upload "
            "operations from the response to upload the video data."
        ),
        method="POST",
        path="/v1/appPreviews",
        resource_type="appPreviews",
        params=(
            rel("set_id", "appPreviewSet", "appPreviewSets", "The app preview set ID"),
            attr("fileName", "The file name of the preview video", required=True),
            attr("fileSize", "The file size in bytes", annotation=int, required=True),
            attr(
                "previewFrameTimeCode",
                "The time code for the preview frame image (e.g., 00:00:05;00)",
            ),
        ),
    ),
    Endpoint(
        name="delete_preview",
        description="Delete an app preview.",
        method="DELETE",
        path="/v1/appPreviews/{id}",
        params=(path_id("id", "The app preview ID to delete"),),
        ack="Deleted preview {id}",
    ),
)

ENDPOINTS = SCREENSHOT_ENDPOINTS + PREVIEW_ENDPOINTS
