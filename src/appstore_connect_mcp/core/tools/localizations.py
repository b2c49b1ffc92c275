from __future__ import annotations

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    attr,
    limit,
    path_id,
    rel,
    resource_id,
)


def _text_attributes(prefix: str):
    return (
        attr("description", f"{prefix}App description"),
        attr("keywords", f"{prefix}Comma-separated keywords"),
        attr("marketingUrl", f"{prefix}Marketing URL"),
        attr("promotionalText", f"{prefix}Promotional text"),
        attr("supportUrl", f"{prefix}Support URL"),
        attr("whatsNew", f"{prefix}What's new in this version"),
    )


ENDPOINTS = (
    Endpoint(
        name="list_version_localizations",
        description="List localizations (description, keywords, what's new per locale) for an App Store version.",
        method="GET",
        path="/v1/appStoreVersions/{version_id}/appStoreVersionLocalizations",
        params=(path_id("version_id", "The App Store version ID"), limit()),
        paginated=True,
    ),
    Endpoint(
        name="get_version_localization",
        description="Get a specific App Store version localization.",
        method="GET",
        path="/v1/appStoreVersionLocalizations/{id}",
        params=(path_id("id", "The App Store version localization ID"),),
    ),
    Endpoint(
        name="create_version_localization",
        description="Create a localization for an App Store version in a new locale.",
        method="POST",
        path="/v1/appStoreVersionLocalizations",
        resource_type="appStoreVersionLocalizations",
        params=(
            rel("version_id", "appStoreVersion", "appStoreVersions", "The App Store version ID"),
            attr("locale", "Locale code (e.g., en-US, fr-FR)", required=True),
        )
        + _text_attributes(""),
    ),
    Endpoint(
        name="update_version_localization",
        description="Update an App Store version localization's text fields.",
        method="PATCH",
        path="/v1/appStoreVersionLocalizations/{id}",
        resource_type="appStoreVersionLocalizations",
        params=(resource_id("The App Store version localization ID"),)
        + _text_attributes("Updated: "),
    ),
)
