from __future__ import annotations

from typing import Any, Dict, List, Literal

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    attr,
    limit,
    path_id,
    rel,
    resource_id,
)

Badge = Literal[
    "LIVE_EVENT",
    "PREMIERE",
    "CHALLENGE",
    "COMPETITION",
    "NEW_SEASON",
    "MAJOR_UPDATE",
    "SPECIAL_EVENT",
]
PurchaseRequirement = Literal[
    "NO_COST_ASSOCIATED",
    "IN_APP_PURCHASE",
    "SUBSCRIPTION",
    "IN_APP_PURCHASE_AND_SUBSCRIPTION",
    "IN_APP_PURCHASE_OR_SUBSCRIPTION",
]
Priority = Literal["HIGH", "NORMAL"]
Purpose = Literal[
    "APPROPRIATE_FOR_ALL_USERS",
    "ATTRACT_NEW_USERS",
    "KEEP_ACTIVE_USERS_INFORMED",
    "BRING_BACK_LAPSED_USERS",
]
TerritorySchedules = List[Dict[str, Any]]

ENDPOINTS = (
    Endpoint(
        name="list_app_events",
        description="List in-app events for an app.",
        method="GET",
        path="/v1/apps/{app_id}/appEvents",
        params=(path_id("app_id", "The App Store Connect app ID"), limit()),
        paginated=True,
    ),
    Endpoint(
        name="create_app_event",
        description="Create a new in-app event for an app.",
        method="POST",
        path="/v1/appEvents",
        resource_type="appEvents",
        params=(
            rel("app_id", "app", "apps", "The App Store Connect app ID"),
            attr("referenceName", "A reference name for the event", required=True),
            attr("badge", "The badge type for the event", annotation=Badge, required=True),
            attr("deepLink", "Deep link URL for the event"),
            attr(
                "purchaseRequirement",
                "Purchase requirement for the event",
                annotation=PurchaseRequirement,
            ),
            attr("primaryLocale", "Primary locale for the event (e.g., en-US)"),
            attr("priority", "Priority of the event", annotation=Priority),
            attr("purpose", "Target audience purpose for the event", annotation=Purpose),
            attr(
                "territorySchedules",
                "Territory schedule objects with publishStart, eventStart, eventEnd",
                annotation=TerritorySchedules,
            ),
        ),
    ),
    Endpoint(
        name="update_app_event",
        description="Update an existing in-app event.",
        method="PATCH",
        path="/v1/appEvents/{id}",
        resource_type="appEvents",
        params=(
            resource_id("The app event ID"),
            attr("referenceName", "Updated reference name"),
            attr("badge", "Updated badge type", annotation=Badge),
            attr("deepLink", "Updated deep link URL"),
            attr(
                "purchaseRequirement",
                "Updated purchase requirement",
                annotation=PurchaseRequirement,
            ),
            attr("primaryLocale", "Updated primary locale"),
            attr("priority", "Updated priority", annotation=Priority),
            attr("purpose", "Updated purpose", annotation=Purpose),
            attr(
                "territorySchedules",
                "Updated territory schedule objects",
                annotation=TerritorySchedules,
            ),
        ),
    ),
    Endpoint(
        name="delete_app_event",
        description="Delete an in-app event.",
        method="DELETE",
        path="/v1/appEvents/{id}",
        params=(path_id("id", "The app event ID to delete"),),
        ack="Deleted app event {id}",
    ),
    Endpoint(
        name="list_app_event_localizations",
        description="List localizations for an in-app event.",
        method="GET",
        path="/v1/appEvents/{event_id}/localizations",
        params=(path_id("event_id", "The app event ID"), limit()),
        paginated=True,
    ),
    Endpoint(
        name="create_app_event_localization",
        description="Create a localization for an in-app event.",
        method="POST",
        path="/v1/appEventLocalizations",
        resource_type="appEventLocalizations",
        params=(
            rel("event_id", "appEvent", "appEvents", "The app event ID"),
            attr("locale", "The locale code (e.g., en-US, fr-FR)", required=True),
            attr("name", "Localized name of the event", required=True),
            attr("shortDescription", "Localized short description"),
            attr("longDescription", "Localized long description"),
        ),
    ),
    Endpoint(
        name="update_app_event_localization",
        description="Update a localization for an in-app event.",
        method="PATCH",
        path="/v1/appEventLocalizations/{id}",
        resource_type="appEventLocalizations",
        params=(
            resource_id("The app event localization ID"),
            attr("name", "Updated localized name"),
            attr("shortDescription", "Updated localized short description"),
            attr("longDescription", "Updated localized long description"),
        ),
    ),
    Endpoint(
        name="delete_app_event_localization",
        description="Delete a localization for an in-app event.",
        method="DELETE",
        path="/v1/appEventLocalizations/{id}",
        params=(path_id("id", "The app event localization ID to delete"),),
        ack="Deleted app event localization {id}",
    ),
)
