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

IAP_ID = "The in-app purchase ID"

InAppPurchaseType = Literal["CONSUMABLE", "NON_CONSUMABLE", "NON_RENEWING_SUBSCRIPTION"]

PURCHASE_ENDPOINTS = (
    Endpoint(
        name="list_in_app_purchases",
        description="List in-app purchases for an app.",
        method="GET",
        path="/v1/apps/{app_id}/inAppPurchasesV2",
        params=(
            path_id("app_id", "The App Store Connect app ID"),
            filter_param(
                "inAppPurchaseType",
                "Filter by type (CONSUMABLE, NON_CONSUMABLE, NON_RENEWING_SUBSCRIPTION)",
            ),
            filter_param("name", "Filter by name"),
            filter_param("productId", "Filter by product ID"),
            include(
                "Comma-separated related resources to include "
                "(e.g., inAppPurchaseLocalizations,pricePoints,content)"
            ),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="get_in_app_purchase",
        description="Get details of a specific in-app purchase.",
        method="GET",
        path="/v2/inAppPurchases/{id}",
        params=(
            path_id("id", IAP_ID),
            include(
                "Comma-separated related resources to include (e.g., inAppPurchaseLocalizations,"
                "pricePoints,content,appStoreReviewScreenshot)"
            ),
        ),
    ),
    Endpoint(
        name="create_in_app_purchase",
        description="Create a new in-app purchase for an app.",
        method="POST",
        path="/v2/inAppPurchases",
        resource_type="inAppPurchases",
        params=(
            rel("app_id", "app", "apps", "The App Store Connect app ID"),
            attr("name", "The name of the in-app purchase", required=True),
            attr("productId", "A unique product ID for the in-app purchase", required=True),
            attr(
                "inAppPurchaseType",
                "The type of in-app purchase",
                annotation=InAppPurchaseType,
                required=True,
            ),
        ),
    ),
    Endpoint(
        name="update_in_app_purchase",
        description="Update an existing in-app purchase.",
        method="PATCH",
        path="/v2/inAppPurchases/{id}",
        resource_type="inAppPurchases",
        params=(
            resource_id(IAP_ID),
            attr("name", "Updated name"),
            attr("reviewNote", "Review note for App Review"),
            attr("familySharable", "Whether the purchase is family sharable", annotation=bool),
        ),
    ),
    Endpoint(
        name="delete_in_app_purchase",
        description="Delete an in-app purchase.",
        method="DELETE",
        path="/v2/inAppPurchases/{id}",
        params=(path_id("id", "The in-app purchase ID to delete"),),
        ack="Deleted in-app purchase {id}",
    ),
)

LOCALIZATION_ENDPOINTS = (
    Endpoint(
        name="list_iap_localizations",
        description="List localizations for an in-app purchase.",
        method="GET",
        path="/v2/inAppPurchases/{iap_id}/inAppPurchaseLocalizations",
        params=(path_id("iap_id", IAP_ID), limit()),
        paginated=True,
    ),
    Endpoint(
        name="create_iap_localization",
        description="Create a localization for an in-app purchase.",
        method="POST",
        path="/v1/inAppPurchaseLocalizations",
        resource_type="inAppPurchaseLocalizations",
        params=(
            rel("iap_id", "inAppPurchase", "inAppPurchases", IAP_ID),
            attr("locale", "The locale code (e.g., en-US, fr-FR)", required=True),
            attr("name", "Localized name of the in-app purchase", required=True),
            attr("description", "Localized description of the in-app purchase"),
        ),
    ),
    Endpoint(
        name="update_iap_localization",
        description="Update a localization for an in-app purchase.",
        method="PATCH",
        path="/v1/inAppPurchaseLocalizations/{id}",
        resource_type="inAppPurchaseLocalizations",
        params=(
            resource_id("The in-app purchase localization ID"),
            attr("name", "Updated localized name"),
            attr("description", "Updated localized description"),
        ),
    ),
    Endpoint(
        name="delete_iap_localization",
        description="Delete a localization for an in-app purchase.",
        method="DELETE",
        path="/v1/inAppPurchaseLocalizations/{id}",
        params=(path_id("id", "The in-app purchase localization ID to delete"),),
        ack="Deleted in-app purchase localization {id}",
    ),
)

REVIEW_ENDPOINTS = (
    Endpoint(
        name="list_iap_price_points",
        description="List price points for an in-app purchase, optionally filtered by territory.",
        method="GET",
        path="/v2/inAppPurchases/{iap_id}/pricePoints",
        params=(
            path_id("iap_id", IAP_ID),
            filter_param("territory", "Filter by territory code (e.g., USA, GBR)"),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="submit_iap_for_review",
        description="Submit an in-app purchase for App Review.",
        method="POST",
        path="/v1/inAppPurchaseSubmissions",
        resource_type="inAppPurchaseSubmissions",
        params=(
            rel(
                "iap_id",
                "inAppPurchase",
                "inAppPurchases",
                "The in-app purchase ID to submit for review",
            ),
        ),
    ),
)

ENDPOINTS = PURCHASE_ENDPOINTS + LOCALIZATION_ENDPOINTS + REVIEW_ENDPOINTS
