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

SUB_ID = "The subscription ID"
GROUP_ID = "The subscription group ID"

SubscriptionPeriod = Literal[
    "ONE_WEEK",
    "ONE_MONTH",
    "TWO_MONTHS",
    "THREE_MONTHS",
    "SIX_MONTHS",
    "ONE_YEAR",
]
OfferMode = Literal["PAY_AS_YOU_GO", "PAY_UP_FRONT", "FREE_TRIAL"]

GROUP_INCLUDE = (
    "Comma-separated related resources to include "
    "(e.g., subscriptions,subscriptionGroupLocalizations)"
)

GROUP_ENDPOINTS = (
    Endpoint(
        name="list_subscription_groups",
        description="List subscription groups for an app.",
        method="GET",
        path="/v1/apps/{app_id}/subscriptionGroups",
        params=(
            path_id("app_id", "The App Store Connect app ID"),
            include(GROUP_INCLUDE),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="create_subscription_group",
        description="Create a new subscription group for an app.",
        method="POST",
        path="/v1/subscriptionGroups",
        resource_type="subscriptionGroups",
        params=(
            rel("app_id", "app", "apps", "The App Store Connect app ID"),
            attr("referenceName", "A reference name for the subscription group", required=True),
        ),
    ),
    Endpoint(
        name="get_subscription_group",
        description="Get details of a specific subscription group.",
        method="GET",
        path="/v1/subscriptionGroups/{id}",
        params=(path_id("id", GROUP_ID), include(GROUP_INCLUDE)),
    ),
    Endpoint(
        name="submit_subscription_group",
        description="Submit a subscription group for App Review.",
        method="POST",
        path="/v1/subscriptionGroupSubmissions",
        resource_type="subscriptionGroupSubmissions",
        params=(
            rel(
                "subscription_group_id",
                "subscriptionGroup",
                "subscriptionGroups",
                "The subscription group ID to submit for review",
            ),
        ),
    ),
)

SUBSCRIPTION_ENDPOINTS = (
    Endpoint(
        name="list_subscriptions",
        description="List subscriptions within a subscription group.",
        method="GET",
        path="/v1/subscriptionGroups/{group_id}/subscriptions",
        params=(
            path_id("group_id", GROUP_ID),
            include(
                "Comma-separated related resources to include "
                "(e.g., subscriptionLocalizations,subscriptionAvailability)"
            ),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="create_subscription",
        description="Create a new subscription within a subscription group.",
        method="POST",
        path="/v1/subscriptions",
        resource_type="subscriptions",
        params=(
            rel("group_id", "group", "subscriptionGroups", GROUP_ID),
            attr("name", "The name of the subscription", required=True),
            attr("productId", "A unique product ID for the subscription", required=True),
            attr(
                "subscriptionPeriod",
                "The subscription renewal period",
                annotation=SubscriptionPeriod,
                required=True,
            ),
            attr("familySharable", "Whether the subscription is family sharable", annotation=bool),
            attr("reviewNote", "Review note for App Review"),
            attr(
                "groupLevel",
                "The level of the subscription within the group (1 is highest)",
                annotation=int,
            ),
        ),
    ),
    Endpoint(
        name="update_subscription",
        description="Update an existing subscription.",
        method="PATCH",
        path="/v1/subscriptions/{id}",
        resource_type="subscriptions",
        params=(
            resource_id(SUB_ID),
            attr("name", "Updated name"),
            attr("familySharable", "Whether the subscription is family sharable", annotation=bool),
            attr(
                "subscriptionPeriod",
                "Updated subscription renewal period",
                annotation=SubscriptionPeriod,
            ),
            attr("reviewNote", "Updated review note for App Review"),
            attr("groupLevel", "Updated level within the subscription group", annotation=int),
        ),
    ),
    Endpoint(
        name="delete_subscription",
        description="Delete a subscription.",
        method="DELETE",
        path="/v1/subscriptions/{id}",
        params=(path_id("id", "The subscription ID to delete"),),
        ack="Deleted subscription {id}",
    ),
)

LOCALIZATION_ENDPOINTS = (
    Endpoint(
        name="list_subscription_localizations",
        description="List localizations for a subscription.",
        method="GET",
        path="/v1/subscriptions/{sub_id}/subscriptionLocalizations",
        params=(path_id("sub_id", SUB_ID), limit()),
        paginated=True,
    ),
    Endpoint(
        name="create_subscription_localization",
        description="Create a localization for a subscription.",
        method="POST",
        path="/v1/subscriptionLocalizations",
        resource_type="subscriptionLocalizations",
        params=(
            rel("sub_id", "subscription", "subscriptions", SUB_ID),
            attr("locale", "The locale code (e.g., en-US, fr-FR)", required=True),
            attr("name", "Localized name of the subscription", required=True),
            attr("description", "Localized description of the subscription"),
        ),
    ),
    Endpoint(
        name="update_subscription_localization",
        description="Update a localization for a subscription.",
        method="PATCH",
        path="/v1/subscriptionLocalizations/{id}",
        resource_type="subscriptionLocalizations",
        params=(
            resource_id("The subscription localization ID"),
            attr("name", "Updated localized name"),
            attr("description", "Updated localized description"),
        ),
    ),
    Endpoint(
        name="delete_subscription_localization",
        description="Delete a localization for a subscription.",
        method="DELETE",
        path="/v1/subscriptionLocalizations/{id}",
        params=(path_id("id", "The subscription localization ID to delete"),),
        ack="Deleted subscription localization {id}",
    ),
)

PRICING_ENDPOINTS = (
    Endpoint(
        name="list_subscription_prices",
        description="List prices for a subscription, including territory info.",
        method="GET",
        path="/v1/subscriptions/{sub_id}/prices",
        params=(
            path_id("sub_id", SUB_ID),
            include("Comma-separated related resources to include (e.g., territory)"),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="list_subscription_price_points",
        description="List price points for a subscription, optionally filtered by territory.",
        method="GET",
        path="/v1/subscriptions/{sub_id}/pricePoints",
        params=(
            path_id("sub_id", SUB_ID),
            filter_param("territory", "Filter by territory code (e.g., USA, GBR)"),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="create_subscription_introductory_offer",
        description="Create an introductory offer for a subscription.",
        method="POST",
        path="/v1/subscriptionIntroductoryOffers",
        resource_type="subscriptionIntroductoryOffers",
        params=(
            rel("sub_id", "subscription", "subscriptions", SUB_ID),
            rel("territory_id", "territory", "territories", "The territory ID for this offer"),
            attr(
                "duration",
                "Duration of the introductory offer period",
                annotation=SubscriptionPeriod,
                required=True,
            ),
            attr("offerMode", "The offer mode", annotation=OfferMode, required=True),
            attr(
                "numberOfPeriods",
                "Number of periods the offer is valid for",
                annotation=int,
                required=True,
            ),
            attr("startDate", "Start date for the offer (YYYY-MM-DD)"),
            attr("endDate", "End date for the offer (YYYY-MM-DD)"),
        ),
    ),
)

ENDPOINTS = GROUP_ENDPOINTS + SUBSCRIPTION_ENDPOINTS + LOCALIZATION_ENDPOINTS + PRICING_ENDPOINTS
