from __future__ import annotations

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    attr,
    include,
    limit,
    path_id,
    query,
    rel,
    resource_id,
)

RESPONSES_INCLUDE = include(
    "Comma-separated related resources to include (default: customerReviewResponses)",
    default="customerReviewResponses",
)

ENDPOINTS = (
    Endpoint(
        name="list_customer_reviews",
        description=(
            "List customer reviews for an app. Returns review text, rating, "
            "reviewer nickname, and creation date."
        ),
        method="GET",
        path="/v1/apps/{app_id}/customerReviews",
        params=(
            path_id("app_id", "The App Store Connect app ID"),
            query("sort", "sort", "Sort field (e.g., -createdDate, createdDate, rating, -rating)"),
            RESPONSES_INCLUDE,
            limit("Number of reviews to return (max 200)"),
        ),
        paginated=True,
    ),
    Endpoint(
        name="get_customer_review",
        description="Get a specific customer review by ID, including any developer responses.",
        method="GET",
        path="/v1/customerReviews/{id}",
        params=(path_id("id", "The customer review ID"), RESPONSES_INCLUDE),
    ),
    Endpoint(
        name="create_review_response",
        description="Create a developer response to a customer review.",
        method="POST",
        path="/v1/customerReviewResponses",
        resource_type="customerReviewResponses",
        params=(
            rel("review_id", "review", "customerReviews", "The customer review ID to respond to"),
            attr("responseBody", "The text of the developer response", required=True),
        ),
    ),
    Endpoint(
        name="update_review_response",
        description="Update an existing developer response to a customer review.",
        method="PATCH",
        path="/v1/customerReviewResponses/{id}",
        resource_type="customerReviewResponses",
        params=(
            resource_id("The customer review response ID"),
            attr("responseBody", "The updated response text", required=True),
        ),
    ),
    Endpoint(
        name="delete_review_response",
        description="Delete a developer response to a customer review.",
        method="DELETE",
        path="/v1/customerReviewResponses/{id}",
        params=(path_id("id", "The customer review response ID to delete"),),
        ack="Deleted customer review response {id}",
    ),
)
