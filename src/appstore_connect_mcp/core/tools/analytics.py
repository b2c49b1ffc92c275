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
)

AccessType = Literal["ONE_TIME_SNAPSHOT", "ONGOING"]

ENDPOINTS = (
    Endpoint(
        name="create_analytics_report_request",
        description=(
            "Create a new analytics report request for an app. Use ONE_TIME_SNAPSHOT "
            "for a single report or ONGOING for continuous reporting."
        ),
        method="POST",
        path="/v1/analyticsReportRequests",
        resource_type="analyticsReportRequests",
        params=(
            rel("app_id", "app", "apps", "The App Store Connect app ID"),
            attr(
                "accessType",
                "The access type for the report request",
                annotation=AccessType,
                required=True,
            ),
        ),
    ),
    Endpoint(
        name="list_analytics_report_requests",
        description="List analytics report requests for an app, optionally filtered by access type.",
        method="GET",
        path="/v1/apps/{app_id}/analyticsReportRequests",
        params=(
            path_id("app_id", "The App Store Connect app ID"),
            filter_param("accessType", "Filter by access type", annotation=AccessType),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="get_analytics_report_request",
        description="Get a specific analytics report request by ID, optionally including its reports.",
        method="GET",
        path="/v1/analyticsReportRequests/{id}",
        params=(
            path_id("id", "The analytics report request ID"),
            include(
                "Comma-separated related resources to include (default: reports)",
                default="reports",
            ),
        ),
    ),
    Endpoint(
        name="list_analytics_reports",
        description="List analytics reports for a report request, optionally filtered by category.",
        method="GET",
        path="/v1/analyticsReportRequests/{request_id}/reports",
        params=(
            path_id("request_id", "The analytics report request ID"),
            filter_param(
                "category",
                "Filter by report category (e.g., APP_USAGE, APP_STORE_ENGAGEMENT, "
                "COMMERCE, FRAMEWORK_USAGE, PERFORMANCE)",
            ),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="list_analytics_report_instances",
        description=(
            "List instances of an analytics report, optionally filtered by "
            "processing date and granularity."
        ),
        method="GET",
        path="/v1/analyticsReports/{report_id}/instances",
        params=(
            path_id("report_id", "The analytics report ID"),
            filter_param("processingDate", "Filter by processing date (ISO 8601 date string)"),
            filter_param("granularity", "Filter by granularity (e.g., DAILY, WEEKLY, MONTHLY)"),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="list_analytics_report_segments",
        description="List segments for an analytics report instance.",
        method="GET",
        path="/v1/analyticsReportInstances/{instance_id}/segments",
        params=(path_id("instance_id", "The analytics report instance ID"), limit()),
        paginated=True,
    ),
)
