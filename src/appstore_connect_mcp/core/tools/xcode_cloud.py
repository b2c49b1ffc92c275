"""Xcode Cloud: CI products, workflows, build runs and their actions."""

from __future__ import annotations

from typing import Literal

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    filter_param,
    limit,
    path_id,
    rel,
)

PRODUCT_INCLUDE = {"include": "app,bundleId,primaryRepositories"}
ACTION_ID = "The CI build action ID"


def _action_listing(name: str, segment: str, what: str) -> Endpoint:
    return Endpoint(
        name=name,
        description=f"List {what} for an Xcode Cloud build action.",
        method="GET",
        path=f"/v1/ciBuildActions/{{action_id}}/{segment}",
        params=(path_id("action_id", ACTION_ID), limit()),
        paginated=True,
    )


ENDPOINTS = (
    Endpoint(
        name="list_ci_products",
        description="List Xcode Cloud CI products, optionally filtered by product type.",
        method="GET",
        path="/v1/ciProducts",
        params=(
            filter_param(
                "productType",
                "Filter by product type (APP or FRAMEWORK)",
                annotation=Literal["APP", "FRAMEWORK"],
            ),
            limit(),
        ),
        fixed_query=PRODUCT_INCLUDE,
        paginated=True,
    ),
    Endpoint(
        name="get_ci_product",
        description="Get details of a specific Xcode Cloud CI product.",
        method="GET",
        path="/v1/ciProducts/{id}",
        params=(path_id("id", "The CI product ID"),),
        fixed_query=PRODUCT_INCLUDE,
    ),
    Endpoint(
        name="list_ci_workflows",
        description="List Xcode Cloud workflows for a CI product.",
        method="GET",
        path="/v1/ciProducts/{product_id}/workflows",
        params=(path_id("product_id", "The CI product ID"), limit()),
        paginated=True,
    ),
    Endpoint(
        name="get_ci_workflow",
        description="Get details of a specific Xcode Cloud workflow.",
        method="GET",
        path="/v1/ciWorkflows/{id}",
        params=(path_id("id", "The CI workflow ID"),),
    ),
    Endpoint(
        name="list_ci_build_runs",
        description="List Xcode Cloud build runs for a workflow, sorted by most recent.",
        method="GET",
        path="/v1/ciWorkflows/{workflow_id}/buildRuns",
        params=(path_id("workflow_id", "The CI workflow ID"), limit()),
        fixed_query={"sort": "-startedDate"},
        paginated=True,
    ),
    Endpoint(
        name="get_ci_build_run",
        description="Get details of a specific Xcode Cloud build run.",
        method="GET",
        path="/v1/ciBuildRuns/{id}",
        params=(path_id("id", "The CI build run ID"),),
        fixed_query={"include": "builds,workflow,sourceBranchOrTag,destinationBranch"},
    ),
    Endpoint(
        name="start_ci_build_run",
        description="Start a new Xcode Cloud build run for a workflow.",
        method="POST",
        path="/v1/ciBuildRuns",
        resource_type="ciBuildRuns",
        params=(
            rel("workflow_id", "workflow", "ciWorkflows", "The CI workflow ID to run"),
            rel(
                "sourceBranchOrTag_id",
                "sourceBranchOrTag",
                "scmGitReferences",
                "The ID of the source branch or tag to build from",
            ),
        ),
    ),
    Endpoint(
        name="list_ci_build_actions",
        description="List build actions for an Xcode Cloud build run.",
        method="GET",
        path="/v1/ciBuildRuns/{run_id}/actions",
        params=(path_id("run_id", "The CI build run ID"), limit()),
        paginated=True,
    ),
    _action_listing("list_ci_artifacts", "artifacts", "artifacts"),
    _action_listing("list_ci_test_results", "testResults", "test results"),
    _action_listing("list_ci_issues", "issues", "issues"),
    Endpoint(
        name="list_ci_mac_os_versions",
        description="List available macOS versions for Xcode Cloud, including Xcode versions.",
        method="GET",
        path="/v1/ciMacOsVersions",
        params=(limit(),),
        fixed_query={"include": "xcodeVersions"},
        paginated=True,
    ),
    Endpoint(
        name="list_ci_xcode_versions",
        description="List available Xcode versions for Xcode Cloud, including macOS versions.",
        method="GET",
        path="/v1/ciXcodeVersions",
        params=(limit(),),
        fixed_query={"include": "macOsVersions"},
        paginated=True,
    ),
)
