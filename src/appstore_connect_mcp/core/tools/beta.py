from __future__ import annotations

from typing import List
from urllib.parse import quote

from appstore_connect_mcp.core import jsonapi
from appstore_connect_mcp.core.client import AppStoreConnectClient
from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    Param,
    attr,
    filter_param,
    include,
    limit,
    path_id,
    rel,
)


def _testers_path(beta_group_id: str) -> str:
    return f"/v1/betaGroups/{quote(str(beta_group_id), safe='')}/relationships/betaTesters"


async def add_tester_to_beta_group(
    client: AppStoreConnectClient,
    beta_group_id: str,
    tester_ids: List[str],
) -> str:
    """
    Add one or more beta testers to a beta group.
    - beta_group_id: the beta group ID
    - tester_ids: beta tester IDs to add
    """
    await client.post(
        _testers_path(beta_group_id),
        json=jsonapi.linkage_document("betaTesters", tester_ids),
        tool="add_tester_to_beta_group",
    )
    return jsonapi.acknowledgement(
        f"Added {len(tester_ids)} tester(s) to beta group {beta_group_id}"
    )


async def remove_tester_from_beta_group(
    client: AppStoreConnectClient,
    beta_group_id: str,
    tester_ids: List[str],
) -> str:
    """
    Remove one or more beta testers from a beta group.
    The linkage list travels in the DELETE body, as the relationship endpoint expects.
    """
    await client.delete(
        _testers_path(beta_group_id),
        json=jsonapi.linkage_document("betaTesters", tester_ids),
        tool="remove_tester_from_beta_group",
    )
    return jsonapi.acknowledgement(
        f"Removed {len(tester_ids)} tester(s) from beta group {beta_group_id}"
    )


ENDPOINTS = (
    Endpoint(
        name="list_beta_groups",
        description="List beta groups for an app.",
        method="GET",
        path="/v1/betaGroups",
        params=(
            Param(
                "app_id",
                "The App Store Connect app ID",
                required=True,
                key="filter[app]",
            ),
            filter_param("name", "Filter by group name"),
            include("Comma-separated includes (e.g., betaTesters,builds,app)"),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="create_beta_group",
        description="Create a new beta group for an app.",
        method="POST",
        path="/v1/betaGroups",
        resource_type="betaGroups",
        params=(
            rel("app_id", "app", "apps", "The App Store Connect app ID"),
            attr("name", "Name of the beta group", required=True),
            attr(
                "publicLinkEnabled",
                "Enable public link for testers",
                annotation=bool,
                default=False,
            ),
            attr(
                "feedbackEnabled",
                "Enable feedback from testers",
                annotation=bool,
                default=True,
            ),
            attr("publicLinkLimit", "Max number of testers via public link", annotation=int),
        ),
    ),
    Endpoint(
        name="list_beta_testers",
        description="List beta testers, optionally filtered by email, beta group, or app.",
        method="GET",
        path="/v1/betaTesters",
        params=(
            filter_param("email", "Filter by tester email"),
            filter_param("betaGroups", "Filter by beta group ID"),
            filter_param("apps", "Filter by app ID"),
            include("Comma-separated includes (e.g., betaGroups,apps,builds)"),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="create_beta_tester",
        description="Create a new beta tester and optionally add them to beta groups.",
        method="POST",
        path="/v1/betaTesters",
        resource_type="betaTesters",
        params=(
            attr("email", "Tester's email address", required=True),
            attr("firstName", "Tester's first name"),
            attr("lastName", "Tester's last name"),
            rel(
                "betaGroupIds",
                "betaGroups",
                "betaGroups",
                "Beta group IDs to add the tester to",
                required=False,
                to_many=True,
            ),
        ),
    ),
    Endpoint(
        name="delete_beta_group",
        description="Delete a beta group.",
        method="DELETE",
        path="/v1/betaGroups/{beta_group_id}",
        params=(path_id("beta_group_id", "The beta group ID to delete"),),
        ack="Deleted beta group {beta_group_id}",
    ),
    Endpoint(
        name="delete_beta_tester",
        description="Remove a beta tester from all groups and apps.",
        method="DELETE",
        path="/v1/betaTesters/{tester_id}",
        params=(path_id("tester_id", "The beta tester ID to delete"),),
        ack="Deleted beta tester {tester_id}",
    ),
)
