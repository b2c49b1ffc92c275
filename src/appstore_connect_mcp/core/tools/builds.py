from __future__ import annotations

from typing import List
from urllib.parse import quote

from appstore_connect_mcp.core import jsonapi
from appstore_connect_mcp.core.client import AppStoreConnectClient
from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    filter_param,
    include,
    limit,
    query,
)


async def add_build_to_beta_group(
    client: AppStoreConnectClient,
    beta_group_id: str,
    build_ids: List[str],
) -> str:
    """
    Make one or more builds available to the testers of a beta group.
    - beta_group_id: the beta group ID
    - build_ids: build IDs to add
    """
    path = f"/v1/betaGroups/{quote(str(beta_group_id), safe='')}/relationships/builds"
    await client.post(
        path,
        json=jsonapi.linkage_document("builds", build_ids),
        tool="add_build_to_beta_group",
    )
    return jsonapi.acknowledgement(
        f"Added {len(build_ids)} build(s) to beta group {beta_group_id}"
    )


ENDPOINTS = (
    Endpoint(
        name="list_builds",
        description="List builds, optionally filtered by app, version, or processing state.",
        method="GET",
        path="/v1/builds",
        params=(
            filter_param("app", "Filter by app ID"),
            filter_param("version", "Filter by build number (CFBundleVersion)"),
            filter_param(
                "processingState",
                "Filter by processing state (PROCESSING, FAILED, INVALID, VALID)",
            ),
            query("sort", "sort", "Sort field (e.g., -uploadedDate, version)"),
            include("Comma-separated includes (e.g., app,preReleaseVersion,betaGroups)"),
            limit(),
        ),
        paginated=True,
    ),
)
