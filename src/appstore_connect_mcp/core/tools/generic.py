from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from appstore_connect_mcp.core import jsonapi
from appstore_connect_mcp.core.client import AppStoreConnectClient


async def api_request(
    client: AppStoreConnectClient,
    method: Literal["GET", "POST", "PATCH", "DELETE"],
    path: str,
    params: Optional[Dict[str, str]] = None,
    body: Optional[Dict[str, Any]] = None,
    all_pages: bool = False,
) -> str:
    """
    Call any App Store Connect endpoint not covered by a dedicated tool.
    - path: versioned API path, e.g. /v1/apps/123/appStoreVersions
    - params: query parameters as strings, e.g. {"filter[platform]": "IOS", "limit": "50"}
    - body: JSON:API document for POST/PATCH (and relationship DELETEs)
    - all_pages: follow links.next and concatenate every page's data (GET only)
    Returns the raw response envelope as indented JSON.
    """
    if all_pages and method != "GET":
        raise ValueError(f"all_pages is only supported for GET requests (got {method})")
    if all_pages:
        response = await client.request_all_pages(
            method, path, json=body, params=params, tool="api_request"
        )
    else:
        response = await client.request(
            method, path, json=body, params=params, tool="api_request"
        )
    return jsonapi.render_json(response)
