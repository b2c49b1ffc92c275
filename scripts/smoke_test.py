"""
Live, read-only smoke test against App Store Connect.
Needs the same APP_STORE_CONNECT_* variables as the server; optionally
TEST_APP_ID (defaults to the first app returned).
"""

from __future__ import annotations

import asyncio
import json
import os
import sys
from typing import Optional

from appstore_connect_mcp.core.client import AppStoreConnectClientError
from appstore_connect_mcp.core.config import ConfigurationError, create_client_from_env
from appstore_connect_mcp.core.tools.apps import ENDPOINTS as APP_ENDPOINTS
from appstore_connect_mcp.core.tools.beta import ENDPOINTS as BETA_ENDPOINTS


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    return val if val else default


def _print_step(title: str) -> None:
    print(f"\n== {title}")


def _fail(msg: str) -> int:
    print(f"FAILED: {msg}")
    return 1


def _endpoint(endpoints, name):
    return next(e for e in endpoints if e.name == name)


async def run_smoke_test() -> int:
    try:
        client = create_client_from_env()
    except ConfigurationError as exc:
        return _fail(f"Configuration: {exc}")

    list_apps = _endpoint(APP_ENDPOINTS, "list_apps")
    get_app = _endpoint(APP_ENDPOINTS, "get_app")
    list_beta_groups = _endpoint(BETA_ENDPOINTS, "list_beta_groups")

    async with client:
        # --- List apps ---
        _print_step("List apps")
        try:
            apps = json.loads(await list_apps.invoke(client, {"limit": 5}))
        except AppStoreConnectClientError as exc:
            return _fail(f"list_apps failed: {exc}")

        items = apps.get("data") or []
        if not items:
            return _fail("No apps visible to this API key.")
        for app in items:
            print(f"  {app['id']}: {app.get('attributes', {}).get('name')}")

        app_id = _env("TEST_APP_ID", items[0]["id"])

        # --- Get app ---
        _print_step(f"Get app {app_id}")
        try:
            detail = json.loads(await get_app.invoke(client, {"app_id": app_id}))
        except AppStoreConnectClientError as exc:
            return _fail(f"get_app failed: {exc}")
        if detail.get("data", {}).get("id") != app_id:
            return _fail("get_app returned a different resource.")
        print("  OK")

        # --- Beta groups, all pages ---
        _print_step("List beta groups (all pages)")
        try:
            groups = json.loads(
                await list_beta_groups.invoke(
                    client, {"app_id": app_id, "limit": 2, "all_pages": True}
                )
            )
        except AppStoreConnectClientError as exc:
            return _fail(f"list_beta_groups failed: {exc}")
        if "next" in (groups.get("links") or {}):
            return _fail("Merged result still carries links.next.")
        print(f"  {len(groups.get('data') or [])} group(s)")

    print("\nPASSED smoke test.")
    return 0


def main() -> None:
    exit_code = asyncio.run(run_smoke_test())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
