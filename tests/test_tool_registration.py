import pytest

from appstore_connect_mcp.core.client import AppStoreConnectClient
from appstore_connect_mcp.server import SERVER_NAME, build_app

EXPECTED_TOOLS = {
    "apps": ["list_apps", "get_app", "create_app"],
    "versions": [
        "list_app_store_versions",
        "create_app_store_version",
        "update_app_store_version",
    ],
    "localizations": [
        "list_version_localizations",
        "get_version_localization",
        "create_version_localization",
        "update_version_localization",
    ],
    "submissions": ["create_app_store_version_submission"],
    "beta": [
        "list_beta_groups",
        "create_beta_group",
        "list_beta_testers",
        "create_beta_tester",
        "add_tester_to_beta_group",
        "remove_tester_from_beta_group",
        "delete_beta_group",
        "delete_beta_tester",
    ],
    "builds": ["list_builds", "add_build_to_beta_group"],
    "bundle_ids": ["list_bundle_ids", "register_bundle_id"],
    "users": ["list_users", "list_devices"],
    "capabilities": [
        "list_bundle_id_capabilities",
        "enable_bundle_id_capability",
        "disable_bundle_id_capability",
    ],
    "generic": ["api_request"],
    "reviews": [
        "list_customer_reviews",
        "get_customer_review",
        "create_review_response",
        "update_review_response",
        "delete_review_response",
    ],
    "sandbox": [
        "list_sandbox_testers",
        "update_sandbox_tester",
        "clear_sandbox_tester_purchase_history",
    ],
    "pricing": ["list_app_price_points", "get_app_price_schedule", "list_territories"],
    "phased_releases": [
        "get_phased_release",
        "create_phased_release",
        "update_phased_release",
        "delete_phased_release",
        "create_version_release_request",
    ],
    "analytics": [
        "create_analytics_report_request",
        "list_analytics_report_requests",
        "get_analytics_report_request",
        "list_analytics_reports",
        "list_analytics_report_instances",
        "list_analytics_report_segments",
    ],
    "app_clips": [
        "list_app_clips",
        "get_app_clip",
        "list_app_clip_default_experiences",
        "create_app_clip_default_experience",
        "update_app_clip_default_experience",
        "delete_app_clip_default_experience",
    ],
    "screenshots": [
        "list_screenshot_sets",
        "create_screenshot_set",
        "delete_screenshot_set",
        "list_screenshots",
        "create_screenshot",
        "delete_screenshot",
        "list_preview_sets",
        "create_preview_set",
        "delete_preview_set",
        "list_previews",
        "create_preview",
        "delete_preview",
    ],
    "beta_detail": [
        "list_beta_app_localizations",
        "create_beta_app_localization",
        "update_beta_app_localization",
        "list_beta_build_localizations",
        "create_beta_build_localization",
        "update_beta_build_localization",
        "submit_build_for_beta_review",
        "get_beta_app_review_detail",
        "update_beta_app_review_detail",
    ],
    "certificates": [
        "list_certificates",
        "get_certificate",
        "create_certificate",
        "revoke_certificate",
        "list_profiles",
        "get_profile",
        "create_profile",
        "delete_profile",
    ],
    "app_info": [
        "list_app_infos",
        "get_app_info",
        "update_app_info",
        "list_app_info_localizations",
        "update_app_info_localization",
        "list_app_categories",
        "list_age_rating_declarations",
        "update_age_rating_declaration",
    ],
    "compliance": [
        "list_app_encryption_declarations",
        "create_app_encryption_declaration",
        "get_app_encryption_declaration",
        "list_eulas",
        "create_eula",
        "update_eula",
        "delete_eula",
    ],
    "in_app_purchases": [
        "list_in_app_purchases",
        "get_in_app_purchase",
        "create_in_app_purchase",
        "update_in_app_purchase",
        "delete_in_app_purchase",
        "list_iap_localizations",
        "create_iap_localization",
        "update_iap_localization",
        "delete_iap_localization",
        "list_iap_price_points",
        "submit_iap_for_review",
    ],
    "app_events": [
        "list_app_events",
        "create_app_event",
        "update_app_event",
        "delete_app_event",
        "list_app_event_localizations",
        "create_app_event_localization",
        "update_app_event_localization",
        "delete_app_event_localization",
    ],
    "subscriptions": [
        "list_subscription_groups",
        "create_subscription_group",
        "get_subscription_group",
        "submit_subscription_group",
        "list_subscriptions",
        "create_subscription",
        "update_subscription",
        "delete_subscription",
        "list_subscription_localizations",
        "create_subscription_localization",
        "update_subscription_localization",
        "delete_subscription_localization",
        "list_subscription_prices",
        "list_subscription_price_points",
        "create_subscription_introductory_offer",
    ],
    "game_center": [
        "get_game_center_detail",
        "list_game_center_leaderboards",
        "create_game_center_leaderboard",
        "update_game_center_leaderboard",
        "delete_game_center_leaderboard",
        "list_game_center_achievements",
        "create_game_center_achievement",
        "update_game_center_achievement",
        "delete_game_center_achievement",
        "list_game_center_leaderboard_sets",
        "create_game_center_leaderboard_set",
        "delete_game_center_leaderboard_set",
        "list_game_center_groups",
        "create_game_center_group",
    ],
    "xcode_cloud": [
        "list_ci_products",
        "get_ci_product",
        "list_ci_workflows",
        "get_ci_workflow",
        "list_ci_build_runs",
        "get_ci_build_run",
        "start_ci_build_run",
        "list_ci_build_actions",
        "list_ci_artifacts",
        "list_ci_test_results",
        "list_ci_issues",
        "list_ci_mac_os_versions",
        "list_ci_xcode_versions",
    ],
}

ALL_NAMES = {name for names in EXPECTED_TOOLS.values() for name in names}


@pytest.fixture
def client(token_provider):
    return AppStoreConnectClient(token_provider=token_provider)


@pytest.mark.asyncio
async def test_every_tool_is_registered(client):
    app = build_app(client)
    listed = await app.list_tools()
    await client.aclose()

    names = [tool.name for tool in listed]
    assert app.name == SERVER_NAME
    assert len(names) == len(set(names)) == 162
    assert set(names) == ALL_NAMES


async def _schemas(client):
    app = build_app(client)
    listed = await app.list_tools()
    await client.aclose()
    return {tool.name: tool for tool in listed}


@pytest.mark.asyncio
async def test_client_is_hidden_and_descriptions_are_set(client):
    tools = await _schemas(client)

    for tool in tools.values():
        assert "client" not in tool.inputSchema.get("properties", {})
        assert tool.description


@pytest.mark.asyncio
async def test_required_fields(client):
    tools = await _schemas(client)

    assert set(tools["get_app"].inputSchema["required"]) == {"app_id"}
    assert set(tools["create_app_store_version"].inputSchema["required"]) == {
        "app_id",
        "platform",
        "versionString",
    }
    assert set(tools["add_tester_to_beta_group"].inputSchema["required"]) == {
        "beta_group_id",
        "tester_ids",
    }
    assert set(tools["api_request"].inputSchema["required"]) == {"method", "path"}
    assert "required" not in tools["list_apps"].inputSchema


@pytest.mark.asyncio
async def test_enumerations_are_exposed(client):
    tools = await _schemas(client)

    platform = tools["create_app_store_version"].inputSchema["properties"]["platform"]
    assert platform["enum"] == ["IOS", "MAC_OS", "TV_OS", "VISION_OS"]

    method = tools["api_request"].inputSchema["properties"]["method"]
    assert method["enum"] == ["GET", "POST", "PATCH", "DELETE"]


@pytest.mark.asyncio
async def test_paginated_tools_offer_all_pages(client):
    tools = await _schemas(client)

    assert "all_pages" in tools["list_apps"].inputSchema["properties"]
    assert "all_pages" not in tools["get_app"].inputSchema["properties"]
    limit = tools["list_apps"].inputSchema["properties"]["limit"]
    assert "Maximum number of resources" in str(limit)


@pytest.mark.asyncio
async def test_defaulted_flags_reject_null(client):
    tools = await _schemas(client)

    props = tools["create_beta_group"].inputSchema["properties"]
    assert props["publicLinkEnabled"]["type"] == "boolean"
    assert props["publicLinkEnabled"]["default"] is False
    assert "anyOf" not in props["feedbackEnabled"]
    assert "anyOf" in props["publicLinkLimit"]
