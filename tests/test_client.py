import json

import httpx
import pytest
import respx
from httpx import Response

from appstore_connect_mcp.core.client import (
    AppStoreConnectAPIError,
    AppStoreConnectClient,
    AppStoreConnectClientError,
    AppStoreConnectParseError,
)
from appstore_connect_mcp.core.jsonapi import render_json

BASE_URL = "https://api.appstoreconnect.apple.com"


@pytest.mark.asyncio
async def test_get_request_returns_envelope_unchanged(make_client):
    payload = {"data": {"id": "123", "type": "apps"}}
    async with respx.mock:
        route = respx.get(f"{BASE_URL}/v1/apps/123").mock(
            return_value=Response(200, json=payload)
        )

        async with make_client() as client:
            data = await client.get("/v1/apps/123")

        assert route.called

    assert data == payload
    assert render_json(data) == json.dumps(payload, indent=2)


@pytest.mark.asyncio
async def test_auth_header_is_bearer_token(make_client, token_provider):
    async with respx.mock:
        route = respx.get(f"{BASE_URL}/v1/apps").mock(
            return_value=Response(200, json={"data": []})
        )

        async with make_client() as client:
            await client.get("/v1/apps")
            await client.get("/v1/apps")

    sent = route.calls[0].request.headers
    assert sent.get("Authorization") == "Bearer test-token"
    # consulted once per request
    assert token_provider.calls == 2


@pytest.mark.asyncio
async def test_query_params_are_sent_verbatim(make_client):
    async with respx.mock:
        route = respx.get(f"{BASE_URL}/v1/apps").mock(
            return_value=Response(200, json={"data": []})
        )

        async with make_client() as client:
            await client.get(
                "/v1/apps", params={"filter[bundleId]": "com.example.app", "limit": "5"}
            )

    params = route.calls[0].request.url.params
    assert params["filter[bundleId]"] == "com.example.app"
    assert params["limit"] == "5"


@pytest.mark.asyncio
async def test_post_sends_json_body_with_content_type(make_client):
    body = {"data": {"type": "betaGroups", "attributes": {"name": "QA"}}}
    async with respx.mock:
        route = respx.post(f"{BASE_URL}/v1/betaGroups").mock(
            return_value=Response(201, json={"data": {"id": "g1", "type": "betaGroups"}})
        )

        async with make_client() as client:
            data = await client.post("/v1/betaGroups", json=body)

    request = route.calls[0].request
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == body
    assert data["data"]["id"] == "g1"


@pytest.mark.asyncio
async def test_204_returns_empty_marker(make_client):
    async with respx.mock:
        route = respx.delete(f"{BASE_URL}/v1/betaGroups/g1").mock(
            return_value=Response(204)
        )

        async with make_client() as client:
            data = await client.delete("/v1/betaGroups/g1")

    assert data == {"data": None}
    assert route.calls[0].request.content == b""


@pytest.mark.asyncio
async def test_200_with_empty_body_returns_empty_marker(make_client):
    async with respx.mock:
        respx.patch(f"{BASE_URL}/v1/apps/1").mock(return_value=Response(200, content=b""))

        async with make_client() as client:
            data = await client.patch("/v1/apps/1", json={"data": {"type": "apps", "id": "1"}})

    assert data == {"data": None}


@pytest.mark.asyncio
async def test_json_api_errors_are_carried_on_the_exception(make_client):
    errors = [
        {
            "id": "abc",
            "status": "409",
            "code": "ENTITY_ERROR.ATTRIBUTE.INVALID",
            "title": "An attribute value is invalid.",
            "detail": "The version string is already used.",
            "source": {"pointer": "/data/attributes/versionString"},
        }
    ]
    async with respx.mock:
        respx.post(f"{BASE_URL}/v1/appStoreVersions").mock(
            return_value=Response(409, json={"errors": errors})
        )

        async with make_client() as client:
            with pytest.raises(AppStoreConnectAPIError) as exc:
                await client.post("/v1/appStoreVersions", json={"data": {}})

    assert exc.value.status_code == 409
    assert exc.value.error_list == errors
    assert exc.value.errors[0].code == "ENTITY_ERROR.ATTRIBUTE.INVALID"
    assert "The version string is already used." in str(exc.value)


@pytest.mark.asyncio
async def test_off_type_error_fields_keep_the_body_entries(make_client):
    errors = [
        {"status": "409", "code": 1234, "title": "Conflict", "detail": "dup"},
        {"status": "409", "code": "ENTITY_ERROR", "title": "Second", "detail": "kept"},
    ]
    async with respx.mock:
        respx.post(f"{BASE_URL}/v1/betaGroups").mock(
            return_value=Response(409, json={"errors": errors})
        )

        async with make_client() as client:
            with pytest.raises(AppStoreConnectAPIError) as exc:
                await client.post("/v1/betaGroups", json={"data": {}})

    assert exc.value.error_list == errors
    assert exc.value.errors[1].code == "ENTITY_ERROR"
    assert "1234 - Conflict - dup" in str(exc.value)


@pytest.mark.asyncio
async def test_unparseable_error_body_yields_synthetic_entry(make_client):
    async with respx.mock:
        respx.get(f"{BASE_URL}/v1/apps").mock(
            return_value=Response(502, text="<html>Bad Gateway</html>")
        )

        async with make_client() as client:
            with pytest.raises(AppStoreConnectAPIError) as exc:
                await client.get("/v1/apps")

    assert exc.value.status_code == 502
    assert len(exc.value.errors) == 1
    entry = exc.value.errors[0]
    assert entry.status == "502"
    assert entry.code == "HTTP_502"
    assert entry.title == "Bad Gateway"


@pytest.mark.asyncio
async def test_401_without_error_list_is_still_typed(make_client):
    async with respx.mock:
        respx.get(f"{BASE_URL}/v1/apps").mock(
            return_value=Response(401, json={"message": "Unauthorized"})
        )

        async with make_client() as client:
            with pytest.raises(AppStoreConnectAPIError) as exc:
                await client.get("/v1/apps")

    assert exc.value.status_code == 401
    assert exc.value.errors[0].status == "401"


@pytest.mark.asyncio
async def test_non_json_success_raises_parse_error(make_client):
    async with respx.mock:
        respx.get(f"{BASE_URL}/v1/apps").mock(
            return_value=Response(200, text="definitely not json")
        )

        async with make_client() as client:
            with pytest.raises(AppStoreConnectParseError) as exc:
                await client.get("/v1/apps")

    assert "non-JSON" in str(exc.value)


@pytest.mark.asyncio
async def test_top_level_array_raises_parse_error(make_client):
    async with respx.mock:
        respx.get(f"{BASE_URL}/v1/apps").mock(return_value=Response(200, json=[1, 2]))

        async with make_client() as client:
            with pytest.raises(AppStoreConnectParseError):
                await client.get("/v1/apps")


@pytest.mark.asyncio
async def test_network_error_is_wrapped_and_not_retried(make_client):
    async with respx.mock:
        route = respx.get(f"{BASE_URL}/v1/apps").mock(
            side_effect=httpx.ConnectError("connection refused")
        )

        async with make_client() as client:
            with pytest.raises(AppStoreConnectClientError) as exc:
                await client.get("/v1/apps")

    assert route.call_count == 1
    assert "Network error" in str(exc.value)


@pytest.mark.asyncio
async def test_server_error_is_not_retried(make_client):
    async with respx.mock:
        route = respx.post(f"{BASE_URL}/v1/betaTesters").mock(
            return_value=Response(500, json={"errors": [{"status": "500", "code": "UNEXPECTED"}]})
        )

        async with make_client() as client:
            with pytest.raises(AppStoreConnectAPIError):
                await client.post("/v1/betaTesters", json={"data": {}})

    assert route.call_count == 1


@pytest.mark.asyncio
async def test_path_without_version_segment_is_rejected(make_client):
    async with make_client() as client:
        with pytest.raises(ValueError):
            await client.get("apps")
        with pytest.raises(ValueError):
            await client.get("/apps")


@pytest.mark.asyncio
async def test_foreign_host_is_rejected(make_client):
    async with make_client() as client:
        with pytest.raises(ValueError, match="foreign host"):
            await client.get("https://evil.example.com/v1/apps")


@pytest.mark.asyncio
async def test_unsupported_method_is_rejected(make_client):
    async with make_client() as client:
        with pytest.raises(ValueError, match="Unsupported HTTP method"):
            await client.request("PUT", "/v1/apps")


def test_invalid_construction_arguments(token_provider):
    with pytest.raises(ValueError):
        AppStoreConnectClient(token_provider=token_provider, base_url="")
    with pytest.raises(ValueError):
        AppStoreConnectClient(token_provider=token_provider, max_pages=0)


@pytest.mark.asyncio
async def test_injected_http_client_is_not_closed(token_provider):
    http = httpx.AsyncClient(base_url=BASE_URL)
    client = AppStoreConnectClient(token_provider=token_provider, http=http)
    await client.aclose()
    assert not http.is_closed
    await http.aclose()


def test_error_taxonomy():
    from appstore_connect_mcp.core import errors

    assert issubclass(errors.AppStoreConnectAPIError, errors.AppStoreConnectClientError)
    assert issubclass(errors.AppStoreConnectParseError, errors.AppStoreConnectClientError)
    assert issubclass(errors.ConfigurationError, ValueError)
    assert issubclass(errors.TokenSigningError, Exception)
