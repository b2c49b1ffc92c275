import pytest

from appstore_connect_mcp.core.config import ConfigurationError
from appstore_connect_mcp.transports.stdio import main as stdio_main


@pytest.mark.asyncio
async def test_configuration_error_exits_before_serving(monkeypatch):
    def broken():
        raise ConfigurationError("Missing APP_STORE_CONNECT_ISSUER_ID in environment.")

    def fail_build(client):
        raise AssertionError("no tools may be registered")

    monkeypatch.setattr(stdio_main, "create_client_from_env", broken)
    monkeypatch.setattr(stdio_main, "build_app", fail_build)

    with pytest.raises(SystemExit) as exc:
        await stdio_main.main()

    assert str(exc.value.code) == (
        "Auth configuration error: Missing APP_STORE_CONNECT_ISSUER_ID in environment."
    )


@pytest.mark.asyncio
async def test_client_is_closed_after_serving(monkeypatch):
    events = []

    class FakeClient:
        async def aclose(self):
            events.append("closed")

    class FakeApp:
        async def run_stdio_async(self):
            events.append("served")

    monkeypatch.setattr(stdio_main, "create_client_from_env", FakeClient)
    monkeypatch.setattr(stdio_main, "build_app", lambda client: FakeApp())
    monkeypatch.setattr(stdio_main, "setup_logging", lambda level: None)

    await stdio_main.main()

    assert events == ["served", "closed"]
