import inspect
from types import ModuleType

import pytest
from mcp.server.fastmcp import FastMCP

from appstore_connect_mcp.core.registry import (
    discover_tool_modules,
    iter_tool_functions,
    register_discovered_tools,
)


def _make_module(name: str, code: str) -> ModuleType:
    module = ModuleType(name)
    exec(code, module.__dict__)
    return module


class RecordingApp:
    def __init__(self):
        self.registered = []

    def tool(self, name, description=None):
        def decorator(fn):
            self.registered.append((name, description, fn))
            return fn

        return decorator


@pytest.mark.asyncio
async def test_register_discovered_tools_registers_valid_tools_only(make_client):
    code = """
async def tool_fn(client, *, foo: int = 1):
    '''Echo the base URL.'''
    return (client.base_url, foo)

async def _private(client):
    return None

async def wrong_first(arg1, client):
    return None

def sync_func(client):
    return None
"""
    mod = _make_module("fake_mod", code)
    app = RecordingApp()
    client = make_client(base_url="https://asc.example.test")

    names = register_discovered_tools(app, client, modules=[mod])

    assert names == ["tool_fn"]
    name, description, wrapped = app.registered[0]
    assert description == "Echo the base URL."

    # wrapper signature should not expose client
    sig = inspect.signature(wrapped)
    assert "client" not in sig.parameters

    result = await wrapped(foo=5)
    assert result == ("https://asc.example.test", 5)
    await client.aclose()


@pytest.mark.asyncio
async def test_endpoint_descriptors_are_registered_with_injected_client(make_client):
    code = """
from appstore_connect_mcp.core.endpoints import Endpoint, path_id

ENDPOINTS = (
    Endpoint(
        name="get_thing",
        description="Get a thing.",
        method="GET",
        path="/v1/things/{thing_id}",
        params=(path_id("thing_id", "The thing ID"),),
    ),
)
"""
    mod = _make_module("fake_endpoints", code)
    app = RecordingApp()
    seen = []

    class FakeClient:
        async def request(self, method, path, **kwargs):
            seen.append((method, path, kwargs["tool"]))
            return {"data": {"id": "t1"}}

    names = register_discovered_tools(app, lambda: FakeClient(), modules=[mod])

    assert names == ["get_thing"]
    _, description, wrapped = app.registered[0]
    assert description == "Get a thing."
    assert list(inspect.signature(wrapped).parameters) == ["thing_id"]

    text = await wrapped(thing_id="t1")
    assert seen == [("GET", "/v1/things/t1", "get_thing")]
    assert '"id": "t1"' in text


def test_non_endpoint_entries_are_rejected():
    mod = _make_module("bad_endpoints", "ENDPOINTS = ('not an endpoint',)")

    with pytest.raises(TypeError):
        list(iter_tool_functions(mod))


def test_register_discovered_tools_duplicate_names_raise(make_client):
    code1 = "async def tool_fn(client): return None"
    code2 = "async def tool_fn(client): return None"
    mod1 = _make_module("mod1", code1)
    mod2 = _make_module("mod2", code2)

    with pytest.raises(ValueError, match="Duplicate tool name"):
        register_discovered_tools(
            FastMCP("test"), make_client(), modules=[mod1, mod2]
        )


def test_app_without_tool_decorator_is_rejected(make_client):
    with pytest.raises(TypeError):
        register_discovered_tools(object(), make_client(), modules=[])


def test_discover_tool_modules_finds_every_group():
    names = {m.__name__.rsplit(".", 1)[-1] for m in discover_tool_modules()}

    assert {
        "apps",
        "beta",
        "builds",
        "generic",
        "subscriptions",
        "game_center",
        "xcode_cloud",
    } <= names
    assert len(names) == 26


def test_discover_tool_modules_skips_import_failures(monkeypatch, caplog):
    import importlib
    import pkgutil

    class Info:
        def __init__(self, name):
            self.name = name

    def fake_iter_modules(path, prefix):
        return [
            Info(prefix + "good"),
            Info(prefix + "bad"),
        ]

    good_mod = _make_module(
        "appstore_connect_mcp.core.tools.good", "async def tool_fn(client): return None"
    )

    real_import_module = importlib.import_module

    def fake_import_module(name, *args, **kwargs):
        if name == "appstore_connect_mcp.core.tools.bad":
            raise ImportError("boom")
        if name == "appstore_connect_mcp.core.tools.good":
            return good_mod
        return real_import_module(name, *args, **kwargs)

    monkeypatch.setattr(pkgutil, "iter_modules", fake_iter_modules)
    monkeypatch.setattr(importlib, "import_module", fake_import_module)

    with caplog.at_level("ERROR"):
        modules = discover_tool_modules()

    assert [m.__name__ for m in modules] == ["appstore_connect_mcp.core.tools.good"]
    assert any("Failed importing tool module" in rec.message for rec in caplog.records)
