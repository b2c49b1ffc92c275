from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from types import ModuleType
from typing import Callable, Iterable, List, Set, get_type_hints

from .client import AppStoreConnectClient
from .endpoints import Endpoint

log = logging.getLogger("appstore_connect_mcp.core.registry")

TOOLS_PACKAGE = "appstore_connect_mcp.core.tools"


# --- Discovery helpers ----------------------------------------------------- #


def discover_tool_modules(package_name: str = TOOLS_PACKAGE) -> List[ModuleType]:
    """Import all modules under the given tools package, skipping failures."""
    modules: List[ModuleType] = []
    base_pkg = importlib.import_module(package_name)

    for finder in pkgutil.iter_modules(base_pkg.__path__, base_pkg.__name__ + "."):
        name = finder.name
        try:
            module = importlib.import_module(name)
            modules.append(module)
        except Exception as exc:  # pragma: no cover - logged, not fatal
            log.error("Failed importing tool module %s: %s", name, exc)
            continue

    return modules


def iter_tool_functions(module: ModuleType) -> Iterable[Callable]:
    """
    Yield hand-written tools (public coroutines taking `client` first)
    followed by one generated tool per entry of the module's ENDPOINTS.
    """
    for _, func in inspect.getmembers(module, inspect.iscoroutinefunction):
        if func.__name__.startswith("_"):
            continue
        if func.__module__ != module.__name__:
            # Skip imported functions
            continue

        params = list(inspect.signature(func).parameters.values())
        if not params or params[0].name != "client":
            log.debug(
                "Skipping %s.%s: first parameter must be 'client'",
                module.__name__,
                func.__name__,
            )
            continue

        yield func

    for endpoint in getattr(module, "ENDPOINTS", ()):
        if not isinstance(endpoint, Endpoint):
            raise TypeError(f"{module.__name__}.ENDPOINTS holds a non-Endpoint: {endpoint!r}")
        yield endpoint.as_tool(module=module.__name__)


# --- Wrapping / registration ---------------------------------------------- #


def _wrap_tool(
    func: Callable, client_provider: Callable[[], AppStoreConnectClient]
) -> Callable:
    """Return a wrapper that injects client and hides it from the signature."""
    original_sig = inspect.signature(func)
    type_hints = get_type_hints(func, include_extras=True)

    new_params = []
    for i, (name, param) in enumerate(original_sig.parameters.items()):
        if i == 0 and name == "client":
            continue  # drop injected client
        ann = type_hints.get(name, param.annotation)
        new_params.append(param.replace(annotation=ann))

    return_ann = type_hints.get("return", original_sig.return_annotation)
    new_sig = inspect.Signature(parameters=new_params, return_annotation=return_ann)

    async def wrapped(*args, **kwargs):
        client = client_provider()
        return await func(client, *args, **kwargs)

    wrapped.__name__ = func.__name__
    wrapped.__doc__ = func.__doc__
    wrapped.__module__ = func.__module__
    wrapped.__signature__ = new_sig  # type: ignore[attr-defined]
    return wrapped


def _description(func: Callable) -> str:
    return inspect.cleandoc(func.__doc__ or "").split("\n\n")[0].replace("\n", " ")


def register_discovered_tools(
    app,
    client_provider: Callable[[], AppStoreConnectClient] | AppStoreConnectClient,
    modules: List[ModuleType] | None = None,
) -> List[str]:
    """Register discovered tools on an app that exposes a .tool decorator."""
    if isinstance(client_provider, AppStoreConnectClient):
        _client = client_provider

        def client_provider():
            return _client

    if not hasattr(app, "tool"):
        raise TypeError("app must expose a 'tool' decorator")

    modules = modules if modules is not None else discover_tool_modules()
    seen_names: Set[str] = set()
    registered: List[str] = []

    for module in modules:
        for func in iter_tool_functions(module):
            name = func.__name__
            if name in seen_names:
                raise ValueError(f"Duplicate tool name detected: {name}")

            wrapped = _wrap_tool(func, client_provider)
            app.tool(name=name, description=_description(func))(wrapped)
            seen_names.add(name)
            registered.append(name)
            log.debug("Registered tool: %s (%s)", name, module.__name__)

    log.info("Registered %d tools", len(registered))
    return registered


__all__ = [
    "discover_tool_modules",
    "iter_tool_functions",
    "register_discovered_tools",
]
