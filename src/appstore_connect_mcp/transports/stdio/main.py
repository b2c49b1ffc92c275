from __future__ import annotations

import asyncio
import os

from appstore_connect_mcp.core.config import ConfigurationError, create_client_from_env
from appstore_connect_mcp.core.logging import setup_logging
from appstore_connect_mcp.server import build_app


async def main() -> None:
    try:
        client = create_client_from_env()
    except ConfigurationError as exc:
        raise SystemExit(f"Auth configuration error: {exc}") from exc

    # after config so a LOG_LEVEL from .env applies
    setup_logging(os.getenv("LOG_LEVEL", "INFO"))

    app = build_app(client)
    try:
        await app.run_stdio_async()
    finally:
        await client.aclose()


def run() -> None:
    """Console-script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
