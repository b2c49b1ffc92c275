from __future__ import annotations

import logging
from typing import Any, Dict

# LogRecord attributes that `extra` must not overwrite (logging raises KeyError).
RESERVED_LOG_KEYS = frozenset(
    {
        "name",
        "msg",
        "args",
        "message",
        "asctime",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)

EVENT_LOGGER = "appstore_connect_mcp.observability"


def _clean_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {
        k: v for k, v in fields.items() if k not in RESERVED_LOG_KEYS and v is not None
    }


def log_event(event: str, logger: logging.Logger | None = None, **fields: Any) -> None:
    """
    Emit one structured INFO record named `event`.
    None-valued fields are dropped so logfmt lines stay short.
    """
    log = logger or logging.getLogger(EVENT_LOGGER)
    if not log.isEnabledFor(logging.INFO):
        return
    log.info(event, extra={"event": event, **_clean_fields(fields)})


__all__ = ["log_event", "EVENT_LOGGER"]
