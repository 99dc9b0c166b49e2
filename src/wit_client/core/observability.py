from __future__ import annotations

import logging
from typing import Any, Dict

OBSERVABILITY_LOGGER = "wit_client.observability"

RESERVED_LOG_KEYS = {
    "name",
    "msg",
    "args",
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
    "message",
}


def _clean_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {
        k: v for k, v in fields.items() if k not in RESERVED_LOG_KEYS and v is not None
    }


def log_event(event: str, logger: logging.Logger | None = None, **fields: Any) -> None:
    """
    Structured logging helper for client calls.
    - Emits at INFO with the fields as `extra` so formatters can pick them up.
    - Drops reserved LogRecord attributes and None values.
    """
    log = logger or logging.getLogger(OBSERVABILITY_LOGGER)
    if not log.isEnabledFor(logging.INFO):
        return
    extra = {"event": event, **_clean_fields(fields)}
    log.info(event, extra=extra)


__all__ = ["log_event", "OBSERVABILITY_LOGGER"]
