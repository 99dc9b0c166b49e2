import logging
from typing import Any, Optional, TextIO

LIBRARY_LOGGER = "wit_client"

# Keys set by WitClient._log_call and WitClient._debug_body.
LOG_EXTRA_FIELDS = (
    "method",
    "endpoint",
    "resource",
    "status",
    "duration_ms",
    "error_type",
    "body",
)


class LogfmtFormatter(logging.Formatter):
    """logfmt lines for wit_client records; extras missing from a record are skipped."""

    def format(self, record: logging.LogRecord) -> str:
        kv: list[str] = [
            f"level={record.levelname.lower()}",
            f"logger={record.name}",
        ]

        msg = record.getMessage()
        if msg:
            kv.append(f"event={self._fmt_val(msg)}")

        for key in LOG_EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is None:
                continue
            kv.append(f"{key}={self._fmt_val(val)}")

        if record.exc_info:
            kv.append(f"exc_type={record.exc_info[0].__name__}")

        return " ".join(kv)

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, (int, float, bool)):
            return str(val)
        # Response bodies are JSON and may span lines; keep one record per line.
        s = str(val).replace("\r", "\\r").replace("\n", "\\n")
        if not s or any(c in s for c in ' ="'):
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(
    level: str = "INFO", *, stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Route wit_client records to a logfmt handler.

    Only the "wit_client" logger tree is configured, so an application's
    own root handlers are left alone. Calling it again replaces the handler.
    Use level="DEBUG" together with debug=True on the client to see bodies.
    """
    logger = logging.getLogger(LIBRARY_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(LogfmtFormatter())
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    return logger


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS", "LIBRARY_LOGGER"]
