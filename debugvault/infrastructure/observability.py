"""Structured Logging: JSON formatter and setup for DebugVault services.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (user_id, query, total_count, error_code) surfaced when present
    - JSON format in production, human-readable text in development
    - setup_logging installs at most one DebugVault handler on the root logger

Design Decisions:
    - JSONFormatter over third-party libs: the stdlib formatter hook is enough
    - Library modules only call logging.getLogger(__name__); the host application calls setup_logging
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "user_id", "session_id", "error_code", "operation",
    "query", "total_count", "delay_ms",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _DebugVaultHandler(logging.StreamHandler):
    """Marker subclass so repeated setup calls can find the installed handler."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging once; later calls reconfigure the same handler."""
    handler = next(
        (h for h in logging.root.handlers if isinstance(h, _DebugVaultHandler)),
        None,
    )
    if handler is None:
        handler = _DebugVaultHandler()
        logging.root.addHandler(handler)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
