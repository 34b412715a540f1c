from __future__ import annotations

"""Small logging helpers to standardize concatener logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'concatener' logger.
    - get_logger: Namespaced logger factory ('concatener.*').
    - trace_io utilities gated by CONCATENER_TRACE_IO.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

from concatener.constants import ENV_TRACE_IO

BASE_LOGGER = "concatener"
_OWNED_ATTR = "_concatener_owned"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'concatener.resolver').
        - msg: Formatted message string.
        - version: concatener.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import; the package __init__ imports this module indirectly.
            from concatener import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("CONCATENER_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'concatener' logger and return it.

    Calling it again replaces the handler installed by a previous call;
    handlers added by anyone else are left alone.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(BASE_LOGGER)
    for old in [h for h in base.handlers if getattr(h, _OWNED_ATTR, False)]:
        base.removeHandler(old)

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    setattr(handler, _OWNED_ATTR, True)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'concatener'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def is_trace_io_enabled() -> bool:
    """Check if IO tracing is enabled via env flag."""
    return os.getenv(ENV_TRACE_IO) == "1"


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit debug-verbosity IO trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context, attached to the record as 'context'.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
