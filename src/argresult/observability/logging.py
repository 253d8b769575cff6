"""Stdlib logging setup for argresult.

Library code only calls ``logging.getLogger("argresult.<area>")``; nothing is
configured on import. Applications that want argresult's records rendered opt
in once at startup:

    >>> from argresult.observability import configure_logging
    >>> configure_logging()  # level/format from ARGRESULT_LOG_* settings
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TextIO

from argresult.config import get_settings

if TYPE_CHECKING:
    from argresult.config import ArgResultSettings

ROOT_LOGGER = "argresult"
_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else came in via extra=
_RESERVED = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """JSON Lines formatter: one object per record, extra= fields inlined."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        data.update({k: v for k, v in vars(record).items() if k not in _RESERVED})
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)


class _ArgResultHandler(logging.StreamHandler):
    """Marker subclass so configure_logging() can find and replace its own handler."""


def configure_logging(
    settings: ArgResultSettings | None = None,
    *,
    output: TextIO | None = None,
) -> logging.Logger:
    """Attach a single stream handler to the ``argresult`` logger.

    Args:
        settings: Settings to read level and format from (default: get_settings())
        output: Stream to write to (default: stderr)

    Returns:
        The configured ``argresult`` logger
    """
    settings = settings or get_settings()
    logger = logging.getLogger(ROOT_LOGGER)

    for handler in [h for h in logger.handlers if isinstance(h, _ArgResultHandler)]:
        logger.removeHandler(handler)

    handler = _ArgResultHandler(output or sys.stderr)
    if settings.logging.format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(settings.effective_log_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``argresult`` namespace."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
