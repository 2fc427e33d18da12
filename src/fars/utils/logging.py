"""Logging helpers: JSON formatter and a one-call handler setup."""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional, TextIO, Union

# Attributes every LogRecord carries; anything else came in via ``extra=``.
_RESERVED_ATTRS = {
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
}

_PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Merges any `extra=` kwargs directly into the payload, so a call such as
    ``log.warning("invalid year: 2000", extra={"year": 2000})`` produces a
    queryable ``"year"`` field.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in getattr(record, "__dict__", {}).items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        # numpy ints and Paths are not JSON-native
        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = "INFO",
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Attach a single stream handler to the ``fars`` logger.

    Calling this again replaces the handler installed by the previous call
    rather than stacking a second one.

    Args:
        level: Logging level name or number for the ``fars`` logger.
        json_format: Use :class:`JsonFormatter` instead of plain text.
        stream: Output stream; defaults to ``sys.stderr``.

    Returns:
        The installed handler.
    """
    logger = logging.getLogger("fars")
    logger.setLevel(level)

    for existing in list(logger.handlers):
        if getattr(existing, "_fars_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        JsonFormatter() if json_format else logging.Formatter(_PLAIN_FORMAT)
    )
    handler._fars_handler = True
    logger.addHandler(handler)
    return handler
