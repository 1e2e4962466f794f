"""Logging setup for tableflow.

Records go to stdout or a file, either as plain text or as one JSON object
per line. Layout functions wrapped in ``log_performance`` report their
wall time on the ``tableflow.timing`` logger at DEBUG.
"""

from __future__ import annotations

import functools
import json
import logging
import sys
import time
from datetime import UTC, datetime
from typing import Any

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_timing_logger = logging.getLogger("tableflow.timing")

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class StructuredJSONFormatter(logging.Formatter):
    """Render a record as one JSON line.

    Output keys: ``level``, ``message``, ``timestamp`` (UTC, ISO 8601) and
    ``context``. ``context`` names the emitting logger, module, function and
    line, and holds any ``extra`` fields passed to the logging call plus the
    exception type, message and traceback when one is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        context: dict[str, Any] = {
            "logger_name": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        context.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            context["error_type"] = exc_type.__name__ if exc_type else None
            context["error_message"] = str(exc_value) if exc_value else None
            context["stack_trace"] = record.exc_text or self.formatException(record.exc_info)

        entry = {
            "level": record.levelname,
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "context": context,
        }
        return json.dumps(entry, default=str)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """(Re)configure the root logger.

    Args:
        level: Level name, case-insensitive.
        format_string: Text format; ignored when ``structured`` is set.
        filename: Log file path. Logs go to stdout when omitted.
        structured: Emit JSON lines instead of text.
    """
    handler: logging.Handler = (
        logging.FileHandler(filename) if filename else logging.StreamHandler(sys.stdout)
    )
    handler.setFormatter(
        StructuredJSONFormatter()
        if structured
        else logging.Formatter(format_string or DEFAULT_FORMAT)
    )

    logging.basicConfig(level=getattr(logging, level.upper()), handlers=[handler], force=True)


def log_performance(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        started = time.perf_counter()
        result = func(*args, **kwargs)
        _timing_logger.debug(
            "%s took %.4f seconds", func.__qualname__, time.perf_counter() - started
        )
        return result

    return wrapper
