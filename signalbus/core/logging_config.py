"""Logging configuration for applications hosting the signal registry.

Registry log calls attach their context as ``extra={"extra_data": {...}}``
(signal name, listener repr, counts, expected/received payload types).
Both formatters here surface that context: the JSON formatter as fields,
the text formatter as a trailing ``key=value`` list.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from signalbus.config import Settings, get_settings

TEXT_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def signal_context(record: logging.LogRecord) -> Dict[str, Any]:
    """Return the registry context attached to *record* (empty if none)."""
    context = getattr(record, "extra_data", None)
    return dict(context) if isinstance(context, dict) else {}


class JSONFormatter(logging.Formatter):
    """One JSON object per record; ``signal`` is promoted to a top-level field."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = signal_context(record)
        if "signal" in context:
            log_entry["signal"] = context.pop("signal")
        if context:
            log_entry["data"] = context
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False, default=str)


class SignalContextFormatter(logging.Formatter):
    """Plain-text formatter that appends the registry context, if any."""

    def __init__(self, fmt: str = TEXT_FORMAT, datefmt: str = DATE_FORMAT) -> None:
        super().__init__(fmt, datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        context = signal_context(record)
        if not context:
            return text
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        head, sep, tail = text.partition("\n")
        return f"{head} | {pairs}{sep}{tail}"


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "INFO",
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """Install a single stdout handler on *logger_name* (root by default).

    Args:
        json_output: Use :class:`JSONFormatter` instead of text.
        level: Log level for the configured logger.
        logger_name: Logger to configure, e.g. ``"signalbus"`` to leave the
            host application's root logger untouched.
    """
    target = logging.getLogger(logger_name)
    target.setLevel(level)

    for handler in target.handlers[:]:
        target.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if json_output else SignalContextFormatter())
    target.addHandler(handler)
    return target


def configure_logging_from_settings(
    settings: Optional[Settings] = None,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """Apply the logging options of *settings* (defaults to the cached settings).

    ``debug`` forces DEBUG level so skipped dispatches become visible.
    """
    settings = settings or get_settings()
    level = "DEBUG" if settings.debug else settings.log_level
    return configure_logging(json_output=settings.log_json, level=level, logger_name=logger_name)
