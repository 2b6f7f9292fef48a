"""Logging configuration for property-use.

Workflow log calls attach their context as flat ``extra`` fields
(``property_id``, ``use_id``, ``error_code``, ``actor``); both formatters
render whichever of them a record carries.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from property_use.config import LOG_FORMATS, PropertyUseConfig
from property_use.exceptions import ConfigurationError

PACKAGE_LOGGER = "property_use"
CONTEXT_FIELDS = ("property_id", "use_id", "error_code", "actor")
QUIET_LOGGERS = ("confluent_kafka", "faker")


def _context(record: logging.LogRecord) -> dict[str, Any]:
    return {name: getattr(record, name) for name in CONTEXT_FIELDS if hasattr(record, name)}


class ContextFormatter(logging.Formatter):
    """Pipe-separated text lines with a trailing ``key=value`` context block."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if context:
            line += " | " + " ".join(f"{k}={v}" for k, v in context.items())
        return line


class JsonFormatter(logging.Formatter):
    """One JSON object per record, context fields at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    quiet: tuple[str, ...] = QUIET_LOGGERS,
) -> logging.Logger:
    """Install a single stdout handler and set the package log level.

    Parameters
    ----------
    level : str
        Log level name; unknown names fall back to INFO.
    format_type : str
        ``"standard"`` or ``"json"``.
    quiet : tuple[str, ...]
        Third-party loggers held at WARNING.

    Returns
    -------
    logging.Logger
        The ``property_use`` package logger.
    """
    if format_type not in LOG_FORMATS:
        raise ConfigurationError(f"Unknown log format {format_type!r}")
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(JsonFormatter() if format_type == "json" else ContextFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    return package_logger


def configure_logging(config: PropertyUseConfig) -> logging.Logger:
    """Apply ``config.log_level`` and ``config.log_format``."""
    return setup_logging(config.log_level, config.log_format)
