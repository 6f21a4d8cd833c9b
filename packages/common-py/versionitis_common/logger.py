"""
Versionitis Logging

Thin layer over the standard library ``logging`` module so every package
logs the same way.

Usage:
    from versionitis_common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Loaded repo from repo.yaml")
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from .config import get_settings, normalize_log_level

ROOT_LOGGER_NAME = "versionitis"

_TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else was passed via ``extra``.
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger nested under the ``versionitis`` root logger.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Standard library Logger
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> logging.Logger:
    """
    Attach a stderr handler to the ``versionitis`` root logger.

    Values not given explicitly come from Settings. Calling this again
    replaces the previously installed handler.

    Args:
        level: Log level name (debug, info, warning or warn, error)
        json_format: Emit JSON lines instead of plain text

    Returns:
        The configured root logger
    """
    settings = get_settings()
    level = normalize_log_level(level or settings.log_level).upper()
    if json_format is None:
        json_format = settings.log_json

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if getattr(handler, "_versionitis", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT))
    handler._versionitis = True
    root.addHandler(handler)
    root.setLevel(level)
    return root
