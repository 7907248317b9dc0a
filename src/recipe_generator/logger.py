"""Logging setup for the recipe generator.

Modules log through ``logging.getLogger(__name__)``; this module only attaches
a handler to the package logger. Format is selected by LOG_FORMAT (text/json)
and level by LOG_LEVEL.
"""

import json
import logging
import sys
from typing import Any

PACKAGE_LOGGER = "recipe_generator"
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s %(message)s"


class JSONFormatter(logging.Formatter):
    """Formatter that outputs one JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def setup_logging(level: str = "INFO", log_format: str = "text") -> logging.Logger:
    """Configure the package logger.

    Safe to call more than once: an existing handler is replaced, not duplicated.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR). Unknown names fall back to INFO.
        log_format: "json" for structured output, anything else for plain text.

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    if log_format.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logger.addHandler(handler)
    logger.propagate = False
    return logger
