"""Logging setup for the ImagePlaceholder server.

Logs always go to stderr: stdout carries the MCP protocol when the server
runs over stdio.
"""

import json
import logging
import sys
from datetime import datetime, timezone

PACKAGE_LOGGER = "imageplaceholder"

# Config log level names -> logging levels
LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

TEXT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Formats each record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            entry["error"] = {
                "name": exc_type.__name__ if exc_type else None,
                "message": str(exc_value),
                "stack": self.formatException(record.exc_info),
            }
        return json.dumps(entry, default=str)


def configure_logging(log_level: str = "info", environment: str = "development") -> logging.Logger:
    """
    Configure the package logger.

    Args:
        log_level: One of debug, info, warn, error
        environment: "production" selects JSON output, anything else plain text

    Returns:
        The configured package logger
    """
    handler = logging.StreamHandler(sys.stderr)
    if environment == "production":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(LOG_LEVELS.get(log_level, logging.INFO))
    package_logger.propagate = False

    return package_logger
