"""Logging configuration for the API process."""

import json
import logging
from datetime import datetime, timezone

from app.config import Settings

ROOT_LOGGER_NAME = "app"


class JSONFormatter(logging.Formatter):
    """One JSON object per line: time, level, logger, message, extra fields and traceback."""

    # Attributes every LogRecord carries; anything else came in through extra={...}
    _RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value) for key, value in vars(record).items() if key not in self._RECORD_ATTRS
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(config: Settings) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        config: Application settings (LOG_LEVEL, LOG_FORMAT, DEBUG)

    Returns:
        Configured "app" logger
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(config.LOG_LEVEL.upper())

    # Remove existing handlers to avoid duplicates on reload
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    if config.LOG_FORMAT.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        if config.DEBUG:
            fmt = "[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s"
            datefmt = "%H:%M:%S"
        else:
            fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
            datefmt = "%Y-%m-%d %H:%M:%S"
        handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    root_logger.addHandler(handler)

    root_logger.debug(
        "Logging initialized",
        extra={"log_level": config.LOG_LEVEL, "log_format": config.LOG_FORMAT},
    )
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the application namespace.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
