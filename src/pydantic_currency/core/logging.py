"""
Logging configuration module.

The library itself never configures logging; applications (and the bundled
analysis command) call ``setup_logging()`` once at startup.
"""

import logging
import logging.config
import sys
from typing import Any

from pydantic_currency.core.config import settings


def setup_logging() -> None:
    """
    Configure logging based on settings.

    Configures the log level and either a detailed console formatter or a
    JSON formatter for log aggregation.
    """
    logging.config.dictConfig(get_logging_config())

    logger = logging.getLogger(__name__)
    logger.debug(
        f"Logging configured: level={settings.log_level}, "
        f"format={settings.log_format}"
    )


def get_logging_config() -> dict[str, Any]:
    """
    Get logging configuration dictionary.

    Returns:
        Dictionary compatible with logging.config.dictConfig()
    """
    formatter = "json" if settings.log_format == "json" else "detailed"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": (
                    "%(asctime)s - %(name)s - %(levelname)s - "
                    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "format": (
                    "%(asctime)s %(name)s %(levelname)s %(filename)s "
                    "%(lineno)d %(funcName)s %(message)s"
                ),
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.log_level,
                "formatter": formatter,
                "stream": sys.stderr,
            },
        },
        "root": {
            "level": "WARNING",
            "handlers": ["console"],
        },
        "loggers": {
            "pydantic_currency": {
                "level": settings.log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name, typically __name__ of the module

    Returns:
        Logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Provider loaded")
    """
    return logging.getLogger(name)
