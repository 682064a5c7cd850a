"""
Core module for pydantic-currency.

Exports the configuration and logging components.
"""

from pydantic_currency.core.config import Settings, settings
from pydantic_currency.core.logging import get_logger, setup_logging

__all__ = [
    # Config
    "Settings",
    "settings",
    # Logging
    "get_logger",
    "setup_logging",
]
