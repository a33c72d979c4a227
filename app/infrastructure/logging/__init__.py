"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the translator using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    # At application startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("translations_loaded", language_count=2)
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
]
