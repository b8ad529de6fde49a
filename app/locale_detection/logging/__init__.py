"""Structured logging infrastructure.

Centralized logging configuration and utilities using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a lazy logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging
"""

from locale_detection.logging.context import bind_request_context
from locale_detection.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
]
