"""Structured logging for lingua.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - clear_request_context(): Clear all request context
    - add_app_info(): Processor adding the application name and version
"""

from lingua.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)
from lingua.logging.formatters import add_app_info
from lingua.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
    "clear_request_context",
    "add_app_info",
]
