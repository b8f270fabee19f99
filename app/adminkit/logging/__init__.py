"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging
    - get_correlation_id() / set_correlation_id(): Correlation ID access
    - clear_request_context(): Clear all request context
    - mask_sensitive_data(): Processor to redact sensitive fields
"""

from adminkit.logging.setup import configure_logging, get_module_logger

from adminkit.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
    set_correlation_id,
)

from adminkit.logging.formatters import SENSITIVE_PATTERNS, mask_sensitive_data

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
    "set_correlation_id",
    "clear_request_context",
    "mask_sensitive_data",
    "SENSITIVE_PATTERNS",
]
