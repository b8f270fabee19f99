"""Request context binding for structured logging.

Usage:
    from adminkit.logging import bind_request_context

    with bind_request_context(correlation_id="req-123", user_id=42):
        # All logs within this block will include the context
        logger.info("processing_request")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    user_id: Optional[Any] = None,
    user_name: Optional[str] = None,
    client_ip: Optional[str] = None,
    locale: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind request-scoped context to all logs within the context manager.

    Values already bound by an enclosing block are restored on exit.

    Args:
        correlation_id: Unique request identifier. Auto-generated if not provided.
        user_id: ID of the current user (if available).
        user_name: Account name of the current user (if available).
        client_ip: Client IP address (if available).
        locale: Locale tag used for the request (if any).
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}

    if user_id is not None:
        context["user_id"] = user_id

    if user_name is not None:
        context["user_name"] = user_name

    if client_ip is not None:
        context["client_ip"] = client_ip

    if locale is not None:
        context["locale"] = locale

    context.update(extra_context)

    tokens = structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID in the current logging context.

    Args:
        correlation_id: The correlation ID to set.
    """
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_request_context() -> None:
    """Clear all request-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
