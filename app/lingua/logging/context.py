"""Request context binding for structured logging.

Every log entry emitted while a request is handled carries the request's
correlation ID, path, method and resolved locale.

Usage:
    from lingua.logging import bind_request_context

    with bind_request_context(request_path="/fr/dashboard", locale="fr"):
        logger.info("translations_served")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    locale: Optional[str] = None,
    **extra_context: Any,
) -> Iterator[None]:
    """Bind request-scoped values to all logs within the block.

    Args:
        correlation_id: Request identifier; a UUID4 is generated if omitted.
        request_path: HTTP request path.
        request_method: HTTP method.
        locale: Locale resolved for the request.
        **extra_context: Additional values; None values are skipped.
    """
    values = {
        "request_path": request_path,
        "request_method": request_method,
        "locale": locale,
        **extra_context,
    }
    context = {key: value for key, value in values.items() if value is not None}
    context["correlation_id"] = correlation_id or str(uuid.uuid4())

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    return structlog.contextvars.get_contextvars().get("correlation_id")


def clear_request_context() -> None:
    """Clear all request-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
