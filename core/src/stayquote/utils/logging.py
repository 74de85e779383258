"""Structured logging with correlation IDs.

Quote requests are traced end to end by a correlation ID stored in a
context variable, so it follows the request across worker threads that
copy the context and across awaits.

Usage:
    from stayquote.utils.logging import get_logger, log_pricing_operation

    logger = get_logger(__name__)
    log_pricing_operation(logger, "availability_checked", property_id="villa-azul")
"""

import logging
import os
import uuid
from contextvars import ContextVar
from typing import Any

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

NO_CORRELATION_ID = "no-correlation-id"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def generate_correlation_id() -> str:
    """Generate a new UUID-based correlation ID."""
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: Existing ID to reuse. A new one is generated if None.

    Returns:
        The correlation ID that was set
    """
    cid = correlation_id or generate_correlation_id()
    _correlation_id.set(cid)
    return cid


def get_correlation_id() -> str | None:
    """Get the current correlation ID, if any."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID context."""
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Logging filter that stamps records with the correlation ID."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or NO_CORRELATION_ID
        return True


class StructuredFormatter(logging.Formatter):
    """Formatter that prefixes every line with the correlation ID."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or NO_CORRELATION_ID

        return f"[{record.correlation_id}] {super().format(record)}"


def get_logger(name: str) -> logging.Logger:
    """Get a logger with correlation ID support.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())

    return logger


def configure_logging(level: str | None = None) -> None:
    """Install the structured formatter on the root handlers.

    Args:
        level: Log level name. Defaults to the LOG_LEVEL env var, then INFO.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=level_name, format=LOG_FORMAT)

    root = logging.getLogger()
    root.setLevel(level_name)
    for handler in root.handlers:
        handler.setFormatter(StructuredFormatter(LOG_FORMAT))


def log_pricing_operation(
    logger: logging.Logger,
    operation: str,
    *,
    property_id: str | None = None,
    nights: int | None = None,
    guests: int | None = None,
    source: str | None = None,
    error: str | None = None,
    level: int = logging.INFO,
    **extra: Any,
) -> None:
    """Log a step of the quote pipeline with structured context.

    Args:
        logger: Logger instance
        operation: Step name (e.g., "availability_checked", "quote_priced")
        property_id: Property being quoted
        nights: Nights in the requested stay
        guests: Requested guest count
        source: Availability provenance tag
        error: Error message if the step failed
        level: Log level for successful steps
        **extra: Additional context fields
    """
    context: dict[str, Any] = {"operation": operation}

    if property_id:
        context["property_id"] = property_id
    if nights is not None:
        context["nights"] = nights
    if guests is not None:
        context["guests"] = guests
    if source:
        context["source"] = source
    if error:
        context["error"] = error

    context.update(extra)

    msg_parts = [f"Pricing operation: {operation}"]
    for key, value in context.items():
        if key != "operation":
            msg_parts.append(f"{key}={value}")

    message = " | ".join(msg_parts)

    if error:
        logger.error(message, extra={"pricing": context})
    else:
        logger.log(level, message, extra={"pricing": context})
