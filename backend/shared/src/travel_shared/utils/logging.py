"""Logging setup and request-scoped correlation IDs.

Each HTTP request runs inside a correlation scope; every log line emitted
while it is active is prefixed with ``[<correlation-id>]``. Lines logged
outside a request carry ``[no-correlation-id]``.

Usage:
    from travel_shared.utils.logging import correlation_scope, get_logger

    logger = get_logger(__name__)

    with correlation_scope(request.headers.get("X-Correlation-ID")) as cid:
        logger.info("Checking SGR availability")
"""

import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
NO_CORRELATION_ID = "no-correlation-id"

# Async-safe: each request task sees its own value
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def generate_correlation_id() -> str:
    """Return a fresh UUID4 string."""
    return str(uuid.uuid4())


def get_correlation_id() -> str | None:
    return _correlation_id.get()


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Run a block under a correlation ID and restore the previous one after.

    Args:
        correlation_id: Incoming ID (e.g. from a request header). A new one
            is generated when it is None or empty.

    Yields:
        The ID in effect inside the block.
    """
    cid = correlation_id or generate_correlation_id()
    token = _correlation_id.set(cid)
    try:
        yield cid
    finally:
        _correlation_id.reset(token)


class CorrelationIdFilter(logging.Filter):
    """Stamp ``record.correlation_id`` with the current ID."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or NO_CORRELATION_ID
        return True


class StructuredFormatter(logging.Formatter):
    """Formatter that prefixes every line with ``[correlation-id]``."""

    def format(self, record: logging.LogRecord) -> str:
        # Records from loggers without the filter still get an ID
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or NO_CORRELATION_ID
        return f"[{record.correlation_id}] {super().format(record)}"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Install the structured handler on the root logger.

    Repeated calls only change the level; the handler is added once.

    Args:
        level: Level name (``"DEBUG"``) or number.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if any(isinstance(h.formatter, StructuredFormatter) for h in root.handlers):
        return

    stream = logging.StreamHandler()
    stream.setFormatter(StructuredFormatter(DEFAULT_LOG_FORMAT))
    stream.addFilter(CorrelationIdFilter())
    root.addHandler(stream)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger carrying the correlation ID filter."""
    logger = logging.getLogger(name)
    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())
    return logger


def log_operation(
    logger: logging.Logger,
    label: str,
    operation: str,
    *,
    error: str | None = None,
    **fields: Any,
) -> None:
    """Log one service operation as ``<label>: <operation> | key=value | ...``.

    Fields whose value is None or empty are left out. The record's ``extra``
    holds the same fields so JSON handlers can index them.

    Args:
        logger: Logger to write to.
        label: Prefix naming the subsystem, e.g. ``"Payment operation"``.
        operation: Operation name.
        error: Failure description; when set the line is logged at WARNING.
        **fields: Context such as IDs, amounts and statuses.
    """
    context: dict[str, Any] = {"operation": operation}
    context.update({k: v for k, v in fields.items() if v is not None and v != ""})
    if error:
        context["error"] = error

    parts = [f"{label}: {operation}"]
    parts.extend(f"{key}={value}" for key, value in context.items() if key != "operation")
    message = " | ".join(parts)

    level = logging.WARNING if error else logging.INFO
    logger.log(level, message, extra=context)


def log_payment_operation(
    logger: logging.Logger,
    operation: str,
    *,
    transaction_id: str | None = None,
    booking_id: str | None = None,
    amount: float | None = None,
    status: str | None = None,
    error: str | None = None,
    **extra: Any,
) -> None:
    """Log a payment gateway call with its transaction context.

    Args:
        logger: Logger instance
        operation: Operation name (e.g., "verify_payment", "process_payment")
        transaction_id: Gateway transaction ID if available
        booking_id: Booking the payment belongs to, if known
        amount: Amount charged, if relevant
        status: Payment status reported
        error: Error message if the operation failed
        **extra: Additional context fields
    """
    log_operation(
        logger,
        "Payment operation",
        operation,
        error=error,
        transaction_id=transaction_id,
        booking_id=booking_id,
        amount=amount,
        status=status,
        **extra,
    )


def log_request(
    logger: logging.Logger,
    method: str,
    path: str,
    status_code: int,
    elapsed_ms: float,
) -> None:
    """Write the access line for one HTTP request.

    Server errors are logged at ERROR, client errors at WARNING.
    """
    if status_code >= 500:
        level = logging.ERROR
    elif status_code >= 400:
        level = logging.WARNING
    else:
        level = logging.INFO
    logger.log(
        level,
        f"{method} {path} -> {status_code} ({elapsed_ms:.1f} ms)",
        extra={"method": method, "path": path, "status_code": status_code},
    )
