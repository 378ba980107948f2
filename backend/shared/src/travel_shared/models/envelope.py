"""Response envelope shared by every endpoint.

Wire shape::

    {"success": true,  "data": ...,                       "timestamp": "..."}
    {"success": false, "error": {"code": ..., "message": ...}, "timestamp": "..."}

Exactly one of ``data``/``error`` is present and it agrees with ``success``.
The envelope knows nothing about HTTP status codes; route handlers and the
exception handlers pick those.
"""

import datetime as dt
from typing import Generic, Optional, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)

from .errors import ERROR_MESSAGES, ErrorCode

T = TypeVar("T")


def iso_timestamp(now: Optional[dt.datetime] = None) -> str:
    """Format a moment as UTC ISO-8601 with millisecond precision.

    Args:
        now: Moment to format. Naive datetimes are taken as UTC.
            Defaults to the current wall-clock time.

    Returns:
        Timestamp like ``2026-03-01T09:15:00.123Z``.
    """
    if now is None:
        now = dt.datetime.now(dt.UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=dt.UTC)
    else:
        now = now.astimezone(dt.UTC)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ErrorDetail(BaseModel):
    """Error body carried by a failed envelope."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str


class APIResponse(BaseModel, Generic[T]):
    """Uniform success/error wrapper returned by every endpoint."""

    model_config = ConfigDict(frozen=True)

    success: bool
    data: Optional[T] = None
    error: Optional[ErrorDetail] = None
    timestamp: str

    @model_validator(mode="after")
    def check_outcome(self) -> "APIResponse[T]":
        """Reject envelopes whose payload disagrees with ``success``."""
        has_data = "data" in self.model_fields_set and self.data is not None
        has_error = self.error is not None
        if self.success and (has_error or not has_data):
            raise ValueError("success envelope must carry data and no error")
        if not self.success and (has_data or not has_error):
            raise ValueError("error envelope must carry an error and no data")
        return self

    @model_serializer(mode="wrap")
    def drop_absent_side(self, handler: SerializerFunctionWrapHandler):
        """Serialize without the ``data``/``error`` key that does not apply."""
        payload = handler(self)
        payload.pop("error" if self.success else "data", None)
        return payload

    @classmethod
    def ok(cls, data: T, now: Optional[dt.datetime] = None) -> "APIResponse[T]":
        """Build a success envelope around ``data``."""
        return cls(success=True, data=data, timestamp=iso_timestamp(now))

    @classmethod
    def fail(
        cls,
        code: ErrorCode | str,
        message: Optional[str] = None,
        now: Optional[dt.datetime] = None,
    ) -> "APIResponse[T]":
        """Build an error envelope.

        Args:
            code: Error code surfaced to the client.
            message: Human-readable message. Defaults to the code's
                standard message when ``code`` is an ErrorCode.
            now: Construction time, defaults to the current time.
        """
        if message is None:
            message = ERROR_MESSAGES.get(code, "") if isinstance(code, ErrorCode) else ""
        code_value = code.value if isinstance(code, ErrorCode) else code
        return cls(
            success=False,
            error=ErrorDetail(code=code_value, message=message),
            timestamp=iso_timestamp(now),
        )
