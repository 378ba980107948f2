"""Standard error codes for the travel catalog API.

Every error the API surfaces is one of these string codes, wrapped in the
response envelope as ``error: {code, message}``.
"""

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Error codes returned to API clients."""

    # Domain errors raised by route handlers
    NOT_FOUND = "NOT_FOUND"
    MISSING_TRANSACTION_ID = "MISSING_TRANSACTION_ID"
    INVALID_AMOUNT = "INVALID_AMOUNT"

    # Framework-level failures mapped onto the envelope
    VALIDATION_ERROR = "VALIDATION_ERROR"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    HTTP_ERROR = "HTTP_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# Human-readable default messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NOT_FOUND: "Resource not found",
    ErrorCode.MISSING_TRANSACTION_ID: "Transaction ID is required",
    ErrorCode.INVALID_AMOUNT: "Invalid payment amount",
    ErrorCode.VALIDATION_ERROR: "Request validation failed",
    ErrorCode.METHOD_NOT_ALLOWED: "Method not allowed",
    ErrorCode.HTTP_ERROR: "Request could not be processed",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred",
}


class CatalogError(Exception):
    """Exception raised by API operations.

    Caught by the FastAPI exception handlers and converted into an error
    envelope with the HTTP status mapped from ``code``.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: Optional[str] = None,
        details: Optional[dict[str, str]] = None,
    ):
        self.code = code
        self.message = message or ERROR_MESSAGES[code]
        self.details = details
        super().__init__(self.message)
