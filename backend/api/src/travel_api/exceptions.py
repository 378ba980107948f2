"""FastAPI exception handlers that render every failure as an error envelope.

Domain errors (CatalogError) carry an ErrorCode; the HTTP status is chosen
here, never by the envelope itself:

- 400 Bad Request: missing or invalid request values
- 404 Not Found: unknown resource or endpoint
- 405 Method Not Allowed: known path, wrong method
- 422 Unprocessable Entity: request failed schema validation
- 500 Internal Server Error: anything unexpected

Usage:
    Register handlers in FastAPI app:

    from travel_api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_405_METHOD_NOT_ALLOWED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from travel_shared.models import APIResponse, CatalogError, ErrorCode
from travel_shared.utils.logging import get_logger

logger = get_logger(__name__)

# Map ErrorCode to HTTP status codes
ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    # Missing/invalid input -> 400 Bad Request
    ErrorCode.MISSING_TRANSACTION_ID: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_AMOUNT: HTTP_400_BAD_REQUEST,
    # Not found errors -> 404 Not Found
    ErrorCode.NOT_FOUND: HTTP_404_NOT_FOUND,
    ErrorCode.METHOD_NOT_ALLOWED: HTTP_405_METHOD_NOT_ALLOWED,
    # Schema validation -> 422
    ErrorCode.VALIDATION_ERROR: 422,
    ErrorCode.INTERNAL_ERROR: HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode.

    Args:
        code: The ErrorCode to map

    Returns:
        HTTP status code, defaults to 400 if not explicitly mapped.
    """
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


def error_response(
    code: ErrorCode,
    message: str | None = None,
    status_code: int | None = None,
) -> JSONResponse:
    """Render an error envelope as a JSON response.

    Args:
        code: Error code to surface.
        message: Message override; defaults to the code's standard message.
        status_code: Status override; defaults to the code's mapped status.
    """
    envelope = APIResponse.fail(code, message)
    return JSONResponse(
        status_code=status_code or get_http_status_for_error(code),
        content=envelope.model_dump(mode="json"),
    )


def format_validation_errors(errors: Sequence[Any]) -> str:
    """Summarize pydantic validation errors in one line.

    Example:
        ``Request validation failed: body.transactionId: Input should be a valid string``
    """
    parts = []
    for error in errors:
        loc = ".".join(str(part) for part in error.get("loc", []))
        parts.append(f"{loc}: {error.get('msg', '')}" if loc else error.get("msg", ""))
    summary = "; ".join(parts)
    return f"Request validation failed: {summary}" if summary else "Request validation failed"


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Handle CatalogError exceptions and convert to an error envelope.

    Args:
        request: The incoming request (unused but required by FastAPI)
        exc: The CatalogError exception

    Returns:
        JSONResponse with the envelope and the status mapped from the code.
    """
    return error_response(exc.code, exc.message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle framework HTTP errors (unknown route, wrong method...).

    The original status code is kept.
    """
    if exc.status_code == HTTP_404_NOT_FOUND:
        code, message = ErrorCode.NOT_FOUND, "Endpoint not found"
    elif exc.status_code == HTTP_405_METHOD_NOT_ALLOWED:
        code, message = ErrorCode.METHOD_NOT_ALLOWED, None
    else:
        code, message = ErrorCode.HTTP_ERROR, str(exc.detail)

    response = error_response(code, message, status_code=exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors (HTTP 422)."""
    return error_response(
        ErrorCode.VALIDATION_ERROR,
        format_validation_errors(exc.errors()),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions with a generic error response.

    The traceback is logged; the client only sees INTERNAL_ERROR.
    """
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    return error_response(ErrorCode.INTERNAL_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Call this function during app initialization to enable
    consistent error envelopes across all routes.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(CatalogError, catalog_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
