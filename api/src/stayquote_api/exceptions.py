"""FastAPI exception handlers for quote failures.

This is the single outer boundary of the quote pipeline. Errors raised
anywhere inside it arrive here and are mapped by category:
- 400 Bad Request: input errors and malformed request bodies
- 404 Not Found: missing property or price data
- 500 Internal Server Error: anything else, with a message-only detail

Business negatives (unavailable dates, minimum stay) are not errors and
never reach these handlers.

Usage:
    from stayquote_api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from stayquote.models import ErrorCategory, QuoteError, internal_error_response
from stayquote.utils.logging import get_logger
from stayquote_api.models.common import format_validation_errors

logger = get_logger(__name__)

ERROR_CATEGORY_TO_HTTP_STATUS: dict[ErrorCategory, int] = {
    ErrorCategory.BAD_REQUEST: HTTP_400_BAD_REQUEST,
    ErrorCategory.NOT_FOUND: HTTP_404_NOT_FOUND,
    ErrorCategory.INTERNAL: HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_for_error(category: ErrorCategory) -> int:
    """Get HTTP status code for an ErrorCategory.

    Args:
        category: The ErrorCategory to map

    Returns:
        HTTP status code, defaults to 500 if not explicitly mapped.
    """
    return ERROR_CATEGORY_TO_HTTP_STATUS.get(category, HTTP_500_INTERNAL_SERVER_ERROR)


async def quote_error_handler(request: Request, exc: QuoteError) -> JSONResponse:
    """Convert a QuoteError into its categorized JSON response."""
    status_code = get_http_status_for_error(exc.category)
    logger.warning(
        "Quote request failed: %s (%s) %s", exc.code.value, exc.message, exc.details or ""
    )

    return JSONResponse(
        status_code=status_code,
        content=exc.to_error_response().model_dump(mode="json"),
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 Bad Request."""
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content=format_validation_errors(exc.errors()).model_dump(mode="json"),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions with a generic 500 response.

    The exception is logged with its traceback; the client only sees
    its message.
    """
    logger.exception("Error checking pricing: %s", exc)

    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content=internal_error_response(exc).model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(QuoteError, quote_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError, request_validation_error_handler  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, generic_exception_handler)
