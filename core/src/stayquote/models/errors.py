"""Standard error codes for stay quotes.

Every failure raised inside the quote pipeline is a QuoteError carrying
one of these codes. The code decides the error category, and the
category decides how a transport layer reports it.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Standard error codes for the quote pipeline."""

    # Input errors
    MISSING_PARAMETER = "ERR_QUOTE_001"
    PAST_CHECK_IN = "ERR_QUOTE_002"
    INVALID_DATE_RANGE = "ERR_QUOTE_003"
    INVALID_GUEST_COUNT = "ERR_QUOTE_004"

    # Data availability errors
    PROPERTY_NOT_FOUND = "ERR_QUOTE_101"
    PRICE_DATA_UNAVAILABLE = "ERR_QUOTE_102"
    DAY_PRICE_UNAVAILABLE = "ERR_QUOTE_103"


class ErrorCategory(str, Enum):
    """Broad class of a failure, independent of transport."""

    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.MISSING_PARAMETER: "Missing required parameters",
    ErrorCode.PAST_CHECK_IN: "Check-in date cannot be in the past",
    ErrorCode.INVALID_DATE_RANGE: "Check-out date must be after check-in date",
    ErrorCode.INVALID_GUEST_COUNT: "Number of guests must be a positive integer",
    ErrorCode.PROPERTY_NOT_FOUND: "Property not found",
    ErrorCode.PRICE_DATA_UNAVAILABLE: "Price information not available for the selected dates",
    ErrorCode.DAY_PRICE_UNAVAILABLE: "Price information not available for the selected date",
}

ERROR_CATEGORIES: dict[ErrorCode, ErrorCategory] = {
    ErrorCode.MISSING_PARAMETER: ErrorCategory.BAD_REQUEST,
    ErrorCode.PAST_CHECK_IN: ErrorCategory.BAD_REQUEST,
    ErrorCode.INVALID_DATE_RANGE: ErrorCategory.BAD_REQUEST,
    ErrorCode.INVALID_GUEST_COUNT: ErrorCategory.BAD_REQUEST,
    ErrorCode.PROPERTY_NOT_FOUND: ErrorCategory.NOT_FOUND,
    ErrorCode.PRICE_DATA_UNAVAILABLE: ErrorCategory.NOT_FOUND,
    ErrorCode.DAY_PRICE_UNAVAILABLE: ErrorCategory.NOT_FOUND,
}

# Error codes reported for failures that are not QuoteErrors
INTERNAL_ERROR_CODE = "ERR_INTERNAL"
INTERNAL_ERROR_MESSAGE = "Failed to check pricing"


class ErrorResponse(BaseModel):
    """Standard error body for failed quote requests."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: str
    message: str
    details: Optional[dict[str, Any]] = None


class QuoteError(Exception):
    """Exception raised by quote operations.

    Propagates out of the pipeline untouched and is converted to an
    ErrorResponse at the outermost boundary.
    """

    def __init__(
        self,
        code: ErrorCode,
        details: Optional[dict[str, Any]] = None,
        message: Optional[str] = None,
    ):
        self.code = code
        self.message = message or ERROR_MESSAGES[code]
        self.details = details
        super().__init__(self.message)

    @property
    def category(self) -> ErrorCategory:
        """Error category used to pick the transport status."""
        return ERROR_CATEGORIES.get(self.code, ErrorCategory.INTERNAL)

    def to_error_response(self) -> ErrorResponse:
        """Convert this exception to an ErrorResponse body."""
        return ErrorResponse(
            error_code=self.code.value,
            message=self.message,
            details=self.details,
        )


def internal_error_response(exc: BaseException) -> ErrorResponse:
    """Build the generic failure body for an unexpected exception.

    Only the exception's message is exposed, never its traceback.
    """
    return ErrorResponse(
        error_code=INTERNAL_ERROR_CODE,
        message=INTERNAL_ERROR_MESSAGE,
        details={"error": str(exc) or exc.__class__.__name__},
    )
