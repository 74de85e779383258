"""Pydantic models for stay quote data entities."""

from .availability import Availability, AvailabilityResult
from .calendar import DayPrice, PriceCalendarMonth
from .enums import AvailabilityStatus, UnavailableReason
from .errors import (
    ERROR_CATEGORIES,
    ERROR_MESSAGES,
    ErrorCategory,
    ErrorCode,
    ErrorResponse,
    QuoteError,
    internal_error_response,
)
from .property import LengthOfStayDiscount, PricingConfig, PropertyProfile
from .quote import (
    BookingPriceBreakdown,
    BookingRequest,
    CheckPricingRequest,
    MinimumStayOutcome,
    PricedOutcome,
    PricingResult,
    QuoteOutcome,
    ResponseMeta,
    UnavailableDatesOutcome,
    outcome_to_dict,
)

__all__ = [
    # Enums
    "AvailabilityStatus",
    "UnavailableReason",
    # Property
    "LengthOfStayDiscount",
    "PricingConfig",
    "PropertyProfile",
    # Calendar
    "DayPrice",
    "PriceCalendarMonth",
    # Availability
    "Availability",
    "AvailabilityResult",
    # Quote
    "BookingPriceBreakdown",
    "BookingRequest",
    "CheckPricingRequest",
    "MinimumStayOutcome",
    "PricedOutcome",
    "PricingResult",
    "QuoteOutcome",
    "ResponseMeta",
    "UnavailableDatesOutcome",
    "outcome_to_dict",
    # Errors
    "ERROR_CATEGORIES",
    "ERROR_MESSAGES",
    "ErrorCategory",
    "ErrorCode",
    "ErrorResponse",
    "QuoteError",
    "internal_error_response",
]
