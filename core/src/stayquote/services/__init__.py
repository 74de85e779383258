"""Services for stay quotes."""

from .availability import AVAILABILITY_SOURCE, AvailabilityService
from .booking_price import calculate_booking_price, select_length_of_stay_discount
from .calendar import PriceCalendarService
from .dynamodb import DynamoDBService, get_dynamodb_service, reset_dynamodb_service
from .nightly_pricing import (
    OCCUPANCY_RULES,
    meets_minimum_stay,
    resolve_night_price,
    resolve_nightly_prices,
)
from .properties import PropertyService
from .quote import QuoteService
from .validation import validate_request

__all__ = [
    "AVAILABILITY_SOURCE",
    "AvailabilityService",
    "DynamoDBService",
    "OCCUPANCY_RULES",
    "PriceCalendarService",
    "PropertyService",
    "QuoteService",
    "calculate_booking_price",
    "get_dynamodb_service",
    "meets_minimum_stay",
    "reset_dynamodb_service",
    "resolve_night_price",
    "resolve_nightly_prices",
    "select_length_of_stay_discount",
    "validate_request",
]
