"""FastAPI dependency injection providers for quote services.

Services are lazily instantiated and cached with @lru_cache.

Service Dependency Graph:
    DynamoDBService (singleton via get_dynamodb_service)
        ├── PropertyService
        ├── PriceCalendarService
        └── AvailabilityService
                └── QuoteService (with calculate_booking_price)

Testing:
    Override get_quote_service via app.dependency_overrides, or call
    reset_services() to clear cached instances between tests.
"""

from functools import lru_cache

from stayquote.services.availability import AvailabilityService
from stayquote.services.calendar import PriceCalendarService
from stayquote.services.dynamodb import get_dynamodb_service
from stayquote.services.properties import PropertyService
from stayquote.services.quote import QuoteService


@lru_cache
def get_property_service() -> PropertyService:
    """Get cached PropertyService instance."""
    return PropertyService(db=get_dynamodb_service())


@lru_cache
def get_calendar_service() -> PriceCalendarService:
    """Get cached PriceCalendarService instance."""
    return PriceCalendarService(db=get_dynamodb_service())


@lru_cache
def get_availability_service() -> AvailabilityService:
    """Get cached AvailabilityService instance."""
    return AvailabilityService(db=get_dynamodb_service())


@lru_cache
def get_quote_service() -> QuoteService:
    """Get cached QuoteService instance.

    Returns:
        QuoteService wired to the DynamoDB-backed collaborators.
    """
    return QuoteService(
        properties=get_property_service(),
        calendars=get_calendar_service(),
        availability=get_availability_service(),
    )


def reset_services() -> None:
    """Clear all cached service instances.

    Also resets the underlying DynamoDB singleton.
    """
    from stayquote.services.dynamodb import reset_dynamodb_service

    get_property_service.cache_clear()
    get_calendar_service.cache_clear()
    get_availability_service.cache_clear()
    get_quote_service.cache_clear()

    reset_dynamodb_service()
