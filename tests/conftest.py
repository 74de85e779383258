"""Pytest configuration and fixtures for stay quote tests.

Provides:
- Fake AWS environment and DynamoDB tables mocked with moto
- Factories for property profiles and price calendars
- A QuoteService wired to MagicMock collaborators with a fixed clock
"""

import datetime as dt
import os
from typing import Any, Callable, Generator
from unittest.mock import MagicMock

import boto3
import pytest
from moto import mock_aws

# === Environment Setup ===

# Set environment variables for testing before imports
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")
os.environ.setdefault("DYNAMODB_TABLE_PREFIX", "test-stayquote")

if not os.environ.get("AWS_PROFILE") and not os.environ.get("AWS_ACCESS_KEY_ID"):
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

from stayquote.models import (  # noqa: E402
    AvailabilityResult,
    DayPrice,
    LengthOfStayDiscount,
    PriceCalendarMonth,
    PricingConfig,
    PropertyProfile,
)
from stayquote.services.quote import QuoteService  # noqa: E402

# Fixed "today" for quote tests; every stay below is after it
TODAY = dt.date(2030, 1, 1)
PROPERTY_ID = "villa-azul"
TABLE_PREFIX = "test-stayquote"


# === Singleton Reset ===


@pytest.fixture(autouse=True)
def reset_singletons() -> Generator[None, None, None]:
    """Reset DynamoDB and cached API services around each test."""
    from stayquote_api.dependencies import reset_services

    reset_services()
    yield
    reset_services()


# === DynamoDB Fixtures ===


@pytest.fixture
def aws_credentials() -> None:
    """Mocked AWS credentials for moto."""
    if not os.environ.get("AWS_PROFILE"):
        os.environ["AWS_ACCESS_KEY_ID"] = "testing"
        os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
        os.environ["AWS_SECURITY_TOKEN"] = "testing"
        os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "eu-west-1"


@pytest.fixture
def dynamodb_client(aws_credentials: None) -> Generator[Any, None, None]:
    """Create a mocked DynamoDB client."""
    with mock_aws():
        client = boto3.client("dynamodb", region_name="eu-west-1")
        yield client


@pytest.fixture
def create_tables(dynamodb_client: Any) -> Any:
    """Create all quote tables and return the mocked DynamoDB resource."""
    tables = [
        {
            "TableName": f"{TABLE_PREFIX}-properties",
            "KeySchema": [{"AttributeName": "property_id", "KeyType": "HASH"}],
            "AttributeDefinitions": [
                {"AttributeName": "property_id", "AttributeType": "S"},
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
        {
            "TableName": f"{TABLE_PREFIX}-price-calendars",
            "KeySchema": [
                {"AttributeName": "property_id", "KeyType": "HASH"},
                {"AttributeName": "year_month", "KeyType": "RANGE"},
            ],
            "AttributeDefinitions": [
                {"AttributeName": "property_id", "AttributeType": "S"},
                {"AttributeName": "year_month", "AttributeType": "S"},
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
        {
            "TableName": f"{TABLE_PREFIX}-availability",
            "KeySchema": [
                {"AttributeName": "property_id", "KeyType": "HASH"},
                {"AttributeName": "date", "KeyType": "RANGE"},
            ],
            "AttributeDefinitions": [
                {"AttributeName": "property_id", "AttributeType": "S"},
                {"AttributeName": "date", "AttributeType": "S"},
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
    ]

    for table_config in tables:
        dynamodb_client.create_table(**table_config)

    return boto3.resource("dynamodb", region_name="eu-west-1")


# === Sample Data Fixtures ===


@pytest.fixture
def sample_profile() -> PropertyProfile:
    """Property with base occupancy 2 and a 10-per-guest extra fee."""
    return PropertyProfile(
        property_id=PROPERTY_ID,
        base_occupancy=2,
        extra_guest_fee=10,
        price_per_night=100,
        cleaning_fee=20,
        base_currency="EUR",
        default_minimum_stay=1,
    )


@pytest.fixture
def profile_factory(sample_profile: PropertyProfile) -> Callable[..., PropertyProfile]:
    """Build a profile from sample_profile with field overrides."""

    def _make(**overrides: Any) -> PropertyProfile:
        discounts = overrides.pop("discounts", None)
        if discounts is not None:
            overrides["pricing_config"] = PricingConfig(
                length_of_stay_discounts=[
                    LengthOfStayDiscount(min_nights=n, discount_percentage=p)
                    for n, p in discounts
                ]
            )
        return sample_profile.model_copy(update=overrides)

    return _make


def make_calendar(
    year: int,
    month: int,
    days: dict[int, DayPrice] | None = None,
    base_price: int = 100,
) -> PriceCalendarMonth:
    """Build a calendar month; every day gets base_price unless given in days."""
    if days is None:
        last_day = (dt.date(year + month // 12, month % 12 + 1, 1) - dt.timedelta(days=1)).day
        days = {d: DayPrice(base_price=base_price) for d in range(1, last_day + 1)}
    return PriceCalendarMonth(
        property_id=PROPERTY_ID,
        year=year,
        month=month,
        days={str(d): price for d, price in days.items()},
    )


@pytest.fixture
def calendar_factory() -> Callable[..., PriceCalendarMonth]:
    """Expose make_calendar as a fixture."""
    return make_calendar


# === Quote Service Fixtures ===


@pytest.fixture
def mock_properties(sample_profile: PropertyProfile) -> MagicMock:
    """Property lookup returning sample_profile."""
    mock = MagicMock()
    mock.fetch_property.return_value = sample_profile
    return mock


@pytest.fixture
def calendar_store() -> dict[tuple[int, int], PriceCalendarMonth]:
    """Calendars served by mock_calendars, keyed by (year, month)."""
    return {}


@pytest.fixture
def mock_calendars(
    calendar_store: dict[tuple[int, int], PriceCalendarMonth],
) -> MagicMock:
    """Calendar lookup backed by calendar_store."""
    mock = MagicMock()
    mock.fetch_calendar.side_effect = (
        lambda property_id, year, month: calendar_store.get((year, month))
    )
    return mock


@pytest.fixture
def mock_availability() -> MagicMock:
    """Availability checker reporting every stay as free."""
    mock = MagicMock()
    mock.check_availability.return_value = AvailabilityResult(
        is_available=True,
        unavailable_dates=[],
        source="availability_table",
    )
    return mock


@pytest.fixture
def quote_service(
    mock_properties: MagicMock,
    mock_calendars: MagicMock,
    mock_availability: MagicMock,
) -> QuoteService:
    """QuoteService with mock collaborators and TODAY as its clock."""
    return QuoteService(
        properties=mock_properties,
        calendars=mock_calendars,
        availability=mock_availability,
        today=lambda: TODAY,
    )
