"""Quote orchestration: availability, pricing and minimum stay.

The pipeline for one request:
1. Validate the raw request
2. Load the property profile
3. Check availability; stop with an unavailable-dates outcome if not free
4. Fetch every calendar month of the stay concurrently (all or nothing)
5. Resolve nightly prices and the binding minimum stay
6. Stop with a minimum-stay outcome if the stay is too short
7. Aggregate totals and return a priced outcome

Failures propagate as exceptions; nothing here converts them to outcomes.
"""

import datetime as dt
import os
from collections.abc import Callable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from contextvars import copy_context
from typing import Protocol

from stayquote.models import (
    AvailabilityResult,
    BookingPriceBreakdown,
    BookingRequest,
    CheckPricingRequest,
    ErrorCode,
    LengthOfStayDiscount,
    MinimumStayOutcome,
    PriceCalendarMonth,
    PricedOutcome,
    PricingResult,
    PropertyProfile,
    QuoteError,
    QuoteOutcome,
    ResponseMeta,
    UnavailableDatesOutcome,
)
from stayquote.utils.dates import months_spanned
from stayquote.utils.logging import get_logger, log_pricing_operation

from .booking_price import calculate_booking_price
from .nightly_pricing import meets_minimum_stay, resolve_nightly_prices
from .validation import validate_request

logger = get_logger(__name__)

DEFAULT_CALENDAR_FETCH_MAX_WORKERS = 4


class PropertyLookup(Protocol):
    def fetch_property(self, property_id: str) -> PropertyProfile: ...


class CalendarLookup(Protocol):
    def fetch_calendar(
        self, property_id: str, year: int, month: int
    ) -> PriceCalendarMonth | None: ...


class AvailabilityChecker(Protocol):
    def check_availability(
        self, property_id: str, check_in: dt.date, check_out: dt.date
    ) -> AvailabilityResult: ...


BookingAggregator = Callable[
    [Mapping[str, int], int, Sequence[LengthOfStayDiscount] | None],
    BookingPriceBreakdown,
]
MonthsSpanned = Callable[[dt.date, dt.date], Sequence[tuple[int, int]]]


class QuoteService:
    """Service that answers "can I book this stay, and for how much?"."""

    def __init__(
        self,
        properties: PropertyLookup,
        calendars: CalendarLookup,
        availability: AvailabilityChecker,
        aggregate: BookingAggregator = calculate_booking_price,
        months: MonthsSpanned = months_spanned,
        max_workers: int | None = None,
        today: Callable[[], dt.date] = dt.date.today,
    ) -> None:
        """Initialize quote service.

        Args:
            properties: Property profile lookup
            calendars: Month price calendar lookup
            availability: Availability checker
            aggregate: Booking total aggregator
            months: Calendar months spanned by a stay
            max_workers: Upper bound on concurrent calendar fetches.
                Defaults to CALENDAR_FETCH_MAX_WORKERS env var, then 4.
            today: Clock used for the past check-in rule
        """
        self.properties = properties
        self.calendars = calendars
        self.availability = availability
        self.aggregate = aggregate
        self.months = months
        self.max_workers = max_workers or int(
            os.getenv("CALENDAR_FETCH_MAX_WORKERS", DEFAULT_CALENDAR_FETCH_MAX_WORKERS)
        )
        self.today = today

    def check_pricing(self, raw: CheckPricingRequest) -> QuoteOutcome:
        """Validate a raw request and quote it.

        Raises:
            QuoteError: For invalid input or missing price data
            ValueError: For malformed dates
        """
        return self.quote(validate_request(raw, today=self.today()))

    def quote(self, request: BookingRequest) -> QuoteOutcome:
        """Quote a validated request.

        Args:
            request: Validated booking request

        Returns:
            UnavailableDatesOutcome, MinimumStayOutcome or PricedOutcome

        Raises:
            QuoteError: PROPERTY_NOT_FOUND, PRICE_DATA_UNAVAILABLE or
                DAY_PRICE_UNAVAILABLE
        """
        nights = request.nights
        profile = self.properties.fetch_property(request.property_id)
        log_pricing_operation(
            logger,
            "property_loaded",
            property_id=request.property_id,
            base_occupancy=profile.base_occupancy,
            extra_guest_fee=profile.extra_guest_fee,
            price_per_night=profile.price_per_night,
        )

        availability = self.availability.check_availability(
            request.property_id, request.check_in, request.check_out
        )
        meta = ResponseMeta(source=availability.source)
        log_pricing_operation(
            logger,
            "availability_checked",
            property_id=request.property_id,
            nights=nights,
            source=availability.source,
            is_available=availability.is_available,
            unavailable_count=len(availability.unavailable_dates),
        )

        if not availability.is_available:
            return UnavailableDatesOutcome(
                unavailable_dates=list(availability.unavailable_dates),
                meta=meta,
            )

        calendars = self.fetch_calendars(request)

        resolution = resolve_nightly_prices(
            profile,
            request.check_in,
            request.check_out,
            request.guests,
            calendars,
        )
        minimum_stay = resolution["minimum_stay"]
        log_pricing_operation(
            logger,
            "minimum_stay_checked",
            property_id=request.property_id,
            nights=nights,
            minimum_stay=minimum_stay,
            meets_minimum_stay=meets_minimum_stay(nights, minimum_stay),
        )

        if not meets_minimum_stay(nights, minimum_stay):
            return MinimumStayOutcome(
                minimum_stay=minimum_stay,
                required_nights=minimum_stay,
                meta=meta,
            )

        breakdown = self.aggregate(
            resolution["daily_rates"],
            profile.cleaning_fee,
            profile.pricing_config.length_of_stay_discounts,
        )
        pricing = PricingResult(
            **breakdown.model_dump(),
            daily_rates=resolution["daily_rates"],
            currency=profile.base_currency,
        )
        log_pricing_operation(
            logger,
            "quote_priced",
            property_id=request.property_id,
            nights=nights,
            guests=request.guests,
            source=meta.source,
            subtotal=pricing.subtotal,
            total=pricing.total,
            average_nightly_rate=pricing.average_nightly_rate,
        )

        return PricedOutcome(pricing=pricing, meta=meta)

    def fetch_calendars(
        self, request: BookingRequest
    ) -> dict[tuple[int, int], PriceCalendarMonth]:
        """Fetch every calendar month of the stay concurrently.

        All fetches are joined before returning. A fetch that raises fails
        the whole batch, as does any month without a calendar.

        Returns:
            Calendars keyed by (year, month)

        Raises:
            QuoteError: PRICE_DATA_UNAVAILABLE if any month is missing
        """
        months = list(self.months(request.check_in, request.check_out))
        workers = max(1, min(len(months), self.max_workers))

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                # Each fetch runs in a copy of the caller's context so the
                # correlation ID follows it into the worker thread
                executor.submit(
                    copy_context().run,
                    self.calendars.fetch_calendar,
                    request.property_id,
                    year,
                    month,
                )
                for year, month in months
            ]
            results = [future.result() for future in futures]

        missing = [
            f"{year:04d}-{month:02d}"
            for (year, month), calendar in zip(months, results)
            if calendar is None
        ]
        if missing:
            raise QuoteError(
                ErrorCode.PRICE_DATA_UNAVAILABLE,
                details={"months": missing},
            )

        return {
            (year, month): calendar
            for (year, month), calendar in zip(months, results)
            if calendar is not None
        }
