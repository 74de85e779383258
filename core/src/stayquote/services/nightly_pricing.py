"""Nightly price resolution.

Resolves one price per night of a stay from the month calendars and
tracks the minimum stay that binds the whole booking.

Occupancy pricing is an ordered rule list evaluated top-down; the first
rule that returns a price wins:
1. Guests within base occupancy: the day's base price
2. Exact per-occupancy override for the guest count
3. Base price plus extra-guest fee per guest above base occupancy
"""

import datetime as dt
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import TypedDict

from stayquote.models import (
    DayPrice,
    ErrorCode,
    PriceCalendarMonth,
    PropertyProfile,
    QuoteError,
)
from stayquote.utils.dates import stay_dates
from stayquote.utils.logging import get_logger

logger = get_logger(__name__)

OccupancyRule = Callable[[DayPrice, PropertyProfile, int], int | None]
CalendarsByMonth = Mapping[tuple[int, int], PriceCalendarMonth]


class NightlyPriceResolution(TypedDict):
    """Result of resolving every night of a stay."""

    daily_rates: dict[str, int]  # ISO date -> price, in stay order
    minimum_stay: int


def base_occupancy_price(day: DayPrice, profile: PropertyProfile, guests: int) -> int | None:
    """Base price when the party fits the base occupancy."""
    if guests <= profile.base_occupancy:
        return day.base_price
    return None


def occupancy_override_price(
    day: DayPrice, profile: PropertyProfile, guests: int
) -> int | None:
    """Per-occupancy override, matched on the guest count as text.

    Keys must match exactly: "04" does not match 4 guests.
    """
    if not day.prices:
        return None
    return day.prices.get(str(guests))


def extra_guest_fee_price(day: DayPrice, profile: PropertyProfile, guests: int) -> int | None:
    """Base price plus the extra-guest fee for each guest above base occupancy."""
    extra_guests = guests - profile.base_occupancy
    return day.base_price + extra_guests * profile.extra_guest_fee


OCCUPANCY_RULES: tuple[OccupancyRule, ...] = (
    base_occupancy_price,
    occupancy_override_price,
    extra_guest_fee_price,
)


def resolve_night_price(
    day: DayPrice,
    profile: PropertyProfile,
    guests: int,
    rules: Sequence[OccupancyRule] = OCCUPANCY_RULES,
) -> int:
    """Price one night by evaluating the occupancy rules in order.

    Raises:
        ValueError: If no rule produced a price
    """
    for rule in rules:
        price = rule(day, profile, guests)
        if price is not None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Night priced by %s: %s (guests=%s, base_price=%s)",
                    rule.__name__,
                    price,
                    guests,
                    day.base_price,
                )
            return price

    raise ValueError(f"No occupancy rule priced {guests} guests")


def day_price_for(date: dt.date, calendars: CalendarsByMonth) -> DayPrice:
    """Find the calendar entry for a night.

    Raises:
        QuoteError: DAY_PRICE_UNAVAILABLE if the month or day is missing
    """
    calendar = calendars.get((date.year, date.month))
    day = calendar.day(date.day) if calendar else None
    if day is None:
        raise QuoteError(
            ErrorCode.DAY_PRICE_UNAVAILABLE,
            details={"date": date.isoformat()},
            message=f"Price information not available for {date.isoformat()}",
        )
    return day


def resolve_nightly_prices(
    profile: PropertyProfile,
    check_in: dt.date,
    check_out: dt.date,
    guests: int,
    calendars: CalendarsByMonth,
    rules: Sequence[OccupancyRule] = OCCUPANCY_RULES,
) -> NightlyPriceResolution:
    """Resolve the price of every night and the binding minimum stay.

    The minimum stay starts at the property default and is raised by any
    night that requires more; a night never lowers it.

    Args:
        profile: Property pricing profile
        check_in: Check-in date
        check_out: Check-out date (exclusive)
        guests: Number of guests
        calendars: Month calendars keyed by (year, month)
        rules: Occupancy rules in evaluation order

    Returns:
        NightlyPriceResolution with daily rates and minimum stay

    Raises:
        QuoteError: DAY_PRICE_UNAVAILABLE for the first night without data
    """
    daily_rates: dict[str, int] = {}
    minimum_stay = profile.default_minimum_stay

    for night in stay_dates(check_in, check_out):
        day = day_price_for(night, calendars)
        daily_rates[night.isoformat()] = resolve_night_price(day, profile, guests, rules)

        if day.minimum_stay is not None and day.minimum_stay > minimum_stay:
            minimum_stay = day.minimum_stay

    return NightlyPriceResolution(daily_rates=daily_rates, minimum_stay=minimum_stay)


def meets_minimum_stay(nights: int, minimum_stay: int) -> bool:
    """Whether a stay of this many nights satisfies the minimum stay."""
    return nights >= minimum_stay
