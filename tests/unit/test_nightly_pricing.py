"""Unit tests for nightly price resolution.

Covers the occupancy rule order (base occupancy, exact override,
extra-guest fee), per-night data lookup and the binding minimum stay.
"""

import datetime as dt
from typing import Callable

import pytest

from stayquote.models import DayPrice, ErrorCode, PriceCalendarMonth, PropertyProfile, QuoteError
from stayquote.services.nightly_pricing import (
    OCCUPANCY_RULES,
    base_occupancy_price,
    day_price_for,
    extra_guest_fee_price,
    meets_minimum_stay,
    occupancy_override_price,
    resolve_night_price,
    resolve_nightly_prices,
)


class TestOccupancyRules:
    """Tests for each occupancy rule in isolation."""

    def test_rule_order(self) -> None:
        assert OCCUPANCY_RULES == (
            base_occupancy_price,
            occupancy_override_price,
            extra_guest_fee_price,
        )

    def test_base_occupancy_rule_only_applies_within_occupancy(
        self, sample_profile: PropertyProfile
    ) -> None:
        day = DayPrice(base_price=100)

        assert base_occupancy_price(day, sample_profile, 2) == 100
        assert base_occupancy_price(day, sample_profile, 3) is None

    def test_override_rule_matches_guest_count_text(
        self, sample_profile: PropertyProfile
    ) -> None:
        day = DayPrice(base_price=100, prices={"3": 135})

        assert occupancy_override_price(day, sample_profile, 3) == 135
        assert occupancy_override_price(day, sample_profile, 4) is None

    def test_override_rule_does_not_match_padded_keys(
        self, sample_profile: PropertyProfile
    ) -> None:
        day = DayPrice(base_price=100, prices={"04": 150})

        assert occupancy_override_price(day, sample_profile, 4) is None

    def test_extra_guest_fee_rule(self, sample_profile: PropertyProfile) -> None:
        assert extra_guest_fee_price(DayPrice(base_price=100), sample_profile, 5) == 130


class TestResolveNightPrice:
    """Tests for resolve_night_price."""

    @pytest.mark.parametrize("guests", [1, 2])
    def test_within_base_occupancy_uses_base_price(
        self, sample_profile: PropertyProfile, guests: int
    ) -> None:
        """Overrides and extra-guest fees are ignored within base occupancy."""
        day = DayPrice(base_price=100, prices={"1": 70, "2": 80})

        assert resolve_night_price(day, sample_profile, guests) == 100

    def test_override_wins_over_formula(self, sample_profile: PropertyProfile) -> None:
        day = DayPrice(base_price=100, prices={"4": 150})

        # Formula would give 100 + 2 * 10 = 120
        assert resolve_night_price(day, sample_profile, 4) == 150

    def test_falls_back_to_formula_without_override(
        self, sample_profile: PropertyProfile
    ) -> None:
        day = DayPrice(base_price=100, prices={"3": 105})

        assert resolve_night_price(day, sample_profile, 4) == 120

    def test_zero_extra_guest_fee(
        self, profile_factory: Callable[..., PropertyProfile]
    ) -> None:
        profile = profile_factory(extra_guest_fee=0)

        assert resolve_night_price(DayPrice(base_price=100), profile, 6) == 100

    def test_custom_rules(self, sample_profile: PropertyProfile) -> None:
        flat_rate = lambda day, profile, guests: 999  # noqa: E731

        assert resolve_night_price(DayPrice(base_price=100), sample_profile, 2, [flat_rate]) == 999

    def test_no_rule_matches(self, sample_profile: PropertyProfile) -> None:
        with pytest.raises(ValueError):
            resolve_night_price(DayPrice(base_price=100), sample_profile, 4, [])


class TestDayPriceFor:
    """Tests for day_price_for."""

    def test_missing_month(self) -> None:
        with pytest.raises(QuoteError) as exc_info:
            day_price_for(dt.date(2030, 3, 5), {})

        assert exc_info.value.code == ErrorCode.DAY_PRICE_UNAVAILABLE
        assert exc_info.value.details == {"date": "2030-03-05"}

    def test_missing_day_in_present_month(
        self, calendar_factory: Callable[..., PriceCalendarMonth]
    ) -> None:
        calendars = {(2030, 3): calendar_factory(2030, 3, {4: DayPrice(base_price=100)})}

        with pytest.raises(QuoteError) as exc_info:
            day_price_for(dt.date(2030, 3, 5), calendars)

        assert exc_info.value.code == ErrorCode.DAY_PRICE_UNAVAILABLE
        assert exc_info.value.message == "Price information not available for 2030-03-05"


class TestResolveNightlyPrices:
    """Tests for resolve_nightly_prices."""

    def test_daily_rates_follow_stay_order(
        self,
        sample_profile: PropertyProfile,
        calendar_factory: Callable[..., PriceCalendarMonth],
    ) -> None:
        calendars = {
            (2030, 3): calendar_factory(
                2030, 3, {30: DayPrice(base_price=100), 31: DayPrice(base_price=110)}
            ),
            (2030, 4): calendar_factory(2030, 4, {1: DayPrice(base_price=120)}),
        }

        result = resolve_nightly_prices(
            sample_profile, dt.date(2030, 3, 30), dt.date(2030, 4, 2), 2, calendars
        )

        assert list(result["daily_rates"].items()) == [
            ("2030-03-30", 100),
            ("2030-03-31", 110),
            ("2030-04-01", 120),
        ]
        assert result["minimum_stay"] == 1

    def test_minimum_stay_is_maximum_across_nights(
        self,
        sample_profile: PropertyProfile,
        calendar_factory: Callable[..., PriceCalendarMonth],
    ) -> None:
        calendars = {
            (2030, 3): calendar_factory(
                2030,
                3,
                {
                    5: DayPrice(base_price=100, minimum_stay=2),
                    6: DayPrice(base_price=100, minimum_stay=5),
                    7: DayPrice(base_price=100, minimum_stay=3),
                },
            )
        }

        result = resolve_nightly_prices(
            sample_profile, dt.date(2030, 3, 5), dt.date(2030, 3, 8), 2, calendars
        )

        # Neither the first (2) nor the last (3) night decides
        assert result["minimum_stay"] == 5

    def test_night_minimum_below_default_does_not_lower_it(
        self,
        profile_factory: Callable[..., PropertyProfile],
        calendar_factory: Callable[..., PriceCalendarMonth],
    ) -> None:
        profile = profile_factory(default_minimum_stay=4)
        calendars = {
            (2030, 3): calendar_factory(
                2030, 3, {5: DayPrice(base_price=100, minimum_stay=2)}
            )
        }

        result = resolve_nightly_prices(
            profile, dt.date(2030, 3, 5), dt.date(2030, 3, 6), 2, calendars
        )

        assert result["minimum_stay"] == 4

    def test_fails_on_first_night_without_data(
        self,
        sample_profile: PropertyProfile,
        calendar_factory: Callable[..., PriceCalendarMonth],
    ) -> None:
        calendars = {
            (2030, 3): calendar_factory(
                2030, 3, {5: DayPrice(base_price=100), 7: DayPrice(base_price=100)}
            )
        }

        with pytest.raises(QuoteError) as exc_info:
            resolve_nightly_prices(
                sample_profile, dt.date(2030, 3, 5), dt.date(2030, 3, 8), 2, calendars
            )

        assert exc_info.value.details == {"date": "2030-03-06"}


class TestMeetsMinimumStay:
    """Tests for meets_minimum_stay."""

    @pytest.mark.parametrize(
        "nights, minimum_stay, expected",
        [(2, 3, False), (3, 3, True), (7, 3, True), (1, 1, True)],
    )
    def test_boundary(self, nights: int, minimum_stay: int, expected: bool) -> None:
        assert meets_minimum_stay(nights, minimum_stay) is expected
