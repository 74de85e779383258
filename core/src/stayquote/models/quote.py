"""Quote request and outcome models.

Wire names are camelCase; Python attribute names are snake_case.
A quote produces exactly one of three outcomes: unavailable dates,
minimum stay not met, or a priced stay.
"""

import datetime as dt
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel

from .enums import UnavailableReason

_WIRE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
)


class CheckPricingRequest(BaseModel):
    """Raw quote request as received from a caller.

    Every field is optional here; presence is checked by the validator so
    that missing fields surface as a MISSING_PARAMETER error.
    """

    model_config = _WIRE_CONFIG

    property_id: str | None = Field(default=None, examples=["villa-azul"])
    check_in: str | None = Field(default=None, examples=["2026-11-02"])
    check_out: str | None = Field(default=None, examples=["2026-11-05"])
    guests: StrictInt | None = Field(default=None, examples=[4])


class BookingRequest(BaseModel):
    """Validated quote request."""

    model_config = ConfigDict(strict=True, frozen=True)

    property_id: str
    check_in: dt.date
    check_out: dt.date
    guests: int = Field(..., ge=1)

    @property
    def nights(self) -> int:
        """Number of nights between check-in and check-out."""
        return (self.check_out - self.check_in).days


class BookingPriceBreakdown(BaseModel):
    """Totals produced by the booking aggregator."""

    model_config = ConfigDict(frozen=True, **_WIRE_CONFIG)

    accommodation_total: int = Field(..., ge=0, description="Sum of nightly prices")
    cleaning_fee: int = Field(..., ge=0)
    discount_percentage: int = Field(..., ge=0, le=100)
    discount_amount: int = Field(..., ge=0)
    subtotal: int = Field(..., ge=0, description="Accommodation total after discount")
    total: int = Field(..., ge=0, description="Subtotal plus cleaning fee")
    number_of_nights: int = Field(..., ge=1)
    average_nightly_rate: int = Field(..., ge=0)


class PricingResult(BookingPriceBreakdown):
    """Aggregated totals plus the per-night rates and currency."""

    daily_rates: dict[str, int] = Field(
        ...,
        description="Nightly price keyed by ISO date, in stay order",
    )
    currency: str


class ResponseMeta(BaseModel):
    """Metadata attached to every quote outcome."""

    model_config = _WIRE_CONFIG

    source: str = Field(..., description="Availability provenance tag")


class UnavailableDatesOutcome(BaseModel):
    """The stay overlaps nights that are not free."""

    model_config = _WIRE_CONFIG

    available: Literal[False] = False
    reason: UnavailableReason = UnavailableReason.UNAVAILABLE_DATES
    unavailable_dates: list[dt.date]
    meta: ResponseMeta


class MinimumStayOutcome(BaseModel):
    """The stay is shorter than the binding minimum stay."""

    model_config = _WIRE_CONFIG

    available: Literal[False] = False
    reason: UnavailableReason = UnavailableReason.MINIMUM_STAY
    minimum_stay: int = Field(..., ge=1)
    required_nights: int = Field(..., ge=1)
    meta: ResponseMeta


class PricedOutcome(BaseModel):
    """The stay is bookable; carries the full price breakdown."""

    model_config = _WIRE_CONFIG

    available: Literal[True] = True
    pricing: PricingResult
    meta: ResponseMeta


QuoteOutcome = Union[UnavailableDatesOutcome, MinimumStayOutcome, PricedOutcome]


def outcome_to_dict(outcome: QuoteOutcome) -> dict[str, Any]:
    """Serialize an outcome with wire (camelCase) names."""
    return outcome.model_dump(mode="json", by_alias=True)
