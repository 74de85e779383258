"""Property models consumed by the quote pipeline.

A PropertyProfile is the read-only view of a rental property that
pricing needs: occupancy rules, fees, currency and discounts.
"""

from pydantic import BaseModel, ConfigDict, Field


class LengthOfStayDiscount(BaseModel):
    """Percentage discount unlocked once a stay reaches a number of nights."""

    model_config = ConfigDict(strict=True)

    min_nights: int = Field(..., ge=1, description="Nights needed to unlock the discount")
    discount_percentage: int = Field(
        ...,
        ge=0,
        le=100,
        description="Discount applied to the accommodation total",
    )


class PricingConfig(BaseModel):
    """Property-level pricing configuration."""

    model_config = ConfigDict(strict=True)

    length_of_stay_discounts: list[LengthOfStayDiscount] = Field(
        default_factory=list,
        description="Discount schedule ordered by min_nights",
    )


class PropertyProfile(BaseModel):
    """Pricing-relevant property metadata.

    Amounts are integers in the minor unit of base_currency.
    """

    model_config = ConfigDict(strict=True)

    property_id: str = Field(..., min_length=1, description="Opaque property identifier")
    base_occupancy: int = Field(..., ge=1, description="Guests included in the base price")
    extra_guest_fee: int = Field(default=0, ge=0, description="Per-night fee per extra guest")
    price_per_night: int | None = Field(
        default=None,
        ge=0,
        description="Reference nightly price, unused when calendars exist",
    )
    cleaning_fee: int = Field(default=0, ge=0, description="One-off cleaning fee")
    base_currency: str = Field(..., min_length=3, max_length=3, description="ISO 4217 code")
    default_minimum_stay: int = Field(default=1, ge=1, description="Minimum nights by default")
    pricing_config: PricingConfig = Field(default_factory=PricingConfig)
