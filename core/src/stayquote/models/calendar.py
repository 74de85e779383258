"""Price calendar models.

A price calendar holds one month of day-level pricing for a property.
Days are keyed by day-of-month as a string ("1".."31").
"""

from pydantic import BaseModel, ConfigDict, Field


class DayPrice(BaseModel):
    """Pricing data for a single night."""

    model_config = ConfigDict(strict=True)

    base_price: int = Field(..., ge=0, description="Nightly price up to base occupancy")
    prices: dict[str, int] | None = Field(
        default=None,
        description="Per-occupancy overrides keyed by guest count as text",
    )
    minimum_stay: int | None = Field(
        default=None,
        ge=1,
        description="Minimum nights for any stay that includes this night",
    )


class PriceCalendarMonth(BaseModel):
    """One month of day-level pricing for a property."""

    model_config = ConfigDict(strict=True)

    property_id: str
    year: int = Field(..., ge=1)
    month: int = Field(..., ge=1, le=12)
    days: dict[str, DayPrice] = Field(default_factory=dict)

    def day(self, day_of_month: int) -> DayPrice | None:
        """Get the price entry for a day of this month, if present."""
        return self.days.get(str(day_of_month))
