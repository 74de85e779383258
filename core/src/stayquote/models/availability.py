"""Availability models for stay quotes."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from .enums import AvailabilityStatus


class Availability(BaseModel):
    """Availability record for a single night of a property."""

    model_config = ConfigDict(strict=True)

    property_id: str
    date: dt.date
    status: AvailabilityStatus
    block_reason: str | None = None


class AvailabilityResult(BaseModel):
    """Answer to "is this range free?" for a property.

    The source tag identifies which availability subsystem answered and
    is passed through to the quote response unchanged.
    """

    model_config = ConfigDict(strict=True)

    is_available: bool = Field(..., description="True when every night is free")
    unavailable_dates: list[dt.date] = Field(
        default_factory=list,
        description="Nights that are not free, in date order",
    )
    source: str = Field(..., description="Provenance tag of the answering subsystem")
