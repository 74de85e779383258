"""Enumeration types for stay quote data models."""

from enum import Enum


class AvailabilityStatus(str, Enum):
    """Status of a date's availability."""

    AVAILABLE = "available"
    BOOKED = "booked"
    BLOCKED = "blocked"


class UnavailableReason(str, Enum):
    """Why a stay cannot be booked even though the request was valid."""

    UNAVAILABLE_DATES = "unavailable_dates"
    MINIMUM_STAY = "minimum_stay"
