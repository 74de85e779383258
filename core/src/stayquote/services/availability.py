"""Availability service for stay quotes."""

import datetime as dt
from typing import TYPE_CHECKING, Any

from stayquote.models import Availability, AvailabilityResult, AvailabilityStatus
from stayquote.utils.dates import stay_dates

if TYPE_CHECKING:
    from .dynamodb import DynamoDBService

# Provenance tag reported with every answer from this service
AVAILABILITY_SOURCE = "availability_table"


class AvailabilityService:
    """Service for per-night availability of a property."""

    TABLE = "availability"

    def __init__(self, db: "DynamoDBService", source: str = AVAILABILITY_SOURCE) -> None:
        """Initialize availability service.

        Args:
            db: DynamoDB service instance
            source: Provenance tag to report in results
        """
        self.db = db
        self.source = source

    def get_range(
        self,
        property_id: str,
        start_date: dt.date,
        end_date: dt.date,
    ) -> list[Availability]:
        """Get availability for each night of a range.

        Args:
            property_id: Property identifier
            start_date: Start of range
            end_date: End of range (exclusive - check-out date)

        Returns:
            One Availability per night, in date order
        """
        dates = stay_dates(start_date, end_date)
        if not dates:
            return []

        items = self.db.query_range(
            self.TABLE,
            partition_key_name="property_id",
            partition_key_value=property_id,
            sort_key_name="date",
            sort_start=dates[0].isoformat(),
            sort_end=dates[-1].isoformat(),
        )
        item_map = {item["date"]: item for item in items}

        result = []
        for d in dates:
            item = item_map.get(d.isoformat())
            if item:
                result.append(self._item_to_availability(item))
            else:
                # Nights without a record are not bookable
                result.append(
                    Availability(
                        property_id=property_id,
                        date=d,
                        status=AvailabilityStatus.BLOCKED,
                        block_reason="not_configured",
                    )
                )

        return result

    def check_availability(
        self,
        property_id: str,
        check_in: dt.date,
        check_out: dt.date,
    ) -> AvailabilityResult:
        """Check whether every night of a stay is free.

        Args:
            property_id: Property identifier
            check_in: Check-in date
            check_out: Check-out date

        Returns:
            AvailabilityResult with the unavailable nights and source tag
        """
        unavailable = [
            a.date
            for a in self.get_range(property_id, check_in, check_out)
            if a.status != AvailabilityStatus.AVAILABLE
        ]

        return AvailabilityResult(
            is_available=len(unavailable) == 0,
            unavailable_dates=unavailable,
            source=self.source,
        )

    def _item_to_availability(self, item: dict[str, Any]) -> Availability:
        """Convert DynamoDB item to Availability model."""
        return Availability(
            property_id=item["property_id"],
            date=dt.date.fromisoformat(item["date"]),
            status=AvailabilityStatus(item["status"]),
            block_reason=item.get("block_reason"),
        )
