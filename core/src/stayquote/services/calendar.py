"""Price calendar lookup service."""

from typing import Any

from stayquote.models import DayPrice, PriceCalendarMonth

from .dynamodb import DynamoDBService, to_whole_number


def year_month_key(year: int, month: int) -> str:
    """Sort key of a calendar month, e.g. "2026-11"."""
    return f"{year:04d}-{month:02d}"


class PriceCalendarService:
    """Service for month-granular price calendars."""

    TABLE = "price-calendars"

    def __init__(self, db: DynamoDBService) -> None:
        """Initialize price calendar service.

        Args:
            db: DynamoDB service instance
        """
        self.db = db

    def fetch_calendar(
        self,
        property_id: str,
        year: int,
        month: int,
    ) -> PriceCalendarMonth | None:
        """Get one month of day-level pricing.

        Args:
            property_id: Property identifier
            year: Calendar year
            month: Calendar month (1-12)

        Returns:
            PriceCalendarMonth or None if the month has no calendar
        """
        item = self.db.get_item(
            self.TABLE,
            {"property_id": property_id, "year_month": year_month_key(year, month)},
        )
        if not item:
            return None
        return self._item_to_calendar(item)

    def _item_to_calendar(self, item: dict[str, Any]) -> PriceCalendarMonth:
        """Convert DynamoDB item to PriceCalendarMonth model."""
        days = {
            str(day): self._item_to_day_price(entry)
            for day, entry in (item.get("days") or {}).items()
        }
        year, month = item["year_month"].split("-")

        return PriceCalendarMonth(
            property_id=item["property_id"],
            year=to_whole_number(item.get("year", year)),
            month=to_whole_number(item.get("month", month)),
            days=days,
        )

    def _item_to_day_price(self, entry: dict[str, Any]) -> DayPrice:
        """Convert a DynamoDB day map to DayPrice model."""
        prices = entry.get("prices")
        minimum_stay = entry.get("minimum_stay")

        return DayPrice(
            base_price=to_whole_number(entry["base_price"]),
            prices=(
                {str(k): to_whole_number(v) for k, v in prices.items()} if prices else None
            ),
            # Zero or missing means no per-night restriction
            minimum_stay=to_whole_number(minimum_stay) if minimum_stay else None,
        )
