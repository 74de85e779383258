"""Property lookup service."""

from typing import Any

from stayquote.models import (
    ErrorCode,
    LengthOfStayDiscount,
    PricingConfig,
    PropertyProfile,
    QuoteError,
)

from .dynamodb import DynamoDBService, to_whole_number


class PropertyService:
    """Service for reading property pricing profiles."""

    TABLE = "properties"

    def __init__(self, db: DynamoDBService) -> None:
        """Initialize property service.

        Args:
            db: DynamoDB service instance
        """
        self.db = db

    def fetch_property(self, property_id: str) -> PropertyProfile:
        """Get the pricing profile of a property.

        Args:
            property_id: Property identifier

        Returns:
            PropertyProfile for the property

        Raises:
            QuoteError: PROPERTY_NOT_FOUND if there is no such property
        """
        item = self.db.get_item(self.TABLE, {"property_id": property_id})
        if not item:
            raise QuoteError(
                ErrorCode.PROPERTY_NOT_FOUND,
                details={"property_id": property_id},
            )
        return self._item_to_profile(item)

    def _item_to_profile(self, item: dict[str, Any]) -> PropertyProfile:
        """Convert DynamoDB item to PropertyProfile model."""
        price_per_night = item.get("price_per_night")
        if price_per_night is not None:
            price_per_night = to_whole_number(price_per_night)
        config = item.get("pricing_config") or {}

        discounts = [
            LengthOfStayDiscount(
                min_nights=to_whole_number(entry["min_nights"]),
                discount_percentage=to_whole_number(entry["discount_percentage"]),
            )
            for entry in config.get("length_of_stay_discounts") or []
        ]

        return PropertyProfile(
            property_id=item["property_id"],
            base_occupancy=to_whole_number(item["base_occupancy"]),
            extra_guest_fee=to_whole_number(item.get("extra_guest_fee") or 0),
            price_per_night=price_per_night,
            cleaning_fee=to_whole_number(item.get("cleaning_fee") or 0),
            base_currency=item["base_currency"],
            default_minimum_stay=to_whole_number(item.get("default_minimum_stay") or 1),
            pricing_config=PricingConfig(
                length_of_stay_discounts=sorted(discounts, key=lambda d: d.min_nights),
            ),
        )
