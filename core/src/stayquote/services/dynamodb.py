"""DynamoDB service wrapper for quote data tables."""

import os
from decimal import Decimal
from typing import Any

import boto3
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

# Module-level singleton for connection reuse
_dynamodb_service_instance: "DynamoDBService | None" = None


def get_dynamodb_service(environment: str | None = None) -> "DynamoDBService":
    """Get or create the singleton DynamoDB service instance.

    Args:
        environment: Environment name. Only used on first call.

    Returns:
        Shared DynamoDBService instance
    """
    global _dynamodb_service_instance
    if _dynamodb_service_instance is None:
        _dynamodb_service_instance = DynamoDBService(environment)
    return _dynamodb_service_instance


def reset_dynamodb_service() -> None:
    """Reset the singleton instance (for testing only).

    Lets tests create a fresh DynamoDBService inside a mock_aws context.
    """
    global _dynamodb_service_instance
    _dynamodb_service_instance = None


def to_whole_number(value: Any) -> int:
    """Convert a stored DynamoDB number to int.

    Amounts and counts are stored in whole minor units.

    Raises:
        ValueError: If the stored value has a fractional part
    """
    number = value if isinstance(value, Decimal) else Decimal(str(value))
    if number != number.to_integral_value():
        raise ValueError(f"Expected a whole number, got {value}")
    return int(number)


class DynamoDBService:
    """Service for DynamoDB reads with environment-aware table names.

    Reads go through the low-level client, which boto3 documents as
    thread-safe, so one instance can serve concurrent calendar fetches.
    """

    def __init__(self, environment: str | None = None) -> None:
        """Initialize DynamoDB service.

        Args:
            environment: Environment name (dev/prod). Defaults to ENVIRONMENT env var.
        """
        self.environment = environment or os.getenv("ENVIRONMENT", "dev")
        # Allow override via DYNAMODB_TABLE_PREFIX for testing
        self.name_prefix = os.getenv(
            "DYNAMODB_TABLE_PREFIX", f"stayquote-{self.environment}"
        )
        self._client = boto3.client("dynamodb")
        self._serializer = TypeSerializer()
        self._deserializer = TypeDeserializer()

    def _table_name(self, table: str) -> str:
        """Get full table name with prefix."""
        return f"{self.name_prefix}-{table}"

    def _serialize(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: self._serializer.serialize(v) for k, v in data.items()}

    def _deserialize(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: self._deserializer.deserialize(v) for k, v in data.items()}

    def get_item(
        self,
        table: str,
        key: dict[str, Any],
    ) -> dict[str, Any] | None:
        """Get a single item by key.

        Args:
            table: Table name without prefix
            key: Primary key dict with plain Python values

        Returns:
            Item dict or None if not found
        """
        response = self._client.get_item(
            TableName=self._table_name(table),
            Key=self._serialize(key),
        )
        item = response.get("Item")
        if not item:
            return None
        return self._deserialize(item)

    def query_range(
        self,
        table: str,
        partition_key_name: str,
        partition_key_value: str,
        sort_key_name: str,
        sort_start: str,
        sort_end: str,
    ) -> list[dict[str, Any]]:
        """Query a partition for sort keys in [sort_start, sort_end].

        Follows pagination until the whole range has been read.

        Args:
            table: Table name without prefix
            partition_key_name: Name of the partition key attribute
            partition_key_value: Partition to read
            sort_key_name: Name of the sort key attribute
            sort_start: Inclusive lower bound
            sort_end: Inclusive upper bound

        Returns:
            List of items in sort key order
        """
        kwargs: dict[str, Any] = {
            "TableName": self._table_name(table),
            "KeyConditionExpression": "#pk = :pk AND #sk BETWEEN :start AND :end",
            "ExpressionAttributeNames": {"#pk": partition_key_name, "#sk": sort_key_name},
            "ExpressionAttributeValues": self._serialize(
                {":pk": partition_key_value, ":start": sort_start, ":end": sort_end}
            ),
        }

        items: list[dict[str, Any]] = []
        while True:
            response = self._client.query(**kwargs)
            items.extend(self._deserialize(item) for item in response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key
