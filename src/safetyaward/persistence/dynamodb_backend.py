"""DynamoDB backend implementing IEmployeeStore."""

from __future__ import annotations

from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from safetyaward.core.exceptions import StoreError

_CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"


class DynamoDBEmployeeStore:
    """Production IEmployeeStore backed by a DynamoDB table keyed on ``id``."""

    KEY = "id"

    def __init__(self, table_name: str = "employees", region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._table_name = table_name
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)
        self._table = self._ddb.Table(table_name)

    @property
    def table_name(self) -> str:
        return self._table_name

    def exists(self, employee_id: str) -> bool:
        try:
            resp = self._table.get_item(
                Key={self.KEY: employee_id},
                ProjectionExpression="#k",
                ExpressionAttributeNames={"#k": self.KEY},
            )
        except (ClientError, BotoCoreError) as exc:
            raise StoreError(f"DynamoDB lookup failed for id={employee_id!r}: {exc}") from exc
        return "Item" in resp

    def insert(self, document: dict[str, Any]) -> bool:
        """Put ``document`` unless its id is already present.

        Returns:
            True if written, False if an item with the same id already existed.
        """
        try:
            self._table.put_item(
                Item=document,
                ConditionExpression="attribute_not_exists(#k)",
                ExpressionAttributeNames={"#k": self.KEY},
            )
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") == _CONDITIONAL_CHECK_FAILED:
                return False
            raise StoreError(f"DynamoDB put failed for id={document.get(self.KEY)!r}: {exc}") from exc
        except BotoCoreError as exc:
            raise StoreError(f"DynamoDB put failed for id={document.get(self.KEY)!r}: {exc}") from exc
        return True
