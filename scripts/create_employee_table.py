"""Create the DynamoDB employee table the migration writes to.

Usage:
    python scripts/create_employee_table.py --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from typing import Any

import boto3

TABLE_NAME = "employees"


def create_table(ddb: Any, name: str = TABLE_NAME, suffix: str = "") -> bool:
    """Create the employee table keyed on ``id``. Skips if it already exists.

    Returns:
        True if the table was created, False if it already existed.
    """
    client = ddb.meta.client
    table_name = f"{name}{suffix}"
    existing = client.list_tables().get("TableNames", [])
    if table_name in existing:
        print(f"  Table {table_name} already exists, skipping")
        return False
    client.create_table(
        TableName=table_name,
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
        BillingMode="PAY_PER_REQUEST",
    )
    print(f"  Created table {table_name}")
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the safety award employee table")
    parser.add_argument("--endpoint-url", default=None, help="DynamoDB endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--table-name", default=TABLE_NAME, help="Base table name")
    parser.add_argument("--table-suffix", default="", help="Table name suffix (e.g. -dev)")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    ddb = boto3.resource("dynamodb", **kwargs)

    print("Creating table...")
    create_table(ddb, name=args.table_name, suffix=args.table_suffix)
    print("Done!")


if __name__ == "__main__":
    main()
