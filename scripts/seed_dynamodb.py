"""Seed DynamoDB with the equity grants table and sample grants.

Usage:
    python scripts/seed_dynamodb.py --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

import boto3

from invoicecalc.models.contractor import EquityGrant
from invoicecalc.persistence.dynamodb_backend import GRANTS_TABLE, grant_to_item

TABLE_DEFINITIONS: list[dict[str, Any]] = [
    {"name": GRANTS_TABLE},
]

SAMPLE_GRANTS: list[EquityGrant] = [
    EquityGrant(
        id="grant-2021-demo", company_investor_id="investor-demo",
        share_price_usd=Decimal("300"), year=2021,
        vested_shares=0, unvested_shares=400,
    ),
    EquityGrant(
        id="grant-2024-demo", company_investor_id="investor-demo",
        share_price_usd=Decimal("12.50"), year=2024,
        vested_shares=150, unvested_shares=850,
    ),
    EquityGrant(
        id="grant-2023-cancelled", company_investor_id="investor-demo",
        share_price_usd=Decimal("10"), year=2023,
        unvested_shares=1000,
        cancelled_at=datetime(2023, 6, 30, tzinfo=timezone.utc),
    ),
]


def create_tables(ddb: Any, suffix: str = "") -> None:
    """Create the DynamoDB tables. Skips tables that already exist."""
    client = ddb.meta.client
    existing = client.list_tables().get("TableNames", [])

    for defn in TABLE_DEFINITIONS:
        table_name = f"{defn['name']}{suffix}"
        if table_name in existing:
            print(f"  Table {table_name} already exists, skipping")
            continue
        client.create_table(
            TableName=table_name,
            KeySchema=[
                {"AttributeName": "PK", "KeyType": "HASH"},
                {"AttributeName": "SK", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "PK", "AttributeType": "S"},
                {"AttributeName": "SK", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"  Created table {table_name}")


def seed_sample_grants(ddb: Any, suffix: str = "") -> None:
    """Write the sample equity grants."""
    tbl = ddb.Table(f"{GRANTS_TABLE}{suffix}")
    with tbl.batch_writer() as batch:
        for grant in SAMPLE_GRANTS:
            batch.put_item(Item=grant_to_item(grant))
    print(f"  Seeded {len(SAMPLE_GRANTS)} equity grants")


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed DynamoDB tables for invoicecalc")
    parser.add_argument("--endpoint-url", default=None, help="DynamoDB endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--table-suffix", default="", help="Table name suffix (e.g. -dev)")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    ddb = boto3.resource("dynamodb", **kwargs)

    print("Creating tables...")
    create_tables(ddb, suffix=args.table_suffix)

    print("Seeding data...")
    seed_sample_grants(ddb, suffix=args.table_suffix)

    print("Done!")


if __name__ == "__main__":
    main()
