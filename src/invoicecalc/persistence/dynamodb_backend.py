"""DynamoDB backend implementing IEquityGrantRepository.

Table layout (``invoicecalc-equity-grants{suffix}``)::

    PK = INVESTOR#<company_investor_id>
    SK = YEAR#<yyyy>#GRANT#<grant_id>
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import boto3
from botocore.exceptions import ClientError

from invoicecalc.core.exceptions import RepositoryError
from invoicecalc.core.logging_config import get_logger
from invoicecalc.models.contractor import EquityGrant

logger = get_logger(__name__)

GRANTS_TABLE = "invoicecalc-equity-grants"


def _decode_decimals(item: dict[str, Any]) -> dict[str, Any]:
    """Convert integral Decimal values in a DynamoDB item to int.

    Fractional values (share prices) stay Decimal.
    """
    out: dict[str, Any] = {}
    for k, v in item.items():
        if isinstance(v, Decimal) and v == v.to_integral_value():
            out[k] = int(v)
        else:
            out[k] = v
    return out


def grant_key(company_investor_id: str, year: int, grant_id: str) -> dict[str, str]:
    return {"PK": f"INVESTOR#{company_investor_id}", "SK": f"YEAR#{year:04d}#GRANT#{grant_id}"}


def grant_to_item(grant: EquityGrant) -> dict[str, Any]:
    item: dict[str, Any] = {
        **grant_key(grant.company_investor_id, grant.year, grant.id),
        "grant_id": grant.id,
        "company_investor_id": grant.company_investor_id,
        "year": grant.year,
        "share_price_usd": grant.share_price_usd,
        "vested_shares": grant.vested_shares,
        "unvested_shares": grant.unvested_shares,
    }
    if grant.cancelled_at is not None:
        item["cancelled_at"] = grant.cancelled_at.isoformat()
    return item


def item_to_grant(item: dict[str, Any]) -> EquityGrant:
    data = _decode_decimals(item)
    return EquityGrant(
        id=data["grant_id"],
        company_investor_id=data["company_investor_id"],
        share_price_usd=Decimal(str(data["share_price_usd"])),
        year=data["year"],
        vested_shares=data.get("vested_shares", 0),
        unvested_shares=data.get("unvested_shares", 0),
        cancelled_at=data.get("cancelled_at"),
    )


class DynamoDBEquityGrantRepository:
    """Production IEquityGrantRepository backed by DynamoDB."""

    def __init__(self, table_suffix: str = "", region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._table_suffix = table_suffix
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)

    def _table(self):
        return self._ddb.Table(f"{GRANTS_TABLE}{self._table_suffix}")

    def find_active_grants(self, company_investor_id: str, year: int) -> list[EquityGrant]:
        pk = f"INVESTOR#{company_investor_id}"
        sk_prefix = f"YEAR#{year:04d}#"
        try:
            resp = self._table().query(
                KeyConditionExpression="PK = :pk AND begins_with(SK, :sk)",
                ExpressionAttributeValues={":pk": pk, ":sk": sk_prefix},
            )
        except ClientError as exc:
            raise RepositoryError(
                f"DynamoDB query failed for investor={company_investor_id!r}, year={year}: {exc}"
            ) from exc

        grants = [item_to_grant(item) for item in resp.get("Items", [])]
        active = [g for g in grants if g.is_active]
        logger.debug(
            "Loaded equity grants",
            extra={"company_investor_id": company_investor_id, "year": year,
                   "found": len(grants), "active": len(active)},
        )
        return active

    def put_grant(self, grant: EquityGrant) -> None:
        try:
            self._table().put_item(Item=grant_to_item(grant))
        except ClientError as exc:
            raise RepositoryError(f"DynamoDB put failed for grant={grant.id!r}: {exc}") from exc
