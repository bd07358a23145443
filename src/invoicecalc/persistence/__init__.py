"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from invoicecalc.core.config import AppSettings
from invoicecalc.persistence.dynamodb_backend import DynamoDBEquityGrantRepository


def create_persistence(settings: AppSettings | None = None) -> DynamoDBEquityGrantRepository:
    """Create the equity grant repository from application settings."""
    if settings is None:
        settings = AppSettings()

    return DynamoDBEquityGrantRepository(
        table_suffix=settings.dynamodb.table_suffix,
        region=settings.dynamodb.region,
        endpoint_url=settings.dynamodb.endpoint_url,
    )
