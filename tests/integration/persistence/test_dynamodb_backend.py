"""Integration tests for DynamoDBEquityGrantRepository against LocalStack."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from invoicecalc.core.config import AppSettings
from invoicecalc.models.contractor import CompanyContractor
from invoicecalc.models.invoice import InvoiceSubmission, LineItem
from invoicecalc.persistence.dynamodb_backend import DynamoDBEquityGrantRepository
from invoicecalc.services.invoice_calculator import InvoiceCalculator
from tests.integration.conftest import LOCALSTACK_URL, skip_no_localstack


@skip_no_localstack
class TestDynamoDBIntegration:
    @pytest.fixture
    def repo(self, seeded_tables):
        return DynamoDBEquityGrantRepository(
            table_suffix=seeded_tables,
            region="us-east-1",
            endpoint_url=LOCALSTACK_URL,
        )

    def test_grant_for_seeded_year(self, repo):
        [grant] = repo.find_active_grants("investor-demo", 2024)
        assert grant.share_price_usd == Decimal("12.50")

    def test_cancelled_grant_hidden(self, repo):
        assert repo.find_active_grants("investor-demo", 2023) == []

    def test_calculator_uses_seeded_grant(self, repo):
        contractor = CompanyContractor(
            id="cc-demo", company_id="co-demo", user_id="u-demo",
            company_investor_id="investor-demo", pay_rate_in_subunits=6000, equity_percentage=20,
        )
        submission = InvoiceSubmission(
            company_id="co-demo", contractor_id="cc-demo", invoice_date=date(2021, 8, 8),
            line_items=[LineItem(quantity="100:00")],
        )
        result = InvoiceCalculator(settings=AppSettings(), grants=repo).compute(
            submission, contractor, company_equity_enabled=True,
        )
        assert result.equity_grant_id == "grant-2021-demo"
        assert result.equity_amount_in_cents == 120000
