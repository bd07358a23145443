"""Tests for DynamoDB seed script."""

from __future__ import annotations

import sys
from pathlib import Path

import boto3
import pytest
from moto import mock_aws

from invoicecalc.persistence.dynamodb_backend import DynamoDBEquityGrantRepository

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from seed_dynamodb import SAMPLE_GRANTS, create_tables, seed_sample_grants  # noqa: E402


@pytest.fixture
def ddb():
    with mock_aws():
        yield boto3.resource("dynamodb", region_name="us-east-1")


class TestCreateTables:
    def test_creates_grants_table(self, ddb):
        create_tables(ddb, suffix="-test")
        client = boto3.client("dynamodb", region_name="us-east-1")
        assert client.list_tables()["TableNames"] == ["invoicecalc-equity-grants-test"]

    def test_idempotent_skips_existing(self, ddb):
        create_tables(ddb, suffix="-test")
        create_tables(ddb, suffix="-test")  # should not raise
        client = boto3.client("dynamodb", region_name="us-east-1")
        assert len(client.list_tables()["TableNames"]) == 1


class TestSeedSampleGrants:
    def test_seeds_all_grants(self, ddb):
        create_tables(ddb, suffix="-test")
        seed_sample_grants(ddb, suffix="-test")
        resp = ddb.Table("invoicecalc-equity-grants-test").scan()
        assert resp["Count"] == len(SAMPLE_GRANTS)

    def test_seeded_grants_readable_by_repository(self, ddb):
        create_tables(ddb, suffix="-test")
        seed_sample_grants(ddb, suffix="-test")
        repo = DynamoDBEquityGrantRepository(table_suffix="-test", region="us-east-1")

        assert [g.id for g in repo.find_active_grants("investor-demo", 2021)] == ["grant-2021-demo"]
        assert repo.find_active_grants("investor-demo", 2023) == []  # cancelled
