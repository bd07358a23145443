"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class EquityConfig(BaseSettings):
    """Equity split policy."""

    model_config = {"env_prefix": "INVOICECALC_EQUITY_"}

    # When set, a contractor with no active grant for the invoice year is paid 100% cash.
    require_grant: bool = False


class ExtractionConfig(BaseSettings):
    """PDF invoice import limits."""

    model_config = {"env_prefix": "INVOICECALC_EXTRACTION_"}

    pdf_max_file_size_mb: int = 10

    @property
    def pdf_max_file_size(self) -> int:
        return self.pdf_max_file_size_mb * 1024 * 1024


class LLMConfig(BaseSettings):
    """LLM provider configuration for invoice field extraction."""

    model_config = {"env_prefix": "INVOICECALC_LLM_"}

    provider: Literal["mock", "anthropic"] = "mock"
    model: str = "claude-sonnet-4-5-20250929"
    api_key: str | None = None
    max_tokens: int = 4096
    temperature: float = 0.1


class DynamoDBConfig(BaseSettings):
    """DynamoDB configuration."""

    model_config = {"env_prefix": "INVOICECALC_DYNAMO_"}

    table_suffix: str = ""  # "-dev", "-uat", or "" for prod
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "INVOICECALC_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    equity: EquityConfig = EquityConfig()
    extraction: ExtractionConfig = ExtractionConfig()
    llm: LLMConfig = LLMConfig()
    dynamodb: DynamoDBConfig = DynamoDBConfig()
