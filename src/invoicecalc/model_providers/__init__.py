"""Model providers selected by INVOICECALC_LLM_PROVIDER."""

from __future__ import annotations

from invoicecalc.core.config import AppSettings
from invoicecalc.core.protocols import IModelProvider


def create_model_provider(settings: AppSettings | None = None) -> IModelProvider:
    """Create the configured model provider."""
    if settings is None:
        settings = AppSettings()

    if settings.llm.provider == "anthropic":
        from invoicecalc.model_providers.anthropic_provider import AnthropicModelProvider

        return AnthropicModelProvider(settings.llm)

    from invoicecalc.model_providers.mock_provider import MockModelProvider

    return MockModelProvider()
