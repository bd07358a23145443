"""Shared test doubles: re-export memory backends and the mock model provider."""

from __future__ import annotations

from invoicecalc.model_providers.mock_provider import MockModelProvider
from invoicecalc.persistence.memory_backend import MemoryEquityGrantRepository

__all__ = ["MemoryEquityGrantRepository", "MockModelProvider"]
