"""Re-export persistence protocols from core for convenience."""

from __future__ import annotations

from invoicecalc.core.protocols import IEquityGrantRepository

__all__ = ["IEquityGrantRepository"]
