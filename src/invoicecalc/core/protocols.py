"""Protocol interfaces for invoicecalc collaborators.

The computation core never talks to a database or a model API directly; it
receives these through constructor injection. Structural typing, no
inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from invoicecalc.models.contractor import EquityGrant

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Model Provider
# ---------------------------------------------------------------------------

@runtime_checkable
class IModelProvider(Protocol):
    """Abstraction over LLM providers used for invoice field extraction."""

    def structured_output(
        self, messages: list[dict[str, Any]], response_model: type[T], **kwargs: Any
    ) -> T: ...


# ---------------------------------------------------------------------------
# Persistence: Equity Grants
# ---------------------------------------------------------------------------

@runtime_checkable
class IEquityGrantRepository(Protocol):
    """Read access to equity grants, keyed by investor and grant year."""

    def find_active_grants(self, company_investor_id: str, year: int) -> list[EquityGrant]: ...
