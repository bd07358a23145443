"""In-memory backends for unit tests: dict-backed fakes."""

from __future__ import annotations

from invoicecalc.models.contractor import EquityGrant


class MemoryEquityGrantRepository:
    """Dict-backed IEquityGrantRepository for unit tests."""

    def __init__(self, grants: list[EquityGrant] | None = None) -> None:
        self._grants: dict[str, EquityGrant] = {}
        for grant in grants or []:
            self.add(grant)

    def add(self, grant: EquityGrant) -> EquityGrant:
        self._grants[grant.id] = grant
        return grant

    def find_active_grants(self, company_investor_id: str, year: int) -> list[EquityGrant]:
        return [
            g for g in self._grants.values()
            if g.company_investor_id == company_investor_id and g.year == year and g.is_active
        ]
