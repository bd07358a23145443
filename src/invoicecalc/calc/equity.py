"""Equity eligibility: which percentage and grant apply to an invoice.

Eligibility is scoped to the invoice year, not to the contractor's current
status. Alumni can still invoice against the grant for a past year.
"""

from __future__ import annotations

from datetime import date

from invoicecalc.core.exceptions import DataIntegrityError
from invoicecalc.core.logging_config import get_logger
from invoicecalc.core.protocols import IEquityGrantRepository
from invoicecalc.models.contractor import CompanyContractor, EquityGrant
from invoicecalc.models.invoice import EquitySplit

logger = get_logger(__name__)

NO_EQUITY = EquitySplit(equity_percentage=0, grant=None)


def find_active_grant(
    grants: IEquityGrantRepository, contractor: CompanyContractor, year: int
) -> EquityGrant | None:
    """Return the one active grant for the contractor's investor relation in ``year``.

    Raises:
        DataIntegrityError: more than one active grant matches.
    """
    if contractor.company_investor_id is None:
        return None

    matches = [
        grant
        for grant in grants.find_active_grants(contractor.company_investor_id, year)
        if grant.is_active and grant.year == year
    ]
    if len(matches) > 1:
        raise DataIntegrityError(
            contractor.company_investor_id, year, sorted(grant.id for grant in matches)
        )
    return matches[0] if matches else None


def resolve_equity_split(
    contractor: CompanyContractor,
    invoice_date: date,
    company_equity_enabled: bool,
    *,
    grants: IEquityGrantRepository,
    require_grant: bool = False,
) -> EquitySplit:
    """Determine the equity percentage and grant context for an invoice.

    A company with equity compensation disabled always gets 0%, whatever the
    contractor's stored percentage. With ``require_grant`` the percentage also
    collapses to 0 for a year without an active grant.
    """
    if not company_equity_enabled:
        return NO_EQUITY

    grant = find_active_grant(grants, contractor, invoice_date.year)
    percentage = contractor.equity_percentage
    if grant is None and require_grant:
        logger.debug(
            "No active grant for invoice year, paying in cash",
            extra={"contractor_id": contractor.id, "year": invoice_date.year},
        )
        percentage = 0

    return EquitySplit(equity_percentage=percentage, grant=grant)
