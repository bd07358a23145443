"""Cash/equity split of the services total.

This is the only place money is divided. Equity is floored to whole cents
and cash is whatever remains, so the two always add back to the total.
"""

from __future__ import annotations

from invoicecalc.core.exceptions import InvalidAmount
from invoicecalc.models.invoice import ServicesSplit


def split_cash(services_total_cents: int, equity_percentage: int) -> ServicesSplit:
    if not 0 <= equity_percentage <= 100:
        raise InvalidAmount(equity_percentage, "equity_percentage", "must be between 0 and 100")
    if services_total_cents < 0:
        raise InvalidAmount(services_total_cents, "services_total_cents")

    if equity_percentage == 0:
        equity_cents = 0
    else:
        equity_cents = services_total_cents * equity_percentage // 100

    return ServicesSplit(
        services_total_cents=services_total_cents,
        equity_percentage=equity_percentage,
        cash_cents=services_total_cents - equity_cents,
        equity_cents=equity_cents,
    )
