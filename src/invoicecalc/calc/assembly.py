"""Invoice assembly: combine the services split and expenses into one record."""

from __future__ import annotations

from datetime import date
from typing import Optional

from invoicecalc.core.exceptions import EmptyInvoice, InconsistentTotals
from invoicecalc.models.contractor import EquityGrant
from invoicecalc.models.invoice import (
    ExpensesTotal,
    InvoiceComputation,
    LineItemsTotal,
    ServicesSplit,
)


def assemble_invoice(
    line_items: LineItemsTotal,
    services_split: ServicesSplit,
    expenses: ExpensesTotal,
    *,
    invoice_date: date,
    grant: Optional[EquityGrant] = None,
) -> InvoiceComputation:
    """Build the invoice's monetary record.

    Expenses go to cash after the split. Raises ``EmptyInvoice`` when there is
    nothing to bill and ``InconsistentTotals`` if the amounts do not reconcile.
    """
    if not line_items.resolved_items and expenses.count == 0:
        raise EmptyInvoice()

    services_total = line_items.services_total_cents
    total = services_total + expenses.expenses_total_cents
    cash = services_split.cash_cents + expenses.expenses_total_cents
    equity = services_split.equity_cents

    if (
        services_split.services_total_cents != services_total
        or services_split.cash_cents + services_split.equity_cents != services_total
        or cash + equity != total
    ):
        raise InconsistentTotals(total, cash, equity)

    return InvoiceComputation(
        invoice_date=invoice_date,
        equity_percentage=services_split.equity_percentage,
        total_amount_in_usd_cents=total,
        services_amount_in_cents=services_total,
        expenses_amount_in_cents=expenses.expenses_total_cents,
        cash_amount_in_cents=cash,
        equity_amount_in_cents=equity,
        equity_grant_id=grant.id if grant is not None else None,
        line_items=list(line_items.resolved_items),
    )
