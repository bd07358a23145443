"""Tests for invoice assembly."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from invoicecalc.calc.assembly import assemble_invoice
from invoicecalc.calc.expenses import aggregate_expenses
from invoicecalc.calc.line_items import aggregate_line_items
from invoicecalc.calc.split import split_cash
from invoicecalc.core.exceptions import EmptyInvoice, InconsistentTotals
from invoicecalc.models.contractor import EquityGrant
from invoicecalc.models.invoice import Expense, LineItem, ServicesSplit

INVOICE_DATE = date(2021, 8, 8)


def test_services_and_expenses():
    line_items = aggregate_line_items([LineItem(quantity="100:00")], default_rate=6000)
    expenses = aggregate_expenses([Expense(total_amount_in_cents=4599)])
    grant = EquityGrant(id="g-1", company_investor_id="i-1", share_price_usd=Decimal("300"), year=2021)

    result = assemble_invoice(
        line_items, split_cash(600000, 20), expenses, invoice_date=INVOICE_DATE, grant=grant,
    )

    assert result.total_amount_in_usd_cents == 604599
    assert result.services_amount_in_cents == 600000
    assert result.expenses_amount_in_cents == 4599
    assert result.equity_amount_in_cents == 120000
    assert result.cash_amount_in_cents == 484599
    assert result.equity_percentage == 20
    assert result.equity_grant_id == "g-1"
    assert len(result.line_items) == 1


def test_expense_only_invoice():
    line_items = aggregate_line_items([], default_rate=6000)
    expenses = aggregate_expenses([
        Expense(total_amount_in_cents=2550), Expense(total_amount_in_cents=15075),
    ])

    result = assemble_invoice(line_items, split_cash(0, 20), expenses, invoice_date=INVOICE_DATE)

    assert result.total_amount_in_usd_cents == 17625
    assert result.cash_amount_in_cents == 17625
    assert result.equity_amount_in_cents == 0
    assert result.equity_grant_id is None


def test_empty_invoice_rejected():
    with pytest.raises(EmptyInvoice):
        assemble_invoice(
            aggregate_line_items([], default_rate=6000),
            split_cash(0, 0),
            aggregate_expenses([]),
            invoice_date=INVOICE_DATE,
        )


def test_zero_quantity_line_is_not_empty():
    line_items = aggregate_line_items([LineItem(quantity="0")], default_rate=6000)
    result = assemble_invoice(line_items, split_cash(0, 20), aggregate_expenses([]), invoice_date=INVOICE_DATE)
    assert result.total_amount_in_usd_cents == 0


def test_split_for_wrong_total_is_inconsistent():
    line_items = aggregate_line_items([LineItem(quantity="1")], default_rate=6000)
    with pytest.raises(InconsistentTotals):
        assemble_invoice(line_items, split_cash(5000, 20), aggregate_expenses([]), invoice_date=INVOICE_DATE)


def test_unbalanced_split_is_inconsistent():
    line_items = aggregate_line_items([LineItem(quantity="1")], default_rate=6000)
    broken = ServicesSplit(services_total_cents=6000, equity_percentage=20, cash_cents=4800, equity_cents=1300)
    with pytest.raises(InconsistentTotals) as exc:
        assemble_invoice(line_items, broken, aggregate_expenses([]), invoice_date=INVOICE_DATE)
    assert exc.value.total_cents == 6000
