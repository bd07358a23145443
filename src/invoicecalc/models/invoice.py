"""Invoice submission inputs and computed monetary records."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, Field

from invoicecalc.models.contractor import EquityGrant


class LineItem(BaseModel):
    """A billed line: hours (or units) at a rate in cents.

    ``quantity`` keeps what was entered (``"03:25"``, ``"2.5"`` or a Decimal);
    the aggregator parses and validates it.
    """

    description: str = ""
    quantity: Union[Decimal, str]
    pay_rate_in_subunits: Optional[int] = None  # None -> contractor's default rate

    model_config = {"str_strip_whitespace": True}


class ResolvedLineItem(BaseModel):
    """Line item with its effective rate and rounded amount."""

    description: str
    quantity: Decimal
    pay_rate_in_subunits: int
    amount_in_cents: int

    model_config = {"frozen": True}


class Expense(BaseModel):
    """Reimbursable expense. Always paid in cash."""

    description: str = ""
    total_amount_in_cents: int
    category: Optional[str] = None
    receipt: Optional[str] = None  # Attachment reference, opaque here

    model_config = {"str_strip_whitespace": True}


class InvoiceSubmission(BaseModel):
    """Everything a contractor submits for one invoice."""

    company_id: str
    contractor_id: str
    invoice_date: date
    invoice_number: Optional[str] = None
    notes: Optional[str] = None
    line_items: list[LineItem] = Field(default_factory=list)
    expenses: list[Expense] = Field(default_factory=list)


class LineItemsTotal(BaseModel):
    """Output of the line item aggregator."""

    services_total_cents: int = 0
    resolved_items: list[ResolvedLineItem] = Field(default_factory=list)

    model_config = {"frozen": True}


class ExpensesTotal(BaseModel):
    """Output of the expense aggregator."""

    expenses_total_cents: int = 0
    count: int = 0
    by_category: dict[str, int] = Field(default_factory=dict)

    model_config = {"frozen": True}


class EquitySplit(BaseModel):
    """Equity percentage and grant context that apply to one invoice."""

    equity_percentage: int = 0
    grant: Optional[EquityGrant] = None

    model_config = {"frozen": True}


class ServicesSplit(BaseModel):
    """Cash/equity split of the services total."""

    services_total_cents: int
    equity_percentage: int
    cash_cents: int
    equity_cents: int

    model_config = {"frozen": True}


class InvoiceComputation(BaseModel):
    """Validated monetary record for an invoice, ready to persist."""

    invoice_date: date
    equity_percentage: int
    total_amount_in_usd_cents: int
    services_amount_in_cents: int
    expenses_amount_in_cents: int
    cash_amount_in_cents: int
    equity_amount_in_cents: int
    equity_grant_id: Optional[str] = None
    line_items: list[ResolvedLineItem] = Field(default_factory=list)

    model_config = {"frozen": True}
