"""Fields extracted from an uploaded invoice PDF.

Amounts here are dollars as printed on the document; conversion to cents
happens when the fields become an ``InvoiceSubmission``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class ExtractedLineItem(BaseModel):
    description: str = ""
    quantity: Decimal = Decimal("0")
    rate: Optional[Decimal] = None
    amount: Optional[Decimal] = None


class ExtractedExpense(BaseModel):
    description: str = ""
    amount: Decimal = Decimal("0")
    category: Optional[str] = None


class PartialInvoiceFields(BaseModel):
    """Best-effort extraction result. Every field may be missing."""

    invoice_number: Optional[str] = None
    invoice_date: Optional[str] = None  # YYYY-MM-DD
    line_items: list[ExtractedLineItem] = Field(default_factory=list)
    expenses: list[ExtractedExpense] = Field(default_factory=list)
    notes: Optional[str] = None

    @property
    def has_data(self) -> bool:
        return bool(self.invoice_number or self.invoice_date or self.line_items or self.expenses)
