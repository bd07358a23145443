"""invoicecalc exception hierarchy.

Validation errors name the submitted field they came from so the caller can
attach the message to it. Integrity and assembly errors have no field: they
halt the request and are logged for an operator.
"""

from __future__ import annotations


class InvoiceCalcError(Exception):
    """Base exception for all invoicecalc errors."""


class InvoiceValidationError(InvoiceCalcError):
    """Submitter-recoverable error attributable to a single input field."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class InvalidQuantity(InvoiceValidationError):
    """Line-item quantity is negative or unparseable."""

    def __init__(self, value: object, field: str | None = None, reason: str = "must be a non-negative number") -> None:
        self.value = value
        super().__init__(f"Invalid quantity {value!r}: {reason}", field)


class InvalidAmount(InvoiceValidationError):
    """Monetary amount (expense total, pay rate) is negative or out of range."""

    def __init__(self, value: object, field: str | None = None, reason: str = "must not be negative") -> None:
        self.value = value
        super().__init__(f"Invalid amount {value!r}: {reason}", field)


class MissingRate(InvoiceValidationError):
    """Line item has no rate and the contractor has no default rate."""

    def __init__(self, field: str | None = None) -> None:
        super().__init__("Rate is required when no default pay rate is set", field)


class EmptyInvoice(InvoiceValidationError):
    """Submission has neither line items nor expenses."""

    def __init__(self) -> None:
        super().__init__("Invoice must include at least one line item or expense")


class DataIntegrityError(InvoiceCalcError):
    """More than one active equity grant matches a contractor/year pair."""

    def __init__(self, company_investor_id: str, year: int, grant_ids: list[str]) -> None:
        self.company_investor_id = company_investor_id
        self.year = year
        self.grant_ids = grant_ids
        super().__init__(
            f"{len(grant_ids)} active equity grants for investor {company_investor_id} in {year}: "
            f"{', '.join(grant_ids)}"
        )


class InconsistentTotals(InvoiceCalcError):
    """Assembled cash and equity amounts do not add up to the invoice total."""

    def __init__(self, total_cents: int, cash_cents: int, equity_cents: int) -> None:
        self.total_cents = total_cents
        self.cash_cents = cash_cents
        self.equity_cents = equity_cents
        super().__init__(
            f"cash {cash_cents} + equity {equity_cents} != total {total_cents}"
        )


class RepositoryError(InvoiceCalcError):
    """Persistence backend operation failed."""


class ExtractionError(InvoiceCalcError):
    """PDF invoice field extraction failed."""


class InvalidUpload(ExtractionError):
    """Uploaded file is not a PDF or exceeds the size limit."""


class NotAnInvoice(ExtractionError):
    """Extraction returned no invoice data."""

    def __init__(self) -> None:
        super().__init__(
            "This PDF doesn't appear to contain invoice data. Please upload a valid invoice PDF."
        )
