"""PdfInvoiceImporter: prefill an invoice from an uploaded PDF.

The upload is checked (type, size) before any model call. Extracted fields
are converted to an ``InvoiceSubmission`` that goes through the same
validation as a manually entered one.
"""

from __future__ import annotations

import base64
from datetime import date
from typing import Optional

from invoicecalc.calc.money import dollars_to_cents
from invoicecalc.core.config import AppSettings
from invoicecalc.core.exceptions import ExtractionError, InvalidUpload, NotAnInvoice
from invoicecalc.core.logging_config import get_logger
from invoicecalc.core.protocols import IModelProvider
from invoicecalc.models.extraction import ExtractedLineItem, PartialInvoiceFields
from invoicecalc.models.invoice import Expense, InvoiceSubmission, LineItem

logger = get_logger(__name__)

EXTRACTION_PROMPT = """Extract invoice data precisely:
- Quantities: exact as shown (5 stays 5, not 300)
- Rates: dollar amounts (e.g., $100.00 -> 100)
- Invoice number: patterns like #1234, INV-1234
- Dates: YYYY-MM-DD format
- Each line item separate in the line_items array
- If the document is not an invoice, return empty fields"""

USER_PROMPT = "Extract invoice data from this PDF. If this is not an invoice, return empty fields:"


class PdfInvoiceImporter:
    """Validates invoice PDFs and extracts their fields through a model provider."""

    def __init__(self, *, settings: AppSettings, model: IModelProvider) -> None:
        self._settings = settings
        self._model = model

    def validate_upload(self, content_type: str, data: bytes) -> None:
        if "pdf" not in (content_type or "").lower():
            raise InvalidUpload("Please provide a valid PDF file")
        if len(data) > self._settings.extraction.pdf_max_file_size:
            raise InvalidUpload(
                f"File size exceeds {self._settings.extraction.pdf_max_file_size_mb}MB limit. "
                "Please upload a smaller PDF."
            )

    def extract(self, content_type: str, data: bytes) -> PartialInvoiceFields:
        """Extract invoice fields from a PDF upload.

        Raises:
            InvalidUpload: wrong file type or too large.
            NotAnInvoice: nothing invoice-like was found.
            ExtractionError: the model provider failed.
        """
        self.validate_upload(content_type, data)

        messages = [
            {"role": "system", "content": EXTRACTION_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": USER_PROMPT},
                    {
                        "type": "document",
                        "source": {
                            "type": "base64",
                            "media_type": "application/pdf",
                            "data": base64.standard_b64encode(data).decode("ascii"),
                        },
                    },
                ],
            },
        ]
        try:
            fields = self._model.structured_output(
                messages, PartialInvoiceFields, temperature=self._settings.llm.temperature
            )
        except ExtractionError:
            raise
        except Exception as exc:
            logger.warning("Invoice extraction failed", exc_info=True, extra={"size": len(data)})
            raise ExtractionError(f"Failed to parse PDF: {exc}") from exc

        if not fields.has_data:
            raise NotAnInvoice()

        logger.info(
            "Invoice fields extracted",
            extra={"line_items": len(fields.line_items), "expenses": len(fields.expenses)},
        )
        return fields

    def to_submission(
        self,
        fields: PartialInvoiceFields,
        *,
        company_id: str,
        contractor_id: str,
        default_invoice_date: date,
    ) -> InvoiceSubmission:
        """Convert extracted dollar amounts to a cents-based submission."""
        invoice_date = default_invoice_date
        if fields.invoice_date:
            try:
                invoice_date = date.fromisoformat(fields.invoice_date)
            except ValueError:
                logger.info("Ignoring unparseable extracted date", extra={"value": fields.invoice_date})

        line_items = [
            LineItem(
                description=item.description,
                quantity=item.quantity,
                pay_rate_in_subunits=_rate_cents(item, f"line_items.{i}"),
            )
            for i, item in enumerate(fields.line_items)
        ]
        expenses = [
            Expense(
                description=expense.description,
                total_amount_in_cents=dollars_to_cents(expense.amount, f"expenses.{i}.amount"),
                category=expense.category,
            )
            for i, expense in enumerate(fields.expenses)
        ]
        return InvoiceSubmission(
            company_id=company_id,
            contractor_id=contractor_id,
            invoice_date=invoice_date,
            invoice_number=fields.invoice_number,
            notes=fields.notes,
            line_items=line_items,
            expenses=expenses,
        )


def _rate_cents(item: ExtractedLineItem, field: str) -> Optional[int]:
    """Printed rate in cents, else the line amount divided by its quantity."""
    if item.rate is not None:
        return dollars_to_cents(item.rate, f"{field}.rate")
    if item.amount is not None and item.quantity > 0:
        return dollars_to_cents(item.amount / item.quantity, f"{field}.amount")
    return None
