"""InvoiceCalculator: turns an invoice submission into its monetary record.

Runs the aggregators, the equity resolver, the split and assembly in order.
Validation errors are the submitter's to fix and propagate as-is. Integrity
and assembly errors are logged with full context before propagating; the
request layer should answer them with a generic failure.
"""

from __future__ import annotations

from invoicecalc.calc.assembly import assemble_invoice
from invoicecalc.calc.equity import resolve_equity_split
from invoicecalc.calc.expenses import aggregate_expenses
from invoicecalc.calc.line_items import aggregate_line_items, rate_above_default_warning
from invoicecalc.calc.split import split_cash
from invoicecalc.core.config import AppSettings
from invoicecalc.core.exceptions import (
    DataIntegrityError,
    InconsistentTotals,
    InvoiceCalcError,
    InvoiceValidationError,
    RepositoryError,
)
from invoicecalc.core.logging_config import get_logger, log_context
from invoicecalc.core.protocols import IEquityGrantRepository
from invoicecalc.models.contractor import CompanyContractor
from invoicecalc.models.invoice import InvoiceComputation, InvoiceSubmission

logger = get_logger(__name__)

LEGAL_DETAILS_WARNING = "Please provide your legal details before creating new invoices."


class InvoiceCalculator:
    """Computes cash/equity amounts for invoice submissions.

    Dependencies are injected at construction time: settings and the equity
    grant repository.
    """

    def __init__(self, *, settings: AppSettings, grants: IEquityGrantRepository) -> None:
        self._settings = settings
        self._grants = grants

    def compute(
        self,
        submission: InvoiceSubmission,
        contractor: CompanyContractor,
        *,
        company_equity_enabled: bool,
    ) -> InvoiceComputation:
        """Compute the invoice record for ``submission``.

        Raises:
            InvoiceValidationError: a submitted field is invalid.
            DataIntegrityError: the contractor has conflicting grants for the year.
            InconsistentTotals: the assembled amounts do not reconcile.
            RepositoryError: the grant lookup failed.
        """
        if (submission.contractor_id, submission.company_id) != (contractor.id, contractor.company_id):
            raise InvoiceCalcError(
                f"Submission for contractor {submission.contractor_id} at company "
                f"{submission.company_id} does not match contractor {contractor.id}"
            )

        with log_context(
            company_id=submission.company_id,
            contractor_id=submission.contractor_id,
            invoice_date=submission.invoice_date.isoformat(),
        ):
            try:
                line_items = aggregate_line_items(submission.line_items, contractor.pay_rate_in_subunits)
                equity = resolve_equity_split(
                    contractor,
                    submission.invoice_date,
                    company_equity_enabled,
                    grants=self._grants,
                    require_grant=self._settings.equity.require_grant,
                )
                split = split_cash(line_items.services_total_cents, equity.equity_percentage)
                expenses = aggregate_expenses(submission.expenses)
                computation = assemble_invoice(
                    line_items,
                    split,
                    expenses,
                    invoice_date=submission.invoice_date,
                    grant=equity.grant,
                )
            except InvoiceValidationError as exc:
                logger.info("Invoice submission rejected", extra={"field": exc.field, "reason": str(exc)})
                raise
            except (DataIntegrityError, InconsistentTotals, RepositoryError):
                logger.exception(
                    "Invoice computation failed",
                    extra={
                        "company_equity_enabled": company_equity_enabled,
                        "line_item_count": len(submission.line_items),
                        "expense_count": len(submission.expenses),
                    },
                )
                raise

            logger.info(
                "Invoice computed",
                extra={
                    "total_amount_in_usd_cents": computation.total_amount_in_usd_cents,
                    "cash_amount_in_cents": computation.cash_amount_in_cents,
                    "equity_amount_in_cents": computation.equity_amount_in_cents,
                    "equity_percentage": computation.equity_percentage,
                    "equity_grant_id": computation.equity_grant_id,
                },
            )
            return computation

    def warnings(self, submission: InvoiceSubmission, contractor: CompanyContractor) -> list[str]:
        """Non-blocking notices to show the submitter before sending."""
        notices = []
        if not contractor.has_legal_details:
            notices.append(LEGAL_DETAILS_WARNING)
        rate_warning = rate_above_default_warning(submission.line_items, contractor.pay_rate_in_subunits)
        if rate_warning:
            notices.append(rate_warning)
        return notices
