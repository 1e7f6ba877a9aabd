"""Payment summary aggregation for reporting and dashboards"""

import logging
from typing import Iterable, NoReturn

from payment_eligibility.domain.eligibility import EligibilityEvaluator
from payment_eligibility.domain.exceptions import SummaryError
from payment_eligibility.domain.ledger import LedgerSnapshot, LedgerStore
from payment_eligibility.domain.models import EligibilityResult, Invoice, InvoiceStatus, PaymentSummary

logger = logging.getLogger(__name__)

_STATUS_COUNTERS = {
    InvoiceStatus.PAID: "fully_paid_invoices",
    InvoiceStatus.PARTIALLY_PAID: "partially_paid_invoices",
    InvoiceStatus.UNPAID: "unpaid_invoices",
    InvoiceStatus.OVERDUE: "overdue_invoices",
}


def aggregate_invoices(invoices: Iterable[Invoice]) -> PaymentSummary:
    """
    Reduce invoices into count/amount statistics.

    Each invoice bumps at most one status counter; UNKNOWN statuses bump none,
    so the four counters can sum to less than total_invoices.
    """
    summary = PaymentSummary()

    for invoice in invoices:
        summary.total_invoices += 1
        summary.total_amount_cents += invoice.total_cents
        summary.total_paid_cents += invoice.paid_cents
        summary.total_remaining_cents += invoice.remaining_cents

        counter = _STATUS_COUNTERS.get(invoice.status)
        if counter is not None:
            setattr(summary, counter, getattr(summary, counter) + 1)

        if invoice.is_installment:
            summary.installment_invoices += 1

    return summary


def attach_verdict(summary: PaymentSummary, verdict: EligibilityResult) -> PaymentSummary:
    summary.can_create_case = verdict.is_valid
    summary.reason = verdict.message
    return summary


class PaymentSummaryAggregator:
    """
    Builds a client's PaymentSummary and embeds the eligibility verdict.

    summarize() reads invoices once for the totals and the evaluator reads
    them again for the verdict. Under concurrent ledger writes the totals and
    can_create_case may describe two different states; summarize_snapshot()
    computes both from a single read.
    """

    def __init__(self, store: LedgerStore, evaluator: EligibilityEvaluator | None = None):
        self.store = store
        self.evaluator = evaluator or EligibilityEvaluator(store)

    def summarize(self, client_id: str) -> PaymentSummary:
        """
        Raises:
            SummaryError: If the ledger store read or the eligibility check fails
        """
        try:
            summary = aggregate_invoices(self.store.find_invoices_by_client(client_id))
            verdict = self.evaluator.evaluate(client_id)
        except Exception as e:
            self._fail(client_id, e)

        return attach_verdict(summary, verdict)

    def summarize_snapshot(self, snapshot: LedgerSnapshot) -> PaymentSummary:
        """Totals and verdict computed from the same ledger state"""
        try:
            summary = aggregate_invoices(snapshot.invoices)
            verdict = self.evaluator.evaluate_snapshot(snapshot)
        except Exception as e:
            self._fail(snapshot.client_id, e)

        return attach_verdict(summary, verdict)

    def _fail(self, client_id: str, error: Exception) -> NoReturn:
        logger.error(f"Error getting client payment summary: {error}", extra={"client_id": client_id})
        raise SummaryError(str(error)) from error
