"""Payment eligibility gate consulted before a case is opened for a client"""

import logging
from typing import List, Optional, Sequence

from payment_eligibility.domain.exceptions import ValidationError
from payment_eligibility.domain.ledger import LedgerSnapshot, LedgerStore
from payment_eligibility.domain.models import (
    EligibilityResult,
    InstallmentSchedule,
    InstallmentStatus,
    Invoice,
    InvoiceStatus,
    PaymentType,
)

logger = logging.getLogger(__name__)

NO_INVOICE_MESSAGE = "No invoice found for this client. Please create an invoice first."
NOT_ELIGIBLE_MESSAGE = (
    "Client must either pay the invoice in full or pay the first installment before case registration."
)


def first_installment(installments: Sequence[InstallmentSchedule]) -> Optional[InstallmentSchedule]:
    """Head of the schedule, only if it is installment #1"""
    if not installments:
        return None
    head = min(installments, key=lambda inst: inst.installment_number)
    return head if head.installment_number == 1 else None


def full_payment_result(invoice: Invoice) -> EligibilityResult:
    return EligibilityResult(
        is_valid=True,
        message=f"Invoice {invoice.invoice_number} is fully paid",
        details={
            "invoice_id": invoice.id,
            "invoice_number": invoice.invoice_number,
            "payment_type": PaymentType.FULL.value,
            "total_cents": invoice.total_cents,
            "paid_cents": invoice.paid_cents,
        },
    )


def installment_result(invoice: Invoice, installment: InstallmentSchedule) -> EligibilityResult:
    return EligibilityResult(
        is_valid=True,
        message=f"First installment of invoice {invoice.invoice_number} is paid",
        details={
            "invoice_id": invoice.id,
            "invoice_number": invoice.invoice_number,
            "payment_type": PaymentType.INSTALLMENT.value,
            "installment_number": installment.installment_number,
            "installment_amount_cents": installment.amount_cents,
            "total_cents": invoice.total_cents,
            "paid_cents": invoice.paid_cents,
            "remaining_cents": invoice.remaining_cents,
        },
    )


def not_eligible_result(invoices: List[Invoice]) -> EligibilityResult:
    """Negative verdict with a per-invoice projection so staff can see why"""
    return EligibilityResult(
        is_valid=False,
        message=NOT_ELIGIBLE_MESSAGE,
        details={
            "total_invoices": len(invoices),
            "invoices": [
                {
                    "invoice_number": inv.invoice_number,
                    "status": inv.status_label,
                    "total_cents": inv.total_cents,
                    "paid_cents": inv.paid_cents,
                    "is_installment": inv.is_installment,
                }
                for inv in invoices
            ],
        },
    )


def decide_eligibility(store: LedgerStore, client_id: str) -> EligibilityResult:
    """
    Decide whether a client may have a new case opened.

    Rules, per invoice in store order:
    1. status == paid -> eligible (full payment)
    2. installment invoice whose installment #1 is paid -> eligible (installment)

    The first qualifying invoice wins; later invoices are not examined and
    installment schedules are only read for invoices reached by the loop.
    """
    invoices = list(store.find_invoices_by_client(client_id))

    if not invoices:
        return EligibilityResult(is_valid=False, message=NO_INVOICE_MESSAGE, details=None)

    for invoice in invoices:
        if invoice.status is InvoiceStatus.PAID:
            return full_payment_result(invoice)

        if invoice.is_installment:
            head = first_installment(store.find_installments_by_invoice(invoice.id))
            if head is not None and head.status is InstallmentStatus.PAID:
                return installment_result(invoice, head)

    return not_eligible_result(invoices)


class EligibilityEvaluator:
    """
    Read-and-decide gate over the ledger store. Holds no state between calls.

    The verdict is a snapshot of ledger state at call time. A payment reversal
    recorded after evaluate() returns is not reflected; callers that write a
    case based on the verdict should re-validate inside their own transaction
    (see evaluate_snapshot).
    """

    def __init__(self, store: LedgerStore):
        self.store = store

    def evaluate(self, client_id: str) -> EligibilityResult:
        """
        Raises:
            ValidationError: If the ledger store read fails
        """
        return self._evaluate(self.store, client_id)

    def evaluate_snapshot(self, snapshot: LedgerSnapshot) -> EligibilityResult:
        """Evaluate against caller-supplied, already-fetched ledger state"""
        return self._evaluate(snapshot, snapshot.client_id)

    def _evaluate(self, store: LedgerStore, client_id: str) -> EligibilityResult:
        try:
            return decide_eligibility(store, client_id)
        except Exception as e:
            logger.error(f"Error validating client payment status: {e}", extra={"client_id": client_id})
            raise ValidationError(str(e)) from e
