"""Read-only ledger store backed by the invoice tables"""

from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from payment_eligibility.infrastructure.database.models import InvoiceRecord, InstallmentScheduleRecord
from payment_eligibility.domain.models import Invoice, InvoiceStatus, InstallmentSchedule, InstallmentStatus
from payment_eligibility.domain.exceptions import LedgerStoreError


def to_invoice(row: InvoiceRecord) -> Invoice:
    return Invoice(
        id=str(row.id),
        client_id=row.client_id,
        invoice_number=row.invoice_number,
        status=InvoiceStatus.parse(row.status),
        total_cents=row.total_cents,
        paid_cents=row.paid_cents,
        remaining_cents=row.remaining_cents,
        is_installment=row.is_installment,
        raw_status=row.status,
    )


def to_installment(row: InstallmentScheduleRecord) -> InstallmentSchedule:
    return InstallmentSchedule(
        id=str(row.id),
        invoice_id=str(row.invoice_id),
        installment_number=row.installment_number,
        amount_cents=row.amount_cents,
        status=InstallmentStatus.parse(row.status),
    )


class SqlLedgerStore:
    """Ledger store over a SQLAlchemy session. Never writes."""

    def __init__(self, db: Session):
        self.db = db

    def find_invoices_by_client(self, client_id: str) -> List[Invoice]:
        """All invoices of a client in insertion order"""
        try:
            rows = (
                self.db.query(InvoiceRecord)
                .filter(InvoiceRecord.client_id == client_id)
                .order_by(InvoiceRecord.id.asc())
                .all()
            )
        except SQLAlchemyError as e:
            raise LedgerStoreError(f"Invoice query failed: {e}") from e
        return [to_invoice(row) for row in rows]

    def find_installments_by_invoice(self, invoice_id: str) -> List[InstallmentSchedule]:
        """Installment schedule of an invoice, ascending installment_number"""
        try:
            key = int(invoice_id)
        except ValueError as e:
            raise LedgerStoreError(f"Invalid invoice id: {invoice_id!r}") from e

        try:
            rows = (
                self.db.query(InstallmentScheduleRecord)
                .filter(InstallmentScheduleRecord.invoice_id == key)
                .order_by(InstallmentScheduleRecord.installment_number.asc())
                .all()
            )
        except SQLAlchemyError as e:
            raise LedgerStoreError(f"Installment query failed: {e}") from e
        return [to_installment(row) for row in rows]
