"""Read contract for the ledger store that owns invoices and installment schedules.

Ordering contract:
- find_invoices_by_client returns invoices in insertion order
- find_installments_by_invoice returns entries by ascending installment_number

The eligibility short-circuit (first qualifying invoice wins) is only
reproducible when a store honors the invoice ordering.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Protocol, Sequence

from payment_eligibility.domain.models import Invoice, InstallmentSchedule


class LedgerStore(Protocol):
    """Read-only access to a client's invoices and their installment schedules"""

    def find_invoices_by_client(self, client_id: str) -> Sequence[Invoice]: ...

    def find_installments_by_invoice(self, invoice_id: str) -> Sequence[InstallmentSchedule]: ...


@dataclass(frozen=True)
class LedgerSnapshot:
    """
    Already-fetched ledger state for one client.

    Lets a case-creation workflow read, validate and write inside a single
    transaction or lock scope instead of trusting an earlier evaluation.
    Implements LedgerStore so the same evaluation logic runs over it.
    """

    client_id: str
    invoices: List[Invoice]
    installments: Dict[str, List[InstallmentSchedule]] = field(default_factory=dict)

    @classmethod
    def capture(cls, store: LedgerStore, client_id: str) -> "LedgerSnapshot":
        """Read invoices, and schedules of installment invoices, in one pass"""
        invoices = list(store.find_invoices_by_client(client_id))
        installments = {
            invoice.id: list(store.find_installments_by_invoice(invoice.id))
            for invoice in invoices
            if invoice.is_installment
        }
        return cls(client_id=client_id, invoices=invoices, installments=installments)

    def find_invoices_by_client(self, client_id: str) -> List[Invoice]:
        if client_id != self.client_id:
            return []
        return list(self.invoices)

    def find_installments_by_invoice(self, invoice_id: str) -> List[InstallmentSchedule]:
        return list(self.installments.get(invoice_id, []))
