"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class InvoiceStatus(str, Enum):
    """Settlement state of an invoice; UNKNOWN covers values this engine does not know"""

    PAID = "paid"
    PARTIALLY_PAID = "partially_paid"
    UNPAID = "unpaid"
    OVERDUE = "overdue"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: str | None) -> "InvoiceStatus":
        try:
            return cls(raw)
        except ValueError:
            return cls.UNKNOWN


class InstallmentStatus(str, Enum):
    """Only PAID is significant for eligibility"""

    PAID = "paid"
    UNPAID = "unpaid"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: str | None) -> "InstallmentStatus":
        try:
            return cls(raw)
        except ValueError:
            return cls.UNKNOWN


class PaymentType(str, Enum):
    """How an invoice proved the client eligible"""

    FULL = "full"
    INSTALLMENT = "installment"


@dataclass(frozen=True)
class Invoice:
    """Invoice as read from the ledger store"""

    id: str
    client_id: str
    invoice_number: str
    status: InvoiceStatus
    total_cents: int
    paid_cents: int
    remaining_cents: int
    is_installment: bool
    raw_status: str = ""  # stored value, kept for diagnostics when status is UNKNOWN

    @property
    def status_label(self) -> str:
        return self.raw_status or self.status.value


@dataclass(frozen=True)
class InstallmentSchedule:
    """Single entry of an invoice's installment schedule"""

    id: str
    invoice_id: str
    installment_number: int
    amount_cents: int
    status: InstallmentStatus


@dataclass(frozen=True)
class EligibilityResult:
    """Point-in-time eligibility verdict; not a lock on ledger state"""

    is_valid: bool
    message: str
    details: Optional[Dict[str, Any]] = None


@dataclass
class PaymentSummary:
    """Aggregate counts and totals over a client's invoices"""

    total_invoices: int = 0
    total_amount_cents: int = 0
    total_paid_cents: int = 0
    total_remaining_cents: int = 0
    fully_paid_invoices: int = 0
    partially_paid_invoices: int = 0
    unpaid_invoices: int = 0
    overdue_invoices: int = 0
    installment_invoices: int = 0
    can_create_case: bool = False
    reason: str = ""
