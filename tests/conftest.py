"""Pytest fixtures for testing"""

import itertools
import pytest
from dataclasses import replace
from typing import Dict, Generator, List
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from payment_eligibility.api.main import create_app
from payment_eligibility.infrastructure.database.models import Base
from payment_eligibility.infrastructure.database.session import get_db
from payment_eligibility.domain.models import (
    Invoice,
    InvoiceStatus,
    InstallmentSchedule,
    InstallmentStatus,
)


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class InMemoryLedgerStore:
    """Ledger store double that keeps insertion order and counts reads"""

    def __init__(self):
        self._ids = itertools.count(1)
        self.invoices: List[Invoice] = []
        self.installments: Dict[str, List[InstallmentSchedule]] = {}
        self.invoice_reads = 0
        self.installment_reads: List[str] = []
        self.error: Exception | None = None

    def add_invoice(
        self,
        client_id: str = "client_1",
        invoice_number: str | None = None,
        status: str = "unpaid",
        total_cents: int = 100_000,
        paid_cents: int = 0,
        is_installment: bool = False,
    ) -> Invoice:
        invoice_id = str(next(self._ids))
        invoice = Invoice(
            id=invoice_id,
            client_id=client_id,
            invoice_number=invoice_number or f"INV-{invoice_id}",
            status=InvoiceStatus.parse(status),
            total_cents=total_cents,
            paid_cents=paid_cents,
            remaining_cents=total_cents - paid_cents,
            is_installment=is_installment,
            raw_status=status,
        )
        self.invoices.append(invoice)
        return invoice

    def add_installment(
        self,
        invoice: Invoice,
        installment_number: int,
        status: str = "unpaid",
        amount_cents: int = 25_000,
    ) -> InstallmentSchedule:
        installment = InstallmentSchedule(
            id=str(next(self._ids)),
            invoice_id=invoice.id,
            installment_number=installment_number,
            amount_cents=amount_cents,
            status=InstallmentStatus.parse(status),
        )
        self.installments.setdefault(invoice.id, []).append(installment)
        return installment

    def set_invoice_status(self, invoice: Invoice, status: str) -> None:
        """Simulate the billing subsystem updating an invoice"""
        self.invoices = [
            replace(inv, status=InvoiceStatus.parse(status), raw_status=status) if inv.id == invoice.id else inv
            for inv in self.invoices
        ]

    def find_invoices_by_client(self, client_id: str) -> List[Invoice]:
        self.invoice_reads += 1
        if self.error is not None:
            raise self.error
        return [inv for inv in self.invoices if inv.client_id == client_id]

    def find_installments_by_invoice(self, invoice_id: str) -> List[InstallmentSchedule]:
        self.installment_reads.append(invoice_id)
        if self.error is not None:
            raise self.error
        return sorted(self.installments.get(invoice_id, []), key=lambda inst: inst.installment_number)


@pytest.fixture
def ledger() -> InMemoryLedgerStore:
    """Empty in-memory ledger store"""
    return InMemoryLedgerStore()


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)
