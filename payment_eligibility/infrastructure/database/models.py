"""SQLAlchemy ORM models for the ledger tables this service reads"""

from sqlalchemy import Column, String, BigInteger, Boolean, DateTime, Date, Integer, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class InvoiceRecord(Base):
    """Client invoice, written by the billing subsystem"""

    __tablename__ = "invoice"

    # Autoincrement key doubles as insertion order
    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Text, nullable=False, index=True)
    invoice_number = Column(String(64), nullable=False)
    status = Column(Text, nullable=False, default="unpaid")
    total_cents = Column(BigInteger, nullable=False, default=0)
    paid_cents = Column(BigInteger, nullable=False, default=0)
    remaining_cents = Column(BigInteger, nullable=False, default=0)
    is_installment = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    installments = relationship(
        "InstallmentScheduleRecord",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="InstallmentScheduleRecord.installment_number",
    )


class InstallmentScheduleRecord(Base):
    """Single installment within an invoice's payment schedule"""

    __tablename__ = "installment_schedule"
    __table_args__ = (UniqueConstraint("invoice_id", "installment_number", name="uq_installment_number"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    invoice_id = Column(Integer, ForeignKey("invoice.id", ondelete="CASCADE"), nullable=False, index=True)
    installment_number = Column(Integer, nullable=False)
    amount_cents = Column(BigInteger, nullable=False)
    due_date = Column(Date, nullable=True)
    status = Column(Text, nullable=False, default="unpaid")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    invoice = relationship("InvoiceRecord", back_populates="installments")
