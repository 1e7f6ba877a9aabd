"""Pydantic schemas for API responses"""

from pydantic import BaseModel
from typing import Any, Dict, Optional


class EligibilityResponse(BaseModel):
    """Response for GET /v1/clients/{client_id}/eligibility"""

    client_id: str
    is_valid: bool
    message: str
    details: Optional[Dict[str, Any]] = None


class PaymentSummaryResponse(BaseModel):
    """Response for GET /v1/clients/{client_id}/payment-summary"""

    client_id: str
    total_invoices: int
    total_amount_cents: int
    total_paid_cents: int
    total_remaining_cents: int
    fully_paid_invoices: int
    partially_paid_invoices: int
    unpaid_invoices: int
    overdue_invoices: int
    installment_invoices: int
    can_create_case: bool
    reason: str
