"""GET /v1/clients/{client_id}/payment-summary - Reporting view of a client's invoices"""

import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request

from payment_eligibility.api.v1.schemas import PaymentSummaryResponse
from payment_eligibility.api.dependencies import get_aggregator, get_request_id
from payment_eligibility.domain.summary import PaymentSummaryAggregator
from payment_eligibility.domain.exceptions import SummaryError
from payment_eligibility.infrastructure.observability.metrics import summary_counter, ledger_read_failures_counter

router = APIRouter()


@router.get("/clients/{client_id}/payment-summary", response_model=PaymentSummaryResponse)
def get_payment_summary(
    client_id: str,
    request: Request,
    aggregator: PaymentSummaryAggregator = Depends(get_aggregator),
):
    """Invoice counts and totals plus whether a case may be opened"""
    try:
        summary = aggregator.summarize(client_id)
    except SummaryError as e:
        ledger_read_failures_counter.labels(operation="summarize").inc()
        logging.error(f"Payment summary failed: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=503, detail="Ledger service unavailable")

    summary_counter.inc()
    return PaymentSummaryResponse(client_id=client_id, **asdict(summary))
