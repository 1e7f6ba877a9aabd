"""GET /v1/clients/{client_id}/eligibility - Case-creation payment gate"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from payment_eligibility.api.v1.schemas import EligibilityResponse
from payment_eligibility.api.dependencies import get_evaluator, get_request_id
from payment_eligibility.domain.eligibility import EligibilityEvaluator
from payment_eligibility.domain.exceptions import ValidationError
from payment_eligibility.infrastructure.observability.metrics import record_evaluation, ledger_read_failures_counter
from payment_eligibility.infrastructure.observability.logging import log_evaluation

router = APIRouter()


@router.get("/clients/{client_id}/eligibility", response_model=EligibilityResponse)
def get_eligibility(
    client_id: str,
    request: Request,
    evaluator: EligibilityEvaluator = Depends(get_evaluator),
):
    """
    Check whether a case may be opened for the client.

    The verdict reflects ledger state at request time only; the case-creation
    write must re-validate inside its own transaction.
    """
    request_id = get_request_id(request)

    try:
        result = evaluator.evaluate(client_id)
    except ValidationError as e:
        ledger_read_failures_counter.labels(operation="evaluate").inc()
        logging.error(f"Eligibility check failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Ledger service unavailable")

    record_evaluation(result)
    log_evaluation(request_id, client_id, result)

    return EligibilityResponse(
        client_id=client_id,
        is_valid=result.is_valid,
        message=result.message,
        details=result.details,
    )
