"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from payment_eligibility.domain.eligibility import EligibilityEvaluator
from payment_eligibility.domain.summary import PaymentSummaryAggregator
from payment_eligibility.infrastructure.database.repositories import SqlLedgerStore
from payment_eligibility.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_ledger_store(db: Session = Depends(get_db)) -> SqlLedgerStore:
    """Provide read-only ledger store bound to the request's session"""
    return SqlLedgerStore(db)


def get_evaluator(store: SqlLedgerStore = Depends(get_ledger_store)) -> EligibilityEvaluator:
    return EligibilityEvaluator(store)


def get_aggregator(store: SqlLedgerStore = Depends(get_ledger_store)) -> PaymentSummaryAggregator:
    return PaymentSummaryAggregator(store)
