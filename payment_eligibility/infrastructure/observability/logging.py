"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger.json import JsonFormatter

from payment_eligibility.config import settings
from payment_eligibility.domain.models import EligibilityResult


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_evaluation(request_id: str, client_id: str, result: EligibilityResult) -> None:
    """Log structured eligibility outcome for audit"""
    details = result.details or {}
    logging.getLogger("payment_eligibility.audit").info(
        "Eligibility evaluated",
        extra={
            "request_id": request_id,
            "client_id": client_id,
            "step": "eligibility_complete",
            "eligibility_outcome": "eligible" if result.is_valid else "not_eligible",
            "payment_type": details.get("payment_type"),
            "invoice_number": details.get("invoice_number"),
        },
    )
