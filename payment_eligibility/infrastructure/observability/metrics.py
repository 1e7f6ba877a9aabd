"""Prometheus metrics for monitoring eligibility outcomes and ledger read health"""

from prometheus_client import Counter, Histogram

from payment_eligibility.domain.models import EligibilityResult

# Eligibility metrics
evaluation_counter = Counter(
    "payment_eligibility_evaluations_total",
    "Total eligibility evaluations",
    ["outcome", "payment_type"],  # eligible | not_eligible; full | installment | none
)

summary_counter = Counter(
    "payment_summaries_total",
    "Payment summaries produced",
)

# Ledger store metrics
ledger_read_failures_counter = Counter(
    "ledger_read_failures_total",
    "Failed ledger store reads",
    ["operation"],  # evaluate | summarize
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_evaluation(result: EligibilityResult) -> None:
    """Record eligibility outcome, split by which rule granted it"""
    outcome = "eligible" if result.is_valid else "not_eligible"
    payment_type = (result.details or {}).get("payment_type") if result.is_valid else None
    evaluation_counter.labels(outcome=outcome, payment_type=payment_type or "none").inc()
