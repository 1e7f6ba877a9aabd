"""Domain-specific exceptions

An empty invoice set, a client with no qualifying invoice and an unknown
invoice status are ordinary outcomes, not exceptions.
"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class LedgerStoreError(DomainException):
    """Ledger store could not be read (connectivity or query failure)"""

    pass


class ValidationError(DomainException):
    """Payment eligibility could not be evaluated"""

    prefix = "Payment validation failed"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"{self.prefix}: {reason}")


class SummaryError(ValidationError):
    """Payment summary could not be produced"""

    prefix = "Failed to get payment summary"
