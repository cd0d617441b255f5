"""Error types for transaction parsing and loading."""
from typing import Any


class TxnSummaryError(ValueError):
    """Base exception for all txn_summary errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(TxnSummaryError):
    """Raised (or returned inside ``Err``) when input data is rejected."""


class NotAnArrayError(ValidationError):
    def __init__(self, got: Any):
        name = type(got).__name__
        super().__init__(
            f"expected a list of transactions, got {name}", details={"got": name}
        )


class InvalidElementError(ValidationError):
    def __init__(self, index: int, reason: str):
        super().__init__(
            f"invalid transaction at index {index}: {reason}",
            details={"index": index, "reason": reason},
        )
        self.index = index
        self.reason = reason


class DataFileError(TxnSummaryError):
    """Raised when the transactions file cannot be read or decoded."""
