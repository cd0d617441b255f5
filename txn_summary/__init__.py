from .analyzer import FinancialAnalyzer
from .errors import (
    DataFileError,
    InvalidElementError,
    NotAnArrayError,
    TxnSummaryError,
    ValidationError,
)
from .models import Transaction, TransactionType
from .parser import Err, Ok, is_transaction, parse

__version__ = "0.1.0"

__all__ = [
    "DataFileError",
    "Err",
    "FinancialAnalyzer",
    "InvalidElementError",
    "NotAnArrayError",
    "Ok",
    "Transaction",
    "TransactionType",
    "TxnSummaryError",
    "ValidationError",
    "is_transaction",
    "parse",
]
