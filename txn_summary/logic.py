import math
from datetime import date, datetime, time

from .models import TransactionType


def validate_type(value) -> TransactionType:
    if isinstance(value, TransactionType):
        return value
    if not isinstance(value, str) or value not in {"income", "expense"}:
        raise ValueError("type must be income or expense")
    return TransactionType(value)


def validate_number(value, field: str) -> int | float:
    # bool is an int subclass but never a valid amount or id
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field} must be a number")
    try:
        finite = math.isfinite(value)
    except OverflowError as e:
        raise ValueError(f"{field} out of range") from e
    if not finite:
        raise ValueError(f"{field} must be finite")
    return value


def validate_amount(value) -> int | float:
    amount = validate_number(value, "amount")
    if amount < 0:
        raise ValueError("amount must be non-negative")
    return amount


def parse_date(value) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str) or not value.strip():
        raise ValueError("date required")
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise ValueError(f"date invalid: {value!r}") from e


def validate_category(value) -> str:
    if not isinstance(value, str):
        raise ValueError("category must be a string")
    if not value.strip():
        raise ValueError("category required")
    return value
