"""Structural validation of decoded transaction data.

``parse`` never raises for bad input: it returns ``Ok`` with the validated
records or ``Err`` with a ``ValidationError`` describing the first problem.
"""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .errors import InvalidElementError, NotAnArrayError, ValidationError
from .log import get_logger
from .logic import (
    parse_date,
    validate_amount,
    validate_category,
    validate_number,
    validate_type,
)
from .models import Transaction

logger = get_logger(__name__)

T = TypeVar("T")

REQUIRED_FIELDS = ("id", "amount", "date", "category", "type")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: ValidationError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


def to_transaction(value: Any) -> Transaction:
    if not isinstance(value, Mapping):
        raise ValueError(f"expected an object, got {type(value).__name__}")
    missing = [name for name in REQUIRED_FIELDS if name not in value]
    if missing:
        raise ValueError(f"missing field(s): {', '.join(missing)}")
    return Transaction(
        id=validate_number(value["id"], "id"),
        amount=validate_amount(value["amount"]),
        date=parse_date(value["date"]),
        category=validate_category(value["category"]),
        type=validate_type(value["type"]),
    )


def is_transaction(value: Any) -> bool:
    try:
        to_transaction(value)
    except ValueError:
        return False
    return True


def parse(value: Any) -> Ok[tuple[Transaction, ...]] | Err:
    if not isinstance(value, (list, tuple)):
        logger.info("rejected input: not an array (%s)", type(value).__name__)
        return Err(NotAnArrayError(value))

    transactions = []
    for index, item in enumerate(value):
        try:
            transactions.append(to_transaction(item))
        except ValueError as exc:
            logger.info("rejected transaction at index %d: %s", index, exc)
            return Err(InvalidElementError(index, str(exc)))

    logger.debug("parsed %d transactions", len(transactions))
    return Ok(tuple(transactions))
