from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Transaction:
    id: int | float
    amount: int | float
    date: datetime
    category: str
    type: TransactionType

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "amount": self.amount,
            "date": self.date.isoformat(),
            "category": self.category,
            "type": self.type.value,
        }
