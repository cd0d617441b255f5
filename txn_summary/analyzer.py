from collections import defaultdict
from collections.abc import Iterable

from .logic import validate_type
from .models import Transaction, TransactionType


class FinancialAnalyzer:
    """Read-only aggregation queries over a validated transaction set."""

    def __init__(self, transactions: Iterable[Transaction]):
        self.transactions: tuple[Transaction, ...] = tuple(transactions)
        self.income: tuple[Transaction, ...] = tuple(
            t for t in self.transactions if t.type is TransactionType.INCOME
        )
        self.expense: tuple[Transaction, ...] = tuple(
            t for t in self.transactions if t.type is TransactionType.EXPENSE
        )

    def _subset(self, txn_type: TransactionType | str) -> tuple[Transaction, ...]:
        if validate_type(txn_type) is TransactionType.INCOME:
            return self.income
        return self.expense

    def total_income(self) -> int | float:
        return sum(t.amount for t in self.income)

    def total_expense(self) -> int | float:
        return sum(t.amount for t in self.expense)

    def total_balance(self) -> int | float:
        return self.total_income() - self.total_expense()

    def category_breakdown(
        self, txn_type: TransactionType | str
    ) -> dict[str, int | float]:
        totals: dict[str, int | float] = defaultdict(int)
        for txn in self._subset(txn_type):
            totals[txn.category] += txn.amount
        return dict(totals)

    def most_expensive_transaction(self) -> Transaction | None:
        # strict comparison keeps the first of equal amounts
        best = None
        for txn in self.expense:
            if best is None or txn.amount > best.amount:
                best = txn
        return best

    def summary(self) -> dict:
        most_expensive = self.most_expensive_transaction()
        return {
            "count": len(self.transactions),
            "balance": self.total_balance(),
            "total_income": self.total_income(),
            "total_expense": self.total_expense(),
            "income_by_category": self.category_breakdown(TransactionType.INCOME),
            "expense_by_category": self.category_breakdown(TransactionType.EXPENSE),
            "most_expensive": most_expensive.to_dict() if most_expensive else None,
        }
