from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class TransactionType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


@dataclass(frozen=True)
class Transaction:
    amount: Decimal
    txn_type: TransactionType
    category: str | None = None
    posted_on: date | None = None
    id: str | None = None
    description: str = ""


@dataclass(frozen=True)
class MonthlyStats:
    """Totals and per-category expense breakdown for one reporting period."""

    total_expenses: Decimal = Decimal("0")
    total_income: Decimal = Decimal("0")
    by_category: Mapping[str, Decimal] = field(default_factory=dict)
    transaction_count: int = 0

    def __post_init__(self) -> None:
        # Read-only view over a private copy; insertion order is kept.
        object.__setattr__(self, "by_category", MappingProxyType(dict(self.by_category)))

    @property
    def net(self) -> Decimal:
        return self.total_income - self.total_expenses
