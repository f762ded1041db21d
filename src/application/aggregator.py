from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Sequence

from domain.errors import ValidationError
from domain.models import MonthlyStats, Transaction, TransactionType

logger = logging.getLogger(__name__)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, bool):
        raise ValidationError(f"Transaction amount must be numeric, got {value!r}")
    else:
        try:
            # str() first so floats keep their printed value instead of binary noise.
            amount = Decimal(str(value))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Transaction amount must be numeric, got {value!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"Transaction amount must be finite, got {value!r}")
    return amount


class StatsAggregator:
    """Reduces a period's transactions into income/expense totals and a per-category expense breakdown."""

    def aggregate(self, transactions: Sequence[Transaction]) -> MonthlyStats:
        total_expenses = Decimal("0")
        total_income = Decimal("0")
        by_category: dict[str, Decimal] = {}

        for idx, txn in enumerate(transactions):
            amount = _to_decimal(txn.amount)
            if amount < 0:
                raise ValidationError(f"Transaction {txn.id or idx} has negative amount {amount}; use txn_type for sign")

            try:
                txn_type = TransactionType(txn.txn_type)
            except ValueError as exc:
                raise ValidationError(f"Transaction {txn.id or idx} has unknown type {txn.txn_type!r}") from exc

            if txn_type is TransactionType.EXPENSE:
                category = (txn.category or "").strip()
                if not category:
                    raise ValidationError(f"Expense transaction {txn.id or idx} is missing a category")
                total_expenses += amount
                by_category[category] = by_category.get(category, Decimal("0")) + amount
            else:
                total_income += amount

        stats = MonthlyStats(
            total_expenses=total_expenses,
            total_income=total_income,
            by_category=by_category,
            transaction_count=len(transactions),
        )
        logger.debug(
            "StatsAggregator aggregated transactions=%d income=%s expenses=%s categories=%d",
            stats.transaction_count,
            stats.total_income,
            stats.total_expenses,
            len(by_category),
        )
        return stats
