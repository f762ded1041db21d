from __future__ import annotations

import unittest
from datetime import date
from decimal import Decimal

from application.aggregator import StatsAggregator
from domain.errors import ValidationError
from domain.models import Transaction, TransactionType


def _expense(amount: str, category: str | None) -> Transaction:
    return Transaction(amount=Decimal(amount), txn_type=TransactionType.EXPENSE, category=category, posted_on=date(2026, 1, 5))


def _income(amount: str) -> Transaction:
    return Transaction(amount=Decimal(amount), txn_type=TransactionType.INCOME, category="salary", posted_on=date(2026, 1, 1))


class StatsAggregatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.aggregator = StatsAggregator()

    def test_empty_input_yields_zero_stats(self) -> None:
        stats = self.aggregator.aggregate([])

        self.assertEqual(stats.total_expenses, Decimal("0"))
        self.assertEqual(stats.total_income, Decimal("0"))
        self.assertEqual(dict(stats.by_category), {})
        self.assertEqual(stats.transaction_count, 0)

    def test_totals_and_category_breakdown(self) -> None:
        txns = [
            _income("2500.00"),
            _expense("52.10", "groceries"),
            _expense("1800.00", "housing"),
            _expense("48.25", "groceries"),
            _income("100.00"),
        ]
        stats = self.aggregator.aggregate(txns)

        self.assertEqual(stats.total_income, Decimal("2600.00"))
        self.assertEqual(stats.total_expenses, Decimal("1900.35"))
        self.assertEqual(stats.by_category["groceries"], Decimal("100.35"))
        self.assertEqual(stats.by_category["housing"], Decimal("1800.00"))
        self.assertEqual(list(stats.by_category), ["groceries", "housing"])
        self.assertEqual(stats.transaction_count, 5)
        self.assertEqual(stats.net, Decimal("699.65"))

    def test_category_sum_matches_total_expenses_exactly(self) -> None:
        txns = [_expense("0.10", f"c{i % 3}") for i in range(1000)]
        stats = self.aggregator.aggregate(txns)

        self.assertEqual(sum(stats.by_category.values(), Decimal("0")), stats.total_expenses)
        self.assertEqual(stats.total_expenses, Decimal("100.00"))

    def test_income_only_has_no_categories(self) -> None:
        stats = self.aggregator.aggregate([_income("10"), _income("20")])

        self.assertEqual(dict(stats.by_category), {})
        self.assertEqual(stats.total_expenses, Decimal("0"))
        self.assertEqual(stats.total_income, Decimal("30"))
        self.assertEqual(stats.transaction_count, 2)

    def test_float_amounts_are_converted_through_str(self) -> None:
        txns = [
            Transaction(amount=0.1, txn_type=TransactionType.EXPENSE, category="misc"),
            Transaction(amount=0.2, txn_type=TransactionType.EXPENSE, category="misc"),
        ]
        stats = self.aggregator.aggregate(txns)

        self.assertEqual(stats.total_expenses, Decimal("0.3"))

    def test_expense_without_category_raises(self) -> None:
        for category in (None, "", "   "):
            with self.subTest(category=category):
                with self.assertRaises(ValidationError):
                    self.aggregator.aggregate([_income("10"), _expense("5", category)])

    def test_income_without_category_is_allowed(self) -> None:
        txn = Transaction(amount=Decimal("10"), txn_type=TransactionType.INCOME)
        stats = self.aggregator.aggregate([txn])

        self.assertEqual(stats.total_income, Decimal("10"))

    def test_negative_amount_raises(self) -> None:
        with self.assertRaises(ValidationError):
            self.aggregator.aggregate([_expense("-5", "dining")])

    def test_unknown_type_and_bad_amount_raise(self) -> None:
        with self.assertRaises(ValidationError):
            self.aggregator.aggregate([Transaction(amount=Decimal("1"), txn_type="TRANSFER", category="x")])
        with self.assertRaises(ValidationError):
            self.aggregator.aggregate([Transaction(amount="abc", txn_type=TransactionType.EXPENSE, category="x")])
        with self.assertRaises(ValidationError):
            self.aggregator.aggregate([Transaction(amount=Decimal("NaN"), txn_type=TransactionType.EXPENSE, category="x")])

    def test_string_type_values_are_accepted(self) -> None:
        stats = self.aggregator.aggregate([Transaction(amount=Decimal("4"), txn_type="EXPENSE", category="dining")])

        self.assertEqual(stats.by_category["dining"], Decimal("4"))

    def test_stats_are_read_only(self) -> None:
        stats = self.aggregator.aggregate([_expense("5", "dining")])

        with self.assertRaises(TypeError):
            stats.by_category["dining"] = Decimal("0")  # type: ignore[index]
        with self.assertRaises(AttributeError):
            stats.total_income = Decimal("1")  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
