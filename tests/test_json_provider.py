from __future__ import annotations

import json
import tempfile
import unittest
from datetime import date
from decimal import Decimal
from pathlib import Path

from domain.errors import LedgerProviderError
from domain.models import TransactionType
from domain.schemas import DateRange
from infrastructure.ledger_providers.json_provider import JsonLedgerProvider


class JsonLedgerProviderTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "ledger.json"
        self.january = DateRange(start="2026-01-01", end="2026-01-31")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, payload) -> None:
        self.path.write_text(json.dumps(payload), encoding="utf-8")

    def test_filters_by_user_and_inclusive_date_range(self) -> None:
        self._write(
            [
                {"id": "t1", "user_id": "u_1", "date": "2026-01-01", "amount": "2500.00", "type": "INCOME"},
                {"id": "t2", "user_id": "u_1", "date": "2026-01-31", "amount": "42.10", "type": "expense", "category": "groceries"},
                {"id": "t3", "user_id": "u_1", "date": "2026-02-01", "amount": "10", "type": "EXPENSE", "category": "dining"},
                {"id": "t4", "user_id": "u_2", "date": "2026-01-15", "amount": "99", "type": "EXPENSE", "category": "dining"},
            ]
        )
        txns = JsonLedgerProvider(self.path).fetch_transactions("u_1", self.january)

        self.assertEqual([t.id for t in txns], ["t1", "t2"])
        self.assertEqual(txns[0].txn_type, TransactionType.INCOME)
        self.assertEqual(txns[1].txn_type, TransactionType.EXPENSE)
        self.assertEqual(txns[1].amount, Decimal("42.10"))
        self.assertEqual(txns[1].posted_on, date(2026, 1, 31))
        self.assertEqual(txns[1].category, "groceries")

    def test_accepts_wrapped_transactions_object(self) -> None:
        self._write({"transactions": [{"user_id": "u_1", "date": "2026-01-10", "amount": 5, "type": "INCOME"}]})
        txns = JsonLedgerProvider(self.path).fetch_transactions("u_1", self.january)

        self.assertEqual(len(txns), 1)

    def test_missing_file_is_an_empty_ledger(self) -> None:
        provider = JsonLedgerProvider(Path(self._tmp.name) / "absent.json")

        self.assertEqual(provider.fetch_transactions("u_1", self.january), [])

    def test_invalid_file_raises_provider_error(self) -> None:
        self.path.write_text("{not json", encoding="utf-8")
        with self.assertRaises(LedgerProviderError):
            JsonLedgerProvider(self.path).fetch_transactions("u_1", self.january)

    def test_malformed_rows_of_other_users_are_ignored(self) -> None:
        self._write(
            [
                {"id": "t1", "user_id": "u_1", "date": "2026-01-05", "amount": "12.00", "type": "EXPENSE", "category": "dining"},
                {"id": "t2", "user_id": "u_2", "date": "not-a-date", "amount": "x", "type": "TRANSFER"},
                "garbage",
            ]
        )
        txns = JsonLedgerProvider(self.path).fetch_transactions("u_1", self.january)

        self.assertEqual([t.id for t in txns], ["t1"])

    def test_invalid_rows_raise_provider_error(self) -> None:
        for payload in ('"text"', [{"user_id": "u_1", "date": "2026-01-10", "amount": "x", "type": "INCOME"}],
                        [{"user_id": "u_1", "date": "2026-01-10", "amount": "1", "type": "TRANSFER"}]):
            with self.subTest(payload=payload):
                self._write(payload)
                with self.assertRaises(LedgerProviderError):
                    JsonLedgerProvider(self.path).fetch_transactions("u_1", self.january)


if __name__ == "__main__":
    unittest.main()
