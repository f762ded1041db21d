from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from domain.errors import LedgerProviderError
from domain.models import Transaction, TransactionType
from domain.schemas import DateRange, LedgerRow
from infrastructure.ledger_providers.provider import LedgerProvider

logger = logging.getLogger(__name__)


class JsonLedgerProvider(LedgerProvider):
    """
    Reads transactions from a JSON file holding a list of rows:

        {"id": "t1", "user_id": "u_123", "date": "2026-01-03", "amount": "42.10",
         "type": "EXPENSE", "category": "groceries", "description": "..."}

    A missing file is an empty ledger.
    """

    name = "json"

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path or os.getenv("LEDGER_PATH", "data/ledger.json"))

    def fetch_transactions(self, user_id: str, date_range: DateRange) -> list[Transaction]:
        logger.info(
            "JsonLedgerProvider loading path=%s user_id=%s start=%s end=%s",
            self._path,
            user_id,
            date_range.start.isoformat(),
            date_range.end.isoformat(),
        )
        rows = self._load_rows(user_id)

        transactions = [
            self._normalize_row(row)
            for row in rows
            if date_range.contains(row.posted_on)
        ]
        logger.info("JsonLedgerProvider matched transactions count=%d of rows=%d", len(transactions), len(rows))
        return transactions

    def _load_rows(self, user_id: str) -> list[LedgerRow]:
        if not self._path.exists():
            logger.warning("JsonLedgerProvider ledger file not found path=%s; treating as empty", self._path)
            return []

        try:
            with self._path.open(encoding="utf-8") as fp:
                payload: Any = json.load(fp)
        except (OSError, json.JSONDecodeError) as exc:
            raise LedgerProviderError(f"Unable to read ledger file {self._path}: {exc}") from exc

        if isinstance(payload, dict):
            payload = payload.get("transactions", [])
        if not isinstance(payload, list):
            raise LedgerProviderError(f"Expected transaction rows list in {self._path}, got {type(payload).__name__}")

        # Other users' rows are skipped without validation.
        owned = [row for row in payload if isinstance(row, dict) and str(row.get("user_id", "")) == user_id]
        try:
            return [LedgerRow.model_validate(row) for row in owned]
        except ValidationError as exc:
            raise LedgerProviderError(f"Ledger row did not match LedgerRow schema: {exc}") from exc

    def _normalize_row(self, row: LedgerRow) -> Transaction:
        return Transaction(
            id=row.id,
            amount=row.amount,
            txn_type=TransactionType(row.type),
            category=row.category,
            posted_on=row.posted_on,
            description=row.description,
        )
