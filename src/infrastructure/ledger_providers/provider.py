from __future__ import annotations

from abc import ABC, abstractmethod

from domain.models import Transaction
from domain.schemas import DateRange


class LedgerProvider(ABC):
    """Base contract for sources of a user's transactions."""

    name: str = "provider"

    @abstractmethod
    def fetch_transactions(self, user_id: str, date_range: DateRange) -> list[Transaction]:
        """Return the user's transactions posted within the inclusive date range."""
        raise NotImplementedError
