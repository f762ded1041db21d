from __future__ import annotations

import json
import logging
import os
import re
from calendar import month_name
from datetime import date
from decimal import Decimal
from typing import Protocol

from domain.errors import RemoteGenerationError
from domain.models import MonthlyStats

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?\n?", re.IGNORECASE)


class TextGenerator(Protocol):
    def complete(self, prompt: str) -> str: ...


def _money(amount: Decimal) -> str:
    # Whole amounts print without a trailing ".00".
    if amount == amount.to_integral_value():
        return str(amount.quantize(Decimal("1")))
    return f"{amount.normalize():f}"


class InsightLLM:
    """Builds the insight prompt for an external text generator and parses its JSON list reply."""

    def __init__(self, llm_client: TextGenerator, currency_symbol: str | None = None):
        self._llm = llm_client
        self._currency = currency_symbol if currency_symbol is not None else os.getenv("REPORT_CURRENCY_SYMBOL", "₹")

    @property
    def is_configured(self) -> bool:
        # Clients without a credential gate (stubs, local servers) are always usable.
        return bool(getattr(self._llm, "is_configured", True))

    def build_prompt(self, stats: MonthlyStats, today: date | None = None) -> str:
        month = month_name[(today or date.today()).month]
        categories = ", ".join(
            f"{category}: {self._currency}{_money(amount)}" for category, amount in stats.by_category.items()
        )
        return (
            "Analyze this financial data and provide 5 concise, actionable insights.\n"
            "Focus on spending patterns and practical advice.\n"
            "Keep it friendly and conversational.\n"
            "\n"
            f"Financial Data for {month}:\n"
            f"- Total Income: {self._currency}{_money(stats.total_income)}\n"
            f"- Total Expenses: {self._currency}{_money(stats.total_expenses)}\n"
            f"- Net Income: {self._currency}{_money(stats.net)}\n"
            f"- Expense Categories: {categories}\n"
            "\n"
            "Format the response as a JSON array of strings, like this:\n"
            '["insight 1", "insight 2", "insight 3", "insight 4", "insight 5"]\n'
        )

    def parse(self, raw: str) -> list[str]:
        cleaned = _FENCE_RE.sub("", raw or "").strip()
        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise RemoteGenerationError(f"Insight response is not valid JSON: {exc}") from exc

        if not isinstance(parsed, list) or not all(isinstance(item, str) for item in parsed):
            raise RemoteGenerationError("Insight response must be a JSON array of strings")
        if not parsed:
            raise RemoteGenerationError("Insight response is an empty array")
        return parsed

    def generate(self, stats: MonthlyStats, today: date | None = None) -> list[str]:
        prompt = self.build_prompt(stats, today=today)
        logger.info("InsightLLM generate start categories=%d prompt_chars=%d", len(stats.by_category), len(prompt))
        insights = self.parse(self._llm.complete(prompt))
        logger.info("InsightLLM accepted model JSON response insights=%d", len(insights))
        return insights
