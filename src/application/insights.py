from __future__ import annotations

import logging
from datetime import date

from application.local_insights import LocalInsightStrategy
from domain.models import MonthlyStats
from infrastructure.llm.llm_client import LLMClient
from llm.insight_llm import InsightLLM

logger = logging.getLogger(__name__)

DEFAULT_INSIGHTS = (
    "Your highest expense category might need attention.",
    "Consider setting up a budget for better financial management.",
    "Track your recurring expenses to identify potential savings.",
    "Save about 20% of your income each month for future goals.",
    "Try to increase your income sources for better financial stability.",
)


class InsightGenerator:
    """
    Picks the insight strategy for one report and degrades instead of failing.

    - remote_available=True: ask the text generator via InsightLLM
    - remote_available=False: evaluate LocalInsightStrategy rules, no network
    - any exception from either path: DEFAULT_INSIGHTS
    """

    def __init__(self, insight_llm: InsightLLM | None = None, local: LocalInsightStrategy | None = None):
        self._insight_llm = insight_llm or InsightLLM(LLMClient())
        self._local = local or LocalInsightStrategy()

    @property
    def remote_configured(self) -> bool:
        return self._insight_llm.is_configured

    def generate(self, stats: MonthlyStats, remote_available: bool, today: date | None = None) -> list[str]:
        strategy = "remote" if remote_available else "local"
        try:
            if remote_available:
                insights = self._insight_llm.generate(stats, today=today)
            else:
                insights = self._local.generate(stats)
        except Exception:
            logger.exception("InsightGenerator %s strategy failed; using default insights", strategy)
            return list(DEFAULT_INSIGHTS)

        logger.info("InsightGenerator strategy=%s insights=%d", strategy, len(insights))
        return insights
