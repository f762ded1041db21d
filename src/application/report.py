from __future__ import annotations

import logging
import time
from calendar import monthrange
from datetime import date

from application.aggregator import StatsAggregator
from application.insights import InsightGenerator
from domain.demo import DEMO_INSIGHTS, DEMO_STATS
from domain.schemas import DateRange, MonthlyStatsPayload, ReportResponse
from infrastructure.identity import IdentityResolver
from infrastructure.ledger_providers.json_provider import JsonLedgerProvider
from infrastructure.ledger_providers.provider import LedgerProvider
from infrastructure.llm.llm_client import LLMClient
from llm.insight_llm import InsightLLM

logger = logging.getLogger(__name__)


def month_date_range(day: date) -> DateRange:
    start = date(day.year, day.month, 1)
    end = date(day.year, day.month, monthrange(day.year, day.month)[1])
    return DateRange(start=start, end=end)


class ReportService:
    """Runs identity -> ledger query -> aggregation -> insights for one month."""

    def __init__(
        self,
        provider: LedgerProvider | None = None,
        llm_client: LLMClient | None = None,
        aggregator: StatsAggregator | None = None,
        identity: IdentityResolver | None = None,
        insight_generator: InsightGenerator | None = None,
    ):
        self._provider = provider or JsonLedgerProvider()
        self._llm_client = llm_client or LLMClient()
        self._aggregator = aggregator or StatsAggregator()
        self._identity = identity or IdentityResolver()
        self._insights = insight_generator or InsightGenerator(InsightLLM(self._llm_client))

    def build(self, user_id: str | None, day: date | None = None) -> ReportResponse:
        # UnauthorizedError propagates; nothing below runs without an identity.
        user = self._identity.resolve(user_id)
        day = day or date.today()
        month_label = day.strftime("%B %Y")
        logger.info("ReportService build start user_id=%s month=%s", user, month_label)
        t0 = time.perf_counter()

        try:
            transactions = self._provider.fetch_transactions(user, month_date_range(day))
            stats = self._aggregator.aggregate(transactions)
        except Exception:
            logger.exception("ReportService could not compute stats user_id=%s; serving demo report", user)
            return ReportResponse(
                user_id=user,
                month=month_label,
                demo=True,
                stats=MonthlyStatsPayload.from_stats(DEMO_STATS),
                insights=list(DEMO_INSIGHTS),
            )

        remote_available = self._insights.remote_configured
        insights = self._insights.generate(stats, remote_available=remote_available, today=day)
        logger.info(
            "ReportService build complete in %.2fs transactions=%d remote=%s insights=%d",
            time.perf_counter() - t0,
            stats.transaction_count,
            remote_available,
            len(insights),
        )
        return ReportResponse(
            user_id=user,
            month=month_label,
            stats=MonthlyStatsPayload.from_stats(stats),
            insights=insights,
        )
