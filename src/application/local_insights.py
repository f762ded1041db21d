from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from domain.models import MonthlyStats

HUNDRED = Decimal("100")
LOW_SAVINGS_RATE = Decimal("20")
HOUSING_SHARE_LIMIT = Decimal("30")

SUBSCRIPTIONS_INSIGHT = "Track your recurring subscriptions - you may find services you no longer use that could be canceled."
EMERGENCY_FUND_INSIGHT = "Setting aside money for an emergency fund covering 3-6 months of expenses provides important financial security."


def _pct(value: Decimal) -> str:
    return str(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class LocalInsightStrategy:
    """Deterministic rule list over MonthlyStats; yields 3 to 5 insights, no I/O."""

    def generate(self, stats: MonthlyStats) -> list[str]:
        insights: list[str] = []

        shares: dict[str, Decimal] = {}
        if stats.total_expenses > 0:
            for category, amount in stats.by_category.items():
                shares[category] = amount / stats.total_expenses * HUNDRED

        if stats.total_income > 0:
            savings_rate = (stats.total_income - stats.total_expenses) / stats.total_income * HUNDRED
            if savings_rate < LOW_SAVINGS_RATE:
                insights.append(
                    "Your savings rate is below 20%. Consider exploring ways to increase your income "
                    "or reduce non-essential expenses."
                )
            else:
                insights.append(
                    f"Great job saving {_pct(savings_rate)}% of your income this month! "
                    "Financial experts recommend saving 15-20% of your income."
                )

        housing = shares.get("housing")
        if housing is not None and housing > HOUSING_SHARE_LIMIT:
            insights.append(
                f"Housing expenses are {_pct(housing)}% of your spending. "
                "Financial advisors suggest keeping housing costs under 30% of your budget."
            )

        insights.append(SUBSCRIPTIONS_INSIGHT)

        if shares:
            # max() keeps the first maximal item, so ties go to the earliest category.
            top_category, top_share = max(shares.items(), key=lambda item: item[1])
            insights.append(
                f"Your highest spending category is {top_category} at {_pct(top_share)}% of your expenses. "
                "Consider if there are ways to optimize this area."
            )

        insights.append(EMERGENCY_FUND_INSIGHT)
        return insights
