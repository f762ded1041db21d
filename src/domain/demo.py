from __future__ import annotations

from decimal import Decimal

from domain.models import MonthlyStats

# Shown when the user's ledger cannot be read, so the report never renders empty.
DEMO_STATS = MonthlyStats(
    total_income=Decimal("25000"),
    total_expenses=Decimal("18500"),
    by_category={
        "housing": Decimal("6500"),
        "groceries": Decimal("3200"),
        "transportation": Decimal("2000"),
        "entertainment": Decimal("1800"),
        "utilities": Decimal("3000"),
        "dining": Decimal("2000"),
    },
    transaction_count=15,
)

DEMO_INSIGHTS = (
    "Your housing expenses are 35% of your total spending - aim to keep housing costs under 30% of your income.",
    "Consider setting up automatic transfers to a savings account for better financial management.",
    "Your entertainment spending is well-balanced relative to your overall budget.",
    "Track your recurring subscriptions - you may find services you no longer use.",
    "Setting aside 10-15% of your income for long-term savings will help build financial security.",
)
