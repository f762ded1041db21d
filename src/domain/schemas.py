from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from domain.models import MonthlyStats


class DateRange(BaseModel):
    start: date = Field(description="Start date in YYYY-MM-DD format, e.g. 2026-01-01.")
    end: date = Field(description="End date in YYYY-MM-DD format, e.g. 2026-01-31.")

    @field_validator("start", "end", mode="before")
    @classmethod
    def coerce_date(cls, value: Any) -> Any:
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            return value

        text = value.strip()
        if not text:
            return value

        # Canonical format first.
        for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%m/%d/%Y", "%m-%d-%Y"):
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        return value

    @model_validator(mode="after")
    def validate_order(self) -> "DateRange":
        if self.start > self.end:
            raise ValueError("date_range.start must be <= date_range.end")
        return self

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


class LedgerRow(BaseModel):
    """One raw ledger entry as stored by the JSON ledger provider."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    user_id: str
    posted_on: date = Field(alias="date")
    amount: Decimal
    type: Literal["INCOME", "EXPENSE"]
    category: Optional[str] = None
    description: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value


class MonthlyStatsPayload(BaseModel):
    total_income: float
    total_expenses: float
    net: float
    by_category: Dict[str, float] = Field(default_factory=dict)
    transaction_count: int

    @classmethod
    def from_stats(cls, stats: MonthlyStats) -> "MonthlyStatsPayload":
        # The only place Decimal amounts become floats.
        return cls(
            total_income=float(stats.total_income),
            total_expenses=float(stats.total_expenses),
            net=float(stats.net),
            by_category={category: float(amount) for category, amount in stats.by_category.items()},
            transaction_count=stats.transaction_count,
        )


class ReportResponse(BaseModel):
    user_id: str
    month: str
    demo: bool = False
    stats: MonthlyStatsPayload
    insights: List[str] = Field(default_factory=list)
