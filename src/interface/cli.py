from __future__ import annotations

import logging
import os
import sys
from datetime import date, datetime

from dotenv import load_dotenv

from application.report import ReportService
from domain.errors import UnauthorizedError


def configure_logging() -> None:
    load_dotenv()
    logging.basicConfig(
        level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_report_service() -> ReportService:
    return ReportService()


def parse_month(value: str | None) -> date:
    """Parse "YYYY-MM" into the first day of that month; empty means the current month."""
    text = (value or "").strip()
    if not text:
        return date.today()
    return datetime.strptime(text, "%Y-%m").date()


def main() -> None:
    configure_logging()
    raw_month = input("Report month (YYYY-MM, blank for current) > ").strip()
    try:
        day = parse_month(raw_month)
    except ValueError:
        print(f"Invalid month {raw_month!r}; expected YYYY-MM", file=sys.stderr)
        raise SystemExit(2)

    service = build_report_service()
    try:
        report = service.build(os.getenv("LEDGER_USER_ID"), day)
    except UnauthorizedError:
        print("Unauthorized: set LEDGER_USER_ID to run a report", file=sys.stderr)
        raise SystemExit(1)

    print(report.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
