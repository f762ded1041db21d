from __future__ import annotations

from datetime import date
from html import escape
from typing import Optional

from fastapi import FastAPI, Header, HTTPException, Query, status
from fastapi.responses import HTMLResponse

from domain.errors import UnauthorizedError
from domain.schemas import ReportResponse
from interface.cli import build_report_service, parse_month

app = FastAPI(title="Monthly Insights API")
service = build_report_service()


def _run_report(user_id: Optional[str], month: Optional[str]) -> ReportResponse:
    try:
        day: date = parse_month(month)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="month must be formatted as YYYY-MM",
        )
    try:
        return service.build(user_id, day)
    except UnauthorizedError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


def render_report_html(report: ReportResponse) -> str:
    items = "\n".join(
        f'        <li><span class="badge">{index}</span><p>{escape(insight)}</p></li>'
        for index, insight in enumerate(report.insights, start=1)
    )
    demo_note = '    <p class="muted">Showing demo data; your ledger could not be loaded.</p>\n' if report.demo else ""
    return f"""
<!doctype html>
<html>
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Financial Insights Report</title>
    <style>
      body {{ font-family: sans-serif; margin: 2rem; max-width: 900px; }}
      .muted {{ color: #666; }}
      .totals {{ display: grid; grid-template-columns: 1fr 1fr; gap: .75rem; }}
      ul {{ list-style: none; padding: 0; display: grid; gap: 1rem; }}
      li {{ display: flex; gap: .75rem; background: #f8fafc; padding: 1rem; border-radius: 6px; }}
      .badge {{ background: #ede9fe; color: #6d28d9; border-radius: 50%; width: 1.5rem; height: 1.5rem;
                display: inline-flex; align-items: center; justify-content: center; }}
      nav {{ display: flex; gap: 1rem; justify-content: flex-end; margin-top: 2rem; }}
    </style>
  </head>
  <body>
    <h1>Financial Insights Report</h1>
    <p class="muted">Month: {escape(report.month)}</p>
{demo_note}    <div class="totals">
      <div><strong>Total Income</strong><br />{report.stats.total_income:,.2f}</div>
      <div><strong>Total Expenses</strong><br />{report.stats.total_expenses:,.2f}</div>
    </div>
    <h2>Smart Recommendations</h2>
    <ul>
{items}
    </ul>
    <nav>
      <a href="/dashboard">View Dashboard</a>
      <a href="/account">View Transactions</a>
    </nav>
  </body>
</html>
"""


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/report")
def report_json(
    month: Optional[str] = Query(default=None, description="Report month as YYYY-MM; defaults to the current month."),
    x_user_id: Optional[str] = Header(default=None),
) -> dict:
    return _run_report(x_user_id, month).model_dump()


@app.get("/report", response_class=HTMLResponse)
def report_page(
    month: Optional[str] = Query(default=None),
    x_user_id: Optional[str] = Header(default=None),
) -> str:
    return render_report_html(_run_report(x_user_id, month))
