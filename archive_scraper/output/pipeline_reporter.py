from __future__ import annotations

from typing import Sequence

from ..models import CrawlResult, SourceReport


def _row(report: SourceReport) -> str:
    reason = report.stop_reason.value if report.stop_reason else "-"
    return (
        f"| {report.base_url} | {report.final_state.value} | {reason} "
        f"| {report.pages_fetched} | {report.entries_seen} | {report.accepted} |"
    )


def format_crawl_summary(result: CrawlResult) -> str:
    reports: Sequence[SourceReport] = result.reports
    aborted = sum(1 for r in reports if r.aborted)
    lines = [
        "### Crawl Summary",
        "",
        f"- Period: {result.period.start_date.isoformat()} .. {result.period.end_date.isoformat()}",
        f"- Base URLs crawled: {len(reports)}",
        f"- Articles collected: {result.total_count}",
        f"- Aborted: {aborted}",
        "",
        "| Base URL | State | Stop reason | Pages | Entries | Accepted |",
        "|---|---|---|---|---|---|",
    ]
    lines.extend(_row(r) for r in reports)
    return "\n".join(lines) + "\n"
