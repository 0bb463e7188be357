from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from .article import Article


class CrawlState(str, Enum):
    FETCHING = "fetching"
    EXTRACTING = "extracting"
    ADVANCING_PAGE = "advancing_page"
    DONE = "done"
    ABORTED = "aborted"


class StopReason(str, Enum):
    NON_SUCCESS_STATUS = "non_success_status"
    EMPTY_PAGE = "empty_page"
    NO_NEXT_PAGE = "no_next_page"
    MAX_PAGES = "max_pages"
    ERROR = "error"


@dataclass(slots=True)
class SourceReport:
    """Outcome of crawling one base URL."""

    base_url: str
    pages_fetched: int = 0
    entries_seen: int = 0
    accepted: int = 0
    final_state: CrawlState = CrawlState.FETCHING
    stop_reason: Optional[StopReason] = None
    error: Optional[str] = None

    @property
    def aborted(self) -> bool:
        return self.final_state is CrawlState.ABORTED


@dataclass(slots=True, frozen=True)
class Period:
    start_date: date
    end_date: date

    def to_dict(self) -> Dict[str, str]:
        return {"startDate": self.start_date.isoformat(), "endDate": self.end_date.isoformat()}


@dataclass(slots=True)
class CrawlResult:
    articles: List[Article]
    period: Period
    reports: List[SourceReport] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.articles)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "articles": [a.to_dict() for a in self.articles],
            "totalCount": self.total_count,
            "period": self.period.to_dict(),
        }
