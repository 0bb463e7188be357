from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..errors import InvalidInputError

DATE_FORMAT = "%Y-%m-%d"


def _default_max_pages() -> int:
    raw = os.getenv("CRAWL_MAX_PAGES", "5")
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidInputError(f"CRAWL_MAX_PAGES must be an integer, got {raw!r}") from exc


def parse_input_date(value: str, *, name: str = "date") -> date:
    """Parse a strict ``YYYY-MM-DD`` string into a :class:`date`."""
    try:
        return datetime.strptime(str(value).strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidInputError(f"{name} must be a YYYY-MM-DD date, got {value!r}") from exc


@dataclass(slots=True, frozen=True)
class CrawlConfig:
    """Parameters of a single crawl invocation.

    Validated on construction: an inverted window or a non-positive page
    budget is rejected before any request is made.
    """

    start_date: date
    end_date: date
    max_pages: int = field(default_factory=_default_max_pages)

    def __post_init__(self) -> None:
        if not isinstance(self.start_date, date) or not isinstance(self.end_date, date):
            raise InvalidInputError("start_date and end_date must be dates")
        if self.end_date < self.start_date:
            raise InvalidInputError(
                f"end_date {self.end_date.isoformat()} is before start_date {self.start_date.isoformat()}"
            )
        if isinstance(self.max_pages, bool) or not isinstance(self.max_pages, int) or self.max_pages < 1:
            raise InvalidInputError(f"max_pages must be a positive integer, got {self.max_pages!r}")

    @classmethod
    def from_strings(cls, start_date: str, end_date: str, max_pages: Optional[int] = None) -> "CrawlConfig":
        start = parse_input_date(start_date, name="start_date")
        end = parse_input_date(end_date, name="end_date")
        if max_pages is None:
            return cls(start_date=start, end_date=end)
        return cls(start_date=start, end_date=end, max_pages=max_pages)

    def contains(self, day: date) -> bool:
        """Closed-interval membership test for the date window."""
        return self.start_date <= day <= self.end_date
