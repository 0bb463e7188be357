from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Callable, Optional, Sequence

from bs4 import Tag

from .chain import first_success
from .normalize import node_attr, node_text

# "<year> <sep> <month> <sep> <day>", e.g. 2023-07-04, 2023/7/4, 2023年7月4日
_date_text_re = re.compile(r"(\d{4})\D+(\d{1,2})\D+(\d{1,2})")

DateStrategy = Callable[[Optional[Tag]], Optional[date]]


def parse_timestamp(value: str | None) -> Optional[date]:
    """Parse a machine-readable timestamp into its UTC calendar date.

    Accepts ISO 8601 dates and datetimes, including a trailing ``Z``. Aware
    datetimes are converted to UTC first; naive values are taken as UTC.
    """
    if not value:
        return None
    value = value.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


def parse_date_text(text: str | None) -> Optional[date]:
    """Extract a year/month/day triple from free-form display text."""
    if not text:
        return None
    match = _date_text_re.search(text)
    if not match:
        return None
    year, month, day = match.groups()
    try:
        return datetime.strptime(f"{year}-{int(month):02d}-{int(day):02d}", "%Y-%m-%d").date()
    except ValueError:
        return None


def date_from_attribute(node: Optional[Tag]) -> Optional[date]:
    return parse_timestamp(node_attr(node, "datetime"))


def date_from_text(node: Optional[Tag]) -> Optional[date]:
    return parse_date_text(node_text(node))


DATE_STRATEGIES: Sequence[DateStrategy] = (date_from_attribute, date_from_text)


def resolve_entry_date(node: Optional[Tag]) -> Optional[date]:
    """Date of an entry's date element; ``None`` when nothing parses."""
    if node is None:
        return None
    return first_success(DATE_STRATEGIES, node)


def format_date(value: date) -> str:
    return value.isoformat()
