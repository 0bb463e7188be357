"""Processing pipeline: entry extraction, date and author resolution, deduplication."""

from .authors import AuthorResolution, resolve_author
from .dates import parse_date_text, parse_timestamp, resolve_entry_date
from .dedup import Deduplicator
from .extract import EntryExtractor, extract_article, find_entries, has_next_page
from .normalize import node_attr, node_text, normalize_plain_text
from .sources import enumerate_base_urls

__all__ = [
    "AuthorResolution",
    "Deduplicator",
    "EntryExtractor",
    "enumerate_base_urls",
    "extract_article",
    "find_entries",
    "has_next_page",
    "node_attr",
    "node_text",
    "normalize_plain_text",
    "parse_date_text",
    "parse_timestamp",
    "resolve_author",
    "resolve_entry_date",
]
