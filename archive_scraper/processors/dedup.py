from __future__ import annotations

from typing import Set

from ..models import Article


class Deduplicator:
    """In-memory duplicate detection keyed on the article URL.

    Lives for a single crawl invocation; the first article seen for a URL
    wins. Unlinked articles share the empty-string key.
    """

    def __init__(self) -> None:
        self._seen_urls: Set[str] = set()

    def __contains__(self, url: object) -> bool:
        return url in self._seen_urls

    def is_duplicate(self, article: Article) -> bool:
        return article.url in self._seen_urls

    def mark_seen(self, article: Article) -> None:
        self._seen_urls.add(article.url)
