from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from ..models import Article, SiteConfig
from ..utils.logging import get_logger
from ..utils.pipeline_config import CrawlConfig
from .authors import resolve_author
from .dates import format_date, resolve_entry_date
from .dedup import Deduplicator
from .normalize import node_attr, node_text

_logger = get_logger("archive.processors.extract")


def find_entries(soup: BeautifulSoup, site: SiteConfig) -> List[Tag]:
    return soup.select(site.selectors.entry)


def has_next_page(soup: BeautifulSoup, site: SiteConfig) -> bool:
    return bool(node_attr(soup.select_one(site.selectors.next_page), "href"))


def extract_article(entry: Tag, site: SiteConfig) -> Optional[Article]:
    """Build an :class:`Article` from one listing entry.

    Returns ``None`` when the entry carries no usable date; every other
    missing field degrades to a default instead.
    """
    selectors = site.selectors
    title_node = entry.select_one(selectors.title)
    title = node_text(title_node)
    url = node_attr(title_node, "href")

    published = resolve_entry_date(entry.select_one(selectors.date))
    if published is None:
        return None

    authors = resolve_author(entry, selectors, default=site.default_author)
    summary = node_text(entry.select_one(selectors.summary))
    categories = [node_text(label) for label in entry.select(selectors.category)]

    return Article(
        title=title,
        url=url,
        date=format_date(published),
        author=authors.author,
        summary=summary or f"{title}...",
        categories=categories,
        author_from_intro=authors.from_intro,
        author_from_data=authors.from_data,
    )


class EntryExtractor:
    """Turns listing entries into accepted articles for one crawl.

    Applies the date window and the per-invocation URL de-duplication on top
    of :func:`extract_article`; accepted articles are appended to
    ``self.articles`` in encounter order.
    """

    def __init__(
        self,
        site: SiteConfig,
        config: CrawlConfig,
        *,
        dedup: Optional[Deduplicator] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.site = site
        self.config = config
        self.dedup = dedup or Deduplicator()
        self.logger = logger or _logger
        self.articles: List[Article] = []

    def accept(self, entry: Tag) -> Optional[Article]:
        article = extract_article(entry, self.site)
        if article is None:
            self.logger.debug("Skipping entry without a date: %s", node_text(entry.select_one(self.site.selectors.title)))
            return None

        if not self.config.contains(date.fromisoformat(article.date)):
            self.logger.debug("Skipping out-of-window entry (%s): %s", article.date, article.title)
            return None

        if self.dedup.is_duplicate(article):
            self.logger.debug("Skipping duplicate entry: %s", article.url)
            return None

        self.dedup.mark_seen(article)
        self.articles.append(article)
        self.logger.debug("Accepted entry (%s, %s): %s", article.date, article.author, article.title)
        return article

    def accept_all(self, entries: List[Tag]) -> int:
        """Process a page's entries; returns how many were accepted."""
        accepted = 0
        for index, entry in enumerate(entries, start=1):
            self.logger.debug("Processing entry %d/%d", index, len(entries))
            if self.accept(entry) is not None:
                accepted += 1
        return accepted
