from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

import requests

from .fetchers import PaginatedCrawler
from .models import CrawlResult, Period, SiteConfig, SourceReport
from .processors import Deduplicator, EntryExtractor, enumerate_base_urls
from .utils.logging import get_logger
from .utils.pipeline_config import CrawlConfig

_logger = get_logger("archive.orchestrator")


class Orchestrator:
    """Runs one archive crawl from base URL enumeration to the sorted result."""

    def __init__(
        self,
        site: Optional[SiteConfig] = None,
        *,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.site = site or SiteConfig()
        self.logger = logger or _logger
        self.crawler = PaginatedCrawler(self.site, session=session, sleep=sleep, logger=self.logger)

    def run(self, config: CrawlConfig) -> CrawlResult:
        self.logger.info(
            "Starting crawl: period=%s..%s, max_pages=%d",
            config.start_date.isoformat(),
            config.end_date.isoformat(),
            config.max_pages,
        )
        base_urls = enumerate_base_urls(config.start_date, config.end_date, self.site)
        self.logger.debug("Base URLs: %s", ", ".join(base_urls))

        extractor = EntryExtractor(self.site, config, dedup=Deduplicator(), logger=self.logger)
        reports: List[SourceReport] = []
        for base_url in base_urls:
            reports.append(self.crawler.crawl(base_url, config.max_pages, extractor.accept_all))

        # sorted() is stable, so same-day articles keep encounter order
        articles = sorted(extractor.articles, key=lambda a: a.date, reverse=True)
        aborted = [r.base_url for r in reports if r.aborted]
        if aborted:
            self.logger.warning("Crawl aborted early for: %s", ", ".join(aborted))
        self.logger.info("Crawl complete: %d article(s) from %d base URL(s)", len(articles), len(base_urls))
        return CrawlResult(
            articles=articles,
            period=Period(start_date=config.start_date, end_date=config.end_date),
            reports=reports,
        )


def scrape_archive(
    start_date: str,
    end_date: str,
    max_pages: Optional[int] = None,
    *,
    site: Optional[SiteConfig] = None,
    session: Optional[requests.Session] = None,
) -> CrawlResult:
    """Convenience wrapper: validate string inputs and run a crawl.

    Raises :class:`~archive_scraper.errors.InvalidInputError` for malformed
    dates or an inverted window before any request is made.
    """
    config = CrawlConfig.from_strings(start_date, end_date, max_pages)
    return Orchestrator(site, session=session).run(config)
