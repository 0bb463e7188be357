from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

import requests
from bs4 import BeautifulSoup, Tag

from ..errors import FetchError
from ..models import CrawlState, SiteConfig, SourceReport, StopReason
from ..processors.extract import find_entries, has_next_page
from ..utils.logging import get_logger
from .http import fetch_site_page, page_url

_logger = get_logger("archive.fetchers.pagination")

EntryHandler = Callable[[List[Tag]], int]


class PaginatedCrawler:
    """Walks the listing pages of one base URL at a time.

    Pages are fetched sequentially. After each non-empty page the entries are
    handed to ``on_entries`` (which returns the number it accepted) and the
    crawler sleeps ``site.page_delay`` seconds before moving on. The crawl of
    a base URL ends when a page is empty, has no next-page link, returns a
    non-200 status, or the page budget is used up. Any other failure aborts
    that base URL only.
    """

    def __init__(
        self,
        site: SiteConfig,
        *,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.site = site
        self.session = session
        self.sleep = sleep
        self.logger = logger or _logger

    def _fetch(self, url: str) -> str:
        return fetch_site_page(self.site, url, session=self.session)

    def crawl(self, base_url: str, max_pages: int, on_entries: EntryHandler) -> SourceReport:
        report = SourceReport(base_url=base_url)
        page = 1
        entries: List[Tag] = []
        more = False
        state = CrawlState.FETCHING
        self.logger.info("Crawling %s (max_pages=%d)", base_url, max_pages)

        while state not in (CrawlState.DONE, CrawlState.ABORTED):
            url = page_url(base_url, page, param=self.site.page_param)
            try:
                if state is CrawlState.FETCHING:
                    if page > max_pages:
                        state = self._finish(report, StopReason.MAX_PAGES)
                        continue
                    try:
                        html = self._fetch(url)
                    except FetchError as exc:
                        if exc.status is None:
                            raise
                        self.logger.warning("Status %s for %s; skipping the rest of %s", exc.status, url, base_url)
                        state = self._finish(report, StopReason.NON_SUCCESS_STATUS)
                        continue
                    report.pages_fetched += 1
                    soup = BeautifulSoup(html, "html.parser")
                    entries = find_entries(soup, self.site)
                    more = has_next_page(soup, self.site)
                    self.logger.debug("Found %d entries on %s", len(entries), url)
                    if not entries:
                        state = self._finish(report, StopReason.EMPTY_PAGE)
                        continue
                    state = CrawlState.EXTRACTING

                elif state is CrawlState.EXTRACTING:
                    report.entries_seen += len(entries)
                    report.accepted += on_entries(entries)
                    state = CrawlState.ADVANCING_PAGE

                elif state is CrawlState.ADVANCING_PAGE:
                    page += 1
                    self.sleep(self.site.page_delay)
                    if more:
                        state = CrawlState.FETCHING
                    else:
                        state = self._finish(report, StopReason.NO_NEXT_PAGE)

            except Exception as exc:  # noqa: BLE001 - one base URL's failure must not stop the others
                self.logger.warning("Error crawling %s: %s; aborting %s", url, exc, base_url)
                report.error = str(exc)
                report.stop_reason = StopReason.ERROR
                report.final_state = state = CrawlState.ABORTED

        self.logger.info(
            "Finished %s: state=%s, reason=%s, pages=%d, entries=%d, accepted=%d",
            base_url,
            report.final_state.value,
            report.stop_reason.value if report.stop_reason else None,
            report.pages_fetched,
            report.entries_seen,
            report.accepted,
        )
        return report

    @staticmethod
    def _finish(report: SourceReport, reason: StopReason) -> CrawlState:
        report.stop_reason = reason
        report.final_state = CrawlState.DONE
        return CrawlState.DONE
