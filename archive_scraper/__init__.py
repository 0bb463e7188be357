"""Top-level package for the blog archive scraper.

Collects post metadata from a Hatena-style blog's yearly archive pages and
site root for a date window, and renders the result list.
"""

from .orchestrator import Orchestrator, scrape_archive

__all__ = ["Orchestrator", "scrape_archive"]
