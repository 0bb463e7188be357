"""Content fetching layer: listing page retrieval and pagination."""

from .http import fetch_page, fetch_site_page, page_url
from .pagination import PaginatedCrawler

__all__ = ["fetch_page", "fetch_site_page", "page_url", "PaginatedCrawler"]
