from __future__ import annotations

from typing import Optional


class ScraperError(Exception):
    """Base class for errors raised by the archive scraper."""


class FetchError(ScraperError):
    """Raised when a listing page cannot be retrieved.

    Covers both transport failures (connection reset, timeout) and
    responses whose status is anything other than 200.
    """

    def __init__(self, url: str, message: str, *, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class InvalidInputError(ScraperError, ValueError):
    """Raised when caller-supplied crawl parameters are malformed."""
