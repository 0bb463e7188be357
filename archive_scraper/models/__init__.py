"""Typed models used across the application."""

from .article import Article
from .result import CrawlResult, CrawlState, Period, SourceReport, StopReason
from .site import Selectors, SiteConfig

__all__ = [
    "Article",
    "CrawlResult",
    "CrawlState",
    "Period",
    "Selectors",
    "SiteConfig",
    "SourceReport",
    "StopReason",
]
