from __future__ import annotations

from datetime import date
from typing import List

from ..models import SiteConfig


def enumerate_base_urls(start_date: date, end_date: date, site: SiteConfig) -> List[str]:
    """Return the crawl entry points for a date window.

    One yearly archive URL per calendar year from ``start_date.year`` to
    ``end_date.year`` (ascending), followed by the site root, which also
    lists recent posts. Duplicates are dropped, keeping first position.
    """
    urls = [site.archive_url(year) for year in range(start_date.year, end_date.year + 1)]
    urls.append(site.root_url)
    return list(dict.fromkeys(urls))
