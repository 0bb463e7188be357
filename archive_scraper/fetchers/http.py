from __future__ import annotations

from typing import Dict, Optional
from urllib.parse import urlencode, urlparse, urlsplit, urlunsplit

import requests

from ..errors import FetchError
from ..models import SiteConfig
from ..utils.logging import get_logger

logger = get_logger("archive.fetchers.http")


def _validated_url(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid URL for HTTP fetch: {url}")
    return url


def page_url(base_url: str, page: int, *, param: str = "page") -> str:
    """Return the listing URL for ``page`` (1-based) of ``base_url``.

    Page 1 is the base URL verbatim; later pages add ``?<param>=<n>``.
    """
    if page <= 1:
        return base_url
    parts = urlsplit(base_url)
    query = urlencode({param: page})
    query = f"{parts.query}&{query}" if parts.query else query
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def fetch_page(
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = 30,
    session: Optional[requests.Session] = None,
) -> str:
    """Fetch one listing page and return its body as text.

    Raises :class:`FetchError` on transport errors and on any status other
    than 200; ``FetchError.status`` is set only in the latter case.
    """
    url = _validated_url(url)
    getter = session.get if session is not None else requests.get
    logger.debug("GET %s", url)
    try:
        resp = getter(url, headers=headers or {}, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Request error for %s: %s", url, exc)
        raise FetchError(url, f"Request failed for {url}: {exc}") from exc

    logger.debug("HTTP %s for %s", resp.status_code, url)
    if resp.status_code != 200:
        raise FetchError(url, f"Unexpected status {resp.status_code} for {url}", status=resp.status_code)

    if resp.encoding is None or resp.encoding.lower() == "iso-8859-1":
        # Hatena pages are UTF-8 but may omit the charset header
        resp.encoding = resp.apparent_encoding or "utf-8"
    text = resp.text
    logger.debug("Fetched %d characters from %s", len(text), url)
    return text


def fetch_site_page(site: SiteConfig, url: str, *, session: Optional[requests.Session] = None) -> str:
    return fetch_page(url, headers=site.headers, timeout=site.timeout, session=session)
