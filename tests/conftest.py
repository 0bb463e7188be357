"""Shared fixtures: Hatena-style archive markup builders and a fake HTTP session."""

from typing import Callable, Dict, List, Optional, Tuple
from unittest.mock import Mock

import pytest
import requests


def _entry_html(
    title: str = "Post",
    url: Optional[str] = "https://tec.example.com/entry/post",
    datetime_attr: Optional[str] = "2024-05-01",
    date_text: str = "",
    author: str = "",
    data_user: Optional[str] = None,
    summary: str = "",
    categories: Tuple[str, ...] = (),
) -> str:
    href = f' href="{url}"' if url is not None else ""
    dt = f' datetime="{datetime_attr}"' if datetime_attr is not None else ""
    data = f' data-user-name="{data_user}"' if data_user is not None else ""
    author_html = f'<span class="entry-author-name">{author}</span>' if author else ""
    tags = "".join(f'<a class="archive-entry-tag"><span class="archive-entry-tag-label">{c}</span></a>' for c in categories)
    return (
        f'<section class="archive-entry"{data}>'
        f'<div class="archive-date"><time{dt}>{date_text}</time></div>'
        f'<h1 class="entry-title"><a{href}>{title}</a></h1>'
        f"{author_html}"
        f'<div class="archive-entry-tags">{tags}</div>'
        f'<div class="entry-description">{summary}</div>'
        "</section>"
    )


def _page_html(entries: List[str], next_href: Optional[str] = None) -> str:
    pager = f'<span class="pager-next"><a href="{next_href}">Next</a></span>' if next_href else ""
    return f"<html><body><div id='main'>{''.join(entries)}</div>{pager}</body></html>"


@pytest.fixture
def make_entry() -> Callable[..., str]:
    return _entry_html


@pytest.fixture
def make_page() -> Callable[..., str]:
    return _page_html


def _response(status: int, text: str) -> Mock:
    resp = Mock()
    resp.status_code = status
    resp.text = text
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def fake_session() -> Callable[[Dict[str, object]], Mock]:
    """Build a session whose ``get`` serves canned pages.

    Values are HTML strings (status 200), ``(status, html)`` tuples, or
    exceptions to raise. Unknown URLs get a 404.
    """

    def build(pages: Dict[str, object]) -> Mock:
        session = Mock(spec=requests.Session)

        def get(url, headers=None, timeout=None):
            value = pages.get(url)
            if value is None:
                return _response(404, "")
            if isinstance(value, BaseException):
                raise value
            if isinstance(value, tuple):
                return _response(*value)
            return _response(200, value)

        session.get.side_effect = get
        return session

    return build
