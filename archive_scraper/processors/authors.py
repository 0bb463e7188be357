"""Author resolution for archive entries.

Listing pages rarely carry an explicit byline, so the author is resolved from
several weaker signals, tried in priority order:

1. the entry's author-name element
2. the username data attribute on the entry node
3. a self-introduction at the start of the summary
   ("こんにちは。開発部の山田です" -> "山田")
4. the site's default display name
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from bs4 import Tag

from ..models import Selectors
from .chain import first_success
from .normalize import node_attr, node_text

_greeting_re = re.compile(r"こんにちは[。、.!！]?\s*([^。]+部の([^\s。]+))です")

AuthorStrategy = Callable[[Tag, Selectors], Optional[str]]


def author_from_element(entry: Tag, selectors: Selectors) -> Optional[str]:
    return node_text(entry.select_one(selectors.author)) or None


def author_from_data_attribute(entry: Tag, selectors: Selectors) -> Optional[str]:
    return node_attr(entry, selectors.author_data_attribute) or None


def author_from_greeting(text: str | None) -> Optional[str]:
    """Name from a greeting such as ``こんにちは、開発部の山田です``."""
    if not text:
        return None
    match = _greeting_re.search(text)
    if not match:
        return None
    return match.group(2) or None


def author_from_intro(entry: Tag, selectors: Selectors) -> Optional[str]:
    return author_from_greeting(node_text(entry.select_one(selectors.summary)))


AUTHOR_STRATEGIES: Sequence[AuthorStrategy] = (
    author_from_element,
    author_from_data_attribute,
    author_from_intro,
)


@dataclass(slots=True, frozen=True)
class AuthorResolution:
    author: str
    from_intro: str
    from_data: str


def resolve_author(
    entry: Tag,
    selectors: Selectors,
    *,
    default: str,
    strategies: Sequence[AuthorStrategy] = AUTHOR_STRATEGIES,
) -> AuthorResolution:
    author = first_success(strategies, entry, selectors) or default
    return AuthorResolution(
        author=author,
        from_intro=author_from_intro(entry, selectors) or "",
        from_data=author_from_data_attribute(entry, selectors) or "",
    )
