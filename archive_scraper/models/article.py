from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True, frozen=True)
class Article:
    """One blog post as listed on an archive page."""

    title: str
    url: str
    date: str  # YYYY-MM-DD
    author: str
    summary: str
    categories: List[str] = field(default_factory=list)

    # Alternate author candidates kept for diagnostics only
    author_from_intro: str = ""
    author_from_data: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "date": self.date,
            "author": self.author,
            "authorFromIntro": self.author_from_intro,
            "authorFromData": self.author_from_data,
            "summary": self.summary,
            "categories": list(self.categories),
        }
