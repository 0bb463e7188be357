from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_ROOT_URL = "https://tec.tecotec.co.jp/"
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; MastraBot/1.0)"
DEFAULT_AUTHOR = "テコテック"


@dataclass(slots=True, frozen=True)
class Selectors:
    """CSS selectors describing the archive listing markup (Hatena Blog)."""

    entry: str = ".archive-entry"
    title: str = ".entry-title a"
    date: str = ".archive-date time"
    author: str = ".entry-author-name"
    summary: str = ".entry-description"
    category: str = ".archive-entry-tags .archive-entry-tag-label"
    next_page: str = ".pager-next a"
    author_data_attribute: str = "data-user-name"


@dataclass(slots=True, frozen=True)
class SiteConfig:
    """Configuration for the blog being crawled."""

    root_url: str = DEFAULT_ROOT_URL
    archive_path: str = "archive/"
    page_param: str = "page"
    user_agent: str = DEFAULT_USER_AGENT
    default_author: str = DEFAULT_AUTHOR
    page_delay: float = 1.0
    timeout: float = 30.0
    selectors: Selectors = field(default_factory=Selectors)

    def __post_init__(self) -> None:
        if not self.root_url.endswith("/"):
            object.__setattr__(self, "root_url", self.root_url + "/")
        if self.archive_path.strip("/"):
            object.__setattr__(self, "archive_path", self.archive_path.strip("/") + "/")

    def archive_url(self, year: int) -> str:
        return f"{self.root_url}{self.archive_path}{year}"

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent}
