"""Tests for archive_scraper.utils.pipeline_config module."""

from datetime import date

import pytest

from archive_scraper.errors import InvalidInputError
from archive_scraper.utils.pipeline_config import CrawlConfig, parse_input_date


class TestCrawlConfig:
    def test_from_strings(self) -> None:
        config = CrawlConfig.from_strings("2024-01-01", "2024-02-01", 3)
        assert config.start_date == date(2024, 1, 1)
        assert config.end_date == date(2024, 2, 1)
        assert config.max_pages == 3

    def test_default_max_pages(self, monkeypatch) -> None:
        monkeypatch.delenv("CRAWL_MAX_PAGES", raising=False)
        assert CrawlConfig.from_strings("2024-01-01", "2024-01-01").max_pages == 5

    def test_env_max_pages(self, monkeypatch) -> None:
        monkeypatch.setenv("CRAWL_MAX_PAGES", "2")
        assert CrawlConfig.from_strings("2024-01-01", "2024-01-01").max_pages == 2

    def test_non_integer_env_max_pages_rejected(self, monkeypatch) -> None:
        monkeypatch.setenv("CRAWL_MAX_PAGES", "five")
        with pytest.raises(InvalidInputError, match="CRAWL_MAX_PAGES"):
            CrawlConfig.from_strings("2024-05-01", "2024-05-31")

    def test_explicit_max_pages_ignores_env(self, monkeypatch) -> None:
        monkeypatch.setenv("CRAWL_MAX_PAGES", "five")
        assert CrawlConfig.from_strings("2024-05-01", "2024-05-31", 3).max_pages == 3

    def test_same_day_window_allowed(self) -> None:
        config = CrawlConfig(date(2024, 1, 1), date(2024, 1, 1), 1)
        assert config.contains(date(2024, 1, 1))

    def test_inverted_window_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="before start_date"):
            CrawlConfig.from_strings("2024-02-01", "2024-01-01")

    @pytest.mark.parametrize("max_pages", [0, -1, True])
    def test_bad_max_pages_rejected(self, max_pages) -> None:
        with pytest.raises(InvalidInputError):
            CrawlConfig(date(2024, 1, 1), date(2024, 1, 2), max_pages)

    @pytest.mark.parametrize("value", ["2024-1-1x", "2024/01/01", "", "2024-02-30"])
    def test_bad_date_strings(self, value) -> None:
        with pytest.raises(InvalidInputError):
            parse_input_date(value)

    def test_invalid_input_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_input_date("nope")
