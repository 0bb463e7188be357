"""Tests for archive_scraper.processors.dates module."""

from datetime import date

import pytest
from bs4 import BeautifulSoup

from archive_scraper.processors.dates import (
    date_from_attribute,
    date_from_text,
    parse_date_text,
    parse_timestamp,
    resolve_entry_date,
)


def _time(html: str):
    return BeautifulSoup(html, "html.parser").select_one("time")


class TestParseTimestamp:
    def test_utc_z_suffix(self) -> None:
        assert parse_timestamp("2023-07-04T00:00:00Z") == date(2023, 7, 4)

    def test_plain_date(self) -> None:
        assert parse_timestamp("2023-07-04") == date(2023, 7, 4)

    def test_offset_is_converted_to_utc(self) -> None:
        assert parse_timestamp("2023-07-04T08:00:00+09:00") == date(2023, 7, 3)

    @pytest.mark.parametrize("value", [None, "", "not a date", "2023-13-01"])
    def test_unparseable_returns_none(self, value) -> None:
        assert parse_timestamp(value) is None


class TestParseDateText:
    def test_japanese_text(self) -> None:
        assert parse_date_text("2023年7月4日") == date(2023, 7, 4)

    def test_slashes_and_padding(self) -> None:
        assert parse_date_text("Posted 2024/1/9") == date(2024, 1, 9)

    def test_no_match(self) -> None:
        assert parse_date_text("yesterday") is None

    def test_impossible_day(self) -> None:
        assert parse_date_text("2023-02-30") is None


class TestResolveEntryDate:
    def test_attribute_wins_over_text(self) -> None:
        node = _time('<time datetime="2023-07-04T00:00:00Z">2022年1月1日</time>')
        assert resolve_entry_date(node) == date(2023, 7, 4)

    def test_text_fallback_when_attribute_missing(self) -> None:
        node = _time("<time>2023年7月4日</time>")
        assert date_from_attribute(node) is None
        assert date_from_text(node) == date(2023, 7, 4)
        assert resolve_entry_date(node) == date(2023, 7, 4)

    def test_text_fallback_when_attribute_unparseable(self) -> None:
        node = _time('<time datetime="soon">2023-07-04</time>')
        assert resolve_entry_date(node) == date(2023, 7, 4)

    def test_missing_element(self) -> None:
        assert resolve_entry_date(None) is None

    def test_no_date_anywhere(self) -> None:
        assert resolve_entry_date(_time("<time>undated</time>")) is None
