"""Tests for archive_scraper.output.formatter module."""

import json

from archive_scraper.models import Article
from archive_scraper.output.formatter import format_articles

ARTICLES = [
    Article(
        title="Old",
        url="https://e.com/1",
        date="2024-05-01",
        author="taro",
        summary='He said "hi"',
        categories=["Python", "Go"],
    ),
    {"title": "New", "url": "https://e.com/2", "date": "2024-05-03"},
]


class TestFormatArticles:
    def test_markdown_sorted_with_defaults(self) -> None:
        md = format_articles(ARTICLES, "markdown", include_categories=True, include_summary=True)["markdown"]
        lines = md.splitlines()
        assert lines[0] == "# テコテックブログ 記事一覧"
        assert lines[2] == "| 日付 | タイトル | 著者 | カテゴリ | 概要 |"
        assert lines[4] == "| 2024-05-03 | [New](https://e.com/2) | N/A | N/A | N/A |"
        assert lines[5].startswith("| 2024-05-01 | [Old](https://e.com/1) | taro | Python, Go |")

    def test_markdown_without_optional_columns(self) -> None:
        md = format_articles(ARTICLES)["markdown"]
        assert "カテゴリ" not in md
        assert "概要" not in md

    def test_csv_quoting(self) -> None:
        csv_text = format_articles(ARTICLES, "csv", include_categories=True, include_summary=True)["csv"]
        lines = csv_text.splitlines()
        assert lines[0] == "日付,タイトル,URL,著者,カテゴリ,概要"
        assert lines[1] == '2024-05-03,"New",https://e.com/2,,,'
        assert lines[2] == '2024-05-01,"Old",https://e.com/1,"taro","Python; Go","He said ""hi"""'

    def test_html_escapes_text(self) -> None:
        rows = [{"title": "<b>x</b>", "url": "https://e.com/?a=1&b=2", "date": "2024-01-01"}]
        out = format_articles(rows, "html", include_categories=True)["html"]
        assert "&lt;b&gt;x&lt;/b&gt;" in out
        assert 'href="https://e.com/?a=1&amp;b=2"' in out
        assert "<th>カテゴリ</th>" in out
        assert "<td>N/A</td>" in out

    def test_json_round_trips_camel_case(self) -> None:
        data = json.loads(format_articles(ARTICLES, "json")["json"])
        assert [d["title"] for d in data] == ["New", "Old"]
        assert data[1]["authorFromIntro"] == ""

    def test_unknown_format_falls_back_to_markdown(self) -> None:
        assert list(format_articles(ARTICLES, "yaml")) == ["markdown"]
