from __future__ import annotations

import html
import json
from typing import Any, Dict, Iterable, List, Literal, Mapping, Union

from ..models import Article

OutputFormat = Literal["markdown", "html", "csv", "json"]
FORMATS = ("markdown", "html", "csv", "json")

LIST_TITLE = "テコテックブログ 記事一覧"

ArticleLike = Union[Article, Mapping[str, Any]]


def _as_dict(article: ArticleLike) -> Dict[str, Any]:
    if isinstance(article, Article):
        return article.to_dict()
    return dict(article)


def sort_articles(articles: Iterable[ArticleLike]) -> List[Dict[str, Any]]:
    """Newest first; same-day articles keep their input order."""
    return sorted((_as_dict(a) for a in articles), key=lambda a: a.get("date") or "", reverse=True)


def _categories(article: Mapping[str, Any], sep: str) -> str:
    return sep.join(article.get("categories") or [])


def format_markdown(articles: List[Dict[str, Any]], include_categories: bool, include_summary: bool) -> str:
    header = "| 日付 | タイトル | 著者 "
    separator = "|------|---------|------|"
    if include_categories:
        header += "| カテゴリ "
        separator += "------|"
    if include_summary:
        header += "| 概要 "
        separator += "------|"

    lines = [f"# {LIST_TITLE}", "", header + "|", separator]
    for a in articles:
        row = f"| {a.get('date', '')} | [{a.get('title', '')}]({a.get('url', '')}) | {a.get('author') or 'N/A'} "
        if include_categories:
            row += f"| {_categories(a, ', ') or 'N/A'} "
        if include_summary:
            row += f"| {a.get('summary') or 'N/A'} "
        lines.append(row + "|")
    return "\n".join(lines) + "\n"


def format_html(articles: List[Dict[str, Any]], include_categories: bool, include_summary: bool) -> str:
    esc = html.escape
    head_cells = ["<th>日付</th>", "<th>タイトル</th>", "<th>著者</th>"]
    if include_categories:
        head_cells.append("<th>カテゴリ</th>")
    if include_summary:
        head_cells.append("<th>概要</th>")

    rows = []
    for a in articles:
        cells = [
            f"<td>{esc(a.get('date', ''))}</td>",
            f'<td><a href="{esc(a.get("url", ""))}" target="_blank">{esc(a.get("title", ""))}</a></td>',
            f"<td>{esc(a.get('author') or 'N/A')}</td>",
        ]
        if include_categories:
            cells.append(f"<td>{esc(_categories(a, ', ') or 'N/A')}</td>")
        if include_summary:
            cells.append(f"<td>{esc(a.get('summary') or 'N/A')}</td>")
        rows.append("      <tr>" + "".join(cells) + "</tr>")

    return (
        "<html>\n"
        "<head>\n"
        '  <meta charset="utf-8">\n'
        f"  <title>{LIST_TITLE}</title>\n"
        "  <style>\n"
        "    table { border-collapse: collapse; width: 100%; }\n"
        "    th, td { padding: 8px; text-align: left; border-bottom: 1px solid #ddd; }\n"
        "    tr:hover { background-color: #f5f5f5; }\n"
        "  </style>\n"
        "</head>\n"
        "<body>\n"
        f"  <h1>{LIST_TITLE}</h1>\n"
        "  <table>\n"
        f"    <thead><tr>{''.join(head_cells)}</tr></thead>\n"
        "    <tbody>\n"
        + "".join(f"{r}\n" for r in rows)
        + "    </tbody>\n"
        "  </table>\n"
        "</body>\n"
        "</html>\n"
    )


def _csv_quote(value: str | None) -> str:
    if not value:
        return ""
    return '"' + value.replace('"', '""') + '"'


def format_csv(articles: List[Dict[str, Any]], include_categories: bool, include_summary: bool) -> str:
    header = "日付,タイトル,URL,著者"
    if include_categories:
        header += ",カテゴリ"
    if include_summary:
        header += ",概要"

    lines = [header]
    for a in articles:
        row = f"{a.get('date', '')},{_csv_quote(a.get('title'))},{a.get('url', '')},{_csv_quote(a.get('author'))}"
        if include_categories:
            row += f",{_csv_quote(_categories(a, '; '))}"
        if include_summary:
            row += f",{_csv_quote(a.get('summary'))}"
        lines.append(row)
    return "".join(f"{line}\n" for line in lines)


def format_json(articles: List[Dict[str, Any]]) -> str:
    return json.dumps(articles, ensure_ascii=False, indent=2)


def format_articles(
    articles: Iterable[ArticleLike],
    fmt: str = "markdown",
    *,
    include_categories: bool = False,
    include_summary: bool = False,
) -> Dict[str, str]:
    """Render an article list; returns ``{format_name: rendered}``.

    Unknown formats fall back to markdown.
    """
    if fmt not in FORMATS:
        fmt = "markdown"
    rows = sort_articles(articles)
    if fmt == "html":
        return {"html": format_html(rows, include_categories, include_summary)}
    if fmt == "csv":
        return {"csv": format_csv(rows, include_categories, include_summary)}
    if fmt == "json":
        return {"json": format_json(rows)}
    return {"markdown": format_markdown(rows, include_categories, include_summary)}
