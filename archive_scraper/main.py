"""Command-line entrypoint for the blog archive scraper.

Flow:
1) load site configuration and validate the requested window
2) crawl yearly archives and the site root
3) render the article list (markdown, html, csv or json)
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from .errors import InvalidInputError
from .orchestrator import Orchestrator
from .output.formatter import FORMATS, format_articles
from .output.pipeline_reporter import format_crawl_summary
from .utils.config_loader import ConfigError, load_site_config
from .utils.logging import configure_logging, get_logger
from .utils.pipeline_config import CrawlConfig


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Collect blog post metadata from yearly archive pages for a date window"
    )
    parser.add_argument("--start-date", required=True, help="First day of the window (YYYY-MM-DD)")
    parser.add_argument("--end-date", required=True, help="Last day of the window (YYYY-MM-DD)")
    parser.add_argument(
        "--max-pages",
        type=int,
        default=None,
        help="Maximum listing pages to fetch per base URL (default: 5 or CRAWL_MAX_PAGES)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to site configuration file (YAML); built-in defaults when omitted",
    )
    parser.add_argument("--format", dest="fmt", default="markdown", choices=FORMATS, help="Output format")
    parser.add_argument("--include-categories", action="store_true", help="Add a categories column")
    parser.add_argument("--include-summary", action="store_true", help="Add a summary column")
    parser.add_argument("--output", default=None, help="Write the rendered list to this file instead of stdout")
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a per-base-URL crawl summary to stderr",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    logger = get_logger("archive.cli")

    try:
        site = load_site_config(args.config)
    except ConfigError as exc:
        logger.error("Failed to load configuration: %s", exc)
        return 1

    try:
        config = CrawlConfig.from_strings(args.start_date, args.end_date, args.max_pages)
    except InvalidInputError as exc:
        logger.error("Invalid input: %s", exc)
        return 2

    result = Orchestrator(site).run(config)
    rendered = format_articles(
        result.articles,
        args.fmt,
        include_categories=args.include_categories,
        include_summary=args.include_summary,
    )[args.fmt]

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(rendered, encoding="utf-8")
        logger.info("Wrote %d article(s) to %s", result.total_count, out_path)
    else:
        sys.stdout.write(rendered)

    if args.summary:
        sys.stderr.write(format_crawl_summary(result))
    return 0


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
