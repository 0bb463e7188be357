"""Tests for archive_scraper.utils.logging module."""

import json
import logging

import pytest

from archive_scraper.utils.logging import JsonFormatter, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJsonFormatter:
    def test_quotes_in_message_stay_valid_json(self) -> None:
        record = logging.LogRecord(
            "archive.test", logging.WARNING, "crawl.py", 12, 'Error crawling %s: %s', ("https://e.com/", 'bad "markup"'), None
        )
        data = json.loads(JsonFormatter().format(record))
        assert data["message"] == 'Error crawling https://e.com/: bad "markup"'
        assert data["level"] == "WARNING"
        assert data["file"] == "crawl.py:12"

    def test_non_ascii_kept(self) -> None:
        record = logging.LogRecord("archive.test", logging.INFO, "x.py", 1, "記事 %s", ("テスト",), None)
        assert "記事 テスト" in JsonFormatter().format(record)


class TestConfigureLogging:
    def test_json_format_installs_json_formatter(self, restore_root_logger) -> None:
        configure_logging(level="DEBUG", output="stdout", log_format="json")
        [handler] = restore_root_logger.handlers
        assert isinstance(handler.formatter, JsonFormatter)
        assert restore_root_logger.level == logging.DEBUG

    def test_file_output(self, restore_root_logger, tmp_path) -> None:
        log_path = tmp_path / "logs" / "run.log"
        configure_logging(level="INFO", output="file", file_path=str(log_path), log_format="text")
        logging.getLogger("archive.test").info("hello")
        for handler in restore_root_logger.handlers:
            handler.flush()
            handler.close()
        assert "hello" in log_path.read_text(encoding="utf-8")
