"""Tests for logging configuration."""

import json
import logging
import sys
from unittest.mock import MagicMock, patch

import pytest

from app.logging import JsonFormatter, TextFormatter, setup_logging
from app.rss.parser import parse_feed


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_outputs_single_json_object():
    """Test that records are rendered as JSON with level, msg and logger."""
    record = logging.LogRecord(
        name="app.rss.parser",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Skipping malformed feed item: %s",
        args=("item 3",),
        exc_info=None,
    )

    data = json.loads(JsonFormatter().format(record))

    assert data == {
        "level": "WARNING",
        "msg": "Skipping malformed feed item: item 3",
        "logger": "app.rss.parser",
    }


def test_json_formatter_includes_exception():
    """Test that exception info is serialized when present."""
    try:
        raise ValueError("boom")
    except ValueError:
        exc_info = sys.exc_info()

    record = logging.LogRecord(
        name="app",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg="failed",
        args=(),
        exc_info=exc_info,
    )

    data = json.loads(JsonFormatter().format(record))

    assert "ValueError: boom" in data["exc_info"]


def make_record(msg, **context):
    """Build a record the way logger.info(msg, extra=context) would."""
    record = logging.LogRecord(
        name="app.rss.fetcher",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    record.__dict__.update(context)
    return record


def test_json_formatter_nests_feed_context():
    """Test that feed context passed via extra= is emitted under "feed"."""
    record = make_record(
        "Fetched feed", feed_url="https://example.com/rss", body_bytes=2048
    )

    data = json.loads(JsonFormatter().format(record))

    assert data["msg"] == "Fetched feed"
    assert data["feed"] == {"feed_url": "https://example.com/rss", "body_bytes": 2048}


def test_json_formatter_ignores_unrelated_extra():
    """Test that only the known feed context fields are emitted."""
    record = make_record("Parsed feed", items=3, request_id="abc")

    data = json.loads(JsonFormatter().format(record))

    assert data["feed"] == {"items": 3}


def test_text_formatter_appends_feed_context():
    """Test that the dev formatter appends context as key=value pairs."""
    record = make_record(
        "Feed fetch returned 503", feed_url="https://example.com/rss", status_code=503
    )

    line = TextFormatter().format(record)

    assert line.endswith(
        "Feed fetch returned 503 [feed_url=https://example.com/rss status_code=503]"
    )


def test_text_formatter_without_context_is_unchanged():
    """Test that records without feed context keep the plain format."""
    line = TextFormatter().format(make_record("Unhandled error"))

    assert line.endswith(" - app.rss.fetcher - INFO - Unhandled error")


def test_parser_logs_carry_feed_context(caplog):
    """Test that the parser attaches item counts to its log records."""
    with caplog.at_level(logging.INFO, logger="app.rss.parser"):
        parse_feed("<rss><channel><item><title>Ep</title></item></channel></rss>")

    skipped, parsed = caplog.records
    assert skipped.item_index == 0
    assert parsed.items == 0


@pytest.mark.parametrize("env,json_output", [("prod", True), ("dev", False)])
def test_setup_logging_selects_formatter(restore_root_logger, env, json_output):
    """Test that prod uses the JSON formatter and dev a text formatter."""
    settings = MagicMock()
    settings.env = env

    with patch("app.logging.get_settings", return_value=settings):
        setup_logging()

    root = restore_root_logger
    assert len(root.handlers) == 1
    formatter = root.handlers[0].formatter
    assert isinstance(formatter, JsonFormatter) is json_output
    assert isinstance(formatter, TextFormatter) is not json_output
    assert root.level == logging.INFO
