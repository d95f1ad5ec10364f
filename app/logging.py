"""Logging configuration for the Podcast Feed API."""

import json
import logging
import sys

from app.config import get_settings

# Attributes passed through ``extra=`` by the fetcher and parser
FEED_CONTEXT_FIELDS = ("feed_url", "status_code", "body_bytes", "items", "item_index")


def feed_context(record: logging.LogRecord) -> dict:
    """Collect the feed context fields attached to a record, in a fixed order."""
    return {
        name: getattr(record, name)
        for name in FEED_CONTEXT_FIELDS
        if hasattr(record, name)
    }


class JsonFormatter(logging.Formatter):
    """JSON formatter for production logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as a single JSON line."""
        base = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        if context := feed_context(record):
            base["feed"] = context
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Readable formatter for development that appends feed context as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = feed_context(record)
        if not context:
            return line
        pairs = " ".join(f"{name}={value}" for name, value in context.items())
        # Keep any traceback on the lines after the message
        head, sep, tail = line.partition("\n")
        return f"{head} [{pairs}]{sep}{tail}"


def setup_logging() -> None:
    """Configure logging based on environment."""
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)

    if settings.env == "prod":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(TextFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.INFO)
