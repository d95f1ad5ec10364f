"""FastAPI dependencies for API routers."""

from fastapi import Depends

from app.config import Settings, get_settings
from app.rss.fetcher import FeedFetcher


def get_fetcher(settings: Settings = Depends(get_settings)) -> FeedFetcher:
    """Dependency for FastAPI routes to get a fetcher for the configured feed.

    Returns:
        FeedFetcher bound to the feed URL from settings
    """
    return FeedFetcher(settings.feed_url, timeout=settings.fetch_timeout_seconds)
