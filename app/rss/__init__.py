"""RSS feed module for the Podcast Feed API."""

from .fetcher import FeedFetcher
from .models import IMAGE_UNAVAILABLE, FeedItem
from .parser import iter_items, parse_feed

__all__ = ["FeedFetcher", "FeedItem", "IMAGE_UNAVAILABLE", "iter_items", "parse_feed"]
