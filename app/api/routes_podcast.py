"""Podcast feed endpoint for the Podcast Feed API."""

from fastapi import APIRouter, Depends, Request, Response

from app.api.dependencies import get_fetcher
from app.config import Settings, get_settings
from app.feed.encoder import encode_items
from app.rss.fetcher import FeedFetcher
from app.rss.parser import parse_feed

router = APIRouter(prefix="/api/podcast", tags=["podcast"])


@router.options("")
async def podcast_preflight():
    """
    CORS preflight.

    Returns an empty 200 response; the CORS headers are added by middleware.
    The upstream feed is never fetched.
    """
    return Response(status_code=200)


@router.get("")
async def get_podcast(
    request: Request,
    fetcher: FeedFetcher = Depends(get_fetcher),
    settings: Settings = Depends(get_settings),
):
    """
    Fetch the podcast feed and return its episodes as JSON.

    This endpoint:
    1. Fetches the RSS document from the configured feed URL
    2. Extracts title, enclosure URL and artwork URL from every <item>
    3. Serializes the items as a compact JSON array, gzip-compressed when
       the client accepts it

    Returns:
        JSON array of {"title", "enclosureUrl", "imageUrl"} objects

    Fetch, parse and encode failures raise FeedError subclasses, which the
    application converts into plain-text 500 responses.
    """
    xml_text = await fetcher.fetch()
    items = parse_feed(xml_text, strict=settings.malformed_item_policy == "fail")

    return encode_items(
        items,
        request.headers.get("accept-encoding"),
        gzip_mode=settings.gzip_mode,
        compresslevel=settings.gzip_compresslevel,
    )
