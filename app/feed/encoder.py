"""JSON response encoding with optional gzip compression."""

import gzip
import io
import logging
from typing import Sequence

from fastapi import Response
from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from app.errors import EncodeError
from app.rss.models import FeedItem

logger = logging.getLogger(__name__)

_items_adapter = TypeAdapter(list[FeedItem])


def accepts_gzip(accept_encoding: str | None) -> bool:
    """Check whether an Accept-Encoding header lists the gzip token.

    Args:
        accept_encoding: Raw header value, or None if the header is absent

    Returns:
        True if any comma separated coding is "gzip" (parameters ignored)
    """
    if not accept_encoding:
        return False
    for coding in accept_encoding.split(","):
        if coding.split(";", 1)[0].strip().lower() == "gzip":
            return True
    return False


def serialize_items(items: Sequence[FeedItem]) -> bytes:
    """Serialize items as a compact UTF-8 JSON array with camel-case keys."""
    try:
        return _items_adapter.dump_json(list(items), by_alias=True)
    except (PydanticSerializationError, ValueError, TypeError) as e:
        logger.error("Failed to serialize feed items", exc_info=True)
        raise EncodeError() from e


def gzip_bytes(data: bytes, compresslevel: int = 6) -> bytes:
    """Compress data into a single gzip member."""
    buffer = io.BytesIO()
    with gzip.GzipFile(fileobj=buffer, mode="wb", compresslevel=compresslevel) as gz:
        gz.write(data)
    return buffer.getvalue()


def encode_items(
    items: Sequence[FeedItem],
    accept_encoding: str | None,
    gzip_mode: str = "negotiate",
    compresslevel: int = 6,
) -> Response:
    """
    Build the 200 JSON response for a list of feed items.

    Args:
        items: Items in the order they should appear in the array
        accept_encoding: The request's Accept-Encoding header, if any
        gzip_mode: "negotiate" compresses only when the client accepts gzip,
            "always" compresses unconditionally, "never" disables compression
        compresslevel: gzip compression level (0-9)

    Returns:
        Response with media type application/json

    Raises:
        EncodeError: If the items cannot be serialized
    """
    body = serialize_items(items)
    headers = {}

    if gzip_mode == "negotiate":
        headers["Vary"] = "Accept-Encoding"
        compress = accepts_gzip(accept_encoding)
    else:
        compress = gzip_mode == "always"

    if compress:
        body = gzip_bytes(body, compresslevel)
        headers["Content-Encoding"] = "gzip"

    return Response(content=body, media_type="application/json", headers=headers)
