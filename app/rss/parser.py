"""Podcast RSS parsing into FeedItem records."""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator

from app.errors import MalformedItemError, ParseError

from .models import IMAGE_UNAVAILABLE, FeedItem

logger = logging.getLogger(__name__)

# XML namespaces used by podcast RSS feeds
NAMESPACES = {
    "itunes": "http://www.itunes.com/dtds/podcast-1.0.dtd",
}


def _first_attribute(elem: ET.Element) -> str | None:
    """Return the value of the element's first attribute in document order."""
    return next(iter(elem.attrib.values()), None)


def _parse_item(index: int, item: ET.Element) -> FeedItem:
    """
    Build a FeedItem from a single <item> element.

    Args:
        index: Zero-based position of the item in the document
        item: The <item> element

    Returns:
        The extracted FeedItem

    Raises:
        MalformedItemError: If the enclosure element or its attribute is missing
    """
    title_elem = item.find("title")
    title = title_elem.text if title_elem is not None and title_elem.text else ""

    enclosure_elem = item.find("enclosure")
    if enclosure_elem is None:
        raise MalformedItemError(index, "missing enclosure element")
    enclosure_url = _first_attribute(enclosure_elem)
    if enclosure_url is None:
        raise MalformedItemError(index, "enclosure has no attributes")

    image_url = IMAGE_UNAVAILABLE
    image_elem = item.find("itunes:image", NAMESPACES)
    if image_elem is not None:
        image_url = _first_attribute(image_elem) or IMAGE_UNAVAILABLE

    return FeedItem(title=title, enclosure_url=enclosure_url, image_url=image_url)


def iter_items(xml_text: str | bytes) -> Iterator[FeedItem | MalformedItemError]:
    """
    Yield one result per <item> element, at any depth, in document order.

    Malformed items are yielded as MalformedItemError instances rather than
    raised, so the caller decides whether to skip them or fail.

    Args:
        xml_text: Raw feed document; bytes are decoded per the XML declaration

    Raises:
        ParseError: If the document is not well-formed XML
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise ParseError(str(e)) from e

    for index, item in enumerate(root.iter("item")):
        try:
            yield _parse_item(index, item)
        except MalformedItemError as e:
            yield e


def parse_feed(xml_text: str | bytes, strict: bool = False) -> list[FeedItem]:
    """
    Parse a podcast feed into an ordered list of FeedItem objects.

    Args:
        xml_text: Raw feed document
        strict: Raise on the first malformed item instead of skipping it

    Returns:
        Items in document order

    Raises:
        ParseError: If the document is not well-formed XML
        MalformedItemError: If strict and an item lacks its enclosure
    """
    items = []
    for result in iter_items(xml_text):
        if isinstance(result, MalformedItemError):
            if strict:
                raise result
            logger.warning(
                f"Skipping malformed feed item: {result.reason}",
                extra={"item_index": result.index},
            )
            continue
        items.append(result)

    logger.info("Parsed feed", extra={"items": len(items)})
    return items
