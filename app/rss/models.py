"""Pydantic models for podcast feed items."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Served as imageUrl when an episode has no artwork
IMAGE_UNAVAILABLE = "Imagem indisponível"


class FeedItem(BaseModel):
    """Represents a single episode from a podcast RSS feed.

    Serialized with camel-case keys: ``title``, ``enclosureUrl``, ``imageUrl``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    title: str = ""
    enclosure_url: str
    image_url: str = IMAGE_UNAVAILABLE
