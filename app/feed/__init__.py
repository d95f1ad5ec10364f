"""Response encoding for podcast feed items."""

from .encoder import accepts_gzip, encode_items, serialize_items

__all__ = ["accepts_gzip", "encode_items", "serialize_items"]
