"""Public model exports for rmfs."""

from __future__ import annotations

from .entry import BlobDetails, DirEntry
from .item import Item, make_trash_item

__all__ = [
    "Item",
    "DirEntry",
    "BlobDetails",
    "make_trash_item",
]
