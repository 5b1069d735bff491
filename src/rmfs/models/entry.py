"""Listing and blob metadata models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .item import Item


@dataclass(slots=True, frozen=True)
class DirEntry:
    """One entry of a directory listing."""

    name: str
    is_dir: bool
    item: Item
    mod_time: Optional[datetime] = None

    @property
    def item_id(self) -> str:
        return self.item.id


@dataclass(slots=True, frozen=True)
class BlobDetails:
    """Metadata of a document's raw blob (from a HEAD request)."""

    size: int
    md5_checksum: Optional[str] = None
