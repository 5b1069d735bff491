"""Data model for document store items."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from rmfs.util.kinds import COLLECTION_KIND, TRASH_ID, TRASH_NAME


@dataclass(slots=True)
class Item:
    """
    Represents one node (document or collection) of the flat store.

    Notes:
        - parent_id == "" means the item sits at the store root.
        - lineage and canonical_path are derived fields, written only by
          the projection build (rmfs.tree).
        - md5_checksum and size stay None until blob metadata is fetched.
    """

    id: str
    parent_id: str
    display_name: str
    kind: str

    version: int = 0
    modified_client: Optional[datetime] = None
    blob_url: str = ""
    blob_url_expires: str = ""
    current_page: int = 0
    bookmarked: bool = False

    lineage: list[str] = field(default_factory=list)
    canonical_path: str = ""

    md5_checksum: Optional[str] = None
    size: Optional[int] = None

    @property
    def is_root_level(self) -> bool:
        return len(self.lineage) == 1

    @property
    def path_name(self) -> str:
        """Path segment of this item: its display name, or its id when unnamed."""
        return self.display_name or self.id


def make_trash_item() -> Item:
    """Synthetic root-level collection holding the items the store has trashed."""
    return Item(
        id=TRASH_ID,
        parent_id="",
        display_name=TRASH_NAME,
        kind=COLLECTION_KIND,
    )
