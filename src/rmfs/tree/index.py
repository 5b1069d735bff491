"""PathIndex: path <-> item maps derived from lineages, and listings over them."""

from __future__ import annotations

import dataclasses
from typing import Iterable, Optional

from rmfs.errors import NotFoundError
from rmfs.models import DirEntry, Item
from rmfs.util.kinds import is_collection, is_document, is_listable
from rmfs.util.paths import SEP, normalize_path

from .lineage import BrokenReference, index_by_id, resolve_lineages


class PathIndex:
    """
    Hierarchical projection of a flat item set.

    Indexes:
        - items_by_id: id -> Item (arena, input order)
        - path_to_item: canonical path -> Item
        - item_to_path: id -> canonical path

    After build(), for every (path, item) in path_to_item,
    item.canonical_path == path. Sibling name collisions resolve to the
    item appearing last in the input.
    """

    def __init__(self) -> None:
        self.items_by_id: dict[str, Item] = {}
        self.path_to_item: dict[str, Item] = {}
        self.item_to_path: dict[str, str] = {}
        self.broken_references: list[BrokenReference] = []

    @classmethod
    def build(
        cls,
        items: Iterable[Item],
        *,
        max_depth: Optional[int] = None,
    ) -> PathIndex:
        """
        Resolve lineages for items and derive both path maps.

        The index works on copies; the caller's items are left untouched.
        """
        items = [dataclasses.replace(item, lineage=[], canonical_path="") for item in items]
        index = cls()
        index.items_by_id = index_by_id(items)

        resolved = resolve_lineages(items, max_depth=max_depth)
        index.broken_references = list(resolved.broken)

        for item_id, lineage in resolved.lineages.items():
            item = index.items_by_id[item_id]
            path = SEP.join(index.items_by_id[node].path_name for node in lineage)

            item.lineage = list(lineage)
            item.canonical_path = path
            index.path_to_item[path] = item
            index.item_to_path[item_id] = path

        return index

    def __len__(self) -> int:
        return len(self.items_by_id)

    # ----------------------------
    # Query helpers
    # ----------------------------
    def has(self, path: str) -> bool:
        return normalize_path(path) in self.path_to_item

    def resolve(self, path: str) -> Item:
        """Return the item at path. Raises NotFoundError if absent."""
        full = normalize_path(path)
        item = self.path_to_item.get(full)
        if item is None:
            raise NotFoundError("Path not found", details={"path": full})
        return item

    def path_of(self, item_id: str) -> str:
        try:
            return self.item_to_path[item_id]
        except KeyError as exc:
            raise NotFoundError("Item not found", details={"item_id": item_id}) from exc

    def root_items(self) -> list[Item]:
        """Items without resolvable ancestors (lineage length 1)."""
        return [item for item in self.items_by_id.values() if item.is_root_level]

    def list(self, path: str) -> list[DirEntry]:
        """
        List the directory at path.

        - "" (or "/") lists the root-level items.
        - A Collection lists its direct children.
        - A Document yields a single entry for itself.
        - Unknown kinds never appear.

        Raises:
            NotFoundError: if path does not resolve to an item.
        """
        full = normalize_path(path)

        if not full:
            found = self.root_items()
        else:
            this = self.resolve(full)
            if is_document(this.kind):
                found = [this]
            elif is_collection(this.kind):
                found = [
                    item
                    for child_path, item in self.path_to_item.items()
                    if child_path != full
                    and item.canonical_path == full + SEP + item.path_name
                ]
            else:
                found = []

        out = [_to_entry(item) for item in found if is_listable(item.kind)]
        out.sort(key=lambda e: (e.name, e.item.id))
        return out


def _to_entry(item: Item) -> DirEntry:
    return DirEntry(
        name=item.canonical_path,
        is_dir=is_collection(item.kind),
        item=item,
        mod_time=item.modified_client,
    )
