"""RemarkableFs: session handle exposing the document store as a filesystem."""

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import Optional

from rmfs.auth import AuthInfo
from rmfs.controller import RemarkableController
from rmfs.errors import InvalidArgumentError, InvalidStateError
from rmfs.models import BlobDetails, DirEntry, Item, make_trash_item
from rmfs.options import FsOptions
from rmfs.tree import PathIndex
from rmfs.util.kinds import is_document
from rmfs.util.paths import join_root, strip_root

logger = logging.getLogger(__name__)


class RemarkableFs:
    """
    Read-only hierarchical view of the document store.

    The projection (PathIndex) is built on first access and then reused for
    the lifetime of this object. Queries never rebuild it; call refresh()
    to rebuild from a new snapshot.
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        options: Optional[FsOptions] = None,
        name: str = "remarkable",
    ) -> None:
        opts = options or FsOptions()
        self._init_state(RemarkableController(auth_info, options=opts), opts, name)

    @classmethod
    def from_controller(
        cls,
        controller: RemarkableController,
        *,
        options: Optional[FsOptions] = None,
        name: str = "remarkable",
    ) -> "RemarkableFs":
        """Create a filesystem with an injected controller (useful for tests)."""
        obj = cls.__new__(cls)
        obj._init_state(controller, options or FsOptions(), name)
        return obj

    def _init_state(
        self,
        controller: RemarkableController,
        options: FsOptions,
        name: str,
    ) -> None:
        self._controller = controller
        self._options = options
        self._name = name
        self._index: Optional[PathIndex] = None
        self._build_lock = threading.Lock()

    # ----------------------------
    # Properties
    # ----------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def root(self) -> str:
        """Configured root prefix (no surrounding separators)."""
        return self._options.root

    @property
    def options(self) -> FsOptions:
        return self._options

    @property
    def is_loaded(self) -> bool:
        return self._index is not None

    @property
    def index(self) -> PathIndex:
        """Return the projection, fetching and building it on first use."""
        index = self._index
        if index is not None:
            return index

        with self._build_lock:
            if self._index is None:
                self._index = self._build()
            return self._index

    def __str__(self) -> str:
        return self._name

    # ----------------------------
    # Read APIs
    # ----------------------------
    def list(self, dir_name: str = "") -> list[DirEntry]:
        """
        List dir_name (relative to root).

        Entry names are root-relative paths.

        Raises:
            NotFoundError: if the directory does not resolve.
            FetchError: if the initial item fetch fails.
        """
        full = join_root(self.root, dir_name)
        entries = self.index.list(full)
        return [
            dataclasses.replace(e, name=self.root_relative_path(e.item))
            for e in entries
        ]

    def resolve_item(self, remote: str) -> Item:
        """
        Return the item at remote (relative to root).

        Raises:
            NotFoundError: if remote does not resolve.
        """
        return self.index.resolve(join_root(self.root, remote))

    def root_relative_path(self, item: Item) -> str:
        """The item's canonical path with the configured root stripped."""
        if not item.lineage:
            raise InvalidStateError(
                "Item is not part of the projection",
                details={"item_id": item.id},
            )
        return strip_root(item.canonical_path, self.root, own_name=item.path_name)

    def blob_details(self, item: Item) -> BlobDetails:
        """Return blob size/MD5, fetching them once and caching on the item."""
        if not is_document(item.kind):
            raise InvalidArgumentError(
                "Only documents have blob details",
                details={"item_id": item.id, "kind": item.kind},
            )
        if item.size is None:
            details = self._controller.get_blob_details(item)
            item.size = details.size
            item.md5_checksum = details.md5_checksum
        return BlobDetails(size=item.size, md5_checksum=item.md5_checksum)

    def download(self, remote: str, local_path: str, *, overwrite: bool = False) -> Item:
        """Download the raw blob of the document at remote to local_path."""
        item = self.resolve_item(remote)
        self._controller.download_blob(item, local_path, overwrite=overwrite)
        return item

    def refresh(self) -> PathIndex:
        """Fetch a new snapshot and rebuild the projection wholesale."""
        with self._build_lock:
            self._index = self._build()
            return self._index

    # ----------------------------
    # Internals
    # ----------------------------
    def _build(self) -> PathIndex:
        items = self._controller.list_items()
        if self._options.include_trash:
            items = items + [make_trash_item()]

        index = PathIndex.build(items)
        logger.info(
            "built projection: %d items, %d paths, %d broken references",
            len(index),
            len(index.path_to_item),
            len(index.broken_references),
        )
        return index
