from __future__ import annotations

DOCUMENT_KIND: str = "DocumentType"
COLLECTION_KIND: str = "CollectionType"

# The store's own spelling is "<Kind>Type"; bare names are accepted as well.
_DOCUMENT_ALIASES: frozenset[str] = frozenset({DOCUMENT_KIND, "Document"})
_COLLECTION_ALIASES: frozenset[str] = frozenset({COLLECTION_KIND, "Collection"})

TRASH_ID: str = "trash"
TRASH_NAME: str = "Trash"


def is_document(kind: str) -> bool:
    return kind in _DOCUMENT_ALIASES


def is_collection(kind: str) -> bool:
    return kind in _COLLECTION_ALIASES


def is_listable(kind: str) -> bool:
    """
    Returns True if an item of this kind shows up in directory listings.

    Unknown kinds are neither leaves nor directories and are skipped.
    """
    return is_document(kind) or is_collection(kind)
