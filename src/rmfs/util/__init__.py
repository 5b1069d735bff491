from .kinds import (
    COLLECTION_KIND,
    DOCUMENT_KIND,
    TRASH_ID,
    TRASH_NAME,
    is_collection,
    is_document,
    is_listable,
)
from .paths import join_root, normalize_path, split_levels, strip_root
from .time import parse_client_time, try_parse_client_time

__all__ = [
    "DOCUMENT_KIND",
    "COLLECTION_KIND",
    "TRASH_ID",
    "TRASH_NAME",
    "is_document",
    "is_collection",
    "is_listable",
    "split_levels",
    "normalize_path",
    "join_root",
    "strip_root",
    "parse_client_time",
    "try_parse_client_time",
]
