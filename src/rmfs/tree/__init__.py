"""Flat-to-hierarchical projection of the document store."""

from __future__ import annotations

from .index import PathIndex
from .lineage import BrokenReference, LineageResult, index_by_id, resolve_lineages

__all__ = [
    "PathIndex",
    "BrokenReference",
    "LineageResult",
    "index_by_id",
    "resolve_lineages",
]
