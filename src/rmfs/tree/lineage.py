"""Lineage resolution: flat parent pointers -> root-first ancestor chains."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Literal, Optional

from rmfs.models import Item

logger = logging.getLogger(__name__)

BrokenReason = Literal["missing", "cycle"]


@dataclass(slots=True, frozen=True)
class BrokenReference:
    """
    A parent pointer that could not be followed.

    The affected item's lineage is truncated at the last resolvable
    ancestor; this record is informational only.
    """

    item_id: str
    parent_id: str
    reason: BrokenReason


@dataclass(slots=True)
class LineageResult:
    lineages: dict[str, list[str]] = field(default_factory=dict)
    broken: list[BrokenReference] = field(default_factory=list)


def index_by_id(items: Iterable[Item]) -> dict[str, Item]:
    """Build the id -> item arena. Later duplicates replace earlier ones."""
    arena: dict[str, Item] = {}
    for item in items:
        arena[item.id] = item
    return arena


def resolve_lineages(
    items: Iterable[Item],
    *,
    max_depth: Optional[int] = None,
) -> LineageResult:
    """
    Compute the lineage of every item.

    For each item, parent pointers are followed upwards until the parent
    id is empty or does not resolve. Ancestors are collected root-first
    and the item's own id is appended last.

    A walk is bounded by max_depth ancestors (default: the item count)
    and stops on a revisited id. Both cases, like a missing parent, are
    recorded as BrokenReference and never raise.
    """
    arena = index_by_id(items)
    limit = len(arena) if max_depth is None else max_depth

    result = LineageResult()
    for item_id, item in arena.items():
        ancestors: list[str] = []
        seen: set[str] = {item_id}
        parent = item.parent_id

        while parent:
            parent_item = arena.get(parent)
            if parent_item is None:
                result.broken.append(BrokenReference(item_id, parent, "missing"))
                break
            if parent in seen or len(ancestors) >= limit:
                result.broken.append(BrokenReference(item_id, parent, "cycle"))
                break

            seen.add(parent)
            ancestors.append(parent)
            parent = parent_item.parent_id

        ancestors.reverse()
        ancestors.append(item_id)
        result.lineages[item_id] = ancestors

    for ref in result.broken:
        logger.debug(
            "lineage of %s truncated at parent %s (%s)",
            ref.item_id,
            ref.parent_id,
            ref.reason,
        )

    return result
