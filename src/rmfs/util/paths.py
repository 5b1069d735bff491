"""Path helpers shared by the path index and the session handle."""

from __future__ import annotations

SEP: str = "/"


def split_levels(path: str) -> list[str]:
    """
    Split a path into its segments.

    Leading and trailing separators are ignored; an empty path (or "/")
    yields no segments and denotes the store root.
    """
    stripped = path.strip(SEP)
    if not stripped:
        return []
    return stripped.split(SEP)


def normalize_path(path: str) -> str:
    return SEP.join(split_levels(path))


def join_root(root: str, path: str) -> str:
    """Join the configured root prefix and a root-relative path."""
    return SEP.join(split_levels(root) + split_levels(path))


def strip_root(path: str, root: str, *, own_name: str) -> str:
    """
    Turn a canonical path into a path relative to root.

    Mirrors the prefix used by join_root: the item sitting exactly at the
    root is presented by its own name.
    """
    root = normalize_path(root)
    if not root:
        return path
    if path == root:
        return own_name
    prefix = root + SEP
    if path.startswith(prefix):
        return path[len(prefix):]
    return path
