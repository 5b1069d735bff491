"""rmfs public API."""

from __future__ import annotations

import logging

from rmfs.auth import AuthInfo, TokenClient
from rmfs.errors import (
    ApiError,
    AuthError,
    FetchError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidStateError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RmfsError,
    map_http_error,
)
from rmfs.manager import RemarkableFs
from rmfs.models import BlobDetails, DirEntry, Item
from rmfs.options import FsOptions
from rmfs.tree import BrokenReference, PathIndex, resolve_lineages

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # High-level
    "RemarkableFs",
    "FsOptions",
    # Projection
    "PathIndex",
    "BrokenReference",
    "resolve_lineages",
    # Auth
    "AuthInfo",
    "TokenClient",
    # Models
    "Item",
    "DirEntry",
    "BlobDetails",
    # Errors
    "RmfsError",
    "InvalidStateError",
    "InvalidArgumentError",
    "NotFoundError",
    "FetchError",
    "AuthError",
    "RateLimitError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
