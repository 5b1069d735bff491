"""Public error exports for rmfs."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
