"""Exception hierarchy and HTTP error mapping for rmfs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class RmfsError(Exception):
    """
    Base exception for rmfs.

    Attributes:
        details: Optional structured information (e.g., HTTP status, path).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidStateError(RmfsError):
    """Raised when the library is used in an invalid state."""


class InvalidArgumentError(RmfsError):
    """Raised when arguments passed to rmfs are invalid."""


class NotFoundError(RmfsError):
    """Raised when a path does not resolve to any item of the projection."""


class FetchError(RmfsError):
    """Raised when talking to the document store fails."""


class AuthError(FetchError):
    """Raised when the token exchange fails or the store rejects the token."""


class RateLimitError(FetchError):
    """Raised when rate-limited (HTTP 429)."""


class NetworkError(FetchError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(FetchError):
    """Raised for unclassified API errors (5xx, unknown 4xx, bad payloads)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to rmfs exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> FetchError:
    """
    Map an HTTP error to an rmfs exception.

    Policy:
        - 401/403 -> AuthError
        - 429 -> RateLimitError
        - 5xx -> ApiError
        - otherwise -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code in (401, 403):
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)
    if 500 <= info.status_code <= 599:
        return ApiError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
