"""Document store API controller (internal use only)."""

from __future__ import annotations

import base64
import binascii
import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

import requests

from rmfs.auth import AuthInfo, TokenClient
from rmfs.errors import (
    ApiError,
    AuthError,
    FetchError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    RateLimitError,
    RmfsError,
    map_http_error,
)
from rmfs.models import BlobDetails, Item
from rmfs.options import FsOptions
from rmfs.util.kinds import is_document
from rmfs.util.time import try_parse_client_time

from .endpoints import (
    DOCS_PARAMS,
    DOCS_PATH,
    DOWNLOAD_CHUNK_SIZE,
    HASH_HEADER,
    LENGTH_HEADER,
    PARTIAL_SUFFIX,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class _RetryPolicy:
    max_retries: int = 3
    initial_delay_sec: float = 1.0


class RemarkableController:
    """
    Document store API controller (internal only).

    Notes:
        - The requests session is NOT exposed.
        - Every call goes through _execute (error mapping + retry).
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        options: Optional[FsOptions] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        opts = options or FsOptions()
        self._session = session or requests.Session()
        self._timeout_sec = opts.timeout_sec
        self._docs_url = opts.storage_root_url + DOCS_PATH
        self._retry_policy = _RetryPolicy(
            max_retries=opts.max_retries,
            initial_delay_sec=opts.initial_delay_sec,
        )
        self._tokens = TokenClient(
            auth_info,
            self._session,
            auth_root_url=opts.auth_root_url,
            timeout_sec=opts.timeout_sec,
        )

    @classmethod
    def from_session(
        cls,
        session: requests.Session,
        auth_info: AuthInfo,
        *,
        options: Optional[FsOptions] = None,
    ) -> "RemarkableController":
        """Create controller on a pre-built session (useful for tests)."""
        return cls(auth_info, options=options, session=session)

    # ----------------------------
    # Public API
    # ----------------------------
    def list_items(self) -> list[Item]:
        """
        Fetch the whole flat item set in one call.

        Raises:
            FetchError (or a subclass) on any transport/API failure.
        """
        logger.info("fetching item list")
        try:
            payload = self._execute(self._fetch_docs)
        except AuthError:
            # The cached user token may have expired; exchange once more.
            logger.info("user token rejected, exchanging device token again")
            self._tokens.invalidate()
            payload = self._execute(self._fetch_docs)

        if not isinstance(payload, list):
            raise ApiError(
                "Unexpected item list payload",
                details={"type": type(payload).__name__},
            )

        items: list[Item] = []
        for raw in payload:
            if not isinstance(raw, dict) or not isinstance(raw.get("ID"), str):
                logger.warning("skipping malformed item entry in item list")
                continue
            items.append(_doc_dict_to_item(raw))

        logger.info("fetched %d items", len(items))
        return items

    def get_blob_details(self, item: Item) -> BlobDetails:
        """HEAD the item's blob and return its size and MD5 checksum."""
        url = _require_blob_url(item)

        def head() -> requests.Response:
            resp = self._session.head(url, timeout=self._timeout_sec, allow_redirects=True)
            resp.raise_for_status()
            return resp

        resp = self._execute(head)
        return BlobDetails(
            size=_parse_length(resp.headers.get(LENGTH_HEADER)),
            md5_checksum=_parse_md5(resp.headers.get(HASH_HEADER)),
        )

    def download_blob(
        self,
        item: Item,
        local_path: str,
        *,
        overwrite: bool = False,
    ) -> None:
        """Stream the item's raw blob to local_path (no transcoding)."""
        if not local_path or not isinstance(local_path, str):
            raise InvalidArgumentError("local_path must be a non-empty string")
        if not overwrite and os.path.exists(local_path):
            raise InvalidArgumentError(
                "Destination file exists and overwrite is False",
                details={"local_path": local_path},
            )
        if not is_document(item.kind):
            raise InvalidArgumentError(
                "Only documents can be downloaded",
                details={"item_id": item.id, "kind": item.kind},
            )
        url = _require_blob_url(item)

        parent_dir = os.path.dirname(local_path)
        if parent_dir:
            os.makedirs(parent_dir, exist_ok=True)

        # Bytes land in a sibling temp file; local_path only ever sees a full blob.
        part_path = local_path + PARTIAL_SUFFIX

        def fetch() -> None:
            with self._session.get(url, stream=True, timeout=self._timeout_sec) as resp:
                resp.raise_for_status()
                with open(part_path, "wb") as f:
                    for chunk in resp.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)

        try:
            self._execute(fetch)
            os.replace(part_path, local_path)
        except BaseException:
            if os.path.exists(part_path):
                os.remove(part_path)
            raise

    # ----------------------------
    # Internals
    # ----------------------------
    def _fetch_docs(self) -> Any:
        token = self._tokens.get_user_token()
        resp = self._session.get(
            self._docs_url,
            params=dict(DOCS_PARAMS),
            headers={"Authorization": f"Bearer {token}"},
            timeout=self._timeout_sec,
        )
        resp.raise_for_status()
        return resp.json()

    def _execute(self, func: Callable[[], T]) -> T:
        delay = self._retry_policy.initial_delay_sec
        for attempt in range(self._retry_policy.max_retries + 1):
            try:
                return func()
            except Exception as exc:
                mapped = self._map_exception(exc)
                if self._should_retry(mapped) and attempt < self._retry_policy.max_retries:
                    logger.debug(
                        "retrying after %s (attempt %d/%d, sleeping %.1fs)",
                        type(mapped).__name__,
                        attempt + 1,
                        self._retry_policy.max_retries,
                        delay,
                    )
                    time.sleep(delay)
                    delay *= 2
                    continue
                if self._should_retry(mapped):
                    logger.warning(
                        "giving up after %d retries: %s",
                        self._retry_policy.max_retries,
                        mapped,
                    )
                if mapped is exc:
                    raise
                raise mapped from exc

        raise ApiError("Unexpected retry loop termination")

    def _should_retry(self, exc: Exception) -> bool:
        if isinstance(exc, RateLimitError):
            return True
        if isinstance(exc, NetworkError):
            return True
        if isinstance(exc, ApiError):
            status_code = getattr(exc, "details", {}).get("status_code")
            return isinstance(status_code, int) and 500 <= status_code <= 599
        return False

    def _map_exception(self, exc: Exception) -> Exception:
        if isinstance(exc, RmfsError):
            return exc

        if isinstance(exc, requests.HTTPError):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
            return NetworkError("Network error", cause=exc)

        if isinstance(exc, ValueError):
            return ApiError("Malformed response from document store", cause=exc)

        if isinstance(exc, OSError):
            return FetchError("I/O error while fetching", cause=exc)

        return ApiError("Document store API error", cause=exc)


def _doc_dict_to_item(data: dict[str, Any]) -> Item:
    def text(key: str) -> str:
        value = data.get(key)
        return value if isinstance(value, str) else ""

    def number(key: str) -> int:
        value = data.get(key)
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.isdigit():
            return int(value)
        return 0

    return Item(
        id=text("ID"),
        parent_id=text("Parent"),
        display_name=text("VissibleName"),
        kind=text("Type"),
        version=number("Version"),
        modified_client=try_parse_client_time(data.get("ModifiedClient")),
        blob_url=text("BlobURLGet"),
        blob_url_expires=text("BlobURLGetExpires"),
        current_page=number("CurrentPage"),
        bookmarked=bool(data.get("Bookmarked", False)),
    )


def _require_blob_url(item: Item) -> str:
    if not item.blob_url:
        raise InvalidArgumentError(
            "Item has no blob URL",
            details={"item_id": item.id},
        )
    return item.blob_url


def _parse_md5(header: Optional[str]) -> Optional[str]:
    """Extract the hex MD5 from an "x-goog-hash: crc32c=...,md5=..." header."""
    if not header:
        return None
    for part in header.split(","):
        key, _, value = part.strip().partition("=")
        if key.lower() != "md5" or not value:
            continue
        try:
            return base64.b64decode(value, validate=True).hex()
        except (binascii.Error, ValueError):
            return None
    return None


def _parse_length(header: Optional[str]) -> int:
    if isinstance(header, str) and header.strip().isdigit():
        return int(header.strip())
    return 0


def _http_error_to_info(exc: requests.HTTPError) -> HttpErrorInfo:
    resp = exc.response
    status_code = getattr(resp, "status_code", None)
    reason = getattr(resp, "reason", None)

    message = None
    details: dict[str, Any] = {}
    body = getattr(resp, "text", None)
    if isinstance(body, str) and body.strip():
        message = body.strip()[:200]
    url = getattr(resp, "url", None)
    if isinstance(url, str) and url:
        details["url"] = url.split("?", 1)[0]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
