"""Endpoint paths and wire field names of the document store API."""

from __future__ import annotations

DOCS_PATH: str = "/document-storage/json/2/docs"
DOCS_PARAMS: dict[str, str] = {"withBlob": "true"}

HASH_HEADER: str = "x-goog-hash"
LENGTH_HEADER: str = "content-length"

DOWNLOAD_CHUNK_SIZE: int = 1024 * 1024
PARTIAL_SUFFIX: str = ".part"
