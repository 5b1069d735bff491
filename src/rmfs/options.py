"""Filesystem options for rmfs."""

from __future__ import annotations

from dataclasses import dataclass

from rmfs.util.paths import normalize_path

AUTH_ROOT_URL: str = "https://my.remarkable.com"
STORAGE_ROOT_URL: str = (
    "https://document-storage-production-dot-remarkable-production.appspot.com"
)


@dataclass(slots=True, frozen=True)
class FsOptions:
    """
    Options of one RemarkableFs session.

    root:
        Store-relative path the filesystem is rooted at ("" = store root).
        Surrounding separators are stripped.
    include_trash:
        Inject the synthetic "Trash" collection before projection.
    """

    root: str = ""
    include_trash: bool = True
    timeout_sec: float = 30.0
    max_retries: int = 3
    initial_delay_sec: float = 1.0
    auth_root_url: str = AUTH_ROOT_URL
    storage_root_url: str = STORAGE_ROOT_URL

    def __post_init__(self) -> None:
        if not isinstance(self.root, str):
            raise TypeError("FsOptions.root must be a str")
        object.__setattr__(self, "root", normalize_path(self.root))

        if self.timeout_sec <= 0:
            raise ValueError("FsOptions.timeout_sec must be positive")
        if self.max_retries < 0:
            raise ValueError("FsOptions.max_retries must be >= 0")
        if self.initial_delay_sec < 0:
            raise ValueError("FsOptions.initial_delay_sec must be >= 0")

        for key in ("auth_root_url", "storage_root_url"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.startswith(("https://", "http://")):
                raise ValueError(f"FsOptions.{key} must be an http(s) URL")
            object.__setattr__(self, key, value.rstrip("/"))
