"""Public auth exports for rmfs."""

from __future__ import annotations

from .auth_info import AuthInfo
from .token_client import TokenClient

__all__ = ["AuthInfo", "TokenClient"]
