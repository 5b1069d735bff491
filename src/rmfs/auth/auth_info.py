"""Authentication information for rmfs (device token only)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    Only the device token flow is supported:
        kind = "device_token"
        data must include:
            - device_token: token returned when the device was registered
    """

    kind: str
    data: dict[str, Any]

    def __post_init__(self) -> None:
        if self.kind != "device_token":
            raise ValueError("AuthInfo.kind must be 'device_token'")

        if not isinstance(self.data, dict):
            raise TypeError("AuthInfo.data must be a dict")

        value = self.data.get("device_token")
        if not isinstance(value, str) or not value.strip():
            raise ValueError("AuthInfo.data['device_token'] must be a non-empty string")

    @property
    def device_token(self) -> str:
        """Long-lived device token, exchanged for short-lived user tokens."""
        return str(self.data["device_token"]).strip()

    def __repr__(self) -> str:
        return f"AuthInfo(kind={self.kind!r}, data=<redacted>)"
