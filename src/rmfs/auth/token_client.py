"""Device token -> user token exchange."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from rmfs.errors import AuthError, HttpErrorInfo, NetworkError, map_http_error

from .auth_info import AuthInfo

logger = logging.getLogger(__name__)

USER_TOKEN_PATH: str = "/token/json/2/user/new"


class TokenClient:
    """Exchange the device token for a user token and cache it."""

    def __init__(
        self,
        auth_info: AuthInfo,
        session: requests.Session,
        *,
        auth_root_url: str,
        timeout_sec: float = 30.0,
    ) -> None:
        if auth_info.kind != "device_token":
            raise AuthError("TokenClient requires AuthInfo(kind='device_token')")
        self._auth_info = auth_info
        self._session = session
        self._url = auth_root_url.rstrip("/") + USER_TOKEN_PATH
        self._timeout_sec = timeout_sec
        self._user_token: Optional[str] = None

    def get_user_token(self) -> str:
        """
        Return a user token, exchanging the device token when none is cached.

        Raises:
            AuthError: if the store rejects the device token or returns no token.
            NetworkError: if the store cannot be reached.
        """
        if self._user_token is not None:
            return self._user_token

        logger.debug("exchanging device token for user token")
        try:
            resp = self._session.post(
                self._url,
                headers={"Authorization": f"Bearer {self._auth_info.device_token}"},
                timeout=self._timeout_sec,
            )
        except (requests.ConnectionError, requests.Timeout) as exc:
            raise NetworkError("Token exchange failed", cause=exc) from exc

        if resp.status_code >= 400:
            info = HttpErrorInfo(
                status_code=resp.status_code,
                reason=resp.reason,
                message="Token exchange rejected",
            )
            mapped = map_http_error(info)
            if resp.status_code < 500 and not isinstance(mapped, AuthError):
                mapped = AuthError("Token exchange rejected", details=mapped.details)
            raise mapped

        token = resp.text.strip()
        if not token:
            raise AuthError("Token exchange returned an empty token")

        self._user_token = token
        return token

    def invalidate(self) -> None:
        """Drop the cached user token; the next call exchanges again."""
        self._user_token = None
