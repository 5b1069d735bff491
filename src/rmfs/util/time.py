from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

# Only "YYYY-MM-DDTHH:MM:SS" is significant in the store's timestamps.
_CLIENT_TIME_LEN = 19
_CLIENT_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


def parse_client_time(value: str) -> datetime:
    """
    Parse a ModifiedClient timestamp into tz-aware UTC datetime.

    Accepts strings like:
      - 2025-01-01T12:34:56Z
      - 2025-01-01T12:34:56.123456789Z
      - 2025-01-01T12:34:56

    Fractional seconds and the zone designator are dropped; the value is
    interpreted as UTC.
    """
    if not isinstance(value, str) or len(value.strip()) < _CLIENT_TIME_LEN:
        raise ValueError("client time must be a string of at least 19 characters")

    s = value.strip()[:_CLIENT_TIME_LEN]
    dt = datetime.strptime(s, _CLIENT_TIME_FORMAT)  # raises ValueError if invalid
    return dt.replace(tzinfo=timezone.utc)


def try_parse_client_time(value: object) -> Optional[datetime]:
    """Like parse_client_time, but returns None for missing/malformed input."""
    if not isinstance(value, str):
        return None
    try:
        return parse_client_time(value)
    except ValueError:
        return None
