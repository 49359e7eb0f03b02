"""
Time Utilities

Conversions between ``timedelta`` and the integer units Redis speaks.

Policy:
- TTLs are ``timedelta`` at the repository boundary.
- Redis commands receive whole milliseconds (``PX`` / ``PEXPIRE`` / ``PTTL``).
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional


def to_milliseconds(ttl: timedelta) -> int:
    """Convert a timedelta to whole milliseconds, rounding any fraction up."""
    return -(-ttl // timedelta(milliseconds=1))


def from_seconds(seconds: float) -> timedelta:
    """Build a timedelta from a number of seconds."""
    return timedelta(seconds=seconds)


def from_pttl(pttl: Optional[int]) -> Optional[timedelta]:
    """
    Interpret a Redis ``PTTL`` reply.

    Returns `None` when the key does not exist (-2) or carries no expiry (-1).
    """
    if pttl is None or pttl < 0:
        return None
    return timedelta(milliseconds=pttl)
