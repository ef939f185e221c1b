"""The Gregorian epoch (1582-10-15 00:00 UTC) used by time-based UUIDs."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

GREGORIAN_OFFSET_SECONDS = 0x0002_D853_9C80
GREGORIAN_OFFSET = timedelta(seconds=GREGORIAN_OFFSET_SECONDS)
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def epoch() -> datetime:
    """Return the Gregorian epoch as an aware UTC datetime."""
    return UNIX_EPOCH - GREGORIAN_OFFSET


def elapsed() -> timedelta:
    """Return the time elapsed from the Gregorian epoch until now.

    Raises ``ValueError`` if the system clock reads earlier than the epoch.
    """
    delta = datetime.now(timezone.utc) - epoch()
    if delta < timedelta(0):
        raise ValueError("the current system time is before the Gregorian epoch")
    return delta