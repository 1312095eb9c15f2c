"""Helpers for working with UTC datetimes.

Timestamps are stored as naive UTC values so that SQLite and server databases
compare them the same way. Aware values coming from requests are converted
before they reach the persistence layer.
"""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time without ``tzinfo``."""

    return datetime.now(tz=timezone.utc).replace(tzinfo=None)


def ensure_naive_utc(value: datetime | None) -> datetime | None:
    """Return ``value`` expressed in UTC without ``tzinfo``.

    Naive inputs are assumed to already be UTC.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
