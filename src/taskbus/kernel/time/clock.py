"""Kernel time – the clock todo handlers read "now" from."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


def utc_now() -> datetime:
    """Current time as an aware UTC datetime; the default request timestamp."""
    return datetime.now(UTC)


class Clock(Protocol):
    """Anything with an aware-UTC ``now()``."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock used when no clock is injected."""

    def now(self) -> datetime:
        return utc_now()


class FrozenClock:
    """Clock that only moves when told to.

    *at* must be timezone-aware; it is normalised to UTC so stored
    ``created_at``/``updated_at`` values compare equal whatever zone the
    test wrote them in.
    """

    def __init__(self, at: datetime) -> None:
        self._now = _as_utc(at)

    def now(self) -> datetime:
        return self._now

    def set(self, at: datetime) -> None:
        self._now = _as_utc(at)

    def advance(self, **delta: float) -> datetime:
        """Move forward by ``timedelta(**delta)`` and return the new time."""
        self._now += timedelta(**delta)
        return self._now


def _as_utc(at: datetime) -> datetime:
    if at.tzinfo is None:
        raise ValueError("FrozenClock needs a timezone-aware datetime")
    return at.astimezone(UTC)


__all__ = ["Clock", "FrozenClock", "SystemClock", "utc_now"]
