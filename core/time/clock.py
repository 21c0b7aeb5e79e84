"""
Shopfloor Core Time — Explicit Clock Protocol
===============================================
Doctrine: NO datetime.now() inside engine logic.

Screens read the current moment only at creation points
(identity, bill numbers, default dates, lastUpdated stamps),
and always through an injected Clock.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Protocol


# ══════════════════════════════════════════════════════════════
# CLOCK PROTOCOL
# ══════════════════════════════════════════════════════════════

class Clock(Protocol):
    """Injectable time source."""

    def now_utc(self) -> datetime:
        """Return current UTC time."""
        ...  # pragma: no cover


def today(clock: Clock) -> date:
    """Calendar date of the clock's current moment (UTC)."""
    return clock.now_utc().date()


def epoch_millis(clock: Clock) -> int:
    """Milliseconds since the Unix epoch for the clock's current moment."""
    return int(clock.now_utc().timestamp() * 1000)


# ══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ══════════════════════════════════════════════════════════════

class SystemClock:
    """Production clock — real system time."""

    def now_utc(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Test clock — returns a fixed timestamp.

    Usage:
        clock = FixedClock(datetime(2025, 1, 1, tzinfo=timezone.utc))
        assert clock.now_utc().year == 2025
    """

    def __init__(self, fixed_dt: datetime) -> None:
        if fixed_dt.tzinfo is None:
            raise ValueError("FixedClock requires timezone-aware datetime.")
        self._fixed_dt = fixed_dt

    def now_utc(self) -> datetime:
        return self._fixed_dt

    def advance(self, seconds: float) -> None:
        """Advance the fixed time (useful for multi-step test scenarios)."""
        self._fixed_dt = self._fixed_dt + timedelta(seconds=seconds)
