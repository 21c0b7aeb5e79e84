"""
Tests for core.time — Clock protocol and date helpers.
"""

import pytest
from datetime import date, datetime, timezone, timedelta

from core.time.clock import FixedClock, SystemClock, epoch_millis, today


# ── Clock Tests ──────────────────────────────────────────────

class TestSystemClock:
    def test_returns_utc_datetime(self):
        clock = SystemClock()
        dt = clock.now_utc()
        assert dt.tzinfo is not None
        assert dt.tzinfo == timezone.utc

    def test_time_advances(self):
        clock = SystemClock()
        t1 = clock.now_utc()
        t2 = clock.now_utc()
        assert t2 >= t1


class TestFixedClock:
    def test_returns_fixed_time(self):
        fixed = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)
        clock = FixedClock(fixed)
        assert clock.now_utc() == fixed
        assert clock.now_utc() == fixed  # Same every time

    def test_rejects_naive_datetime(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            FixedClock(datetime(2025, 1, 1))

    def test_advance(self):
        fixed = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)
        clock = FixedClock(fixed)
        clock.advance(60)
        assert clock.now_utc() == fixed + timedelta(seconds=60)


# ── Helper Tests ─────────────────────────────────────────────

class TestToday:
    def test_calendar_date_of_clock(self):
        clock = FixedClock(datetime(2024, 12, 26, 23, 59, tzinfo=timezone.utc))
        assert today(clock) == date(2024, 12, 26)

    def test_follows_advance(self):
        clock = FixedClock(datetime(2024, 12, 26, 23, 59, tzinfo=timezone.utc))
        clock.advance(120)
        assert today(clock) == date(2024, 12, 27)


class TestEpochMillis:
    def test_epoch_start(self):
        clock = FixedClock(datetime(1970, 1, 1, tzinfo=timezone.utc))
        assert epoch_millis(clock) == 0

    def test_millisecond_resolution(self):
        clock = FixedClock(datetime(1970, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc))
        assert epoch_millis(clock) == 1500
