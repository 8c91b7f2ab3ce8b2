"""Tests for monotonic and manual clocks."""

import pytest
from glide.clock import SYSTEM_CLOCK, ManualClock, MonotonicClock
from glide.types import Clock


def test_manual_clock_starts_at_given_time():
    """ManualClock reports its start as now and zero elapsed."""
    clock = ManualClock(start=500)
    assert clock.now() == 500
    assert clock.elapsed() == 0
    assert clock.origin == 500


def test_advance_returns_new_time():
    """advance() moves the clock forward and returns the new reading."""
    clock = ManualClock()
    assert clock.advance() == 1
    assert clock.advance(9) == 10
    assert clock.now() == 10
    assert clock.elapsed() == 10


def test_advance_zero_is_allowed():
    """Advancing by zero leaves a stagnant reading."""
    clock = ManualClock(start=3)
    clock.advance(0)
    assert clock.now() == 3


def test_negative_advance_raises():
    """The clock never moves backwards."""
    clock = ManualClock()
    with pytest.raises(ValueError, match="non-negative"):
        clock.advance(-1)


def test_set_moves_forward_only():
    """set() accepts later times and rejects earlier ones."""
    clock = ManualClock(start=10)
    clock.set(25)
    assert clock.now() == 25
    with pytest.raises(ValueError):
        clock.set(24)


def test_reset_rebinds_origin():
    """reset() moves both origin and now."""
    clock = ManualClock(start=10)
    clock.advance(5)
    clock.reset(100)
    assert clock.now() == 100
    assert clock.elapsed() == 0


def test_monotonic_clock_is_non_decreasing():
    """Consecutive reads of the monotonic clock never decrease."""
    clock = MonotonicClock()
    readings = [clock.now() for _ in range(100)]
    assert readings == sorted(readings)
    assert clock.elapsed() >= 0


def test_monotonic_elapsed_counts_from_origin():
    """elapsed() is now() minus the construction origin."""
    clock = MonotonicClock()
    before = clock.now()
    elapsed = clock.elapsed()
    assert elapsed >= before - clock.origin


def test_clocks_satisfy_protocol():
    """Both clocks and the shared instance implement the Clock protocol."""
    assert isinstance(ManualClock(), Clock)
    assert isinstance(MonotonicClock(), Clock)
    assert isinstance(SYSTEM_CLOCK, Clock)
