"""Millisecond clocks for timers and oscillators."""

from __future__ import annotations

import time

from glide.types import Milliseconds


def _monotonic_ms() -> Milliseconds:
    return time.monotonic_ns() // 1_000_000


class MonotonicClock:
    """Reads the OS monotonic clock on demand.

    The origin is captured at construction, so ``elapsed()`` counts from the
    moment the clock was created.
    """

    def __init__(self) -> None:
        self._origin = _monotonic_ms()

    @property
    def origin(self) -> Milliseconds:
        return self._origin

    def now(self) -> Milliseconds:
        return _monotonic_ms()

    def elapsed(self) -> Milliseconds:
        return self.now() - self._origin


class ManualClock:
    """A clock that only moves when told to."""

    def __init__(self, start: Milliseconds = 0) -> None:
        self._origin = start
        self._now = start

    @property
    def origin(self) -> Milliseconds:
        return self._origin

    def now(self) -> Milliseconds:
        return self._now

    def elapsed(self) -> Milliseconds:
        return self._now - self._origin

    def advance(self, ms: Milliseconds = 1) -> Milliseconds:
        if ms < 0:
            raise ValueError("ms must be non-negative")
        self._now += ms
        return self._now

    def set(self, ms: Milliseconds) -> None:
        if ms < self._now:
            raise ValueError(f"cannot move clock backwards from {self._now} to {ms}")
        self._now = ms

    def reset(self, ms: Milliseconds = 0) -> None:
        self._origin = ms
        self._now = ms


SYSTEM_CLOCK = MonotonicClock()
