"""Countdown timer with an optional discrete stepping mode."""

from __future__ import annotations

import logging
from typing import Callable

from glide.clock import SYSTEM_CLOCK
from glide.config import DEFAULT_CONFIG, AnimationConfig
from glide.types import Clock, Milliseconds

logger = logging.getLogger(__name__)


class _Continuous:
    """Elapsed time follows the clock."""

    def elapsed(self, timer: Timer, count_step: bool) -> Milliseconds:
        return timer.clock.now() - timer.origin


class _Stepped:
    """Elapsed time is simulated and only moves on counted reads or explicit steps."""

    def __init__(self, last_step: Milliseconds) -> None:
        self.last_step = last_step

    def elapsed(self, timer: Timer, count_step: bool) -> Milliseconds:
        if not count_step:
            return timer.clock.now() - timer.origin
        self.advance(timer, timer.config.step_size)
        return self.last_step

    def advance(self, timer: Timer, n: Milliseconds) -> None:
        self.last_step += n
        # Rebase so wall-time reads agree with the simulated time.
        timer._origin = timer.clock.now() - self.last_step


class Timer:
    """A countdown of ``lasting`` milliseconds anchored at ``origin``.

    Reads that take ``count_step`` advance simulated time by
    ``config.step_size`` while the timer is stepping; pass
    ``count_step=False`` to read the clock without moving it. The
    predicates never count a step.
    """

    def __init__(
        self,
        lasting: Milliseconds,
        *,
        origin: Milliseconds | None = None,
        clock: Clock = SYSTEM_CLOCK,
        config: AnimationConfig = DEFAULT_CONFIG,
    ) -> None:
        self._clock = clock
        self._config = config
        self._lasting = abs(int(lasting))
        self._origin = clock.now() if origin is None else origin
        self._mode: _Continuous | _Stepped = _Continuous()

    @property
    def lasting(self) -> Milliseconds:
        return self._lasting

    @property
    def origin(self) -> Milliseconds:
        return self._origin

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def config(self) -> AnimationConfig:
        return self._config

    @property
    def stepping(self) -> bool:
        return isinstance(self._mode, _Stepped)

    @property
    def last_step(self) -> Milliseconds:
        """Simulated elapsed time, or 0 when not stepping."""
        if isinstance(self._mode, _Stepped):
            return self._mode.last_step
        return 0

    def queue_elapsed(self, count_step: bool = True) -> Milliseconds:
        """Raw elapsed time; may exceed ``lasting`` or be negative."""
        return self._mode.elapsed(self, count_step)

    def queue(self, count_step: bool = True) -> Milliseconds:
        """Elapsed time clamped to ``[0, lasting]``."""
        return max(0, min(self.queue_elapsed(count_step), self._lasting))

    def queue_as_percentage(self, count_step: bool = True) -> float:
        if self._lasting == 0:
            return self._config.zero_lasting_percentage
        return self.queue(count_step) / self._lasting

    def is_present(self) -> bool:
        return 0 <= self.queue_elapsed(count_step=False) <= self._lasting

    def is_finished(self) -> bool:
        return self.queue_elapsed(count_step=False) > self._lasting

    def run(self, action: Callable[[], object]) -> bool:
        """Invoke ``action`` if the timer has finished. Returns whether it ran."""
        if not self.is_finished():
            return False
        action()
        return True

    def reset(self) -> None:
        self.restart(0)

    def restart(self, elapsed: Milliseconds) -> None:
        """Rebind the origin so the timer reads ``elapsed`` right now."""
        self._origin = self._clock.now() - elapsed
        if isinstance(self._mode, _Stepped):
            self._mode.last_step = elapsed
        logger.debug(
            "timer restarted at %d ms: lasting=%d origin=%d", elapsed, self._lasting, self._origin
        )

    def enter_stepping(self) -> None:
        if isinstance(self._mode, _Stepped):
            return
        self._mode = _Stepped(self.queue_elapsed(count_step=False))
        logger.debug("timer entered stepping at %d ms", self._mode.last_step)

    def quit_stepping(self) -> None:
        if isinstance(self._mode, _Continuous):
            return
        logger.debug("timer quit stepping at %d ms", self._mode.last_step)
        self._mode = _Continuous()

    def step(self, n: Milliseconds = 1) -> None:
        if not isinstance(self._mode, _Stepped):
            logger.debug("ignored step(%d): timer is not stepping", n)
            return
        self._mode.advance(self, n)

    def __repr__(self) -> str:
        return (
            f"Timer(lasting={self._lasting}, origin={self._origin}, "
            f"stepping={self.stepping}, last_step={self.last_step})"
        )
