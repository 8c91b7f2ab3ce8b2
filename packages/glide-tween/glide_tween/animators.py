"""Stateful value animators.

Two shapes share the :class:`BasicAnimator` surface:

* ratio animators (:class:`DoubleAnimator` and friends) move ``value`` a fixed
  fraction ``delta`` of the remaining distance towards ``target`` on every
  ``queue()``;
* :class:`TimedAnimator` evaluates an easing curve against a :class:`Timer`
  that, by default, advances one step per ``queue()``.
"""
from __future__ import annotations

import logging
import math
import struct
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import ClassVar, Generic, TypeVar

from glide import DEFAULT_CONFIG, SYSTEM_CLOCK, AnimationConfig, Clock, Curve, Timer

from glide_tween.easing import sinusoidal_ease

logger = logging.getLogger(__name__)

T = TypeVar("T", int, float)
W = TypeVar("W", bound="_TruncatingAnimator")


class AnimatorState(Enum):
    AT_START = auto()
    MOVING_TO_END = auto()
    AT_END = auto()
    MOVING_TO_START = auto()


class BasicAnimator(ABC, Generic[T]):
    @abstractmethod
    def queue(self) -> T:
        """Advance one frame and return the new value."""

    @abstractmethod
    def forward(self) -> None:
        """Head towards ``end``."""

    @abstractmethod
    def backward(self) -> None:
        """Head towards ``start``."""

    @abstractmethod
    def reset(self) -> None:
        """Return to the initial state."""

    @abstractmethod
    def is_finished(self) -> bool: ...

    @abstractmethod
    def is_near_finished(self) -> bool: ...

    @property
    @abstractmethod
    def state(self) -> AnimatorState: ...

    _last_state: AnimatorState | None = None

    def _track_state(self) -> None:
        state = self.state
        if state is self._last_state:
            return
        if self._last_state is not None:
            logger.debug("%s: %s -> %s", type(self).__name__, self._last_state.name, state.name)
        self._last_state = state


def _clamp_delta(delta: float) -> float:
    return max(0.0, min(1.0, delta))


class ValueAnimator(BasicAnimator[T]):
    """Ratio animator over a scalar type.

    Starts at rest on ``start``; call :meth:`forward` to head for ``end``.
    """

    def __init__(
        self,
        start: T,
        end: T,
        delta: float | None = None,
        *,
        config: AnimationConfig = DEFAULT_CONFIG,
    ) -> None:
        self.start = start
        self.end = end
        self.value = start
        self.target = start
        self.delta = _clamp_delta(config.delta if delta is None else delta)
        self._config = config
        self._track_state()

    @property
    def config(self) -> AnimationConfig:
        return self._config

    def forward(self) -> None:
        if self.target != self.end:
            logger.debug("animator forward: %r -> %r", self.value, self.end)
        self.target = self.end
        self._track_state()

    def backward(self) -> None:
        if self.target != self.start:
            logger.debug("animator backward: %r -> %r", self.value, self.start)
        self.target = self.start
        self._track_state()

    def reset(self) -> None:
        self.value = self.start
        self.target = self.start
        self._track_state()

    def distance(self) -> float:
        return abs(self.target - self.value)

    def is_finished(self) -> bool:
        return self.distance() < self._config.finish_threshold

    def is_near_finished(self) -> bool:
        return self.distance() < self._config.near_finish_threshold

    @property
    def state(self) -> AnimatorState:
        heading_to_start = self.target == self.start
        if self.is_finished():
            return AnimatorState.AT_START if heading_to_start else AnimatorState.AT_END
        return AnimatorState.MOVING_TO_START if heading_to_start else AnimatorState.MOVING_TO_END

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(start={self.start!r}, end={self.end!r}, "
            f"value={self.value!r}, target={self.target!r}, delta={self.delta!r})"
        )


class DoubleAnimator(ValueAnimator[float]):
    """Ratio animator over floats. ``DoubleAnimator(end)`` animates from 0."""

    def __init__(
        self,
        start: float,
        end: float | None = None,
        delta: float | None = None,
        *,
        config: AnimationConfig = DEFAULT_CONFIG,
    ) -> None:
        if end is None:
            start, end = 0.0, start
        super().__init__(float(start), float(end), delta, config=config)

    def queue(self) -> float:
        self.value += (self.target - self.value) * self.delta
        self._track_state()
        return self.value


def _to_single(x: float) -> float:
    return struct.unpack("f", struct.pack("f", x))[0]


class FloatAnimator(DoubleAnimator):
    """Like :class:`DoubleAnimator` but keeps ``value`` at single precision."""

    def __init__(
        self,
        start: float,
        end: float | None = None,
        delta: float | None = None,
        *,
        config: AnimationConfig = DEFAULT_CONFIG,
    ) -> None:
        if end is None:
            start, end = 0.0, start
        super().__init__(_to_single(start), _to_single(end), delta, config=config)
        self.delta = _to_single(self.delta)

    def queue(self) -> float:
        self.value = _to_single(self.value + (self.target - self.value) * self.delta)
        self._track_state()
        return self.value


class TimedAnimator(BasicAnimator[float]):
    """Evaluates ``curve`` from ``start`` to ``end`` over ``lasting`` ms.

    The timer steps one ``step_size`` per ``queue()`` unless the animator is
    time based, in which case it follows the clock. ``backward()`` plays the
    curve in reverse towards ``start``, continuing from the current point.
    """

    def __init__(
        self,
        start: float,
        end: float,
        lasting: int,
        *,
        curve: Curve = sinusoidal_ease,
        clock: Clock = SYSTEM_CLOCK,
        config: AnimationConfig = DEFAULT_CONFIG,
        time_based: bool = False,
    ) -> None:
        self.start = float(start)
        self.end = float(end)
        self.curve = curve
        self.value = self.start
        self._forward = True
        self._timer = Timer(lasting, clock=clock, config=config)
        if not time_based:
            self._timer.enter_stepping()
        self._track_state()

    @property
    def timer(self) -> Timer:
        return self._timer

    @property
    def lasting(self) -> int:
        return self._timer.lasting

    @property
    def time_based(self) -> bool:
        return not self._timer.stepping

    def set_time_based(self, enabled: bool) -> None:
        if enabled:
            self._timer.quit_stepping()
        else:
            self._timer.enter_stepping()

    def reverted(self) -> int:
        return self.lasting - self._timer.queue()

    def queue(self) -> float:
        progress = self._timer.queue() if self._forward else self.reverted()
        if self.lasting == 0:
            self.value = self.end if self._forward else self.start
        else:
            self.value = self.curve(progress, self.start, self.end - self.start, self.lasting)
        self._track_state()
        return self.value

    def forward(self) -> None:
        if self._forward:
            return
        logger.debug("timed animator forward over %d ms", self.lasting)
        self._forward = True
        self._mirror()
        self._track_state()

    def backward(self) -> None:
        if not self._forward:
            return
        logger.debug("timed animator backward over %d ms", self.lasting)
        self._forward = False
        self._mirror()
        self._track_state()

    def _mirror(self) -> None:
        # Continue from the current point on the curve in the new direction.
        elapsed = self.lasting - min(self._timer.queue(count_step=False), self.lasting)
        self._timer.restart(elapsed)

    def reset(self) -> None:
        self._forward = True
        self.value = self.start
        self._timer.reset()
        self._track_state()

    def is_finished(self) -> bool:
        return self._timer.is_finished()

    def is_near_finished(self) -> bool:
        return self.is_finished()

    @property
    def state(self) -> AnimatorState:
        if self.is_finished():
            return AnimatorState.AT_END if self._forward else AnimatorState.AT_START
        return AnimatorState.MOVING_TO_END if self._forward else AnimatorState.MOVING_TO_START

    def __repr__(self) -> str:
        return (
            f"TimedAnimator(start={self.start!r}, end={self.end!r}, "
            f"value={self.value!r}, timer={self._timer!r})"
        )


class _TruncatingAnimator(BasicAnimator[int]):
    """Wraps a float animator and truncates its output toward zero."""

    _bounds: ClassVar[tuple[int, int]]

    def __init__(
        self,
        start: int,
        end: int | None = None,
        delta: float | None = None,
        *,
        config: AnimationConfig = DEFAULT_CONFIG,
    ) -> None:
        if end is None:
            start, end = 0, start
        self._bind(DoubleAnimator(start, end, delta, config=config))

    @classmethod
    def wrap(cls: type[W], animator: BasicAnimator[float]) -> W:
        wrapped = cls.__new__(cls)
        wrapped._bind(animator)
        return wrapped

    def _bind(self, animator: BasicAnimator[float]) -> None:
        self._animator = animator
        self.value = self._truncate(animator.value)

    @property
    def animator(self) -> BasicAnimator[float]:
        return self._animator

    @classmethod
    def _truncate(cls, x: float) -> int:
        low, high = cls._bounds
        if math.isnan(x):
            return 0
        if math.isinf(x):
            return high if x > 0 else low
        return max(low, min(high, math.trunc(x)))

    def queue(self) -> int:
        self.value = self._truncate(self._animator.queue())
        return self.value

    def forward(self) -> None:
        self._animator.forward()

    def backward(self) -> None:
        self._animator.backward()

    def reset(self) -> None:
        self._animator.reset()
        self.value = self._truncate(self._animator.value)

    def is_finished(self) -> bool:
        return self._animator.is_near_finished()

    def is_near_finished(self) -> bool:
        return self._animator.is_near_finished()

    @property
    def state(self) -> AnimatorState:
        state = self._animator.state
        if self.is_finished():
            if state is AnimatorState.MOVING_TO_END:
                return AnimatorState.AT_END
            if state is AnimatorState.MOVING_TO_START:
                return AnimatorState.AT_START
        return state

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value!r}, animator={self._animator!r})"


class IntegerAnimator(_TruncatingAnimator):
    """Integer output saturating at the 32-bit signed range."""

    _bounds = (-(2**31), 2**31 - 1)


class LongAnimator(_TruncatingAnimator):
    """Integer output saturating at the 64-bit signed range."""

    _bounds = (-(2**63), 2**63 - 1)
