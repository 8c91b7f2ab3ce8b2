"""glide - Millisecond clocks and countdown timers for time-driven interpolation."""

from glide.clock import SYSTEM_CLOCK, ManualClock, MonotonicClock
from glide.config import DEFAULT_CONFIG, AnimationConfig
from glide.timer import Timer
from glide.types import Clock, Curve, Milliseconds, UnknownEasingError

__all__ = [
    "Timer",
    "Clock",
    "MonotonicClock",
    "ManualClock",
    "SYSTEM_CLOCK",
    "AnimationConfig",
    "DEFAULT_CONFIG",
    "Curve",
    "Milliseconds",
    "UnknownEasingError",
]
