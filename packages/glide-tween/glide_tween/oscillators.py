"""Reciprocating values driven by a clock's elapsed time.

Each helper reads ``clock.elapsed()`` in seconds, scaled by ``speed``.
"""
from __future__ import annotations

import math

from glide.clock import SYSTEM_CLOCK
from glide.types import Clock


def _phase(speed: float, clock: Clock) -> float:
    return clock.elapsed() * 0.001 * speed


def sin(speed: float = 1.0, clock: Clock = SYSTEM_CLOCK) -> float:
    return math.sin(_phase(speed, clock))


def cos(speed: float = 1.0, clock: Clock = SYSTEM_CLOCK) -> float:
    return math.cos(_phase(speed, clock))


def tan(speed: float = 1.0, clock: Clock = SYSTEM_CLOCK) -> float:
    return math.tan(_phase(speed, clock))


def sin_positive(speed: float = 1.0, clock: Clock = SYSTEM_CLOCK) -> float:
    return abs(sin(speed, clock))


def cos_positive(speed: float = 1.0, clock: Clock = SYSTEM_CLOCK) -> float:
    return abs(cos(speed, clock))


def sin_normal(speed: float = 1.0, clock: Clock = SYSTEM_CLOCK) -> float:
    """Sine mapped onto [0, 1]."""
    return sin(speed, clock) / 2 + 0.5


def cos_normal(speed: float = 1.0, clock: Clock = SYSTEM_CLOCK) -> float:
    """Cosine mapped onto [0, 1]."""
    return cos(speed, clock) / 2 + 0.5


def tan_reciprocal(speed: float = 1.0, clock: Clock = SYSTEM_CLOCK) -> float:
    value = tan(speed, clock)
    if value == 0:
        return math.inf
    return 1 / value
