"""Easing curves for time-driven interpolation.

Every curve has the signature ``(progress, origin, shift, duration) -> value``
and satisfies ``f(0, o, s, d) == o`` and ``f(d, o, s, d) == o + s``.
Progress outside ``[0, duration]`` is not guarded: curves return their
analytic continuation (``nan`` where the continuation is not real).
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from glide.types import Curve, UnknownEasingError

if TYPE_CHECKING:
    from glide import Timer

Mode = Literal["ease", "ease_in", "ease_out"]
MODES: tuple[Mode, ...] = ("ease", "ease_in", "ease_out")

_BACK = 1.70158
_BACK_IN_OUT = _BACK * 1.525
_BOUNCE = 7.5625


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def _zero(progress: float, origin: float, shift: float, duration: float) -> float:
    return 0.0


NONE: Curve = _zero


# Linear

def linear_ease(progress: float, origin: float, shift: float, duration: float) -> float:
    return shift * (progress / duration) + origin


def linear_percentage(percentage: float, origin: float, shift: float) -> float:
    return shift * percentage + origin


# Quadratic

def quadratic_ease_in(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / duration
    return shift * t * t + origin


def quadratic_ease_out(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / duration
    return -shift * t * (t - 2) + origin


def quadratic_ease(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / (duration / 2)
    if t < 1:
        return shift / 2 * t * t + origin
    t -= 1
    return -shift / 2 * (t * (t - 2) - 1) + origin


# Cubic

def cubic_ease_in(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / duration
    return shift * t**3 + origin


def cubic_ease_out(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / duration - 1
    return shift * (t**3 + 1) + origin


def cubic_ease(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / (duration / 2)
    if t < 1:
        return shift / 2 * t**3 + origin
    t -= 2
    return shift / 2 * (t**3 + 2) + origin


# Quartic

def quartic_ease_in(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / duration
    return shift * t**4 + origin


def quartic_ease_out(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / duration - 1
    return -shift * (t**4 - 1) + origin


def quartic_ease(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / (duration / 2)
    if t < 1:
        return shift / 2 * t**4 + origin
    t -= 2
    return -shift / 2 * (t**4 - 2) + origin


# Quintic

def quintic_ease_in(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / duration
    return shift * t**5 + origin


def quintic_ease_out(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / duration - 1
    return shift * (t**5 + 1) + origin


def quintic_ease(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / (duration / 2)
    if t < 1:
        return shift / 2 * t**5 + origin
    t -= 2
    return shift / 2 * (t**5 + 2) + origin


# Sinusoidal

def sinusoidal_ease_in(progress: float, origin: float, shift: float, duration: float) -> float:
    return -shift * (math.cos(progress / duration * (math.pi / 2)) - 1) + origin


def sinusoidal_ease_out(progress: float, origin: float, shift: float, duration: float) -> float:
    return shift * math.sin(progress / duration * (math.pi / 2)) + origin


def sinusoidal_ease(progress: float, origin: float, shift: float, duration: float) -> float:
    return -shift / 2 * (math.cos(math.pi * progress / duration) - 1) + origin


# Exponential

def exponential_ease_in(progress: float, origin: float, shift: float, duration: float) -> float:
    if progress == 0:
        return origin
    return shift * 2 ** (10 * (progress / duration - 1)) + origin


def exponential_ease_out(progress: float, origin: float, shift: float, duration: float) -> float:
    if progress == duration:
        return origin + shift
    return shift * (1 - 2 ** (-10 * progress / duration)) + origin


def exponential_ease(progress: float, origin: float, shift: float, duration: float) -> float:
    if progress == 0:
        return origin
    if progress == duration:
        return origin + shift
    t = progress / (duration / 2)
    if t < 1:
        return shift / 2 * 2 ** (10 * (t - 1)) + origin
    t -= 1
    return shift / 2 * (2 - 2 ** (-10 * t)) + origin


# Circular

def circular_ease_in(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / duration
    return -shift * (_sqrt(1 - t * t) - 1) + origin


def circular_ease_out(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / duration - 1
    return shift * _sqrt(1 - t * t) + origin


def circular_ease(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / (duration / 2)
    if t < 1:
        return -shift / 2 * (_sqrt(1 - t * t) - 1) + origin
    t -= 2
    return shift / 2 * (_sqrt(1 - t * t) + 1) + origin


# Elastic
#
# Period is 0.3 of the duration (0.45 for the symmetric mode). The overshoot
# amplitude is |shift|, which puts the phase offset at a quarter period for
# either sign of shift.

def elastic_ease_in(progress: float, origin: float, shift: float, duration: float) -> float:
    if progress == 0:
        return origin
    t = progress / duration
    if t == 1:
        return origin + shift
    period = duration * 0.3
    phase = period / 4
    t -= 1
    return -(shift * 2 ** (10 * t) * math.sin((t * duration - phase) * (2 * math.pi) / period)) + origin


def elastic_ease_out(progress: float, origin: float, shift: float, duration: float) -> float:
    if progress == 0:
        return origin
    t = progress / duration
    if t == 1:
        return origin + shift
    period = duration * 0.3
    phase = period / 4
    return shift * 2 ** (-10 * t) * math.sin((t * duration - phase) * (2 * math.pi) / period) + shift + origin


def elastic_ease(progress: float, origin: float, shift: float, duration: float) -> float:
    if progress == 0:
        return origin
    t = progress / (duration / 2)
    if t == 2:
        return origin + shift
    period = duration * (0.3 * 1.5)
    phase = period / 4
    if t < 1:
        t -= 1
        return -0.5 * (shift * 2 ** (10 * t) * math.sin((t * duration - phase) * (2 * math.pi) / period)) + origin
    t -= 1
    return 0.5 * (shift * 2 ** (-10 * t) * math.sin((t * duration - phase) * (2 * math.pi) / period)) + shift + origin


# Back

def back_ease_in(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / duration
    return shift * t * t * ((_BACK + 1) * t - _BACK) + origin


def back_ease_out(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / duration - 1
    return shift * (t * t * ((_BACK + 1) * t + _BACK) + 1) + origin


def back_ease(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / (duration / 2)
    if t < 1:
        return shift / 2 * (t * t * ((_BACK_IN_OUT + 1) * t - _BACK_IN_OUT)) + origin
    t -= 2
    return shift / 2 * (t * t * ((_BACK_IN_OUT + 1) * t + _BACK_IN_OUT) + 2) + origin


# Bounce

def bounce_ease_out(progress: float, origin: float, shift: float, duration: float) -> float:
    t = progress / duration
    if t <= 1 / 2.75:
        return shift * (_BOUNCE * t * t) + origin
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return shift * (_BOUNCE * t * t + 0.75) + origin
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return shift * (_BOUNCE * t * t + 0.9375) + origin
    t -= 2.625 / 2.75
    return shift * (_BOUNCE * t * t + 0.984375) + origin


def bounce_ease_in(progress: float, origin: float, shift: float, duration: float) -> float:
    return shift - bounce_ease_out(duration - progress, 0, shift, duration) + origin


def bounce_ease(progress: float, origin: float, shift: float, duration: float) -> float:
    if progress < duration / 2:
        return bounce_ease_in(progress * 2, 0, shift, duration) * 0.5 + origin
    return bounce_ease_out(progress * 2 - duration, 0, shift, duration) * 0.5 + shift * 0.5 + origin


@dataclass(frozen=True)
class EasingFamily:
    """The three modes of one named curve family."""

    name: str
    ease: Curve
    ease_in: Curve
    ease_out: Curve

    def mode(self, mode: Mode) -> Curve:
        if mode not in MODES:
            raise UnknownEasingError(mode, f"Unknown easing mode {mode!r} for {self.name}")
        return getattr(self, mode)

    def at(self, timer: Timer, shift: float = 1.0, mode: Mode = "ease") -> float:
        """Evaluate at the timer's current progress, from 0 over its lasting."""
        return self.mode(mode)(timer.queue(), 0.0, shift, timer.lasting)

    def apply_percentage(self, percentage: float, mode: Mode = "ease") -> float:
        return self.mode(mode)(percentage, 0.0, 1.0, 1.0)


LINEAR = EasingFamily("linear", linear_ease, linear_ease, linear_ease)
QUADRATIC = EasingFamily("quadratic", quadratic_ease, quadratic_ease_in, quadratic_ease_out)
CUBIC = EasingFamily("cubic", cubic_ease, cubic_ease_in, cubic_ease_out)
QUARTIC = EasingFamily("quartic", quartic_ease, quartic_ease_in, quartic_ease_out)
QUINTIC = EasingFamily("quintic", quintic_ease, quintic_ease_in, quintic_ease_out)
SINUSOIDAL = EasingFamily("sinusoidal", sinusoidal_ease, sinusoidal_ease_in, sinusoidal_ease_out)
EXPONENTIAL = EasingFamily("exponential", exponential_ease, exponential_ease_in, exponential_ease_out)
CIRCULAR = EasingFamily("circular", circular_ease, circular_ease_in, circular_ease_out)
ELASTIC = EasingFamily("elastic", elastic_ease, elastic_ease_in, elastic_ease_out)
BACK = EasingFamily("back", back_ease, back_ease_in, back_ease_out)
BOUNCE = EasingFamily("bounce", bounce_ease, bounce_ease_in, bounce_ease_out)

FAMILIES: dict[str, EasingFamily] = {
    family.name: family
    for family in (
        LINEAR,
        QUADRATIC,
        CUBIC,
        QUARTIC,
        QUINTIC,
        SINUSOIDAL,
        EXPONENTIAL,
        CIRCULAR,
        ELASTIC,
        BACK,
        BOUNCE,
    )
}

EASINGS: dict[str, Curve] = {
    f"{family.name}_{mode}": family.mode(mode)
    for family in FAMILIES.values()
    for mode in MODES
}


def get_family(name: str) -> EasingFamily:
    try:
        return FAMILIES[name]
    except KeyError:
        raise UnknownEasingError(name, f"Unknown easing family {name!r}") from None


def get_curve(name: str) -> Curve:
    """Look up a curve by its ``"<family>_<mode>"`` name, e.g. ``"bounce_ease_out"``."""
    try:
        return EASINGS[name]
    except KeyError:
        raise UnknownEasingError(name, f"Unknown easing curve {name!r}") from None
