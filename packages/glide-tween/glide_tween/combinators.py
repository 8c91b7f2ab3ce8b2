"""Curve combinators: weighted sequential (Combined) and additive (Concurred)."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from glide.types import Curve

from glide_tween.easing import NONE

if TYPE_CHECKING:
    from glide import Timer

logger = logging.getLogger(__name__)


def negate(curve: Curve) -> Curve:
    """Reflect ``curve`` about its endpoint: it runs from ``o + s`` back to ``o``."""

    def negated(progress: float, origin: float, shift: float, duration: float) -> float:
        return curve(progress, origin + shift, -shift, duration)

    return negated


def reverse(curve: Curve) -> Curve:
    """Play ``curve`` backwards in time."""

    def reversed_curve(progress: float, origin: float, shift: float, duration: float) -> float:
        return curve(duration - progress, origin, shift, duration)

    return reversed_curve


@dataclass(frozen=True)
class WeightedCurve:
    curve: Curve
    weight: int


class Combined:
    """Runs curves one after another, each for a share of the progress
    proportional to its weight.

    The entry active at a given percentage is the first whose cumulative
    weight (in insertion order) reaches ``percentage * total_weight``. The
    selected curve is evaluated at the fraction of its own weight slice,
    over a duration of ``total_weight``, with the outer origin and shift.
    """

    def __init__(self) -> None:
        self._entries: list[WeightedCurve] = []

    @property
    def entries(self) -> tuple[WeightedCurve, ...]:
        return tuple(self._entries)

    @property
    def total_weight(self) -> int:
        return sum(entry.weight for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, curve: Curve, weight: int = 1) -> Combined:
        if weight <= 0:
            raise ValueError(f"weight must be positive, got {weight}")
        self._entries.append(WeightedCurve(curve, weight))
        return self

    def append_negate(self, curve: Curve, weight: int = 1) -> Combined:
        return self.append(negate(curve), weight)

    def select(self, percentage: float) -> int | None:
        """Index of the entry active at ``percentage``, or None if no entry is."""
        target = percentage * self.total_weight
        accumulated = 0
        for index, entry in enumerate(self._entries):
            accumulated += entry.weight
            if accumulated >= target:
                return index
        return None

    def _current(self, percentage: float) -> Curve:
        index = self.select(percentage)
        if index is None:
            if self._entries:
                logger.debug("no combined entry active at %r", percentage)
            return NONE

        total = self.total_weight
        target = percentage * total
        entry = self._entries[index]
        preceding = sum(e.weight for e in self._entries[:index])
        local_progress = (target - preceding) / (entry.weight / total)

        def current(progress: float, origin: float, shift: float, duration: float) -> float:
            return entry.curve(local_progress, origin, shift, total)

        return current

    def apply(self, progress: float, origin: float, shift: float, duration: float) -> float:
        return self._current(progress / duration)(progress, origin, shift, duration)

    def apply_percentage(self, percentage: float) -> float:
        return self.apply(percentage, 0.0, 1.0, 1.0)

    def apply_timer(self, timer: Timer, shift: float = 1.0) -> float:
        return self.apply(timer.queue(), 0.0, shift, timer.lasting)

    __call__ = apply

    def __repr__(self) -> str:
        return f"Combined(entries={len(self._entries)}, total_weight={self.total_weight})"


class Concurred:
    """The pointwise sum of two curves.

    With a single curve the second one is that curve played backwards.
    """

    def __init__(self, first: Curve, second: Curve | None = None) -> None:
        self.first = first
        self.second = reverse(first) if second is None else second

    def apply(self, progress: float, origin: float, shift: float, duration: float) -> float:
        return self.first(progress, origin, shift, duration) + self.second(
            progress, origin, shift, duration
        )

    def apply_percentage(self, percentage: float) -> float:
        return self.apply(percentage, 0.0, 1.0, 1.0)

    def apply_timer(self, timer: Timer, shift: float = 1.0) -> float:
        return self.apply(timer.queue(), 0.0, shift, timer.lasting)

    __call__ = apply
