"""glide-tween - Easing curves, curve combinators and value animators."""
from __future__ import annotations

from glide_tween.animators import (
    AnimatorState,
    BasicAnimator,
    DoubleAnimator,
    FloatAnimator,
    IntegerAnimator,
    LongAnimator,
    TimedAnimator,
    ValueAnimator,
)
from glide_tween.combinators import Combined, Concurred, WeightedCurve, negate, reverse
from glide_tween.easing import (
    BACK,
    BOUNCE,
    CIRCULAR,
    CUBIC,
    EASINGS,
    ELASTIC,
    EXPONENTIAL,
    FAMILIES,
    LINEAR,
    MODES,
    QUADRATIC,
    QUARTIC,
    QUINTIC,
    SINUSOIDAL,
    EasingFamily,
    get_curve,
    get_family,
    linear_percentage,
    NONE,
)

__all__ = [
    "EASINGS",
    "FAMILIES",
    "MODES",
    "EasingFamily",
    "get_curve",
    "get_family",
    "linear_percentage",
    "NONE",
    "LINEAR",
    "QUADRATIC",
    "CUBIC",
    "QUARTIC",
    "QUINTIC",
    "SINUSOIDAL",
    "EXPONENTIAL",
    "CIRCULAR",
    "ELASTIC",
    "BACK",
    "BOUNCE",
    "Combined",
    "Concurred",
    "WeightedCurve",
    "negate",
    "reverse",
    "AnimatorState",
    "BasicAnimator",
    "ValueAnimator",
    "DoubleAnimator",
    "FloatAnimator",
    "IntegerAnimator",
    "LongAnimator",
    "TimedAnimator",
]
