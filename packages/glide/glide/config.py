"""Animation configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnimationConfig:
    """Immutable tunables shared by timers and animators.

    Attributes:
        delta: Default blend ratio of the ratio animators. Clamped to [0, 1]
            by the animators, not here.
        finish_threshold: Distance to target below which a float animator
            is finished.
        near_finish_threshold: Coarser distance used by the integer
            animators and by ``is_near_finished``.
        step_size: Milliseconds of simulated time added by every counted
            read of a stepping timer.
        zero_lasting_percentage: Progress reported by a timer whose
            lasting is zero.
    """

    delta: float = 0.075
    finish_threshold: float = 0.001
    near_finish_threshold: float = 0.1
    step_size: int = 1
    zero_lasting_percentage: float = 1.0

    def __post_init__(self) -> None:
        if self.finish_threshold <= 0:
            raise ValueError("finish_threshold must be positive")
        if self.near_finish_threshold <= 0:
            raise ValueError("near_finish_threshold must be positive")
        if self.step_size <= 0:
            raise ValueError("step_size must be positive")
        if not 0.0 <= self.zero_lasting_percentage <= 1.0:
            raise ValueError("zero_lasting_percentage must be within [0, 1]")


DEFAULT_CONFIG = AnimationConfig()
