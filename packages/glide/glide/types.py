"""Shared type aliases, protocols and errors for glide."""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

Milliseconds = int

Curve = Callable[[float, float, float, float], float]
"""An easing curve: ``(progress, origin, shift, duration) -> value``."""


@runtime_checkable
class Clock(Protocol):
    """A millisecond time source."""

    def now(self) -> Milliseconds: ...

    def elapsed(self) -> Milliseconds: ...


class UnknownEasingError(KeyError, ValueError):
    """Raised when looking up an easing family, mode or curve that does not exist."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)
