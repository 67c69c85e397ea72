"""Shared types, errors and protocols for bloom."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from bloom.points import PointSet


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


@dataclass(frozen=True)
class Layout:
    """A named layout generator with its configuration already bound.

    Calling the layout overwrites ``x, y`` of every point and returns the
    same PointSet.
    """

    name: str
    apply: Callable[[PointSet], PointSet]

    def __call__(self, points: PointSet) -> PointSet:
        return self.apply(points)

    @classmethod
    def bind(cls, name: str, fn: Callable[..., PointSet], **kwargs: Any) -> Layout:
        def apply(points: PointSet) -> PointSet:
            return fn(points, **kwargs)

        return cls(name=name, apply=apply)


class ConfigurationError(ValueError):
    """Raised when a scene, layout or easing configuration is unusable."""


class RangeMismatchError(ConfigurationError):
    """Raised when allocated point ranges do not cover the point set exactly."""

    def __init__(self, expected: int, consumed: int, message: str) -> None:
        self.expected = expected
        self.consumed = consumed
        super().__init__(message)


class EasingContractError(ConfigurationError):
    """Raised when an easing function does not map [0, 1] monotonically onto [0, 1]."""


class DriverStateError(RuntimeError):
    """Raised on an event the tween driver cannot accept in its current state."""

    def __init__(self, state: str, event: str) -> None:
        self.state = state
        self.event = event
        super().__init__(f"Cannot handle {event!r} while {state!r}")


LayoutFn = Callable[["PointSet"], "PointSet"]
FrameHook = Callable[["PointSet"], None]
Renderer = Callable[["PointSet", FrameContext], None]
