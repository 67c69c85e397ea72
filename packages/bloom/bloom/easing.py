"""Easing curves mapping normalized elapsed time to normalized progress."""
from __future__ import annotations

import math
from typing import Callable

from bloom.types import EasingContractError

Easing = Callable[[float], float]

_SAMPLES = 256
_TOLERANCE = 1e-9


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def cubic_in(t: float) -> float:
    return t * t * t


def cubic_out(t: float) -> float:
    t -= 1
    return t * t * t + 1


def cubic_in_out(t: float) -> float:
    """Symmetric cubic: accelerate through the first half, decelerate after."""
    t *= 2
    if t <= 1:
        return t * t * t / 2
    t -= 2
    return (t * t * t + 2) / 2


def sine_in_out(t: float) -> float:
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return (1 - math.cos(math.pi * t)) / 2


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "cubic_in": cubic_in,
    "cubic_out": cubic_out,
    "cubic_in_out": cubic_in_out,
    "sine_in_out": sine_in_out,
}

DEFAULT_EASING = "cubic_in_out"


def validate_easing(fn: Easing, samples: int = _SAMPLES) -> Easing:
    """Check that ``fn`` maps [0, 1] monotonically onto [0, 1].

    Requires ``fn(0) == 0`` and ``fn(1) == 1`` (within float tolerance),
    every sample inside [0, 1] and samples non-decreasing. Returns ``fn``.
    """
    try:
        values = [float(fn(i / samples)) for i in range(samples + 1)]
    except (ArithmeticError, TypeError, ValueError) as exc:
        raise EasingContractError(f"easing {_name(fn)} failed on [0, 1]: {exc}") from exc

    if abs(values[0]) > _TOLERANCE:
        raise EasingContractError(f"easing {_name(fn)}(0) = {values[0]}, expected 0")
    if abs(values[-1] - 1.0) > _TOLERANCE:
        raise EasingContractError(f"easing {_name(fn)}(1) = {values[-1]}, expected 1")

    prev = values[0]
    for i, value in enumerate(values):
        if not math.isfinite(value) or value < -_TOLERANCE or value > 1.0 + _TOLERANCE:
            raise EasingContractError(
                f"easing {_name(fn)}({i / samples}) = {value} is out of range [0, 1]"
            )
        if value < prev - _TOLERANCE:
            raise EasingContractError(
                f"easing {_name(fn)} decreases at t={i / samples}"
            )
        prev = value
    return fn


def resolve_easing(easing: str | Easing) -> Easing:
    """Look up a named easing or validate a custom callable."""
    if isinstance(easing, str):
        fn = EASINGS.get(easing)
        if fn is None:
            raise EasingContractError(
                f"Unknown easing {easing!r}, expected one of {sorted(EASINGS)}"
            )
        return fn
    if not callable(easing):
        raise EasingContractError(f"easing must be a name or a callable, got {easing!r}")
    return validate_easing(easing)


def _name(fn: Easing) -> str:
    return getattr(fn, "__name__", repr(fn))
