"""Point records and the fixed-size PointSet they live in."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Sequence

from bloom.types import ConfigurationError

Position = tuple[float, float]


@dataclass(slots=True)
class TransitionRecord:
    """Source and target coordinates of one point for one transition."""

    sx: float
    sy: float
    tx: float
    ty: float


class Point:
    __slots__ = ("_id", "_color", "x", "y", "transition")

    def __init__(self, id: int, color: Any = None, x: float = 0.0, y: float = 0.0) -> None:
        self._id = id
        self._color = color
        self.x = x
        self.y = y
        self.transition: TransitionRecord | None = None

    @property
    def id(self) -> int:
        return self._id

    @property
    def color(self) -> Any:
        return self._color

    def __repr__(self) -> str:
        return f"Point(id={self._id}, x={self.x:.3f}, y={self.y:.3f})"


class PointSet:
    """Ordered collection of exactly ``n`` points, fixed for the session."""

    def __init__(self, n: int, color_fn: Callable[[int], Any] | None = None) -> None:
        if n <= 0:
            raise ConfigurationError(f"point count must be positive, got {n}")
        self._points = [
            Point(i, color_fn(i) if color_fn is not None else None) for i in range(n)
        ]

    @classmethod
    def create(
        cls,
        n: int,
        point_width: float,
        width: float,
        height: float,
        color_fn: Callable[[int], Any] | None = None,
        rng: random.Random | None = None,
    ) -> PointSet:
        """Create ``n`` colored points scattered over the canvas."""
        return scatter(cls(n, color_fn), point_width, width, height, rng)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def positions(self) -> list[Position]:
        return [(p.x, p.y) for p in self._points]

    def assign(self, positions: Sequence[Position]) -> None:
        """Write a full set of coordinates. Length must match exactly."""
        if len(positions) != len(self._points):
            raise ConfigurationError(
                f"expected {len(self._points)} positions, got {len(positions)}"
            )
        for point, (x, y) in zip(self._points, positions):
            point.x = x
            point.y = y

    def in_transition(self) -> bool:
        return any(p.transition is not None for p in self._points)


def scatter(
    points: PointSet,
    point_width: float,
    width: float,
    height: float,
    rng: random.Random | None = None,
) -> PointSet:
    """Place points uniformly over ``[0, width - point_width)`` x ``[0, height - point_width)``.

    Never fails for a canvas smaller than a point; the range just goes negative.
    """
    r = rng if rng is not None else random
    for point in points:
        point.x = r.random() * (width - point_width)
        point.y = r.random() * (height - point_width)
    return points
