"""Random scatter and spiral layouts."""
from __future__ import annotations

import math
import random as _random
from typing import Callable

from bloom import PointSet
from bloom.points import scatter


def linear_scale(
    d0: float, d1: float, r0: float, r1: float
) -> Callable[[float], float]:
    """Map ``[d0, d1]`` linearly onto ``[r0, r1]``.

    A zero-width domain maps every input to ``r0``.
    """
    span = d1 - d0
    if span == 0:
        return lambda _x: r0
    k = (r1 - r0) / span
    return lambda x: r0 + (x - d0) * k


def random_layout(
    points: PointSet,
    point_width: float,
    width: float,
    height: float,
    rng: _random.Random | None = None,
) -> PointSet:
    """Random scatter, the same placement new point sets start from."""
    return scatter(points, point_width, width, height, rng)


def spiral_layout(
    points: PointSet,
    point_width: float,
    width: float,
    height: float,
    periods: float = 20,
) -> PointSet:
    """Archimedean spiral from the canvas center outwards."""
    last = len(points) - 1
    r_scale = linear_scale(0, last, 0, min(width / 2, height / 2) - point_width)
    theta_scale = linear_scale(0, last, 0, periods * 2 * math.pi)
    x_offset = width / 2
    y_offset = height / 2

    for i, point in enumerate(points):
        r = r_scale(i)
        theta = theta_scale(i)
        point.x = r * math.cos(theta) + x_offset
        point.y = r * math.sin(theta) + y_offset
    return points
