"""Phyllotaxis (sunflower) layout."""
from __future__ import annotations

import math

from bloom import PointSet

# golden angle in radians
THETA = math.pi * (3 - math.sqrt(5))


def phyllotaxis_layout(
    points: PointSet,
    point_width: float,
    x_offset: float = 0.0,
    y_offset: float = 0.0,
    index_offset: int = 0,
    divisor: float = 2.8,
) -> PointSet:
    """Place point ``i`` at golden-angle step ``(i + index_offset) mod N``.

    Step 0 lands on ``(x_offset - r, y_offset - r)`` with ``r = point_width / divisor``.
    """
    n = len(points)
    r = point_width / divisor

    for i, point in enumerate(points):
        idx = (i + index_offset) % n
        dist = r * math.sqrt(idx)
        point.x = x_offset + dist * math.cos(idx * THETA) - r
        point.y = y_offset + dist * math.sin(idx * THETA) - r
    return points
