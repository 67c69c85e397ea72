"""Point color palette."""
from __future__ import annotations

from typing import Callable

from ui.constants import VIRIDIS

Color = tuple[int, int, int]


def viridis(t: float) -> Color:
    """Sample the viridis ramp at ``t`` in [0, 1]."""
    t = max(0.0, min(1.0, t))
    pos = t * (len(VIRIDIS) - 1)
    i = min(int(pos), len(VIRIDIS) - 2)
    f = pos - i
    a, b = VIRIDIS[i], VIRIDIS[i + 1]
    return tuple(round(ca + (cb - ca) * f) for ca, cb in zip(a, b))


def make_color_fn(num_points: int) -> Callable[[int], Color]:
    """Reverse ramp over ids: id 0 is brightest, the last id darkest."""
    last = max(num_points - 1, 1)

    def color_fn(point_id: int) -> Color:
        return viridis((last - point_id) / last)

    return color_fn
