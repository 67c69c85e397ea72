"""Point renderer."""
from __future__ import annotations

import pygame

from bloom import FrameContext, PointSet


def make_renderer(
    surface: pygame.Surface,
    point_width: int,
    background: tuple[int, int, int],
):
    """Return a renderer that clears ``surface`` and draws every point as a square."""

    def render(points: PointSet, ctx: FrameContext) -> None:
        surface.fill(background)
        fill = surface.fill
        for point in points:
            fill(point.color, (int(point.x), int(point.y), point_width, point_width))

    return render
