"""Optional frame capture to numbered PNG files."""
from __future__ import annotations

import logging
from pathlib import Path

import pygame

from bloom import FrameContext, PointSet

logger = logging.getLogger("bloom.capture")


class FrameCapture:
    """Saves the surface after each redraw; stops the loop once ``limit`` frames exist."""

    def __init__(
        self,
        surface: pygame.Surface,
        directory: str | Path,
        every: int = 1,
        limit: int | None = None,
    ) -> None:
        if every <= 0:
            raise ValueError("every must be positive")
        self._surface = surface
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)
        self._every = every
        self._limit = limit
        self._saved = 0

    @property
    def saved(self) -> int:
        return self._saved

    def __call__(self, points: PointSet, ctx: FrameContext) -> None:
        if ctx.frame_number % self._every:
            return
        path = self._dir / f"frame_{self._saved:06d}.png"
        pygame.image.save(self._surface, str(path))
        self._saved += 1
        if self._limit is not None and self._saved >= self._limit:
            logger.info("Captured %d frames to %s", self._saved, self._dir)
            ctx.request_stop()
