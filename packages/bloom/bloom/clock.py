"""Fixed-step frame clock measured in milliseconds."""

import math
from typing import Callable

from bloom.types import FrameContext


class FrameClock:
    def __init__(self, fps: int) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._dt = 1000.0 / fps
        self._frame_number = 0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        return self._frame_number * self._dt

    def advance(self) -> int:
        self._frame_number += 1
        return self._frame_number

    def context(self, stop_fn: Callable[[], None]) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._dt,
            elapsed=self.elapsed,
            request_stop=stop_fn,
        )

    def reset(self, frame_number: int = 0) -> None:
        self._frame_number = frame_number

    def frames_for(self, duration: float) -> int:
        """Frames needed for ``elapsed`` to cover ``duration`` milliseconds."""
        return max(1, math.ceil(duration / self._dt - 1e-9))
