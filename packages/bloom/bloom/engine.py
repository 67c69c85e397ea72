"""Animator - frame loop, pacing, and lifecycle hooks."""

import time
from contextlib import contextmanager
from typing import Callable, Iterator

from bloom.clock import FrameClock
from bloom.driver import TweenDriver
from bloom.easing import DEFAULT_EASING, Easing
from bloom.points import PointSet
from bloom.sequencer import Sequencer
from bloom.types import FrameContext, Renderer


class Animator:
    def __init__(
        self,
        points: PointSet,
        sequencer: Sequencer,
        fps: int = 60,
        duration: float = 8000,
        easing: str | Easing = DEFAULT_EASING,
    ) -> None:
        self._clock = FrameClock(fps)
        self._points = points
        self._driver = TweenDriver(points, sequencer, duration=duration, easing=easing)
        self._renderers: list[Renderer] = []
        self._start_hooks: list[Callable[[PointSet, FrameContext], None]] = []
        self._stop_hooks: list[Callable[[PointSet, FrameContext], None]] = []
        self._stop_requested: bool = False

    @property
    def points(self) -> PointSet:
        return self._points

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def driver(self) -> TweenDriver:
        return self._driver

    def add_renderer(self, renderer: Renderer) -> None:
        self._renderers.append(renderer)

    def on_start(self, hook: Callable[[PointSet, FrameContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[PointSet, FrameContext], None]) -> None:
        self._stop_hooks.append(hook)

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def _request_stop(self) -> None:
        self._stop_requested = True

    def play(self) -> None:
        """Start (or resume) transitioning from the clock's current time."""
        self._driver.resume(self._clock.elapsed)

    def pause(self) -> None:
        self._driver.stop()

    def _frame(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        if self._driver.active:
            self._driver.tick(ctx.elapsed)
        for renderer in self._renderers:
            renderer(self._points, ctx)
            if self._stop_requested:
                break

    @contextmanager
    def _session(self) -> Iterator[None]:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self._points, self._clock.context(self._request_stop))
        yield
        for hook in self._stop_hooks:
            hook(self._points, self._clock.context(self._request_stop))

    def step(self) -> None:
        self._stop_requested = False
        self._frame()

    def run(self, n: int) -> None:
        with self._session():
            for _ in range(n):
                self._frame()
                if self._stop_requested:
                    break

    def run_cycle(self) -> int:
        """Play one lap of the sequencer and return the number of frames drawn.

        Ends once every layout in the cycle has been reached, or earlier if a
        renderer requests a stop.
        """
        self.play()
        laps = len(self._driver.sequencer)
        goal = self._driver.transitions_completed + laps
        limit = (self._clock.frames_for(self._driver.duration) + 1) * laps
        frames = 0
        with self._session():
            while self._driver.transitions_completed < goal and frames < limit:
                self._frame()
                frames += 1
                if self._stop_requested:
                    break
        return frames

    def run_forever(self) -> None:
        dt = self._clock.dt / 1000.0
        with self._session():
            while not self._stop_requested:
                start = time.monotonic()
                self._frame()
                if self._stop_requested:
                    break
                sleep_time = dt - (time.monotonic() - start)
                if sleep_time > 0:
                    time.sleep(sleep_time)
