"""Tween driver - interpolates every point from its source to a layout's target."""
from __future__ import annotations

import logging
from typing import Callable

from bloom.easing import DEFAULT_EASING, Easing, resolve_easing
from bloom.points import PointSet, TransitionRecord
from bloom.sequencer import Sequencer
from bloom.types import ConfigurationError, DriverStateError, FrameHook, Layout

logger = logging.getLogger(__name__)

IDLE = "idle"
TRANSITIONING = "transitioning"

# state -> event -> next state. Anything missing is an illegal event.
TRANSITIONS: dict[str, dict[str, str]] = {
    IDLE: {"begin": TRANSITIONING, "stop": IDLE},
    TRANSITIONING: {"tick": TRANSITIONING, "complete": IDLE, "stop": IDLE},
}

LayoutHook = Callable[[Layout], None]


class TweenDriver:
    """Animation state machine driving a PointSet through a Sequencer.

    Each transition snapshots the current positions, asks the layout for
    target positions and blends between the two on every ``tick(now)``.
    When eased progress reaches exactly 1 the driver advances the sequencer
    and begins the next transition from the same ``now``, so the cycle
    runs until ``stop()`` is called.

    ``now`` is any monotonic time in the same unit as ``duration``
    (milliseconds by default).
    """

    def __init__(
        self,
        points: PointSet,
        sequencer: Sequencer,
        duration: float = 8000,
        easing: str | Easing = DEFAULT_EASING,
        on_frame: FrameHook | None = None,
    ) -> None:
        if duration <= 0:
            raise ConfigurationError(f"duration must be positive, got {duration}")
        self._points = points
        self._sequencer = sequencer
        self._duration = duration
        self._ease = resolve_easing(easing)
        self._on_frame = on_frame
        self._state = IDLE
        self._layout: Layout | None = None
        self._started_at = 0.0
        self._completed = 0
        self._start_hooks: list[LayoutHook] = []
        self._complete_hooks: list[LayoutHook] = []

    @property
    def state(self) -> str:
        return self._state

    @property
    def active(self) -> bool:
        return self._state == TRANSITIONING

    @property
    def layout(self) -> Layout | None:
        """Target layout of the active transition, or None when idle."""
        return self._layout

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def easing(self) -> Easing:
        return self._ease

    @property
    def started_at(self) -> float:
        return self._started_at

    @property
    def transitions_completed(self) -> int:
        return self._completed

    @property
    def points(self) -> PointSet:
        return self._points

    @property
    def sequencer(self) -> Sequencer:
        return self._sequencer

    def on_transition_start(self, hook: LayoutHook) -> None:
        self._start_hooks.append(hook)

    def on_transition_complete(self, hook: LayoutHook) -> None:
        self._complete_hooks.append(hook)

    def _fire(self, event: str) -> None:
        target = TRANSITIONS[self._state].get(event)
        if target is None:
            raise DriverStateError(self._state, event)
        self._state = target

    def progress(self, elapsed: float) -> float:
        """Eased progress ``t`` in [0, 1] after ``elapsed`` time units."""
        p = min(1.0, max(0.0, elapsed / self._duration))
        if p >= 1.0:
            return 1.0
        return min(1.0, self._ease(p))

    def start(self, now: float) -> None:
        """Begin a transition to the sequencer's current layout."""
        self.begin_transition(self._sequencer.current(), now)

    def resume(self, now: float) -> None:
        """Restart the current layout from wherever the points were stopped.

        Does nothing while a transition is already running.
        """
        if self.active:
            return
        logger.debug("Resuming towards %s", self._sequencer.current().name)
        self.start(now)

    def begin_transition(self, layout: Layout, now: float) -> None:
        if self._state != IDLE:
            raise DriverStateError(self._state, "begin")

        sources = self._points.positions()
        try:
            layout(self._points)
        except Exception:
            self._points.assign(sources)
            raise

        for point, (sx, sy) in zip(self._points, sources):
            point.transition = TransitionRecord(sx=sx, sy=sy, tx=point.x, ty=point.y)
            point.x = sx
            point.y = sy

        self._fire("begin")
        self._layout = layout
        self._started_at = now
        logger.debug("Transition to %s started at %s", layout.name, now)
        for hook in self._start_hooks:
            hook(layout)

    def tick(self, now: float) -> float:
        """Interpolate all points for time ``now`` and return the eased ``t``."""
        self._fire("tick")
        t = self.progress(now - self._started_at)
        u = 1.0 - t

        for point in self._points:
            rec = point.transition
            point.x = rec.sx * u + rec.tx * t
            point.y = rec.sy * u + rec.ty * t

        if self._on_frame is not None:
            self._on_frame(self._points)

        if t == 1.0:
            self._finish()
            self.begin_transition(self._sequencer.advance(), now)
        return t

    def stop(self) -> None:
        """Halt the active transition. Points keep their last interpolated values."""
        was_active = self.active
        self._fire("stop")
        if was_active:
            self._clear_records()
            logger.debug("Transition to %s stopped", self._layout.name)
            self._layout = None

    def _finish(self) -> None:
        layout = self._layout
        self._fire("complete")
        self._clear_records()
        self._layout = None
        self._completed += 1
        logger.debug("Transition to %s complete", layout.name)
        for hook in self._complete_hooks:
            hook(layout)

    def _clear_records(self) -> None:
        for point in self._points:
            point.transition = None
