"""Tests for the animator loop, renderers, hooks and pacing."""

from unittest.mock import patch

import pytest
from bloom import Animator, Layout, PointSet, Sequencer
from bloom.engine import time as engine_time


def _to(value):
    def apply(points):
        for p in points:
            p.x = p.y = value
        return points

    return Layout(name=f"to{value}", apply=apply)


def _animator(fps=10, duration=1000, easing="linear", layouts=None):
    points = PointSet(3)
    return Animator(
        points,
        Sequencer(layouts or [_to(100.0), _to(0.0)]),
        fps=fps,
        duration=duration,
        easing=easing,
    )


# --- Initialization ---

def test_animator_defaults():
    animator = Animator(PointSet(1), Sequencer([_to(1.0)]))
    assert animator.clock.fps == 60
    assert animator.driver.duration == 8000
    assert not animator.driver.active


# --- Renderers ---

def test_renderers_run_every_frame_in_order():
    animator = _animator()
    calls = []
    animator.add_renderer(lambda points, ctx: calls.append(("first", ctx.frame_number)))
    animator.add_renderer(lambda points, ctx: calls.append(("second", ctx.frame_number)))
    animator.step()
    animator.step()
    assert calls == [("first", 1), ("second", 1), ("first", 2), ("second", 2)]


def test_renderer_sees_interpolated_frame():
    animator = _animator()
    seen = []
    animator.add_renderer(lambda points, ctx: seen.append(points[0].x))
    animator.play()
    animator.run(5)
    # 10 fps -> 100 ms per frame over a 1000 ms linear transition
    assert seen == [pytest.approx(10.0 * k) for k in range(1, 6)]


def test_paused_animator_renders_without_moving():
    animator = _animator()
    seen = []
    animator.add_renderer(lambda points, ctx: seen.append(points[0].x))
    animator.run(3)
    assert seen == [0.0, 0.0, 0.0]


# --- play / pause ---

def test_play_starts_from_clock_time():
    animator = _animator()
    animator.run(4)
    animator.play()
    assert animator.driver.started_at == pytest.approx(400.0)
    animator.step()
    assert animator.points[0].x == pytest.approx(10.0)


def test_play_twice_does_not_restart():
    animator = _animator()
    animator.play()
    animator.step()
    animator.play()
    assert animator.driver.started_at == 0.0


def test_pause_freezes_points():
    animator = _animator()
    animator.play()
    animator.run(3)
    animator.pause()
    animator.run(3)
    assert animator.points[0].x == pytest.approx(30.0)


def test_full_cycle_through_sequence():
    animator = _animator()
    names = []
    animator.driver.on_transition_complete(lambda layout: names.append(layout.name))
    animator.play()
    animator.run(20)
    assert names == ["to100.0", "to0.0"]
    assert animator.points[0].x == 0.0


# --- run(n) and hooks ---

def test_run_calls_start_and_stop_hooks():
    animator = _animator()
    events = []
    animator.on_start(lambda points, ctx: events.append("start"))
    animator.on_stop(lambda points, ctx: events.append("stop"))
    animator.add_renderer(lambda points, ctx: events.append(f"frame-{ctx.frame_number}"))
    animator.run(2)
    assert events == ["start", "frame-1", "frame-2", "stop"]


def test_request_stop_ends_run_early():
    animator = _animator()
    frames = []

    def stop_at_three(points, ctx):
        frames.append(ctx.frame_number)
        if ctx.frame_number == 3:
            ctx.request_stop()

    animator.add_renderer(stop_at_three)
    animator.run(10)
    assert frames == [1, 2, 3]
    assert animator.stop_requested


def test_request_stop_skips_later_renderers():
    animator = _animator()
    calls = []
    animator.add_renderer(lambda points, ctx: ctx.request_stop())
    animator.add_renderer(lambda points, ctx: calls.append(ctx.frame_number))
    animator.step()
    assert calls == []


def test_renderer_error_propagates():
    animator = _animator()

    def broken(points, ctx):
        raise RuntimeError("display gone")

    animator.add_renderer(broken)
    animator.play()
    with pytest.raises(RuntimeError, match="display gone"):
        animator.step()
    assert animator.points[0].x == pytest.approx(10.0)


# --- run_forever pacing ---

def test_run_forever_sleeps_remaining_frame_time():
    animator = _animator(fps=10)

    def stop_after_two(points, ctx):
        if ctx.frame_number == 2:
            ctx.request_stop()

    animator.add_renderer(stop_after_two)
    with patch.object(engine_time, "monotonic", side_effect=[0.0, 0.02, 0.1, 0.1]), \
            patch.object(engine_time, "sleep") as sleep:
        animator.run_forever()
    sleep.assert_called_once()
    assert sleep.call_args[0][0] == pytest.approx(0.08)


# --- run_cycle ---

def test_run_cycle_visits_every_layout_once():
    animator = _animator()
    names = []
    animator.driver.on_transition_complete(lambda layout: names.append(layout.name))
    frames = animator.run_cycle()
    # 1000 ms per transition at 100 ms per frame
    assert frames == 20
    assert names == ["to100.0", "to0.0"]
    assert animator.driver.sequencer.index == 0
    assert animator.driver.active


def test_run_cycle_after_pause_counts_remaining_frames():
    animator = _animator()
    animator.play()
    animator.run(3)
    animator.pause()
    frames = animator.run_cycle()
    assert frames == 20
    assert animator.driver.transitions_completed == 2


def test_run_cycle_from_mid_transition():
    animator = _animator()
    animator.play()
    animator.run(3)
    assert animator.run_cycle() == 17


def test_run_cycle_fires_hooks_once():
    animator = _animator()
    events = []
    animator.on_start(lambda points, ctx: events.append(("start", ctx.frame_number)))
    animator.on_stop(lambda points, ctx: events.append(("stop", ctx.frame_number)))
    animator.run_cycle()
    assert events == [("start", 0), ("stop", 20)]


def test_run_cycle_honors_stop_request():
    animator = _animator()

    def stop_at_four(points, ctx):
        if ctx.frame_number == 4:
            ctx.request_stop()

    animator.add_renderer(stop_at_four)
    assert animator.run_cycle() == 4
    assert animator.points[0].x == pytest.approx(40.0)


def test_play_after_pause_resumes_from_frozen_points():
    animator = _animator()
    animator.play()
    animator.run(5)
    animator.pause()
    animator.run(2)
    animator.play()
    assert animator.driver.started_at == pytest.approx(700.0)
    animator.step()
    # 50 -> 100 over 1000 ms, one 100 ms frame in
    assert animator.points[0].x == pytest.approx(55.0)
