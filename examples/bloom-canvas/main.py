"""Bloom Canvas - 64,000 points drifting between sacred-geometry layouts.

Exercises bloom (driver, sequencer, animator) and bloom-layouts.

Controls:
  Click   Pause / resume the layout cycle
  Space   Pause / resume
  Esc     Quit

Configuration is read from BLOOM_* environment variables first, then
overridden by command-line flags.

Run:
    python main.py --points 64000 --duration 8000
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

import pygame

from bloom import Animator, SceneConfig
from bloom.logging_config import setup_logging
from bloom_layouts import DEFAULT_ORDER, LAYOUT_FACTORIES, create_scene

from ui.capture import FrameCapture
from ui.constants import BG_COLOR, PAUSED_COLOR
from ui.palette import make_color_fn
from ui.renderer import make_renderer


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Bloom Canvas - animated point layouts")
    p.add_argument("--points", type=int, default=None, help="Number of points (default: 64000)")
    p.add_argument("--duration", type=float, default=None, help="Transition length in ms (default: 8000)")
    p.add_argument("--easing", type=str, default=None, help="Easing name (default: cubic_in_out)")
    p.add_argument("--fps", type=int, default=None, help="Frames per second (default: 60)")
    p.add_argument("--seed", type=int, default=None, help="Seed for the initial scatter")
    p.add_argument("--order", type=str, default=",".join(DEFAULT_ORDER),
                   help=f"Comma-separated layout cycle from {sorted(LAYOUT_FACTORIES)}")
    p.add_argument("--capture", type=str, default=None, metavar="DIR",
                   help="Save every rendered frame as PNG into DIR")
    p.add_argument("--capture-limit", type=int, default=None, metavar="N",
                   help="Quit after capturing N frames")
    p.add_argument("--autoplay", action="store_true", help="Start animating immediately")
    p.add_argument("--log-level", type=str, default="INFO", help="Logging level (default: INFO)")
    return p.parse_args()


def load_config(args: argparse.Namespace) -> SceneConfig:
    config = SceneConfig.from_env()
    overrides = {
        "num_points": args.points,
        "duration": args.duration,
        "easing": args.easing,
        "fps": args.fps,
        "seed": args.seed,
    }
    return replace(config, **{k: v for k, v in overrides.items() if v is not None}).validate()


def main() -> None:
    args = parse_args()
    setup_logging(getattr(logging, args.log_level.upper(), logging.INFO))
    config = load_config(args)
    order = [name.strip() for name in args.order.split(",") if name.strip()]

    # Validate every layout before opening a window
    points, sequencer = create_scene(config, make_color_fn(config.num_points), order)

    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption("Bloom Canvas - click to play")
    clock = pygame.time.Clock()

    animator = Animator(
        points,
        sequencer,
        fps=config.fps,
        duration=config.duration,
        easing=config.easing,
    )
    animator.add_renderer(make_renderer(screen, int(config.point_width), BG_COLOR))
    if args.capture:
        animator.add_renderer(FrameCapture(screen, args.capture, limit=args.capture_limit))
    animator.driver.on_transition_start(
        lambda layout: pygame.display.set_caption(f"Bloom Canvas - {layout.name}")
    )

    if args.autoplay:
        animator.play()

    tick_interval = 1.0 / config.fps
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(config.fps) / 1000.0
        # drop frames when drawing 64k squares falls behind the clock
        accumulator = min(accumulator + dt, 2 * tick_interval)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    _toggle(animator)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                _toggle(animator)

        # --- Tick + render ---
        while accumulator >= tick_interval:
            animator.step()
            accumulator -= tick_interval
            if animator.stop_requested:
                running = False
                break

        if not animator.driver.active:
            pygame.draw.rect(screen, PAUSED_COLOR, (8, 8, 6, 18))
            pygame.draw.rect(screen, PAUSED_COLOR, (18, 8, 6, 18))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


def _toggle(animator: Animator) -> None:
    if animator.driver.active:
        animator.pause()
    else:
        animator.play()


if __name__ == "__main__":
    main()
