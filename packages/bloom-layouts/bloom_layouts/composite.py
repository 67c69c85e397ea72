"""Composite motif layouts: flower of life, tree of life, Metatron's cube.

A composite layout is a list of elements, each owning a contiguous range
of point indices: rings around lattice anchors, one bounding circle, and
straight segments between two anchors. The ranges are validated against
the point count when the layout is built, so an unbalanced configuration
fails before a single point moves.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Union

from bloom import ConfigurationError, Layout, PointSet

from bloom_layouts.lattice import Anchor, Lattice
from bloom_layouts.ranges import PointRange, RangeAllocator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ring:
    span: PointRange
    cx: float
    cy: float
    radius: float


@dataclass(frozen=True)
class Segment:
    span: PointRange
    ax: float
    ay: float
    bx: float
    by: float
    domain: float


Element = Union[Ring, Segment]


class MotifLayout:
    """Callable layout over a validated, fixed plan of rings and segments."""

    def __init__(self, n: int, elements: Sequence[Element], periods: float) -> None:
        self._n = n
        self._elements = tuple(elements)
        self._periods = periods
        self._theta_step = periods * 2 * math.pi / (n - 1) if n > 1 else 0.0

    @property
    def n(self) -> int:
        return self._n

    @property
    def elements(self) -> tuple[Element, ...]:
        return self._elements

    def theta(self, index: int) -> float:
        """Ring angle of global point ``index``; turns continue across rings."""
        return index * self._theta_step

    def __call__(self, points: PointSet) -> PointSet:
        if len(points) != self._n:
            raise ConfigurationError(
                f"layout built for {self._n} points, got {len(points)}"
            )
        for element in self._elements:
            if isinstance(element, Ring):
                self._place_ring(points, element)
            else:
                self._place_segment(points, element)
        return points

    def _place_ring(self, points: PointSet, ring: Ring) -> None:
        for i in ring.span:
            theta = i * self._theta_step
            point = points[i]
            point.x = ring.cx + ring.radius * math.cos(theta)
            point.y = ring.cy + ring.radius * math.sin(theta)

    def _place_segment(self, points: PointSet, seg: Segment) -> None:
        dx = seg.bx - seg.ax
        dy = seg.by - seg.ay
        for i in seg.span:
            f = seg.span.local(i) / seg.domain
            point = points[i]
            point.x = seg.ax + dx * f
            point.y = seg.ay + dy * f


class MotifBuilder:
    """Accumulates motif elements, allocating point ranges in call order."""

    def __init__(self, n: int, block_size: int, lattice: Lattice) -> None:
        self._allocator = RangeAllocator(n, block_size)
        self._lattice = lattice
        self._elements: list[Element] = []

    def rings(self, symbols: Iterable[int], radius: float, blocks: int = 1) -> MotifBuilder:
        """One ring of ``radius`` per anchor in ``symbols``."""
        symbols = list(symbols)
        for k, (cx, cy) in enumerate(self._lattice.anchors(symbols)):
            span = self._allocator.allocate(f"ring{k}:{symbols[k]}", blocks)
            self._elements.append(Ring(span, cx, cy, radius))
        return self

    def circle(self, name: str, center: Anchor, radius: float, blocks: int = 1) -> MotifBuilder:
        span = self._allocator.allocate(name, blocks)
        self._elements.append(Ring(span, center[0], center[1], radius))
        return self

    def lines(
        self,
        pairs: Iterable[tuple[int, int]],
        blocks: int = 1,
        domain: float | None = None,
    ) -> MotifBuilder:
        """One straight segment per anchor pair.

        Point ``j`` of a segment's range sits at ``a + (b - a) * j / domain``;
        ``domain`` defaults to the range length.
        """
        if domain is not None and domain <= 0:
            raise ConfigurationError(f"line domain must be positive, got {domain}")
        for k, (a, b) in enumerate(pairs):
            (ax, ay), (bx, by) = self._lattice.anchors((a, b))
            span = self._allocator.allocate(f"line{k}:{a}-{b}", blocks)
            d = domain if domain is not None else len(span)
            self._elements.append(Segment(span, ax, ay, bx, by, d))
        return self

    def build(self, periods: float) -> MotifLayout:
        self._allocator.finish()
        return MotifLayout(self._allocator.total, self._elements, periods)


def _outer_circle(point_width: float, width: float, height: float) -> tuple[Anchor, float]:
    return (width / 2, height / 2), height / 2 - point_width / 2


def flower_layout(
    n: int,
    point_width: float,
    width: float,
    height: float,
    lattice: Lattice,
    symbols: Sequence[int],
    radius: float,
    block_size: int = 1000,
    periods: float = 64,
    outer_blocks: int = 3,
) -> Layout:
    """Flower of life: one ring per symbol anchor inside a bounding circle.

    Needs ``(len(symbols) + outer_blocks) * block_size == n``.
    """
    center, outer_radius = _outer_circle(point_width, width, height)
    plan = (
        MotifBuilder(n, block_size, lattice)
        .rings(symbols, radius)
        .circle("outer", center, outer_radius, outer_blocks)
        .build(periods)
    )
    logger.debug("flower layout: %d rings over %d points", len(symbols), n)
    return Layout(name=f"flower[{len(symbols)}]", apply=plan)


def tree_layout(
    n: int,
    point_width: float,
    width: float,
    height: float,
    lattice: Lattice,
    symbols: Sequence[int],
    lines: Sequence[tuple[int, int]],
    radius: float,
    block_size: int = 1000,
    periods: float = 64,
    ring_blocks: int = 2,
    line_blocks: int = 2,
    line_domain: float | None = None,
) -> Layout:
    """Tree of life: thick node rings joined by straight paths."""
    plan = (
        MotifBuilder(n, block_size, lattice)
        .rings(symbols, radius, ring_blocks)
        .lines(lines, line_blocks, line_domain)
        .build(periods)
    )
    logger.debug("tree layout: %d nodes, %d paths", len(symbols), len(lines))
    return Layout(name="tree", apply=plan)


def meta_layout(
    n: int,
    point_width: float,
    width: float,
    height: float,
    lattice: Lattice,
    symbols: Sequence[int],
    lines: Sequence[tuple[int, int]],
    radius: float,
    block_size: int = 1000,
    periods: float = 64,
    ring_blocks: int = 1,
    outer_blocks: int = 2,
    line_blocks: int = 1,
    line_domain: float | None = None,
) -> Layout:
    """Metatron's cube: node rings, a bounding circle, and the connecting lines."""
    center, outer_radius = _outer_circle(point_width, width, height)
    plan = (
        MotifBuilder(n, block_size, lattice)
        .rings(symbols, radius, ring_blocks)
        .circle("outer", center, outer_radius, outer_blocks)
        .lines(lines, line_blocks, line_domain)
        .build(periods)
    )
    logger.debug("meta layout: %d nodes, %d lines", len(symbols), len(lines))
    return Layout(name="meta", apply=plan)
