"""Tests for the composite motif layouts."""
import math

import pytest

from bloom import ConfigurationError, PointSet, RangeMismatchError
from bloom_layouts import (
    Lattice,
    MotifBuilder,
    Ring,
    Segment,
    flower_layout,
    meta_layout,
    tree_layout,
)
from bloom_layouts import motifs

N = 64000
PW = 4.0
W = H = 600
RADIUS = 59.2
TREE_RADIUS = 20.0


@pytest.fixture(scope="module")
def lattice():
    return Lattice.build(RADIUS, center=(W / 2, H / 2))


def _flower(lattice, n=N, symbols=motifs.FLOWER_F, **kwargs):
    return flower_layout(n, PW, W, H, lattice, symbols, RADIUS, **kwargs)


def _tree(lattice, n=N, **kwargs):
    return tree_layout(
        n, PW, W, H, lattice, motifs.TREE_CIRCLES, motifs.TREE_LINES, TREE_RADIUS, **kwargs
    )


def _meta(lattice, n=N, **kwargs):
    return meta_layout(
        n, PW, W, H, lattice, motifs.META_CIRCLES, motifs.META_LINES, RADIUS, **kwargs
    )


def _assert_all_finite(points):
    for p in points:
        assert math.isfinite(p.x) and math.isfinite(p.y), p


class TestFlower:
    def test_default_configuration_balances(self, lattice):
        layout = _flower(lattice)
        rings = layout.apply.elements
        assert len(rings) == 62
        assert sum(len(e.span) for e in rings) == N
        assert len(rings[-1].span) == 3000

    def test_every_point_placed_and_finite(self, lattice):
        points = _flower(lattice)(PointSet(N))
        _assert_all_finite(points)

    def test_ring_points_sit_on_their_anchor_circle(self, lattice):
        points = _flower(lattice)(PointSet(N))
        for k, anchor in enumerate(motifs.FLOWER_F[:5]):
            cx, cy = lattice[anchor]
            for i in (k * 1000, k * 1000 + 517, k * 1000 + 999):
                assert math.hypot(points[i].x - cx, points[i].y - cy) == pytest.approx(RADIUS)

    def test_bounding_circle(self, lattice):
        points = _flower(lattice)(PointSet(N))
        for i in (61000, 62345, 63999):
            d = math.hypot(points[i].x - 300, points[i].y - 300)
            assert d == pytest.approx(300 - PW / 2)

    def test_ring_angle_runs_over_global_index(self, lattice):
        layout = _flower(lattice)
        points = layout(PointSet(N))
        i = 2500
        theta = i * 64 * 2 * math.pi / (N - 1)
        assert layout.apply.theta(i) == pytest.approx(theta)
        cx, cy = lattice[motifs.FLOWER_F[2]]
        assert points[i].x == pytest.approx(cx + RADIUS * math.cos(theta))
        assert points[i].y == pytest.approx(cy + RADIUS * math.sin(theta))

    @pytest.mark.parametrize("n", [63999, 64001, 63000, 65000, 1000])
    def test_other_point_counts_rejected(self, lattice, n):
        with pytest.raises(RangeMismatchError):
            _flower(lattice, n=n)

    def test_smaller_flower_balances_for_matching_count(self, lattice):
        layout = _flower(lattice, n=10000, symbols=motifs.FLOWER_2)
        points = layout(PointSet(10000))
        _assert_all_finite(points)

    def test_seed_flower_needs_four_blocks(self, lattice):
        assert _flower(lattice, n=4000, symbols=motifs.FLOWER_1).name == "flower[1]"
        with pytest.raises(RangeMismatchError):
            _flower(lattice, n=N, symbols=motifs.FLOWER_1)

    def test_wrong_point_set_rejected_before_mutation(self, lattice):
        layout = _flower(lattice)
        points = PointSet(100)
        with pytest.raises(ConfigurationError, match="64000"):
            layout(points)
        assert points.positions() == [(0.0, 0.0)] * 100

    def test_unknown_anchor_rejected(self, lattice):
        with pytest.raises(ConfigurationError, match="anchor"):
            _flower(lattice, n=4000, symbols=(500,))


class TestTree:
    def test_default_configuration_balances(self, lattice):
        layout = _tree(lattice)
        elements = layout.apply.elements
        rings = [e for e in elements if isinstance(e, Ring)]
        segments = [e for e in elements if isinstance(e, Segment)]
        assert len(rings) == 10
        assert len(segments) == 22
        assert all(len(e.span) == 2000 for e in elements)
        assert elements[-1].span.stop == N

    def test_every_point_placed_and_finite(self, lattice):
        _assert_all_finite(_tree(lattice)(PointSet(N)))

    def test_thick_rings(self, lattice):
        points = _tree(lattice)(PointSet(N))
        cx, cy = lattice[motifs.TIPHARETH]
        for i in (0, 999, 1000, 1999):
            assert math.hypot(points[i].x - cx, points[i].y - cy) == pytest.approx(TREE_RADIUS)

    def test_line_points_interpolate_between_anchors(self, lattice):
        points = _tree(lattice)(PointSet(N))
        start = 20000  # after 10 rings of 2000
        a, b = motifs.TREE_LINES[0]
        (ax, ay), (bx, by) = lattice[a], lattice[b]
        for j in (0, 500, 1000, 1999):
            p = points[start + j]
            assert p.x == pytest.approx(ax + (bx - ax) * j / 2000)
            assert p.y == pytest.approx(ay + (by - ay) * j / 2000)

    def test_custom_line_domain(self, lattice):
        points = _tree(lattice, line_domain=1000)(PointSet(N))
        a, b = motifs.TREE_LINES[0]
        bx, by = lattice[b]
        assert points[21000].x == pytest.approx(bx)
        assert points[21000].y == pytest.approx(by)

    def test_bad_line_domain_rejected(self, lattice):
        with pytest.raises(ConfigurationError, match="domain"):
            _tree(lattice, line_domain=0)

    def test_other_point_counts_rejected(self, lattice):
        with pytest.raises(RangeMismatchError):
            _tree(lattice, n=62000)


class TestMeta:
    def test_default_configuration_balances(self, lattice):
        layout = _meta(lattice)
        elements = layout.apply.elements
        assert len(elements) == 14 + 1 + 48
        assert sum(len(e.span) for e in elements) == N
        outer = elements[14]
        assert isinstance(outer, Ring)
        assert len(outer.span) == 2000
        assert outer.radius == pytest.approx(298.0)

    def test_every_point_placed_and_finite(self, lattice):
        _assert_all_finite(_meta(lattice)(PointSet(N)))

    def test_segments_use_their_own_range_length(self, lattice):
        points = _meta(lattice)(PointSet(N))
        start = 16000  # 14 rings + 2 outer blocks
        a, b = motifs.META_LINES[0]
        (ax, ay), (bx, by) = lattice[a], lattice[b]
        p = points[start + 500]
        assert p.x == pytest.approx((ax + bx) / 2)
        assert p.y == pytest.approx((ay + by) / 2)

    def test_outer_nodes_fit_inside_bounding_circle(self, lattice):
        for anchor in motifs.META_OUTER:
            x, y = lattice[anchor]
            assert math.hypot(x - 300, y - 300) + RADIUS < 300

    def test_other_point_counts_rejected(self, lattice):
        with pytest.raises(RangeMismatchError):
            _meta(lattice, n=63000)


class TestMotifBuilder:
    def test_single_point_ring_is_defined(self):
        lattice = Lattice.build(0.0, rows=1, cols=1, center=(0.0, 0.0))
        layout = MotifBuilder(1, 1, lattice).rings([0], 3.0).build(periods=64)
        points = layout(PointSet(1))
        assert (points[0].x, points[0].y) == (3.0, 0.0)

    def test_zero_radius_ring_collapses_to_anchor(self):
        lattice = Lattice.build(0.0, rows=1, cols=1, center=(4.0, 5.0))
        points = MotifBuilder(50, 50, lattice).rings([0], 0.0).build(periods=3)(PointSet(50))
        assert set(points.positions()) == {(4.0, 5.0)}

    def test_zero_length_segment(self):
        lattice = Lattice.build(0.0, rows=1, cols=1, center=(1.0, 2.0))
        points = MotifBuilder(10, 10, lattice).lines([(0, 0)]).build(periods=1)(PointSet(10))
        assert set(points.positions()) == {(1.0, 2.0)}

    def test_unfinished_plan_rejected(self):
        lattice = Lattice.build(10.0)
        with pytest.raises(RangeMismatchError, match="cover 1000 of 3000"):
            MotifBuilder(3000, 1000, lattice).rings([76], 10.0).build(periods=64)
