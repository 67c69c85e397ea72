"""Default scene: the point set, the lattice, and the layout cycle."""
from __future__ import annotations

import logging
import random
from typing import Any, Callable, Sequence

from bloom import ConfigurationError, Layout, PointSet, SceneConfig, Sequencer

from bloom_layouts import motifs
from bloom_layouts.basic import random_layout, spiral_layout
from bloom_layouts.composite import flower_layout, meta_layout, tree_layout
from bloom_layouts.lattice import Lattice
from bloom_layouts.phyllotaxis import phyllotaxis_layout

logger = logging.getLogger(__name__)

DEFAULT_ORDER: tuple[str, ...] = ("tree", "phyllotaxis", "flower", "phyllotaxis", "meta")


def make_lattice(config: SceneConfig) -> Lattice:
    return Lattice.build(
        config.flower_radius,
        rows=config.lattice_rows,
        cols=config.lattice_cols,
        center=(config.width / 2, config.height / 2),
    )


def _phyllotaxis(config: SceneConfig, lattice: Lattice) -> Layout:
    return Layout.bind(
        "phyllotaxis",
        phyllotaxis_layout,
        point_width=config.layout_point_width,
        x_offset=config.width / 2,
        y_offset=config.height / 2,
        divisor=config.phyllotaxis_divisor,
    )


def _spiral(config: SceneConfig, lattice: Lattice) -> Layout:
    return Layout.bind(
        "spiral",
        spiral_layout,
        point_width=config.layout_point_width,
        width=config.width,
        height=config.height,
        periods=config.spiral_periods,
    )


def _scatter(config: SceneConfig, lattice: Lattice) -> Layout:
    return Layout.bind(
        "random",
        random_layout,
        point_width=config.layout_point_width,
        width=config.width,
        height=config.height,
    )


def _flower(config: SceneConfig, lattice: Lattice) -> Layout:
    return flower_layout(
        config.num_points,
        config.layout_point_width,
        config.width,
        config.height,
        lattice,
        motifs.FLOWER_F,
        config.flower_radius,
        block_size=config.block_size,
        periods=config.flower_periods,
    )


def _flower_variant(symbols: Sequence[int]) -> Callable[[SceneConfig, Lattice], Layout]:
    """Smaller flower whose bounding circle absorbs the blocks left over."""

    def factory(config: SceneConfig, lattice: Lattice) -> Layout:
        blocks, rest = divmod(config.num_points, config.block_size)
        outer_blocks = blocks - len(symbols)
        if rest or outer_blocks <= 0:
            raise ConfigurationError(
                f"flower[{len(symbols)}] needs a multiple of {config.block_size} "
                f"points above {len(symbols) * config.block_size}, got {config.num_points}"
            )
        return flower_layout(
            config.num_points,
            config.layout_point_width,
            config.width,
            config.height,
            lattice,
            symbols,
            config.flower_radius,
            block_size=config.block_size,
            periods=config.flower_periods,
            outer_blocks=outer_blocks,
        )

    return factory


def _tree(config: SceneConfig, lattice: Lattice) -> Layout:
    return tree_layout(
        config.num_points,
        config.layout_point_width,
        config.width,
        config.height,
        lattice,
        motifs.TREE_CIRCLES,
        motifs.TREE_LINES,
        config.tree_radius,
        block_size=config.block_size,
        periods=config.flower_periods,
    )


def _meta(config: SceneConfig, lattice: Lattice) -> Layout:
    return meta_layout(
        config.num_points,
        config.layout_point_width,
        config.width,
        config.height,
        lattice,
        motifs.META_CIRCLES,
        motifs.META_LINES,
        config.flower_radius,
        block_size=config.block_size,
        periods=config.flower_periods,
    )


LAYOUT_FACTORIES: dict[str, Callable[[SceneConfig, Lattice], Layout]] = {
    "phyllotaxis": _phyllotaxis,
    "spiral": _spiral,
    "random": _scatter,
    "flower": _flower,
    "flower_1": _flower_variant(motifs.FLOWER_1),
    "flower_2": _flower_variant(motifs.FLOWER_2),
    "flower_3": _flower_variant(motifs.FLOWER_3),
    "flower_4": _flower_variant(motifs.FLOWER_4),
    "tree": _tree,
    "meta": _meta,
}


def build_layouts(
    config: SceneConfig, names: Sequence[str] = DEFAULT_ORDER
) -> dict[str, Layout]:
    """Build each distinct named layout once, validating composites eagerly."""
    lattice = make_lattice(config)
    layouts: dict[str, Layout] = {}
    for name in names:
        if name in layouts:
            continue
        factory = LAYOUT_FACTORIES.get(name)
        if factory is None:
            raise ConfigurationError(
                f"Unknown layout {name!r}, expected one of {sorted(LAYOUT_FACTORIES)}"
            )
        layouts[name] = factory(config, lattice)
    return layouts


def build_sequence(
    config: SceneConfig, order: Sequence[str] = DEFAULT_ORDER
) -> Sequencer:
    layouts = build_layouts(config, order)
    logger.info("Layout cycle: %s", " -> ".join(order))
    return Sequencer(layouts[name] for name in order)


def initial_layout(config: SceneConfig) -> Layout:
    return _phyllotaxis(config, make_lattice(config))


def create_scene(
    config: SceneConfig,
    color_fn: Callable[[int], Any] | None = None,
    order: Sequence[str] = DEFAULT_ORDER,
) -> tuple[PointSet, Sequencer]:
    """Validate the cycle, then create scattered points settled into phyllotaxis."""
    config.validate()
    sequencer = build_sequence(config, order)
    points = PointSet.create(
        config.num_points,
        config.layout_point_width,
        config.width,
        config.height,
        color_fn,
        rng=random.Random(config.seed),
    )
    initial_layout(config)(points)
    logger.info("Created %d points on %dx%d canvas", len(points), config.width, config.height)
    return points, sequencer
