"""bloom-layouts - Layout generators and motif geometry for bloom."""
from __future__ import annotations

from bloom_layouts.basic import linear_scale, random_layout, spiral_layout
from bloom_layouts.composite import (
    MotifBuilder,
    MotifLayout,
    Ring,
    Segment,
    flower_layout,
    meta_layout,
    tree_layout,
)
from bloom_layouts.lattice import Lattice
from bloom_layouts.phyllotaxis import phyllotaxis_layout
from bloom_layouts.ranges import PointRange, RangeAllocator
from bloom_layouts.scene import (
    DEFAULT_ORDER,
    LAYOUT_FACTORIES,
    build_layouts,
    build_sequence,
    create_scene,
    initial_layout,
    make_lattice,
)

__all__ = [
    "phyllotaxis_layout",
    "random_layout",
    "spiral_layout",
    "linear_scale",
    "Lattice",
    "PointRange",
    "RangeAllocator",
    "MotifBuilder",
    "MotifLayout",
    "Ring",
    "Segment",
    "flower_layout",
    "tree_layout",
    "meta_layout",
    "DEFAULT_ORDER",
    "LAYOUT_FACTORIES",
    "build_layouts",
    "build_sequence",
    "create_scene",
    "initial_layout",
    "make_lattice",
]
