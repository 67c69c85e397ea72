"""Scene configuration dataclass."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Mapping

from bloom.easing import EASINGS
from bloom.types import ConfigurationError


@dataclass(frozen=True)
class SceneConfig:
    """Immutable configuration for one animated session.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        num_points: Number of points; fixed for the session.
        point_width: Drawn side length of each point.
        point_margin: Extra spacing added to ``point_width`` by the layouts.
        duration: Transition length in milliseconds.
        easing: Name of an entry in ``bloom.easing.EASINGS``.
        fps: Frames per second of the animation clock.
        block_size: Points per range block in the composite layouts.
        flower_periods: Full turns of the ring angle across all points.
        spiral_periods: Full turns of the spiral layout.
        phyllotaxis_divisor: ``k`` in ``r = point_width / k``.
        lattice_rows: Rows of the motif lattice.
        lattice_cols: Columns of the motif lattice.
        seed: Seed for the initial random scatter, or None.
    """

    width: int = 600
    height: int = 600
    num_points: int = 64000
    point_width: float = 2.0
    point_margin: float = 2.0
    duration: float = 8000.0
    easing: str = "cubic_in_out"
    fps: int = 60
    block_size: int = 1000
    flower_periods: float = 64.0
    spiral_periods: float = 20.0
    phyllotaxis_divisor: float = 2.8
    lattice_rows: int = 17
    lattice_cols: int = 9
    seed: int | None = None

    @property
    def layout_point_width(self) -> float:
        return self.point_width + self.point_margin

    @property
    def flower_radius(self) -> float:
        return self.height / 10 - 0.4 * self.point_width

    @property
    def tree_radius(self) -> float:
        return self.height / 30

    def validate(self) -> SceneConfig:
        if self.num_points <= 0:
            raise ConfigurationError(f"num_points must be positive, got {self.num_points}")
        for name in ("width", "height", "point_width", "duration", "fps", "block_size"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive, got {getattr(self, name)}")
        if self.point_margin < 0:
            raise ConfigurationError(f"point_margin must be >= 0, got {self.point_margin}")
        if self.phyllotaxis_divisor == 0:
            raise ConfigurationError("phyllotaxis_divisor must be non-zero")
        if self.lattice_rows <= 0 or self.lattice_cols <= 0:
            raise ConfigurationError("lattice must have at least one row and column")
        if self.easing not in EASINGS:
            raise ConfigurationError(
                f"Unknown easing {self.easing!r}, expected one of {sorted(EASINGS)}"
            )
        return self

    @classmethod
    def from_env(
        cls, prefix: str = "BLOOM_", environ: Mapping[str, str] | None = None
    ) -> SceneConfig:
        """Build a config from ``<prefix><FIELD>`` environment variables."""
        env = os.environ if environ is None else environ
        config = cls()
        overrides: dict[str, object] = {}
        for f in fields(cls):
            raw = env.get(prefix + f.name.upper())
            if raw is None or raw == "":
                continue
            overrides[f.name] = _coerce(f.name, raw, getattr(config, f.name))
        return replace(config, **overrides).validate()


def _coerce(name: str, raw: str, default: object) -> object:
    try:
        if name == "seed":
            return int(raw)
        if isinstance(default, int):
            return int(raw)
        if isinstance(default, float):
            return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid value {raw!r} for {name}") from exc
    return raw
