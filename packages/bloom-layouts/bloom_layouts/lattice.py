"""Lattice - precomputed anchor grid for circle and line motifs."""
from __future__ import annotations

import math
from typing import Iterable, Iterator, Sequence

from bloom import ConfigurationError

Anchor = tuple[float, float]


class Lattice:
    """Row/column grid whose alternating cells form a triangular lattice.

    Rows are ``radius / 2`` apart and columns ``radius * sqrt(3) / 2``
    apart, so anchors with the same ``row + col`` parity sit exactly
    ``radius`` from their six nearest neighbours. Anchor index is
    ``(row - 1) * cols + (col - 1)`` for 1-based row and column.
    """

    def __init__(self, anchors: Sequence[Anchor], rows: int, cols: int, radius: float) -> None:
        if len(anchors) != rows * cols:
            raise ConfigurationError(
                f"{rows}x{cols} lattice needs {rows * cols} anchors, got {len(anchors)}"
            )
        self._anchors = tuple(anchors)
        self._rows = rows
        self._cols = cols
        self._radius = radius

    @classmethod
    def build(
        cls,
        radius: float,
        rows: int = 17,
        cols: int = 9,
        center: Anchor | None = None,
    ) -> Lattice:
        """Tile ``rows`` x ``cols`` anchors; optionally centre the grid on ``center``."""
        if radius < 0:
            raise ConfigurationError(f"lattice radius must be >= 0, got {radius}")
        if rows <= 0 or cols <= 0:
            raise ConfigurationError(f"lattice needs rows and cols > 0, got {rows}x{cols}")

        x_step = math.sqrt(radius ** 2 - (radius / 2) ** 2)
        y_step = radius / 2

        dx = dy = 0.0
        if center is not None:
            dx = center[0] - (cols + 1) / 2 * x_step
            dy = center[1] - (rows + 1) / 2 * y_step

        anchors = [
            (col * x_step + dx, row * y_step + dy)
            for row in range(1, rows + 1)
            for col in range(1, cols + 1)
        ]
        return cls(anchors, rows, cols, radius)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def radius(self) -> float:
        return self._radius

    def __len__(self) -> int:
        return len(self._anchors)

    def __getitem__(self, index: int) -> Anchor:
        return self._anchors[index]

    def __iter__(self) -> Iterator[Anchor]:
        return iter(self._anchors)

    def index(self, row: int, col: int) -> int:
        """Anchor index of 1-based ``(row, col)``."""
        if not (1 <= row <= self._rows and 1 <= col <= self._cols):
            raise ConfigurationError(
                f"({row}, {col}) out of bounds for {self._rows}x{self._cols} lattice"
            )
        return (row - 1) * self._cols + (col - 1)

    def check(self, indices: Iterable[int]) -> None:
        for i in indices:
            if not 0 <= i < len(self._anchors):
                raise ConfigurationError(
                    f"anchor {i} out of range for lattice of {len(self._anchors)}"
                )

    def anchors(self, indices: Iterable[int]) -> list[Anchor]:
        indices = list(indices)
        self.check(indices)
        return [self._anchors[i] for i in indices]
