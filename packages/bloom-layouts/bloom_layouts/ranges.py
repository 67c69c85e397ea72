"""Point-range allocator for composite layouts."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from bloom import ConfigurationError, RangeMismatchError


@dataclass(frozen=True)
class PointRange:
    """Contiguous slice ``[start, stop)`` of point indices owned by one motif element."""

    name: str
    start: int
    stop: int

    def __len__(self) -> int:
        return self.stop - self.start

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.stop))

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start <= index < self.stop

    def local(self, index: int) -> int:
        """Position of ``index`` within this range."""
        return index - self.start


class RangeAllocator:
    """Hands out consecutive blocks of ``block_size`` points.

    The ranges must cover ``[0, total)`` exactly; ``finish()`` rejects any
    plan that leaves points unassigned and ``allocate()`` rejects any that
    would run past the end.
    """

    def __init__(self, total: int, block_size: int) -> None:
        if total <= 0:
            raise ConfigurationError(f"total must be positive, got {total}")
        if block_size <= 0:
            raise ConfigurationError(f"block_size must be positive, got {block_size}")
        self._total = total
        self._block_size = block_size
        self._cursor = 0
        self._ranges: list[PointRange] = []

    @property
    def total(self) -> int:
        return self._total

    @property
    def block_size(self) -> int:
        return self._block_size

    @property
    def consumed(self) -> int:
        return self._cursor

    @property
    def remaining(self) -> int:
        return self._total - self._cursor

    @property
    def ranges(self) -> tuple[PointRange, ...]:
        return tuple(self._ranges)

    def allocate(self, name: str, blocks: int = 1) -> PointRange:
        if blocks <= 0:
            raise ConfigurationError(f"{name}: blocks must be positive, got {blocks}")
        size = blocks * self._block_size
        if self._cursor + size > self._total:
            raise RangeMismatchError(
                self._total,
                self._cursor + size,
                f"{name}: allocating {size} points overruns {self._total} "
                f"({self._cursor} already consumed)",
            )
        span = PointRange(name, self._cursor, self._cursor + size)
        self._cursor += size
        self._ranges.append(span)
        return span

    def finish(self) -> tuple[PointRange, ...]:
        if self._cursor != self._total:
            raise RangeMismatchError(
                self._total,
                self._cursor,
                f"ranges cover {self._cursor} of {self._total} points",
            )
        return self.ranges
