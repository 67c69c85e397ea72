"""Sequencer - fixed cyclic order of layouts."""
from __future__ import annotations

from typing import Iterable, Iterator

from bloom.types import ConfigurationError, Layout


class Sequencer:
    """Cycles through an immutable list of layouts, wrapping at the end."""

    def __init__(self, layouts: Iterable[Layout], start: int = 0) -> None:
        self._layouts: tuple[Layout, ...] = tuple(layouts)
        if not self._layouts:
            raise ConfigurationError("sequencer needs at least one layout")
        if not 0 <= start < len(self._layouts):
            raise ConfigurationError(
                f"start index {start} out of range for {len(self._layouts)} layouts"
            )
        self._index = start

    @property
    def index(self) -> int:
        return self._index

    @property
    def layouts(self) -> tuple[Layout, ...]:
        return self._layouts

    def current(self) -> Layout:
        return self._layouts[self._index]

    def advance(self) -> Layout:
        self._index = (self._index + 1) % len(self._layouts)
        return self._layouts[self._index]

    def __len__(self) -> int:
        return len(self._layouts)

    def __iter__(self) -> Iterator[Layout]:
        return iter(self._layouts)
