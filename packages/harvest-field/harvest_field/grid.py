"""FieldGrid - per-tile harvested/unharvested state with a running count."""
from __future__ import annotations

from typing import Iterator


class FieldGrid:
    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
        self._width = width
        self._height = height
        self._tiles = bytearray(width * height)
        self._harvested = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def total(self) -> int:
        return self._width * self._height

    @property
    def harvested_count(self) -> int:
        return self._harvested

    @property
    def complete(self) -> bool:
        return self._harvested >= self.total

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def is_harvested(self, x: int, y: int) -> bool:
        return self._tiles[y * self._width + x] == 1

    def mark_harvested(self, x: int, y: int) -> bool:
        """Set a tile. Returns True only if it was not harvested before.

        Callers guarantee ``in_bounds(x, y)``.
        """
        idx = y * self._width + x
        if self._tiles[idx]:
            return False
        self._tiles[idx] = 1
        self._harvested += 1
        return True

    def coverage_ratio(self) -> float:
        return min(1.0, self._harvested / self.total)

    def harvested_tiles(self) -> Iterator[tuple[int, int]]:
        for idx, bit in enumerate(self._tiles):
            if bit:
                yield idx % self._width, idx // self._width

    def reset(self) -> None:
        self._tiles = bytearray(self._width * self._height)
        self._harvested = 0
