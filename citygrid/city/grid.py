"""Grid store: a fixed-size rectangle of cells addressed as (x, y).

Rows are stored row-major (``rows[y][x]``) so the serialized grid reads as an
ordered list of rows. Out-of-range reads return ``None`` and out-of-range
writes are ignored; placement loops rely on both.
"""
from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from .cells import Cell


class Grid:
    __slots__ = ("width", "height", "_rows")

    def __init__(self, width: int, height: int, rows: List[List[Cell]]):
        self.width = width
        self.height = height
        self._rows = rows

    @classmethod
    def create(cls, width: int, height: int) -> "Grid":
        rows = [[Cell.blank(x, y) for x in range(width)] for y in range(height)]
        return cls(width, height, rows)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[Cell]:
        if not self.in_bounds(x, y):
            return None
        return self._rows[y][x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        if self.in_bounds(x, y):
            self._rows[y][x] = cell

    def cells(self) -> Iterator[Cell]:
        for row in self._rows:
            yield from row

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self._rows)


__all__ = ["Grid"]
