"""Two-dimensional grids addressed by points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class Direction(IntEnum):
    """Compass directions; screen coordinates, so UP decreases y."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3
    UP_LEFT = 4
    UP_RIGHT = 5
    DOWN_LEFT = 6
    DOWN_RIGHT = 7


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.UP_RIGHT: (1, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN_RIGHT: (1, 1),
    Direction.DOWN: (0, 1),
    Direction.DOWN_LEFT: (-1, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP_LEFT: (-1, -1),
}


@dataclass(frozen=True)
class Point:
    """A position on a grid."""

    x: int = 0
    y: int = 0

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def move(point: Point, direction: Direction) -> Point:
    """Return the point one step from ``point`` in ``direction``."""
    dx, dy = _OFFSETS.get(direction, (0, 0))
    return Point(point.x + dx, point.y + dy)


class Grid(Generic[T]):
    """A mutable grid of rows; rows may differ in length."""

    def __init__(self, rows: Iterable[Iterable[T]] = ()) -> None:
        self._rows: list[list[T]] = [list(row) for row in rows]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[list[T]]:
        return iter(self._rows)

    def __getitem__(self, index: int) -> list[T]:
        return self._rows[index]

    def __repr__(self) -> str:
        return f"Grid({self._rows!r})"

    def in_bound(self, point: Point) -> bool:
        return 0 <= point.y < len(self._rows) and 0 <= point.x < len(self._rows[point.y])

    def set_value(self, point: Point, value: T) -> bool:
        """Store ``value`` at ``point``; return False if it lies outside."""
        if not self.in_bound(point):
            return False
        self._rows[point.y][point.x] = value
        return True

    def value(self, point: Point, default: T | None = None) -> T | None:
        """Return the value at ``point``, or ``default`` if it lies outside."""
        if not self.in_bound(point):
            return default
        return self._rows[point.y][point.x]

    def find(self, value: T) -> Point | None:
        """Return the first point, row by row, holding ``value``."""
        return next(iter(self._points_of(value)), None)

    def find_all(self, value: T) -> list[Point]:
        return list(self._points_of(value))

    def _points_of(self, value: T) -> Iterator[Point]:
        for y, row in enumerate(self._rows):
            for x, item in enumerate(row):
                if item == value:
                    yield Point(x, y)

    def row(self, n: int) -> list[T] | None:
        """Return row ``n`` itself, or None if out of range."""
        if not 0 <= n < len(self._rows):
            return None
        return self._rows[n]

    def column(self, n: int) -> list[T] | None:
        """Return a copy of column ``n``, or None if out of range."""
        if not self._rows or not 0 <= n < len(self._rows[0]):
            return None
        return [row[n] for row in self._rows]