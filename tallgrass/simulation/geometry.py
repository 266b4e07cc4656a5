"""Integer grid geometry: points, dense grids, and symmetric sightlines.

Deterministic and integer-only, no PyGame dependency. Out-of-bounds grid
reads return the grid's default instead of failing, since field-of-vision
traversal routinely probes cells past the map edge.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Point:
    """An integer (x, y) pair, used both as a position and as an offset."""
    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def len(self) -> float:
        return math.sqrt(self.len_squared())

    def len_squared(self) -> int:
        return self.x * self.x + self.y * self.y

    def len_nethack(self) -> int:
        """Octile-like distance: 0.95 per straight step, ~1.41 per diagonal."""
        ax = abs(self.x)
        ay = abs(self.y)
        return (46 * min(ax, ay) + 95 * max(ax, ay) + 25) // 100

    def len_taxicab(self) -> int:
        return abs(self.x) + abs(self.y)

    def len_walking(self) -> int:
        return max(abs(self.x), abs(self.y))


ORIGIN = Point(0, 0)


class Grid(Generic[T]):
    """Fixed-size 2D grid addressed by Point.

    Cells are stored in a flat list, row-major: data[y * width + x].
    """

    def __init__(self, size: Point, fill: T, default: T) -> None:
        self.size = size
        self.default = default
        self._data: list[T] = [fill] * (size.x * size.y)

    @property
    def width(self) -> int:
        return self.size.x

    @property
    def height(self) -> int:
        return self.size.y

    def contains(self, p: Point) -> bool:
        return 0 <= p.x < self.size.x and 0 <= p.y < self.size.y

    def get(self, p: Point) -> T:
        """Get the value at p. Out-of-bounds returns the default."""
        if 0 <= p.x < self.size.x and 0 <= p.y < self.size.y:
            return self._data[p.y * self.size.x + p.x]
        return self.default

    def set(self, p: Point, value: T) -> None:
        """Set the value at p. Ignores out-of-bounds."""
        if 0 <= p.x < self.size.x and 0 <= p.y < self.size.y:
            self._data[p.y * self.size.x + p.x] = value

    def fill(self, value: T) -> None:
        self._data = [value] * (self.size.x * self.size.y)

    def points(self) -> Iterator[Point]:
        """Yield every in-bounds point, row by row."""
        for y in range(self.size.y):
            for x in range(self.size.x):
                yield Point(x, y)


def los(a: Point, b: Point) -> list[Point]:
    """Symmetric line of sight from a to b, both endpoints included.

    The path has max(|dx|, |dy|) + 1 cells and los(b, a) is exactly its
    reverse. Tracing always starts from the lexicographically smaller
    endpoint, so error-term ties round the same way in both directions.
    """
    if (b.x, b.y) < (a.x, a.y):
        path = _trace(b, a)
        path.reverse()
        return path
    return _trace(a, b)


def _trace(a: Point, b: Point) -> list[Point]:
    """Integer error-accumulation walk along the dominant axis.

    The error term starts at half the dominant delta, which centres the
    minor-axis steps along the line.
    """
    x_diff = abs(a.x - b.x)
    y_diff = abs(a.y - b.y)
    x_sign = -1 if b.x < a.x else 1
    y_sign = -1 if b.y < a.y else 1

    x, y = a.x, a.y
    result = [a]

    if x_diff >= y_diff:
        test = x_diff // 2
        for _ in range(x_diff):
            x += x_sign
            test -= y_diff
            if test < 0:
                y += y_sign
                test += x_diff
            result.append(Point(x, y))
    else:
        test = y_diff // 2
        for _ in range(y_diff):
            y += y_sign
            test -= x_diff
            if test < 0:
                x += x_sign
                test += y_diff
            result.append(Point(x, y))

    return result
