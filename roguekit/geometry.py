"""Integer grid points and rectangular ranges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Point:
    """A position on the grid."""

    x: int = 0
    y: int = 0

    def add(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def sub(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def shift(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def __add__(self, other: "Point") -> "Point":
        return self.add(other)

    def __sub__(self, other: "Point") -> "Point":
        return self.sub(other)


@dataclass(frozen=True)
class Range:
    """A half-open rectangle: ``min`` is included, ``max`` is not."""

    min: Point = Point()
    max: Point = Point()

    def intersect(self, other: "Range") -> "Range":
        """Return the overlap of both ranges, or an empty range."""
        lo = Point(max(self.min.x, other.min.x), max(self.min.y, other.min.y))
        hi = Point(min(self.max.x, other.max.x), min(self.max.y, other.max.y))
        if lo.x >= hi.x or lo.y >= hi.y:
            return Range()
        return Range(lo, hi)

    def is_empty(self) -> bool:
        return self.min.x >= self.max.x or self.min.y >= self.max.y

    def contains(self, point: Point) -> bool:
        return (
            self.min.x <= point.x < self.max.x and self.min.y <= point.y < self.max.y
        )

    def size(self) -> Point:
        if self.is_empty():
            return Point()
        return self.max.sub(self.min)

    def __contains__(self, point: object) -> bool:
        return isinstance(point, Point) and self.contains(point)

    def __iter__(self) -> Iterator[Point]:
        for y in range(self.min.y, self.max.y):
            for x in range(self.min.x, self.max.x):
                yield Point(x, y)