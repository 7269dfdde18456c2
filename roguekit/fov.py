"""Field-of-view helpers: vision ranges and circular visibility."""

from __future__ import annotations

from typing import Iterable

from .geometry import Point, Range


def vision_range(point: Point, radius: int, width: int, height: int) -> Range:
    """Square range of side ``2*radius+1`` around ``point``, clipped to the map."""
    dungeon = Range(Point(0, 0), Point(width, height))
    delta = Point(radius, radius)
    around = Range(point.sub(delta), point.add(delta).shift(1, 1))
    return dungeon.intersect(around)


def filled_circle(
    visibles: Iterable[Point], radius: int, center: Point
) -> list[Point]:
    """Points of ``visibles`` lying within ``radius`` of ``center``.

    Points are returned column by column, from left to right and top to bottom.
    """
    radius = max(radius, 0)
    visible_set = set(visibles)
    radius_sq = radius * radius
    return [
        Point(x, y)
        for x in range(center.x - radius, center.x + radius + 1)
        for y in range(center.y - radius, center.y + radius + 1)
        if (x - center.x) ** 2 + (y - center.y) ** 2 <= radius_sq
        and Point(x, y) in visible_set
    ]