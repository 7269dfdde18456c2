"""A rectangular grid of styled cells."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import Point

COLOR_DEFAULT = 0


@dataclass(frozen=True)
class Style:
    """Foreground, background and attribute mask of a cell."""

    fg: int = COLOR_DEFAULT
    bg: int = COLOR_DEFAULT
    attrs: int = 0


@dataclass(frozen=True)
class Cell:
    """A single character with its style."""

    rune: str = " "
    style: Style = field(default_factory=Style)


class Grid:
    """Fixed-size grid of cells; writes outside it are ignored."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"grid size must not be negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._cells: list[list[Cell]] = [
            [Cell() for _ in range(width)] for _ in range(height)
        ]

    def size(self) -> Point:
        return Point(self._width, self._height)

    def _inside(self, point: Point) -> bool:
        return 0 <= point.x < self._width and 0 <= point.y < self._height

    def set(self, point: Point, cell: Cell) -> None:
        """Store ``cell`` at ``point`` if it lies inside the grid."""
        if self._inside(point):
            self._cells[point.y][point.x] = cell

    def at(self, point: Point) -> Cell:
        """The cell at ``point``, or a blank cell outside the grid."""
        if self._inside(point):
            return self._cells[point.y][point.x]
        return Cell()

    def row_text(self, y: int) -> str:
        """The characters of row ``y`` as a string; empty outside the grid."""
        if not 0 <= y < self._height:
            return ""
        return "".join(cell.rune for cell in self._cells[y])