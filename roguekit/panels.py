"""Bordered rectangular UI panels drawn onto a grid."""

from __future__ import annotations

from dataclasses import dataclass

from . import colors
from .geometry import Point
from .grid import Cell, Grid, Style


def _div_trunc(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass
class Panel:
    """A UI panel with position, size, optional border and title."""

    x: int
    y: int
    width: int
    height: int
    title: str = ""
    has_border: bool = True

    def clear(self, grid: Grid) -> None:
        """Fill the panel area with blank cells."""
        blank = Cell(" ", Style(bg=colors.UI_BACKGROUND))
        for y in range(self.y, self.y + self.height):
            for x in range(self.x, self.x + self.width):
                grid.set(Point(x, y), blank)

    def draw_border(self, grid: Grid) -> None:
        """Draw the box border and the title, if the panel has a border."""
        if not self.has_border:
            return
        style = Style(fg=colors.UI_BORDER, bg=colors.UI_BACKGROUND)
        left, top = self.x, self.y
        right, bottom = self.x + self.width - 1, self.y + self.height - 1

        grid.set(Point(left, top), Cell("┌", style))
        grid.set(Point(right, top), Cell("┐", style))
        grid.set(Point(left, bottom), Cell("└", style))
        grid.set(Point(right, bottom), Cell("┘", style))

        for x in range(left + 1, right):
            grid.set(Point(x, top), Cell("─", style))
            grid.set(Point(x, bottom), Cell("─", style))
        for y in range(top + 1, bottom):
            grid.set(Point(left, y), Cell("│", style))
            grid.set(Point(right, y), Cell("│", style))

        if self.title:
            self.draw_title(grid)

    def draw_title(self, grid: Grid) -> None:
        """Draw the title centred in the top border, truncated if needed."""
        if not self.title or not self.has_border:
            return
        style = Style(fg=colors.UI_TITLE, bg=colors.UI_BACKGROUND)
        title = f" {self.title} "
        max_width = self.width - 4
        if len(title) > max_width:
            title = title[: max(max_width - 3, 0)] + "..."
        start_x = self.x + _div_trunc(self.width - len(title), 2)
        for i, ch in enumerate(title):
            if start_x + i < self.x + self.width - 1:
                grid.set(Point(start_x + i, self.y), Cell(ch, style))

    def content_area(self) -> tuple[int, int, int, int]:
        """``(x, y, width, height)`` of the area inside the border."""
        if self.has_border:
            return self.x + 1, self.y + 1, self.width - 2, self.height - 2
        return self.x, self.y, self.width, self.height

    def draw_text(self, grid: Grid, text: str, style: Style, start_line: int) -> int:
        """Draw wrapped text from line ``start_line``; return lines drawn."""
        cx, cy, cw, ch = self.content_area()
        if start_line >= ch:
            return 0
        drawn = 0
        for i, line in enumerate(self.wrap_text(text, cw)):
            if i < start_line:
                continue
            line_y = cy + i - start_line
            if line_y >= cy + ch:
                break
            for j, rune in enumerate(line[:cw]):
                grid.set(Point(cx + j, line_y), Cell(rune, style))
            drawn += 1
        return drawn

    def wrap_text(self, text: str, width: int) -> list[str]:
        """Greedy word wrap; words longer than ``width`` stay whole."""
        if width <= 0:
            return []
        words = text.split()
        if not words:
            return [""]
        lines: list[str] = []
        current = ""
        for word in words:
            if current and len(current) + 1 + len(word) > width:
                lines.append(current)
                current = ""
            current = f"{current} {word}" if current else word
        if current:
            lines.append(current)
        return lines

    def draw_progress_bar(
        self,
        grid: Grid,
        x: int,
        y: int,
        width: int,
        current: int,
        maximum: int,
        style: Style,
    ) -> None:
        """Draw a bar of ``width`` cells filled in proportion to current/maximum."""
        if maximum <= 0 or width <= 0:
            return
        filled = min(_div_trunc(current * width, maximum), width)
        for i in range(width):
            grid.set(Point(x + i, y), Cell("█" if i < filled else "░", style))

    def contains(self, x: int, y: int) -> bool:
        return (
            self.x <= x < self.x + self.width and self.y <= y < self.y + self.height
        )