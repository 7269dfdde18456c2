"""Side panel showing the most recent game messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence

from . import colors
from .geometry import Point
from .grid import Cell, Grid, Style
from .panels import Panel


@dataclass(frozen=True)
class Message:
    """A logged game message."""

    text: str
    color: int = colors.UI_TEXT
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class MessageLine:
    """One wrapped line of a message, with the message's colour."""

    text: str
    color: int


def wrap_words(text: str, width: int) -> list[str]:
    """Greedy word wrap on whitespace; words longer than ``width`` stay whole."""
    if width <= 0:
        return []
    words = text.split()
    if not words:
        return [""]
    lines: list[str] = []
    current = ""
    for word in words:
        proposed = len(current) + (1 if current else 0) + len(word)
        if proposed > width and current:
            lines.append(current)
            current = ""
        current = f"{current} {word}" if current else word
    if current:
        lines.append(current)
    return lines


class MessagePanel(Panel):
    """Bordered panel listing messages, newest at the bottom, scrollable upwards."""

    def __init__(
        self, x: int, y: int, width: int, height: int, max_messages: int = 100
    ) -> None:
        super().__init__(x, y, width, height, "Messages", True)
        self.max_messages = max_messages
        self._scroll_offset = 0

    @property
    def scroll_offset(self) -> int:
        """Lines scrolled up from the bottom."""
        return self._scroll_offset

    def render(self, grid: Grid, messages: Optional[Sequence[Message]]) -> None:
        """Draw the panel and as many recent message lines as fit."""
        self.clear(grid)
        self.draw_border(grid)
        cx, cy, cw, ch = self.content_area()

        if not messages:
            self._draw_text(
                grid,
                "No messages yet...",
                cx,
                cy,
                Style(fg=colors.UI_TEXT, bg=colors.UI_BACKGROUND),
            )
            return

        lines = self.wrapped_lines(messages, cw)
        start = max(len(lines) - ch - self._scroll_offset, 0)

        current_y = cy + ch - 1
        for i in range(start + ch - 1, start - 1, -1):
            if current_y < cy:
                break
            if i < len(lines):
                line = lines[i]
                self._draw_text(
                    grid,
                    line.text,
                    cx,
                    current_y,
                    Style(fg=line.color, bg=colors.UI_BACKGROUND),
                )
            current_y -= 1

        if self._scroll_offset > 0:
            grid.set(
                Point(cx + cw - 1, cy),
                Cell("▲", Style(fg=colors.UI_HIGHLIGHT, bg=colors.UI_BACKGROUND)),
            )

    def wrapped_lines(
        self, messages: Sequence[Message], width: int
    ) -> list[MessageLine]:
        """All messages, oldest first, wrapped to ``width``."""
        return [
            MessageLine(line, msg.color)
            for msg in messages
            for line in wrap_words(msg.text, width)
        ]

    def _draw_text(self, grid: Grid, text: str, x: int, y: int, style: Style) -> None:
        limit = self.x + self.width - 1
        for i, ch in enumerate(text):
            if x + i >= limit:
                break
            grid.set(Point(x + i, y), Cell(ch, style))

    def _max_scroll(self, messages: Sequence[Message]) -> int:
        _, _, cw, ch = self.content_area()
        return len(self.wrapped_lines(messages, cw)) - ch

    def scroll_up(self, messages: Optional[Sequence[Message]]) -> None:
        """Show one line of older messages, if there are any hidden."""
        if messages is None:
            return
        max_scroll = self._max_scroll(messages)
        if max_scroll > 0:
            self._scroll_offset = min(self._scroll_offset + 1, max_scroll)

    def scroll_down(self) -> None:
        """Show one line of newer messages."""
        if self._scroll_offset > 0:
            self._scroll_offset -= 1

    def scroll_to_bottom(self) -> None:
        self._scroll_offset = 0

    def is_at_bottom(self) -> bool:
        return self._scroll_offset == 0