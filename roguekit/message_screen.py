"""Full-screen message history with timestamps and scrolling."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from . import colors
from .geometry import Point
from .grid import Cell, Grid, Style
from .message_panel import Message
from .panels import Panel

_TIMESTAMP_WIDTH = 12
_MIN_TEXT_WIDTH = 20
_INSTRUCTIONS = (
    "↑↓/jk/PgUp/PgDn: Scroll | Home: Top | End: Bottom | [ESC]/q: Close"
)


@dataclass(frozen=True)
class TimedLine:
    """A wrapped line of the history, with colour and timestamp."""

    text: str
    color: int
    is_new_message: bool
    timestamp: str


def format_timestamp(timestamp: datetime) -> str:
    """``[HH:MM:SS]`` for a point in time."""
    return f"[{timestamp.hour:02d}:{timestamp.minute:02d}:{timestamp.second:02d}]"


def _tokens(text: str) -> list[str]:
    tokens: list[str] = []
    word = ""
    for ch in text:
        if ch == " ":
            if word:
                tokens.append(word)
                word = ""
            tokens.append(" ")
        else:
            word += ch
    if word:
        tokens.append(word)
    return tokens


def wrap_preserving_spaces(text: str, width: int) -> list[str]:
    """Wrap ``text`` to ``width`` keeping every space; long words are split."""
    if width <= 0:
        return [text]
    if not text:
        return [""]

    lines: list[str] = []
    current = ""
    for word in _tokens(text):
        if len(current) + len(word) <= width:
            current += word
            continue
        if current:
            lines.append(current)
        while len(word) > width:
            lines.append(word[:width])
            word = word[width:]
        current = word

    if current:
        lines.append(current)
    return lines or [""]


class FullMessageScreen(Panel):
    """Full-screen view of the message log; offset counts lines up from the end."""

    def __init__(self, width: int, height: int, max_messages: int = 200) -> None:
        super().__init__(0, 0, width, height, "Message History", True)
        self.max_messages = max_messages
        self._scroll_offset = 0

    @property
    def scroll_offset(self) -> int:
        return self._scroll_offset

    def render(self, grid: Grid, messages: Optional[Sequence[Message]]) -> None:
        """Draw the history, scroll indicators and key help."""
        self.clear(grid)
        self.draw_border(grid)
        cx, cy, cw, ch = self.content_area()

        if not messages:
            self._draw_text(grid, "No messages yet...", cx, cy, colors.UI_TEXT)
            self._draw_instructions(grid)
            return

        lines = self.wrapped_lines(messages, cw)
        total = len(lines)
        display_height = ch - 1

        start = max(total - display_height - self._scroll_offset, 0)
        end = min(start + display_height, total)

        for row, line in enumerate(lines[start:end]):
            if row >= display_height:
                break
            self._draw_text(grid, line.text, cx, cy + row, line.color)

        self._draw_scroll_indicators(
            grid, cx, cy, cw, display_height, start, end, total
        )
        self._draw_instructions(grid)

    def wrapped_lines(
        self, messages: Sequence[Message], width: int
    ) -> list[TimedLine]:
        """All messages wrapped to ``width``, first lines prefixed by a timestamp.

        Narrow widths drop the timestamp column altogether.
        """
        stamp_width = _TIMESTAMP_WIDTH
        text_width = width - stamp_width
        if text_width < _MIN_TEXT_WIDTH:
            text_width = width
            stamp_width = 0

        indent = " " * (stamp_width - 1)
        result: list[TimedLine] = []
        for msg in messages:
            stamp = format_timestamp(msg.timestamp) if stamp_width else ""
            for i, line in enumerate(wrap_preserving_spaces(msg.text, text_width)):
                if stamp_width:
                    text = f"{stamp} {line}" if i == 0 else f"{indent} {line}"
                else:
                    text = line
                result.append(TimedLine(text, msg.color, i == 0, stamp))
        return result

    def _draw_scroll_indicators(
        self,
        grid: Grid,
        x: int,
        y: int,
        width: int,
        height: int,
        start: int,
        end: int,
        total: int,
    ) -> None:
        if start > 0:
            self._draw_text(grid, f"▲ {start} more above", x, y, colors.UI_HIGHLIGHT)
        if end < total:
            self._draw_text(
                grid,
                f"▼ {total - end} more below",
                x,
                y + height - 1,
                colors.UI_HIGHLIGHT,
            )
        if total > height:
            percent = min(start * 100 // (total - height), 100)
            text = f"{percent}%"
            self._draw_text(grid, text, x + width - len(text), y, colors.UI_HIGHLIGHT)

    def _draw_instructions(self, grid: Grid) -> None:
        y = self.y + self.height - 2
        start_x = max(self.x + (self.width - len(_INSTRUCTIONS)) // 2, self.x + 1)
        self._draw_text(grid, _INSTRUCTIONS, start_x, y, colors.UI_HIGHLIGHT)

    def _draw_text(self, grid: Grid, text: str, x: int, y: int, color: int) -> None:
        style = Style(fg=color, bg=colors.UI_BACKGROUND)
        limit = self.x + self.width - 1
        for i, ch in enumerate(text):
            if x + i >= limit:
                break
            grid.set(Point(x + i, y), Cell(ch, style))

    def _max_scroll(self, messages: Sequence[Message]) -> int:
        _, _, cw, ch = self.content_area()
        return len(self.wrapped_lines(messages, cw)) - (ch - 1)

    def scroll_up(self, messages: Optional[Sequence[Message]], lines: int) -> None:
        """Move towards older messages by ``lines``."""
        if messages is None:
            return
        max_scroll = self._max_scroll(messages)
        if max_scroll > 0:
            self._scroll_offset = min(self._scroll_offset + lines, max_scroll)

    def scroll_down(self, lines: int) -> None:
        """Move towards newer messages by ``lines``."""
        self._scroll_offset = max(self._scroll_offset - lines, 0)

    def scroll_to_top(self, messages: Optional[Sequence[Message]]) -> None:
        """Jump to the oldest messages."""
        if messages is None:
            return
        max_scroll = self._max_scroll(messages)
        if max_scroll > 0:
            self._scroll_offset = max_scroll

    def scroll_to_bottom(self) -> None:
        self._scroll_offset = 0

    def is_at_bottom(self) -> bool:
        return self._scroll_offset == 0