from datetime import datetime

import pytest

from roguekit import colors
from roguekit.grid import Grid
from roguekit.message_panel import Message
from roguekit.message_screen import (
    FullMessageScreen,
    format_timestamp,
    wrap_preserving_spaces,
)

WHEN = datetime(2024, 1, 1, 9, 5, 3)


def _messages(count):
    return [Message(f"msg {i}", colors.BLUE, WHEN) for i in range(count)]


def test_format_timestamp():
    assert format_timestamp(WHEN) == "[09:05:03]"


def test_wrap_non_positive_width_returns_text():
    assert wrap_preserving_spaces("a b c", 0) == ["a b c"]


def test_wrap_empty_text():
    assert wrap_preserving_spaces("", 10) == [""]


@pytest.mark.parametrize(
    "text,width",
    [
        ("hello world", 5),
        ("a  double  spaced   line of text", 7),
        ("supercalifragilistic word", 6),
        ("short", 40),
    ],
)
def test_wrap_preserves_all_characters_and_width(text, width):
    lines = wrap_preserving_spaces(text, width)
    assert "".join(lines) == text
    assert all(len(line) <= width for line in lines)


def test_wrapped_lines_prefix_timestamps():
    screen = FullMessageScreen(60, 12)
    text = "word " * 20
    lines = screen.wrapped_lines([Message(text, colors.RED, WHEN)], 40)
    stamp = format_timestamp(WHEN)
    assert lines[0].text.startswith(stamp + " ")
    assert lines[0].is_new_message
    assert len(lines) > 1
    for line in lines[1:]:
        assert not line.is_new_message
        assert line.text.startswith(" " * (len(stamp) + 2))
        assert line.timestamp == stamp
        assert line.color == colors.RED


def test_wrapped_lines_narrow_width_drops_timestamps():
    screen = FullMessageScreen(60, 12)
    lines = screen.wrapped_lines([Message("tiny", colors.RED, WHEN)], 25)
    assert [line.text for line in lines] == ["tiny"]
    assert lines[0].timestamp == ""


def test_render_empty_log():
    grid = Grid(60, 12)
    screen = FullMessageScreen(60, 12)
    screen.render(grid, None)
    assert "No messages yet..." in grid.row_text(1)
    assert "Scroll" in grid.row_text(10)


def test_render_at_bottom_shows_newest():
    grid = Grid(60, 12)
    screen = FullMessageScreen(60, 12)
    screen.render(grid, _messages(20))
    assert "msg 19" in grid.row_text(9)
    assert "more above" in grid.row_text(1)
    assert "more below" not in grid.row_text(9)


def test_render_at_top_shows_oldest():
    grid = Grid(60, 12)
    screen = FullMessageScreen(60, 12)
    msgs = _messages(20)
    screen.scroll_to_top(msgs)
    screen.render(grid, msgs)
    assert "msg 0" in grid.row_text(1)
    assert "more below" in grid.row_text(9)
    assert "more above" not in grid.row_text(1)


def test_scrolling_clamps():
    screen = FullMessageScreen(60, 12)
    msgs = _messages(20)
    screen.scroll_to_top(msgs)
    top = screen.scroll_offset
    assert top > 0
    screen.scroll_up(msgs, 100)
    assert screen.scroll_offset == top
    screen.scroll_down(3)
    assert screen.scroll_offset == top - 3
    screen.scroll_down(100)
    assert screen.scroll_offset == 0
    assert screen.is_at_bottom()


def test_scroll_up_noop_when_everything_fits():
    screen = FullMessageScreen(60, 12)
    screen.scroll_up(_messages(3), 5)
    screen.scroll_to_top(_messages(3))
    assert screen.is_at_bottom()


def test_scroll_to_bottom_resets():
    screen = FullMessageScreen(60, 12)
    msgs = _messages(20)
    screen.scroll_up(msgs, 4)
    assert screen.scroll_offset == 4
    screen.scroll_to_bottom()
    assert screen.scroll_offset == 0