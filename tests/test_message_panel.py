import pytest

from roguekit import colors
from roguekit.geometry import Point
from roguekit.grid import Grid
from roguekit.message_panel import Message, MessageLine, MessagePanel, wrap_words


def _messages(count):
    return [Message(f"m{i}", colors.RED) for i in range(count)]


def test_wrap_words_non_positive_width_gives_nothing():
    assert wrap_words("some text", 0) == []
    assert wrap_words("some text", -3) == []


def test_wrap_words_blank_text_gives_one_empty_line():
    assert wrap_words("   ", 10) == [""]


@pytest.mark.parametrize("width", [5, 8, 12, 30])
def test_wrap_words_keeps_words_and_width(width):
    text = "the quick brown fox jumps over the lazy dog"
    lines = wrap_words(text, width)
    assert " ".join(lines).split() == text.split()
    assert all(len(line) <= width for line in lines)


def test_wrap_words_long_word_stays_whole():
    assert wrap_words("abcdefghij", 4) == ["abcdefghij"]


def test_wrapped_lines_carry_message_colour():
    panel = MessagePanel(0, 0, 20, 5)
    msgs = [Message("alpha beta gamma delta epsilon", colors.GREEN)]
    lines = panel.wrapped_lines(msgs, 10)
    assert len(lines) > 1
    assert all(line.color == colors.GREEN for line in lines)
    assert lines[0] == MessageLine(wrap_words(msgs[0].text, 10)[0], colors.GREEN)


def test_render_empty_log():
    grid = Grid(20, 5)
    panel = MessagePanel(0, 0, 20, 5)
    panel.render(grid, [])
    assert "No messages yet..." in grid.row_text(1)
    assert grid.at(Point(0, 0)).rune == "┌"


def test_render_shows_newest_lines():
    grid = Grid(20, 5)
    panel = MessagePanel(0, 0, 20, 5)
    panel.render(grid, _messages(5))
    assert "m2" in grid.row_text(1)
    assert "m4" in grid.row_text(3)
    assert grid.at(Point(1, 3)).style.fg == colors.RED


def test_render_few_messages_start_at_top():
    grid = Grid(20, 5)
    panel = MessagePanel(0, 0, 20, 5)
    panel.render(grid, _messages(1))
    assert "m0" in grid.row_text(1)
    assert "m0" not in grid.row_text(3)


def test_scroll_up_noop_when_everything_fits():
    panel = MessagePanel(0, 0, 20, 5)
    panel.scroll_up(_messages(2))
    assert panel.scroll_offset == 0
    assert panel.is_at_bottom()


def test_scroll_up_clamps_and_scroll_down():
    panel = MessagePanel(0, 0, 20, 5)
    msgs = _messages(5)
    for _ in range(10):
        panel.scroll_up(msgs)
    assert panel.scroll_offset == 2
    panel.scroll_down()
    assert panel.scroll_offset == 1
    panel.scroll_to_bottom()
    assert panel.is_at_bottom()
    panel.scroll_down()
    assert panel.scroll_offset == 0


def test_scroll_up_ignores_missing_log():
    panel = MessagePanel(0, 0, 20, 5)
    panel.scroll_up(None)
    assert panel.scroll_offset == 0


def test_render_scrolled_shows_older_and_indicator():
    grid = Grid(20, 5)
    panel = MessagePanel(0, 0, 20, 5)
    msgs = _messages(5)
    panel.scroll_up(msgs)
    panel.render(grid, msgs)
    assert "m1" in grid.row_text(1)
    assert grid.at(Point(18, 1)).rune == "▲"