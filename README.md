# roguekit

Small building blocks for grid-based roguelike games in pure Python. It has no
runtime dependencies.

## What is inside

- `roguekit.turnqueue`: `TurnQueue`, a min-heap of `TurnEntry(time, entity_id)`
  items. Ties on time are broken by entity id. It has `add`, `remove`, `pop`, `peek`,
  `snapshot` and `restore` for saving and loading, `sorted_entries`, and a readable
  `describe()` dump. `cleanup(is_valid, entity_count)` drops invalid actors and reports
  the result in `CleanupMetrics`.
- `roguekit.geometry`: `Point` and the half-open rectangle `Range`, with
  `intersect`, `contains`, `size` and iteration.
- `roguekit.fov`: `vision_range(point, radius, width, height)` clips a square
  around a point to the map. `filled_circle(visibles, radius, center)` keeps the
  visible points within a radius.
- `roguekit.grid`: `Grid` of `Cell`s, each with a `Style`. It is the drawing surface.
  Writes that fall outside the grid are ignored. `row_text(y)` reads a row back as a string.
- `roguekit.colors`: the 16-colour palette, semantic colour names such as
  `UI_TEXT`, `PLAYER` and `HEALTH_CRITICAL`, the `AttrMask` flags, `map_style` and
  `color_to_rgba`.
- `roguekit.panels`: `Panel`, a bordered box with a centred title, word
  wrapping (`wrap_text`, `draw_text`), progress bars and hit-testing (`contains`).
- `roguekit.camera`: `Camera`, which follows a target over a larger map. It scrolls
  only when the target moves more than `SCROLL_MARGIN` cells from the centre. Screen and
  map sizes come from a `Layout`.
- `roguekit.message_panel`: `Message`, `wrap_words` and `MessagePanel`, a compact
  log that shows the newest lines and scrolls up one line at a time.
- `roguekit.message_screen`: `FullMessageScreen`, a full-screen history with
  `[HH:MM:SS]` timestamps, scroll indicators and a percentage. It also provides
  `format_timestamp` and `wrap_preserving_spaces`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Example: scheduling turns

```python
from roguekit.turnqueue import TurnQueue

queue = TurnQueue()
queue.add(1, 100)
queue.add(2, 150)
queue.add(3, 125)

while not queue.is_empty():
    entry = queue.pop()
    print(entry.entity_id, entry.time)   # 1 100, then 3 125, then 2 150
```

`snapshot()` returns the entries so they can be saved. `restore(entries)` loads them
back. `cleanup(is_valid, entity_count)` counts each call and runs only when the count
reaches a threshold that depends on the size of the world and of the queue. Until then
it returns empty metrics.

## Example: drawing a panel

```python
from roguekit.grid import Grid, Style
from roguekit.panels import Panel

grid = Grid(40, 10)
panel = Panel(0, 0, 40, 10, "Stats", True)
panel.clear(grid)
panel.draw_border(grid)
panel.draw_text(grid, "A long line of text that will be wrapped to fit.", Style(), 0)
print(grid.row_text(0))
```

## Example: a message log

```python
from roguekit.grid import Grid
from roguekit.message_panel import Message, MessagePanel

grid = Grid(40, 8)
panel = MessagePanel(0, 0, 40, 8)
panel.render(grid, [Message("You hit the orc."), Message("The orc dies.")])
```

## What it does not do

roguekit draws onto an in-memory `Grid` only. It does not:

- open a window or terminal, or turn a grid into pixels, fonts or sprite images;
- run a game loop or handle input;
- keep an entity store or write save files. `TurnQueue.snapshot` gives you plain
  entries, and storing them is up to you.

## Running the tests

```
pytest
```