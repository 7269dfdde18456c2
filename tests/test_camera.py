import pytest

from roguekit.camera import SCROLL_MARGIN, Camera, Layout

LAYOUT = Layout(
    viewport_x=2,
    viewport_y=1,
    viewport_width=20,
    viewport_height=10,
    dungeon_width=80,
    dungeon_height=40,
)


def _center(camera):
    return (
        camera.x + LAYOUT.viewport_width // 2,
        camera.y + LAYOUT.viewport_height // 2,
    )


def test_centering_in_middle_puts_target_at_center():
    camera = Camera(LAYOUT, 40, 20)
    assert _center(camera) == (40, 20)


def test_clamped_at_top_left():
    camera = Camera(LAYOUT, 0, 0)
    assert (camera.x, camera.y) == (0, 0)


def test_clamped_at_bottom_right():
    camera = Camera(LAYOUT, LAYOUT.dungeon_width, LAYOUT.dungeon_height)
    assert camera.x == LAYOUT.dungeon_width - LAYOUT.viewport_width
    assert camera.y == LAYOUT.dungeon_height - LAYOUT.viewport_height


def test_small_map_clamps_to_negative_offset():
    small = Layout(0, 0, 20, 10, 10, 5)
    camera = Camera(small, 3, 3)
    assert camera.x == small.dungeon_width - small.viewport_width
    assert camera.y == small.dungeon_height - small.viewport_height


@pytest.mark.parametrize("wx, wy", [(35, 18), (30, 15), (49, 24), (60, 30)])
def test_world_screen_round_trip(wx, wy):
    camera = Camera(LAYOUT, 40, 20)
    sx, sy, visible = camera.world_to_screen(wx, wy)
    assert camera.screen_to_world(sx, sy) == (wx, wy)
    assert visible == camera.in_viewport(wx, wy)


def test_viewport_bounds_span_viewport():
    camera = Camera(LAYOUT, 40, 20)
    min_x, min_y, max_x, max_y = camera.viewport_bounds()
    assert (min_x, min_y) == (camera.x, camera.y)
    assert max_x - min_x + 1 == LAYOUT.viewport_width
    assert max_y - min_y + 1 == LAYOUT.viewport_height
    assert camera.in_viewport(max_x, max_y)
    assert not camera.in_viewport(max_x + 1, max_y)


def test_top_left_of_view_maps_to_viewport_origin():
    camera = Camera(LAYOUT, 40, 20)
    sx, sy, visible = camera.world_to_screen(camera.x, camera.y)
    assert (sx, sy) == (LAYOUT.viewport_x, LAYOUT.viewport_y)
    assert visible


def test_update_within_margin_does_not_move():
    camera = Camera(LAYOUT, 40, 20)
    before = (camera.x, camera.y)
    camera.update(40 + SCROLL_MARGIN, 20 - SCROLL_MARGIN)
    assert (camera.x, camera.y) == before


def test_update_follows_target_to_margin():
    camera = Camera(LAYOUT, 40, 20)
    camera.update(50, 12)
    cx, cy = _center(camera)
    assert 50 - cx == SCROLL_MARGIN
    assert 12 - cy == -SCROLL_MARGIN


def test_update_stays_in_bounds():
    camera = Camera(LAYOUT, 40, 20)
    camera.update(1000, -1000)
    assert camera.x == LAYOUT.dungeon_width - LAYOUT.viewport_width
    assert camera.y == 0