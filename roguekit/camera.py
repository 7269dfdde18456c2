"""Viewport camera that maps between world and screen coordinates."""

from __future__ import annotations

from dataclasses import dataclass

SCROLL_MARGIN = 5


@dataclass(frozen=True)
class Layout:
    """Where the map viewport sits on screen and how large the dungeon is."""

    viewport_x: int
    viewport_y: int
    viewport_width: int
    viewport_height: int
    dungeon_width: int
    dungeon_height: int


class Camera:
    """Top-left corner of the visible part of the map."""

    def __init__(self, layout: Layout, center_x: int = 0, center_y: int = 0) -> None:
        self.layout = layout
        self.x = 0
        self.y = 0
        self.center_on(center_x, center_y)

    def __repr__(self) -> str:
        return f"Camera(x={self.x}, y={self.y})"

    def center_on(self, world_x: int, world_y: int) -> None:
        """Centre the viewport on a world position, staying within the map."""
        self.x = world_x - self.layout.viewport_width // 2
        self.y = world_y - self.layout.viewport_height // 2
        self._clamp()

    def _clamp(self) -> None:
        lay = self.layout
        if self.x < 0:
            self.x = 0
        if self.x > lay.dungeon_width - lay.viewport_width:
            self.x = lay.dungeon_width - lay.viewport_width
        if self.y < 0:
            self.y = 0
        if self.y > lay.dungeon_height - lay.viewport_height:
            self.y = lay.dungeon_height - lay.viewport_height

    def world_to_screen(self, world_x: int, world_y: int) -> tuple[int, int, bool]:
        """Screen position of a world position and whether it is in view."""
        lay = self.layout
        sx = world_x - self.x + lay.viewport_x
        sy = world_y - self.y + lay.viewport_y
        visible = (
            lay.viewport_x <= sx < lay.viewport_x + lay.viewport_width
            and lay.viewport_y <= sy < lay.viewport_y + lay.viewport_height
        )
        return sx, sy, visible

    def screen_to_world(self, screen_x: int, screen_y: int) -> tuple[int, int]:
        return (
            screen_x - self.layout.viewport_x + self.x,
            screen_y - self.layout.viewport_y + self.y,
        )

    def viewport_bounds(self) -> tuple[int, int, int, int]:
        """Inclusive world bounds ``(min_x, min_y, max_x, max_y)`` of the view."""
        return (
            self.x,
            self.y,
            self.x + self.layout.viewport_width - 1,
            self.y + self.layout.viewport_height - 1,
        )

    def in_viewport(self, world_x: int, world_y: int) -> bool:
        min_x, min_y, max_x, max_y = self.viewport_bounds()
        return min_x <= world_x <= max_x and min_y <= world_y <= max_y

    def update(self, target_x: int, target_y: int) -> None:
        """Scroll only when the target strays past the margin around the centre."""
        dx = target_x - (self.x + self.layout.viewport_width // 2)
        dy = target_y - (self.y + self.layout.viewport_height // 2)

        if dx > SCROLL_MARGIN:
            self.x += dx - SCROLL_MARGIN
        elif dx < -SCROLL_MARGIN:
            self.x += dx + SCROLL_MARGIN

        if dy > SCROLL_MARGIN:
            self.y += dy - SCROLL_MARGIN
        elif dy < -SCROLL_MARGIN:
            self.y += dy + SCROLL_MARGIN

        self._clamp()