"""Colour palette, semantic colours and style helpers."""

from __future__ import annotations

from enum import IntFlag

from .grid import COLOR_DEFAULT, Style

# Base palette (16-colour terminal indices, shifted by one).
BACKGROUND = COLOR_DEFAULT
BACKGROUND_SECONDARY = 1 + 0
FOREGROUND = COLOR_DEFAULT
FOREGROUND_SECONDARY = 1 + 7
FOREGROUND_EMPH = 1 + 15
YELLOW = 1 + 3
ORANGE = 1 + 1
RED = 1 + 9
MAGENTA = 1 + 5
VIOLET = 1 + 12
BLUE = 1 + 4
CYAN = 1 + 6
GREEN = 1 + 2

BG = BACKGROUND
BG_DARK = BACKGROUND
BG_LOS = BACKGROUND_SECONDARY

# Map
WALL = FOREGROUND_SECONDARY
FLOOR = BACKGROUND_SECONDARY
EXPLORED_WALL = BACKGROUND_SECONDARY
EXPLORED_FLOOR = BACKGROUND
VISIBLE_WALL = FOREGROUND_EMPH
VISIBLE_FLOOR = FOREGROUND

# Entities
PLAYER = BLUE
MONSTER = RED
SLEEPING_MONSTER = VIOLET
CONFUSED_MONSTER = GREEN
PARALYZED_MONSTER = CYAN
ITEM = YELLOW
SPECIAL_ITEM = MAGENTA

# UI
UI_BACKGROUND = BACKGROUND
UI_BORDER = FOREGROUND_SECONDARY
UI_TEXT = FOREGROUND
UI_TITLE = FOREGROUND_EMPH
UI_HIGHLIGHT = YELLOW

# Status
HEALTH_OK = GREEN
HEALTH_WOUNDED = YELLOW
HEALTH_CRITICAL = RED
STATUS_GOOD = BLUE
STATUS_BAD = RED
STATUS_NEUTRAL = YELLOW

# Debug overlays
DEBUG_FOV_VISIBLE = FOREGROUND_EMPH
DEBUG_FOV_EXPLORED = BACKGROUND_SECONDARY
DEBUG_FOV_UNEXPLORED = BACKGROUND
DEBUG_PATH_CHASING = RED
DEBUG_PATH_FLEEING = YELLOW
DEBUG_PATH_PATROLLING = BLUE
DEBUG_PATH_SEARCHING = GREEN
DEBUG_TARGET = MAGENTA
DEBUG_WAYPOINT = CYAN
DEBUG_AI_PANEL = FOREGROUND_SECONDARY

# Combat messages
PLAYER_ATTACK = BLUE
ENEMY_ATTACK = ORANGE
NEUTRAL_ATTACK = YELLOW
DEATH = RED
CORPSE = FOREGROUND_SECONDARY
CRITICAL = RED


class AttrMask(IntFlag):
    """Cell display attributes."""

    NONE = 0
    REVERSE = 1 << 1
    BLINK = 1 << 2
    UNDERLINE = 1 << 3
    BOLD = 1 << 4


def map_style(is_wall: bool, is_visible: bool, is_explored: bool) -> Style:
    """Style of a map cell given its explored and visible state."""
    if not is_explored:
        return Style()
    if is_visible:
        return Style(fg=VISIBLE_WALL if is_wall else VISIBLE_FLOOR)
    return Style(fg=EXPLORED_WALL if is_wall else EXPLORED_FLOOR)


_OPAQUE = 255

_RGBA = {
    RED: (220, 50, 47, _OPAQUE),
    GREEN: (133, 153, 0, _OPAQUE),
    YELLOW: (181, 137, 0, _OPAQUE),
    BLUE: (38, 139, 210, _OPAQUE),
    MAGENTA: (211, 54, 130, _OPAQUE),
    CYAN: (42, 161, 152, _OPAQUE),
    ORANGE: (203, 75, 22, _OPAQUE),
    VIOLET: (108, 113, 196, _OPAQUE),
    BACKGROUND_SECONDARY: (7, 54, 66, _OPAQUE),
    FOREGROUND_EMPH: (147, 161, 161, _OPAQUE),
    FOREGROUND_SECONDARY: (88, 110, 117, _OPAQUE),
}

_DEFAULT_BG = (0, 43, 54, _OPAQUE)
_DEFAULT_FG = (131, 148, 150, _OPAQUE)


def color_to_rgba(color: int, fg: bool) -> tuple[int, int, int, int]:
    """RGBA value of a palette colour; unknown colours use the default fg or bg."""
    rgba = _RGBA.get(color)
    if rgba is not None:
        return rgba
    return _DEFAULT_FG if fg else _DEFAULT_BG