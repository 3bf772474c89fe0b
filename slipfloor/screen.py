"""Window and play-field dimensions."""

from __future__ import annotations

from typing import NamedTuple

WIDTH = 1280
HEIGHT = 720

TOP = 0
BOTTOM = HEIGHT
LEFT = 0
RIGHT = WIDTH

CENTER_X = WIDTH // 2
CENTER_Y = HEIGHT // 2

GAME_WIDTH = 800
GAME_HEIGHT = 600

ZOOM_RATIO = 1.0


class Viewport(NamedTuple):
    """Placement of the scaled play field inside the window."""

    x: int
    y: int
    width: int
    height: int


def viewport_rect() -> Viewport:
    """Where the play field is drawn in the window, centred and zoomed."""
    width = int(GAME_WIDTH * ZOOM_RATIO)
    height = int(GAME_HEIGHT * ZOOM_RATIO)
    x = WIDTH // 2 - width // 2
    y = HEIGHT // 2 - height // 2
    return Viewport(x, y, width, height)