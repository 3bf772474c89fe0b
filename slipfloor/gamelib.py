"""Colour constants, game exit signalling and debug output."""

from __future__ import annotations

import sys
from enum import IntEnum

import pygame


class Colors(IntEnum):
    """The sixteen standard colours as 0xAARRGGBB values."""

    BLACK = 0xFF000000
    BLUE = 0xFF0000FF
    CYAN = 0xFF00FFFF
    GRAY = 0xFF808080
    GREEN = 0xFF008000
    LIME = 0xFF00FF00
    MAGENTA = 0xFFFF00FF
    MAROON = 0xFF800000
    NAVY = 0xFF000080
    OLIVE = 0xFF808000
    PURPLE = 0xFF800080
    RED = 0xFFFF0000
    SILVER = 0xFFC0C0C0
    TEAL = 0xFF008080
    WHITE = 0xFFFFFFFF
    YELLOW = 0xFFFFFF00


class ExitGame(Exception):
    """Raised to ask the main loop to stop."""


def to_rgba(color: int) -> tuple[int, int, int, int]:
    """Split a 0xAARRGGBB colour into an (r, g, b, a) tuple."""
    if not 0 <= color <= 0xFFFFFFFF:
        raise ValueError(f"colour out of range: {color:#x}")
    return (
        (color >> 16) & 0xFF,
        (color >> 8) & 0xFF,
        color & 0xFF,
        (color >> 24) & 0xFF,
    )


def exit_game() -> None:
    """End the game: queue a quit event if a display is open, then raise ExitGame."""
    if pygame.display.get_init():
        pygame.event.post(pygame.event.Event(pygame.QUIT))
    raise ExitGame()


def output_debug_string(fmt: str, first_arg: object, *args: object) -> None:
    """Format a message printf-style and write it to the debug stream."""
    try:
        text = fmt % (first_arg, *args)
    except (TypeError, ValueError) as exc:
        raise RuntimeError("String Formatting Error.") from exc
    sys.stderr.write(text)
    sys.stderr.flush()