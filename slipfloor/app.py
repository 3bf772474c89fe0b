"""Window, main loop and input mapping for the game."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

import pygame

from slipfloor import screen
from slipfloor.actors import PadInput
from slipfloor.frametimer import DEFAULT_REFRESH_RATE, FrameTimer
from slipfloor.gamelib import Colors, ExitGame, to_rgba
from slipfloor.scene import Game

TARGET_FPS = 60

_BACKGROUND = (100, 100, 100)
_FPS_FONT_SIZE = 16

_KEY_BITS = {
    pygame.K_DOWN: PadInput.DOWN,
    pygame.K_KP2: PadInput.DOWN,
    pygame.K_LEFT: PadInput.LEFT,
    pygame.K_KP4: PadInput.LEFT,
    pygame.K_RIGHT: PadInput.RIGHT,
    pygame.K_KP6: PadInput.RIGHT,
    pygame.K_UP: PadInput.UP,
    pygame.K_KP8: PadInput.UP,
    pygame.K_SPACE: PadInput.BUTTON_10,
}

_fonts: dict[int, pygame.font.Font] = {}


def read_pad_state(pressed: Any) -> int:
    """Turn a key-pressed table, indexed by key code, into a pad state word."""
    state = 0
    for key, bit in _KEY_BITS.items():
        if pressed[key]:
            state |= bit
    return state


def _frame_rate_font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
        _fonts.clear()
    if _FPS_FONT_SIZE not in _fonts:
        _fonts[_FPS_FONT_SIZE] = pygame.font.Font(None, _FPS_FONT_SIZE)
    return _fonts[_FPS_FONT_SIZE]


def draw_frame_rate(target: pygame.Surface, x: int, y: int, color: int, fps: int) -> pygame.Rect:
    """Draw the frame rate at (x, y) and return the area drawn."""
    text = _frame_rate_font().render(f"{fps:3d}fps", False, to_rgba(color)[:3])
    return target.blit(text, (x, y))


def _running() -> bool:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False
    return not pygame.key.get_pressed()[pygame.K_ESCAPE]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game until the window closes or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="slipfloor", description="Top-down ship duel.")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="run in a titled window and show the frame rate",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        flags = 0 if args.debug else pygame.FULLSCREEN
        try:
            target = pygame.display.set_mode((screen.WIDTH, screen.HEIGHT), flags)
        except pygame.error:
            return -1
        if args.debug:
            pygame.display.set_caption(Game.TITLE)

        frame_timer = FrameTimer(TARGET_FPS)
        clock = pygame.time.Clock()
        game = Game()
        game.initialize()

        try:
            while _running():
                frame_timer.update()
                if frame_timer.is_update_frame:
                    game.update(
                        frame_timer.elapsed_time,
                        read_pad_state(pygame.key.get_pressed()),
                    )
                game.render(target)

                if args.debug:
                    draw_frame_rate(target, 10, 10, Colors.WHITE, frame_timer.frame_rate)

                pygame.display.flip()
                target.fill(_BACKGROUND)
                clock.tick(DEFAULT_REFRESH_RATE)
        except ExitGame:
            pass

        game.finalize()
    finally:
        _fonts.clear()
        pygame.quit()

    return 0