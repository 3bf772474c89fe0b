from collections import defaultdict

import pygame

from slipfloor.actors import PadInput
from slipfloor.app import draw_frame_rate, main, read_pad_state
from slipfloor.gamelib import Colors


def _pressed(*keys):
    table = defaultdict(bool)
    for key in keys:
        table[key] = True
    return table


def test_no_keys_gives_empty_state():
    assert read_pad_state(_pressed()) == 0


def test_arrows_and_space_map_to_pad_bits():
    state = read_pad_state(_pressed(pygame.K_UP, pygame.K_SPACE))
    assert state == PadInput.UP | PadInput.BUTTON_10


def test_numpad_matches_arrows():
    for arrow, numpad in [
        (pygame.K_LEFT, pygame.K_KP4),
        (pygame.K_RIGHT, pygame.K_KP6),
        (pygame.K_UP, pygame.K_KP8),
        (pygame.K_DOWN, pygame.K_KP2),
    ]:
        assert read_pad_state(_pressed(arrow)) == read_pad_state(_pressed(numpad))


def test_unmapped_keys_are_ignored():
    assert read_pad_state(_pressed(pygame.K_a, pygame.K_RETURN)) == 0


def test_draw_frame_rate_draws_inside_its_rect():
    target = pygame.Surface((200, 60))
    target.fill((0, 0, 0))

    rect = draw_frame_rate(target, 5, 7, Colors.WHITE, 60)

    assert rect.topleft == (5, 7)
    inside = [
        tuple(target.get_at((x, y)))[:3]
        for x in range(rect.left, rect.right)
        for y in range(rect.top, rect.bottom)
    ]
    assert (255, 255, 255) in inside
    assert tuple(target.get_at((0, 0)))[:3] == (0, 0, 0)
    assert tuple(target.get_at((199, 59)))[:3] == (0, 0, 0)


def test_draw_frame_rate_uses_colour():
    target = pygame.Surface((200, 60))
    target.fill((0, 0, 0))
    rect = draw_frame_rate(target, 0, 0, Colors.RED, 30)
    colours = {
        tuple(target.get_at((x, y)))[:3]
        for x in range(rect.left, rect.right)
        for y in range(rect.top, rect.bottom)
    }
    assert (255, 0, 0) in colours
    assert (255, 255, 255) not in colours


def test_main_runs_a_frame_and_quits(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    batches = iter([[], [pygame.event.Event(pygame.QUIT)]])
    monkeypatch.setattr(pygame.event, "get", lambda *args, **kwargs: next(batches))

    assert main(["--debug"]) == 0
    assert pygame.display.get_init() is False


def test_main_stops_on_escape(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    escape = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    batches = iter([[], [], [escape]])
    monkeypatch.setattr(pygame.event, "get", lambda *args, **kwargs: next(batches))

    assert main(["--debug"]) == 0
    assert next(batches, None) is None