"""The game-play scene and the game object that switches between scenes."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Optional

import pygame

from slipfloor import screen
from slipfloor.actors import Enemy, Player
from slipfloor.bullet import BulletManager
from slipfloor.collision import is_circle_colliding, resolve_overlap
from slipfloor.gamelib import Colors, to_rgba

ImageLoader = Callable[[str], Optional[pygame.Surface]]

PLAYER_TEXTURE = "Resources/Textures/Player.png"
ENEMY_TEXTURE = "Resources/Textures/Enemy.png"
BULLET_TEXTURE = "Resources/Textures/Bullet.png"

BULLETS_PER_SHOOTER = 10

_LABEL = "GamePlay"
_LABEL_POSITION = (10, 30)
_LABEL_FONT_SIZE = 16


def _load_image(path: str) -> pygame.Surface | None:
    """Load an image, or return None if it cannot be read."""
    try:
        image = pygame.image.load(path)
    except (FileNotFoundError, pygame.error):
        return None
    try:
        return image.convert_alpha()
    except pygame.error:
        return image


class SceneID(Enum):
    """Identifiers of the scenes the game can show."""

    NONE = -1
    GAME_PLAY = 0


class GamePlayScene:
    """The scene where the player and the enemy fight."""

    def __init__(self, game: Game, image_loader: ImageLoader | None = None) -> None:
        self.game = game
        self._load = image_loader or _load_image
        self._player_image: pygame.Surface | None = None
        self._enemy_image: pygame.Surface | None = None
        self._bullet_image: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None
        self.player = Player()
        self.player_bullets = BulletManager()
        self.enemy = Enemy(self.player)
        self.enemy_bullets = BulletManager()

    def initialize(self) -> None:
        """Load the images and place both ships with empty bullet pools."""
        self._player_image = self._load(PLAYER_TEXTURE)
        self._enemy_image = self._load(ENEMY_TEXTURE)
        self._bullet_image = self._load(BULLET_TEXTURE)

        self.player.initialize()
        self.player_bullets.initialize(BULLETS_PER_SHOOTER)
        self.enemy.initialize()
        self.enemy_bullets.initialize(BULLETS_PER_SHOOTER)

    def update(self, key_condition: int, key_trigger: int) -> None:
        """Advance the scene one frame and keep the ships from overlapping."""
        self.player.update(key_condition, key_trigger, self.player_bullets)
        self.player_bullets.update()
        self.enemy.update(self.enemy_bullets)
        self.enemy_bullets.update()

        if is_circle_colliding(self.player.bounding_circle(), self.enemy.bounding_circle()):
            player_circle = self.player.bounding_circle()
            enemy_circle = self.enemy.bounding_circle()
            resolve_overlap(player_circle, enemy_circle)
            self.player.position = player_circle.center
            self.enemy.position = enemy_circle.center

    def render(self, target: pygame.Surface) -> None:
        """Draw the ships, the bullets and the scene label."""
        if self._player_image is not None:
            self.player.render(target, self._player_image)
        if self._enemy_image is not None:
            self.enemy.render(target, self._enemy_image)
        if self._bullet_image is not None:
            self.player_bullets.render(target, self._bullet_image)
            self.enemy_bullets.render(target, self._bullet_image)

        label = self._label_font().render(_LABEL, False, to_rgba(Colors.WHITE)[:3])
        target.blit(label, _LABEL_POSITION)

    def finalize(self) -> None:
        """Release the images and the font."""
        self._player_image = None
        self._enemy_image = None
        self._bullet_image = None
        self._font = None

    def _label_font(self) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
            self._font = None
        if self._font is None:
            self._font = pygame.font.Font(None, _LABEL_FONT_SIZE)
        return self._font


class Game:
    """Owns the scenes, tracks pad input and composes the final frame."""

    TITLE = "Slip Floor"

    def __init__(self, image_loader: ImageLoader | None = None) -> None:
        self.key = 0
        self.old_key = 0
        self._canvas: pygame.Surface | None = None
        self._current_scene_id = SceneID.NONE
        self._requested_scene_id = SceneID.NONE
        self.play_scene = GamePlayScene(self, image_loader)
        self._scenes = {SceneID.GAME_PLAY: self.play_scene}

    @property
    def current_scene_id(self) -> SceneID:
        """The scene being shown."""
        return self._current_scene_id

    @property
    def requested_scene_id(self) -> SceneID:
        """The scene to switch to on the next update, or NONE."""
        return self._requested_scene_id

    def initialize(self) -> None:
        """Create the play-field canvas and start the game-play scene."""
        self._canvas = pygame.Surface((screen.GAME_WIDTH, screen.GAME_HEIGHT))
        self._set_start_scene(SceneID.GAME_PLAY)

    def update(self, elapsed_time: float, key_state: int) -> None:
        """Take the new pad state, switch scenes if asked, and update the scene."""
        self.old_key = self.key
        self.key = key_state

        if self._requested_scene_id is not SceneID.NONE:
            self._change_scene()

        scene = self._scenes.get(self._current_scene_id)
        if scene is not None:
            scene.update(self.key, ~self.old_key & self.key)

    def render(self, target: pygame.Surface) -> None:
        """Draw the scene onto the canvas and place it centred on ``target``."""
        if self._canvas is None:
            raise RuntimeError("the game has not been initialized")

        self._canvas.fill((0, 0, 0))
        scene = self._scenes.get(self._current_scene_id)
        if scene is not None:
            scene.render(self._canvas)

        view = screen.viewport_rect()
        image = self._canvas
        if image.get_size() != (view.width, view.height):
            image = pygame.transform.scale(image, (view.width, view.height))
        target.blit(image, (view.x, view.y))

    def finalize(self) -> None:
        """Shut down the current scene."""
        self._finalize_current_scene()

    def request_scene_change(self, next_scene_id: SceneID) -> None:
        """Ask for a switch to ``next_scene_id`` at the start of the next update."""
        self._requested_scene_id = next_scene_id

    def _set_start_scene(self, start_scene_id: SceneID) -> None:
        self._current_scene_id = start_scene_id
        self._initialize_current_scene()

    def _change_scene(self) -> None:
        self._finalize_current_scene()
        self._current_scene_id = self._requested_scene_id
        self._initialize_current_scene()
        self._requested_scene_id = SceneID.NONE

    def _initialize_current_scene(self) -> None:
        scene = self._scenes.get(self._current_scene_id)
        if scene is not None:
            scene.initialize()

    def _finalize_current_scene(self) -> None:
        scene = self._scenes.get(self._current_scene_id)
        if scene is not None:
            scene.finalize()