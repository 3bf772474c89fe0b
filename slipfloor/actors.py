"""The player's ship and the enemy that hunts it."""

from __future__ import annotations

import math
from enum import IntFlag

import pygame

from slipfloor import screen
from slipfloor.bullet import BulletManager
from slipfloor.collision import BoundingCircle
from slipfloor.gamemath import (
    Vector2D,
    cross,
    dot,
    length,
    normalize,
    to_degrees,
    to_radians,
)

_FRICTION = 0.99


class PadInput(IntFlag):
    """Bits of the joypad state word."""

    DOWN = 0x0001
    LEFT = 0x0002
    RIGHT = 0x0004
    UP = 0x0008
    BUTTON_10 = 0x2000


def _facing(angle_rad: float) -> Vector2D:
    return Vector2D(math.cos(-angle_rad), math.sin(-angle_rad))


def _move(position: Vector2D, velocity: Vector2D, speed_max: float) -> tuple[Vector2D, Vector2D]:
    """Cap the speed, step the position, apply friction and keep it on the field."""
    if length(velocity) > speed_max:
        velocity = normalize(velocity) * speed_max
    position = position + velocity
    velocity = velocity * _FRICTION
    position.x = min(max(position.x, 0.0), float(screen.GAME_WIDTH))
    position.y = min(max(position.y, 0.0), float(screen.GAME_HEIGHT))
    return position, velocity


def _draw_rotated(
    target: pygame.Surface, image: pygame.Surface, position: Vector2D, angle_rad: float
) -> None:
    rotated = pygame.transform.rotate(image, to_degrees(angle_rad))
    rect = rotated.get_rect(center=(int(position.x), int(position.y)))
    target.blit(rotated, rect)


class Player:
    """The ship steered with the pad: turn, thrust, reverse and fire."""

    RADIUS = 16.0
    MOVE_SPEED_MAX = 4.0
    MOVE_ACCELERATION = 0.1
    TURN_ANGLE = 4.0

    def __init__(self) -> None:
        self.position = Vector2D(0.0, 0.0)
        self.angle_rad = 0.0
        self.velocity = Vector2D(0.0, 0.0)
        self.acceleration = Vector2D(0.0, 0.0)

    def initialize(self) -> None:
        """Place the ship below the centre, facing up."""
        self.position = Vector2D(screen.GAME_WIDTH / 2.0, screen.GAME_HEIGHT / 2.0 + 200.0)
        self.angle_rad = to_radians(90.0)

    def update(self, key_condition: int, key_trigger: int, bullet_manager: BulletManager) -> None:
        """Apply one frame of input, movement and firing."""
        if key_condition & PadInput.LEFT:
            self.angle_rad += to_radians(self.TURN_ANGLE)
        if key_condition & PadInput.RIGHT:
            self.angle_rad -= to_radians(self.TURN_ANGLE)

        self.acceleration = Vector2D(0.0, 0.0)
        if key_condition & PadInput.UP:
            self.acceleration = _facing(self.angle_rad) * self.MOVE_ACCELERATION
        if key_condition & PadInput.DOWN:
            self.acceleration = _facing(self.angle_rad) * -self.MOVE_ACCELERATION

        self.velocity = self.velocity + self.acceleration
        self.position, self.velocity = _move(self.position, self.velocity, self.MOVE_SPEED_MAX)

        if key_trigger & PadInput.BUTTON_10:
            bullet_manager.shoot_bullet(self.position, self.angle_rad)

    def render(self, target: pygame.Surface, image: pygame.Surface) -> None:
        """Draw the ship rotated to its heading."""
        _draw_rotated(target, image, self.position, self.angle_rad)

    def bounding_circle(self) -> BoundingCircle:
        """The circle used for collision checks."""
        return BoundingCircle(Vector2D(self.position.x, self.position.y), self.RADIUS)


class Enemy:
    """A ship that turns toward the player, closes in and fires when lined up."""

    RADIUS = 16.0
    MOVE_SPEED_MAX = 4.0
    MOVE_ACCELERATION = 0.1
    APPROACH_DISTANCE = 100.0
    TURN_ANGLE = 2.0
    VIEW_ANGLE = 60.0
    SHOOT_INTERVAL_FRAME = 60
    SHOOT_DISTANCE = 300.0
    SHOOT_VIEW_ANGLE = 20.0

    def __init__(self, player: Player) -> None:
        self.position = Vector2D(0.0, 0.0)
        self.angle_rad = 0.0
        self.velocity = Vector2D(0.0, 0.0)
        self.acceleration = Vector2D(0.0, 0.0)
        self.player = player
        self.shoot_delay_frame = 0

    def initialize(self) -> None:
        """Place the enemy above the centre, facing down."""
        self.position = Vector2D(screen.GAME_WIDTH / 2.0, screen.GAME_HEIGHT / 2.0 - 200.0)
        self.angle_rad = to_radians(-90.0)

    def update(self, bullet_manager: BulletManager) -> None:
        """Steer, move and possibly fire for one frame."""
        to_player = self.player.position - self.position
        distance = length(to_player)
        to_player = normalize(to_player)

        heading = _facing(self.angle_rad)
        cosine = min(1.0, max(-1.0, dot(to_player, heading)))
        angle = to_degrees(math.acos(cosine))

        if cross(heading, to_player) > 0.0:
            self.angle_rad -= to_radians(self.TURN_ANGLE)
        else:
            self.angle_rad += to_radians(self.TURN_ANGLE)

        self.acceleration = Vector2D(0.0, 0.0)
        if angle < self.VIEW_ANGLE / 2.0 and distance > self.APPROACH_DISTANCE:
            self.acceleration = _facing(self.angle_rad) * self.MOVE_ACCELERATION

        self.velocity = self.velocity + self.acceleration
        self.position, self.velocity = _move(self.position, self.velocity, self.MOVE_SPEED_MAX)

        self.shoot_delay_frame += 1
        if (
            self.shoot_delay_frame > self.SHOOT_INTERVAL_FRAME
            and distance < self.SHOOT_DISTANCE
            and angle < self.SHOOT_VIEW_ANGLE / 2.0
        ):
            self.shoot_delay_frame = 0
            bullet_manager.shoot_bullet(self.position, self.angle_rad)

    def render(self, target: pygame.Surface, image: pygame.Surface) -> None:
        """Draw the enemy rotated to its heading."""
        _draw_rotated(target, image, self.position, self.angle_rad)

    def bounding_circle(self) -> BoundingCircle:
        """The circle used for collision checks."""
        return BoundingCircle(Vector2D(self.position.x, self.position.y), self.RADIUS)