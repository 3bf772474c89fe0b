"""Projectiles and the fixed-size pool that fires and tracks them."""

from __future__ import annotations

from collections.abc import Iterator

import pygame

from slipfloor import screen
from slipfloor.gamemath import Vector2D


class Bullet:
    """A single projectile travelling in a straight line."""

    MOVE_SPEED = 5.0
    BULLET_SIZE = 8

    def __init__(self) -> None:
        self._is_active = False
        self.position = Vector2D(0.0, 0.0)
        self.velocity = Vector2D(0.0, 0.0)

    @property
    def is_active(self) -> bool:
        """Whether the bullet is in flight."""
        return self._is_active

    def update(self) -> None:
        """Move the bullet and retire it once it has left the play field."""
        self.position = self.position + self.velocity
        margin = self.BULLET_SIZE
        x, y = self.position.x, self.position.y
        if (
            x < -margin
            or x > screen.GAME_WIDTH + margin
            or y < -margin
            or y > screen.GAME_HEIGHT + margin
        ):
            self._is_active = False

    def render(self, target: pygame.Surface, image: pygame.Surface) -> None:
        """Draw the bullet image centred on its position."""
        rect = image.get_rect(center=(int(self.position.x), int(self.position.y)))
        target.blit(image, rect)

    def shoot(self, position: Vector2D, angle_rad: float) -> None:
        """Fire from ``position`` heading at ``angle_rad`` (counter-clockwise, y up)."""
        import math

        self._is_active = True
        self.position = Vector2D(position.x, position.y)
        direction = Vector2D(math.cos(-angle_rad), math.sin(-angle_rad))
        self.velocity = direction * self.MOVE_SPEED


class BulletManager:
    """A fixed pool of bullets, reusing inactive ones when firing."""

    def __init__(self) -> None:
        self._bullets: list[Bullet] = []

    def initialize(self, bullet_count: int) -> None:
        """Replace the pool with ``bullet_count`` fresh, inactive bullets."""
        if bullet_count < 0:
            raise ValueError(f"bullet count must not be negative: {bullet_count}")
        self._bullets = [Bullet() for _ in range(bullet_count)]

    def update(self) -> None:
        """Advance every bullet in flight."""
        for bullet in self:
            bullet.update()

    def render(self, target: pygame.Surface, image: pygame.Surface) -> None:
        """Draw every bullet in flight."""
        for bullet in self:
            bullet.render(target, image)

    def finalize(self) -> None:
        """Release the pool."""
        self._bullets = []

    def shoot_bullet(self, position: Vector2D, angle_rad: float) -> Bullet | None:
        """Fire the first free bullet; return it, or None if all are in flight."""
        for bullet in self._bullets:
            if not bullet.is_active:
                bullet.shoot(position, angle_rad)
                return bullet
        return None

    def get_bullet(self, index: int) -> Bullet | None:
        """The bullet in slot ``index`` if that slot exists and is in flight."""
        if not 0 <= index < len(self._bullets):
            return None
        bullet = self._bullets[index]
        return bullet if bullet.is_active else None

    @property
    def bullet_count(self) -> int:
        """Number of slots in the pool."""
        return len(self._bullets)

    def __iter__(self) -> Iterator[Bullet]:
        """Iterate over the bullets currently in flight."""
        return (bullet for bullet in self._bullets if bullet.is_active)