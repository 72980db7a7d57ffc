"""Bullets fired horizontally by the player."""

from __future__ import annotations

from .utility import SCREEN_WIDTH, Utility

BULLET_WIDTH = 10
BULLET_HEIGHT = 5
MUZZLE_OFFSET = 80
BULLET_COLOR = (0, 255, 0)

LEFT = 2


class Bullet(Utility):
    """A small rectangle flying left or right until it leaves the screen."""

    width = BULLET_WIDTH
    height = BULLET_HEIGHT
    color = BULLET_COLOR

    def __init__(self, damage: int, speed: int, x: float, y: float, direction: int) -> None:
        super().__init__(damage, speed)
        self.expired = False
        if direction == LEFT:
            self.speed = -speed
            self.x = float(x - MUZZLE_OFFSET)
        else:
            self.x = float(x + MUZZLE_OFFSET)
        self.y = float(y)

    @property
    def rect(self) -> tuple[float, float, int, int]:
        """The bullet's rectangle as (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    def update(self, tick: float) -> None:
        """Move the bullet and mark it expired once it is off the screen."""
        self.x += self.speed * tick
        if self.x > SCREEN_WIDTH - self.width or self.x < 0:
            self.expired = True