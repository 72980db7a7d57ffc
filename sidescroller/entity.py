"""Living game entities: health, speed, sprite and animation frames."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

WALK = 1
SPRINT = 2
SPRINT_FACTOR = 3


class EntityState(enum.Enum):
    IDLE = enum.auto()
    RWALK = enum.auto()
    RSPRINT = enum.auto()
    LWALK = enum.auto()
    LSPRINT = enum.auto()
    JUMP = enum.auto()
    RELOAD = enum.auto()
    SHOT = enum.auto()
    HIT = enum.auto()
    THROW = enum.auto()
    HURT = enum.auto()
    DEAD = enum.auto()


_ANIMATION_NAMES = {
    EntityState.IDLE: "idle",
    EntityState.RWALK: "walk",
    EntityState.RSPRINT: "sprint",
    EntityState.LWALK: "walk",
    EntityState.LSPRINT: "sprint",
    EntityState.JUMP: "jump",
    EntityState.SHOT: "shot",
    EntityState.RELOAD: "reload",
    EntityState.THROW: "throw",
    EntityState.HURT: "hurt",
    EntityState.DEAD: "dead",
}


@dataclass
class TextureCoords:
    """Frame rectangles of one animation, flattened as x, y, w, h groups."""

    name: str
    coords: list[int] = field(default_factory=list)


@dataclass
class Sprite:
    """Position, scale and current frame of an entity's image."""

    x: float = 0.0
    y: float = 0.0
    scale: tuple[float, float] = (1.0, 1.0)
    texture_rect: tuple[int, int, int, int] | None = None
    texture: str | None = None

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy


class Entity:
    """A named creature with health, walking and sprinting speeds."""

    def __init__(self, name: str, health: int, speed: int) -> None:
        self.name = name
        self.health = health
        self.walk_speed = speed
        self.sprint_speed = SPRINT_FACTOR * speed
        self.speed = self.walk_speed
        self.state = EntityState.IDLE
        self.direction = 0
        self.rect_index = 0
        self.textures: list[TextureCoords] = []
        self.sprite = Sprite()

    def update(self, tick: float) -> None:
        """Advance the entity by one frame by stepping its animation."""
        self.animation()

    def animation(self) -> None:
        """Show the current state's next frame on the sprite, if it has one."""
        frame, self.rect_index = self.next_rect(self.state, self.rect_index)
        if len(frame) >= 4:
            self.sprite.texture_rect = (frame[0], frame[1], frame[2], frame[3])

    def take_damage(self, damage: int) -> int:
        """Subtract damage and return the remaining health, never below 0."""
        self.health -= damage
        return max(self.health, 0)

    def set_speed(self, mode: int) -> None:
        """Switch to walking (1) or sprinting (2); other modes are ignored."""
        if mode == WALK:
            self.speed = self.walk_speed
        elif mode == SPRINT:
            self.speed = self.sprint_speed

    def is_sprint(self) -> bool:
        return self.speed != self.walk_speed

    def next_rect(self, state: EntityState, index: int) -> tuple[list[int], int]:
        """Return the frame coordinates from ``index`` on and the next frame index.

        The first four values are the current frame's rectangle. The index
        wraps to 0 after the last frame; it is unchanged when the state has
        no animation.
        """
        name = _ANIMATION_NAMES.get(state, "")
        frame: list[int] = []
        for texture in self.textures:
            if texture.name != name:
                continue
            frame.extend(texture.coords[index * 4:])
            if index * 4 + 4 < len(texture.coords) - 1:
                index += 1
            else:
                index = 0
        return frame, index