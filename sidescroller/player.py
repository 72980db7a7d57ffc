"""The player character: keyboard-driven movement, animation and shooting."""

from __future__ import annotations

from dataclasses import dataclass

from .bullet import Bullet
from .entity import SPRINT, WALK, Entity, EntityState, TextureCoords
from .utility import SCREEN_WIDTH

TEXTURE_DIR = "src/entity"
IDLE_TEXTURE = f"{TEXTURE_DIR}/player_idle.png"
WALK_TEXTURE = f"{TEXTURE_DIR}/player_walk.png"
SPRINT_TEXTURE = f"{TEXTURE_DIR}/player_sprint.png"
SHOT_TEXTURE = f"{TEXTURE_DIR}/player_shot.png"
DEAD_TEXTURE = f"{TEXTURE_DIR}/player_dead.png"

IDLE_FRAMES = (45, 62, 47, 66)
WALK_FRAMES = (
    49, 61, 35, 67, 171, 61, 35, 67, 303, 62, 35, 66, 432, 61, 35, 67,
    561, 60, 35, 68, 686, 62, 35, 66, 814, 62, 35, 66,
)
SPRINT_FRAMES = (
    38, 68, 42, 60, 165, 68, 42, 60, 290, 68, 42, 60, 420, 68, 42, 60,
    554, 67, 42, 60, 674, 68, 42, 60, 801, 68, 42, 60, 934, 68, 37, 60,
)
SHOT_FRAMES = (47, 64, 50, 64, 175, 64, 49, 64, 302, 64, 64, 64, 431, 64, 64, 64)
DEAD_FRAMES = (41, 68, 45, 59, 160, 66, 51, 61, 288, 66, 48, 61, 409, 66, 62, 61)

SPRITE_SCALE = 2
FRAME_WIDTH = 47
START_POSITION = (500.0, 300.0)
ANIMATION_DELAY = 20

BULLET_DAMAGE = 20
BULLET_SPEED = 10
GUN_HEIGHT = 25

STAND, RIGHT, LEFT, JUMP = 0, 1, 2, 3


@dataclass(frozen=True)
class Controls:
    """The input held down during one frame."""

    sprint: bool = False
    right: bool = False
    left: bool = False
    jump: bool = False
    fire: bool = False


class Player(Entity):
    """The character the user steers, walks, sprints and shoots with."""

    def __init__(self, name: str, health: int, speed: int) -> None:
        super().__init__(name, health, speed)
        self.textures = [
            TextureCoords("idle", list(IDLE_FRAMES)),
            TextureCoords("walk", list(WALK_FRAMES)),
            TextureCoords("sprint", list(SPRINT_FRAMES)),
            TextureCoords("dead", list(DEAD_FRAMES)),
            TextureCoords("shot", list(SHOT_FRAMES)),
        ]
        self.firing = False
        self.bullets: list[Bullet] = []
        self.anim_time = 0.0
        self.sprite.texture = IDLE_TEXTURE
        self.sprite.texture_rect = IDLE_FRAMES
        self.sprite.scale = (SPRITE_SCALE, SPRITE_SCALE)
        self.sprite.x, self.sprite.y = START_POSITION
        self.state = EntityState.IDLE

    def update(self, tick: float, controls: Controls | None = None) -> None:
        """Apply one frame of input, move bullets and advance the animation timer."""
        controls = controls or Controls()
        self.direction = STAND
        self.set_speed(SPRINT if controls.sprint else WALK)
        step = self.speed * tick
        sprite = self.sprite

        if controls.right:
            self.direction = RIGHT
            if not self.firing:
                sprite.move(step, 0)
                right_limit = SCREEN_WIDTH - FRAME_WIDTH * SPRITE_SCALE
                if sprite.x >= right_limit:
                    sprite.x = right_limit

        if controls.left:
            self.direction = LEFT
            if not self.firing:
                sprite.move(-step, 0)
                if sprite.x <= 0:
                    sprite.x = 0

        if controls.jump:
            self.direction = JUMP

        if controls.fire:
            self.firing = True

        for bullet in self.bullets:
            bullet.update(tick)
        self.bullets[:] = [bullet for bullet in self.bullets if not bullet.expired]

        if int(self.anim_time) >= ANIMATION_DELAY:
            self.animation()
            self.anim_time = 0.0
        else:
            self.anim_time += tick

    def _enter(self, state: EntityState, texture: str | None, flip: bool) -> None:
        self.rect_index = 0
        self.state = state
        if texture is not None:
            self.sprite.texture = texture
            self.sprite.scale = (-SPRITE_SCALE if flip else SPRITE_SCALE, SPRITE_SCALE)

    def animation(self) -> None:
        """Pick the animation for the current action and show its next frame."""
        sprite = self.sprite
        sprinting = self.is_sprint()

        if self.firing:
            if self.state != EntityState.SHOT:
                self.state = EntityState.SHOT
                self.rect_index = 0
                sprite.texture = SHOT_TEXTURE
                if self.direction == RIGHT:
                    sprite.scale = (SPRITE_SCALE, SPRITE_SCALE)
                elif self.direction == LEFT:
                    sprite.scale = (-SPRITE_SCALE, SPRITE_SCALE)
        elif self.direction == RIGHT:
            if sprinting and self.state != EntityState.RSPRINT:
                self._enter(EntityState.RSPRINT, SPRINT_TEXTURE, flip=False)
            elif not sprinting and self.state != EntityState.RWALK:
                self._enter(EntityState.RWALK, WALK_TEXTURE, flip=False)
        elif self.direction == LEFT:
            if sprinting and self.state != EntityState.LSPRINT:
                self._enter(EntityState.LSPRINT, SPRINT_TEXTURE, flip=True)
            elif not sprinting and self.state != EntityState.LWALK:
                self._enter(EntityState.LWALK, WALK_TEXTURE, flip=True)
        elif self.direction == JUMP and self.state != EntityState.JUMP:
            self._enter(EntityState.JUMP, None, flip=False)
        elif self.direction == STAND and self.state != EntityState.IDLE:
            self._enter(EntityState.IDLE, IDLE_TEXTURE, flip=False)

        frame, self.rect_index = self.next_rect(self.state, self.rect_index)
        if len(frame) >= 4:
            sprite.texture_rect = (frame[0], frame[1], frame[2], frame[3])

        if self.rect_index == 0 and self.state == EntityState.SHOT:
            self.firing = False
            self.bullets.append(
                Bullet(
                    BULLET_DAMAGE,
                    BULLET_SPEED,
                    sprite.x,
                    sprite.y + GUN_HEIGHT,
                    self.direction,
                )
            )