"""The game window, its menu screen and the play loop."""

from __future__ import annotations

import enum
import time

import pygame

from .entity import Sprite
from .player import Controls, Player
from .utility import SCREEN_HEIGHT, SCREEN_WIDTH

FONT_PATH = "src/font/arial.ttf"
BACKGROUND_PATH = "src/entity/background.png"

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

MENU_FONT_SIZE = 48
HUD_FONT_SIZE = 30
MENU_CIRCLE_RADIUS = 100
FRAME_RATE = 120


class GameState(enum.Enum):
    MENU = enum.auto()
    PLAY = enum.auto()
    PAUSE = enum.auto()
    EXIT = enum.auto()


def _on_play_button(pos: tuple[int, int]) -> bool:
    x, y = pos
    return 400 <= x <= 515 and 310 <= y <= 350


class Application:
    """Owns the window and switches between the game's screens."""

    title = "Game"

    def __init__(self) -> None:
        self.width = SCREEN_WIDTH
        self.height = SCREEN_HEIGHT
        self.state = GameState.MENU
        self.window: pygame.Surface | None = None
        self._images: dict[str, pygame.Surface | None] = {}
        self._clock: pygame.time.Clock | None = None

    def _open_window(self) -> pygame.Surface:
        if self.window is None:
            pygame.init()
            self.window = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(self.title)
            self._clock = pygame.time.Clock()
        return self.window

    def _close_window(self) -> None:
        pygame.display.quit()
        self.window = None

    def _font(self, size: int) -> pygame.font.Font:
        try:
            font = pygame.font.Font(FONT_PATH, size)
        except (OSError, pygame.error):
            font = pygame.font.Font(None, size)
        font.set_bold(True)
        return font

    def _image(self, path: str) -> pygame.Surface | None:
        if path not in self._images:
            try:
                self._images[path] = pygame.image.load(path)
            except (OSError, pygame.error):
                self._images[path] = None
        return self._images[path]

    def _wait_frame(self) -> None:
        if self._clock is not None:
            self._clock.tick(FRAME_RATE)

    def run(self) -> None:
        """Open the window and run screens until the game exits."""
        self._open_window()
        while self.window is not None:
            if self.state == GameState.MENU:
                self.menu()
            elif self.state == GameState.PLAY:
                self.play()
            elif self.state == GameState.PAUSE:
                self.pause()
            elif self.state == GameState.EXIT:
                self.exit()
                self._close_window()
            else:
                self._close_window()

    def menu(self) -> None:
        """Show the title screen until play is clicked or the window closes."""
        window = self._open_window()
        text = self._font(MENU_FONT_SIZE).render("Hello", True, RED)
        while True:
            for event in pygame.event.get():
                if (
                    event.type == pygame.MOUSEBUTTONDOWN
                    and event.button == 1
                    and _on_play_button(event.pos)
                ):
                    self.state = GameState.PLAY
                    return
                if event.type == pygame.QUIT:
                    self.state = GameState.EXIT
                    return
            window.fill(BLACK)
            window.blit(text, (self.width // 2, self.height // 2))
            pygame.draw.circle(
                window, GREEN, (MENU_CIRCLE_RADIUS, MENU_CIRCLE_RADIUS), MENU_CIRCLE_RADIUS
            )
            pygame.display.flip()
            self._wait_frame()

    def _read_controls(self) -> Controls:
        keys = pygame.key.get_pressed()
        return Controls(
            sprint=bool(keys[pygame.K_LSHIFT]),
            right=bool(keys[pygame.K_d]),
            left=bool(keys[pygame.K_a]),
            jump=bool(keys[pygame.K_SPACE]),
            fire=bool(pygame.mouse.get_pressed()[0]),
        )

    def _draw_sprite(self, window: pygame.Surface, sprite: Sprite) -> None:
        if sprite.texture_rect is None:
            return
        scale_x, scale_y = sprite.scale
        image = self._image(sprite.texture) if sprite.texture else None
        frame_rect = pygame.Rect(sprite.texture_rect)
        if image is not None:
            frame_rect = frame_rect.clip(image.get_rect())
        size = (int(abs(frame_rect.width * scale_x)), int(abs(frame_rect.height * scale_y)))
        if size[0] == 0 or size[1] == 0:
            return
        left = sprite.x if scale_x >= 0 else sprite.x - size[0]
        if image is None:
            pygame.draw.rect(window, WHITE, pygame.Rect(int(left), int(sprite.y), *size))
            return
        frame = pygame.transform.scale(image.subsurface(frame_rect), size)
        if scale_x < 0:
            frame = pygame.transform.flip(frame, True, False)
        window.blit(frame, (left, sprite.y))

    def play(self) -> None:
        """Run the game screen until the window closes."""
        window = self._open_window()
        font = self._font(HUD_FONT_SIZE)
        background = self._image(BACKGROUND_PATH)
        if background is not None:
            background = pygame.transform.scale(background, (self.width, self.height))
        player = Player("Player", 100, 1)
        started = last = time.perf_counter()
        while True:
            now = time.perf_counter()
            seconds = int(now - started)
            tick = (now - last) * 1_000_000 / 10_000
            last = now

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.state = GameState.EXIT
                    return

            window.fill(BLACK)
            player.update(tick, self._read_controls())
            if background is not None:
                window.blit(background, (0, 0))
            self._draw_sprite(window, player.sprite)
            for bullet in player.bullets:
                pygame.draw.rect(window, bullet.color, pygame.Rect(*map(int, bullet.rect)))
            window.blit(font.render(f"Time: {seconds}", True, RED), (0, 0))
            pygame.display.flip()
            self._wait_frame()

    def pause(self) -> None:
        """The pause screen; it has no content yet."""

    def exit(self) -> None:
        """Hook run before the window closes."""


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    Application().run()
    return 0