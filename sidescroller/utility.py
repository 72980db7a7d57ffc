"""Base class for projectiles and other usable items, plus the screen size."""

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600


class Utility:
    """An item that deals damage and moves with a horizontal speed."""

    def __init__(self, damage: int, speed: int) -> None:
        self.damage = damage
        self.speed = speed

    def update(self, tick: float) -> None:
        """Advance the item by one frame; a plain item does nothing."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(damage={self.damage}, speed={self.speed})"