"""A small pygame side-scrolling shooter with an animated player, sprinting and bullets."""

__version__ = "0.1.0"
__all__ = ["application", "bullet", "entity", "player", "utility"]