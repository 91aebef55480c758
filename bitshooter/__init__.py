"""A small top-down arcade shooter: player, bad guys, projectiles and game loop."""

__version__ = "0.1.0"
__all__ = ["player", "badguy", "weapon", "game"]