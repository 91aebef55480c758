"""The player's ship: movement inside the playfield and its sprite."""

from __future__ import annotations

import enum

import pygame

SPRITE_SIZE = 64
START_X = 20
SPEED = 7
MARKER_COLOR = (255, 100, 100)
MARKER_THICKNESS = 3


class Direction(enum.IntEnum):
    """The direction the player last moved in."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


def _build_sprite() -> pygame.Surface:
    image = pygame.Surface((SPRITE_SIZE, SPRITE_SIZE))
    image.fill((0, 0, 0))
    pygame.draw.rect(image, (75, 75, 75), pygame.Rect(0, 25, 64, 14))
    pygame.draw.rect(image, (50, 50, 50), pygame.Rect(25, 0, 14, 64))
    pygame.draw.circle(image, (0, 0, 0), (32, 32), 8, 5)
    pygame.draw.line(image, (255, 100, 255), (0, 32), (64, 32), 2)
    pygame.draw.line(image, (255, 100, 255), (32, 0), (32, 64), 2)
    pygame.draw.circle(image, (200, 200, 200), (32, 32), 16, 5)
    return image


class Player:
    """The ship the user steers around the screen."""

    def __init__(self, height: int) -> None:
        self.image = _build_sprite()
        self.x = START_X
        self.y = height // 2
        self.speed = SPEED
        self.bound_x = self.image.get_width()
        self.bound_y = self.image.get_height()
        self.last_dir: Direction | None = None

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the ship and mark the edge facing the last move."""
        surface.blit(self.image, (self.x, self.y))
        t = MARKER_THICKNESS
        x, y, bx, by = self.x, self.y, self.bound_x, self.bound_y
        markers = {
            Direction.UP: pygame.Rect(x, y, bx, t),
            Direction.DOWN: pygame.Rect(x, y + by - t, bx, t),
            Direction.LEFT: pygame.Rect(x, y, t, by),
            Direction.RIGHT: pygame.Rect(x + bx - t, y, t, by),
        }
        if self.last_dir in markers:
            pygame.draw.rect(surface, MARKER_COLOR, markers[self.last_dir])

    def move_up(self) -> None:
        self.y = max(self.y - self.speed, 0)
        self.last_dir = Direction.UP

    def move_down(self, height: int) -> None:
        self.y = min(self.y + self.speed, height - self.bound_y)
        self.last_dir = Direction.DOWN

    def move_left(self) -> None:
        self.x = max(self.x - self.speed, 0)
        self.last_dir = Direction.LEFT

    def move_right(self, width: int) -> None:
        self.x = min(self.x + self.speed, width - self.bound_x)
        self.last_dir = Direction.RIGHT

    def set_position(self, x: int, y: int) -> None:
        """Put the ship back at a given spot, e.g. after a collision."""
        self.x = x
        self.y = y