"""Enemy ships that appear at random spots on the playfield."""

from __future__ import annotations

import random

import pygame

SPRITE_SIZE = 64
SPAWN_CHANCE = 500
MIN_SPAWN_COORD = 100


def _build_sprite() -> pygame.Surface:
    image = pygame.Surface((SPRITE_SIZE, SPRITE_SIZE))
    image.fill((0, 0, 0))
    pygame.draw.rect(image, (100, 100, 120), pygame.Rect(25, 10, 14, 44))
    pygame.draw.ellipse(image, (255, 0, 255), pygame.Rect(0, 16, 64, 32))
    pygame.draw.circle(image, (255, 255, 255), (32, 32), 4)
    pygame.draw.circle(image, (120, 255, 255), (16, 32), 4)
    pygame.draw.circle(image, (255, 255, 120), (48, 32), 4)
    return image


class BadGuy:
    """An enemy that is either live on screen or waiting to spawn."""

    def __init__(self) -> None:
        self.image = _build_sprite()
        self.x = 0
        self.y = 0
        self.bound_x = int(self.image.get_width() * 0.75)
        self.bound_y = int(self.image.get_height() * 0.75)
        self.live = False

    def draw(self, surface: pygame.Surface) -> None:
        if self.live:
            surface.blit(self.image, (self.x, self.y))

    def start(self, width: int, height: int, rng: random.Random) -> None:
        """Spawn with a 1 in 500 chance at a random spot away from the corner."""
        if self.live or rng.randrange(SPAWN_CHANCE) != 0:
            return
        span_x = width - self.bound_x
        span_y = height - self.bound_y
        if span_x <= MIN_SPAWN_COORD or span_y <= MIN_SPAWN_COORD:
            raise ValueError(
                f"playfield {width}x{height} is too small to spawn an enemy"
            )
        self.live = True
        self.x = self._pick(rng, span_x)
        self.y = self._pick(rng, span_y)

    @staticmethod
    def _pick(rng: random.Random, span: int) -> int:
        while True:
            value = rng.randrange(span)
            if value >= MIN_SPAWN_COORD:
                return value

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y