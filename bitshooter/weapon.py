"""Projectiles fired by the player."""

from __future__ import annotations

import math
from collections.abc import Iterable

import pygame

from bitshooter.badguy import BadGuy
from bitshooter.player import Direction, Player

SPRITE_SIZE = 64
SPEED = 7
SCALE = 0.5
SPIN = 0.1

# Drawing steps for the projectile sprite, applied in order.
_SPRITE_STEPS = (
    (pygame.draw.rect, (0, 255, 255), ((0, 25, 64, 14),)),
    (pygame.draw.rect, (0, 255, 255), ((25, 0, 14, 64),)),
    (pygame.draw.circle, (100, 100, 100), ((32, 32), 8, 5)),
    (pygame.draw.line, (100, 100, 255), ((0, 32), (64, 32), 2)),
    (pygame.draw.line, (100, 100, 255), ((32, 0), (32, 64), 2)),
    (pygame.draw.circle, (200, 200, 200), ((32, 32), 16, 5)),
)

# Unit heading for each facing; no facing yet means flying right.
_HEADINGS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}
_DEFAULT_HEADING = (1, 0)


def _build_sprite() -> pygame.Surface:
    image = pygame.Surface((SPRITE_SIZE, SPRITE_SIZE))
    image.fill((0, 0, 0))
    for draw, colour, args in _SPRITE_STEPS:
        draw(image, colour, *args)
    return image


class Weapon:
    """A spinning projectile that flies in the player's last direction."""

    def __init__(self) -> None:
        self.image = _build_sprite()
        self.x = 0
        self.y = 0
        self.vx = 0
        self.vy = 0
        self.speed = SPEED
        self.bound_x = self.image.get_width() // 2
        self.bound_y = self.image.get_height() // 2
        self.live = False
        self.angle = 0.0

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the projectile centred on its position and spin it on."""
        if not self.live:
            return
        sprite = pygame.transform.rotozoom(
            self.image, -math.degrees(self.angle), SCALE
        )
        surface.blit(sprite, sprite.get_rect(center=(self.x, self.y)))
        self.angle += SPIN

    def fire(self, player: Player) -> None:
        """Launch from the player's centre unless already in flight."""
        if self.live:
            return
        self.x = player.x + player.bound_x // 2
        self.y = player.y + player.bound_y // 2
        hx, hy = _HEADINGS.get(player.last_dir, _DEFAULT_HEADING)
        self.vx, self.vy = hx * self.speed, hy * self.speed
        self.live = True

    def update(self, width: int) -> None:
        """Advance the projectile; it dies past the left, right or top edge."""
        if not self.live:
            return
        self.x += self.vx
        self.y += self.vy
        if self.x < 0 or self.x > width or self.y < 0:
            self.live = False

    def collide(self, bad_guys: Iterable[BadGuy]) -> None:
        """Kill every live enemy the projectile is inside, and the projectile."""
        if not self.live:
            return
        for bad in bad_guys:
            if bad.live and (
                bad.x - bad.bound_x < self.x < bad.x + bad.bound_x
                and bad.y - bad.bound_y < self.y < bad.y + bad.bound_y
            ):
                self.live = False
                bad.live = False