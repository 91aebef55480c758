"""Game state, collision rules and the main loop of the shooter."""

from __future__ import annotations

import argparse
import enum
import random
from collections.abc import Sequence

import pygame

from bitshooter.badguy import BadGuy
from bitshooter.player import Player
from bitshooter.weapon import Weapon

WIDTH = 800
HEIGHT = 400
FPS = 60
NUM_WEAPONS = 5
NUM_BAD_GUYS = 5


class MoveDir(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def _boxes_overlap(a, b) -> bool:
    return not (
        a.x + a.bound_x < b.x
        or a.x > b.x + b.bound_x
        or a.y + a.bound_y < b.y
        or a.y > b.y + b.bound_y
    )


def player_collides(player: Player, bad_guy: BadGuy) -> bool:
    """True when the player's box touches or overlaps the enemy's."""
    return _boxes_overlap(player, bad_guy)


def bad_guys_collide(first: BadGuy, second: BadGuy) -> bool:
    """True when two enemies' boxes touch or overlap."""
    return _boxes_overlap(first, second)


def move_player(
    player: Player,
    bad_guys: Sequence[BadGuy],
    direction: MoveDir,
    width: int,
    height: int,
) -> None:
    """Move one step, undoing the move if it runs into a live enemy."""
    old_x, old_y = player.x, player.y
    if direction is MoveDir.UP:
        player.move_up()
    elif direction is MoveDir.DOWN:
        player.move_down(height)
    elif direction is MoveDir.LEFT:
        player.move_left()
    elif direction is MoveDir.RIGHT:
        player.move_right(width)
    if any(bad.live and player_collides(player, bad) for bad in bad_guys):
        player.set_position(old_x, old_y)


_MOVE_KEYS = ("up", "down", "left", "right")


class Game:
    """The whole playfield: player, projectiles, enemies and held keys."""

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.player = Player(height)
        self.weapons = [Weapon() for _ in range(NUM_WEAPONS)]
        self.bad_guys = [BadGuy() for _ in range(NUM_BAD_GUYS)]
        self.held: set[str] = set()
        self.done = False

    def tick(self) -> None:
        """Advance the game by one frame."""
        for key in _MOVE_KEYS:
            if key in self.held:
                move_player(
                    self.player, self.bad_guys, MoveDir(key), self.width, self.height
                )
        for weapon in self.weapons:
            weapon.update(self.width)
        for bad in self.bad_guys:
            if bad.live:
                continue
            blocked = player_collides(self.player, bad) or any(
                other is not bad and other.live and bad_guys_collide(bad, other)
                for other in self.bad_guys
            )
            if not blocked:
                bad.start(self.width, self.height, self.rng)
        for weapon in self.weapons:
            weapon.collide(self.bad_guys)

    def press(self, key: str) -> None:
        """Handle a key going down; unknown keys are ignored."""
        if key == "escape":
            self.done = True
        elif key in _MOVE_KEYS:
            self.held.add(key)
        elif key == "space":
            self.held.add(key)
            for weapon in self.weapons:
                weapon.fire(self.player)

    def release(self, key: str) -> None:
        """Handle a key going up; unknown keys are ignored."""
        if key == "escape":
            self.done = True
        elif key in _MOVE_KEYS or key == "space":
            self.held.discard(key)

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill((0, 0, 0))
        self.player.draw(surface)
        for weapon in self.weapons:
            weapon.draw(surface)
        for bad in self.bad_guys:
            bad.draw(surface)


_KEY_NAMES = {
    pygame.K_ESCAPE: "escape",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_SPACE: "space",
}


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and run the game until it is closed."""
    parser = argparse.ArgumentParser(
        prog="bitshooter", description="A small arcade shooter."
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error:
            return 1
        pygame.display.set_caption("bitshooter")
        game = Game(WIDTH, HEIGHT, random.Random())
        clock = pygame.time.Clock()
        while not game.done:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.done = True
                elif event.type == pygame.KEYDOWN and event.key in _KEY_NAMES:
                    game.press(_KEY_NAMES[event.key])
                elif event.type == pygame.KEYUP and event.key in _KEY_NAMES:
                    game.release(_KEY_NAMES[event.key])
            if game.done:
                break
            game.tick()
            game.draw(screen)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0