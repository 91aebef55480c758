from collections import deque

import pygame
import pytest

from bitshooter.badguy import BadGuy
from bitshooter.game import (
    Game,
    MoveDir,
    bad_guys_collide,
    move_player,
    player_collides,
)
from bitshooter.player import Direction, Player


class QueueRng:
    """Returns queued values in order."""

    def __init__(self, *values):
        self.queue = deque(values)

    def randrange(self, stop):
        value = self.queue.popleft()
        assert value in range(stop)
        return value


class NeverRng:
    """Never rolls the spawn value."""

    def randrange(self, stop):
        return 1


def alive_at(x, y):
    guy = BadGuy()
    guy.set_position(x, y)
    guy.live = True
    return guy


@pytest.fixture
def game():
    return Game(800, 400, NeverRng())


@pytest.fixture
def hero():
    return Player(400)


def test_player_collides_touching_edge_counts(hero):
    hero.set_position(0, 0)
    assert player_collides(hero, alive_at(64, 0)) is True
    assert player_collides(hero, alive_at(65, 0)) is False


def test_bad_guys_collide_is_symmetric():
    a, b, c = alive_at(100, 100), alive_at(140, 120), alive_at(300, 300)
    results = [bad_guys_collide(p, q) for p, q in ((a, b), (b, a), (a, c), (c, a))]
    assert results == [True, True, False, False]


def test_move_player_blocked_by_live_enemy(hero):
    start = (hero.x, hero.y)
    move_player(hero, [alive_at(hero.x + 70, hero.y)], MoveDir.RIGHT, 800, 400)
    assert (hero.x, hero.y) == start
    assert hero.last_dir is Direction.RIGHT


def test_move_player_passes_dead_enemy(hero):
    ghost = alive_at(hero.x + 70, hero.y)
    ghost.live = False
    move_player(hero, [ghost], MoveDir.RIGHT, 800, 400)
    assert hero.x == 27


@pytest.mark.parametrize(
    "direction, expected",
    [
        (MoveDir.UP, (200, 193)),
        (MoveDir.DOWN, (200, 207)),
        (MoveDir.LEFT, (193, 200)),
        (MoveDir.RIGHT, (207, 200)),
    ],
)
def test_move_player_directions(hero, direction, expected):
    hero.set_position(200, 200)
    move_player(hero, [], direction, 800, 400)
    assert (hero.x, hero.y) == expected


def test_initial_game(game):
    assert (len(game.weapons), len(game.bad_guys)) == (5, 5)
    assert game.done is False
    assert game.player.y == 200


def test_held_key_moves_each_tick(game):
    game.press("right")
    game.tick()
    game.tick()
    assert game.player.x == 34
    game.release("right")
    game.tick()
    assert game.player.x == 34


def test_space_fires_all_weapons(game):
    game.press("space")
    assert all(w.live for w in game.weapons)
    assert {(w.x, w.y) for w in game.weapons} == {(52, 232)}


@pytest.mark.parametrize("action", ["press", "release"])
def test_escape_ends_game(game, action):
    getattr(game, action)("escape")
    assert game.done is True


def test_unknown_key_is_ignored(game):
    game.press("q")
    assert game.held == set()
    assert game.done is False


def test_tick_spawns_enemy():
    game = Game(800, 400, QueueRng(0, 150, 120, 1, 1, 1, 1))
    game.tick()
    assert [bad.live for bad in game.bad_guys] == [True, False, False, False, False]
    assert (game.bad_guys[0].x, game.bad_guys[0].y) == (150, 120)


def test_tick_does_not_spawn_over_player():
    game = Game(800, 400, QueueRng())
    game.player.set_position(0, 0)
    game.tick()
    assert not any(bad.live for bad in game.bad_guys)


def test_weapon_hits_enemy_during_tick(game):
    target = game.bad_guys[0]
    target.live = True
    target.set_position(300, 232)
    game.player.last_dir = Direction.RIGHT
    game.press("space")
    for _ in range(60):
        game.tick()
    assert target.live is False
    assert not any(w.live for w in game.weapons)


def test_draw_clears_and_draws_player(game):
    screen = pygame.Surface((800, 400))
    screen.fill((10, 20, 30))
    game.player.last_dir = Direction.UP
    game.draw(screen)
    background = screen.get_at((700, 10))
    marker = screen.get_at((game.player.x + 10, game.player.y + 1))
    assert (background.r, background.g, background.b) == (0, 0, 0)
    assert (marker.r, marker.g, marker.b) == (255, 100, 100)