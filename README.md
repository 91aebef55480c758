# bitshooter

A small top-down arcade shooter. You pilot a ship across an 800×400 field.
Bad guys pop up at random places, and you clear them out with spinning
projectiles that you fire in the direction you last moved.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window and reads the keyboard.

## Playing

```
bitshooter
```

| Key            | Action                                           |
|----------------|--------------------------------------------------|
| Arrow keys     | Move the ship (held keys keep it moving)         |
| Space          | Fire every projectile that is not already flying |
| Escape         | Quit                                             |

Closing the window also quits. If no display can be opened, the command
exits with status 1.

How it plays:

- The ship starts 20 pixels from the left edge, halfway down. It moves 7
  pixels per frame at 60 frames a second and cannot leave the field.
- A red bar on one edge of the ship shows the direction it last moved.
  Projectiles leave from the ship's centre in that direction, or to the
  right if the ship has not moved yet. There are five projectiles.
- The ship cannot move into a live bad guy. A move that would overlap one
  is undone.
- There are five bad guys. Each frame, every missing bad guy has a 1 in 500
  chance of appearing, but only if its last box does not touch the ship or
  another live bad guy. A bad guy always appears with both coordinates at
  least 100.
- A projectile that reaches a bad guy removes both.
- A projectile that leaves the top, left or right of the field is gone and
  can be fired again. One fired downwards keeps flying below the field and
  cannot be fired again.

## Using the pieces

The game logic runs without a window, so you can script it or test it:

```python
import random

from bitshooter.game import Game, MoveDir, move_player, player_collides
from bitshooter.player import Player, Direction
from bitshooter.badguy import BadGuy
from bitshooter.weapon import Weapon

game = Game(800, 400, random.Random(1))
game.press("right")
for _ in range(10):
    game.tick()
game.release("right")
game.press("space")
game.tick()
```

- `Game.press(key)` and `Game.release(key)` take `"up"`, `"down"`,
  `"left"`, `"right"`, `"space"` or `"escape"`, and ignore any other key.
  `"escape"` sets `game.done`.
- `Game.tick()` advances the game by one frame.
- `move_player(player, bad_guys, direction, width, height)` moves the ship
  one step in a `MoveDir` direction. `player_collides` and
  `bad_guys_collide` are the box-overlap tests. Boxes that only touch count
  as overlapping.
- `BadGuy.start(width, height, rng)` raises `ValueError` when the field is
  too small to place a bad guy.
- `Player`, `BadGuy` and `Weapon` each have a `draw(surface)` method that
  renders onto a `pygame.Surface`. `Game.draw(surface)` clears the surface
  and draws the whole scene.

## What it does not do

There is no score, no lives, no sound, no levels and no settings. The
`bitshooter` command takes no options, and the field size is fixed at
800×400 when you play from the command line.

## Running the tests

```
pip install .[test]
pytest
```