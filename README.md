# brickgame

A falling-block puzzle game that runs in your terminal.

Pieces fall onto a 10 × 20 board. Fill horizontal lines to clear them and
score points. A grey preview shows where the current piece will land, and
the next piece waits in the side panel. The five best scores are kept in a
file between sessions.

## Installing

```
pip install .
```

The game has no dependencies outside the standard library. It draws with
the standard `curses` module, so it needs a terminal with colour support on
a system where Python ships `curses` (Linux, macOS and other Unix-like
systems).

## Playing

```
brickgame
```

`brickgame --help` shows the usage line; the command takes no other options.

| Key   | Action                                  |
|-------|-----------------------------------------|
| Enter | start a game                            |
| ← / → | move the piece sideways                 |
| ↑     | rotate the piece a quarter turn         |
| ↓     | move the piece down one row             |
| p     | pause / resume                          |
| Esc   | save the best scores and quit           |

A rotation that would push the piece off the board or into settled blocks
is undone. The game is over when a new piece has no room to appear. You are
then asked for a name (up to 9 characters, finished with Enter). Your score
is stored under that name and a new game can be started with Enter.

### Scoring

| Lines cleared at once | Points |
|-----------------------|--------|
| 1                     | 100    |
| 2                     | 300    |
| 3                     | 700    |
| 4                     | 1500   |

You move up one level for every 600 points, up to level 10. Pieces fall
faster at each level: one row every 1000 ms at level 0 and one row every
150 ms at level 10.

### Best scores

The table of the five best scores is written to `highscores.highscores` in
the current directory. It is saved every time it changes and again when you
quit. While a game runs, its score is kept in the table under the name
`Unnamed`; at game over that row is replaced by the name you type.

## Using the game logic in your own code

The rules are independent of the terminal view.

```python
import random

from brickgame.board import Board
from brickgame.player import new_player
from brickgame.blocks import BlockType
from brickgame.collisions import collides
from brickgame.game_status import GameStatus

board = Board()
piece = new_player(random.Random(1))
piece.reset_position()
piece.set_block_type(BlockType.T)
assert not collides(piece, board)

status = GameStatus()
status.add_score(2)
status.update_level()
print(status.score, status.level)   # 300 0
```

The whole game is driven by `brickgame.fsm.Game`. Feed it `Signal` values
with `Game.handle`; `get_signal(key, hold)` turns curses key codes into
signals. Without a view the game draws nothing and records an empty name at
game over.

```python
import random

from brickgame.fsm import Game, Signal, State

game = Game(rng=random.Random(0))
game.handle(Signal.ENTER)          # the first piece appears
assert game.state == State.MOVING
game.handle(Signal.MOVE_LEFT)
```

Other pieces:

- `brickgame.highscores.Highscores` – the table of best scores; with a path
  it saves itself on every `add` and `remove`. `save` and `load` read and
  write its fixed-size binary file.
- `brickgame.backend` – settling a piece onto the board, the landing
  preview and the drop interval for a level (`time_step_ms`).
- `brickgame.frontend.CursesView` – draws a `Game` on a curses window.
- `brickgame.app.build_game` and `brickgame.app.run` – build a game and play
  it on a curses screen.

## What it does not do

There is no way to choose the board size, key bindings or the location of
the score file; the game always uses the values above.

## Running the tests

```
pip install ".[test]"
pytest
```