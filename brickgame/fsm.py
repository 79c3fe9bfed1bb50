"""The game's state machine: input signals, states and the transitions between them."""

from __future__ import annotations

from enum import IntEnum

from brickgame.backend import overlay_piece, time_step_ms, update_prediction
from brickgame.blocks import random_block_type
from brickgame.board import Board
from brickgame.clock import time_ms
from brickgame.collisions import (
    collides,
    collides_with_blocks,
    will_collide_down,
    will_collide_left,
    will_collide_right,
    will_collide_with_blocks_left,
    will_collide_with_blocks_right,
)
from brickgame.game_status import GameStatus
from brickgame.highscores import Highscores
from brickgame.player import Player, new_next_player, new_player

try:
    import curses
except ImportError:  # pragma: no cover - platforms without curses
    curses = None

KEY_DOWN = curses.KEY_DOWN if curses else 258
KEY_UP = curses.KEY_UP if curses else 259
KEY_LEFT = curses.KEY_LEFT if curses else 260
KEY_RIGHT = curses.KEY_RIGHT if curses else 261
ESCAPE_KEY = 27
ENTER_KEY = 10
PAUSE_KEY = ord("p")

UNNAMED = "Unnamed"


class Signal(IntEnum):
    """What the player asked for."""

    NO_SIGNAL = 0
    MOVE_UP = 1
    MOVE_DOWN = 2
    MOVE_LEFT = 3
    MOVE_RIGHT = 4
    ESCAPE = 5
    ENTER = 6
    PAUSE = 7


class State(IntEnum):
    """Where the game currently is."""

    START = 0
    SPAWN = 1
    MOVING = 2
    COLLIDE = 3
    GAME_OVER = 4
    EXIT = 5
    PAUSE = 6


_KEY_SIGNALS = {
    KEY_UP: Signal.MOVE_UP,
    KEY_DOWN: Signal.MOVE_DOWN,
    KEY_LEFT: Signal.MOVE_LEFT,
    KEY_RIGHT: Signal.MOVE_RIGHT,
    ESCAPE_KEY: Signal.ESCAPE,
    ENTER_KEY: Signal.ENTER,
    PAUSE_KEY: Signal.PAUSE,
}


def get_signal(key: int, hold: bool) -> tuple[Signal, bool]:
    """Translate a key code into a signal; also report whether the key is held."""
    if hold:
        return Signal.NO_SIGNAL, True
    return _KEY_SIGNALS.get(key, Signal.NO_SIGNAL), False


class Game:
    """All state of one game together with the actions that change it.

    ``view`` draws the game and asks for the player's name; without one the
    game runs silently and records no name at game over.
    """

    def __init__(self, view=None, rng=None, highscores=None, clock=time_ms) -> None:
        self.view = view
        self.rng = rng
        self.clock = clock
        self.board = Board()
        self.status = GameStatus()
        self.player = new_player(rng)
        self.next_player = new_next_player(rng)
        self.prediction = Player()
        self.highscores = highscores if highscores is not None else Highscores()
        self.state = State.START
        self.last_moved_time = clock()

    def handle(self, signal) -> None:
        """Act on a signal, redraw, and drop the piece when its time step has passed."""
        action = _TRANSITIONS[State(self.state)].get(Signal(signal))
        if action is not None:
            action(self)

        if self.state not in (State.START, State.PAUSE) and self.view is not None:
            self.view.draw_game(self)

        if self.state == State.MOVING:
            now = self.clock()
            if now - self.last_moved_time > time_step_ms(self.status):
                self.last_moved_time = now
                self.move_down()

    def check_collisions(self) -> bool:
        """Switch to COLLIDE when the piece has landed or overlaps blocks."""
        if will_collide_down(self.player, self.board) or collides_with_blocks(
            self.player, self.board
        ):
            self.state = State.COLLIDE
            return True
        return False

    def spawn(self) -> None:
        """Bring the waiting piece into play and pick a new one to wait."""
        self.player.grid.clear()
        self.player.set_block_type(random_block_type(self.rng))
        self.player.reset_position()
        self.player.set_block_type(self.next_player.block_type)
        if self.check_collisions():
            self.state = State.GAME_OVER
        else:
            update_prediction(self.prediction, self.player, self.board)
            self.next_player.set_block_type(random_block_type(self.rng))
            self.state = State.MOVING

    def rotate(self) -> None:
        """Turn the piece a quarter turn unless that makes it collide."""
        self.player.rotate_next()
        if collides(self.player, self.board):
            self.player.rotate_prev()
        update_prediction(self.prediction, self.player, self.board)
        self.check_collisions()

    def move_down(self) -> None:
        """Drop the piece one row."""
        self.player.move_down()
        self.check_collisions()

    def move_left(self) -> None:
        """Shift the piece one column left when there is room."""
        if not (
            will_collide_left(self.player, self.board)
            or will_collide_with_blocks_left(self.player, self.board)
        ):
            self.player.move_left()
        update_prediction(self.prediction, self.player, self.board)
        self.check_collisions()

    def move_right(self) -> None:
        """Shift the piece one column right when there is room."""
        if not (
            will_collide_right(self.player, self.board)
            or will_collide_with_blocks_right(self.player, self.board)
        ):
            self.player.move_right()
        update_prediction(self.prediction, self.player, self.board)
        self.check_collisions()

    def collide(self) -> None:
        """Settle the piece, clear full lines and score them."""
        overlay_piece(self.player, self.board)
        self.state = State.SPAWN
        lines = self.board.clear_completed_lines()
        if lines > 0:
            self.status.add_score(lines)
            self.status.update_level()
            self.highscores.add(UNNAMED, self.status.score)

    def game_over(self) -> None:
        """Record the score under the player's name and start afresh."""
        name = self.view.ask_player_name() if self.view is not None else ""
        self.highscores.remove(UNNAMED)
        self.highscores.add(name, self.status.score)
        self.board.clear()
        self.status.reset()
        self.state = State.START
        if self.view is not None:
            self.view.draw_begin()

    def exit(self) -> None:
        """Save the table of best scores and stop."""
        if self.highscores.path is not None:
            self.highscores.save(self.highscores.path)
        self.state = State.EXIT

    def toggle_pause(self) -> None:
        """Pause a running game or resume a paused one."""
        if self.state != State.PAUSE:
            self.state = State.PAUSE
            if self.view is not None:
                self.view.draw_pause()
        else:
            self.state = State.MOVING


def _every_signal(action, **overrides):
    table = {signal: action for signal in Signal}
    for name, value in overrides.items():
        table[Signal[name]] = value
    return {signal: act for signal, act in table.items() if act is not None}


_TRANSITIONS = {
    State.START: {Signal.ESCAPE: Game.exit, Signal.ENTER: Game.spawn},
    State.SPAWN: _every_signal(Game.spawn, PAUSE=None),
    State.MOVING: {
        Signal.MOVE_UP: Game.rotate,
        Signal.MOVE_DOWN: Game.move_down,
        Signal.MOVE_LEFT: Game.move_left,
        Signal.MOVE_RIGHT: Game.move_right,
        Signal.ESCAPE: Game.exit,
        Signal.PAUSE: Game.toggle_pause,
    },
    State.COLLIDE: _every_signal(Game.collide),
    State.GAME_OVER: _every_signal(Game.game_over, ENTER=Game.spawn, PAUSE=Game.collide),
    State.EXIT: _every_signal(Game.exit),
    State.PAUSE: {Signal.PAUSE: Game.toggle_pause},
}