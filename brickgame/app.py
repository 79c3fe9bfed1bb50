"""Starting the game in a terminal."""

from __future__ import annotations

import argparse
import curses
import locale
import random
from contextlib import suppress

from brickgame.colors import init_game_colors
from brickgame.frontend import CursesView
from brickgame.fsm import Game, State, get_signal
from brickgame.highscores import HIGHSCORES_FILE, Highscores


def build_game(view=None, rng=None, highscores_path=HIGHSCORES_FILE) -> Game:
    """A fresh game whose table of best scores lives at ``highscores_path``."""
    highscores = Highscores(highscores_path)
    highscores.load(highscores_path)
    return Game(view=view, rng=rng, highscores=highscores)


def _setup_terminal(screen) -> None:
    with suppress(curses.error):
        curses.noecho()
    with suppress(curses.error):
        curses.curs_set(0)
    with suppress(curses.error):
        curses.start_color()
    screen.keypad(True)
    screen.nodelay(True)


def run(screen) -> Game:
    """Play on ``screen`` until the player quits; return the finished game."""
    _setup_terminal(screen)
    init_game_colors(curses)
    view = CursesView(screen)
    view.draw_begin()
    game = build_game(view, random.Random(), HIGHSCORES_FILE)

    key = 0
    while True:
        finished = game.state == State.EXIT
        signal, _ = get_signal(key, False)
        game.handle(signal)
        key = screen.getch()
        if finished:
            break
    return game


def main(argv=None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="brickgame", description="Play the falling-blocks game in the terminal."
    )
    parser.parse_args(argv)
    locale.setlocale(locale.LC_ALL, "")
    curses.wrapper(run)
    return 0