"""Terminal colour numbers and colour pairs used to draw the game."""

from __future__ import annotations

from enum import IntEnum

from brickgame.blocks import BlockColor

try:
    import curses

    _TERMINAL_ERRORS: tuple = (curses.error,)
except ImportError:  # pragma: no cover - platforms without curses
    _TERMINAL_ERRORS = ()

BLACK = 0
BASE_INDEX = 100


class ColorPair(IntEnum):
    """Colour pair numbers registered with the terminal."""

    RED = BASE_INDEX + 0
    ORANGE = BASE_INDEX + 1
    YELLOW = BASE_INDEX + 2
    PINK = BASE_INDEX + 3
    GREEN = BASE_INDEX + 4
    BLUE = BASE_INDEX + 5
    PURPLE = BASE_INDEX + 6
    HIGHSCORE_1 = BASE_INDEX + 7
    HIGHSCORE_2 = BASE_INDEX + 8
    HIGHSCORE_3 = BASE_INDEX + 9
    HIGHSCORE_4_5 = BASE_INDEX + 10
    INIT = BASE_INDEX + 22
    PREDICT = BASE_INDEX + 23


CUSTOM_ORANGE = BASE_INDEX + 11
CUSTOM_PINK = BASE_INDEX + 12
CUSTOM_PURPLE = BASE_INDEX + 13
CUSTOM_BROWN = BASE_INDEX + 14
CUSTOM_SILVER = BASE_INDEX + 15
CUSTOM_YELLOW = BASE_INDEX + 16
CUSTOM_RED = BASE_INDEX + 17
CUSTOM_GREEN = BASE_INDEX + 18
CUSTOM_BLUE = BASE_INDEX + 19
CUSTOM_PREDICT = BASE_INDEX + 20
CUSTOM_GRAY = BASE_INDEX + 21

# Colour number -> (red, green, blue) on the 0..1000 scale, in registration order.
COLOR_DEFINITIONS: dict[int, tuple[int, int, int]] = {
    CUSTOM_PINK: (980, 600, 790),
    CUSTOM_ORANGE: (1000, 392, 0),
    CUSTOM_BROWN: (592, 337, 290),
    CUSTOM_SILVER: (752, 752, 752),
    CUSTOM_YELLOW: (1000, 843, 0),
    CUSTOM_PURPLE: (500, 0, 500),
    CUSTOM_RED: (1000, 0, 0),
    CUSTOM_GREEN: (0, 500, 0),
    CUSTOM_BLUE: (25, 25, 830),
    CUSTOM_PREDICT: (150, 150, 150),
    CUSTOM_GRAY: (500, 500, 500),
}

# Pair number -> (foreground, background), in registration order.
PAIR_DEFINITIONS: dict[ColorPair, tuple[int, int]] = {
    ColorPair.RED: (CUSTOM_RED, CUSTOM_RED),
    ColorPair.ORANGE: (CUSTOM_ORANGE, CUSTOM_ORANGE),
    ColorPair.YELLOW: (CUSTOM_YELLOW, CUSTOM_YELLOW),
    ColorPair.PINK: (CUSTOM_PINK, CUSTOM_PINK),
    ColorPair.GREEN: (CUSTOM_GREEN, CUSTOM_GREEN),
    ColorPair.BLUE: (CUSTOM_BLUE, CUSTOM_BLUE),
    ColorPair.PURPLE: (CUSTOM_PURPLE, CUSTOM_PURPLE),
    ColorPair.PREDICT: (CUSTOM_PREDICT, CUSTOM_PREDICT),
    ColorPair.HIGHSCORE_1: (CUSTOM_YELLOW, BLACK),
    ColorPair.HIGHSCORE_2: (CUSTOM_SILVER, BLACK),
    ColorPair.HIGHSCORE_3: (CUSTOM_BROWN, BLACK),
    ColorPair.HIGHSCORE_4_5: (CUSTOM_GRAY, BLACK),
    ColorPair.INIT: (BLACK, BLACK),
}

_BLOCK_PAIRS = (
    ColorPair.RED,
    ColorPair.ORANGE,
    ColorPair.YELLOW,
    ColorPair.PINK,
    ColorPair.GREEN,
    ColorPair.BLUE,
    ColorPair.PURPLE,
    ColorPair.PREDICT,
)


def pair_for_block_color(color) -> ColorPair:
    """The colour pair a cell of the given block colour is drawn with."""
    return _BLOCK_PAIRS[BlockColor(color)]


def init_game_colors(terminal) -> None:
    """Register the game's colours and pairs with ``terminal``.

    ``terminal`` offers ``init_color`` and ``init_pair`` as the curses module
    does; a terminal that cannot change colours is left as it is.
    """
    for number, (red, green, blue) in COLOR_DEFINITIONS.items():
        try:
            terminal.init_color(number, red, green, blue)
        except _TERMINAL_ERRORS:
            pass
    for pair, (foreground, background) in PAIR_DEFINITIONS.items():
        try:
            terminal.init_pair(int(pair), foreground, background)
        except _TERMINAL_ERRORS:
            pass