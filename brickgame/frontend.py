"""Drawing the game on a curses screen and reading the player's name."""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass

from brickgame.board import BOARD_HEIGHT, BOARD_WIDTH
from brickgame.colors import ColorPair, pair_for_block_color

try:
    import curses

    _SCREEN_ERRORS: tuple = (curses.error,)
except ImportError:  # pragma: no cover - platforms without curses
    curses = None
    _SCREEN_ERRORS = ()

BOARDS_BEGIN = 2
HUD_WIDTH = 12
MAX_LENGTH_NAME = 10
DELETE_KEY = 127
NEWLINE = ord("\n")
ERR = -1
KEY_BACKSPACE = curses.KEY_BACKSPACE if curses else 263

_HIGHSCORE_PAIRS = (
    ColorPair.HIGHSCORE_1,
    ColorPair.HIGHSCORE_2,
    ColorPair.HIGHSCORE_3,
    ColorPair.HIGHSCORE_4_5,
    ColorPair.HIGHSCORE_4_5,
)


@dataclass(frozen=True)
class BorderChars:
    """The characters a rectangle is drawn with."""

    ulcorner: object = "+"
    urcorner: object = "+"
    llcorner: object = "+"
    lrcorner: object = "+"
    hline: object = "-"
    vline: object = "|"


def default_borders() -> BorderChars:
    """Line-drawing characters of the terminal, or ASCII before it is set up."""
    if curses is None:
        return BorderChars()
    return BorderChars(
        getattr(curses, "ACS_ULCORNER", "+"),
        getattr(curses, "ACS_URCORNER", "+"),
        getattr(curses, "ACS_LLCORNER", "+"),
        getattr(curses, "ACS_LRCORNER", "+"),
        getattr(curses, "ACS_HLINE", "-"),
        getattr(curses, "ACS_VLINE", "|"),
    )


def _curses_color_attr(pair) -> int:
    if curses is None:
        return 0
    try:
        return curses.color_pair(int(pair))
    except curses.error:
        return 0


def _flush_input() -> None:
    if curses is not None:
        with suppress(curses.error):
            curses.flushinp()


def _printable(key: int) -> bool:
    return 32 <= key < 127


class CursesView:
    """Draws the field, pieces and side panel on a curses window.

    ``color_attr`` turns a colour pair number into an attribute and
    ``borders`` gives the line characters; both default to the terminal's.
    """

    def __init__(self, screen, color_attr=None, borders=None) -> None:
        self.screen = screen
        self.color_attr = color_attr or _curses_color_attr
        self.borders = borders or default_borders()

    def _print(self, y: int, x: int, text: str, attr: int = 0) -> None:
        with suppress(*_SCREEN_ERRORS):
            self.screen.addstr(y, x, text, attr)

    def _hud_print(self, y: int, x: int, text: str) -> None:
        self._print(y + BOARDS_BEGIN, x + BOARDS_BEGIN, text)

    def _hud_char(self, y: int, x: int, char) -> None:
        with suppress(*_SCREEN_ERRORS):
            self.screen.addch(y + BOARDS_BEGIN, x + BOARDS_BEGIN, char)

    def draw_borders(self, top_y: int, bottom_y: int, left_x: int, right_x: int) -> None:
        """Draw a rectangle with its corners at the given panel coordinates."""
        chars = self.borders
        end_x = max(right_x, left_x + 1)
        for y, left, right in ((top_y, chars.ulcorner, chars.urcorner),
                               (bottom_y, chars.llcorner, chars.lrcorner)):
            self._hud_char(y, left_x, left)
            for x in range(left_x + 1, right_x):
                self._hud_char(y, x, chars.hline)
            self._hud_char(y, end_x, right)
            if y == top_y:
                for side_y in range(top_y + 1, bottom_y):
                    self._hud_char(side_y, left_x, chars.vline)
                    self._hud_char(side_y, right_x, chars.vline)

    def draw_overlay(self) -> None:
        """Draw the field frame and the side panel with its labels."""
        self.draw_borders(0, BOARD_HEIGHT + 1, 0, BOARD_WIDTH + 1)
        self.draw_borders(0, BOARD_HEIGHT + 1, BOARD_WIDTH + 2, BOARD_WIDTH + HUD_WIDTH + 3)
        self.draw_borders(1, 6, BOARD_WIDTH + 3, BOARD_WIDTH + HUD_WIDTH + 2)
        self.draw_borders(7, 9, BOARD_WIDTH + 3, BOARD_WIDTH + HUD_WIDTH + 2)
        self.draw_borders(10, 12, BOARD_WIDTH + 3, BOARD_WIDTH + HUD_WIDTH + 2)
        self._hud_print(1, BOARD_WIDTH + 5, "Next")
        self._hud_print(7, BOARD_WIDTH + 5, "Score")
        self._hud_print(10, BOARD_WIDTH + 5, "Level")

    def draw_username_prompt(self) -> None:
        """Draw the box asking for the player's name."""
        top = BOARD_HEIGHT // 2 - 5
        self.draw_borders(top, BOARD_HEIGHT // 2 + 5, BOARDS_BEGIN, BOARDS_BEGIN + BOARD_WIDTH * 2)
        for y in range(top + 1, top + 10):
            for x in range(BOARDS_BEGIN + 1, BOARDS_BEGIN + 20):
                self._hud_print(y, x, " ")
        self._hud_print(7, 5, "Enter your name:")

    def draw_status(self, status) -> None:
        """Show the score and level in the side panel."""
        self._hud_print(8, BOARD_WIDTH + 5, f"{status.score:7d}")
        self._hud_print(11, BOARD_WIDTH + 5, f"{status.level:7d}")

    def clear_game(self) -> None:
        """Blank the area the game is drawn in."""
        attr = self.color_attr(ColorPair.INIT)
        for row in range(24):
            for column in range(28):
                self._print(row + BOARDS_BEGIN + 1, column + BOARDS_BEGIN + 1, " ", attr)

    def draw_game(self, game) -> None:
        """Redraw everything: field, panel, scores and the three pieces."""
        self.clear_game()
        self.draw_overlay()
        self.draw_board(game.board)
        self.draw_status(game.status)
        self.draw_highscores(game.highscores)
        self.draw_piece(game.prediction)
        self.draw_piece(game.player)
        self.draw_piece(game.next_player)

    def draw_board(self, board) -> None:
        """Draw the settled blocks of the field."""
        empty = self.color_attr(ColorPair.INIT)
        for row, cells in enumerate(board.cells[:BOARD_HEIGHT]):
            for column, cell in enumerate(cells[:BOARD_WIDTH]):
                y = row + BOARDS_BEGIN + 1
                x = column + BOARDS_BEGIN + 1
                if cell.is_set:
                    self._print(y, x, "S", self.color_attr(pair_for_block_color(cell.color)))
                else:
                    self._print(y, x, " ", empty)

    def draw_piece(self, player) -> None:
        """Draw the filled cells of a piece at its position."""
        for row, cells in enumerate(player.grid.cells):
            for column, cell in enumerate(cells):
                if cell.is_set:
                    self._print(
                        player.y + BOARDS_BEGIN + 1 + row,
                        player.x + BOARDS_BEGIN + 1 + column,
                        "F",
                        self.color_attr(pair_for_block_color(cell.color)),
                    )

    def ask_player_name(self) -> str:
        """Read a name typed by the player, ended by Enter."""
        self.draw_username_prompt()
        _flush_input()
        self.screen.refresh()
        name = ""
        while (key := self.screen.getch()) != NEWLINE:
            if key == ERR:
                continue
            if key in (KEY_BACKSPACE, DELETE_KEY):
                if name:
                    name = name[:-1]
                    self._print(12, 6, " " * (MAX_LENGTH_NAME + 8))
                    self._print(12, 6, name)
                    with suppress(*_SCREEN_ERRORS):
                        self.screen.move(MAX_LENGTH_NAME, 6 + len(name))
                    self.screen.refresh()
            elif len(name) < MAX_LENGTH_NAME - 1 and _printable(key):
                name += chr(key)
                self._print(12, 6, name)
                self.screen.refresh()
        self.screen.getch()
        return name

    def draw_begin(self) -> None:
        """Draw the start screen."""
        self.clear_game()
        self.draw_borders(0, BOARDS_BEGIN + BOARD_HEIGHT - 1, 0,
                          BOARDS_BEGIN + BOARD_WIDTH + HUD_WIDTH + 1)
        self._print(12, 8, "Press Enter")

    def draw_pause(self) -> None:
        """Draw the pause notice over the game."""
        self.draw_borders(8, BOARDS_BEGIN + BOARD_HEIGHT - 1 - 8, 4,
                          BOARDS_BEGIN + BOARD_WIDTH + HUD_WIDTH + 1 - 4)
        for y in range(11, 15):
            for x in range(7, 23):
                self._print(y, x, " ")
        self._print(12, 8, "Game is paused")

    def draw_highscores(self, highscores) -> None:
        """Draw the table of best scores in the side panel."""
        self.draw_borders(13, 20, 13, 24)
        self._print(15, 17, "Highscores")
        for rank, (entry, pair) in enumerate(zip(highscores, _HIGHSCORE_PAIRS), start=1):
            self._print(15 + rank, 16, f"{rank}. {entry.score:7d}", self.color_attr(pair))