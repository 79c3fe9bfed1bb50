import pytest

from brickgame.blocks import BlockColor
from brickgame.colors import (
    BLACK,
    CUSTOM_ORANGE,
    CUSTOM_PINK,
    CUSTOM_RED,
    ColorPair,
    init_game_colors,
    pair_for_block_color,
)


class _FakeTerminal:
    def __init__(self):
        self.colors = {}
        self.pairs = {}
        self.calls = []

    def init_color(self, number, red, green, blue):
        self.colors[number] = (red, green, blue)
        self.calls.append(("color", number))

    def init_pair(self, number, foreground, background):
        self.pairs[number] = (foreground, background)
        self.calls.append(("pair", number))


@pytest.fixture
def terminal():
    fake = _FakeTerminal()
    init_game_colors(fake)
    return fake


def test_custom_colors(terminal):
    assert terminal.colors[CUSTOM_PINK] == (980, 600, 790)
    assert terminal.colors[CUSTOM_ORANGE] == (1000, 392, 0)


def test_block_pairs(terminal):
    assert terminal.pairs[ColorPair.RED] == (CUSTOM_RED, CUSTOM_RED)
    assert terminal.pairs[ColorPair.ORANGE] == (CUSTOM_ORANGE, CUSTOM_ORANGE)


def test_background_pair_is_black(terminal):
    assert terminal.pairs[ColorPair.INIT] == (BLACK, BLACK)


def test_colours_registered_before_pairs(terminal):
    kinds = [kind for kind, _ in terminal.calls]
    assert kinds == ["color"] * 11 + ["pair"] * 13


def test_pair_numbers(terminal):
    assert int(pair_for_block_color(BlockColor.I)) == 100
    assert int(pair_for_block_color(BlockColor.PREDICT)) == 123
    assert 100 in terminal.pairs
    assert 123 in terminal.pairs
    assert terminal.colors[112] == (980, 600, 790)


@pytest.mark.parametrize(
    "color, pair",
    [
        (BlockColor.I, ColorPair.RED),
        (BlockColor.J, ColorPair.ORANGE),
        (BlockColor.L, ColorPair.YELLOW),
        (BlockColor.O, ColorPair.PINK),
        (BlockColor.S, ColorPair.GREEN),
        (BlockColor.T, ColorPair.BLUE),
        (BlockColor.Z, ColorPair.PURPLE),
        (BlockColor.PREDICT, ColorPair.PREDICT),
    ],
)
def test_pair_for_block_color(color, pair):
    assert pair_for_block_color(color) is pair


def test_pair_for_unknown_color():
    with pytest.raises(ValueError):
        pair_for_block_color(42)