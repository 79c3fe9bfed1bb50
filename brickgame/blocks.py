"""Tetromino kinds, rotations, colours and shape masks."""

from __future__ import annotations

import random
from enum import IntEnum


class BlockType(IntEnum):
    """The seven tetromino kinds."""

    I = 0  # noqa: E741
    J = 1
    L = 2
    O = 3  # noqa: E741
    S = 4
    T = 5
    Z = 6


class Rotation(IntEnum):
    """The four quarter-turn orientations of a piece."""

    R0 = 0
    R1 = 1
    R2 = 2
    R3 = 3


class BlockColor(IntEnum):
    """Colour slots for the pieces and for the landing prediction."""

    I = 0  # noqa: E741
    J = 1
    L = 2
    O = 3  # noqa: E741
    S = 4
    T = 5
    Z = 6
    PREDICT = 7


BLACK = 0

# Each shape is a 4x4 grid packed into 16 bits, most significant bit first,
# read row by row from the top left corner.
_MASKS: dict[BlockType, tuple[int, int, int, int]] = {
    BlockType.I: (0b0100010001000100, 0b0000000011110000,
                  0b0100010001000100, 0b0000000011110000),
    BlockType.J: (0b0000001000100110, 0b0000010001110000,
                  0b0000001100100010, 0b0000000001110001),
    BlockType.L: (0b0000001000100011, 0b0000000001110100,
                  0b0000011000100010, 0b0000000101110000),
    BlockType.O: (0b0000011001100000, 0b0000011001100000,
                  0b0000011001100000, 0b0000011001100000),
    BlockType.S: (0b0000000000110110, 0b0000010001100010,
                  0b0000000000110110, 0b0000010001100010),
    BlockType.T: (0b0000001001110000, 0b0000001000110010,
                  0b0000000001110010, 0b0000001001100010),
    BlockType.Z: (0b0000000001100011, 0b0000001001100100,
                  0b0000000001100011, 0b0000001001100100),
}


def random_block_type(rng=None) -> BlockType:
    """Pick a block kind uniformly; ``rng`` defaults to the global generator."""
    source = random if rng is None else rng
    return BlockType(source.randrange(len(BlockType)))


def next_rotation(rotation) -> Rotation:
    """The orientation one quarter turn further on."""
    return Rotation((Rotation(rotation) + 1) % len(Rotation))


def prev_rotation(rotation) -> Rotation:
    """The orientation one quarter turn back."""
    return Rotation((Rotation(rotation) - 1) % len(Rotation))


def block_color(block_type) -> BlockColor:
    """The colour a block kind is drawn with."""
    return BlockColor(int(BlockType(block_type)))


def block_mask(block_type, rotation) -> int:
    """The 16-bit shape mask of a block kind in a given orientation."""
    return _MASKS[BlockType(block_type)][Rotation(rotation)]