"""Collision checks between a piece, the field edges and the settled blocks."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator

from brickgame.board import BOARD_WIDTH

# Rightmost target column the left-move block check still accepts.
_LEFT_MOVE_LIMIT = BOARD_WIDTH - 2


class Side(IntEnum):
    """The four edges of the playing field."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


def side_hit(board, side, x: int, y: int) -> bool:
    """Whether the position ``(x, y)`` lies past the given edge."""
    side = Side(side)
    if side is Side.UP:
        return y < 0
    if side is Side.DOWN:
        return y > board.height
    if side is Side.LEFT:
        return x <= -1
    return x >= board.width


def side_hit_next(board, side, x: int, y: int) -> bool:
    """Whether one more step towards the given edge would take ``(x, y)`` past it."""
    side = Side(side)
    if side is Side.UP:
        return y - 1 < 0
    if side is Side.DOWN:
        return y + 1 > board.height
    if side is Side.LEFT:
        return x - 1 < 0
    return x + 1 >= board.width


def _filled_positions(player) -> Iterator[tuple[int, int]]:
    """Field coordinates of every filled cell of the piece."""
    for row, cells in enumerate(player.grid.cells):
        for column, cell in enumerate(cells):
            if cell.is_set:
                yield player.x + column, player.y + row


def _occupied(board, x: int, y: int) -> bool:
    """Whether a settled block fills ``(x, y)``; positions off the field are empty."""
    if 0 <= y < len(board.cells) and 0 <= x < len(board.cells[y]):
        return board.cells[y][x].is_set
    return False


def collides_with_side(player, board, side) -> bool:
    """Whether any filled cell of the piece lies past the given edge."""
    return any(side_hit(board, side, x, y) for x, y in _filled_positions(player))


def will_collide_with_side(player, board, side) -> bool:
    """Whether one step towards the given edge would take the piece past it."""
    return any(side_hit_next(board, side, x, y) for x, y in _filled_positions(player))


def collides_up(player, board) -> bool:
    return collides_with_side(player, board, Side.UP)


def collides_down(player, board) -> bool:
    return collides_with_side(player, board, Side.DOWN)


def collides_left(player, board) -> bool:
    return collides_with_side(player, board, Side.LEFT)


def collides_right(player, board) -> bool:
    return collides_with_side(player, board, Side.RIGHT)


def will_collide_up(player, board) -> bool:
    return will_collide_with_side(player, board, Side.UP)


def will_collide_down(player, board) -> bool:
    return will_collide_with_side(player, board, Side.DOWN)


def will_collide_left(player, board) -> bool:
    return will_collide_with_side(player, board, Side.LEFT)


def will_collide_right(player, board) -> bool:
    return will_collide_with_side(player, board, Side.RIGHT)


def collides(player, board) -> bool:
    """Whether the piece is past any edge or overlaps a settled block."""
    return (
        collides_up(player, board)
        or collides_down(player, board)
        or collides_left(player, board)
        or collides_right(player, board)
        or collides_with_blocks(player, board)
    )


def collides_with_blocks(player, board) -> bool:
    """Whether any filled cell of the piece overlaps a settled block."""
    return any(_occupied(board, x, y) for x, y in _filled_positions(player))


def will_collide_with_blocks_left(player, board) -> bool:
    """Whether moving one column left would hit a block or leave the allowed range."""
    for x, y in _filled_positions(player):
        target = x - 1
        if target < -1 or target > _LEFT_MOVE_LIMIT:
            return True
        if _occupied(board, target, y):
            return True
    return False


def will_collide_with_blocks_right(player, board) -> bool:
    """Whether moving one column right would hit a settled block."""
    return any(_occupied(board, x + 1, y) for x, y in _filled_positions(player))