import random

from brickgame.backend import (
    TIME_STEPS,
    drop_prediction,
    overlay_piece,
    time_step_ms,
    update_prediction,
)
from brickgame.blocks import BlockColor, BlockType, Rotation
from brickgame.board import Board
from brickgame.game_status import MAX_LEVEL, GameStatus
from brickgame.player import Player, new_player


def _filled_rows(player):
    return [
        player.y + row
        for row, cells in enumerate(player.grid.cells)
        for cell in cells
        if cell.is_set
    ]


def _t_piece():
    piece = new_player(random.Random(3))
    piece.reset_position()
    piece.set_block_type(BlockType.T)
    piece.set_rotation(Rotation.R0)
    return piece


def test_overlay_piece():
    player = Player()
    board = Board()
    player.x = 5
    player.y = 5
    player.grid.cells[1][1].is_set = True
    player.grid.cells[1][2].is_set = True
    player.grid.cells[2][1].is_set = True

    overlay_piece(player, board)

    assert board.cells[5][6].is_set
    assert board.cells[5][7].is_set
    assert board.cells[6][6].is_set
    assert sum(cell.is_set for row in board.cells for cell in row) == 3


def test_overlay_keeps_piece_colour():
    player = _t_piece()
    player.y = 10
    board = Board()
    overlay_piece(player, board)
    settled = [cell for row in board.cells for cell in row if cell.is_set]
    assert len(settled) == 4
    assert all(cell.color == int(BlockColor.T) for cell in settled)


def test_time_step():
    status = GameStatus()
    status.level = 5
    assert time_step_ms(status) == TIME_STEPS[5]
    assert time_step_ms(status) == 350

    status.level = MAX_LEVEL + 1
    assert time_step_ms(status) == TIME_STEPS[MAX_LEVEL]
    assert status.level == MAX_LEVEL


def test_drop_on_empty_board_reaches_bottom_row():
    board = Board()
    piece = _t_piece()
    drop_prediction(piece, board)
    assert max(_filled_rows(piece)) == board.height - 1
    assert piece.x == 3


def test_drop_stops_above_settled_block():
    board = Board()
    board.cells[19][5].is_set = True
    piece = _t_piece()
    drop_prediction(piece, board)
    assert max(_filled_rows(piece)) == 18


def test_update_prediction_leaves_source_alone():
    board = Board()
    source = _t_piece()
    prediction = Player()
    update_prediction(prediction, source, board)

    assert source.y == 0
    assert prediction.x == source.x
    assert max(_filled_rows(prediction)) == board.height - 1
    filled = [cell for row in prediction.grid.cells for cell in row if cell.is_set]
    assert len(filled) == 4
    assert all(cell.color == int(BlockColor.PREDICT) for cell in filled)
    source_filled = [cell for row in source.grid.cells for cell in row if cell.is_set]
    assert all(cell.color == int(BlockColor.T) for cell in source_filled)