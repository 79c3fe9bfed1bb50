import pytest

from brickgame.blocks import BlockType, Rotation
from brickgame.board import BOARD_HEIGHT, BOARD_WIDTH, PIECE_SIZE, Board, Cell, PieceGrid


def _fill_row(board, row, step=1):
    for column in range(0, board.width, step):
        board.cells[row][column].is_set = True


def test_new_board_dimensions():
    board = Board()
    assert (board.width, board.height) == (BOARD_WIDTH, BOARD_HEIGHT) == (10, 20)
    assert len(board.cells) == 20
    assert all(len(row) == 10 for row in board.cells)


def test_clear_completed_lines_counts_three():
    board = Board()
    _fill_row(board, 19)
    _fill_row(board, 18)
    _fill_row(board, 17)
    _fill_row(board, 16, step=2)

    assert board.clear_completed_lines() == 3


def test_clear_completed_lines_leaves_no_full_line():
    board = Board()
    _fill_row(board, 19)
    _fill_row(board, 18)
    _fill_row(board, 16, step=2)
    board.clear_completed_lines()
    assert not any(board.is_line_complete(row) for row in range(board.height))
    assert [cell.is_set for cell in board.cells[19]] == [True, False] * 5


def test_clear_completed_lines_on_empty_board():
    assert Board().clear_completed_lines() == 0


def test_is_line_complete():
    board = Board()
    _fill_row(board, 10)
    assert board.is_line_complete(10)
    board.cells[10][3].is_set = False
    assert not board.is_line_complete(10)


def test_is_line_complete_off_board():
    board = Board()
    assert not board.is_line_complete(BOARD_HEIGHT)
    assert not board.is_line_complete(-1)


def test_remove_line():
    board = Board()
    _fill_row(board, 5)
    board.cells[5][0].color = 3
    board.remove_line(5)
    assert all(cell == Cell() for cell in board.cells[5])


def test_copy_line():
    board = Board()
    board.cells[4][2] = Cell(color=6, is_set=True)
    board.copy_line(9, 4)
    assert board.cells[9][2] == Cell(color=6, is_set=True)
    assert board.cells[9][0] == Cell()


def test_shift_down_keeps_top_rows():
    board = Board()
    board.cells[1][0].is_set = True
    board.cells[5][0].is_set = True
    board.shift_down(6)
    assert board.cells[6][0].is_set
    assert board.cells[2][0].is_set
    assert board.cells[1][0].is_set


def test_apply_physics_drops_rows():
    board = Board()
    board.cells[18][4].is_set = True
    board.apply_physics()
    assert board.cells[19][4].is_set
    assert not board.cells[18][4].is_set


def test_board_clear():
    board = Board()
    _fill_row(board, 0)
    board.width = 3
    board.clear()
    assert board.width == 10
    assert all(cell == Cell() for row in board.cells for cell in row)


def test_cell_copy_and_clear():
    cell = Cell()
    cell.copy_from(Cell(color=2, is_set=True))
    assert cell == Cell(color=2, is_set=True)
    cell.clear()
    assert cell == Cell(color=0, is_set=False)


@pytest.mark.parametrize("rotation", [Rotation.R0, Rotation.R2])
def test_set_block_i_vertical(rotation):
    grid = PieceGrid()
    grid.set_block(BlockType.I, rotation)
    for i in range(PIECE_SIZE):
        for j in range(PIECE_SIZE):
            assert grid.cells[i][j].is_set == (j == 1)


@pytest.mark.parametrize("rotation", [Rotation.R1, Rotation.R3])
def test_set_block_i_horizontal(rotation):
    grid = PieceGrid()
    grid.set_block(BlockType.I, rotation)
    for i in range(PIECE_SIZE):
        for j in range(PIECE_SIZE):
            assert grid.cells[i][j].is_set == (i == 2)


def test_set_block_colors():
    grid = PieceGrid()
    grid.set_block(BlockType.T, Rotation.R0)
    for row in grid.cells:
        for cell in row:
            assert cell.color == (5 if cell.is_set else 0)
    assert sum(cell.is_set for row in grid.cells for cell in row) == 4


def test_create_playerboard():
    grid = PieceGrid()
    grid.set_block(BlockType.O, Rotation.R0)
    grid.clear()
    for row in grid.cells:
        for cell in row:
            assert cell.color == 0
            assert cell.is_set is False


def test_copy_playerboard():
    first = PieceGrid()
    second = PieceGrid()
    for i in range(0, PIECE_SIZE, 2):
        for j in range(0, PIECE_SIZE, 2):
            first.cells[i][j].is_set = True
    second.copy_from(first)
    assert second == first
    assert second.cells[0][0].is_set
    second.cells[0][0].is_set = False
    assert first.cells[0][0].is_set