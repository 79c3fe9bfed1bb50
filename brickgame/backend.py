"""Game mechanics built on the board, pieces and collision checks."""

from __future__ import annotations

from brickgame.collisions import collides_with_blocks, will_collide_down
from brickgame.game_status import MAX_LEVEL

TIME_STEPS = (1000, 875, 625, 550, 425, 350, 325, 300, 250, 200, 150)


def overlay_piece(player, board) -> None:
    """Settle the piece's filled cells onto the field, one row above its position."""
    top = player.y - 1
    for row, cells in enumerate(player.grid.cells):
        y = top + row
        if not 0 <= y < len(board.cells):
            continue
        for column, cell in enumerate(cells):
            x = player.x + column
            if cell.is_set and 0 <= x < len(board.cells[y]):
                board.cells[y][x].copy_from(cell)


def drop_prediction(player, board) -> None:
    """Move the piece straight down to where it would come to rest."""
    while not (will_collide_down(player, board) or collides_with_blocks(player, board)):
        player.move_down()
    player.move_up()


def update_prediction(prediction, source, board) -> None:
    """Make ``prediction`` a copy of ``source`` dropped to rest and coloured as a hint."""
    prediction.copy_from(source)
    drop_prediction(prediction, board)
    prediction.paint_predicted()


def time_step_ms(status) -> int:
    """Milliseconds between automatic drops; caps the level at the highest one."""
    if status.level > MAX_LEVEL:
        status.level = MAX_LEVEL
    return TIME_STEPS[status.level]