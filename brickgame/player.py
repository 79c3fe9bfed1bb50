"""A piece on the board: its kind, orientation, position and shape grid."""

from __future__ import annotations

from dataclasses import dataclass, field

from brickgame.blocks import (
    BlockColor,
    BlockType,
    Rotation,
    next_rotation,
    prev_rotation,
    random_block_type,
)
from brickgame.board import PieceGrid

PLAYER_POS_X = 3
PLAYER_POS_Y = 0
NEXT_PLAYER_POS_X = 16
NEXT_PLAYER_POS_Y = 1


@dataclass
class Player:
    """A piece with its top-left corner at ``(x, y)``."""

    x: int = 0
    y: int = 0
    block_type: BlockType = BlockType.I
    rotation: Rotation = Rotation.R0
    grid: PieceGrid = field(default_factory=PieceGrid)

    def copy(self) -> "Player":
        """An independent copy of this piece."""
        other = Player()
        other.copy_from(self)
        return other

    def copy_from(self, other: "Player") -> None:
        """Take position, kind, orientation and shape from another piece."""
        self.x = other.x
        self.y = other.y
        self.block_type = other.block_type
        self.rotation = other.rotation
        self.grid.copy_from(other.grid)

    def reset_position(self) -> None:
        """Put the piece at its spawn point."""
        self.x = PLAYER_POS_X
        self.y = PLAYER_POS_Y

    def set_block_type(self, block_type) -> None:
        """Change the kind; the grid shows it in its first orientation."""
        self.block_type = BlockType(block_type)
        self._refresh_grid()

    def set_rotation(self, rotation) -> None:
        """Record an orientation; the grid shows the first orientation."""
        self.rotation = Rotation(rotation)
        self._refresh_grid()

    def rotate_next(self) -> None:
        """Turn a quarter turn forward and redraw the grid."""
        self.set_rotation(next_rotation(self.rotation))
        self.grid.set_block(self.block_type, self.rotation)

    def rotate_prev(self) -> None:
        """Turn a quarter turn back and redraw the grid."""
        self.set_rotation(prev_rotation(self.rotation))
        self.grid.set_block(self.block_type, self.rotation)

    def move(self, dx: int, dy: int) -> None:
        """Shift the piece by ``(dx, dy)``."""
        self.x += dx
        self.y += dy

    def move_up(self) -> None:
        self.move(0, -1)

    def move_down(self) -> None:
        self.move(0, 1)

    def move_left(self) -> None:
        self.move(-1, 0)

    def move_right(self) -> None:
        self.move(1, 0)

    def paint_predicted(self) -> None:
        """Give every filled cell the prediction colour."""
        for row in self.grid.cells:
            for cell in row:
                if cell.is_set:
                    cell.color = int(BlockColor.PREDICT)

    def _refresh_grid(self) -> None:
        self.grid.set_block(self.block_type, Rotation.R0)


def new_player(rng=None) -> Player:
    """A piece of random kind at the origin."""
    player = Player()
    player.grid.clear()
    player.set_block_type(random_block_type(rng))
    return player


def new_next_player(rng=None) -> Player:
    """A random piece placed in the preview slot."""
    player = new_player(rng)
    player.x = NEXT_PLAYER_POS_X
    player.y = NEXT_PLAYER_POS_Y
    return player