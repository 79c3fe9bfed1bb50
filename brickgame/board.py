"""The playing field and the 4x4 grid a falling piece lives in."""

from __future__ import annotations

from dataclasses import dataclass, field

from brickgame.blocks import BLACK, block_color, block_mask

BOARD_HEIGHT = 20
BOARD_WIDTH = 10
PIECE_SIZE = 4


@dataclass
class Cell:
    """One square of a board or piece grid."""

    color: int = BLACK
    is_set: bool = False

    def clear(self) -> None:
        """Make the cell empty and black."""
        self.color = BLACK
        self.is_set = False

    def copy_from(self, other: "Cell") -> None:
        """Take colour and fill state from another cell."""
        self.color = other.color
        self.is_set = other.is_set


class Board:
    """The playing field, ``height`` rows of ``width`` cells."""

    def __init__(self) -> None:
        self.width = BOARD_WIDTH
        self.height = BOARD_HEIGHT
        self.cells = [[Cell() for _ in range(BOARD_WIDTH)] for _ in range(BOARD_HEIGHT)]

    def clear(self) -> None:
        """Reset the size and empty every cell."""
        self.width = BOARD_WIDTH
        self.height = BOARD_HEIGHT
        for row in self.cells:
            for cell in row:
                cell.clear()

    def clear_completed_lines(self) -> int:
        """Remove every full line, letting rows above fall; return how many."""
        count = 0
        for row in range(self.height, -1, -1):
            for _ in range(self.height + 1):
                if self.is_line_complete(row):
                    count += 1
                    self.remove_line(row)
                    self.apply_physics()
        return count

    def remove_line(self, row: int) -> None:
        """Empty every cell of a row."""
        for cell in self.cells[row]:
            cell.clear()

    def is_line_complete(self, row: int) -> bool:
        """Whether every cell of the row is filled; rows off the board never are."""
        if not 0 <= row < len(self.cells):
            return False
        return all(cell.is_set for cell in self.cells[row])

    def apply_physics(self) -> None:
        """Close up empty rows by moving the rows above them down."""
        for row in range(self.height - 1, -1, -1):
            if not any(cell.is_set for cell in self.cells[row][: self.width]):
                self.shift_down(row)

    def shift_down(self, empty_row: int) -> None:
        """Move rows above ``empty_row`` down by one; rows 0 and 1 stay as they are."""
        for row in range(empty_row, 1, -1):
            self.copy_line(row, row - 1)

    def copy_line(self, dest: int, src: int) -> None:
        """Copy the cells of row ``src`` into row ``dest``."""
        for target, source in zip(self.cells[dest], self.cells[src]):
            target.copy_from(source)


@dataclass
class PieceGrid:
    """The 4x4 cell grid holding a piece's shape."""

    cells: list = field(
        default_factory=lambda: [[Cell() for _ in range(PIECE_SIZE)] for _ in range(PIECE_SIZE)]
    )

    def clear(self) -> None:
        """Empty every cell."""
        for row in self.cells:
            for cell in row:
                cell.clear()

    def copy_from(self, other: "PieceGrid") -> None:
        """Copy every cell of another grid."""
        for row, other_row in zip(self.cells, other.cells):
            for cell, other_cell in zip(row, other_row):
                cell.copy_from(other_cell)

    def set_block(self, block_type, rotation) -> None:
        """Fill the grid with the shape of a block kind in a given orientation."""
        color = int(block_color(block_type))
        mask = block_mask(block_type, rotation)
        bit = 1 << (PIECE_SIZE * PIECE_SIZE - 1)
        for row in self.cells:
            for cell in row:
                if mask & bit:
                    cell.color = color
                    cell.is_set = True
                else:
                    cell.clear()
                bit >>= 1