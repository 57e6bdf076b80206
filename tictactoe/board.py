"""
Board primitives for Noughts & Crosses.
Marks, the fixed winning lines, and small helpers over the 9-cell board.
"""

from enum import Enum
from typing import List, Tuple


class Mark(Enum):
    """What can sit in a cell. EMPTY doubles as the draw outcome."""
    EMPTY = " "
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark (EMPTY stays EMPTY)."""
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        return Mark.EMPTY

    def __str__(self) -> str:
        return self.value


# A board is a flat list of 9 marks, row by row
Board = List[Mark]

BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

CENTER = 4
CORNERS = (0, 2, 6, 8)

# Scan order matters: rows, then columns, then diagonals
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def empty_board() -> Board:
    """A fresh board with every cell EMPTY."""
    return [Mark.EMPTY] * NUM_CELLS


def empty_cells(board: Board) -> List[int]:
    """Indices of all empty cells, ascending."""
    return [i for i, mark in enumerate(board) if mark is Mark.EMPTY]


def index_to_cell(index: int) -> Tuple[int, int]:
    """Convert a cell index (0-8) to (row, col)."""
    return index // BOARD_SIZE, index % BOARD_SIZE


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a cell index (0-8)."""
    return row * BOARD_SIZE + col


def format_board(board: Board) -> str:
    """
    Render the board as a small text grid.

    Empty cells show their 1-based number so a console player
    knows what to type.
    """
    lines = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            index = cell_to_index(row, col)
            mark = board[index]
            cells.append(str(index + 1) if mark is Mark.EMPTY else mark.value)
        lines.append(" " + " | ".join(cells))
        if row < BOARD_SIZE - 1:
            lines.append("---+---+---")
    return "\n".join(lines)
