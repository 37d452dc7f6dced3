"""
Board storage for TicTacToe.
Holds the 3x3 grid of cells. Knows nothing about turns or winning.
"""

from enum import IntEnum
from typing import List, Tuple, TYPE_CHECKING

import numpy as np

from .config import GameConfig
from .errors import OutOfRangeError, OccupiedCellError

if TYPE_CHECKING:
    from .game_state import Player


class Cell(IntEnum):
    """Contents of one square."""
    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return " " if self == Cell.EMPTY else self.name


class Board:
    """
    A fixed 3x3 grid of cells.

    The grid is a numpy int8 array so the win checker can read all
    lines at once. Access from outside should go through cell_at().
    """

    SIZE = GameConfig.BOARD_SIZE

    def __init__(self):
        self.grid = np.full((self.SIZE, self.SIZE), int(Cell.EMPTY), dtype=np.int8)

    def _check_range(self, row: int, col: int):
        # numpy would happily accept -1, so check explicitly
        if not (0 <= row < self.SIZE and 0 <= col < self.SIZE):
            raise OutOfRangeError(row, col)

    def cell_at(self, row: int, col: int) -> Cell:
        """
        Get the contents of a cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The Cell at that position.

        Raises:
            OutOfRangeError: If row or col is outside 0-2.
        """
        self._check_range(row, col)
        return Cell(int(self.grid[row, col]))

    def is_empty(self, row: int, col: int) -> bool:
        return self.cell_at(row, col) == Cell.EMPTY

    def place(self, row: int, col: int, player: "Player"):
        """
        Put a player's mark on an empty cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            player: Whose mark to place.

        Raises:
            OutOfRangeError: If row or col is outside 0-2.
            OccupiedCellError: If the cell already holds a mark.
        """
        if not self.is_empty(row, col):
            raise OccupiedCellError(row, col)
        self.grid[row, col] = int(player.mark)

    def is_full(self) -> bool:
        """True when no cell is empty."""
        return not bool((self.grid == int(Cell.EMPTY)).any())

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples, in position order.
        """
        rows, cols = np.nonzero(self.grid == int(Cell.EMPTY))
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __str__(self) -> str:
        return "\n".join(
            "".join(self.cell_at(row, col).symbol.replace(" ", ".") for col in range(self.SIZE))
            for row in range(self.SIZE)
        )
