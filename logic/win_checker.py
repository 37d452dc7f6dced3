"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Tuple

import numpy as np

from .board import Board
from .game_state import Player


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def __init__(self):
        lines = np.array(self.WINNING_LINES)   # shape (8, 3, 2)
        self._line_rows = lines[:, :, 0]
        self._line_cols = lines[:, :, 1]

    def _completed_lines(self, board: Board, player: Player) -> np.ndarray:
        """
        Evaluate all 8 lines at once.

        Returns:
            Boolean array of shape (8,), True where the line is all player's mark.
        """
        marks = board.grid[self._line_rows, self._line_cols]   # shape (8, 3)
        return (marks == int(player.mark)).all(axis=1)

    def has_won(self, board: Board, player: Player) -> bool:
        """
        Check if a player owns any complete line.

        Args:
            board: The board to check.
            player: The player to check for.

        Returns:
            True if all three cells of some line hold player's mark.
        """
        return bool(self._completed_lines(board, player).any())

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in Player:
            if self.has_won(board, player):
                return player
        return None

    def get_winning_line(self, board: Board, player: Player) -> Optional[List[Tuple[int, int]]]:
        """
        Get the first line the player has completed.

        Args:
            board: The board to check.
            player: The player to check for.

        Returns:
            The winning line as list of (row, col), or None.
        """
        completed = np.flatnonzero(self._completed_lines(board, player))
        if completed.size == 0:
            return None
        return list(self.WINNING_LINES[int(completed[0])])

    def check_draw(self, board: Board) -> bool:
        """
        Check if the board is a draw.

        A draw occurs when all cells are filled AND nobody has a line.
        A full board with a line is a win, never a draw.

        Args:
            board: The board to check.

        Returns:
            True if the game is a draw.
        """
        if self.check_winner(board) is not None:
            return False
        return board.is_full()
