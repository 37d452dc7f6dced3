"""
Errors raised by the TicTacToe game logic.

Every rejection is recoverable: the engine hands these back inside a
MoveResult so the driver can re-prompt or end the round.
"""

from typing import Optional


class GameError(Exception):
    """Base class for all game rule errors."""


class OutOfRangeError(GameError):
    """Board addressed outside its 3x3 extent."""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"Cell ({row}, {col}) is off the board. Must be 0-2.")


class InvalidPositionError(GameError):
    """Position number outside 1-9."""

    def __init__(self, position):
        self.position = position
        super().__init__(f"Invalid position {position!r}. Enter a number between 1 and 9.")


class OccupiedCellError(GameError):
    """Target cell already holds a mark."""

    def __init__(self, row: int, col: int, position: Optional[int] = None):
        self.row = row
        self.col = col
        self.position = position
        where = f"Position {position}" if position is not None else f"Cell ({row}, {col})"
        super().__init__(f"{where} is already taken. Try another cell.")


class GameAlreadyOverError(GameError):
    """Move attempted after a win or draw."""

    def __init__(self):
        super().__init__("Game is already over!")
