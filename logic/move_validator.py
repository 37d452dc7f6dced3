"""
Move validator for TicTacToe.
Maps position numbers to cells and checks that a move follows the rules.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .errors import GameError, InvalidPositionError, OccupiedCellError, GameAlreadyOverError
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[GameError] = None
    row: Optional[int] = None
    col: Optional[int] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Game must not be over
    2. Position must be a whole number 1-9
    3. Can only place on empty cells
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def position_to_cell(self, position: int) -> Tuple[int, int]:
        """
        Convert a position number to board coordinates.

        1 2 3
        4 5 6
        7 8 9

        Args:
            position: Position number (1-9).

        Returns:
            (row, col) tuple.

        Raises:
            InvalidPositionError: If position is not an integer in 1-9.
        """
        # bool is an int subclass, but True is not a board position
        if isinstance(position, bool) or not isinstance(position, int):
            raise InvalidPositionError(position)
        if not (self.config.MIN_POSITION <= position <= self.config.MAX_POSITION):
            raise InvalidPositionError(position)

        size = self.config.BOARD_SIZE
        return (position - 1) // size, (position - 1) % size

    def cell_to_position(self, row: int, col: int) -> int:
        return row * self.config.BOARD_SIZE + col + 1

    def validate_move(self, game_state: GameState, position: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            position: Position number the current player wants (1-9).

        Returns:
            ValidationResult with is_valid, the error if any, and the
            target (row, col) when the position was understood.
        """
        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(is_valid=False, error=GameAlreadyOverError())

        # Check if position is on the board
        try:
            row, col = self.position_to_cell(position)
        except InvalidPositionError as e:
            return ValidationResult(is_valid=False, error=e)

        # Check if cell is empty
        if not game_state.board.is_empty(row, col):
            return ValidationResult(
                is_valid=False,
                error=OccupiedCellError(row, col, position),
                row=row,
                col=col,
            )

        return ValidationResult(is_valid=True, row=row, col=col)
