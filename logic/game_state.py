"""
Game state management for TicTacToe.
Tracks the board, current player, and game result.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .board import Board, Cell
from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def mark(self) -> Cell:
        """The cell value this player leaves on the board."""
        return Cell.X if self == Player.X else Cell.O


@dataclass
class GameState:
    """
    The complete state of one TicTacToe round.

    Tracks:
    - The 3x3 board
    - Current player
    - Game status (ongoing, won, draw)

    Only the game engine should change a GameState. Everyone else
    reads it or works on a copy().
    """

    board: Board = field(default_factory=Board)

    # Current player's turn
    current_player: Player = field(
        default_factory=lambda: Player(GameConfig.FIRST_PLAYER)
    )

    # Game result
    winner: Optional[Player] = None
    winning_line: Optional[List[Tuple[int, int]]] = None
    is_draw: bool = False
    is_game_over: bool = False

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            winner=self.winner,
            winning_line=list(self.winning_line) if self.winning_line else None,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over,
        )
