"""
Logic module for TicTacToe.
Handles the board, game state, rules, and turn engine.
"""

from .errors import (
    GameError,
    OutOfRangeError,
    InvalidPositionError,
    OccupiedCellError,
    GameAlreadyOverError,
)
from .config import GameConfig
from .board import Board, Cell
from .game_state import GameState, Player
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .game_engine import GameEngine, MoveResult, Outcome, create_game, submit_move

__version__ = "1.0.0"
