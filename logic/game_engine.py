"""
Game engine for TicTacToe.

Owns turn order and the win/draw evaluation. A round moves through
three states:

    IN PROGRESS --move--> IN PROGRESS   (next player's turn)
                --move--> WON(player)   (terminal)
                --move--> DRAW          (terminal)

Rejected moves (bad position, taken cell, game over) leave the state
exactly as it was and come back as an ERROR result.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .errors import GameError
from .game_state import GameState, Player
from .move_validator import MoveValidator
from .win_checker import WinChecker


class Outcome(Enum):
    """What happened after a submitted move."""
    CONTINUE = "continue"
    WON = "won"
    DRAW = "draw"
    ERROR = "error"


@dataclass(frozen=True)
class MoveResult:
    """
    Result of submitting one move.

    player is the mover for CONTINUE and DRAW, the winner for WON,
    and None for ERROR. error is only set for ERROR.
    """
    outcome: Outcome
    position: Optional[int] = None
    player: Optional[Player] = None
    error: Optional[GameError] = None

    @property
    def is_error(self) -> bool:
        return self.outcome == Outcome.ERROR

    @property
    def is_terminal(self) -> bool:
        return self.outcome in (Outcome.WON, Outcome.DRAW)


def create_game(config: Optional[GameConfig] = None) -> GameState:
    """Return the initial state: empty board, X to move."""
    config = config or GameConfig()
    return GameState(current_player=Player(config.FIRST_PLAYER))


def submit_move(
    state: GameState,
    position: int,
    validator: Optional[MoveValidator] = None,
    win_checker: Optional[WinChecker] = None,
) -> Tuple[GameState, MoveResult]:
    """
    Apply the current player's move at a position.

    The given state is never modified. On success a new state is
    returned; on rejection the same state object comes back.

    Args:
        state: State to move from.
        position: Position number (1-9).
        validator: Validator to use (default: a fresh MoveValidator).
        win_checker: Win checker to use (default: a fresh WinChecker).

    Returns:
        (new_state, result) tuple.
    """
    validator = validator or MoveValidator()
    win_checker = win_checker or WinChecker()

    validation = validator.validate_move(state, position)
    if not validation.is_valid:
        return state, MoveResult(Outcome.ERROR, position=position, error=validation.error)

    new_state = state.copy()
    mover = new_state.current_player

    # Cannot fail: the validator already confirmed the cell is empty
    new_state.board.place(validation.row, validation.col, mover)

    # Only the mover can have completed a line with this move
    winning_line = win_checker.get_winning_line(new_state.board, mover)
    if winning_line is not None:
        new_state.winner = mover
        new_state.winning_line = winning_line
        new_state.is_game_over = True
        return new_state, MoveResult(Outcome.WON, position=position, player=mover)

    if new_state.board.is_full():
        new_state.is_draw = True
        new_state.is_game_over = True
        return new_state, MoveResult(Outcome.DRAW, position=position, player=mover)

    new_state.current_player = mover.opposite()
    return new_state, MoveResult(Outcome.CONTINUE, position=position, player=mover)


class GameEngine:
    """
    Runs one TicTacToe round at a time.

    Holds the only GameState for the round. Call apply_move() for each
    move and new_round() to start over; the old state is discarded.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize the engine.

        Args:
            config: Game settings (default: GameConfig()).
        """
        self.config = config or GameConfig()
        self.validator = MoveValidator(self.config)
        self.win_checker = WinChecker()
        self._state = create_game(self.config)

    @property
    def state(self) -> GameState:
        """A copy of the current state. Changing it does not affect the game."""
        return self._state.copy()

    @property
    def board(self):
        return self._state.board.copy()

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def is_game_over(self) -> bool:
        return self._state.is_game_over

    @property
    def winner(self) -> Optional[Player]:
        return self._state.winner

    @property
    def winning_line(self):
        return self._state.winning_line

    def apply_move(self, position: int) -> MoveResult:
        """
        Play the current player's move.

        Args:
            position: Position number (1-9).

        Returns:
            MoveResult describing the transition or the rejection.
        """
        mover = self._state.current_player
        self._state, result = submit_move(
            self._state, position, self.validator, self.win_checker
        )

        if self.config.DEBUG_MODE:
            if result.is_error:
                print(f"[engine] {mover.value} -> {position!r}: rejected ({result.error})")
            else:
                print(f"[engine] {mover.value} -> {position}: {result.outcome.value}")

        return result

    def new_round(self) -> GameState:
        """Discard the current round and start a fresh one."""
        self._state = create_game(self.config)
        if self.config.DEBUG_MODE:
            print(f"[engine] new round, {self._state.current_player.value} to move")
        return self.state
