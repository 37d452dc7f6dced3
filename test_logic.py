"""
Tests for the TicTacToe logic modules.
Covers the board, validator, win checker and turn engine.

Usage:
    python test_logic.py      # or: pytest test_logic.py
"""

import io
import sys
from contextlib import redirect_stdout
from itertools import combinations
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from logic import (
    Board,
    Cell,
    Player,
    GameState,
    GameConfig,
    GameEngine,
    MoveValidator,
    Outcome,
    WinChecker,
    create_game,
    submit_move,
    OutOfRangeError,
    InvalidPositionError,
    OccupiedCellError,
    GameAlreadyOverError,
)


# All 8 lines as position numbers
LINES = [
    (1, 2, 3), (4, 5, 6), (7, 8, 9),   # rows
    (1, 4, 7), (2, 5, 8), (3, 6, 9),   # columns
    (1, 5, 9), (3, 5, 7),              # diagonals
]


def play(engine, positions):
    """Apply a list of moves and return the results."""
    return [engine.apply_move(p) for p in positions]


# ==================== BOARD ====================

def test_new_board_is_empty():
    board = Board()
    for row in range(3):
        for col in range(3):
            assert board.cell_at(row, col) == Cell.EMPTY
            assert board.is_empty(row, col)
    assert not board.is_full()
    assert len(board.empty_cells()) == 9


def test_board_place_and_read():
    board = Board()
    board.place(1, 2, Player.O)
    assert board.cell_at(1, 2) == Cell.O
    assert not board.is_empty(1, 2)
    assert (1, 2) not in board.empty_cells()


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
def test_board_rejects_out_of_range(row, col):
    board = Board()
    with pytest.raises(OutOfRangeError):
        board.cell_at(row, col)
    with pytest.raises(OutOfRangeError):
        board.place(row, col, Player.X)


def test_board_place_never_overwrites():
    board = Board()
    board.place(0, 0, Player.X)
    with pytest.raises(OccupiedCellError):
        board.place(0, 0, Player.O)
    assert board.cell_at(0, 0) == Cell.X


def test_board_full():
    board = Board()
    player = Player.X
    for row in range(3):
        for col in range(3):
            board.place(row, col, player)
            player = player.opposite()
    assert board.is_full()
    assert board.empty_cells() == []


def test_board_copy_is_independent():
    board = Board()
    board.place(0, 0, Player.X)
    clone = board.copy()
    clone.place(2, 2, Player.O)
    assert board.is_empty(2, 2)
    assert clone.cell_at(0, 0) == Cell.X
    assert board != clone


# ==================== VALIDATOR ====================

def test_position_mapping():
    validator = MoveValidator()
    assert validator.position_to_cell(1) == (0, 0)
    assert validator.position_to_cell(3) == (0, 2)
    assert validator.position_to_cell(5) == (1, 1)
    assert validator.position_to_cell(7) == (2, 0)
    assert validator.position_to_cell(9) == (2, 2)
    for position in range(1, 10):
        assert validator.cell_to_position(*validator.position_to_cell(position)) == position


@pytest.mark.parametrize("position", [0, 10, -1, 100, "5", 5.0, True, None])
def test_position_mapping_rejects_bad_input(position):
    with pytest.raises(InvalidPositionError):
        MoveValidator().position_to_cell(position)


def test_validator_checks_game_over_first():
    state = GameState()
    state.is_game_over = True
    result = MoveValidator().validate_move(state, 42)
    assert not result.is_valid
    assert isinstance(result.error, GameAlreadyOverError)
    assert result.error_message == "Game is already over!"


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("line", LINES)
@pytest.mark.parametrize("player", [Player.X, Player.O])
def test_win_checker_finds_every_line(line, player):
    validator = MoveValidator()
    checker = WinChecker()
    board = Board()
    for position in line:
        board.place(*validator.position_to_cell(position), player)

    assert checker.has_won(board, player)
    assert not checker.has_won(board, player.opposite())
    assert checker.check_winner(board) == player
    assert checker.get_winning_line(board, player) == [
        validator.position_to_cell(p) for p in line
    ]


def test_win_checker_no_winner_on_empty_board():
    checker = WinChecker()
    board = Board()
    assert checker.check_winner(board) is None
    assert checker.get_winning_line(board, Player.X) is None
    assert not checker.check_draw(board)


def test_full_board_with_line_is_not_a_draw():
    # X X X / O O X / X O O
    board = Board()
    layout = "XXXOOXXOO"
    for index, symbol in enumerate(layout):
        board.place(index // 3, index % 3, Player(symbol))
    checker = WinChecker()
    assert board.is_full()
    assert checker.check_winner(board) == Player.X
    assert not checker.check_draw(board)


# ==================== ENGINE ====================

def test_create_game_initial_state():
    state = create_game()
    assert state.current_player == Player.X
    assert not state.is_game_over
    assert state.winner is None
    assert not state.is_draw
    assert state.board == Board()


@pytest.mark.parametrize("line", LINES)
def test_x_wins_on_every_line(line):
    others = [p for p in range(1, 10) if p not in line]
    moves = [line[0], others[0], line[1], others[1], line[2]]

    engine = GameEngine()
    results = play(engine, moves)

    assert [r.outcome for r in results[:-1]] == [Outcome.CONTINUE] * 4
    assert results[-1].outcome == Outcome.WON
    assert results[-1].player == Player.X
    assert engine.winner == Player.X
    assert engine.is_game_over


@pytest.mark.parametrize("line", LINES)
def test_o_wins_on_every_line(line):
    others = [p for p in range(1, 10) if p not in line]
    # X's three moves must not make a line of their own
    x_moves = next(
        combo for combo in combinations(others, 3)
        if not any(set(combo) == set(l) for l in LINES)
    )
    moves = [x_moves[0], line[0], x_moves[1], line[1], x_moves[2], line[2]]

    engine = GameEngine()
    results = play(engine, moves)

    assert all(r.outcome == Outcome.CONTINUE for r in results[:-1])
    assert results[-1].outcome == Outcome.WON
    assert results[-1].player == Player.O


def test_draw():
    # X O X / X O O / O X X
    engine = GameEngine()
    results = play(engine, [1, 2, 3, 5, 4, 6, 8, 7, 9])

    assert all(r.outcome == Outcome.CONTINUE for r in results[:-1])
    assert results[-1].outcome == Outcome.DRAW
    assert engine.is_game_over
    assert engine.winner is None
    assert engine.state.is_draw


def test_win_on_last_cell_beats_draw():
    engine = GameEngine()
    results = play(engine, [1, 2, 3, 4, 5, 6, 8, 7, 9])

    assert results[-1].outcome == Outcome.WON
    assert results[-1].player == Player.X
    assert engine.board.is_full()
    assert not engine.state.is_draw


def test_turns_alternate():
    engine = GameEngine()
    results = play(engine, [5, 1, 9, 3, 2, 8, 4, 6])

    assert all(r.outcome == Outcome.CONTINUE for r in results)
    assert [r.player for r in results] == [Player.X, Player.O] * 4
    assert engine.current_player == Player.X


def test_occupied_cell_is_rejected_without_consuming_turn():
    engine = GameEngine()
    engine.apply_move(5)
    before = engine.state

    result = engine.apply_move(5)

    assert result.outcome == Outcome.ERROR
    assert isinstance(result.error, OccupiedCellError)
    assert result.error.position == 5
    assert engine.current_player == Player.O
    assert engine.board == before.board

    # O can still move elsewhere
    assert engine.apply_move(1).player == Player.O


@pytest.mark.parametrize("position", [0, 10])
def test_out_of_range_position_is_rejected(position):
    engine = GameEngine()
    engine.apply_move(1)

    result = engine.apply_move(position)

    assert result.is_error
    assert isinstance(result.error, InvalidPositionError)
    assert engine.current_player == Player.O
    assert len(engine.board.empty_cells()) == 8


def test_diagonal_win_scenario():
    engine = GameEngine()
    results = play(engine, [1, 2, 5, 3, 9])

    # top row is X O O, no win there
    assert [r.outcome for r in results[:4]] == [Outcome.CONTINUE] * 4
    assert results[-1].outcome == Outcome.WON
    assert results[-1].player == Player.X
    assert engine.winning_line == [(0, 0), (1, 1), (2, 2)]


def test_sequential_fill_wins_on_anti_diagonal():
    # X takes 1, 3, 5, 7: the 3-5-7 diagonal is complete on move 7
    engine = GameEngine()
    results = play(engine, [1, 2, 3, 4, 5, 6, 7])

    assert [r.outcome for r in results[:6]] == [Outcome.CONTINUE] * 6
    assert results[-1].outcome == Outcome.WON
    assert results[-1].player == Player.X
    assert engine.winning_line == [(0, 2), (1, 1), (2, 0)]


@pytest.mark.parametrize("moves", [[1, 2, 5, 3, 9], [1, 2, 3, 5, 4, 6, 8, 7, 9]])
def test_moves_after_game_over_are_rejected(moves):
    engine = GameEngine()
    play(engine, moves)
    before = engine.state

    for position in (4, 8, 0, 10):
        result = engine.apply_move(position)
        assert result.is_error
        assert isinstance(result.error, GameAlreadyOverError)

    after = engine.state
    assert after.board == before.board
    assert after.current_player == before.current_player
    assert after.winner == before.winner


def test_submit_move_leaves_input_state_alone():
    state = create_game()

    new_state, result = submit_move(state, 5)

    assert result.outcome == Outcome.CONTINUE
    assert new_state is not state
    assert state.board.is_empty(1, 1)
    assert state.current_player == Player.X
    assert new_state.board.cell_at(1, 1) == Cell.X
    assert new_state.current_player == Player.O


def test_submit_move_returns_same_state_on_error():
    state, _ = submit_move(create_game(), 5)

    same_state, result = submit_move(state, 5)

    assert same_state is state
    assert result.is_error
    assert not result.is_terminal


def test_engine_state_is_a_copy():
    engine = GameEngine()
    snapshot = engine.state
    snapshot.board.place(0, 0, Player.O)
    snapshot.is_game_over = True

    assert engine.board.is_empty(0, 0)
    assert engine.apply_move(1).outcome == Outcome.CONTINUE


def test_new_round_discards_old_state():
    engine = GameEngine()
    play(engine, [1, 2, 5, 3, 9])
    assert engine.is_game_over

    state = engine.new_round()

    assert not engine.is_game_over
    assert engine.current_player == Player.X
    assert state.board == Board()


def test_debug_mode_prints_trace():
    config = GameConfig()
    config.DEBUG_MODE = True
    engine = GameEngine(config)

    buffer = io.StringIO()
    with redirect_stdout(buffer):
        engine.apply_move(5)
        engine.apply_move(5)

    output = buffer.getvalue()
    assert "[engine] X -> 5: continue" in output
    assert "[engine] O -> 5: rejected" in output


def test_no_trace_by_default():
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        play(GameEngine(), [1, 2, 5, 3, 9])
    assert buffer.getvalue() == ""


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
