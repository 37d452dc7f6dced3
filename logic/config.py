"""
Game configuration for TicTacToe.
Rule constants shared by the board, validator and engine.
"""


class GameConfig:
    """
    Configuration class for game rules.
    Override attributes on an instance to change behaviour for one engine.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Positions are numbered 1-9, left to right, top to bottom
    MIN_POSITION = 1
    MAX_POSITION = BOARD_SIZE * BOARD_SIZE  # 9

    # ==================== TURN SETTINGS ====================
    FIRST_PLAYER = "X"

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False  # Print one trace line per move
